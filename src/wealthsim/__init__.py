"""
wealthsim: a minimal wealth-exchange economy simulator.

A fixed population of agents trades pairwise, one trade per round.
Each trade moves a percentage of one party's wealth to the other,
and inequality emerges from nothing but random pairing.

Core concepts:
- WealthLedger holds one wealth value per agent (index = identity)
- PairSelector picks two distinct agents per round
- TradeRule moves wealth from sender to receiver
- SimulationLoop runs the rounds, renders, and polls a stop signal
"""

__version__ = "0.1.0"
