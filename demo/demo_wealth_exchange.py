#!/usr/bin/env python3
"""
Demo: Inequality from Random Trading

Ten agents start with the same wealth and trade pairwise at random.
No agent is smarter or luckier by design, yet wealth concentrates:

1. Every trade moves a percentage of one party's wealth
2. A sender at least as rich pays 20% of the receiver's wealth; a poorer
   sender pays 17% of its own
3. Random pairing alone drives the distribution apart
4. Gini coefficient and variance climb from zero

Output: output/demo_wealth/final.png
"""

import os

import numpy as np
import matplotlib
matplotlib.use("Agg")

from wealthsim.analysis import summarize_distribution
from wealthsim.core import CancelToken, SimulationConfig, create_simulation
from wealthsim.viz import BarChartRenderer, ChartConfig


def main():
    print("=" * 60)
    print("  WEALTH EXCHANGE DEMONSTRATION")
    print("=" * 60)

    config = SimulationConfig(
        population_size=10,
        initial_wealth=100.0,
        round_limit=10000,
        percent_gain=0.20,
        percent_loss=0.17,
    )

    print("\n1. Setting up market...")
    print(f"   {config.population_size} agents, {config.initial_wealth:.1f} each")
    print(f"   Gain {config.percent_gain:.0%}, loss {config.percent_loss:.0%}")

    renderer = BarChartRenderer(
        config.population_size,
        config.max_possible_wealth,
        ChartConfig(interactive=False, redraw_every=1000),
    )
    token = CancelToken()
    loop = create_simulation(config, renderer, token, rng=np.random.default_rng(seed=7))

    start = summarize_distribution(loop.ledger.snapshot())
    renderer.draw_initial(loop.ledger.wealth)

    print(f"\n2. Trading ({config.round_limit} rounds)...")
    stats = loop.run()
    end = summarize_distribution(loop.ledger.snapshot())
    print(f"   Rounds completed: {stats['rounds']}")

    print("\n3. Inequality before → after:")
    print(f"   Gini:      {start.gini:.3f} → {end.gini:.3f}")
    print(f"   Variance:  {start.variance:.1f} → {end.variance:.1f}")
    print(f"   Top share: {start.top_share:.3f} → {end.top_share:.3f}")
    print(f"   Total:     {start.total:.1f} → {end.total:.1f}")
    print(f"   Richest:   {end.max:.1f}   Poorest: {end.min:.4f}")

    os.makedirs("output/demo_wealth", exist_ok=True)
    renderer.save("output/demo_wealth/final.png")
    renderer.close()
    print("\n   Saved: output/demo_wealth/final.png")

    print("\n" + "=" * 60)
    print("  Wealth exchange demonstration complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
