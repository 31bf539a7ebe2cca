"""
TradeRule: how much wealth moves in a single trade.

Agents sometimes pay more or less than a good is worth, so every trade
moves wealth from the sender to the receiver. The amount is always a
percentage of one party's wealth:

- sender not poorer:  transfer = receiver_wealth × percent_gain
- sender poorer:      transfer = sender_wealth × percent_loss

The comparison is strict, so equal wealth takes the first branch.
A single trade conserves the pair's combined wealth. The two
percentages differ (0.20 vs 0.17 by default), and that asymmetry is what
lets the aggregate drift over many trades.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

from wealthsim.core.config import check_percentage

if TYPE_CHECKING:
    from wealthsim.core.ledger import WealthLedger


@dataclass(frozen=True)
class TradeRule:
    """Asymmetric percentage-of-poorer-party transfer rule."""

    percent_gain: float = 0.20
    percent_loss: float = 0.17

    def __post_init__(self):
        check_percentage("percent_gain", self.percent_gain)
        check_percentage("percent_loss", self.percent_loss)

    def transfer_amount(self, sender_wealth: float, receiver_wealth: float) -> float:
        """Wealth that flows from sender to receiver."""
        transfer = receiver_wealth * self.percent_gain
        if sender_wealth < receiver_wealth:
            transfer = sender_wealth * self.percent_loss
        return transfer

    def apply(self, ledger: "WealthLedger", sender: int, receiver: int) -> None:
        """Execute the trade in place. No clamping at zero."""
        sender_wealth = ledger.get(sender)
        receiver_wealth = ledger.get(receiver)
        transfer = self.transfer_amount(sender_wealth, receiver_wealth)

        ledger.set(sender, sender_wealth - transfer)
        ledger.set(receiver, receiver_wealth + transfer)
