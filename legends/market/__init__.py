"""
Market module for the game.

This module holds the transaction rules (level gating, pricing, resale) and
the market session that drives them.
"""

from .market import MarketSession
from .transactions import (
    TransactionStatus,
    can_purchase,
    check_purchase,
    generate_stock,
    purchase,
    sell,
)

__all__ = [
    "MarketSession",
    "TransactionStatus",
    "can_purchase",
    "check_purchase",
    "generate_stock",
    "purchase",
    "sell",
]
