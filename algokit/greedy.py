"""Greedy algorithms: coin change and the fractional knapsack."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

__all__ = ["FractionalItem", "make_change", "fractional_knapsack", "DEFAULT_DENOMINATIONS"]

DEFAULT_DENOMINATIONS: tuple[int, ...] = (1, 2, 5, 10, 20, 50, 100)


@dataclass(frozen=True)
class FractionalItem:
    """An item that may be taken in part: its full price and full weight."""

    price: float
    weight: float

    def __post_init__(self) -> None:
        if self.weight <= 0:
            raise ValueError("item weight must be positive")

    @property
    def ratio(self) -> float:
        """Price per unit of weight."""
        return self.price / self.weight


def make_change(amount: int, denominations: Iterable[int] = DEFAULT_DENOMINATIONS) -> list[int]:
    """Return coins for ``amount``, taking the largest denomination first."""
    if amount < 0:
        raise ValueError("amount must not be negative")
    coins_available = sorted(set(denominations), reverse=True)
    if any(coin <= 0 for coin in coins_available):
        raise ValueError("denominations must be positive")

    coins: list[int] = []
    remaining = amount
    for coin in coins_available:
        count, remaining = divmod(remaining, coin)
        coins.extend([coin] * count)
    if remaining:
        raise ValueError(f"amount {amount} cannot be paid with {coins_available}")
    return coins


def fractional_knapsack(items: Iterable[FractionalItem], capacity: float) -> float:
    """Return the greatest profit that fits in ``capacity`` when items may be split."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    ranked = sorted(
        items, key=lambda item: (item.ratio, item.price, item.weight), reverse=True
    )
    profit = 0.0
    used = 0.0
    for item in ranked:
        if used + item.weight <= capacity:
            used += item.weight
            profit += item.price
        else:
            profit += (capacity - used) * item.ratio
            break
    return profit