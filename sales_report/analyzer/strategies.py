"""Revenue and bonus strategies.

A revenue strategy turns one line item into money received. A bonus
strategy turns a seller's post-ranking position into a bonus amount
(not a percentage): the pipeline stores whatever it returns as-is.

Usage:
    options = AnalysisOptions.defaults()
    options = AnalysisOptions.from_names("simple", "by_profit")
    options = AnalysisOptions(calculate_revenue=my_revenue, calculate_bonus=my_bonus)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol

from ..common.models import LineItem, Product
from .exceptions import InvalidOptions
from .models import SellerAccumulator


class RevenueStrategy(Protocol):
    def __call__(self, item: LineItem, product: Product) -> float: ...


class BonusStrategy(Protocol):
    def __call__(self, index: int, total: int, seller: SellerAccumulator) -> float: ...


def calculate_simple_revenue(item: LineItem, _product: Product) -> float:
    """Sale price times quantity, less the item's percentage discount.

    The catalog product is ignored; revenue comes from the recorded sale.
    """
    return item.sale_price * item.quantity * (1 - item.discount / 100)


def make_bonus_by_profit(
    first_percent: float = 15.0,
    runner_up_percent: float = 10.0,
    default_percent: float = 5.0,
    last_percent: float = 0.0,
) -> BonusStrategy:
    """Build a rank-tiered bonus strategy paying a percent of profit.

    Tiers are checked in order: rank 0, ranks 1-2, last rank, everyone
    else. A sole seller is both first and last and gets the first tier.
    """

    def calculate_bonus(index: int, total: int, seller: SellerAccumulator) -> float:
        if index == 0:
            percent = first_percent
        elif index in (1, 2):
            percent = runner_up_percent
        elif index == total - 1:
            percent = last_percent
        else:
            percent = default_percent
        return seller.profit * percent / 100

    return calculate_bonus


calculate_bonus_by_profit = make_bonus_by_profit()


def calculate_no_bonus(_index: int, _total: int, _seller: SellerAccumulator) -> float:
    """Pay nobody; useful for revenue-only reports."""
    return 0.0


REVENUE_STRATEGIES: dict[str, RevenueStrategy] = {
    "simple": calculate_simple_revenue,
}

BONUS_STRATEGIES: dict[str, BonusStrategy] = {
    "by_profit": calculate_bonus_by_profit,
    "none": calculate_no_bonus,
}


@dataclass(frozen=True)
class AnalysisOptions:
    """The two strategies injected into one analysis run."""

    calculate_revenue: RevenueStrategy
    calculate_bonus: BonusStrategy

    @classmethod
    def defaults(cls) -> AnalysisOptions:
        return cls(
            calculate_revenue=calculate_simple_revenue,
            calculate_bonus=calculate_bonus_by_profit,
        )

    @classmethod
    def from_names(
        cls,
        revenue: str = "simple",
        bonus: str = "by_profit",
        bonus_factory: Callable[[], BonusStrategy] | None = None,
    ) -> AnalysisOptions:
        """Look strategies up by registry name.

        Args:
            revenue: Key in REVENUE_STRATEGIES.
            bonus: Key in BONUS_STRATEGIES.
            bonus_factory: Builds the "by_profit" strategy instead of the
                registry default (e.g. with configured percentages).

        Raises:
            InvalidOptions: If either name is not registered.
        """
        if revenue not in REVENUE_STRATEGIES:
            raise InvalidOptions(
                "Unknown revenue strategy",
                f"{revenue!r} (choices: {', '.join(sorted(REVENUE_STRATEGIES))})",
                option="calculate_revenue",
            )
        if bonus not in BONUS_STRATEGIES:
            raise InvalidOptions(
                "Unknown bonus strategy",
                f"{bonus!r} (choices: {', '.join(sorted(BONUS_STRATEGIES))})",
                option="calculate_bonus",
            )
        bonus_strategy = BONUS_STRATEGIES[bonus]
        if bonus == "by_profit" and bonus_factory is not None:
            bonus_strategy = bonus_factory()
        return cls(
            calculate_revenue=REVENUE_STRATEGIES[revenue],
            calculate_bonus=bonus_strategy,
        )
