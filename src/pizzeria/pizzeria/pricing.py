"""Deterministic pizza pricing.

All amounts are ``Decimal`` so repeated topping charges never drift. Values
are only rounded to cents when rendered (see ``format_money``).
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from .config import get_settings

if TYPE_CHECKING:
    from .models import Pizza

BASE_PRICE = Decimal("10.00")
TOPPING_UNIT_PRICE = Decimal("1.50")
SPECIAL_SURCHARGE = Decimal("3.00")

_CENT = Decimal("0.01")


class PricingPolicy(BaseModel):
    """Base price plus a per-topping charge plus a seasonal-special surcharge."""

    model_config = ConfigDict(frozen=True)

    base_price: Decimal = Field(default=BASE_PRICE, ge=0)
    topping_price: Decimal = Field(default=TOPPING_UNIT_PRICE, ge=0)
    special_surcharge: Decimal = Field(default=SPECIAL_SURCHARGE, ge=0)

    @classmethod
    def from_settings(cls) -> "PricingPolicy":
        """Build a policy from the configured price constants."""
        settings = get_settings()
        return cls(
            base_price=settings.base_price,
            topping_price=settings.topping_price,
            special_surcharge=settings.special_surcharge,
        )

    def price(self, pizza: "Pizza") -> Decimal:
        total = self.base_price + len(pizza.toppings) * self.topping_price
        if pizza.seasonal_special:
            total += self.special_surcharge
        return total


def format_money(amount: Decimal) -> str:
    """Render an amount as dollars with two decimal places, e.g. ``$16.00``."""
    return f"${amount.quantize(_CENT, rounding=ROUND_HALF_UP)}"
