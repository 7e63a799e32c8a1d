"""Ordering operations called by the presentation layer.

State lives in the ``CustomerRegistry`` passed to each call; this module
keeps none of its own.

Typical flow::

    profile = find_profile(registry, "alice")
    pizza = validate_product(build_product(crust="Thin", sauce="Tomato", cheese="Mozzarella"))
    order = place_order(profile, pizza)
    pay(PaymentMethod.CARD, order.price)
    finalize_order(profile, order)
    attach_feedback(order, 5, "Great!")
"""

from collections.abc import Iterable
from decimal import Decimal

from loguru import logger

from . import reports
from .builder import PizzaBuilder
from .config import get_settings
from .enums import PaymentMethod
from .errors import ValidationGap
from .models import CustomerProfile, Feedback, Order, OrderSummary, Pizza
from .payments import PaymentResult, payment_for
from .pricing import PricingPolicy
from .registry import CustomerRegistry

_REQUIRED_FIELDS = ("crust", "sauce", "cheese")


def create_profile(registry: CustomerRegistry, name: str) -> CustomerProfile:
    return registry.create_profile(name)


def find_profile(registry: CustomerRegistry, name: str) -> CustomerProfile | None:
    """Look up a profile by name, ignoring case. Returns None when absent."""
    return registry.find_by_name(name)


def build_product(
    crust: str = "",
    sauce: str = "",
    toppings: Iterable[str] = (),
    cheese: str = "",
    seasonal_special: bool = False,
) -> Pizza:
    """Build a pizza in one call using a fresh PizzaBuilder."""
    return (
        PizzaBuilder()
        .crust(crust)
        .sauce(sauce)
        .add_toppings(toppings)
        .cheese(cheese)
        .seasonal_special(seasonal_special)
        .build()
    )


def validate_product(pizza: Pizza) -> Pizza:
    """Check that every required pizza field is filled in.

    Returns the pizza unchanged so the call can be chained.

    Raises:
        ValidationGap: listing the empty required fields.
    """
    missing = [name for name in _REQUIRED_FIELDS if not getattr(pizza, name).strip()]
    if missing:
        raise ValidationGap(missing)
    return pizza


def place_order(
    profile: CustomerProfile, pizza: Pizza, policy: PricingPolicy | None = None
) -> Order:
    """Price a pizza for a customer. The order is not recorded yet."""
    order = Order.create(pizza, profile.name, policy)
    logger.info("Order {} placed for {} at {}", order.order_id, profile.name, order.price)
    return order


def pay(method: PaymentMethod | str, amount: Decimal) -> PaymentResult:
    return payment_for(method).process(amount)


def finalize_order(profile: CustomerProfile, order: Order) -> None:
    """Record the order in the profile's history and award loyalty points.

    The award is checked first, so a bad award leaves the profile untouched.
    """
    points = get_settings().loyalty_points_per_order
    if points < 0:
        raise ValueError(f"Loyalty award cannot be negative (got {points})")
    profile.record_order(order)
    profile.earn_loyalty(points)
    logger.info(
        "Order {} finalized for {} (+{} points, total {})",
        order.order_id,
        profile.name,
        points,
        profile.loyalty_points,
    )


def attach_feedback(order: Order, rating: int, comment: str) -> Feedback:
    feedback = order.attach_feedback(rating, comment)
    logger.info("Feedback recorded for order {}: {}", order.order_id, feedback)
    return feedback


def order_history(profile: CustomerProfile) -> list[OrderSummary]:
    return [order.summary() for order in profile.history()]


def sales_total(registry: CustomerRegistry) -> Decimal:
    return reports.sales_total(registry)


def seasonal_specials() -> tuple[str, ...]:
    return tuple(get_settings().seasonal_specials)
