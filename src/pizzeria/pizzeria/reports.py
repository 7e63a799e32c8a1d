"""Derived reports and text renderings.

Nothing here is cached: every report is recomputed from the registry on
each call.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from .models import CustomerProfile, Order
from .pricing import format_money
from .registry import CustomerRegistry


class SalesReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    order_count: int = 0
    total: Decimal = Decimal("0")
    by_customer: dict[str, Decimal] = Field(default_factory=dict)


def sales_total(registry: CustomerRegistry) -> Decimal:
    """Sum the price of every recorded order across all profiles."""
    return sum(
        (order.price for profile in registry for order in profile.history()),
        Decimal("0"),
    )


def sales_report(registry: CustomerRegistry) -> SalesReport:
    order_count = 0
    by_customer: dict[str, Decimal] = {}
    for profile in registry:
        history = profile.history()
        order_count += len(history)
        by_customer[profile.name] = sum((o.price for o in history), Decimal("0"))
    return SalesReport(
        order_count=order_count,
        total=sum(by_customer.values(), Decimal("0")),
        by_customer=by_customer,
    )


# ---------------------------------------------------------------------------
# Text renderings
# ---------------------------------------------------------------------------


def format_receipt(order: Order) -> str:
    return "\n".join(
        [
            "========= PAYMENT RECEIPT =========",
            f"Customer: {order.customer_name}",
            f"Order Details: {order.pizza.describe()}",
            f"Total Price: {format_money(order.price)}",
            "Thank you for your order!",
            "===================================",
        ]
    )


def format_history(profile: CustomerProfile) -> str:
    history = profile.history()
    if not history:
        return "No order history found."
    lines = ["========== ORDER HISTORY =========="]
    for order in history:
        lines.append(order.describe())
        lines.append(f"Feedback: {order.summary().feedback_text}")
    lines.append(f"Loyalty points: {profile.loyalty_points}")
    lines.append("===================================")
    return "\n".join(lines)


def format_specials(specials: tuple[str, ...]) -> str:
    lines = ["======= SEASONAL SPECIALS ======="]
    lines.extend(f"- {special}" for special in specials)
    lines.append("=================================")
    return "\n".join(lines)


def format_sales_report(report: SalesReport) -> str:
    lines = ["======= SALES REPORT ======="]
    for name, total in report.by_customer.items():
        lines.append(f"{name}: {format_money(total)}")
    lines.append(f"Orders: {report.order_count}")
    lines.append(f"Total Sales: {format_money(report.total)}")
    lines.append("=============================")
    return "\n".join(lines)
