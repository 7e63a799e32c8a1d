from collections.abc import Sequence
from datetime import datetime, timezone
from decimal import Decimal
import uuid

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from .pricing import PricingPolicy, format_money


class Pizza(BaseModel):
    """Immutable description of a customized pizza.

    Unset fields stay empty; checking for them is the caller's job
    (see ``service.validate_product``).
    """

    model_config = ConfigDict(frozen=True)

    crust: str = ""
    sauce: str = ""
    toppings: tuple[str, ...] = ()
    cheese: str = ""
    seasonal_special: bool = False

    def describe(self) -> str:
        description = (
            f"Crust: {self.crust}, Sauce: {self.sauce}, Cheese: {self.cheese}, "
            f"Toppings: [{', '.join(self.toppings)}]"
        )
        if self.seasonal_special:
            description += " [Seasonal Special]"
        return description


class Feedback(BaseModel):
    model_config = ConfigDict(frozen=True)

    rating: int = Field(ge=1, le=5)
    comment: str = ""

    def __str__(self) -> str:
        return f"Rating: {self.rating} | Feedback: {self.comment}"


class OrderSummary(BaseModel):
    """Read-only projection of an order for receipts and history views."""

    model_config = ConfigDict(frozen=True)

    order_id: str
    customer_name: str
    pizza: str
    price: Decimal
    rating: int | None = None
    comment: str | None = None

    @property
    def feedback_text(self) -> str:
        if self.rating is None:
            return "No feedback provided."
        return str(Feedback(rating=self.rating, comment=self.comment or ""))


class Order(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    order_id: str = Field(default_factory=lambda: uuid.uuid4().hex, frozen=True)
    pizza: Pizza = Field(frozen=True)
    customer_name: str = Field(frozen=True)
    price: Decimal = Field(frozen=True)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), frozen=True
    )
    feedback: Feedback | None = None

    @classmethod
    def create(
        cls, pizza: Pizza, customer_name: str, policy: PricingPolicy | None = None
    ) -> "Order":
        """Create an order, pricing the pizza once with the given policy."""
        policy = policy or PricingPolicy.from_settings()
        return cls(pizza=pizza, customer_name=customer_name, price=policy.price(pizza))

    def attach_feedback(self, rating: int, comment: str) -> Feedback:
        """Attach feedback to the order. A second call replaces the first."""
        feedback = Feedback(rating=rating, comment=comment)
        if self.feedback is not None:
            logger.warning("Order {} already had feedback; replacing it", self.order_id)
        self.feedback = feedback
        return feedback

    def describe(self) -> str:
        return (
            f"Customer: {self.customer_name}, Pizza: {self.pizza.describe()}, "
            f"Price: {format_money(self.price)}"
        )

    def summary(self) -> OrderSummary:
        return OrderSummary(
            order_id=self.order_id,
            customer_name=self.customer_name,
            pizza=self.pizza.describe(),
            price=self.price,
            rating=self.feedback.rating if self.feedback else None,
            comment=self.feedback.comment if self.feedback else None,
        )


class OrderHistory(Sequence):
    """Live, read-only view over a profile's orders in chronological order.

    Nothing is copied; each iteration starts again from the first order.
    """

    def __init__(self, orders: list[Order]) -> None:
        self._orders = orders

    def __getitem__(self, index):
        return self._orders[index]

    def __len__(self) -> int:
        return len(self._orders)

    def __repr__(self) -> str:
        return f"OrderHistory({len(self._orders)} orders)"


class CustomerProfile(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    name: str = Field(frozen=True)
    loyalty_points: int = Field(default=0, ge=0)
    orders: list[Order] = Field(default_factory=list)

    def record_order(self, order: Order) -> None:
        self.orders.append(order)

    def earn_loyalty(self, points: int) -> None:
        if points < 0:
            raise ValueError(f"Loyalty points cannot decrease (got {points})")
        self.loyalty_points += points

    def history(self) -> OrderHistory:
        return OrderHistory(self.orders)
