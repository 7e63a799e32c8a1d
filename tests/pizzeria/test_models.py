"""Tests for Order, Feedback and CustomerProfile."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from pizzeria.config import get_settings
from pizzeria.models import CustomerProfile, Order, OrderHistory
from pizzeria.pricing import PricingPolicy


class TestOrder:
    def test_create_prices_the_pizza(self, sample_pizza):
        order = Order.create(sample_pizza, "alice")
        assert order.price == Decimal("16.00")
        assert order.customer_name == "alice"
        assert order.pizza == sample_pizza
        assert order.feedback is None

    def test_price_is_frozen_at_creation(self, sample_pizza, monkeypatch):
        """A later price change must not reprice an existing order."""
        order = Order.create(sample_pizza, "alice")
        monkeypatch.setenv("PIZZERIA_BASE_PRICE", "99.00")
        get_settings.cache_clear()
        assert PricingPolicy.from_settings().price(sample_pizza) == Decimal("105.00")
        assert order.price == Decimal("16.00")
        with pytest.raises(ValidationError):
            order.price = Decimal("1.00")

    def test_order_ids_are_unique(self, sample_pizza):
        assert Order.create(sample_pizza, "a").order_id != Order.create(sample_pizza, "a").order_id

    def test_describe(self, sample_pizza):
        order = Order.create(sample_pizza, "alice")
        assert order.describe() == (
            "Customer: alice, Pizza: Crust: Thin, Sauce: Tomato, Cheese: Mozzarella, "
            "Toppings: [Olives, Mushroom] [Seasonal Special], Price: $16.00"
        )


class TestFeedback:
    def test_feedback_round_trip(self, sample_pizza):
        """Summary should report exactly the attached rating and comment."""
        order = Order.create(sample_pizza, "alice")
        order.attach_feedback(5, "Great!")
        summary = order.summary()
        assert summary.rating == 5
        assert summary.comment == "Great!"
        assert summary.feedback_text == "Rating: 5 | Feedback: Great!"

    def test_summary_text_matches_feedback(self, sample_pizza):
        """Receipts and history views render feedback the same way."""
        order = Order.create(sample_pizza, "alice")
        order.attach_feedback(3, "")
        assert order.summary().feedback_text == str(order.feedback) == "Rating: 3 | Feedback: "

    def test_no_feedback_summary(self, sample_pizza):
        summary = Order.create(sample_pizza, "alice").summary()
        assert summary.rating is None
        assert summary.feedback_text == "No feedback provided."

    @pytest.mark.parametrize("rating", [0, 6, -1])
    def test_out_of_range_rating_is_rejected(self, sample_pizza, rating):
        order = Order.create(sample_pizza, "alice")
        with pytest.raises(ValidationError):
            order.attach_feedback(rating, "meh")
        assert order.feedback is None

    def test_reattaching_replaces_feedback(self, sample_pizza, log_messages):
        order = Order.create(sample_pizza, "alice")
        order.attach_feedback(2, "Cold")
        order.attach_feedback(4, "Better on second look")
        assert order.feedback.rating == 4
        assert any("already had feedback" in m for m in log_messages)

    def test_summary_does_not_mutate(self, sample_pizza):
        order = Order.create(sample_pizza, "alice")
        before = order.model_dump()
        order.summary()
        order.describe()
        assert order.model_dump() == before


class TestCustomerProfile:
    def test_new_profile_is_empty(self):
        profile = CustomerProfile(name="bob")
        assert profile.loyalty_points == 0
        assert list(profile.history()) == []
        assert len(profile.history()) == 0

    def test_history_preserves_insertion_order(self, sample_pizza):
        profile = CustomerProfile(name="bob")
        orders = [Order.create(sample_pizza, "bob") for _ in range(3)]
        for order in orders:
            profile.record_order(order)
        history = profile.history()
        assert isinstance(history, OrderHistory)
        assert [o.order_id for o in history] == [o.order_id for o in orders]
        assert history[0] is orders[0]

    def test_history_is_restartable_and_live(self, sample_pizza):
        profile = CustomerProfile(name="bob")
        history = profile.history()
        profile.record_order(Order.create(sample_pizza, "bob"))
        assert len(list(history)) == 1
        assert len(list(history)) == 1

    def test_earn_loyalty_is_additive(self):
        profile = CustomerProfile(name="bob")
        profile.earn_loyalty(10)
        profile.earn_loyalty(5)
        assert profile.loyalty_points == 15

    def test_loyalty_cannot_decrease(self):
        profile = CustomerProfile(name="bob")
        with pytest.raises(ValueError):
            profile.earn_loyalty(-1)
        assert profile.loyalty_points == 0
