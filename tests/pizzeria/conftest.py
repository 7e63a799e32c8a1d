"""Shared pytest fixtures for pizzeria tests."""

import pytest
from loguru import logger

from pizzeria.builder import PizzaBuilder
from pizzeria.config import Settings, get_settings
from pizzeria.models import CustomerProfile, Pizza
from pizzeria.registry import CustomerRegistry


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Drop cached settings and ignore any local .env file.

    Each test then sees only the environment it sets itself.
    """
    monkeypatch.setitem(Settings.model_config, "env_file", None)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def registry() -> CustomerRegistry:
    """Create an empty customer registry."""
    return CustomerRegistry()


@pytest.fixture
def builder() -> PizzaBuilder:
    return PizzaBuilder()


@pytest.fixture
def sample_pizza() -> Pizza:
    """Thin crust, tomato sauce, two toppings, seasonal special."""
    return (
        PizzaBuilder()
        .crust("Thin")
        .sauce("Tomato")
        .add_topping("Olives")
        .add_topping("Mushroom")
        .cheese("Mozzarella")
        .seasonal_special()
        .build()
    )


@pytest.fixture
def alice(registry: CustomerRegistry) -> CustomerProfile:
    return registry.create_profile("alice")


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during the test."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
