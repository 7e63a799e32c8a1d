"""CLI entry point for the pizza ordering system.

Usage:
    python -m pizzeria.main
"""

from loguru import logger

from . import reports, service
from .config import get_settings
from .enums import PaymentMethod
from .errors import ValidationGap
from .logging import setup_logging
from .registry import CustomerRegistry

MENU = """
========= PIZZA ORDERING SYSTEM =========
1. Create User Profile
2. Place Order
3. View Order History
4. View Seasonal Specials and Promotions
5. View Sales Report
6. Exit"""

_PAYMENT_CHOICES = {"1": PaymentMethod.CARD, "2": PaymentMethod.WALLET}


def _prompt(text: str) -> str:
    return input(text).strip()


def create_profile(registry: CustomerRegistry) -> None:
    name = _prompt("Enter customer name: ")
    if not name:
        print("Name cannot be empty.")
        return
    profile = service.create_profile(registry, name)
    print(f"Profile ready for: {profile.name}")


def _prompt_payment_method() -> PaymentMethod:
    while True:
        choice = _prompt("Choose payment method (1: Credit Card, 2: Digital Wallet): ")
        if choice in _PAYMENT_CHOICES:
            return _PAYMENT_CHOICES[choice]
        print("Invalid payment method. Please enter 1 or 2.")


def _prompt_rating() -> int | None:
    """Ask for a 1-5 rating. An empty answer skips feedback."""
    while True:
        raw = _prompt("Provide feedback (1-5 rating, blank to skip): ")
        if not raw:
            return None
        if raw.isdigit() and 1 <= int(raw) <= 5:
            return int(raw)
        print("Please enter a number from 1 to 5.")


def place_order(registry: CustomerRegistry) -> None:
    name = _prompt("Enter customer name: ")
    profile = service.find_profile(registry, name)
    if profile is None:
        print("User not found. Please create a profile first.")
        return

    crust = _prompt("Choose crust (Thin/Thick): ")
    sauce = _prompt("Choose sauce: ")
    toppings = [t.strip() for t in _prompt("Add toppings (comma-separated): ").split(",")]
    cheese = _prompt("Choose cheese: ")
    special = _prompt("Include seasonal special? (yes/no): ").lower() == "yes"

    try:
        pizza = service.validate_product(
            service.build_product(
                crust=crust,
                sauce=sauce,
                toppings=[t for t in toppings if t],
                cheese=cheese,
                seasonal_special=special,
            )
        )
    except ValidationGap as exc:
        print(exc)
        return

    order = service.place_order(profile, pizza)
    method = _prompt_payment_method()
    result = service.pay(method, order.price)
    print(result.message)
    if not result.succeeded:
        print("Payment was not completed; the order has been discarded.")
        return

    service.finalize_order(profile, order)
    print()
    print(reports.format_receipt(order))

    rating = _prompt_rating()
    if rating is None:
        return
    comment = _prompt("Write a short feedback: ")
    service.attach_feedback(order, rating, comment)
    print("Thanks for your feedback!")


def view_order_history(registry: CustomerRegistry) -> None:
    name = _prompt("Enter customer name: ")
    profile = service.find_profile(registry, name)
    if profile is None:
        print("User not found.")
        return
    print(reports.format_history(profile))


def view_seasonal_specials(registry: CustomerRegistry) -> None:
    print(reports.format_specials(service.seasonal_specials()))


def view_sales_report(registry: CustomerRegistry) -> None:
    print(reports.format_sales_report(reports.sales_report(registry)))


_ACTIONS = {
    "1": create_profile,
    "2": place_order,
    "3": view_order_history,
    "4": view_seasonal_specials,
    "5": view_sales_report,
}


def run(registry: CustomerRegistry) -> None:
    """Run the menu loop until the user exits or input ends."""
    while True:
        print(MENU)
        try:
            choice = _prompt("Select an option: ")
            if choice == "6":
                print("Thank you & come again!")
                return
            action = _ACTIONS.get(choice)
            if action is None:
                print("Invalid option. Please try again.")
                continue
            logger.debug("Menu option selected: {}", choice)
            action(registry)
        except (EOFError, KeyboardInterrupt):
            print("\nGoodbye!")
            return


def main() -> None:
    """Run the pizza ordering CLI."""
    settings = get_settings()

    # Initialize logging first
    setup_logging(level=settings.log_level, log_to_file=settings.log_to_file)
    logger.info("Starting pizza ordering CLI")

    registry = CustomerRegistry()
    run(registry)

    logger.info(
        "Session ended: {} profiles, total sales {}",
        len(registry),
        reports.sales_total(registry),
    )


if __name__ == "__main__":
    main()
