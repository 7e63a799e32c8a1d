"""Pizza ordering core: customization, pricing, payment, profiles and loyalty."""

from .builder import PizzaBuilder
from .enums import PaymentMethod, PaymentStatus
from .errors import PizzeriaError, ProfileNotFoundError, ValidationGap
from .models import CustomerProfile, Feedback, Order, OrderHistory, OrderSummary, Pizza
from .payments import CardPayment, PaymentRecorder, PaymentResult, WalletPayment
from .pricing import PricingPolicy
from .registry import CustomerRegistry
from .reports import SalesReport, sales_report, sales_total

__all__ = [
    "CardPayment",
    "CustomerProfile",
    "CustomerRegistry",
    "Feedback",
    "Order",
    "OrderHistory",
    "OrderSummary",
    "PaymentMethod",
    "PaymentRecorder",
    "PaymentResult",
    "PaymentStatus",
    "Pizza",
    "PizzaBuilder",
    "PizzeriaError",
    "PricingPolicy",
    "ProfileNotFoundError",
    "SalesReport",
    "ValidationGap",
    "WalletPayment",
    "sales_report",
    "sales_total",
]
