"""Payment recorders.

Each recorder takes an amount and returns a ``PaymentResult``. The shipped
card and wallet recorders always succeed; a real gateway would report
``declined`` or ``error`` through the same result type.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
import uuid

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from .enums import PaymentMethod, PaymentStatus
from .pricing import format_money


class PaymentResult(BaseModel):
    """Outcome of a payment attempt, handed back to the presentation layer."""

    model_config = ConfigDict(frozen=True)

    method: PaymentMethod
    amount: Decimal
    status: PaymentStatus
    confirmation_id: str = Field(default_factory=lambda: uuid.uuid4().hex[:12])
    message: str = ""

    @property
    def succeeded(self) -> bool:
        return self.status == PaymentStatus.SUCCEEDED


class PaymentRecorder(ABC):
    method: PaymentMethod
    label: str

    @abstractmethod
    def process(self, amount: Decimal) -> PaymentResult:
        """Record a payment of ``amount``."""

    def _confirm(self, amount: Decimal) -> PaymentResult:
        message = f"Paid {format_money(amount)} via {self.label}."
        result = PaymentResult(
            method=self.method,
            amount=amount,
            status=PaymentStatus.SUCCEEDED,
            message=message,
        )
        logger.info("{} (confirmation={})", message, result.confirmation_id)
        return result


class CardPayment(PaymentRecorder):
    method = PaymentMethod.CARD
    label = "Credit Card"

    def process(self, amount: Decimal) -> PaymentResult:
        return self._confirm(amount)


class WalletPayment(PaymentRecorder):
    method = PaymentMethod.WALLET
    label = "Digital Wallet"

    def process(self, amount: Decimal) -> PaymentResult:
        return self._confirm(amount)


_RECORDERS: dict[PaymentMethod, type[PaymentRecorder]] = {
    PaymentMethod.CARD: CardPayment,
    PaymentMethod.WALLET: WalletPayment,
}


def payment_for(method: PaymentMethod | str) -> PaymentRecorder:
    """Return a recorder for a payment method (enum member or its value).

    Raises:
        ValueError: if the method is unknown.
    """
    return _RECORDERS[PaymentMethod(method)]()
