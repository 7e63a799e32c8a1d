from enum import StrEnum


class PaymentMethod(StrEnum):
    CARD = "card"
    WALLET = "wallet"


class PaymentStatus(StrEnum):
    SUCCEEDED = "succeeded"
    DECLINED = "declined"
    ERROR = "error"
