"""Property model."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from propledger.models.base import to_decimal
from propledger.models.enums import PropertyType


@dataclass
class Property:
    """Owned real estate asset with its acquisition terms."""

    property_id: str
    name: str
    property_type: PropertyType
    purchase_price: Decimal
    purchase_date: date
    address: str = ""
    down_payment: Decimal = Decimal("0")
    monthly_amortization: Decimal = Decimal("0")
    current_market_value: Decimal | None = None  # Falls back to purchase_price
    image: str | None = None

    def __post_init__(self) -> None:
        self.property_type = PropertyType(self.property_type)
        self.purchase_price = to_decimal(self.purchase_price)
        self.down_payment = to_decimal(self.down_payment)
        self.monthly_amortization = to_decimal(self.monthly_amortization)
        if self.current_market_value is not None:
            self.current_market_value = to_decimal(self.current_market_value)

    @property
    def is_personal(self) -> bool:
        return self.property_type == PropertyType.PERSONAL
