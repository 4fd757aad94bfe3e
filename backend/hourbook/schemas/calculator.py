from typing import Any, Optional

from pydantic import BaseModel


class DiscountRequest(BaseModel):
    amount: Any = None
    tax_percent: Any = None
    discount_percent: Any = None
    vendor_price: Any = None


class DiscountRead(BaseModel):
    after_tax: float
    discount_amount: float
    final_amount: float
    has_vendor_price: bool
    # Only present when a vendor price was given
    difference: Optional[float] = None
    commission_percent: Optional[float] = None
    vendor_label: Optional[str] = None

    # Display strings, e.g. "$88.00" and "+25.0%"
    final_amount_display: str
    difference_display: Optional[str] = None
    commission_percent_display: Optional[str] = None
