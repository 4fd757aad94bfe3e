from fastapi import APIRouter

from hourbook.core.discount import compute_discount
from hourbook.core.week_utils import format_currency, format_percent
from hourbook.schemas.calculator import DiscountRead, DiscountRequest


router = APIRouter(prefix="/calculator", tags=["calculator"])


@router.post("/discount", response_model=DiscountRead, response_model_exclude_none=True)
def calculate_discount(payload: DiscountRequest):
    result = compute_discount(
        payload.amount,
        tax_percent=payload.tax_percent,
        discount_percent=payload.discount_percent,
        vendor_price=payload.vendor_price,
    )
    data = result.as_dict()
    data["final_amount_display"] = format_currency(result.final_amount)
    # Vendor comparison strings only exist alongside the vendor fields
    if result.has_vendor_price:
        sign = "+" if result.difference >= 0 else ""
        data["difference_display"] = sign + format_currency(result.difference)
        data["commission_percent_display"] = format_percent(result.commission_percent)
    return DiscountRead(**data)
