"""Discount / vendor commission calculator.

Stateless: the inputs come straight from a form and nothing is stored.

    after_tax         = amount * (1 + tax% / 100)
    discount_amount   = after_tax * discount% / 100
    final_amount      = after_tax - discount_amount
    difference        = vendor_price - final_amount
    commission_percent = difference / final_amount * 100

A positive commission means the vendor charges more than the fair price,
a negative one means the vendor is below market.
"""

from dataclasses import dataclass

from hourbook.core.numbers import finite_or_zero, to_decimal


@dataclass(frozen=True)
class DiscountResult:
    after_tax: float
    discount_amount: float
    final_amount: float
    difference: float
    commission_percent: float
    has_vendor_price: bool

    @property
    def vendor_label(self) -> str | None:
        if not self.has_vendor_price:
            return None
        return "Vendor Commission" if self.commission_percent >= 0 else "Below Market"

    def as_dict(self) -> dict:
        """Fields for display; vendor comparison is left out without a vendor price."""
        data = {
            "after_tax": self.after_tax,
            "discount_amount": self.discount_amount,
            "final_amount": self.final_amount,
            "has_vendor_price": self.has_vendor_price,
        }
        if self.has_vendor_price:
            data["difference"] = self.difference
            data["commission_percent"] = self.commission_percent
            data["vendor_label"] = self.vendor_label
        return data


def compute_discount(
    amount,
    tax_percent=0,
    discount_percent=0,
    vendor_price=0,
) -> DiscountResult:
    x = to_decimal(amount)
    tax = to_decimal(tax_percent)
    discount = to_decimal(discount_percent)
    vendor = to_decimal(vendor_price)

    after_tax = x * (1 + tax / 100)
    discount_amount = after_tax * (discount / 100)
    final_amount = after_tax - discount_amount
    difference = vendor - final_amount

    commission_percent = 0.0
    if final_amount > 0 and vendor > 0:
        commission_percent = ((vendor - final_amount) / final_amount) * 100

    return DiscountResult(
        after_tax=finite_or_zero(after_tax),
        discount_amount=finite_or_zero(discount_amount),
        final_amount=finite_or_zero(final_amount),
        difference=finite_or_zero(difference),
        commission_percent=finite_or_zero(commission_percent),
        has_vendor_price=vendor > 0,
    )
