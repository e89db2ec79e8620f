"""
Checkout totals and promo codes.

Promo codes come from a static table in settings and are checked here only;
nothing on the server side re-validates them against a customer's history.
"""
from typing import Mapping, Optional
from core.config import settings
from schemas.checkout import CheckoutTotals, PromoCodeResult

TAX_RATE = settings.TAX_RATE
DEFAULT_DELIVERY_FEE = settings.DEFAULT_DELIVERY_FEE


def calculate_totals(
        subtotal: float,
        delivery_fee: Optional[float] = None,
        tax_rate: float = TAX_RATE,
        discount_rate: float = 0.0
) -> CheckoutTotals:
    """
    Derive the checkout breakdown from the cart subtotal.

    A missing or zero delivery fee falls back to DEFAULT_DELIVERY_FEE. The
    discount applies to the whole amount, delivery and tax included.
    """
    if not delivery_fee:
        delivery_fee = DEFAULT_DELIVERY_FEE

    tax = subtotal * tax_rate
    total_before_discount = subtotal + delivery_fee + tax
    discount = total_before_discount * discount_rate
    total = total_before_discount - discount

    return CheckoutTotals(
        subtotal=round(subtotal, 2),
        tax=round(tax, 2),
        delivery_fee=round(delivery_fee, 2),
        total_before_discount=round(total_before_discount, 2),
        discount_rate=discount_rate,
        discount=round(discount, 2),
        total=round(total, 2),
    )


def resolve_promo_code(code: Optional[str], promo_codes: Optional[Mapping[str, float]] = None) -> PromoCodeResult:
    if promo_codes is None:
        promo_codes = settings.PROMO_CODES

    normalized = (code or "").strip().upper()
    table = {key.upper(): rate for key, rate in promo_codes.items()}

    if normalized and normalized in table:
        return PromoCodeResult(code=normalized, accepted=True, discount_rate=table[normalized])

    return PromoCodeResult(code=normalized, accepted=False, discount_rate=0.0)
