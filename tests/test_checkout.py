import pytest

from services.checkout import DEFAULT_DELIVERY_FEE, calculate_totals, resolve_promo_code


def test_totals_without_discount():
    totals = calculate_totals(25.0, delivery_fee=5.0)

    assert totals.tax == pytest.approx(2.5)
    assert totals.total_before_discount == pytest.approx(32.5)
    assert totals.discount == 0
    assert totals.total == pytest.approx(32.5)


def test_missing_delivery_fee_uses_default():
    assert calculate_totals(10.0).delivery_fee == DEFAULT_DELIVERY_FEE == 5.99
    assert calculate_totals(10.0, delivery_fee=0).delivery_fee == 5.99


def test_discount_applies_to_whole_amount():
    totals = calculate_totals(25.0, discount_rate=0.10)

    # 25 + 5.99 + 2.50 = 33.49, minus 10%
    assert totals.total_before_discount == pytest.approx(33.49)
    assert totals.discount == pytest.approx(3.35)
    assert totals.total == pytest.approx(30.14)


@pytest.mark.parametrize("code", ["PRIMEIRACOMPRA", "primeiracompra", "  PrimeiraCompra "])
def test_known_promo_code_is_case_insensitive(code):
    result = resolve_promo_code(code)

    assert result.accepted is True
    assert result.discount_rate == 0.10


@pytest.mark.parametrize("code", ["", None, "DESCONTO50", "primeira compra"])
def test_unknown_promo_code_is_rejected(code):
    result = resolve_promo_code(code)

    assert result.accepted is False
    assert result.discount_rate == 0.0


def test_promo_table_can_be_supplied():
    assert resolve_promo_code("frete", {"FRETE": 0.05}).discount_rate == 0.05
