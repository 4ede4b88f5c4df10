from decimal import Decimal

import pytest

from topup_service.app.crud import parse_json_body, topup, validate_topup_request
from topup_service.app.errors import (
    InvalidAmountError,
    MalformedJsonError,
    MissingAmountError,
    NotFoundError,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (Decimal("50.25"), Decimal("50.25")),
        (7, Decimal("7")),
        ("12.40", Decimal("12.40")),
        (" 3 ", Decimal("3")),
        ("1e2", Decimal("100")),
    ],
)
def test_validate_accepts_positive_numbers(raw, expected):
    assert validate_topup_request({"amount": raw}).amount == expected


@pytest.mark.parametrize(
    "raw",
    [0, -1, Decimal("-0.01"), "abc", "12abc", "", False, True, [], {}, float("nan"), float("inf"), "NaN", "1e999"],
)
def test_validate_rejects_invalid_amounts(raw):
    with pytest.raises(InvalidAmountError):
        validate_topup_request({"amount": raw})


@pytest.mark.parametrize("body", [{}, {"amount": None}, {"value": 3}, [3], 3, None, "amount"])
def test_validate_reports_missing_amount(body):
    with pytest.raises(MissingAmountError):
        validate_topup_request(body)


def test_parse_json_body_keeps_decimal_precision():
    body = parse_json_body('{"amount": 0.1}')
    assert body == {"amount": Decimal("0.1")}
    assert validate_topup_request(body).amount == Decimal("0.1")


def test_parse_json_body_rejects_garbage():
    with pytest.raises(MalformedJsonError):
        parse_json_body("{'amount': 1}")


def test_topup_updates_balance(store):
    acc = topup(store, user_id="user_2", amount=Decimal("0.25"))
    assert acc.balance == Decimal("251.00")
    assert store.find("user_2").balance == Decimal("251.00")


def test_topup_unknown_account(store):
    with pytest.raises(NotFoundError):
        topup(store, user_id="missing", amount=Decimal("1"))


def test_topup_rejects_overflowing_total(store):
    topup(store, user_id="user_3", amount=Decimal("1e308"))
    before = store.find("user_3").balance
    with pytest.raises(InvalidAmountError):
        topup(store, user_id="user_3", amount=Decimal("1e308"))
    assert store.find("user_3").balance == before


def test_topup_rejects_amount_lost_to_rounding(store):
    with pytest.raises(InvalidAmountError):
        topup(store, user_id="user_3", amount=Decimal("1e-28"))
    assert store.find("user_3").balance == Decimal("89.50")
