import json
import logging
import math
from decimal import Decimal
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from .errors import InvalidAmountError, MalformedJsonError, MissingAmountError, NotFoundError
from .models import Account
from .schemas import TopUpRequest
from .store import AccountStore

logger = logging.getLogger(__name__)

_MISSING_AMOUNT_ERRORS = {"missing", "model_type", "model_attributes_type"}


def get_account(store: AccountStore, *, user_id: str) -> Account:
    acc = store.find(user_id)
    if acc is None:
        raise NotFoundError()
    return acc


def parse_json_body(raw: str) -> Any:
    try:
        return json.loads(raw, parse_float=Decimal)
    except ValueError as e:
        logger.error("JSON parse error: %s", e)
        raise MalformedJsonError() from e


def validate_topup_request(body: Any) -> TopUpRequest:
    try:
        return TopUpRequest.model_validate(body)
    except PydanticValidationError as e:
        err = e.errors()[0]
        if err["type"] in _MISSING_AMOUNT_ERRORS or err.get("input", ...) is None:
            raise MissingAmountError() from None
        raise InvalidAmountError() from None


def topup(store: AccountStore, *, user_id: str, amount: Decimal) -> Account:
    acc = get_account(store, user_id=user_id)
    current = Decimal(acc.balance or 0)
    new_balance = current + amount
    # overflowing totals and amounts lost to rounding never reach the store
    if not math.isfinite(float(new_balance)) or new_balance == current:
        raise InvalidAmountError()
    return store.update(user_id, new_balance)
