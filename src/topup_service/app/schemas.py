import math
from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, field_validator


class TopUpRequest(BaseModel):
    amount: Decimal = Field(..., gt=0, allow_inf_nan=False)

    @field_validator("amount", mode="before")
    @classmethod
    def _reject_non_numeric(cls, v: Any) -> Any:
        # bool is an int subclass; true/false are not amounts
        if isinstance(v, bool):
            raise ValueError("amount must be a number")
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("amount")
    @classmethod
    def _fits_float(cls, v: Decimal) -> Decimal:
        if not math.isfinite(float(v)):
            raise ValueError("amount is out of range")
        return v


class TopUpResponse(BaseModel):
    balance: float
    transaction_id: str
    amount: float
    user_id: str
    timestamp: datetime


class BalanceResponse(BaseModel):
    user_id: str
    balance: float
    currency: str


class ErrorResponse(BaseModel):
    message: str
    error: str | None = None
