import enum
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal


class Role(str, enum.Enum):
    admin = "admin"
    user = "user"


class AccountStatus(str, enum.Enum):
    active = "active"
    inactive = "inactive"
    suspended = "suspended"


@dataclass
class Account:
    id: str
    name: str
    email: str
    role: Role
    status: AccountStatus
    created_at: datetime
    last_login: datetime | None = None
    company: str = ""
    permissions: list[str] = field(default_factory=list)
    balance: Decimal | None = Decimal("0")
    currency: str = "USD"
    project_id: str | None = None


@dataclass
class TopUpResult:
    balance: Decimal
    transaction_id: str
    amount: Decimal
    user_id: str
    timestamp: datetime
