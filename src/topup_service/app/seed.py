from datetime import datetime
from decimal import Decimal

from .models import Account, AccountStatus, Role


def _ts(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def seed_accounts() -> list[Account]:
    """Fresh copy of the mock account table; callers may mutate it freely."""
    return [
        Account(
            id="user_1",
            name="John Doe",
            email="john.doe@example.com",
            role=Role.admin,
            status=AccountStatus.active,
            created_at=_ts("2024-01-15T10:30:00Z"),
            last_login=_ts("2024-01-20T14:22:00Z"),
            company="Acme Corporation",
            permissions=["read", "write", "admin", "impersonate"],
            balance=Decimal("0"),
        ),
        Account(
            id="user_2",
            name="Jane Smith",
            email="jane.smith@example.com",
            role=Role.user,
            status=AccountStatus.active,
            created_at=_ts("2024-01-16T09:15:00Z"),
            last_login=_ts("2024-01-20T13:45:00Z"),
            company="Tech Solutions Inc",
            permissions=["read", "write"],
            balance=Decimal("250.75"),
            project_id="proj_1",
        ),
        Account(
            id="user_3",
            name="Bob Johnson",
            email="bob.johnson@example.com",
            role=Role.user,
            status=AccountStatus.active,
            created_at=_ts("2024-01-17T11:20:00Z"),
            last_login=_ts("2024-01-20T12:30:00Z"),
            company="Marketing Agency",
            permissions=["read", "write"],
            balance=Decimal("89.50"),
            project_id="proj_2",
        ),
        Account(
            id="user_4",
            name="Alice Brown",
            email="alice.brown@example.com",
            role=Role.user,
            status=AccountStatus.inactive,
            created_at=_ts("2024-01-18T16:45:00Z"),
            last_login=_ts("2024-01-19T10:15:00Z"),
            company="E-commerce Store",
            permissions=["read"],
            balance=Decimal("0"),
            project_id="proj_3",
        ),
        Account(
            id="user_5",
            name="Charlie Wilson",
            email="charlie.wilson@example.com",
            role=Role.user,
            status=AccountStatus.suspended,
            created_at=_ts("2024-01-19T08:30:00Z"),
            last_login=_ts("2024-01-19T15:20:00Z"),
            company="Startup Inc",
            permissions=["read"],
            balance=Decimal("15.25"),
            project_id="proj_4",
        ),
    ]
