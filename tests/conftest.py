from datetime import datetime, timezone
from itertools import count

import pytest
from fastapi.testclient import TestClient

from topup_service.app.main import create_app
from topup_service.app.seed import seed_accounts
from topup_service.app.store import InMemoryAccountStore

FIXED_NOW = datetime(2024, 1, 21, 12, 0, tzinfo=timezone.utc)


class SequentialIds:
    def __init__(self) -> None:
        self._n = count(1)

    def __call__(self) -> str:
        return f"txn_test_{next(self._n)}"


@pytest.fixture
def store():
    return InMemoryAccountStore(seed_accounts())


@pytest.fixture
def client(store):
    app = create_app(store=store, id_generator=SequentialIds(), clock=lambda: FIXED_NOW)
    return TestClient(app)


@pytest.fixture
def real_ids_client(store):
    return TestClient(create_app(store=store))


@pytest.fixture
def auth_headers():
    return {"Authorization": "Bearer admin-token"}
