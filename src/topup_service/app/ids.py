import secrets
import string
import time
from datetime import datetime, timezone
from typing import Callable

_BASE36 = string.digits + string.ascii_lowercase

Clock = Callable[[], datetime]
IdGenerator = Callable[[], str]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TransactionIdGenerator:
    """Builds ``<prefix>_<epoch ms>_<random base36>`` identifiers.

    Ids are never stored, so uniqueness rests on the random suffix.
    """

    def __init__(self, prefix: str = "txn", random_length: int = 9) -> None:
        if random_length <= 0:
            raise ValueError("random_length must be positive")
        self.prefix = prefix
        self.random_length = random_length

    def __call__(self) -> str:
        millis = time.time_ns() // 1_000_000
        suffix = "".join(secrets.choice(_BASE36) for _ in range(self.random_length))
        return f"{self.prefix}_{millis}_{suffix}"
