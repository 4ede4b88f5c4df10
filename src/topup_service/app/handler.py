import logging

from fastapi import Request

from .auth import CredentialVerifier
from .crud import get_account, parse_json_body, topup, validate_topup_request
from .errors import AuthenticationError, EmptyBodyError, MissingContentTypeError
from .ids import Clock, IdGenerator, utc_now
from .models import TopUpResult
from .store import AccountStore

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


class TopUpHandler:
    """Validates a top-up request and credits the target account.

    Checks run in a fixed order and the first failure wins: credential,
    account existence, content type, body presence, JSON syntax, amount
    presence, amount value. The balance is only touched once all of them pass.
    """

    def __init__(
        self,
        store: AccountStore,
        verifier: CredentialVerifier,
        id_generator: IdGenerator,
        clock: Clock = utc_now,
    ) -> None:
        self.store = store
        self.verifier = verifier
        self.id_generator = id_generator
        self.clock = clock

    def authenticate(self, request: Request) -> None:
        if not self.verifier.verify(request.headers.get("authorization")):
            raise AuthenticationError()

    async def handle(self, request: Request, user_id: str) -> TopUpResult:
        self.authenticate(request)
        get_account(self.store, user_id=user_id)

        content_type = request.headers.get("content-type")
        if not content_type or JSON_CONTENT_TYPE not in content_type:
            raise MissingContentTypeError()

        raw = (await request.body()).decode("utf-8", errors="replace")
        if not raw.strip():
            raise EmptyBodyError()

        body = parse_json_body(raw)
        amount = validate_topup_request(body).amount

        acc = topup(self.store, user_id=user_id, amount=amount)
        transaction_id = self.id_generator()
        logger.info("Top-up %s applied to %s: amount=%s balance=%s", transaction_id, user_id, amount, acc.balance)

        return TopUpResult(
            balance=acc.balance,
            transaction_id=transaction_id,
            amount=amount,
            user_id=user_id,
            timestamp=self.clock(),
        )
