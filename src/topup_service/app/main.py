import logging

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.responses import JSONResponse
import uvicorn

from .auth import BearerSubstringVerifier, CredentialVerifier
from .config import configure_logging, settings
from .crud import get_account
from .errors import InternalError, TopUpError
from .handler import TopUpHandler
from .ids import Clock, IdGenerator, TransactionIdGenerator, utc_now
from .schemas import BalanceResponse, ErrorResponse, TopUpResponse
from .seed import seed_accounts
from .store import AccountStore, InMemoryAccountStore

logger = logging.getLogger(__name__)

_error_responses = {code: {"model": ErrorResponse} for code in (400, 401, 404, 500)}


def _get_handler(request: Request) -> TopUpHandler:
    return request.app.state.topup_handler


async def _topup_error_handler(request: Request, exc: TopUpError) -> JSONResponse:
    return JSONResponse(exc.to_body(), status_code=exc.status_code)


router = APIRouter()


@router.post("/users/{user_id}/topup", response_model=TopUpResponse, responses=_error_responses)
async def api_topup(
    user_id: str,
    request: Request,
    handler: TopUpHandler = Depends(_get_handler),
):
    try:
        result = await handler.handle(request, user_id)
    except TopUpError:
        raise
    except Exception as e:
        logger.exception("Failed to topup user credit")
        raise InternalError(str(e)) from e

    return {
        "balance": float(result.balance),
        "transaction_id": result.transaction_id,
        "amount": float(result.amount),
        "user_id": result.user_id,
        "timestamp": result.timestamp,
    }


@router.get("/users/{user_id}/balance", response_model=BalanceResponse, responses=_error_responses)
async def api_balance(
    user_id: str,
    request: Request,
    handler: TopUpHandler = Depends(_get_handler),
):
    handler.authenticate(request)
    acc = get_account(handler.store, user_id=user_id)
    return {"user_id": acc.id, "balance": float(acc.balance or 0), "currency": acc.currency}


def create_app(
    *,
    store: AccountStore | None = None,
    verifier: CredentialVerifier | None = None,
    id_generator: IdGenerator | None = None,
    clock: Clock = utc_now,
) -> FastAPI:
    configure_logging()

    app = FastAPI(
        title=f"{settings.service_name.capitalize()} Service",
        version="1.0.0",
        docs_url=f"{settings.api_prefix}/docs",
        openapi_url=f"{settings.api_prefix}/openapi.json",
    )
    app.state.topup_handler = TopUpHandler(
        store=store if store is not None else InMemoryAccountStore(seed_accounts()),
        verifier=verifier or BearerSubstringVerifier(),
        id_generator=id_generator or TransactionIdGenerator(
            prefix=settings.transaction_id_prefix,
            random_length=settings.transaction_id_random_length,
        ),
        clock=clock,
    )
    app.add_exception_handler(TopUpError, _topup_error_handler)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    app.include_router(router, prefix=settings.api_prefix)
    return app


app = create_app()


def run() -> None:
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
