import asyncio
import contextlib
import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.api.v1 import chat, insights, reports, transactions
from app.core import config
from app.infrastructure.implementation.verification_store import (
    InMemoryVerificationStore,
)
from app.infrastructure.interfaces.verification_store import IVerificationStore

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def sweep_periodically(store: IVerificationStore, interval: float) -> None:
    while True:
        await asyncio.sleep(interval)
        store.sweep()


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    store = InMemoryVerificationStore()
    app.state.verification_store = store
    sweeper = asyncio.create_task(
        sweep_periodically(store, config.VERIFICATION_SWEEP_SECONDS)
    )
    logger.info("Verification store ready")
    try:
        yield
    finally:
        sweeper.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await sweeper


app = FastAPI(title="Budget Insights API", version="0.1.0", lifespan=lifespan)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
):
    # Rejected inputs such as NaN cannot be echoed back as JSON
    errors = [{k: v for k, v in e.items() if k != "input"} for e in exc.errors()]
    return JSONResponse(status_code=422, content={"detail": jsonable_encoder(errors)})


app.include_router(transactions.router, prefix="/api/v1/transactions", tags=["transactions"])
app.include_router(insights.router, prefix="/api/v1/insights", tags=["insights"])
app.include_router(chat.router, prefix="/api/v1/chat", tags=["chat"])
app.include_router(reports.router, prefix="/api/v1/reports", tags=["reports"])
