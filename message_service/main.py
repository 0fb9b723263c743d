import logging

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError

from .config import settings
from .routes import error_response, router
from .storage import MessageStore

logger = logging.getLogger("uvicorn")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager to handle startup and shutdown events.
    """
    logger.info(f"[Message API] Starting with {len(app.state.store)} stored messages")
    yield
    logger.info(f"[Message API] Shutting down, dropping {len(app.state.store)} messages")


async def invalid_body_handler(request: Request, exc: RequestValidationError):
    logger.info(f"[Message API] Invalid body on {request.method} {request.url.path}")
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request body", str(exc.errors()))


def create_app(store: Optional[MessageStore] = None) -> FastAPI:
    """
    Builds the application around a single message store.

    Args:
        store (MessageStore, optional): Store to serve; a fresh empty one is created when omitted.
    """
    app = FastAPI(title=settings.title, lifespan=lifespan)
    app.state.store = store if store is not None else MessageStore()

    app.add_exception_handler(RequestValidationError, invalid_body_handler)
    app.include_router(router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=settings.log_level.upper())
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level)
