# customer_api/main.py

import asyncio
import logging
import time
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from customer_api.api import auth, customers
from customer_api.config import Settings, load_settings
from customer_api.core.errors import AppError, StorageError
from customer_api.core.log_config import setup_logging
from customer_api.core.security import build_password_context
from customer_api.database import Database


logger = logging.getLogger(__name__)


# Generic 500 messages per route, the caller never sees internal detail
ERROR_MESSAGES = {
    ("POST", "/register"): "Error creating user",
    ("POST", "/login"): "Error logging in",
    ("POST", "/customers"): "Error adding customer",
    ("GET", "/customers"): "Error retrieving customers",
    ("PUT", "/customers"): "Error updating customer",
    ("DELETE", "/customers"): "Error deleting customer",
}


def _error_message(request: Request) -> str:
    path = request.url.path.rstrip("/")
    if path.startswith("/customers/"):
        path = "/customers"
    return ERROR_MESSAGES.get((request.method, path), "Internal Server Error")


# -------------------------------
# Exception Handlers
# -------------------------------

async def app_error_handler(request: Request, exc: AppError):
    if isinstance(exc, StorageError):
        logger.error("Storage failure on %s %s", request.method, request.url.path, exc_info=exc)
        return PlainTextResponse(_error_message(request), status_code=exc.status_code)
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    return PlainTextResponse("Missing required fields", status_code=status.HTTP_400_BAD_REQUEST)


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return PlainTextResponse(_error_message(request), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


# -------------------------------
# Application Factory
# -------------------------------

def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Builds the application around one Settings object and one Database.
    Both are stored on app.state and reach handlers through dependencies.
    """
    settings = settings or load_settings()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.db.init_db()
        logger.info("Database tables initialized")
        yield
        app.state.db.dispose()

    app = FastAPI(title="Customer Records API", lifespan=lifespan)
    app.state.settings = settings
    app.state.db = Database(settings.database_url)
    app.state.pwd_context = build_password_context(settings.bcrypt_rounds)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_and_bound_requests(request: Request, call_next):
        start = time.perf_counter()
        try:
            response = await asyncio.wait_for(call_next(request), timeout=settings.request_timeout_seconds)
        except asyncio.TimeoutError:
            logger.error("%s %s timed out after %.1fs", request.method, request.url.path,
                         settings.request_timeout_seconds)
            return PlainTextResponse("Request timed out", status_code=status.HTTP_504_GATEWAY_TIMEOUT)
        duration = time.perf_counter() - start
        logger.info("%s %s %s %.3fs", request.method, request.url.path, response.status_code, duration)
        return response

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(auth.router)
    app.include_router(customers.router)

    @app.get("/health")
    def health():
        return {"status": "healthy"}

    return app


def run():
    import uvicorn

    settings = load_settings()
    app = create_app(settings)
    logger.info("Server running at http://localhost:%s", settings.port)
    uvicorn.run(app, host="0.0.0.0", port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
