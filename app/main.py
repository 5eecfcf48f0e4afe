"""
Trip Planner Backend - trip-scoped CRUD API

- Trips, schedule items and expenses, all scoped by trip_id
- Backed by Supabase, or by an in-memory mock store during development
- Store chosen once at startup from explicit settings (see app.storage)
- Every error is returned as {"error": message}
"""
import logging
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException
from .config import Settings, settings as default_settings
from .errors import TripPlannerError
from .middleware import CustomTimeoutMiddleware, SecurityHeadersMiddleware
from .routers import api_router
from .schemas.response import HealthResponse
from .storage import TripStore, build_store

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def validation_message(exc: RequestValidationError) -> str:
    """First request-model error as a single line"""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]

    # Errors raised by our own validators already carry a full message
    original = (first.get("ctx") or {}).get("error")
    if isinstance(original, TripPlannerError):
        return original.message

    if first.get("type") == "json_invalid":
        return "Malformed JSON body"
    field = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path"))
    message = first.get("msg", "Invalid value")
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]
    return f"{field}: {message}" if field else message


def register_exception_handlers(app: FastAPI) -> None:
    """Render every failure as {"error": message}"""

    @app.exception_handler(TripPlannerError)
    async def trip_planner_error_handler(request: Request, exc: TripPlannerError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": validation_message(exc)})

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content={"error": "unexpected_error"})


def create_app(settings: Settings = default_settings, store: Optional[TripStore] = None) -> FastAPI:
    """
    Build the API application

    Args:
        settings: Application settings
        store: Store to use; selected from settings when omitted

    Returns:
        Configured FastAPI app
    """
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Trip Planner API",
        description="Trips, schedule items and expenses scoped by trip",
        version="1.0.0"
    )
    app.state.settings = settings
    app.state.store = store if store is not None else build_store(settings)
    logger.info(f"Store: {app.state.store.name} (env={settings.env})")

    # Add middleware in order (bottom to top execution)
    # 1. Security headers (outermost - applied last)
    app.add_middleware(SecurityHeadersMiddleware)

    # 2. Request timeout
    app.add_middleware(CustomTimeoutMiddleware, timeout_seconds=settings.request_timeout_seconds)

    # 3. CORS for the mobile client and local tooling
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.origins,
        allow_credentials="*" not in settings.origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    register_exception_handlers(app)

    @app.get("/health", response_model=HealthResponse)
    @app.get("/api/health", response_model=HealthResponse)
    async def health():
        """Health check endpoint"""
        return {"status": "ok"}

    app.include_router(api_router)
    return app


app = create_app()


def run() -> None:
    """Serve the module-level app with uvicorn"""
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=default_settings.port)


if __name__ == "__main__":
    run()
