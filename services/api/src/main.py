"""Site Builder API - FastAPI with SQLAlchemy and an LLM page generator."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
import time

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import structlog

from shared.logging_config import (
    CORRELATION_HEADER,
    bind_request_context,
    clear_request_context,
    setup_logging,
)

from . import routers
from .config import get_settings
from .database import create_engine, create_session_maker, init_models
from .errors import ErrorKind, SiteBuilderError
from .generation import UserLocks
from .llm import ChatModelGenerator, LLMFactory, UnavailableGenerator

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Build the database engine and LLM client; dispose of them on shutdown."""
    settings = get_settings()
    setup_logging(
        service_name=settings.service_name,
        log_format=settings.log_format,
        log_level=settings.log_level,
    )

    engine = create_engine(settings.database_url)
    if engine.url.get_backend_name() == "sqlite":
        await init_models(engine)
    app.state.session_maker = create_session_maker(engine)

    try:
        app.state.text_generator = ChatModelGenerator(LLMFactory.create_llm(settings))
    except KeyError as e:
        # The rest of the API stays usable; generation requests fail as upstream errors
        reason = e.args[0] if e.args else str(e)
        logger.warning("llm_api_key_missing", provider=settings.llm_provider, reason=reason)
        app.state.text_generator = UnavailableGenerator(reason)

    logger.info(
        "api_started",
        profile=settings.generation_profile,
        project_limit=settings.project_limit,
        model=settings.llm_model,
    )
    yield
    # Shutdown
    await engine.dispose()
    logger.info("api_stopped")


app = FastAPI(
    title="Site Builder API",
    description="Generate React + Tailwind or HTML/CSS pages from prompts and keep per-user projects",
    version="1.0.0",
    lifespan=lifespan,
)
app.state.user_locks = UserLocks()


@app.middleware("http")
async def correlation_middleware(request: Request, call_next):
    correlation_id = bind_request_context(
        request.headers.get(CORRELATION_HEADER), request.method, request.url.path
    )

    start = time.time()

    try:
        response = await call_next(request)
        duration_ms = (time.time() - start) * 1000

        if response.status_code >= 500:  # noqa: PLR2004
            logger.error(
                "http_request_failed",
                status_code=response.status_code,
                duration_ms=round(duration_ms, 2),
            )
        else:
            logger.info(
                "http_request", status_code=response.status_code, duration_ms=round(duration_ms, 2)
            )

        response.headers[CORRELATION_HEADER] = correlation_id
        return response
    except Exception as e:
        duration_ms = (time.time() - start) * 1000
        logger.error(
            "http_request_exception",
            error=str(e),
            error_type=type(e).__name__,
            duration_ms=round(duration_ms, 2),
            exc_info=True,
        )
        raise
    finally:
        clear_request_context()


def _error_body(message: str, kind: ErrorKind) -> dict:
    return {"detail": message, "error": message, "code": kind.value}


@app.exception_handler(SiteBuilderError)
async def site_builder_error_handler(request: Request, exc: SiteBuilderError) -> JSONResponse:
    log = logger.error if exc.status_code >= 500 else logger.warning  # noqa: PLR2004
    log("request_failed", code=exc.kind.value, error=str(exc))
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.public_message, exc.kind),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        problems.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))
    message = "; ".join(problems) or "Invalid request"
    logger.info("request_validation_failed", problems=problems)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(message, ErrorKind.VALIDATION),
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("unhandled_exception", error_type=type(exc).__name__, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("Internal server error", ErrorKind.INTERNAL),
    )


@app.get("/")
async def root():
    """Root endpoint - API information."""
    return {
        "name": "Site Builder API",
        "version": "1.0.0",
        "description": "Generate pages from prompts and keep per-user projects",
    }


app.include_router(routers.health.router)
app.include_router(routers.generate.router, prefix="/api")
app.include_router(routers.projects.router, prefix="/api")
app.include_router(routers.users.router, prefix="/api")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=get_settings().port)  # noqa: S104
