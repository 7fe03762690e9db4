"""FastAPI web server for threadroast."""

from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from threadroast import Roaster, RoastConfig, __version__
from threadroast.exceptions import InvalidInputError, RoastError
from threadroast.models.roast import ErrorResponse, RoastRequest, RoastResult


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str


class ConfigResponse(BaseModel):
    """Non-secret service configuration."""

    actor_id: str = Field(
        ...,
        description="Apify actor used to scrape Threads profiles.",
        json_schema_extra={"example": "curious_coder/threads-scraper"},
    )
    model: str = Field(
        ...,
        description="Chat-completion model that writes the roast.",
        json_schema_extra={"example": "gpt-3.5-turbo"},
    )
    max_tokens: int = Field(
        ...,
        description="Maximum length of the generated roast in tokens.",
        json_schema_extra={"example": 150},
    )
    log_level: str = Field(
        ...,
        description="Logging verbosity level. Options: 'DEBUG', 'INFO', 'WARNING', 'ERROR'.",
        json_schema_extra={"example": "INFO", "enum": ["DEBUG", "INFO", "WARNING", "ERROR"]},
    )


# Global roaster instance
_roaster: Optional[Roaster] = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build provider clients once per process."""
    global _roaster
    _roaster = Roaster(RoastConfig())
    await _roaster.__aenter__()
    yield
    await _roaster.__aexit__(None, None, None)
    _roaster = None


def get_roaster() -> Roaster:
    """Dependency returning the process-wide roaster."""
    if _roaster is None:
        raise RuntimeError("Roaster is not initialized")
    return _roaster


app = FastAPI(
    title="threadroast API",
    description="Roast a Threads account from its bio and posts",
    version=__version__,
    lifespan=lifespan,
)


@app.exception_handler(RoastError)
async def roast_error_handler(request: Request, exc: RoastError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(message=exc.message).model_dump(),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Unparsable body or non-string accountName
    error = InvalidInputError()
    return JSONResponse(
        status_code=error.status_code,
        content=ErrorResponse(message=error.message).model_dump(),
    )


@app.get("/health", response_model=HealthResponse, tags=["System"])
async def health_check():
    """Check API health status."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.now().isoformat(),
    )


@app.post(
    "/api/roast",
    response_model=RoastResult,
    tags=["Roast"],
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def roast(request: RoastRequest, roaster: Roaster = Depends(get_roaster)):
    """
    Roast a Threads account.

    Scrapes the account's bio and recent posts, then asks the model for
    something funny and sarcastic about them.
    """
    return await roaster.roast(request.account_name)


@app.get("/api/config", response_model=ConfigResponse, tags=["System"])
async def get_config():
    """
    Get the service configuration, without credentials.

    **Configuration is set via environment variables** with the `THREADROAST_` prefix:
    - `THREADROAST_MODEL=gpt-4o-mini`
    - `THREADROAST_MAX_TOKENS=200`
    - `THREADROAST_LOG_FORMAT=json`
    """
    config = RoastConfig()
    return ConfigResponse(
        actor_id=config.actor_id,
        model=config.model,
        max_tokens=config.max_tokens,
        log_level=config.log_level,
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
