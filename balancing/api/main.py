"""FastAPI application for balancing fee quotes."""

import os

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from balancing import __version__
from balancing.api.endpoints import HUB_CHAIN_ID, router
from balancing.log_setup import configure_logging

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("BALANCING_HOST", "0.0.0.0")
PORT = int(os.environ.get("BALANCING_PORT", "8000"))
DEBUG = os.environ.get("BALANCING_DEBUG", "false").lower() in ("true", "1", "yes")

# Maximum request body size (1 MB); curves are small
MAX_REQUEST_SIZE = 1024 * 1024

app = FastAPI(
    title="Balancing Fee Engine",
    description="Piecewise-linear balancing fee quotes for hub and spoke pools",
    version=__version__,
)


@app.middleware("http")
async def limit_request_size(request: Request, call_next):  # type: ignore[no-untyped-def]
    """Reject requests with body larger than MAX_REQUEST_SIZE."""
    content_length = request.headers.get("content-length")
    if content_length and int(content_length) > MAX_REQUEST_SIZE:
        return JSONResponse(status_code=413, content={"detail": "Request too large"})
    return await call_next(request)


app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok", "hub_chain_id": HUB_CHAIN_ID}


def run() -> None:
    """Run the balancing fee API server.

    Configuration via environment variables:
    - BALANCING_HOST: Host to bind to (default: 0.0.0.0)
    - BALANCING_PORT: Port to bind to (default: 8000)
    - BALANCING_DEBUG: Enable debug logging and reload mode (default: false)
    - BALANCING_HUB_CHAIN_ID: Hub pool chain id (default: 1)
    """
    configure_logging(verbose=DEBUG)
    uvicorn.run(
        "balancing.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()
