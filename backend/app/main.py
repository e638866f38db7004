from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.dependencies import close_services, get_credential_store
from .api.routes.search import router as search_router
from .core.config import settings
from .core.credentials import CredentialStore

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    yield
    await close_services()


app = FastAPI(
    title="LyricsMV Backend",
    version="0.1.0",
    description="Song identification, trivia and lyrics lookup for embedded music videos.",
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(search_router)


@app.get("/health")
def health() -> dict[str, Any]:
    return {"status": "ok"}


@app.get("/health/credentials")
def health_credentials(credentials: CredentialStore = Depends(get_credential_store)) -> JSONResponse:
    try:
        if credentials.store.ping():
            return JSONResponse({"status": "ok"})
        return JSONResponse({"status": "degraded", "detail": "ping failed"}, status_code=503)
    except Exception as exc:  # noqa: BLE001
        return JSONResponse({"status": "down", "detail": str(exc)}, status_code=503)
