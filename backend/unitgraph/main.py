"""unitgraph: FastAPI application entry point."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from unitgraph.config import settings
from unitgraph.core.logging import configure_logging
from unitgraph.definitions.catalog import get_registry
from unitgraph.api.routes_units import router as units_router
from unitgraph.api.routes_convert import router as convert_router

configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Build and freeze the registry before serving any request.
    get_registry()
    yield


app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    description="Look up units of measurement and convert values between them.",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(units_router, prefix="/api")
app.include_router(convert_router, prefix="/api")


@app.get("/api/health")
async def health():
    return {"status": "ok", "version": "0.1.0"}
