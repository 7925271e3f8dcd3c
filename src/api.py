import logging
import time
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel

from src.backend_service import (
    ServiceError,
    describe_service,
    get_airline_index,
    get_catalog,
    get_raw,
    get_routes,
    get_snapshot,
    status_summary,
    trigger_scrape,
)
from src.config import Settings
from src.cors_config import ALLOWED_HEADERS, ALLOWED_METHODS, combine_regex_patterns, get_cors_settings
from src.logging_setup import setup_logging
from src.security import API_KEY_HEADER, API_KEY_QUERY_PARAM, is_authorized, requires_api_key
from src.store import JsonFileStore

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="AENA PMI Flight Data API",
    description="Canonical catalog of Palma de Mallorca destinations and the airlines serving them.",
    version="0.1.0",
)

explicit_origins, regex_origins = get_cors_settings()

app.add_middleware(
    CORSMiddleware,
    allow_origins=explicit_origins,
    allow_origin_regex=combine_regex_patterns(regex_origins),
    allow_methods=list(ALLOWED_METHODS),
    allow_headers=list(ALLOWED_HEADERS),
)

settings = Settings.from_env()
store = JsonFileStore(settings.snapshot_dir)


@app.middleware("http")
async def check_key_and_log(request: Request, call_next):
    path = request.url.path
    client_host = request.client.host if request.client else "unknown"
    if request.method != "OPTIONS" and requires_api_key(path, settings.api_key):
        supplied = request.headers.get(API_KEY_HEADER) or request.query_params.get(API_KEY_QUERY_PARAM)
        if not is_authorized(supplied, settings.api_key):
            return JSONResponse({"detail": "Invalid or missing API key"}, status_code=401)

    start = time.perf_counter()
    response: Response = await call_next(request)
    latency_ms = (time.perf_counter() - start) * 1000
    response.headers["X-Request-Latency-ms"] = f"{latency_ms:.2f}"

    logger.info(
        "request",
        extra={
            "request_path": path,
            "method": request.method,
            "status_code": response.status_code,
            "latency_ms": round(latency_ms, 2),
            "client": client_host,
        },
    )
    return response


class StatusResponse(BaseModel):
    service: str
    airport: str
    last_update: Optional[str]
    airports_count: int
    airlines_count: int
    routes_count: int
    errors: List[str]


def _raise_http(exc: ServiceError) -> None:
    raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc


@app.get("/")
async def root() -> Dict[str, Any]:
    return describe_service()


@app.get("/health")
async def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.get("/api/status", response_model=StatusResponse)
async def status() -> Dict[str, Any]:
    return await run_in_threadpool(status_summary, store)


@app.get("/api/catalog")
async def catalog() -> Dict[str, Any]:
    try:
        return await run_in_threadpool(get_catalog, store)
    except ServiceError as exc:
        _raise_http(exc)


@app.get("/api/raw")
async def raw_extraction() -> Dict[str, Any]:
    try:
        return await run_in_threadpool(get_raw, store)
    except ServiceError as exc:
        _raise_http(exc)


@app.get("/api/airlines")
async def airlines() -> Dict[str, Any]:
    try:
        return await run_in_threadpool(get_airline_index, store)
    except ServiceError as exc:
        _raise_http(exc)


@app.get("/api/routes")
async def routes() -> Dict[str, Any]:
    try:
        return await run_in_threadpool(get_routes, store)
    except ServiceError as exc:
        _raise_http(exc)


@app.get("/api/snapshot/{date_key}")
async def snapshot(
    date_key: str,
    raw: bool = Query(default=False, description="Return the raw extraction instead of the catalog."),
) -> Dict[str, Any]:
    try:
        return await run_in_threadpool(get_snapshot, store, date_key, raw=raw)
    except ServiceError as exc:
        _raise_http(exc)


@app.api_route("/api/scrape", methods=["GET", "POST"])
async def scrape() -> Dict[str, Any]:
    # Runs synchronously; overlapping triggers are not serialized (last write wins).
    return await run_in_threadpool(trigger_scrape, store, settings)
