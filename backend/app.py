import logging
import os
import time

from flask import Flask, jsonify, request
from flask_cors import CORS

from src.backend_service import (
    ServiceError,
    describe_service,
    get_airline_index,
    get_catalog,
    get_raw,
    get_routes,
    get_snapshot,
    parse_flag,
    status_summary,
    trigger_scrape,
)
from src.config import Settings
from src.cors_config import ALLOWED_HEADERS, ALLOWED_METHODS, get_cors_settings
from src.logging_setup import setup_logging
from src.security import API_KEY_HEADER, API_KEY_QUERY_PARAM, is_authorized, requires_api_key
from src.store import JsonFileStore

explicit_origins, regex_origins = get_cors_settings()
cors_origins = explicit_origins if explicit_origins == ["*"] else list(dict.fromkeys([*explicit_origins, *regex_origins]))

setup_logging()
logger = logging.getLogger(__name__)

app = Flask(__name__)
app.json.sort_keys = False
CORS(
    app,
    resources={r"/api/*": {"origins": cors_origins}},
    methods=list(ALLOWED_METHODS),
    allow_headers=list(ALLOWED_HEADERS),
)

settings = Settings.from_env()
store = JsonFileStore(settings.snapshot_dir)


@app.before_request
def before_request():
    if request.method != "OPTIONS" and requires_api_key(request.path, settings.api_key):
        supplied = request.headers.get(API_KEY_HEADER) or request.args.get(API_KEY_QUERY_PARAM)
        if not is_authorized(supplied, settings.api_key):
            return jsonify({"detail": "Invalid or missing API key"}), 401
    request.start_time = time.perf_counter()


@app.after_request
def log_request(response):
    start = getattr(request, "start_time", None)
    latency_ms = 0.0
    if start is not None:
        latency_ms = (time.perf_counter() - start) * 1000
        response.headers["X-Request-Latency-ms"] = f"{latency_ms:.2f}"

    logger.info(
        "request",
        extra={
            "request_path": request.path,
            "method": request.method,
            "status_code": response.status_code,
            "latency_ms": round(latency_ms, 2),
            "client": request.remote_addr,
        },
    )
    return response


@app.errorhandler(ServiceError)
def handle_service_error(exc: ServiceError):
    return jsonify({"detail": str(exc)}), exc.status_code


@app.get("/")
def index():
    return jsonify(describe_service())


@app.get("/health")
def healthcheck():
    return jsonify({"status": "ok"})


@app.get("/api/status")
def status():
    return jsonify(status_summary(store))


@app.get("/api/catalog")
def catalog():
    return jsonify(get_catalog(store))


@app.get("/api/raw")
def raw_extraction():
    return jsonify(get_raw(store))


@app.get("/api/airlines")
def airlines():
    return jsonify(get_airline_index(store))


@app.get("/api/routes")
def routes():
    return jsonify(get_routes(store))


@app.get("/api/snapshot/<date_key>")
def snapshot(date_key):
    return jsonify(get_snapshot(store, date_key, raw=parse_flag(request.args.get("raw"))))


@app.route("/api/scrape", methods=["GET", "POST"])
def scrape():
    return jsonify(trigger_scrape(store, settings))


if __name__ == "__main__":
    port = int(os.environ.get("PORT", "8000"))
    app.run(host="0.0.0.0", port=port)
