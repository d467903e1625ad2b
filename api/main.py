import logging
import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from core import responses, settings
from locations import router as locations_router
from locations.loader import DataLoadError, load_dataset
from locations.repository import LocationStore

APP_NAME = "Thai Location API"
APP_VERSION = "1.0.0"

logging.basicConfig(
    level=settings.log_level(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}


def build_store(data_dir: str) -> LocationStore:
    """
    Load and index the dataset. Raises DataLoadError on any failure.
    """
    store = LocationStore.build(load_dataset(data_dir))
    orphans = store.orphan_counts()
    if any(orphans.values()):
        if settings.strict_references():
            raise DataLoadError(data_dir, f"orphaned parent references: {orphans}")
        logger.warning(
            "dataset_orphans provinces=%s districts=%s sub_districts=%s",
            orphans["provinces"],
            orphans["districts"],
            orphans["sub_districts"],
        )
    logger.info(
        "dataset_loaded data_dir=%s geographies=%s provinces=%s districts=%s sub_districts=%s",
        data_dir,
        len(store.geographies),
        len(store.provinces),
        len(store.districts),
        len(store.sub_districts),
    )
    return store


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Build the snapshot once per process, before serving any request.
    try:
        app.state.location_store = build_store(settings.data_dir())
    except DataLoadError:
        logger.exception("dataset_load_failed data_dir=%s", settings.data_dir())
        raise
    try:
        yield
    finally:
        app.state.location_store = None


app = FastAPI(title=APP_NAME, version=APP_VERSION, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins(),
    allow_credentials=False,
    allow_methods=["GET", "HEAD", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID", "X-Response-Time"],
    max_age=86400,
)

app.add_exception_handler(StarletteHTTPException, responses.http_exception_handler)


@app.middleware("http")
async def security_headers(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    latency_ms = (time.perf_counter() - started) * 1000

    response.headers.update(SECURITY_HEADERS)
    if request.url.path != "/health":
        response.headers["Cache-Control"] = (
            f"public, max-age={settings.cache_max_age()}, s-maxage={settings.cache_s_maxage()}"
        )
    response.headers["X-Response-Time"] = f"{latency_ms:.2f}ms"

    logger.info(
        "request method=%s path=%s status=%s client=%s latency_ms=%.2f",
        request.method,
        request.url.path,
        response.status_code,
        request.client.host if request.client else "-",
        latency_ms,
    )
    return response


app.include_router(locations_router.router, tags=["locations"])


@app.get("/health")
def health() -> dict:
    return {"status": "OK", "message": f"{APP_NAME} is running"}


@app.get("/")
def root() -> dict:
    return {"message": APP_NAME, "version": APP_VERSION}


def run() -> None:
    uvicorn.run(
        app,
        host=settings.host(),
        port=settings.port(),
        proxy_headers=True,
        forwarded_allow_ips=settings.forwarded_allow_ips(),
        log_level=settings.log_level().lower(),
    )


if __name__ == "__main__":
    run()
