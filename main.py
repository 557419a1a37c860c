from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from boekhouding import __version__
from boekhouding.api import register_error_handlers, sheets_router, transactions_router
from boekhouding.api.errors import error_response
from boekhouding.config import APP_NAME, get_settings
from boekhouding.logging_setup import configure_logging, get_logger
from boekhouding.services.ledger import get_ledger
from boekhouding.services.sheets import get_sheets

log = get_logger("boekhouding.main")

# ------------------------------------------------------------------------------
# App
# ------------------------------------------------------------------------------
APP_VERSION = __version__
DEFAULT_STATIC_DIR = Path(__file__).resolve().parent / "public"


def static_dir() -> Path:
    return get_settings().static_dir or DEFAULT_STATIC_DIR


@asynccontextmanager
async def lifespan(_app: FastAPI):
    settings = get_settings()
    configure_logging(settings.log_level)
    get_ledger().init_storage()
    get_sheets().directory.mkdir(parents=True, exist_ok=True)
    log.info("%s %s: data in %s, assets from %s", APP_NAME, APP_VERSION, settings.data_dir, static_dir())
    yield


app = FastAPI(title=APP_NAME, version=APP_VERSION, lifespan=lifespan)
register_error_handlers(app)

# ------------------------------------------------------------------------------
# API
# ------------------------------------------------------------------------------
app.include_router(transactions_router)
app.include_router(sheets_router)


@app.api_route("/api/{rest:path}", methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD", "TRACE"],
               include_in_schema=False)
def api_not_found(rest: str):
    return error_response(404, "Not found")

# ------------------------------------------------------------------------------
# Static assets (mounted last; "/" serves index.html, paths outside the root 404)
# ------------------------------------------------------------------------------
app.mount("/", StaticFiles(directory=static_dir(), html=True, check_dir=False), name="static")

# ------------------------------------------------------------------------------
# Dev-Server
# ------------------------------------------------------------------------------
if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run("main:app", host="127.0.0.1", port=settings.port, reload=True)
