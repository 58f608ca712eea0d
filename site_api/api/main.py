"""
Site Builder — FastAPI app
Démarrer : uvicorn site_api.api.main:app --reload --port 8001
"""
import logging, os
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from page_editor import __version__ as editor_version
from page_editor.router import router as page_editor_router

from .routes import sites, templates

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s — %(message)s")
log = logging.getLogger(__name__)

app = FastAPI(title="Site Builder — Page Editor", version="1.0.0", docs_url="/docs")

_origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
app.add_middleware(CORSMiddleware, allow_origins=_origins, allow_methods=["*"], allow_headers=["*"])


@app.on_event("startup")
def startup():
    from ..database import init_db
    init_db()
    log.info("DB initialisée (SQLite)")


@app.get("/api/health")
def health():
    from ..database import db_path
    return {
        "status": "ok",
        "service": "site_builder",
        "version": "1.0.0",
        "editor": editor_version,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": bool(db_path()),
    }


app.include_router(page_editor_router)
app.include_router(sites.router)
app.include_router(templates.router)
