"""SQLite — init + session + CRUD helpers"""
import json, logging, os
from datetime import datetime
from pathlib import Path
from typing import Any, List, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from .models import Base, SiteDB, TemplateDB

log = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent.parent / "data"

_ENGINES: dict = {}


def db_path() -> str:
    """Chemin SQLite courant (DB_PATH relu à chaque appel : une base par test)."""
    path = os.getenv("DB_PATH")
    if not path:
        DATA_DIR.mkdir(exist_ok=True)
        path = str(DATA_DIR / "site_builder.db")
    return path


def get_engine() -> Engine:
    path = db_path()
    if path not in _ENGINES:
        _ENGINES[path] = create_engine(f"sqlite:///{path}", connect_args={"check_same_thread": False})
    return _ENGINES[path]


def SessionLocal() -> Session:
    return sessionmaker(autocommit=False, autoflush=False, bind=get_engine())()


def init_db():
    Base.metadata.create_all(bind=get_engine())
    # Seed templates intégrés (only if table is empty)
    from .templates import BASIC_TEMPLATES
    with SessionLocal() as db:
        if db.query(TemplateDB).count() == 0:
            for t in BASIC_TEMPLATES:
                db.add(TemplateDB(
                    name=t["name"], description=t["description"], category=t["category"],
                    template_data=jd(t["template_data"]), color_schemes=jd(t["color_schemes"]),
                    features=jd(t["features"]), seo_optimized=t["seo_optimized"],
                ))
            db.commit()
            log.info("Templates intégrés créés (%d)", len(BASIC_TEMPLATES))


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# ── JSON helpers ──
def jl(s: str) -> list:
    try: return json.loads(s or "[]")
    except ValueError: return []

def jo(s: str) -> dict:
    try:
        o = json.loads(s or "{}")
    except ValueError:
        return {}
    return o if isinstance(o, dict) else {}

def jd(o: Any) -> str:
    return json.dumps(o, ensure_ascii=False)


# ── Template ──
def db_list_templates(db: Session, category: Optional[str] = None) -> List[TemplateDB]:
    q = db.query(TemplateDB)
    if category: q = q.filter_by(category=category)
    return q.order_by(TemplateDB.id).all()

def db_get_template(db: Session, tid: int) -> Optional[TemplateDB]:
    return db.query(TemplateDB).filter_by(id=tid).first()


# ── Site ──
def db_create_site(db: Session, obj: SiteDB) -> SiteDB:
    db.add(obj); db.commit(); db.refresh(obj); return obj

def db_get_site(db: Session, sid: int) -> Optional[SiteDB]:
    return db.query(SiteDB).filter_by(id=sid).first()

def db_get_site_by_subdomain(db: Session, subdomain: str) -> Optional[SiteDB]:
    return db.query(SiteDB).filter_by(subdomain=subdomain).first()

def db_list_user_sites(db: Session, user_id: int) -> List[SiteDB]:
    return db.query(SiteDB).filter_by(user_id=user_id).order_by(SiteDB.created_at.desc(), SiteDB.id.desc()).all()

def db_update_site(db: Session, site: SiteDB, **kwargs) -> SiteDB:
    for k, v in kwargs.items():
        setattr(site, k, v)
    site.updated_at = datetime.utcnow()
    db.commit(); db.refresh(site); return site

def db_delete_site(db: Session, site: SiteDB) -> None:
    db.delete(site); db.commit()
