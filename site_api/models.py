"""
Data models — Site, Template
SQLAlchemy (SQLite) + Pydantic v2 + Enums + transitions statuts
"""
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

import sqlalchemy as sa
from pydantic import BaseModel, Field
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


# ── ENUMS ──────────────────────────────────────────────────────────────

class SiteStatus(str, Enum):
    DRAFT  = "draft"
    LIVE   = "live"
    PAUSED = "paused"


_TRANSITIONS: Dict[str, List[str]] = {
    "draft":  ["live"],
    "live":   ["paused"],
    "paused": ["live"],
}


def can_transition(current: str, target: str) -> bool:
    return target in _TRANSITIONS.get(current, [])


# ── ORM ────────────────────────────────────────────────────────────────

class Base(DeclarativeBase):
    pass


class TemplateDB(Base):
    __tablename__ = "templates"
    id:            Mapped[int]           = mapped_column(sa.Integer, primary_key=True, autoincrement=True)
    name:          Mapped[str]           = mapped_column(sa.String(255), nullable=False)
    description:   Mapped[Optional[str]] = mapped_column(sa.Text, nullable=True)
    category:      Mapped[str]           = mapped_column(sa.String(100), nullable=False)
    template_data: Mapped[str]           = mapped_column(sa.Text, default="{}")    # JSON
    color_schemes: Mapped[str]           = mapped_column(sa.Text, default="[]")    # JSON
    preview_url:   Mapped[Optional[str]] = mapped_column(sa.String(500), nullable=True)
    features:      Mapped[str]           = mapped_column(sa.Text, default="[]")    # JSON
    seo_optimized: Mapped[bool]          = mapped_column(sa.Boolean, default=True)
    created_at:    Mapped[datetime]      = mapped_column(sa.DateTime, default=datetime.utcnow)
    updated_at:    Mapped[datetime]      = mapped_column(sa.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class SiteDB(Base):
    __tablename__ = "sites"
    id:            Mapped[int]                = mapped_column(sa.Integer, primary_key=True, autoincrement=True)
    user_id:       Mapped[int]                = mapped_column(sa.Integer, nullable=False, index=True)
    template_id:   Mapped[Optional[int]]      = mapped_column(sa.Integer, sa.ForeignKey("templates.id"), nullable=True)
    name:          Mapped[str]                = mapped_column(sa.String(255), nullable=False)
    subdomain:     Mapped[str]                = mapped_column(sa.String(100), nullable=False, unique=True)
    custom_domain: Mapped[Optional[str]]      = mapped_column(sa.String(255), nullable=True)
    site_data:     Mapped[str]                = mapped_column(sa.Text, default="{}")    # JSON PageDocument
    status:        Mapped[str]                = mapped_column(sa.String(50), default=SiteStatus.DRAFT.value)
    published_at:  Mapped[Optional[datetime]] = mapped_column(sa.DateTime, nullable=True)
    created_at:    Mapped[datetime]           = mapped_column(sa.DateTime, default=datetime.utcnow)
    updated_at:    Mapped[datetime]           = mapped_column(sa.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


# ── Pydantic (API) ─────────────────────────────────────────────────────

class SiteCreate(BaseModel):
    user_id:       int
    name:          str = Field(min_length=1, max_length=255)
    subdomain:     str = Field(min_length=1, max_length=100, pattern=r"^[a-z0-9][a-z0-9-]*$")
    template_id:   Optional[int]            = None
    custom_domain: Optional[str]            = None
    site_data:     Optional[Dict[str, Any]] = None


class SiteUpdate(BaseModel):
    name:          Optional[str]            = None
    custom_domain: Optional[str]            = None
    site_data:     Optional[Dict[str, Any]] = None


class SiteStatusUpdate(BaseModel):
    status: SiteStatus


class PublishInput(BaseModel):
    lang: str = "en"
