"""
Sites — CRUD + statut + publication.

Le contrat avec le page_editor se limite au JSON `site_data` : chargé avec
load_document(), réécrit avec dump_site_data().
"""
import logging
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from page_editor import dump_site_data, load_document, serialize

from ...database import (
    get_db, jd, jl, jo,
    db_create_site, db_delete_site, db_get_site, db_get_site_by_subdomain,
    db_get_template, db_list_user_sites, db_update_site,
)
from ...models import PublishInput, SiteCreate, SiteDB, SiteStatus, SiteStatusUpdate, SiteUpdate, can_transition
from ...templates import default_document, document_from_template

log = logging.getLogger(__name__)
router = APIRouter(prefix="/api/sites", tags=["Sites"])


def _site_dict(site: SiteDB) -> dict:
    return {
        "id":            site.id,
        "user_id":       site.user_id,
        "template_id":   site.template_id,
        "name":          site.name,
        "subdomain":     site.subdomain,
        "custom_domain": site.custom_domain,
        "site_data":     jo(site.site_data),
        "status":        site.status,
        "published_at":  site.published_at.isoformat() if site.published_at else None,
        "created_at":    site.created_at.isoformat() if site.created_at else None,
        "updated_at":    site.updated_at.isoformat() if site.updated_at else None,
    }


def _get_or_404(db: Session, site_id: int) -> SiteDB:
    site = db_get_site(db, site_id)
    if not site:
        raise HTTPException(404, "Site introuvable")
    return site


def _checked_site_data(site_data: dict) -> str:
    """Valide un site_data reçu et renvoie sa forme normalisée (JSON)."""
    try:
        return jd(dump_site_data(load_document(site_data)))
    except ValueError as e:
        raise HTTPException(400, f"site_data invalide : {e}")


@router.post("", status_code=201)
def create_site(data: SiteCreate, db: Session = Depends(get_db)):
    if db_get_site_by_subdomain(db, data.subdomain):
        raise HTTPException(409, f"Sous-domaine déjà utilisé : {data.subdomain}")

    if data.site_data is not None:
        site_data = _checked_site_data(data.site_data)
    elif data.template_id is not None:
        template = db_get_template(db, data.template_id)
        if not template:
            raise HTTPException(404, "Template introuvable")
        document = document_from_template(jo(template.template_data), jl(template.color_schemes))
        site_data = jd(dump_site_data(document))
    else:
        site_data = jd(dump_site_data(default_document()))

    site = db_create_site(db, SiteDB(
        user_id=data.user_id,
        template_id=data.template_id,
        name=data.name,
        subdomain=data.subdomain,
        custom_domain=data.custom_domain,
        site_data=site_data,
        status=SiteStatus.DRAFT.value,
    ))
    log.info("Site créé : %s (%s)", site.id, site.subdomain)
    return _site_dict(site)


@router.get("/user/{user_id}")
def list_user_sites(user_id: int, db: Session = Depends(get_db)):
    return [_site_dict(s) for s in db_list_user_sites(db, user_id)]


@router.get("/{site_id}")
def get_site(site_id: int, db: Session = Depends(get_db)):
    return _site_dict(_get_or_404(db, site_id))


@router.patch("/{site_id}")
def update_site(site_id: int, data: SiteUpdate, db: Session = Depends(get_db)):
    site = _get_or_404(db, site_id)
    changes = data.model_dump(exclude_unset=True)
    if changes.get("site_data") is not None:
        changes["site_data"] = _checked_site_data(changes["site_data"])
    else:
        changes.pop("site_data", None)
    if not changes.get("name"):
        changes.pop("name", None)
    site = db_update_site(db, site, **changes)
    return _site_dict(site)


@router.patch("/{site_id}/status")
def update_status(site_id: int, data: SiteStatusUpdate, db: Session = Depends(get_db)):
    site = _get_or_404(db, site_id)
    target = data.status.value
    if not can_transition(site.status, target):
        raise HTTPException(400, f"Transition {site.status} → {target} interdite")
    extra = {"published_at": datetime.utcnow()} if target == SiteStatus.LIVE.value else {}
    site = db_update_site(db, site, status=target, **extra)
    return _site_dict(site)


@router.post("/{site_id}/publish")
def publish_site(site_id: int, data: PublishInput = PublishInput(), db: Session = Depends(get_db)):
    """Génère le HTML publié et passe le site en ligne."""
    site = _get_or_404(db, site_id)
    try:
        document = load_document(site.site_data)
    except ValueError as e:
        raise HTTPException(400, f"site_data stocké illisible : {e}")

    html = serialize(document, title=site.name, lang=data.lang)
    status = site.status
    if status != SiteStatus.LIVE.value:
        if not can_transition(status, SiteStatus.LIVE.value):
            raise HTTPException(400, f"Transition {status} → live interdite")
        status = SiteStatus.LIVE.value
    site = db_update_site(db, site, status=status, published_at=datetime.utcnow())
    log.info("Site %s publié (%d octets)", site.id, len(html))
    return {**_site_dict(site), "html": html}


@router.get("/{site_id}/preview", response_class=HTMLResponse)
def preview_site(site_id: int, db: Session = Depends(get_db)):
    site = _get_or_404(db, site_id)
    try:
        document = load_document(site.site_data)
    except ValueError as e:
        raise HTTPException(400, f"site_data stocké illisible : {e}")
    return HTMLResponse(serialize(document, title=site.name))


@router.delete("/{site_id}")
def delete_site(site_id: int, db: Session = Depends(get_db)):
    site = _get_or_404(db, site_id)
    db_delete_site(db, site)
    return {"deleted": True, "id": site_id}
