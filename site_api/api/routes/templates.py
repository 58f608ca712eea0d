"""Templates — catalogue des templates de site."""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from page_editor import dump_site_data

from ...database import get_db, jl, jo, db_get_template, db_list_templates
from ...models import TemplateDB
from ...templates import document_from_template

router = APIRouter(prefix="/api/templates", tags=["Templates"])


def _template_dict(t: TemplateDB) -> dict:
    return {
        "id":            t.id,
        "name":          t.name,
        "description":   t.description,
        "category":      t.category,
        "template_data": jo(t.template_data),
        "color_schemes": jl(t.color_schemes),
        "preview_url":   t.preview_url,
        "features":      jl(t.features),
        "seo_optimized": t.seo_optimized,
    }


@router.get("")
def list_templates(category: Optional[str] = None, db: Session = Depends(get_db)):
    return [_template_dict(t) for t in db_list_templates(db, category)]


@router.get("/{template_id}")
def get_template(template_id: int, db: Session = Depends(get_db)):
    t = db_get_template(db, template_id)
    if not t:
        raise HTTPException(404, "Template introuvable")
    return _template_dict(t)


@router.get("/{template_id}/site-data")
def template_site_data(template_id: int, db: Session = Depends(get_db)):
    """Document initial qu'un site créé depuis ce template recevra."""
    t = db_get_template(db, template_id)
    if not t:
        raise HTTPException(404, "Template introuvable")
    return dump_site_data(document_from_template(jo(t.template_data), jl(t.color_schemes)))
