"""
Public site rendering: stored company sites and ad-hoc previews.
Layout is selected by the template; theme and template may be absent.
"""
from __future__ import annotations

import logging
import os
from functools import partial
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from db.session import get_db
from layouts import get_layout, render_document, render_layout
from models import Company, SitePreviewRequest, Template, Theme
from services.component_data import ComponentDataError, prepare_component_data
from site_store import SiteRepository, SqlSiteRepository

router = APIRouter(prefix="/sites", tags=["sites"])

_LOG = logging.getLogger("uvicorn.error")

CMS_ENABLED = os.getenv("CMS_ENABLED", "true").strip().lower() not in {"0", "false", "no", "off"}


def get_site_repository(db: Session = Depends(get_db)) -> SiteRepository:
    return SqlSiteRepository(db)


async def _render_site(
    company: Company,
    template: Optional[Template],
    theme: Optional[Theme],
    repository: SiteRepository,
) -> HTMLResponse:
    layout = get_layout(template.layout if template else None)
    if layout is None:
        raise HTTPException(status_code=400, detail=f"Unknown layout: {template.layout if template else ''}")

    # Previews without a company id have nothing stored to look up.
    cms_repository = repository if CMS_ENABLED and company.id else None
    prepare = partial(prepare_component_data, repository=cms_repository)
    try:
        fragment = await render_layout(layout, company, template, theme, prepare=prepare)
    except ComponentDataError as e:
        _LOG.error("site_render_failed company=%s layout=%s error=%s", company.slug or company.name, layout.slug, e)
        raise HTTPException(
            status_code=503,
            detail="Site content is temporarily unavailable. Please retry shortly.",
        ) from e

    _LOG.info(
        "site_rendered company=%s layout=%s template=%s theme=%s",
        company.slug or company.name,
        layout.slug,
        template.id if template else "-",
        theme.id if theme else "-",
    )
    return HTMLResponse(render_document(fragment, company))


@router.post("/preview", response_class=HTMLResponse)
async def preview_site(
    req: SitePreviewRequest,
    repository: SiteRepository = Depends(get_site_repository),
) -> HTMLResponse:
    """Render a site from a company/template/theme payload without storing anything."""
    return await _render_site(req.company, req.template, req.theme, repository)


@router.get("/{slug}", response_class=HTMLResponse)
async def get_site(
    slug: str,
    template_id: Optional[str] = None,
    theme_id: Optional[str] = None,
    repository: SiteRepository = Depends(get_site_repository),
) -> HTMLResponse:
    """
    Render a stored company's site. template_id / theme_id override the
    company's assigned template and theme; unknown ids are 404.
    """
    site = await run_in_threadpool(repository.get_site, slug)
    if site is None:
        raise HTTPException(status_code=404, detail="Site not found")

    template = site.template
    if template_id:
        template = await run_in_threadpool(repository.get_template, template_id)
        if template is None:
            raise HTTPException(status_code=404, detail=f"Template not found: {template_id}")

    theme = site.theme
    if theme_id:
        theme = await run_in_threadpool(repository.get_theme, theme_id)
        if theme is None:
            raise HTTPException(status_code=404, detail=f"Theme not found: {theme_id}")

    return await _render_site(site.company, template, theme, repository)
