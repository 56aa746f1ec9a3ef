"""
Base component data for investor-relations layouts.

Turns a Company (plus CMS content when enabled) into the plain mapping that
layouts overlay with their own data and hand to a component cluster. Keys are
camelCase because descriptors and section renderers read them as-is.
"""
from __future__ import annotations

import logging
import os
from typing import Any, Optional

from fastapi.concurrency import run_in_threadpool

from models import BOARD_ROLES, Company, Leader, PressRelease
from rendering.format_utils import format_compact_currency, format_date, format_number
from site_store import SiteRepository

_LOG = logging.getLogger("uvicorn.error")

PRESS_RELEASE_LIMIT = max(1, int(os.getenv("PRESS_RELEASE_LIMIT", "6")))


class ComponentDataError(RuntimeError):
    """Base component data could not be prepared (CMS unreachable, bad rows)."""


def _leader_dict(leader: Leader) -> dict[str, Any]:
    return {
        "id": leader.id,
        "name": leader.name,
        "title": leader.title or "",
        "role": leader.role,
        "bio": leader.bio or "",
        "photoUrl": leader.photo_url or "",
    }


def _press_release_dict(release: PressRelease) -> dict[str, Any]:
    return {
        "id": release.id,
        "title": release.title,
        "summary": release.summary or "",
        "url": release.url or "",
        "publishedAt": format_date(release.published_at),
    }


def _company_metrics(company: Company) -> dict[str, str]:
    metrics: dict[str, str] = {}
    if company.market_cap is not None:
        metrics["marketCap"] = format_compact_currency(company.market_cap)
    if company.employee_count is not None:
        metrics["employees"] = format_number(company.employee_count)
    if company.founded_year is not None:
        metrics["founded"] = str(company.founded_year)
    return metrics


def is_board_member(leader: Leader) -> bool:
    return (leader.role or "").strip().lower() in BOARD_ROLES


async def _fetch_cms_content(
    company: Company, repository: SiteRepository, limit: int
) -> tuple[list[PressRelease], list[Leader]]:
    try:
        releases = await run_in_threadpool(repository.list_press_releases, company.id, limit)
        leaders = await run_in_threadpool(repository.list_leaders, company.id)
    except Exception as e:
        _LOG.error("cms_fetch_failed company_id=%s error=%s", company.id, e)
        raise ComponentDataError(f"CMS content unavailable for company {company.name!r}") from e
    return list(releases), list(leaders)


async def prepare_component_data(
    company: Company,
    cms_enabled: bool,
    *,
    repository: Optional[SiteRepository] = None,
    press_release_limit: int = PRESS_RELEASE_LIMIT,
) -> dict[str, Any]:
    """
    Build base component data for a company.

    With cms_enabled and a repository, press releases and leaders come from the
    CMS; releases fall back to the ones embedded in the company record when the
    CMS has none. Board members are the leaders with a board role.
    Raises ComponentDataError when the CMS fetch fails.
    """
    releases: list[PressRelease] = []
    leaders: list[Leader] = []
    if cms_enabled and repository is not None:
        releases, leaders = await _fetch_cms_content(company, repository, press_release_limit)
    if not releases:
        releases = list(company.press_releases)[:press_release_limit]

    board = [_leader_dict(leader) for leader in leaders if is_board_member(leader)]
    executives = [_leader_dict(leader) for leader in leaders if not is_board_member(leader)]

    return {
        "company": {
            "id": company.id,
            "name": company.name,
            "ticker": company.ticker or "",
            "tagline": company.tagline or "",
            "description": company.description or "",
            "website": company.website or "",
            "logoUrl": company.logo_url or "",
        },
        "hero": {
            "title": company.name,
            "subtitle": company.tagline or company.description or "",
            "ctaLabel": "Explore our impact",
            "ctaHref": "#esg",
        },
        "metrics": _company_metrics(company),
        "governance": {"boardMembers": board},
        "leadership": executives,
        "pressReleases": [_press_release_dict(r) for r in releases],
        "contact": {
            "email": company.ir_email or "",
            "phone": company.ir_phone or "",
            "address": company.address or "",
            "website": company.website or "",
        },
    }
