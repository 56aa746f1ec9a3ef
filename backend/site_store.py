"""
Read access to stored sites: companies, their assigned template/theme, and CMS content.
Rows are converted to the pydantic models the renderers consume.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from sqlalchemy.orm import Session

from db.models import (
    Company as CompanyModel,
    Leader as LeaderModel,
    PressRelease as PressReleaseModel,
    Template as TemplateModel,
    Theme as ThemeModel,
)
from models import Company, Leader, PressRelease, Template, Theme


@dataclass(frozen=True)
class SiteRecord:
    company: Company
    template: Optional[Template]
    theme: Optional[Theme]


class SiteRepository(Protocol):
    def get_site(self, slug: str) -> Optional[SiteRecord]: ...

    def get_template(self, template_id: str) -> Optional[Template]: ...

    def get_theme(self, theme_id: str) -> Optional[Theme]: ...

    def list_press_releases(self, company_id: str, limit: int = 6) -> list[PressRelease]: ...

    def list_leaders(self, company_id: str) -> list[Leader]: ...


def _company_from_row(row: CompanyModel) -> Company:
    return Company(
        id=row.id,
        slug=row.slug,
        name=row.name,
        ticker=row.ticker,
        tagline=row.tagline,
        description=row.description,
        logo_url=row.logo_url,
        website=row.website,
        primary_font_family=row.primary_font_family,
        secondary_font_family=row.secondary_font_family,
        market_cap=row.market_cap,
        employee_count=row.employee_count,
        founded_year=row.founded_year,
        ir_email=row.ir_email,
        ir_phone=row.ir_phone,
        address=row.address,
    )


def _template_from_row(row: TemplateModel | None) -> Template | None:
    if row is None:
        return None
    return Template(
        id=row.id,
        name=row.name,
        layout=row.layout or "esg-guardian",
        hidden_components=list(row.hidden_components or []),
        settings=dict(row.settings or {}),
    )


def _theme_from_row(row: ThemeModel | None) -> Theme | None:
    if row is None:
        return None
    return Theme(id=row.id, name=row.name, colors=row.colors or {}, typography=row.typography or {})


class SqlSiteRepository:
    """SiteRepository backed by the request's SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    def get_site(self, slug: str) -> Optional[SiteRecord]:
        row = self.db.query(CompanyModel).filter(CompanyModel.slug == slug).first()
        if row is None:
            return None
        return SiteRecord(
            company=_company_from_row(row),
            template=_template_from_row(row.template),
            theme=_theme_from_row(row.theme),
        )

    def get_template(self, template_id: str) -> Optional[Template]:
        return _template_from_row(self.db.get(TemplateModel, template_id))

    def get_theme(self, theme_id: str) -> Optional[Theme]:
        return _theme_from_row(self.db.get(ThemeModel, theme_id))

    def list_press_releases(self, company_id: str, limit: int = 6) -> list[PressRelease]:
        rows = (
            self.db.query(PressReleaseModel)
            .filter(PressReleaseModel.company_id == company_id)
            .order_by(PressReleaseModel.published_at.desc().nulls_last(), PressReleaseModel.created_at.desc())
            .limit(limit)
            .all()
        )
        return [
            PressRelease(id=r.id, title=r.title, summary=r.summary, url=r.url, published_at=r.published_at)
            for r in rows
        ]

    def list_leaders(self, company_id: str) -> list[Leader]:
        rows = (
            self.db.query(LeaderModel)
            .filter(LeaderModel.company_id == company_id)
            .order_by(LeaderModel.sort_order, LeaderModel.name)
            .all()
        )
        return [
            Leader(id=r.id, name=r.name, title=r.title, role=r.role, bio=r.bio, photo_url=r.photo_url)
            for r in rows
        ]
