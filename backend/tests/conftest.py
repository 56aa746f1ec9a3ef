"""Add backend to path so tests can use direct imports (`from models import ...`) when run from project root."""
import os
import sys

# Keep the SQLAlchemy engine off Postgres during tests; repositories are faked.
os.environ.setdefault("DATABASE_URL", "sqlite://")

_backend_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _backend_dir not in sys.path:
    sys.path.insert(0, _backend_dir)

from typing import Optional

import pytest

from models import Company, Leader, PressRelease, Template, Theme
from site_store import SiteRecord


class InMemorySiteRepository:
    """SiteRepository over plain dicts; optionally fails CMS reads."""

    def __init__(
        self,
        sites: Optional[dict[str, SiteRecord]] = None,
        templates: Optional[dict[str, Template]] = None,
        themes: Optional[dict[str, Theme]] = None,
        press_releases: Optional[dict[str, list[PressRelease]]] = None,
        leaders: Optional[dict[str, list[Leader]]] = None,
        fail_cms: bool = False,
    ):
        self.sites = sites or {}
        self.templates = templates or {}
        self.themes = themes or {}
        self.press_releases = press_releases or {}
        self.leaders = leaders or {}
        self.fail_cms = fail_cms
        self.calls: list[tuple[str, str]] = []

    def get_site(self, slug: str) -> Optional[SiteRecord]:
        return self.sites.get(slug)

    def get_template(self, template_id: str) -> Optional[Template]:
        return self.templates.get(template_id)

    def get_theme(self, theme_id: str) -> Optional[Theme]:
        return self.themes.get(theme_id)

    def list_press_releases(self, company_id: str, limit: int = 6) -> list[PressRelease]:
        self.calls.append(("press_releases", company_id))
        if self.fail_cms:
            raise ConnectionError("cms down")
        return self.press_releases.get(company_id, [])[:limit]

    def list_leaders(self, company_id: str) -> list[Leader]:
        self.calls.append(("leaders", company_id))
        if self.fail_cms:
            raise ConnectionError("cms down")
        return self.leaders.get(company_id, [])


@pytest.fixture
def company() -> Company:
    return Company(
        id="cmp-1",
        slug="greenfield",
        name="Greenfield Renewables",
        tagline="Clean power for a resilient grid.",
        logo_url="https://example.com/logo.svg",
        market_cap=4_400_000_000,
        employee_count=2140,
        founded_year=2004,
        ir_email="ir@greenfield.example",
    )


@pytest.fixture
def repository(company: Company) -> InMemorySiteRepository:
    return InMemorySiteRepository(
        sites={company.slug: SiteRecord(company=company, template=None, theme=None)},
        templates={"tpl-lean": Template(id="tpl-lean", name="Lean", hidden_components=["news"])},
        themes={"theme-ocean": Theme(id="theme-ocean", name="Ocean", colors={"primary": "#0B3C5D"})},
        press_releases={
            company.id: [
                PressRelease(id="pr-1", title="Record Q2 generation", url="https://example.com/q2"),
            ]
        },
        leaders={
            company.id: [
                Leader(id="l-1", name="Dana Whitfield", title="Chair of the Board", role="chair"),
                Leader(id="l-2", name="Sam Ortiz", title="Chief Executive Officer", role="executive"),
                Leader(id="l-3", name="Priya Nair", title="Independent Director", role="director"),
            ]
        },
    )


@pytest.fixture
def repository_factory():
    return InMemorySiteRepository
