"""
Generate sample ESG Guardian site fixtures:
1) layout defaults (no template, no theme)
2) tenant theme with custom colors and fonts
3) template hiding the newsroom, company without logo

Usage:
  cd backend
  python3 scripts/generate_site_fixtures.py
"""
from __future__ import annotations

import asyncio
from datetime import date
from functools import partial
from pathlib import Path
import sys

BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from models import Company, PressRelease, Template, Theme
from rendering.esg_guardian import render_esg_guardian_layout
from layouts import render_document
from services.component_data import prepare_component_data


OUT_DIR = Path(__file__).resolve().parents[1] / "sites" / "fixtures"


def _sample_company(**overrides) -> Company:
    data = {
        "id": "cmp-greenfield",
        "slug": "greenfield",
        "name": "Greenfield Renewables",
        "ticker": "GRNF",
        "tagline": "Clean power for a resilient grid.",
        "logo_url": "https://example.com/greenfield/logo.svg",
        "market_cap": 4_350_000_000,
        "employee_count": 2140,
        "founded_year": 2004,
        "ir_email": "ir@greenfield.example",
        "ir_phone": "+1 555 010 2200",
        "address": "200 Harbor Way, Portland, OR",
        "press_releases": [
            PressRelease(
                id="pr-1",
                title="Greenfield reports record Q2 generation",
                summary="Renewable output up 18% year over year.",
                url="https://example.com/greenfield/news/q2",
                published_at=date(2026, 7, 30),
            ),
        ],
    }
    data.update(overrides)
    return Company(**data)


async def _render(company: Company, template: Template | None, theme: Theme | None) -> str:
    prepare = partial(prepare_component_data, repository=None)
    fragment = await render_esg_guardian_layout(company, template, theme, prepare=prepare)
    return render_document(fragment, company)


def main() -> None:
    OUT_DIR.mkdir(parents=True, exist_ok=True)
    fixtures = {
        "esg_guardian_defaults.html": (_sample_company(), None, None),
        "esg_guardian_tenant_theme.html": (
            _sample_company(primary_font_family="Inter"),
            None,
            Theme(
                id="theme-ocean",
                name="Ocean",
                colors={"primary": "#0B3C5D", "accent": "#328CC1", "background": "#F5FAFF", "text": "#1D2731"},
                typography={"secondaryFont": "Merriweather"},
            ),
        ),
        "esg_guardian_no_news.html": (
            _sample_company(logo_url=None),
            Template(id="tpl-lean", name="Lean", hidden_components=["news"]),
            None,
        ),
    }
    for filename, (company, template, theme) in fixtures.items():
        html = asyncio.run(_render(company, template, theme))
        path = OUT_DIR / filename
        path.write_text(html, encoding="utf-8")
        print(f"Wrote {path}")


if __name__ == "__main__":
    main()
