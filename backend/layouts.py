"""In-repo registry of site layouts: slug -> display info, default theme, renderer."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

from models import Company, LayoutSummary, Template, Theme
from models_theme import ESG_GUARDIAN_DEFAULT_THEME, LayoutDefaults
from rendering.esg_guardian import render_esg_guardian_layout
from rendering.format_utils import esc

DEFAULT_LAYOUT = "esg-guardian"

LayoutRenderer = Callable[..., Awaitable[str]]


@dataclass(frozen=True)
class Layout:
    slug: str
    name: str
    description: str
    defaults: LayoutDefaults
    render: LayoutRenderer

    def summary(self) -> LayoutSummary:
        return LayoutSummary(
            slug=self.slug,
            name=self.name,
            description=self.description,
            primary_color=self.defaults.primary_color,
            accent_color=self.defaults.accent_color,
            background_color=self.defaults.background_color,
            text_color=self.defaults.text_color,
            primary_font=self.defaults.primary_font,
        )


LAYOUTS: dict[str, Layout] = {
    "esg-guardian": Layout(
        slug="esg-guardian",
        name="ESG Guardian",
        description=(
            "Sustainability-first investor relations: impact figures, ESG priorities, "
            "certifications and governance committees."
        ),
        defaults=ESG_GUARDIAN_DEFAULT_THEME,
        render=render_esg_guardian_layout,
    ),
}


def get_layout(slug: str | None) -> Layout | None:
    return LAYOUTS.get((slug or DEFAULT_LAYOUT).strip().lower())


def list_layouts() -> list[Layout]:
    return list(LAYOUTS.values())


async def render_layout(
    layout: Layout,
    company: Company,
    template: Optional[Template],
    theme: Optional[Theme],
    **collaborators: Any,
) -> str:
    return await layout.render(company, template, theme, defaults=layout.defaults, **collaborators)


def render_document(fragment: str, company: Company) -> str:
    """Wrap a layout fragment in a standalone HTML page."""
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>{esc(company.name)} · Investor Relations</title>
</head>
<body style="margin: 0">
{fragment}
</body>
</html>
"""
