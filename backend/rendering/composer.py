"""
Component composer: renders an ordered list of component descriptors to HTML.

Sections read colors and fonts only through the CSS custom properties the
layout exposes (--primary-color, --accent-color, ...), so a composer call
needs no theme resolution of its own. Output is static HTML, no runtime JS.
"""
from __future__ import annotations

import logging
import re
from typing import Any, Callable, Optional

from models import Company, Template, Theme

from .component_config import ComponentDescriptor
from .format_utils import esc

_LOG = logging.getLogger("uvicorn.error")

METRIC_LABELS = {
    "co2": "CO₂ Reduction",
    "community": "Community Investment",
    "diversity": "Diverse Leadership",
    "marketCap": "Market Cap",
    "employees": "Employees",
    "founded": "Founded",
    "co2Reduction": "CO₂ Reduction",
    "communityImpact": "Community Impact",
    "boardDiversity": "Board Diversity",
    "energyUsage": "Energy Usage",
    "wasteReduction": "Waste Reduction",
}


def metric_label(key: str) -> str:
    if key in METRIC_LABELS:
        return METRIC_LABELS[key]
    words = re.sub(r"(?<!^)(?=[A-Z])", " ", key).replace("_", " ").split()
    return " ".join(words).capitalize()


def SectionTitle(kicker: str, title: str, subtitle: str = "") -> str:
    return f"""
    <div class="section-title-wrap">
      <p class="kicker" style="color: var(--accent-color)">{esc(kicker)}</p>
      <h2 class="section-title" style="color: var(--primary-color); font-family: var(--secondary-font)">{esc(title)}</h2>
      {f'<p class="section-subtitle">{esc(subtitle)}</p>' if subtitle else ""}
    </div>
    """


def KpiTilesRow(items: list[tuple[str, str]]) -> str:
    tiles = "".join(
        f"""
        <div class="kpi-tile">
          <div class="kpi-value" style="color: var(--primary-color)">{esc(value)}</div>
          <div class="kpi-label">{esc(label)}</div>
        </div>
        """
        for label, value in items
    )
    return f'<div class="kpi-grid">{tiles}</div>'


def _section(section_id: str, body: str, css_class: str) -> str:
    return f'<section id="{esc(section_id)}" class="ir-section {css_class}">{body}</section>'


def Hero(props: dict[str, Any], section_id: str) -> str:
    cta = ""
    if props.get("ctaLabel") and props.get("ctaHref"):
        cta = (
            f'<a class="hero-cta" href="{esc(props["ctaHref"])}" '
            f'style="background-color: var(--accent-color)">{esc(props["ctaLabel"])}</a>'
        )
    subtitle = f'<p class="hero-subtitle">{esc(props["subtitle"])}</p>' if props.get("subtitle") else ""
    body = f"""
    <div class="hero-inner">
      <h2 class="hero-title" style="color: var(--primary-color); font-family: var(--secondary-font)">{esc(props.get("title", ""))}</h2>
      {subtitle}
      {cta}
    </div>
    """
    return _section(section_id, body, "hero")


def ImpactMetrics(props: dict[str, Any], section_id: str) -> str:
    def tiles(metrics: dict[str, Any]) -> list[tuple[str, str]]:
        return [(metric_label(k), str(v)) for k, v in metrics.items() if v not in (None, "")]

    headline = tiles(props.get("metrics") or {})
    performance = tiles(props.get("esgMetrics") or {})
    if not headline and not performance:
        return ""
    body = SectionTitle("Our impact", "Impact at a glance")
    if headline:
        body += KpiTilesRow(headline)
    if performance:
        body += f'<h3 class="esg-performance-title">ESG performance</h3>{KpiTilesRow(performance)}'
    return _section(section_id, body, "impact-metrics")


def Pillars(props: dict[str, Any], section_id: str) -> str:
    pillars = props.get("pillars") or []
    cards = "".join(
        f"""
        <article class="pillar-card" id="pillar-{esc(p.get("id", ""))}">
          <h3 style="color: var(--primary-color)">{esc(p.get("title", ""))}</h3>
          <p>{esc(p.get("description", ""))}</p>
        </article>
        """
        for p in pillars
    )
    return _section(section_id, SectionTitle("ESG framework", "Our pillars") + f'<div class="pillar-grid">{cards}</div>', "pillars")


def EsgPriorities(props: dict[str, Any], section_id: str) -> str:
    priorities = props.get("priorities") or []
    cards = "".join(
        f"""
        <article class="priority-card" data-category="{esc(p.get("category", ""))}">
          <span class="priority-category" style="color: var(--accent-color)">{esc(p.get("category", ""))}</span>
          <h3>{esc(p.get("title", ""))}</h3>
          <p>{esc(p.get("description", ""))}</p>
        </article>
        """
        for p in priorities
    )
    return _section(section_id, SectionTitle("ESG", "Our priorities") + f'<div class="priority-grid">{cards}</div>', "esg-priorities")


def SustainabilityHub(props: dict[str, Any], section_id: str) -> str:
    certifications = props.get("certifications") or []
    if certifications:
        rows = "".join(
            f"""
            <li class="certification">
              <strong>{esc(c.get("name", ""))}</strong>
              <span class="issuer">{esc(c.get("issuer", ""))}</span>
              <span class="date">{esc(c.get("date", ""))}</span>
            </li>
            """
            for c in certifications
        )
        listing = f'<ul class="certification-list">{rows}</ul>'
    else:
        listing = '<p class="empty">Sustainability reports will be published here.</p>'
    return _section(section_id, SectionTitle("Sustainability", "Certifications & reporting") + listing, "sustainability-hub")


def Governance(props: dict[str, Any], section_id: str) -> str:
    board = props.get("boardMembers") or []
    committees = props.get("committees") or []
    policies = props.get("policies") or []
    parts = [SectionTitle("Governance", "Accountable leadership")]
    if board:
        members = "".join(
            f"""
            <li class="board-member">
              <strong>{esc(m.get("name", ""))}</strong>
              {f'<span class="title">{esc(m["title"])}</span>' if m.get("title") else ""}
            </li>
            """
            for m in board
        )
        parts.append(f'<h3>Board of Directors</h3><ul class="board-list">{members}</ul>')
    if committees:
        items = "".join(
            f"""
            <article class="committee-card" id="committee-{esc(c.get("id", ""))}">
              <h4 style="color: var(--primary-color)">{esc(c.get("name", ""))}</h4>
              <p>{esc(c.get("description", ""))}</p>
            </article>
            """
            for c in committees
        )
        parts.append(f'<h3>Committees</h3><div class="committee-grid">{items}</div>')
    if policies:
        items = "".join(
            f'<li><a href="{esc(p.get("url", "#"))}">{esc(p.get("name") or p.get("title", ""))}</a></li>'
            for p in policies
        )
        parts.append(f'<h3>Policies</h3><ul class="policy-list">{items}</ul>')
    return _section(section_id, "".join(parts), "governance")


def PressReleases(props: dict[str, Any], section_id: str) -> str:
    releases = props.get("pressReleases") or []
    items = "".join(
        f"""
        <li class="press-release">
          {f'<time>{esc(r["publishedAt"])}</time>' if r.get("publishedAt") else ""}
          {f'<a href="{esc(r["url"])}">{esc(r.get("title", ""))}</a>' if r.get("url") else f'<span>{esc(r.get("title", ""))}</span>'}
          {f'<p>{esc(r["summary"])}</p>' if r.get("summary") else ""}
        </li>
        """
        for r in releases
    )
    return _section(section_id, SectionTitle("Newsroom", "Latest news") + f'<ul class="press-list">{items}</ul>', "press-releases")


def Contact(props: dict[str, Any], section_id: str) -> str:
    lines = []
    if props.get("email"):
        lines.append(f'<li><a href="mailto:{esc(props["email"])}">{esc(props["email"])}</a></li>')
    if props.get("phone"):
        lines.append(f'<li>{esc(props["phone"])}</li>')
    if props.get("address"):
        lines.append(f'<li>{esc(props["address"])}</li>')
    if props.get("website"):
        lines.append(f'<li><a href="{esc(props["website"])}">{esc(props["website"])}</a></li>')
    body = SectionTitle("Contact", "Investor relations")
    body += f'<ul class="contact-list">{"".join(lines)}</ul>' if lines else '<p>Contact details coming soon.</p>'
    return _section(section_id, body, "contact")


COMPONENT_RENDERERS: dict[str, Callable[[dict[str, Any], str], str]] = {
    "hero": Hero,
    "impactMetrics": ImpactMetrics,
    "pillars": Pillars,
    "esgPriorities": EsgPriorities,
    "sustainabilityHub": SustainabilityHub,
    "governance": Governance,
    "pressReleases": PressReleases,
    "contact": Contact,
}


def compose_components(
    template: Optional[Template],
    theme: Optional[Theme],
    company: Company,
    components: list[ComponentDescriptor],
) -> str:
    """Render descriptors in order. Hidden (per template) and unknown types are skipped."""
    hidden = set(template.hidden_components) if template else set()
    rendered: list[str] = []
    for component in components:
        if component.type in hidden or component.section_id in hidden:
            continue
        renderer = COMPONENT_RENDERERS.get(component.type)
        if renderer is None:
            _LOG.warning(
                "component_skipped type=%s section=%s company=%s reason=unknown_type",
                component.type,
                component.section_id,
                company.id or company.name,
            )
            continue
        rendered.append(renderer(component.props, component.section_id))
    return f'<main class="ir-components">{"".join(rendered)}</main>'
