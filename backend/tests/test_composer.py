from __future__ import annotations

import logging

from models import Company, Template
from rendering.component_config import ComponentDescriptor, resolve_cluster
from rendering.composer import compose_components, metric_label
from rendering.esg_guardian import build_esg_overlay, merge_component_data


def _components(**extra) -> list[ComponentDescriptor]:
    base = {
        "hero": {"title": "Greenfield", "subtitle": "Clean power", "ctaLabel": "Explore", "ctaHref": "#esg"},
        "metrics": {"marketCap": "$4.4B"},
        "governance": {"boardMembers": [{"name": "Dana Whitfield", "title": "Chair"}]},
        "pressReleases": [{"title": "Q2 results", "url": "https://example.com/q2", "publishedAt": "July 30, 2026"}],
        "contact": {"email": "ir@greenfield.example", "phone": "+1 555 010 2200"},
    }
    base.update(extra)
    return resolve_cluster("esgGuardian", merge_component_data(base, build_esg_overlay()))


def test_sections_render_in_descriptor_order(company):
    html = compose_components(None, None, company, _components())
    assert html.startswith('<main class="ir-components">')
    order = ['id="top"', 'id="impact"', 'id="pillars"', 'id="esg"', 'id="sustainability"', 'id="governance"', 'id="news"', 'id="contact"']
    positions = [html.index(marker) for marker in order]
    assert positions == sorted(positions)


def test_section_content(company):
    html = compose_components(None, None, company, _components())
    assert "Market Cap" in html and "$4.4B" in html
    assert "CO₂ Reduction" in html and "45%" in html
    assert "100% renewable" in html
    assert "Environmental" in html and "Social" in html and "Governance" in html
    assert 'data-category="Environmental"' in html
    assert "Carbon Trust" in html
    assert "Dana Whitfield" in html and "Board of Directors" in html
    assert "Diversity &amp; Inclusion Committee" in html
    assert "Policies" not in html
    assert '<a href="https://example.com/q2">Q2 results</a>' in html
    assert 'href="mailto:ir@greenfield.example"' in html


def test_sections_use_theme_css_variables(company):
    html = compose_components(None, None, company, _components())
    assert "var(--primary-color)" in html
    assert "var(--accent-color)" in html


def test_template_hides_components_by_section_or_type(company):
    template = Template(hidden_components=["news", "pillars"])
    html = compose_components(template, None, company, _components())
    assert 'id="news"' not in html
    assert 'id="pillars"' not in html
    assert 'id="esg"' in html


def test_unknown_component_type_is_skipped_and_logged(company, caplog):
    components = [ComponentDescriptor("carousel", "gallery", {}), ComponentDescriptor("contact", "contact", {})]
    with caplog.at_level(logging.WARNING, logger="uvicorn.error"):
        html = compose_components(None, None, company, components)
    assert 'id="gallery"' not in html
    assert 'id="contact"' in html
    assert "Contact details coming soon." in html
    assert any("component_skipped" in r.getMessage() for r in caplog.records)


def test_props_are_escaped():
    company = Company(name="Greenfield")
    components = [ComponentDescriptor("hero", "top", {"title": "<b>Bold</b>", "subtitle": "a & b"})]
    html = compose_components(None, None, company, components)
    assert "&lt;b&gt;Bold&lt;/b&gt;" in html
    assert "a &amp; b" in html
    assert "hero-cta" not in html


def test_empty_metrics_section_is_omitted(company):
    components = [ComponentDescriptor("impactMetrics", "impact", {"metrics": {}, "esgMetrics": {}})]
    assert compose_components(None, None, company, components) == '<main class="ir-components"></main>'


def test_metric_label_fallback_splits_camel_case():
    assert metric_label("co2") == "CO₂ Reduction"
    assert metric_label("scope3Emissions") == "Scope3 emissions"
    assert metric_label("water_usage") == "Water usage"
