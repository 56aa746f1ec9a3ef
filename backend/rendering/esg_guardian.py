"""
ESG Guardian layout.

Sustainability-first investor-relations page: impact figures up top, then the
ESG priorities, certifications and governance sections.

The layout prepares base data (with CMS content), overlays ESG-specific data,
picks the esgGuardian component cluster, resolves theme tokens and renders the
page chrome around the composed components.
"""
from __future__ import annotations

import copy
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

from models import Company, EsgCategory, Template, Theme
from models_theme import ESG_GUARDIAN_DEFAULT_THEME, LayoutDefaults
from services.component_data import prepare_component_data

from .component_config import ComponentDescriptor, resolve_cluster
from .composer import compose_components
from .format_utils import esc

CLUSTER_NAME = "esgGuardian"

PrepareFn = Callable[[Company, bool], Awaitable[dict[str, Any]]]
ClusterFn = Callable[[str, dict[str, Any]], list[ComponentDescriptor]]
ComposeFn = Callable[[Optional[Template], Optional[Theme], Company, list[ComponentDescriptor]], str]

NAV_ITEMS: tuple[tuple[str, str], ...] = (
    ("ESG", "#esg"),
    ("Sustainability", "#sustainability"),
    ("Governance", "#governance"),
    ("Contact", "#contact"),
)

# Keys merged key-wise instead of replaced.
NESTED_MERGE_KEYS = ("metrics", "governance")

_ESG_OVERLAY: dict[str, Any] = {
    "metrics": {
        "co2": "45%",
        "community": "$2.5M",
        "diversity": "60%",
    },
    "pillars": [
        {
            "id": "environmental",
            "title": "Environmental",
            "description": (
                "Our commitment to reducing environmental impact through sustainable practices "
                "and renewable energy initiatives."
            ),
        },
        {
            "id": "social",
            "title": "Social",
            "description": (
                "Building inclusive communities, supporting diversity, and creating positive "
                "social impact through our operations."
            ),
        },
        {
            "id": "governance",
            "title": "Governance",
            "description": (
                "Strong ethical leadership, transparent reporting, and accountable governance "
                "structures that drive long-term value."
            ),
        },
    ],
    "esg": {
        "metrics": {
            "co2Reduction": "45%",
            "communityImpact": "$2.5M invested",
            "boardDiversity": "60% diverse representation",
            "energyUsage": "100% renewable",
            "wasteReduction": "85% reduction",
        },
        "priorities": [
            {
                "id": "climate",
                "category": EsgCategory.ENVIRONMENTAL.value,
                "title": "Climate Action",
                "description": (
                    "Net-zero emissions by 2030 through renewable energy transition and carbon "
                    "offset programs."
                ),
            },
            {
                "id": "diversity",
                "category": EsgCategory.SOCIAL.value,
                "title": "Diversity & Inclusion",
                "description": (
                    "Building diverse teams and inclusive workplaces that reflect the communities we serve."
                ),
            },
            {
                "id": "governance",
                "category": EsgCategory.GOVERNANCE.value,
                "title": "Ethical Governance",
                "description": (
                    "Transparent reporting, ethical leadership, and strong corporate governance practices."
                ),
            },
        ],
        "certifications": [
            {"id": "bcorp", "name": "B Corporation", "issuer": "B Lab", "date": "2023"},
            {"id": "carbon-neutral", "name": "Carbon Neutral", "issuer": "Carbon Trust", "date": "2024"},
        ],
    },
    "governance": {
        # Board members come from the CMS in the base data.
        "committees": [
            {
                "id": "sustainability",
                "name": "Sustainability Committee",
                "description": "Oversees environmental initiatives and sustainability reporting.",
            },
            {
                "id": "diversity",
                "name": "Diversity & Inclusion Committee",
                "description": "Promotes diversity, equity, and inclusion across the organization.",
            },
        ],
        "policies": [],
    },
}


@dataclass(frozen=True)
class ThemeTokens:
    primary_color: str
    accent_color: str
    background_color: str
    text_color: str
    primary_font: str
    secondary_font: str

    def css_variables(self) -> dict[str, str]:
        return {
            "--primary-color": self.primary_color,
            "--accent-color": self.accent_color,
            "--background-color": self.background_color,
            "--text-color": self.text_color,
            "--primary-font": self.primary_font,
            "--secondary-font": self.secondary_font,
        }


@dataclass(frozen=True)
class LayoutAssembly:
    component_data: dict[str, Any]
    components: list[ComponentDescriptor]
    tokens: ThemeTokens


def build_esg_overlay() -> dict[str, Any]:
    return copy.deepcopy(_ESG_OVERLAY)


def merge_component_data(base: Mapping[str, Any], overlay: Mapping[str, Any]) -> dict[str, Any]:
    """
    Overlay wins at the top level. For NESTED_MERGE_KEYS both sides are merged
    key-wise (overlay wins on collision, base-only keys survive). Every other
    overlay key, e.g. pillars or esg, replaces the base value wholesale.
    Neither input is mutated.
    """
    merged = dict(base)
    for key, value in overlay.items():
        if key in NESTED_MERGE_KEYS and isinstance(value, Mapping):
            base_value = base.get(key)
            nested = dict(base_value) if isinstance(base_value, Mapping) else {}
            nested.update(value)
            merged[key] = nested
        else:
            merged[key] = value
    return merged


_COLOR_RE = re.compile(
    r"#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})"
    r"|(?:rgb|rgba|hsl|hsla)\([0-9.,%\s/]*\d[0-9.,%\s/deg]*\)"
)
_FONT_RE = re.compile(r"[\w\s,'\"-]{1,120}")

# CSS Color Module Level 4 named colors.
CSS_NAMED_COLORS = frozenset("""
aliceblue antiquewhite aqua aquamarine azure beige bisque black blanchedalmond blue
blueviolet brown burlywood cadetblue chartreuse chocolate coral cornflowerblue cornsilk
crimson cyan darkblue darkcyan darkgoldenrod darkgray darkgreen darkgrey darkkhaki
darkmagenta darkolivegreen darkorange darkorchid darkred darksalmon darkseagreen
darkslateblue darkslategray darkslategrey darkturquoise darkviolet deeppink deepskyblue
dimgray dimgrey dodgerblue firebrick floralwhite forestgreen fuchsia gainsboro ghostwhite
gold goldenrod gray green greenyellow grey honeydew hotpink indianred indigo ivory khaki
lavender lavenderblush lawngreen lemonchiffon lightblue lightcoral lightcyan
lightgoldenrodyellow lightgray lightgreen lightgrey lightpink lightsalmon lightseagreen
lightskyblue lightslategray lightslategrey lightsteelblue lightyellow lime limegreen linen
magenta maroon mediumaquamarine mediumblue mediumorchid mediumpurple mediumseagreen
mediumslateblue mediumspringgreen mediumturquoise mediumvioletred midnightblue mintcream
mistyrose moccasin navajowhite navy oldlace olive olivedrab orange orangered orchid
palegoldenrod palegreen paleturquoise palevioletred papayawhip peachpuff peru pink plum
powderblue purple rebeccapurple red rosybrown royalblue saddlebrown salmon sandybrown
seagreen seashell sienna silver skyblue slateblue slategray slategrey snow springgreen
steelblue tan teal thistle tomato turquoise violet wheat white whitesmoke yellow yellowgreen
""".split())


def _clean(value: Any) -> str:
    return str(value).strip() if value is not None else ""


def _color(value: Any) -> str:
    text = _clean(value)
    if text.lower() in CSS_NAMED_COLORS or _COLOR_RE.fullmatch(text):
        return text
    return ""


def _font(value: Any) -> str:
    text = _clean(value)
    return text if text and _FONT_RE.fullmatch(text) else ""


def _first(*candidates: str) -> str:
    for candidate in candidates:
        if candidate:
            return candidate
    return ""


def resolve_theme_tokens(
    theme: Optional[Theme],
    company: Company,
    defaults: LayoutDefaults = ESG_GUARDIAN_DEFAULT_THEME,
) -> ThemeTokens:
    """
    Colors: theme -> layout default. Primary font: theme -> company -> default.
    Secondary font: theme -> company -> layout secondary -> resolved primary font.
    Blank or malformed values fall through to the next link.
    """
    colors = theme.colors if theme else None
    typography = theme.typography if theme else None

    primary_font = _first(
        _font(typography.primary_font if typography else None),
        _font(company.primary_font_family),
        defaults.primary_font,
    )
    secondary_font = _first(
        _font(typography.secondary_font if typography else None),
        _font(company.secondary_font_family),
        defaults.secondary_font or "",
        primary_font,
    )
    return ThemeTokens(
        primary_color=_first(_color(colors.primary if colors else None), defaults.primary_color),
        accent_color=_first(_color(colors.accent if colors else None), defaults.accent_color),
        background_color=_first(_color(colors.background if colors else None), defaults.background_color),
        text_color=_first(_color(colors.text if colors else None), defaults.text_color),
        primary_font=primary_font,
        secondary_font=secondary_font,
    )


def _tinted(color: str, alpha_hex: str = "20") -> str:
    """#RRGGBB -> #RRGGBBAA; other color forms are returned unchanged."""
    if re.fullmatch(r"#[0-9a-fA-F]{6}", color):
        return f"{color}{alpha_hex}"
    return color


def _style(declarations: Mapping[str, str]) -> str:
    return "; ".join(f"{name}: {value}" for name, value in declarations.items())


def render_theme_variables(tokens: ThemeTokens) -> str:
    body = "\n".join(f"    {name}: {value};" for name, value in tokens.css_variables().items())
    return f"<style>\n  :root {{\n{body}\n  }}\n</style>"


def render_header(company: Company, tokens: ThemeTokens) -> str:
    logo = (
        f'<img src="{esc(company.logo_url)}" alt="{esc(company.name)} Logo" class="h-12" />'
        if company.logo_url
        else ""
    )
    nav = "".join(
        f'<li><a href="{esc(href)}" class="hover:underline" style="color: {esc(tokens.text_color)}">{esc(label)}</a></li>'
        for label, href in NAV_ITEMS
    )
    header_style = _style({
        "border-color": _tinted(tokens.primary_color),
        "background-color": tokens.background_color,
    })
    return f"""
    <header class="border-b sticky top-0 z-50 bg-white" style="{esc(header_style)}">
      <div class="container mx-auto px-4 py-4">
        <div class="flex items-center justify-between">
          <div class="flex items-center gap-4">
            {logo}
            <h1 class="text-2xl font-bold" style="color: {esc(tokens.primary_color)}">{esc(company.name)}</h1>
          </div>
          <nav>
            <ul class="flex items-center gap-6">{nav}</ul>
          </nav>
        </div>
      </div>
    </header>
    """.strip()


async def _default_prepare(company: Company, cms_enabled: bool) -> dict[str, Any]:
    """
    No repository is wired here, so only the company record's own content is
    used. Callers that serve CMS content pass a prepare bound to a repository
    (see routes.sites).
    """
    return await prepare_component_data(company, cms_enabled)


async def assemble_esg_guardian(
    company: Company,
    template: Optional[Template],
    theme: Optional[Theme],
    *,
    prepare: PrepareFn = _default_prepare,
    clusters: ClusterFn = resolve_cluster,
    defaults: LayoutDefaults = ESG_GUARDIAN_DEFAULT_THEME,
) -> LayoutAssembly:
    """Prepare and merge data, pick the component cluster, resolve tokens."""
    base_data = await prepare(company, True)
    component_data = merge_component_data(base_data, build_esg_overlay())
    components = clusters(CLUSTER_NAME, component_data)
    tokens = resolve_theme_tokens(theme, company, defaults)
    return LayoutAssembly(component_data=component_data, components=components, tokens=tokens)


async def render_esg_guardian_layout(
    company: Company,
    template: Optional[Template],
    theme: Optional[Theme],
    *,
    prepare: PrepareFn = _default_prepare,
    clusters: ClusterFn = resolve_cluster,
    composer: ComposeFn = compose_components,
    defaults: LayoutDefaults = ESG_GUARDIAN_DEFAULT_THEME,
) -> str:
    """
    Render the ESG Guardian page fragment. Data-preparation errors propagate
    to the caller unchanged.
    """
    assembly = await assemble_esg_guardian(
        company, template, theme, prepare=prepare, clusters=clusters, defaults=defaults
    )
    tokens = assembly.tokens
    wrapper_style = _style({
        "background-color": tokens.background_color,
        "color": tokens.text_color,
        "font-family": tokens.primary_font,
        "min-height": "100vh",
    })
    body = composer(template, theme, company, assembly.components)
    return f"""
<div class="ir-site esg-guardian" style="{esc(wrapper_style)}">
{render_theme_variables(tokens)}
{render_header(company, tokens)}
{body}
</div>
""".strip()
