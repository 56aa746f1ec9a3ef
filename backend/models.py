from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator


class LeaderRole(str, Enum):
    EXECUTIVE = "executive"
    BOARD = "board"
    DIRECTOR = "director"
    CHAIR = "chair"


BOARD_ROLES = frozenset({LeaderRole.BOARD.value, LeaderRole.DIRECTOR.value, LeaderRole.CHAIR.value})


class EsgCategory(str, Enum):
    ENVIRONMENTAL = "Environmental"
    SOCIAL = "Social"
    GOVERNANCE = "Governance"


class PressRelease(BaseModel):
    """CMS press release shown in the news section."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = ""
    title: str
    summary: Optional[str] = None
    url: Optional[str] = None
    published_at: Optional[date] = Field(default=None, validation_alias=AliasChoices("published_at", "publishedAt"))


class Leader(BaseModel):
    """CMS leadership entry. Board membership is derived from `role`."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = ""
    name: str
    title: Optional[str] = None
    role: str = LeaderRole.EXECUTIVE.value
    bio: Optional[str] = None
    photo_url: Optional[str] = Field(default=None, validation_alias=AliasChoices("photo_url", "photoUrl"))


class Company(BaseModel):
    """
    Tenant company record used to brand and fill an investor-relations site.

    Accepts snake_case and camelCase keys (CMS payloads are camelCase).
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = ""
    slug: str = ""
    name: str = Field(min_length=1)
    ticker: Optional[str] = None
    tagline: Optional[str] = None
    description: Optional[str] = None
    logo_url: Optional[str] = Field(default=None, validation_alias=AliasChoices("logo_url", "logoUrl"))
    website: Optional[str] = None
    primary_font_family: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("primary_font_family", "primaryFontFamily")
    )
    secondary_font_family: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("secondary_font_family", "secondaryFontFamily")
    )
    market_cap: Optional[float] = Field(default=None, ge=0.0, validation_alias=AliasChoices("market_cap", "marketCap"))
    employee_count: Optional[int] = Field(
        default=None, ge=0, validation_alias=AliasChoices("employee_count", "employeeCount", "employees")
    )
    founded_year: Optional[int] = Field(default=None, validation_alias=AliasChoices("founded_year", "foundedYear"))
    ir_email: Optional[str] = Field(default=None, validation_alias=AliasChoices("ir_email", "irEmail"))
    ir_phone: Optional[str] = Field(default=None, validation_alias=AliasChoices("ir_phone", "irPhone"))
    address: Optional[str] = None
    press_releases: List[PressRelease] = Field(
        default_factory=list, validation_alias=AliasChoices("press_releases", "pressReleases")
    )

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("company name must not be blank")
        return v.strip()


class Template(BaseModel):
    """Design template: which layout to use and which components to hide."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = ""
    name: str = ""
    layout: str = "esg-guardian"
    hidden_components: List[str] = Field(
        default_factory=list, validation_alias=AliasChoices("hidden_components", "hiddenComponents")
    )
    settings: Dict[str, Any] = Field(default_factory=dict)


def _strings_only(data: Any) -> Any:
    # Stored themes are free-form JSON; non-string tokens are treated as unset.
    if isinstance(data, Mapping):
        return {k: (v if isinstance(v, str) else None) for k, v in data.items()}
    return data


class ThemeColors(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    primary: Optional[str] = None
    accent: Optional[str] = None
    background: Optional[str] = None
    text: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def non_string_as_unset(cls, data: Any) -> Any:
        return _strings_only(data)


class ThemeTypography(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    primary_font: Optional[str] = Field(default=None, validation_alias=AliasChoices("primary_font", "primaryFont"))
    secondary_font: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("secondary_font", "secondaryFont")
    )

    @model_validator(mode="before")
    @classmethod
    def non_string_as_unset(cls, data: Any) -> Any:
        return _strings_only(data)


class Theme(BaseModel):
    """Visual tokens overlaying a layout's defaults. Every field is optional."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = ""
    name: str = ""
    colors: ThemeColors = Field(default_factory=ThemeColors)
    typography: ThemeTypography = Field(default_factory=ThemeTypography)

    @field_validator("colors", "typography", mode="before")
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        return v if isinstance(v, (Mapping, BaseModel)) else {}


class SitePreviewRequest(BaseModel):
    """Request body for POST /sites/preview."""
    company: Company
    template: Optional[Template] = None
    theme: Optional[Theme] = None


class LayoutSummary(BaseModel):
    """Public description of a registered layout (GET /layouts)."""
    slug: str
    name: str
    description: str
    primary_color: str
    accent_color: str
    background_color: str
    text_color: str
    primary_font: str
