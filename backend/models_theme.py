"""Default theme tokens for site layouts."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class LayoutDefaults(BaseModel):
    """Hard-coded fallbacks used when neither theme nor company sets a token."""
    model_config = ConfigDict(frozen=True)

    primary_color: str
    accent_color: str
    background_color: str
    text_color: str
    primary_font: str
    # None means "same as the resolved primary font"
    secondary_font: Optional[str] = None


ESG_GUARDIAN_DEFAULT_THEME = LayoutDefaults(
    primary_color="#065F46",
    accent_color="#10B981",
    background_color="#F0FDF4",
    text_color="#1F2937",
    primary_font="Lora",
)
