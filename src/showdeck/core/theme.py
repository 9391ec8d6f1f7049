"""Themes and viewer settings."""

import os
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from ..render.code import validate_code_style
from .types import validate_color


class Theme(BaseModel):
    """Read-only color palette for one presentation run."""
    model_config = {"frozen": True}

    name: str
    description: str = ""
    primary: str = "#4E8CF0"
    surface: str = "#1A1A2E"
    on_surface: str = "#E8E8F0"
    code_style: str = "monokai"

    @field_validator("primary", "surface", "on_surface")
    @classmethod
    def _check_color(cls, value: str) -> str:
        return validate_color(value)

    @field_validator("code_style")
    @classmethod
    def _check_code_style(cls, value: str) -> str:
        return validate_code_style(value)


# Built-in themes
BUILTIN_THEMES: dict[str, Theme] = {
    "dark": Theme(
        name="dark",
        description="Light text on a deep navy surface",
        primary="#4E8CF0",
        surface="#1A1A2E",
        on_surface="#E8E8F0",
        code_style="monokai",
    ),
    "light": Theme(
        name="light",
        description="Dark text on an off-white surface",
        primary="#1F5FBF",
        surface="#F5F5F5",
        on_surface="#333333",
        code_style="friendly",
    ),
}

DEFAULT_THEME = "dark"


def get_theme(name: str) -> Optional[Theme]:
    return BUILTIN_THEMES.get(name)


class ShowSettings(BaseModel):
    """Viewer configuration.

    width/height are the viewport in terminal cells for the text viewer.
    """
    theme: str = DEFAULT_THEME
    width: int = Field(default=100, ge=10)
    height: int = Field(default=30, ge=5)
    code_style: Optional[str] = None

    @field_validator("theme")
    @classmethod
    def _known_theme(cls, value: str) -> str:
        if value not in BUILTIN_THEMES:
            raise ValueError(
                f"Unknown theme '{value}'. Available: {', '.join(BUILTIN_THEMES)}"
            )
        return value

    @field_validator("code_style")
    @classmethod
    def _known_code_style(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        return validate_code_style(value)

    @classmethod
    def from_env(cls, **overrides) -> "ShowSettings":
        """Build settings from SHOWDECK_* environment variables plus overrides."""
        data = {}
        if os.getenv("SHOWDECK_THEME"):
            data["theme"] = os.environ["SHOWDECK_THEME"]
        if os.getenv("SHOWDECK_WIDTH"):
            data["width"] = int(os.environ["SHOWDECK_WIDTH"])
        if os.getenv("SHOWDECK_HEIGHT"):
            data["height"] = int(os.environ["SHOWDECK_HEIGHT"])
        if os.getenv("SHOWDECK_CODE_STYLE"):
            data["code_style"] = os.environ["SHOWDECK_CODE_STYLE"]
        data.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**data)

    def resolve_theme(self) -> Theme:
        theme = BUILTIN_THEMES[self.theme]
        if self.code_style:
            theme = theme.model_copy(update={"code_style": self.code_style})
        return theme
