"""Shared value types — alignment, orientation, colors and split sizing policies."""

import re
from enum import Enum
from typing import Literal, Union
from pydantic import BaseModel, Field

HEX_COLOR_RE = re.compile(r"^#(?:[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$")


class HAlign(str, Enum):
    """Horizontal alignment applied to a materialized element."""
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    FILL = "fill"


class Orientation(str, Enum):
    """Stacking axis of a split.

    ROWS stacks children top to bottom (vsplit), COLUMNS left to right (hsplit).
    """
    ROWS = "rows"
    COLUMNS = "columns"


class PrimaryColor(BaseModel):
    """Placeholder for the active theme's primary accent color."""
    model_config = {"frozen": True}

    kind: Literal["primary"] = "primary"


PRIMARY = PrimaryColor()

# A concrete "#RRGGBB[AA]" string or the PRIMARY placeholder.
ElementColor = Union[str, PrimaryColor]


def validate_color(color: ElementColor) -> ElementColor:
    if isinstance(color, PrimaryColor):
        return color
    if not isinstance(color, str) or not HEX_COLOR_RE.match(color):
        raise ValueError(f"Invalid color {color!r}, expected '#RRGGBB' or '#RRGGBBAA'")
    return color.upper()


class Fit(BaseModel):
    """Keep the child's natural size along the stacking axis."""
    model_config = {"frozen": True}

    kind: Literal["fit"] = "fit"


class Expand(BaseModel):
    """Take a share of the remaining stacking-axis space proportional to weight."""
    model_config = {"frozen": True}

    kind: Literal["expand"] = "expand"
    weight: int = Field(default=1, ge=1, le=255)


SplitPolicy = Union[Fit, Expand]
