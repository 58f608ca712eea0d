"""Bloc Spacer — espace vertical."""
from typing import Literal

from ..core.schemas import BlockDefinition
from .base import BlockProps

SPACER_HEIGHTS = {"small": "32px", "medium": "64px", "large": "128px"}


class SpacerProps(BlockProps):
    height: Literal["small", "medium", "large"] = "medium"
    background_color: str = "transparent"


DEFINITION = BlockDefinition(
    id="spacer",
    type="spacer",
    category="layout",
    name="Spacer",
    description="Add vertical spacing between sections",
    default_props={"height": "medium", "backgroundColor": "transparent"},
)
