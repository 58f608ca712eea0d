"""Bloc Colonnes — deux zones de contenu riche côte à côte."""
from typing import Literal

from ..core.schemas import BlockDefinition
from .base import BlockProps, GridColumns

LEFT_PLACEHOLDER = "<h3>Left Column</h3><p>Content for the left side.</p>"
RIGHT_PLACEHOLDER = "<h3>Right Column</h3><p>Content for the right side.</p>"

GAP_SIZES = {"small": "16px", "medium": "32px", "large": "48px"}


class ColumnsProps(BlockProps):
    columns: GridColumns = 2
    gap: Literal["small", "medium", "large"] = "medium"
    vertical_align: Literal["top", "center", "bottom"] = "top"
    left_content: str = LEFT_PLACEHOLDER
    right_content: str = RIGHT_PLACEHOLDER


DEFINITION = BlockDefinition(
    id="two-column",
    type="columns",
    category="layout",
    name="Two Columns",
    description="Split content into two side-by-side columns",
    default_props={
        "columns": 2,
        "gap": "medium",
        "verticalAlign": "top",
        "leftContent": LEFT_PLACEHOLDER,
        "rightContent": RIGHT_PLACEHOLDER,
    },
)
