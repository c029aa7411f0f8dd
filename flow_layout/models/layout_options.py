"""Configuration for the flow layout engine.

Options are an immutable value: they are validated once when the engine is
built and reused across every layout call.
"""

from pydantic import BaseModel, Field

from .flow_enums import FlowDirection, HorizontalAlignment, VerticalAlignment


class FlowLayoutOptions(BaseModel):
    """Engine parameters, set once and reused across calls.

    Attributes:
        direction: Direction items flow within a row
        horizontal_alignment: Alignment of each row within the bounds' width
        vertical_alignment: Alignment of each item within its row's height
        horizontal_spacing: Distance between adjacent items within a row
        vertical_spacing: Distance between adjacent rows
    """

    model_config = {"frozen": True}

    direction: FlowDirection = Field(
        default=FlowDirection.FORWARD, description="Direction items flow within a row"
    )
    horizontal_alignment: HorizontalAlignment = Field(
        default=HorizontalAlignment.LEADING, description="Horizontal alignment of rows"
    )
    vertical_alignment: VerticalAlignment = Field(
        default=VerticalAlignment.TOP, description="Vertical alignment of items within a row"
    )
    horizontal_spacing: float = Field(
        default=0.0, ge=0, allow_inf_nan=False, description="Spacing between items in a row"
    )
    vertical_spacing: float = Field(
        default=0.0, ge=0, allow_inf_nan=False, description="Spacing between rows"
    )

    def to_dict(self) -> dict:
        """Export to dict with enums as their string values."""
        return self.model_dump(mode="json")
