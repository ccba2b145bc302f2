"""Button state models for the Yes/No prompts."""

from pydantic import BaseModel, Field


class EvasionProfile(BaseModel):
    """How the No button runs away on a given screen."""

    no_shrink: float
    no_min_scale: float
    yes_grow: float
    yes_max_scale: float
    max_offset_x: float = Field(gt=0)
    max_offset_y: float = Field(gt=0)

    class Config:
        """Pydantic config."""

        frozen = True


class ButtonState(BaseModel):
    """Visual state of the two buttons for one screen."""

    no_clicks: int = Field(default=0, ge=0)
    no_scale: float = 1.0
    yes_scale: float = 1.0
    offset_x: float = 0.0
    offset_y: float = 0.0

    class Config:
        """Pydantic config."""

        frozen = True
