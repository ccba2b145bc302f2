"""Background music playback state."""

from typing import Optional

from pydantic import BaseModel


class PlaybackState(BaseModel):
    """Whether the music is playing, and why it stopped if it failed."""

    is_playing: bool = False
    last_error: Optional[str] = None

    class Config:
        """Pydantic config."""

        frozen = True
