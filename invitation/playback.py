"""Music playback transitions.

The page asks the browser to start the audio; when the browser refuses
(autoplay policy, missing file) the page reports it and the state falls
back to paused instead of surfacing an error.
"""

import logging

from invitation.models.playback import PlaybackState

logger = logging.getLogger(__name__)


def initial_playback(autoplay: bool) -> PlaybackState:
    return PlaybackState(is_playing=autoplay)


def toggle(state: PlaybackState) -> PlaybackState:
    """Play if paused, pause if playing."""
    return PlaybackState(is_playing=not state.is_playing)


def playback_failed(state: PlaybackState, reason: str | None = None) -> PlaybackState:
    """Record a failed playback start and fall back to paused."""
    reason = reason or "playback rejected"
    logger.warning(f"Audio play failed: {reason}")
    return PlaybackState(is_playing=False, last_error=reason)
