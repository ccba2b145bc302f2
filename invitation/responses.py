"""Yes/No button transitions for the invitation and proposal screens."""

import logging
import random

from invitation.models.countdown import Phase
from invitation.models.responses import ButtonState, EvasionProfile

logger = logging.getLogger(__name__)

EVASION_PROFILES: dict[Phase, EvasionProfile] = {
    Phase.INVITATION: EvasionProfile(
        no_shrink=0.15,
        no_min_scale=0.3,
        yes_grow=0.1,
        yes_max_scale=1.5,
        max_offset_x=100,
        max_offset_y=50,
    ),
    Phase.PROPOSAL: EvasionProfile(
        no_shrink=0.2,
        no_min_scale=0.2,
        yes_grow=0.15,
        yes_max_scale=2.0,
        max_offset_x=150,
        max_offset_y=75,
    ),
}

YES_MESSAGES = {
    Phase.INVITATION: "¡Qué maravilloso! 🥰 ¡Nos vemos en el concierto! 💕",
    Phase.PROPOSAL: "¡Sí acepto ser tu novia! 💕🥰✨ ¡Eres increíble!",
}

# Plea shown after the n-th "No"; the last entry repeats for later clicks
NO_MESSAGES = {
    Phase.INVITATION: [
        "¿Estás segura? ¡Va a ser increíble! 🎵",
        "¡Pero es Sebastian Romero! 🌟",
        "¡Por favor, será una noche mágica! ✨",
        "¡Solo esta vez! 🥺",
        "Ok, pero ¿segura que no? 💔",
    ],
    Phase.PROPOSAL: [
        "¿Estás segura? 🥺",
        "Pero... ¡fue una noche tan hermosa! 💫",
        "¿No te gustó el concierto? 🎵",
        "Solo dame una oportunidad... 💝",
        "¡Por favor! 🙏",
        "Ok, entiendo... pero ¿segura? 💔",
    ],
}


def evasion_offset(
    profile: EvasionProfile, rng: random.Random
) -> tuple[float, float]:
    """Random No-button offset within the profile bounds."""
    x = rng.random() * 2 * profile.max_offset_x - profile.max_offset_x
    y = rng.random() * 2 * profile.max_offset_y - profile.max_offset_y
    return x, y


def press_no(
    state: ButtonState, profile: EvasionProfile, rng: random.Random
) -> ButtonState:
    """
    Apply a "No" press: No shrinks and jumps away, Yes grows.

    Args:
        state: Current button state
        profile: Shrink/grow steps and offset bounds for the screen
        rng: Random source for the new offset

    Returns:
        New ButtonState
    """
    x, y = evasion_offset(profile, rng)
    return ButtonState(
        no_clicks=state.no_clicks + 1,
        no_scale=max(profile.no_min_scale, state.no_scale - profile.no_shrink),
        yes_scale=min(profile.yes_max_scale, state.yes_scale + profile.yes_grow),
        offset_x=x,
        offset_y=y,
    )


def press_yes(screen: Phase) -> str:
    """Confirmation message for a "Yes" on the given screen."""
    logger.info(f"Yes pressed on {screen.value} screen")
    return YES_MESSAGES[screen]


def no_label(screen: Phase, clicks: int) -> str:
    """Caption of the No button after ``clicks`` presses."""
    if screen is Phase.PROPOSAL:
        if clicks > 5:
            return "😢"
        if clicks > 3:
            return "No..."
        return "No"

    if clicks > 4:
        return "😢"
    if clicks > 2:
        return "No..."
    return "No puedo"


def no_message(screen: Phase, clicks: int) -> str | None:
    """Plea shown below the buttons, or None before the first No."""
    if clicks <= 0:
        return None
    messages = NO_MESSAGES[screen]
    return messages[min(clicks, len(messages)) - 1]
