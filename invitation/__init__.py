import logging
import random
from typing import Callable, Optional

from flask import Flask, Response, jsonify, redirect, render_template, request, session

from .assets import AssetManifest
from .calendar_link import build_calendar_url
from .config import InvitationConfig
from .constants import DEFAULT_SECRET_KEY
from .countdown import CountdownClock, current_millis
from .models.countdown import Phase
from .models.playback import PlaybackState
from .models.responses import ButtonState
from .output.ics_writer import ICSWriter
from .playback import initial_playback, playback_failed, toggle
from .responses import EVASION_PROFILES, no_label, no_message, press_no, press_yes

logger = logging.getLogger(__name__)

CLOCK_EXTENSION = "invitation.clock"


def _load_buttons(screen: Phase) -> ButtonState:
    stored = session.get("buttons", {}).get(screen.value)
    return ButtonState(**stored) if stored else ButtonState()


def _save_buttons(screen: Phase, state: ButtonState) -> None:
    buttons = dict(session.get("buttons", {}))
    buttons[screen.value] = state.model_dump()
    session["buttons"] = buttons


def _json_body() -> dict:
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def _load_playback(config: InvitationConfig) -> PlaybackState:
    stored = session.get("playback")
    return PlaybackState(**stored) if stored else initial_playback(config.autoplay)


def create_app(
    config: Optional[InvitationConfig] = None,
    now: Callable[[], float] = current_millis,
):
    if config is None:
        config = InvitationConfig.from_env()

    app = Flask(__name__)
    if config.secret_key == DEFAULT_SECRET_KEY:
        logger.warning(
            "Using the default secret key; set INVITATION_SECRET_KEY to sign sessions"
        )
    app.secret_key = config.secret_key
    app.json.ensure_ascii = False

    clock = CountdownClock(config.target_ms, now=now, initial_phase=config.initial_phase)
    app.extensions[CLOCK_EXTENSION] = clock

    event = config.calendar_event()
    calendar_url = build_calendar_url(event)
    assets = AssetManifest().urls(config.base_url)

    @app.route("/", methods=["GET"])
    def index():
        """Render the page for the current phase."""
        snapshot = clock.tick()
        screen = snapshot.phase
        buttons = _load_buttons(screen)

        if screen is Phase.PROPOSAL and config.celebration:
            particle_count = 20
        else:
            particle_count = 15

        return render_template(
            "page.html",
            settings=config,
            screen=screen.value,
            parts=snapshot.parts,
            buttons=buttons,
            label=no_label(screen, buttons.no_clicks),
            message=no_message(screen, buttons.no_clicks),
            playback=_load_playback(config),
            calendar_url=calendar_url,
            assets=assets,
            particle_count=particle_count,
        )

    @app.route("/api/countdown", methods=["GET"])
    def countdown():
        """Tick the clock and return the remaining time."""
        return jsonify(clock.tick().to_dict())

    @app.route("/api/respond", methods=["POST"])
    def respond():
        """Apply a Yes/No press to the current screen's buttons."""
        payload = _json_body()
        choice = payload.get("choice")
        if choice not in ("yes", "no"):
            return ("choice must be 'yes' or 'no'", 400)

        screen = clock.snapshot().phase
        buttons = _load_buttons(screen)
        confirmation = None

        if choice == "no":
            buttons = press_no(buttons, EVASION_PROFILES[screen], random.Random())
            _save_buttons(screen, buttons)
            logger.debug(f"No pressed on {screen.value} screen ({buttons.no_clicks})")
        else:
            confirmation = press_yes(screen)

        return jsonify(
            {
                "screen": screen.value,
                "buttons": buttons.model_dump(),
                "label": no_label(screen, buttons.no_clicks),
                "message": no_message(screen, buttons.no_clicks),
                "confirmation": confirmation,
            }
        )

    @app.route("/api/playback", methods=["POST"])
    def playback():
        """Toggle the music, or record that the browser refused to play it."""
        payload = _json_body()
        action = payload.get("action")
        state = _load_playback(config)

        if action == "toggle":
            state = toggle(state)
        elif action == "failed":
            state = playback_failed(state, payload.get("reason"))
        else:
            return ("action must be 'toggle' or 'failed'", 400)

        session["playback"] = state.model_dump()
        return jsonify(state.model_dump())

    @app.route("/calendar", methods=["GET"])
    def calendar_link():
        """Send the visitor to the calendar provider's add-event form."""
        return redirect(calendar_url, code=302)

    @app.route("/calendar.ics", methods=["GET"])
    def get_calendar():
        """Serve the event as an ICS file."""
        ical_content = ICSWriter().to_ical(event)
        return Response(
            ical_content,
            content_type="text/calendar; charset=utf-8",
            headers={"Content-Disposition": "attachment; filename=invitation.ics"},
        )

    return app
