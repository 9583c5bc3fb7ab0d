"""
Main entry point for DINORUN.

Builds the session, screen controller and simulator window from settings
and runs the window loop.
"""

import asyncio
import logging
import sys

from dinorun.config.settings import Settings, get_settings
from dinorun.core.events import EventBus, EventType, Event
from dinorun.core.state import GameMode, StateMachine
from dinorun.game.rng import RandomProvider
from dinorun.game.session import GameSession
from dinorun.screens.manager import ScreenController


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def build_controller(settings: Settings, event_bus: EventBus) -> ScreenController:
    """Create a fresh session in MENU mode and its screen controller."""
    session = GameSession(
        rng=RandomProvider(settings.seed),
        state_machine=StateMachine(GameMode.MENU),
        event_bus=event_bus,
        spawn_threshold=settings.game.spawn_threshold,
        retire_margin=settings.game.retire_margin,
        debug=settings.debug,
    )
    return ScreenController(session, event_bus=event_bus)


def attach_loggers(event_bus: EventBus, debug: bool = False) -> None:
    """Log game overs and, in debug mode, every non-tick event."""
    logger = logging.getLogger(__name__)

    def on_state_changed(event: Event) -> None:
        if event.data["to"] == GameMode.ENDED:
            logger.info(f"Game over, final score {event.data['score']}")

    def trace(event: Event) -> None:
        if event.type != EventType.TICK:
            logger.debug(f"Event {event.type} from {event.source}: {event.data}")

    event_bus.subscribe(EventType.STATE_CHANGED, on_state_changed)
    if debug:
        event_bus.subscribe_all(trace)


async def run_simulator(settings: Settings) -> None:
    """Run the pygame version."""
    from dinorun.simulator.window import SimulatorWindow

    event_bus = EventBus()
    controller = build_controller(settings, event_bus)
    attach_loggers(event_bus, settings.debug)

    window = SimulatorWindow(
        controller=controller,
        event_bus=event_bus,
        settings=settings.simulator,
        debug=settings.debug,
    )

    await window.run()


def main() -> None:
    """Main entry point."""
    from dotenv import load_dotenv

    # Load environment variables
    load_dotenv()

    settings = get_settings()
    setup_logging(settings.debug)

    logger = logging.getLogger(__name__)
    logger.info("DINORUN starting...")

    try:
        asyncio.run(run_simulator(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("DINORUN stopped")


if __name__ == "__main__":
    main()
