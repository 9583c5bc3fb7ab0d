"""
Desktop window for DINORUN using pygame.

Translates keyboard input into Key events, drives one controller tick per
frame through the event bus and draws the glyph console.
"""

import asyncio
import logging

import pygame

from dinorun.config.settings import SimulatorSettings
from dinorun.core.events import EventBus, Key, key_event, tick_event
from dinorun.graphics.console import GlyphConsole
from dinorun.screens.manager import ScreenController

logger = logging.getLogger(__name__)


class SimulatorWindow:
    """
    Main window hosting the glyph console.

    Keyboard Mapping:
        SPACE / UP: Jump
        P: Pause / resume
        RETURN: Play
        R: Restart
        Q / ESC: Quit (from menu, pause and game over screens)
        F1: Toggle debug overlay
    """

    KEYMAP: dict[int, Key] = {
        pygame.K_SPACE: Key.JUMP,
        pygame.K_UP: Key.JUMP,
        pygame.K_p: Key.PAUSE,
        pygame.K_RETURN: Key.PLAY,
        pygame.K_KP_ENTER: Key.PLAY,
        pygame.K_r: Key.RESTART,
        pygame.K_q: Key.QUIT,
        pygame.K_ESCAPE: Key.QUIT,
    }

    def __init__(
        self,
        controller: ScreenController,
        event_bus: EventBus,
        settings: SimulatorSettings | None = None,
        debug: bool = False,
    ) -> None:
        self.settings = settings or SimulatorSettings()
        self.controller = controller
        self.event_bus = event_bus
        self.console = GlyphConsole()

        # Pygame setup
        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._font: pygame.font.Font | None = None
        self._small_font: pygame.font.Font | None = None
        self._running = False
        self._frame_count = 0
        self._show_debug = debug

        controller.attach(event_bus)
        logger.info("SimulatorWindow created")

    @property
    def size(self) -> tuple[int, int]:
        return (
            self.console.width * self.settings.cell_width,
            self.console.height * self.settings.cell_height,
        )

    def _init_pygame(self) -> None:
        """Initialize pygame and create window."""
        pygame.init()
        pygame.display.set_caption(self.settings.title)

        flags = pygame.DOUBLEBUF
        if self.settings.fullscreen:
            flags |= pygame.FULLSCREEN

        self._screen = pygame.display.set_mode(self.size, flags)
        self._clock = pygame.time.Clock()

        pygame.font.init()
        font_name = self.settings.font_name or "dejavusansmono,couriernew,monospace"
        self._font = pygame.font.SysFont(font_name, self.settings.cell_height)
        self._small_font = pygame.font.SysFont(font_name, 12)

        logger.info(f"Pygame initialized: {self.size[0]}x{self.size[1]}")

    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False

            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event)

    def _handle_keydown(self, event: pygame.event.Event) -> None:
        if event.key == pygame.K_F1:
            self._show_debug = not self._show_debug
            return

        key = self.KEYMAP.get(event.key)
        if key is not None:
            self.event_bus.queue_event(key_event(key))

    def _render(self) -> None:
        """Draw the console and overlays."""
        if not self._screen:
            return

        surface = self.console.render(
            self._font, self.settings.cell_width, self.settings.cell_height
        )
        self._screen.blit(surface, (0, 0))

        if self._show_debug:
            self._render_debug_panel()

        pygame.display.flip()

    def _render_debug_panel(self) -> None:
        session = self.controller.session
        lines = [
            f"FPS: {self._clock.get_fps():.1f}" if self._clock else "FPS: --",
            f"Frame: {self._frame_count}",
            f"Mode: {session.mode.name}",
            f"Player: {session.player.x},{session.player.y} v={session.player.velocity:.1f}",
            f"Seed: {session.rng.seed}",
        ]

        panel = pygame.Surface((220, 18 * len(lines) + 10), pygame.SRCALPHA)
        panel.fill((20, 25, 35, 200))
        y = 5
        for line in lines:
            text_surface = self._small_font.render(line, True, (200, 200, 220))
            panel.blit(text_surface, (8, y))
            y += 18
        self._screen.blit(panel, (self.size[0] - panel.get_width() - 10, 10))

    async def run(self) -> None:
        """Main loop: one controller tick per rendered frame."""
        self._init_pygame()
        self._running = True

        logger.info("Simulator started")

        while self._running:
            self._handle_events()

            # Keys pressed this frame reach the controller before its tick
            await self.event_bus.process_queue()
            delta_ms = float(self._clock.get_time()) if self._clock else 0.0
            await self.event_bus.emit_async(tick_event(delta_ms, self._frame_count))

            if self.console.apply(self.controller.last_frame.commands):
                self._running = False

            self._render()

            if self._clock:
                self._clock.tick(self.settings.fps)
            self._frame_count += 1

            # Yield to other tasks
            await asyncio.sleep(0)

        self._cleanup()

    def _cleanup(self) -> None:
        """Clean up pygame resources."""
        pygame.quit()
        logger.info("Simulator stopped")
