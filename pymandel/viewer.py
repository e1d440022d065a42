"""Progressive Mandelbrot viewer - pygame window around ProgressiveRenderer."""

from typing import Optional
import os
import sys
import time

# Force X11 backend for proper window decorations on Wayland
if sys.platform.startswith("linux") and "WAYLAND_DISPLAY" in os.environ:
    os.environ.setdefault("SDL_VIDEODRIVER", "x11")

import pygame

from .coords import DEFAULT_VIEWPORT, Viewport
from .renderer import ProgressiveRenderer
from .scheduler import FRAME_BUDGET, TIME_CHECK_INTERVAL
from .snapshot import save_snapshot
from .surface import Quit, Resized


# =============================================================================
# Constants
# =============================================================================

DEFAULT_WIDTH = 1280
DEFAULT_HEIGHT = 720
CAPTION = "Mandelbrot"

QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)

# Display constants
FONT_SIZE = 20
PADDING = 10
HELP_OVERLAY_ALPHA = 200

HELP_LINES = [
    "Keybindings:",
    "",
    "  F              Toggle status",
    "  S              Save snapshot (PNG)",
    "  H / ?          This help",
    "  Q / ESC        Quit",
]


def translate_event(event) -> Optional[object]:
    """Map a pygame event to the renderer's ``Quit``/``Resized`` events."""
    if event.type == pygame.QUIT:
        return Quit()
    if event.type == pygame.VIDEORESIZE:
        return Resized(event.w, event.h)
    if event.type == pygame.KEYDOWN and event.key in QUIT_KEYS:
        return Quit()
    return None


# =============================================================================
# Main Viewer Class
# =============================================================================

class FractalViewer:
    """Resizable window that shows the image refining frame after frame."""

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT,
                 viewport: Viewport = DEFAULT_VIEWPORT, power: float = 2,
                 frame_budget: float = FRAME_BUDGET,
                 check_interval: int = TIME_CHECK_INTERVAL):
        self.width = width
        self.height = height
        self.frame_budget = frame_budget
        self.renderer = ProgressiveRenderer(
            width, height, viewport=viewport, power=power,
            check_interval=check_interval,
        )

        # UI state
        self.show_status = True
        self.show_help = False
        self.running = True

        # Timing
        self.frame_times = []
        self.last_frame_ms = 0.0

        # Pygame objects (initialized in run())
        self.screen = None
        self.clock = None
        self.font = None

    def run(self):
        """Main entry point - initialize pygame and run the frame loop."""
        if not self._init_pygame():
            sys.exit(1)

        while self.running:
            self._frame()
            self.clock.tick(60)

        self._print_stats()
        pygame.quit()

    def _init_pygame(self) -> bool:
        """Open the window. Returns False if pygame could not start."""
        try:
            pygame.init()
            self.screen = pygame.display.set_mode(
                (self.width, self.height), pygame.RESIZABLE
            )
        except pygame.error as e:
            print(f"Failed to init pygame: {e}")
            return False

        pygame.display.set_caption(CAPTION)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("monospace", FONT_SIZE)

        # The window manager may not honour the requested size
        if self.screen.get_size() != self.renderer.surface.size:
            self.renderer.on_resize(*self.screen.get_size())
        return True

    def _print_stats(self):
        """Print rendering statistics on exit."""
        if self.frame_times:
            avg_ms = sum(self.frame_times) / len(self.frame_times)
            print(f"\nShowed {len(self.frame_times)} frames")
            print(f"Average frame time: {avg_ms:.1f}ms")
            print(f"Final iteration budget: {self.renderer.budget}")

    # =========================================================================
    # Event Handling
    # =========================================================================

    def _collect_events(self) -> list:
        """Drain the pygame queue; viewer keys are handled on the spot."""
        pending = []
        for event in pygame.event.get():
            translated = translate_event(event)
            if translated is not None:
                pending.append(translated)
            elif event.type == pygame.KEYDOWN:
                handler = self._key_handlers.get(event.key)
                if handler:
                    handler(self, event)
        return pending

    @property
    def _key_handlers(self) -> dict:
        """Map keys to handler methods."""
        return {
            pygame.K_f: FractalViewer._toggle_status,
            pygame.K_h: FractalViewer._toggle_help,
            pygame.K_QUESTION: FractalViewer._toggle_help,
            pygame.K_SLASH: FractalViewer._toggle_help,
            pygame.K_s: FractalViewer._save_snapshot,
        }

    def _toggle_status(self, event):
        self.show_status = not self.show_status

    def _toggle_help(self, event):
        self.show_help = not self.show_help

    def _save_snapshot(self, event):
        path = save_snapshot(self.renderer.surface, f"mandelbrot_{self.renderer.budget}.png")
        print(f"Saved: {path}")

    # =========================================================================
    # Rendering
    # =========================================================================

    def _frame(self):
        """Advance the render by one frame and present it."""
        t0 = time.perf_counter()

        if not self.renderer.update(self._collect_events(), self.frame_budget):
            self.running = False
            return

        self.screen = pygame.display.get_surface()
        pixels = self.renderer.surface.pixels
        surface = pygame.surfarray.make_surface(pixels.swapaxes(0, 1))
        self.screen.blit(surface, (0, 0))

        if self.show_status:
            self._draw_status_overlay()
        if self.show_help:
            self._draw_help_overlay()

        pygame.display.flip()

        self.last_frame_ms = (time.perf_counter() - t0) * 1000
        self.frame_times.append(self.last_frame_ms)

    def _draw_status_overlay(self):
        scheduler = self.renderer.scheduler
        text = (f"budget: {scheduler.budget} | pass: {scheduler.progress:.0%} | "
                f"cached: {len(self.renderer.cache)} | {self.last_frame_ms:.1f}ms")
        self._draw_text(text, PADDING, PADDING // 2)

    def _draw_text(self, text: str, x: int, y: int, color=(255, 255, 255)) -> int:
        """Render text at position and return new x position."""
        surf = self.font.render(text, True, color, (0, 0, 0))
        self.screen.blit(surf, (x, y))
        return x + surf.get_width()

    def _draw_help_overlay(self):
        """Draw help text overlay."""
        line_height = self.font.get_linesize()
        help_width = max(self.font.size(line)[0] for line in HELP_LINES) + PADDING * 2
        help_height = len(HELP_LINES) * line_height + PADDING * 2

        help_bg = pygame.Surface((help_width, help_height))
        help_bg.set_alpha(HELP_OVERLAY_ALPHA)
        help_bg.fill((0, 0, 0))
        help_y = line_height + PADDING
        self.screen.blit(help_bg, (PADDING, help_y))

        for i, line in enumerate(HELP_LINES):
            text_surface = self.font.render(line, True, (255, 255, 255))
            self.screen.blit(text_surface, (PADDING * 2, help_y + PADDING + i * line_height))
