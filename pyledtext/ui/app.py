"""Pygame window that mimics an LED matrix showing scrolling text."""

from __future__ import annotations

from dataclasses import dataclass

from pyledtext.render import (
    BLACK,
    DEFAULT_PHYSICAL_WIDTH,
    RendererConfig,
    RGBColor,
    Rotation,
    ScrollingView,
    WidthPolicy,
    create_renderer,
)
from pyledtext.utils import debug_enabled, debug_log

_FRAME_RATE = 60
_UNLIT_DIM = 0.12


@dataclass
class AppConfig:
    """Configuration for the LED matrix preview window."""

    text: str = ""
    font_name: str = "proportional"
    policy: WidthPolicy = WidthPolicy.TRAILING_WIDTH_TRIM
    rotation: Rotation = Rotation.ROTATE_0
    physical_width: int = DEFAULT_PHYSICAL_WIDTH
    scale: int = 32
    scroll_interval_ms: int = 80
    fullscreen: bool = False


class LedMatrixApp:
    """Drives a :class:`ScrollingView` the way a hardware adapter would."""

    def __init__(self, config: AppConfig) -> None:
        if config.scale <= 0:
            raise ValueError("scale must be positive")
        if config.scroll_interval_ms <= 0:
            raise ValueError("scroll_interval_ms must be positive")
        self._config = config
        self._running = False
        self._frame_counter = 0

    @property
    def config(self) -> AppConfig:
        return self._config

    def build_view(self) -> ScrollingView:
        renderer = create_renderer(RendererConfig(font_name=self._config.font_name, policy=self._config.policy))
        matrix = renderer.render(self._config.text)
        view = ScrollingView(matrix, self._config.physical_width, self._config.rotation)
        if debug_enabled("ui"):
            debug_log(
                "ui",
                "view text=%r width=%d mode=%s rotation=%d",
                matrix.text,
                matrix.width,
                view.mode.name,
                view.rotation.value,
            )
        return view

    @staticmethod
    def frame_colors(view: ScrollingView, unlit: RGBColor | None = None) -> list[RGBColor]:
        """Return one colour per LED, row-major, as a display driver would push them."""

        lit = view.text_color
        if unlit is None:
            unlit = view.background_color or BLACK
        colors: list[RGBColor] = []
        for row in view.snapshot():
            colors.extend(lit if value else unlit for value in row)
        return colors

    def run(self) -> None:
        try:
            import pygame  # type: ignore
        except Exception as exc:  # pragma: no cover - optional dependency
            raise RuntimeError("pygame is required to run the preview") from exc

        pygame.init()
        pygame.display.set_caption("LED matrix preview")

        view = self.build_view()
        scale = self._config.scale
        surface_size = (view.physical_width * scale, view.physical_height * scale)
        flags = pygame.FULLSCREEN if self._config.fullscreen else 0
        screen = pygame.display.set_mode(surface_size, flags)

        scroll_event = pygame.USEREVENT + 1
        pygame.time.set_timer(scroll_event, self._config.scroll_interval_ms)

        clock = pygame.time.Clock()
        self._running = True
        while self._running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self._running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    self._running = False
                elif event.type == scroll_event:
                    view.scroll_by_one_pixel()

            self._draw(pygame, screen, view)
            pygame.display.flip()
            clock.tick(_FRAME_RATE)
            self._frame_counter += 1

        if debug_enabled("ui"):
            debug_log("ui", "quit frames=%d offset=%d", self._frame_counter, view.scroll_offset)
        pygame.time.set_timer(scroll_event, 0)
        pygame.quit()

    def _draw(self, pygame, screen, view: ScrollingView) -> None:
        scale = self._config.scale
        radius = max(1, scale * 2 // 5)
        unlit = view.background_color or _dim(view.text_color)
        screen.fill(BLACK)
        for index, color in enumerate(self.frame_colors(view, unlit)):
            x = index % view.physical_width
            y = index // view.physical_width
            center = (x * scale + scale // 2, y * scale + scale // 2)
            pygame.draw.circle(screen, color, center, radius)


def _dim(color: RGBColor) -> RGBColor:
    return tuple(int(channel * _UNLIT_DIM) for channel in color)  # type: ignore[return-value]
