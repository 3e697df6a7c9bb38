import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .config import DEFAULT_CONFIG  # noqa: E402
from .errors import UnwritableOutput  # noqa: E402


class Preview:
    """Off-screen raster of the same lines that go into the SVG file.

    Draws on a plain Surface, so no display or event loop is needed.
    """

    def __init__(self, config=DEFAULT_CONFIG, background=(255, 255, 255)):
        self.surface = pygame.Surface((config.canvas_width,
                                       config.canvas_height))
        self.surface.fill(background)
        self.line_count = 0

    def draw_line(self, line):
        pygame.draw.line(self.surface, pygame.Color(line.colour),
                         (line.p1.x, line.p1.y),
                         (line.p2.x, line.p2.y))
        self.line_count += 1

    def draw(self, lines):
        for line in lines:
            self.draw_line(line)

    def save(self, path):
        try:
            pygame.image.save(self.surface, path)
        except (pygame.error, OSError) as exc:
            raise UnwritableOutput(
                "Unable to write preview image {}".format(path)) from exc
