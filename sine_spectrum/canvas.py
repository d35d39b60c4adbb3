"""
Indexed raster canvas.

Pixels hold palette indices, index 0 being the background. Lines are
rasterized as they are drawn, so a later line paints over an earlier one.
Coordinates are pixel columns and rows, origin top-left. Anything outside the
canvas is clipped. matplotlib resolves colour names and encodes the PNG.
"""
import logging
import os
import tempfile

import numpy as np
from matplotlib.colors import to_rgb
from matplotlib.image import imsave

from sine_spectrum.config import BACKGROUND
from sine_spectrum.exceptions import RenderError

logger = logging.getLogger(__name__)

MAX_COLORS = 256


class Canvas:
    def __init__(self, width, height, background=BACKGROUND):
        self.width = width
        self.height = height
        self.palette = []
        self._rgb = []
        self.lines_drawn = 0
        self.pixels = np.zeros((height, width), dtype=np.uint8)
        self.allocate(background)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False

    def allocate(self, color):
        """Palette index of `color`, adding it on first use."""
        if color in self.palette:
            return self.palette.index(color)
        if len(self.palette) == MAX_COLORS:
            raise RenderError(f"palette is full, cannot add {color}")

        self.palette.append(color)
        self._rgb.append([round(c * 255) for c in to_rgb(color)])
        return len(self.palette) - 1

    def pixel(self, x, y):
        """Colour at column x, row y, as it was allocated."""
        return self.palette[self.pixels[y, x]]

    def draw_line(self, x0, y0, x1, y1, color):
        index = self.allocate(color)
        x0, y0, x1, y1 = int(x0), int(y0), int(x1), int(y1)

        # Bresenham, both end points included
        dx = abs(x1 - x0)
        dy = -abs(y1 - y0)
        sx = 1 if x0 < x1 else -1
        sy = 1 if y0 < y1 else -1
        err = dx + dy
        while True:
            if 0 <= x0 < self.width and 0 <= y0 < self.height:
                self.pixels[y0, x0] = index
            if x0 == x1 and y0 == y1:
                break
            e2 = 2 * err
            if e2 >= dy:
                err += dy
                x0 += sx
            if e2 <= dx:
                err += dx
                y0 += sy

        self.lines_drawn += 1

    def draw_segment(self, segment, color):
        self.draw_line(segment.x, segment.from_y, segment.x, segment.to_y, color)

    def draw_frame(self, left, top, right, bottom, color):
        self.draw_line(left, top, right, top, color)
        self.draw_line(right, top, right, bottom, color)
        self.draw_line(right, bottom, left, bottom, color)
        self.draw_line(left, bottom, left, top, color)

    def to_rgb(self):
        return np.array(self._rgb, dtype=np.uint8)[self.pixels]

    def save(self, path):
        """Encode the canvas as PNG at `path`. Nothing is left at `path` on failure."""
        path = os.fspath(path)
        directory = os.path.dirname(os.path.abspath(path))
        image = self.to_rgb()

        tmp_path = None
        try:
            with tempfile.NamedTemporaryFile(dir=directory, suffix=".png", delete=False) as tmp:
                tmp_path = tmp.name
                imsave(tmp, image, format="png")
            os.replace(tmp_path, path)
        except (OSError, ValueError) as err:
            raise RenderError(f"cannot write '{path}': {err}") from err
        finally:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)

        logger.info("Wrote %dx%d image with %d lines to %s", self.width, self.height, self.lines_drawn, path)
        return path

    def close(self):
        self.pixels = None
