"""
Plot configuration.

All constants of a run live in one frozen `PlotConfig`. The defaults give a
1280x800 image with a 10 pixel frame, 1260 samples and component periods of
52 and 15 samples per cycle.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sine_spectrum.exceptions import ConfigError

BACKGROUND = "#cccccc"
BLUE = "#0000ff"
GREEN = "#00ff00"
RED = "#ff0000"
BLACK = "#000000"

# Cycles of each component across the plot width
CYCLES_A = 24
CYCLES_B = 83


@dataclass(frozen=True)
class PlotConfig:
    width: int = 1280
    height: int = 800
    border: int = 10
    period_a: Optional[float] = None
    period_b: Optional[float] = None
    output_path: str = "testgd.png"

    @property
    def left(self) -> int:
        return self.border

    @property
    def right(self) -> int:
        return self.width - self.border

    @property
    def top(self) -> int:
        return self.border

    @property
    def bottom(self) -> int:
        return self.height - self.border

    @property
    def n_points(self) -> int:
        return self.right - self.border

    @property
    def plot_height(self) -> int:
        return self.height - 2 * self.border

    @property
    def wave_period_a(self) -> float:
        if self.period_a is not None:
            return self.period_a
        return (self.width - 2 * self.border) // CYCLES_A

    @property
    def wave_period_b(self) -> float:
        if self.period_b is not None:
            return self.period_b
        return (self.width - 2 * self.border) // CYCLES_B

    @property
    def baselines(self) -> tuple[int, int, int]:
        """Zero rows of the component A, component B and sum bands."""
        h = self.plot_height
        return h // 5, h * 2 // 5, h * 3 // 5

    @property
    def spectrum_floor(self) -> int:
        return self.plot_height

    @property
    def time_scale(self) -> float:
        return self.plot_height / 16

    @property
    def spectrum_scale(self) -> float:
        return self.plot_height / 2

    def validate(self) -> PlotConfig:
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"image size must be positive, got {self.width}x{self.height}")
        if self.border < 0:
            raise ConfigError(f"border must not be negative, got {self.border}")
        if self.n_points < 0 or self.plot_height < 0:
            raise ConfigError(f"border {self.border} leaves no room in a {self.width}x{self.height} image")
        for name, period in (("period_a", self.wave_period_a), ("period_b", self.wave_period_b)):
            if period <= 0:
                raise ConfigError(f"{name} must be positive, got {period}")
        return self
