from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from .sampler import CURVE_POINTS, CURVE_STEP_CM, DomainError, SampleInput


@dataclass(frozen=True)
class SliderRange:
    """
    Bounds of a range slider.

    Units follow the slider they belong to (Gauss for magnet strength, cm for distance).
    """
    min: float
    max: float
    step: float

    def clamp(self, value: float) -> float:
        """
        Bound value into [min, max] and snap it to the step grid anchored at min,
        the way a range input does.
        """
        if not math.isfinite(value):
            raise DomainError(f"Slider value must be finite, got {value!r}")
        v = min(max(value, self.min), self.max)
        n = round((v - self.min) / self.step)
        snapped = self.min + n * self.step
        # Rounding up to the next step can overshoot max when the range is not a whole number of steps
        if snapped > self.max:
            snapped -= self.step
        # Trim float noise from the step arithmetic (e.g. 0.5 + 9 * 0.5)
        return round(snapped, 10)


MAGNET_STRENGTH_RANGE = SliderRange(min=100.0, max=5000.0, step=100.0)
DISTANCE_RANGE = SliderRange(min=0.5, max=25.0, step=0.5)


@dataclass
class Settings:
    magnet_strength_gauss: float = 1000.0
    distance_cm: float = 5.0
    curve_points: int = CURVE_POINTS
    curve_step_cm: float = CURVE_STEP_CM
    # mantissa fraction digits in the readout / tooltip and on the y ticks
    readout_digits: int = 3
    tick_digits: int = 1
    line_color: str = "#2563eb"
    figsize: Tuple[float, float] = (8.0, 4.0)


def default_settings() -> Settings:
    """
    Initial slider positions and display settings.
    """
    return Settings()


def clamp_input(magnet_strength_gauss: float, distance_cm: float) -> SampleInput:
    """
    Clamp raw values into the slider ranges and return a validated SampleInput.
    Non-finite values raise DomainError; anything finite ends up inside the ranges.
    """
    return SampleInput(
        magnet_strength_gauss=MAGNET_STRENGTH_RANGE.clamp(magnet_strength_gauss),
        distance_cm=DISTANCE_RANGE.clamp(distance_cm),
    )
