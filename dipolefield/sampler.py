from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

import numpy as np


# Permeability of free space in H/m
MU0 = 4 * math.pi * 1e-7
# 1 Gauss = 1e-4 Tesla; folded into the moment term of the dipole formula
GAUSS_TO_TESLA = 1e-4
CM_TO_M = 1e-2

# Chart grid: 0.5, 1.0, ..., 25.0 cm
CURVE_POINTS = 50
CURVE_STEP_CM = 0.5


class DomainError(ValueError):
    """Raised for inputs outside the domain of the dipole model (non-positive or non-finite)."""


@dataclass(frozen=True)
class SampleInput:
    """
    One pair of slider values.

    Units:
      - magnet_strength_gauss: Gauss
      - distance_cm: centimeters from the magnet along its axis
    """
    magnet_strength_gauss: float
    distance_cm: float

    def __post_init__(self):
        for name in ("magnet_strength_gauss", "distance_cm"):
            v = getattr(self, name)
            if not math.isfinite(v) or v <= 0:
                raise DomainError(f"{name} must be finite and positive, got {v!r}")

    def field_strength(self) -> float:
        return sample(self.distance_cm, self.magnet_strength_gauss)


@dataclass(frozen=True)
class SamplePoint:
    distance_cm: float
    field_strength_tesla: float


@dataclass(frozen=True)
class FieldCurve:
    """
    Field strength over a distance grid for a single magnet strength.
    Fully derived from (magnet_strength_gauss, distances); rebuild it instead of mutating.
    """
    magnet_strength_gauss: float
    points: Tuple[SamplePoint, ...]

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[SamplePoint]:
        return iter(self.points)

    @property
    def distances_cm(self) -> np.ndarray:
        return np.array([p.distance_cm for p in self.points], dtype=float)

    @property
    def field_strengths_tesla(self) -> np.ndarray:
        return np.array([p.field_strength_tesla for p in self.points], dtype=float)

    def as_xy(self) -> List[Tuple[float, float]]:
        """(x, y) pairs in grid order, as consumed by the chart."""
        return [(p.distance_cm, p.field_strength_tesla) for p in self.points]


def sample(distance_cm: float, magnet_strength_gauss: float) -> float:
    """
    Axial field of a magnetic dipole, simplified:

        B = (MU0 * m) / (4 * pi * r^3)

    with r = distance_cm / 100 [m] and m = magnet_strength_gauss * 1e-4.
    Returns Tesla. No validation: distance_cm == 0 raises ZeroDivisionError.
    """
    r = distance_cm * CM_TO_M
    m = magnet_strength_gauss * GAUSS_TO_TESLA
    return (MU0 * m) / (4 * math.pi * r ** 3)


def sample_array(distances_cm, magnet_strength_gauss: float) -> np.ndarray:
    """Vectorized sample() over an array of distances in cm."""
    r = np.asarray(distances_cm, dtype=float) * CM_TO_M
    m = magnet_strength_gauss * GAUSS_TO_TESLA
    return (MU0 * m) / (4 * np.pi * r ** 3)


class _CurveSamples:
    # Restartable: every __iter__ evaluates the sampler again over the same distances.
    def __init__(self, distances: Sequence[float], magnet_strength_gauss: float):
        self._distances = distances
        self._strength = magnet_strength_gauss

    def __iter__(self) -> Iterator[SamplePoint]:
        for d in self._distances:
            yield SamplePoint(distance_cm=d, field_strength_tesla=sample(d, self._strength))

    def __len__(self) -> int:
        return len(self._distances)


def sample_curve(distances: Iterable[float], magnet_strength_gauss: float) -> Iterable[SamplePoint]:
    """
    Lazily sample the field at each distance, in input order.

    The returned iterable can be iterated any number of times; the distances are
    materialized once so that generators passed in are not exhausted by the first pass.
    """
    return _CurveSamples(tuple(float(d) for d in distances), magnet_strength_gauss)


def distance_grid(n: int = CURVE_POINTS, step: float = CURVE_STEP_CM) -> np.ndarray:
    # (i + 1) * step rather than arange so that values are exact multiples of step
    return (np.arange(n, dtype=float) + 1.0) * step


def build_curve(magnet_strength_gauss: float, distances: Optional[Iterable[float]] = None) -> FieldCurve:
    if distances is None:
        distances = distance_grid()
    return FieldCurve(
        magnet_strength_gauss=magnet_strength_gauss,
        points=tuple(sample_curve(distances, magnet_strength_gauss)),
    )
