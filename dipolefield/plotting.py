from __future__ import annotations

import logging
from typing import Optional

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.ticker import FuncFormatter

from .formatting import format_field, format_tick, format_tooltip
from .presets import Settings, default_settings
from .sampler import FieldCurve, SampleInput

logger = logging.getLogger(__name__)


def _nearest_point_tooltip(curve: FieldCurve, digits: int):
    # Used as ax.format_coord: the interactive backends show it in the status bar on hover
    x = curve.distances_cm
    y = curve.field_strengths_tesla

    def _format(xdata, ydata):
        if x.size == 0:
            return ""
        i = int(np.argmin(np.abs(x - xdata)))
        label, value, name = format_tooltip(x[i], y[i], digits)
        return f"{label} | {name}: {value}"

    return _format


def plot_field_curve(curve: FieldCurve, ax=None, settings: Optional[Settings] = None,
                     current: Optional[SampleInput] = None):
    """
    Draw the field curve as a line plot on ax (a new axes if None).

    If current is given, the sample at its distance is marked and annotated with
    the readout value. Returns the axes.
    """
    settings = settings or default_settings()
    if ax is None:
        _, ax = plt.subplots(1, 1, figsize=settings.figsize)

    ax.plot(curve.distances_cm, curve.field_strengths_tesla, color=settings.line_color,
            linewidth=2.0, label="Field Strength")
    ax.grid(True, linestyle=(0, (3, 3)), alpha=0.6)
    ax.set_xlabel("Distance (cm)")
    ax.set_ylabel("Magnetic Field (Tesla)")
    ax.yaxis.set_major_formatter(FuncFormatter(lambda v, _pos: format_tick(v, settings.tick_digits)))
    ax.format_coord = _nearest_point_tooltip(curve, settings.readout_digits)

    if current is not None:
        b = current.field_strength()
        ax.plot([current.distance_cm], [b], "o", color=settings.line_color, zorder=5)
        ax.annotate(format_field(b, settings.readout_digits), (current.distance_cm, b),
                    textcoords="offset points", xytext=(8, 8), fontsize=9, color="#1e3a8a")

    logger.debug(f"Plotted curve for {curve.magnet_strength_gauss} G ({len(curve)} points)")
    return ax


def curve_figure(curve: FieldCurve, settings: Optional[Settings] = None,
                 current: Optional[SampleInput] = None):
    settings = settings or default_settings()
    fig, ax = plt.subplots(1, 1, figsize=settings.figsize)
    plot_field_curve(curve, ax=ax, settings=settings, current=current)
    fig.tight_layout()
    return fig, ax
