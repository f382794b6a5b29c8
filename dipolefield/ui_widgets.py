from __future__ import annotations

import logging
from typing import Optional

import ipywidgets as widgets
from IPython.display import display, clear_output
import matplotlib.pyplot as plt

from .formatting import format_field, format_number
from .plotting import curve_figure
from .presets import (
    DISTANCE_RANGE,
    MAGNET_STRENGTH_RANGE,
    Settings,
    clamp_input,
    default_settings,
)
from .sampler import FieldCurve, SampleInput, build_curve, distance_grid

logger = logging.getLogger(__name__)


MODEL_NOTE_HTML = (
    "<div style='color:#555;font-size:13px;margin-top:6px'>"
    "<p>This simulation uses a simplified dipole model of magnetic field strength:</p>"
    "<p><b>B = (&mu;&#8320; * m) / (4&pi; * r&sup3;)</b></p>"
    "<p>where:</p>"
    "<ul>"
    "<li>B is the magnetic field strength in Tesla</li>"
    "<li>&mu;&#8320; is the magnetic permeability of free space</li>"
    "<li>m is the magnetic moment (derived from magnet strength)</li>"
    "<li>r is the distance from the magnet in meters</li>"
    "</ul>"
    "</div>"
)

READOUT_STYLE = "padding:12px;background:#eff6ff;border-radius:8px;margin:6px 0"


class FieldExplorerUI:
    """
    Two sliders (magnet strength, distance), a readout of the field at the selected
    distance and a plot of the field over the 0.5-25 cm grid.

    The curve only depends on the magnet strength, so it is rebuilt on strength
    changes; a distance change only refreshes the readout and the marker.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or default_settings()
        s = self.settings
        self.curve_rebuilds = 0

        self.strength_label = widgets.HTML()
        self.strength = widgets.FloatSlider(
            value=MAGNET_STRENGTH_RANGE.clamp(s.magnet_strength_gauss),
            min=MAGNET_STRENGTH_RANGE.min,
            max=MAGNET_STRENGTH_RANGE.max,
            step=MAGNET_STRENGTH_RANGE.step,
            readout=False,
            continuous_update=True,
            layout=widgets.Layout(width="100%"),
        )
        self.distance_label = widgets.HTML()
        self.distance = widgets.FloatSlider(
            value=DISTANCE_RANGE.clamp(s.distance_cm),
            min=DISTANCE_RANGE.min,
            max=DISTANCE_RANGE.max,
            step=DISTANCE_RANGE.step,
            readout=False,
            continuous_update=True,
            layout=widgets.Layout(width="100%"),
        )
        self.readout = widgets.HTML()
        self.output = widgets.Output()

        self.strength.observe(self._on_strength_change, names="value")
        self.distance.observe(self._on_distance_change, names="value")

        self.curve: FieldCurve = self._rebuild_curve()
        self.root = widgets.VBox([
            widgets.HTML("<h3>Magnetic Field Induction Simulator</h3>"),
            self.strength_label,
            self.strength,
            self.distance_label,
            self.distance,
            self.readout,
            self.output,
            widgets.HTML(MODEL_NOTE_HTML),
        ])
        self._refresh()

    @property
    def current_input(self) -> SampleInput:
        return clamp_input(self.strength.value, self.distance.value)

    def current_field(self) -> float:
        return self.current_input.field_strength()

    def _rebuild_curve(self) -> FieldCurve:
        grid = distance_grid(self.settings.curve_points, self.settings.curve_step_cm)
        self.curve_rebuilds += 1
        logger.debug(f"Rebuilding field curve for {self.strength.value} G")
        return build_curve(self.strength.value, grid)

    def _on_strength_change(self, change):
        self.curve = self._rebuild_curve()
        self._refresh()

    def _on_distance_change(self, change):
        self._refresh()

    def _update_labels(self):
        self.strength_label.value = f"<b>Magnet Strength (Gauss): {format_number(self.strength.value)}</b>"
        self.distance_label.value = f"<b>Distance (cm): {format_number(self.distance.value)}</b>"

    def _refresh(self):
        self._update_labels()
        with self.output:
            clear_output(wait=True)
            try:
                current = self.current_input
                self.readout.value = (
                    f"<div style='{READOUT_STYLE}'>"
                    "<h4 style='margin:0 0 6px 0'>Current Field Strength</h4>"
                    f"<span style='font-size:18px'>{format_field(current.field_strength(), self.settings.readout_digits)}</span>"
                    "</div>"
                )
                fig, _ = curve_figure(self.curve, self.settings, current)
            except Exception as e:
                logger.exception("Failed to refresh field view")
                print("Error:", e)
                return
            display(fig)
            plt.close(fig)

    def display(self):
        display(self.root)


def launch():
    ui = FieldExplorerUI()
    ui.display()
    return ui
