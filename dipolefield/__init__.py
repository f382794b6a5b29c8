"""Dipole field explorer (Jupyter-focused).
Modules:
- sampler: dipole field sampler, sample points and field curves
- presets: slider ranges, default settings and input clamping
- formatting: scientific-notation readout, tick and tooltip strings
- plotting: matplotlib rendering of a field curve
- ui_widgets: ipywidgets-based UI launcher
"""

from .sampler import MU0, DomainError, FieldCurve, SampleInput, SamplePoint, build_curve, sample, sample_curve

__all__ = [
    "sampler",
    "presets",
    "formatting",
    "plotting",
    "ui_widgets",
    "MU0",
    "DomainError",
    "FieldCurve",
    "SampleInput",
    "SamplePoint",
    "build_curve",
    "sample",
    "sample_curve",
]
