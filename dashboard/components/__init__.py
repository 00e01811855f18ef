"""Component namespace for the dashboard app."""

from .chart_panel import render_chart, render_display_toggles, render_export_buttons
from .controls import render_axis_selector, render_chart_type_selector
from .header import render_header
from .preview import render_preview
from .upload import render_uploader

__all__ = [
    "render_axis_selector",
    "render_chart",
    "render_chart_type_selector",
    "render_display_toggles",
    "render_export_buttons",
    "render_header",
    "render_preview",
    "render_uploader",
]
