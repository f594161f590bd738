"""File Report Render Module

Turns aggregated extension groups into the HTML report document.
"""

from filereport_render.table import REPORT_TEMPLATE, render, render_report, write_report

__all__ = [
    "REPORT_TEMPLATE",
    "render",
    "render_report",
    "write_report",
]
