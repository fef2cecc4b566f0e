from .render import (
    format_characteristic_equation,
    format_homogeneous,
    format_particular,
    format_surd,
    render_report,
)

__all__ = [
    "format_characteristic_equation",
    "format_homogeneous",
    "format_particular",
    "format_surd",
    "render_report",
]
