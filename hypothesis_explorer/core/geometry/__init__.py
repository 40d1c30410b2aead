"""Curve geometry for distribution graphs (UI-free)."""

from .curve import (
    plot_window,
    density_curve,
    region_polygon,
    rejection_region_polygons,
)

__all__ = [
    "plot_window",
    "density_curve",
    "region_polygon",
    "rejection_region_polygons",
]
