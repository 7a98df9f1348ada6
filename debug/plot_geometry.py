"""Simple slice visualization helpers for debugging."""

from typing import Sequence

import matplotlib.pyplot as plt
from shapely.geometry import Polygon, MultiPolygon, LineString
from shapely.geometry.base import BaseGeometry

FRAGMENT_COLORS = ['tab:blue', 'tab:orange', 'tab:green', 'tab:purple', 'tab:olive', 'tab:cyan']


def plot_slice(
    polygon: Polygon,
    splitter: LineString,
    fragments: Sequence[Polygon],
    title: str = "Polygon Slice",
):
    """Plot the input with its splitter next to the sliced fragments.

    Args:
        polygon: Polygon that was sliced
        splitter: Splitter line
        fragments: Output of slice_polygon
        title: Plot title
    """
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(12, 5))

    # Plot input and splitter
    _plot_geometry(ax1, polygon, color='red', alpha=0.4)
    _plot_geometry(ax1, splitter, color='black')
    ax1.set_title("Input")

    # Plot fragments, one color each
    for i, fragment in enumerate(fragments):
        _plot_geometry(ax2, fragment, color=FRAGMENT_COLORS[i % len(FRAGMENT_COLORS)], alpha=0.6)
    _plot_geometry(ax2, splitter, color='black')
    ax2.set_title(f"{len(fragments)} fragment(s)")

    for ax in (ax1, ax2):
        ax.set_xlim(*_padded_range(polygon.bounds[0], polygon.bounds[2]))
        ax.set_ylim(*_padded_range(polygon.bounds[1], polygon.bounds[3]))
        ax.set_aspect('equal')
        ax.grid(True, alpha=0.3)

    fig.suptitle(title)
    plt.tight_layout()
    plt.show()


def _padded_range(lo: float, hi: float, ratio: float = 0.1):
    pad = (hi - lo) * ratio or 1.0
    return lo - pad, hi + pad


def _plot_geometry(ax, geom: BaseGeometry, color='blue', alpha=0.5):
    """Plot a geometry on the given axes.

    Args:
        ax: Matplotlib axes
        geom: Geometry to plot
        color: Fill color
        alpha: Transparency
    """
    if isinstance(geom, Polygon):
        _plot_polygon(ax, geom, color=color, alpha=alpha)
    elif isinstance(geom, MultiPolygon):
        for poly in geom.geoms:
            _plot_polygon(ax, poly, color=color, alpha=alpha)
    elif isinstance(geom, LineString):
        x, y = geom.xy
        ax.plot(x, y, color=color, linewidth=2)


def _plot_polygon(ax, poly: Polygon, color='blue', alpha=0.5):
    """Plot a single polygon with holes.

    Args:
        ax: Matplotlib axes
        poly: Polygon to plot
        color: Fill color
        alpha: Transparency
    """
    # Plot exterior
    x, y = poly.exterior.xy
    ax.fill(x, y, color=color, alpha=alpha, edgecolor='black', linewidth=1.5)

    # Plot holes (as white)
    for interior in poly.interiors:
        x, y = interior.xy
        ax.fill(x, y, color='white', edgecolor='black', linewidth=1)
