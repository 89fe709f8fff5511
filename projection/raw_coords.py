"""
Raw coordinate conversion.

Projected coordinates carry a false origin and a linear unit. Raw
coordinates strip both and divide by the ellipsoid's semi-major axis,
giving plane positions in earth radii from the projection's datum origin.
Bounding boxes of inset frames are expressed in these units.
"""

from typing import Tuple


def normalize_xy(x: float, y: float, proj) -> Tuple[float, float]:
    """
    Convert projected coordinates of ``proj`` to raw coordinates.

    ``proj`` must expose ``a``, ``fr_meter``, ``x0`` and ``y0``.
    """
    return (
        (x / proj.fr_meter - proj.x0) / proj.a,
        (y / proj.fr_meter - proj.y0) / proj.a
    )


def denormalize_xy(x: float, y: float, proj) -> Tuple[float, float]:
    """Inverse of normalize_xy."""
    return (
        (x * proj.a + proj.x0) * proj.fr_meter,
        (y * proj.a + proj.y0) * proj.fr_meter
    )


def to_raw_xy(lon: float, lat: float, proj) -> Tuple[float, float]:
    """
    Project a lon/lat position (degrees) and return raw coordinates.

    Raises:
        ProjectionError: If ``proj`` cannot project the position
    """
    x, y = proj.forward(lon, lat)
    return normalize_xy(x, y, proj)
