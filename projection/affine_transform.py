"""
Composable 2D affine transform built on ``affine.Affine``.

Each operation returns a new transform that applies the operation after
the ones already accumulated, so
``AffineTransform().rotate(30, cx, cy).scale(0.5)`` rotates a point first
and scales the rotated result. Instances are never modified.
"""

from typing import Tuple

from affine import Affine


class AffineTransform:

    __slots__ = ('_matrix',)

    def __init__(self, matrix: Affine = None):
        self._matrix = Affine.identity() if matrix is None else matrix

    @property
    def matrix(self) -> Affine:
        return self._matrix

    def _then(self, op: Affine) -> 'AffineTransform':
        return AffineTransform(op @ self.matrix)

    def rotate(self, degrees: float, cx: float = 0.0, cy: float = 0.0) -> 'AffineTransform':
        """Rotate counter-clockwise by ``degrees`` about (cx, cy)."""
        return self._then(Affine.rotation(degrees, pivot=(cx, cy)))

    def scale(self, sx: float, sy: float = None) -> 'AffineTransform':
        """Scale about the origin; uniform when ``sy`` is omitted."""
        return self._then(Affine.scale(sx, sx if sy is None else sy))

    def translate(self, dx: float, dy: float) -> 'AffineTransform':
        return self._then(Affine.translation(dx, dy))

    def transform_xy(self, x: float, y: float) -> Tuple[float, float]:
        return self.matrix @ (x, y)

    def __repr__(self):
        return f"AffineTransform({tuple(self.matrix)[:6]})"
