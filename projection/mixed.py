"""
Mixed (Composite) Projection Module

A compound projection consisting of a base projection and one or more
rectangular frames. Positions whose base projection lands inside a frame
are reprojected with the frame's own projection and then moved into place
with the frame's affine transform. This is how cartographic insets such as
Alaska and Hawaii are drawn next to the contiguous United States.

Frames are tested in the order they were added; the first frame containing
the point wins.
"""

import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from projection.affine_transform import AffineTransform
from projection.providers import Projection
from projection.raw_coords import to_raw_xy
from utils.logger import get_logger

logger = get_logger(__name__)

BBox = Tuple[float, float, float, float]


@dataclass(frozen=True)
class Frame:
    """
    Inset frame of a MixedProjection.

    Attributes:
        bbox: (xmin, ymin, xmax, ymax) in raw units of the base projection
        transform: Affine transform applied after the frame projection
        projection: Projection used for positions inside the frame
        name: Optional label, used in log messages
    """
    bbox: BBox
    transform: AffineTransform
    projection: Projection
    name: Optional[str] = None

    def contains(self, x: float, y: float) -> bool:
        """Bounds are inclusive on all four sides."""
        xmin, ymin, xmax, ymax = self.bbox
        return xmin <= x <= xmax and ymin <= y <= ymax


def _check_center(center: Sequence[float], label: str) -> Tuple[float, float]:
    if len(center) != 2 or not all(math.isfinite(v) for v in center):
        raise ValueError(f"{label} must be a finite (lon, lat) pair, got {center!r}")
    return float(center[0]), float(center[1])


class MixedProjection(Projection):
    """
    Base projection plus an ordered list of inset frames.

    The linear parameters (``a``, ``fr_meter``, ``x0``, ``y0``) are those of
    the base projection, so ``forward`` returns coordinates in the base
    projection's units.

    Example:
        >>> albers = '+proj=aea +lon_0=-96 +lat_0=37.5 +lat_1=29.5 +lat_2=45.5'
        >>> lcc = '+proj=lcc +lon_0=-96 +lat_0=39 +lat_1=33 +lat_2=45'
        >>> mixed = MixedProjection(get_projection(albers))
        >>> mixed.add_frame(get_projection(lcc), (-152, 63), (-115, 27),
        ...                 6e6, 3e6, 0.31, 29.2)
        >>> x, y = mixed.forward(-150.0, 61.2)
    """

    def __init__(self, base: Projection):
        self.base = base
        self.a = base.a
        self.fr_meter = base.fr_meter
        self.x0 = base.x0
        self.y0 = base.y0
        self._frames = []

    @property
    def frames(self) -> Tuple[Frame, ...]:
        return tuple(self._frames)

    def add_frame(self,
                  projection: Projection,
                  source_center: Sequence[float],
                  dest_center: Sequence[float],
                  frame_width: float,
                  frame_height: float,
                  scale: float = 1.0,
                  rotation: float = 0.0,
                  name: Optional[str] = None) -> 'MixedProjection':
        """
        Register an inset frame.

        Parameters:
        -----------
        projection : Projection
            Projection to use for positions inside the frame
        source_center : Sequence[float]
            (lon, lat) center of the frame contents
        dest_center : Sequence[float]
            (lon, lat) location to move the frame center to
        frame_width : float
            Width of the frame, in base projection meters
        frame_height : float
            Height of the frame, in base projection meters
        scale : float
            Scale factor; 1 = no scaling, negative mirrors the inset
        rotation : float
            Rotation in degrees; 0 = no rotation
        name : Optional[str]
            Label for the frame

        Returns:
        --------
        MixedProjection
            self, so calls can be chained

        Raises:
        -------
        ValueError
            If a size is not positive, or a value is not finite
        ProjectionError
            If a center cannot be projected with the base projection
        """
        source_center = _check_center(source_center, 'source_center')
        dest_center = _check_center(dest_center, 'dest_center')
        for label, value in (('frame_width', frame_width),
                             ('frame_height', frame_height)):
            if not (math.isfinite(value) and value > 0):
                raise ValueError(f"{label} must be a positive number, got {value}")
        for label, value in (('scale', scale), ('rotation', rotation)):
            if not math.isfinite(value):
                raise ValueError(f"{label} must be finite, got {value}")

        a2 = self.base.a * 2
        x1, y1 = to_raw_xy(*source_center, self.base)
        x2, y2 = to_raw_xy(*dest_center, self.base)
        bbox = (x1 - frame_width / a2, y1 - frame_height / a2,
                x1 + frame_width / a2, y1 + frame_height / a2)

        transform = AffineTransform().rotate(rotation, x1, y1).scale(scale)
        tx, ty = transform.transform_xy(x1, y1)
        transform = transform.translate(x2 - tx, y2 - ty)

        self._frames.append(Frame(bbox=bbox, transform=transform,
                                  projection=projection, name=name))
        logger.debug(
            f"Added frame {name or len(self._frames) - 1}: bbox={bbox}, "
            f"scale={scale}, rotation={rotation}"
        )
        return self

    def frame_at(self, x: float, y: float) -> Optional[Frame]:
        """First frame whose bbox contains raw base coordinates (x, y)."""
        for frame in self._frames:
            if frame.contains(x, y):
                return frame
        return None

    def forward_raw(self, lon: float, lat: float) -> Tuple[float, float]:
        x, y = self.base.forward_raw(lon, lat)
        frame = self.frame_at(x, y)
        if frame is not None:
            x, y = frame.projection.forward_raw(lon, lat)
            x, y = frame.transform.transform_xy(x, y)
        return x, y

    def __repr__(self):
        return f"MixedProjection(base={self.base!r}, frames={len(self._frames)})"
