"""
Projection Providers

Every projection used by cartotopo, plain or composite, implements the
``Projection`` interface: a raw forward transform plus the four numbers
needed to move between raw and projected coordinates.

Concrete projections are backed by pyproj (PROJ).
"""

import math
import warnings
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Dict, Tuple, Union

from pyproj import CRS, Transformer
from pyproj.exceptions import CRSError, ProjError

from projection.raw_coords import denormalize_xy, normalize_xy
from utils.logger import get_logger

logger = get_logger(__name__)


class ProjectionError(ValueError):
    """A projection could not evaluate a position."""


class Projection(ABC):
    """
    Forward projection from lon/lat degrees to a plane.

    Attributes:
        a: Semi-major axis of the ellipsoid, in meters
        fr_meter: Output linear units per meter
        x0: False easting, in meters
        y0: False northing, in meters
    """

    a: float = 1.0
    fr_meter: float = 1.0
    x0: float = 0.0
    y0: float = 0.0

    @abstractmethod
    def forward_raw(self, lon: float, lat: float) -> Tuple[float, float]:
        """Project to raw coordinates (earth radii from the datum origin)."""

    def forward(self, lon: float, lat: float) -> Tuple[float, float]:
        """Project to coordinates in the projection's linear units."""
        x, y = self.forward_raw(lon, lat)
        return denormalize_xy(x, y, self)


def _proj_parameters(crs: CRS) -> Dict:
    with warnings.catch_warnings():
        # to_dict() warns that PROJ strings lose information
        warnings.simplefilter('ignore', UserWarning)
        return crs.to_dict()


class ProjProjection(Projection):
    """
    Projection backed by a pyproj CRS.

    Parameters:
    -----------
    definition : Union[str, int, CRS]
        Anything pyproj.CRS.from_user_input accepts, e.g.
        '+proj=lcc +lon_0=-96 +lat_0=39 +lat_1=33 +lat_2=45' or 'EPSG:5070'

    Raises:
    -------
    ValueError
        If the definition is not a valid projected CRS
    """

    def __init__(self, definition: Union[str, int, CRS]):
        try:
            crs = CRS.from_user_input(definition)
        except CRSError as e:
            raise ValueError(f"Invalid projection definition '{definition}': {e}")
        if not crs.is_projected:
            raise ValueError(f"Not a projected coordinate system: '{definition}'")

        params = _proj_parameters(crs)
        self.definition = definition
        self.crs = crs
        self.a = crs.ellipsoid.semi_major_metre
        self.x0 = float(params.get('x_0', 0.0))
        self.y0 = float(params.get('y_0', 0.0))
        self.fr_meter = 1.0 / crs.axis_info[0].unit_conversion_factor
        self._transformer = Transformer.from_crs(crs.geodetic_crs, crs, always_xy=True)

        logger.debug(
            f"Initialized projection '{definition}' "
            f"(a={self.a}, x0={self.x0}, y0={self.y0}, fr_meter={self.fr_meter})"
        )

    def forward(self, lon: float, lat: float) -> Tuple[float, float]:
        try:
            x, y = self._transformer.transform(lon, lat, errcheck=True)
        except ProjError as e:
            raise ProjectionError(f"Cannot project ({lon}, {lat}) with '{self.definition}': {e}")
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ProjectionError(f"Non-finite result projecting ({lon}, {lat}) with '{self.definition}'")
        return x, y

    def forward_raw(self, lon: float, lat: float) -> Tuple[float, float]:
        x, y = self.forward(lon, lat)
        return normalize_xy(x, y, self)

    def __repr__(self):
        return f"ProjProjection({self.definition!r})"


@lru_cache(maxsize=32)
def get_projection(definition: Union[str, int]) -> ProjProjection:
    """
    Return a (cached) projection for a PROJ string or EPSG code.

    Projections are read-only after construction, so one instance can be
    shared by every composite projection that uses the same definition.
    """
    return ProjProjection(definition)
