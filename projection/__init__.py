"""
Projection Package

Composite map projections: a base projection plus rectangular inset
frames, each with its own projection and affine transform.

Modules:
    providers: Projection interface and pyproj-backed implementation
    raw_coords: Conversion between projected and raw plane coordinates
    affine_transform: Composable rotate/scale/translate transform
    mixed: MixedProjection and Frame
    presets: Configured composite projections (Albers USA)
"""

from projection.providers import Projection, ProjProjection, ProjectionError, get_projection
from projection.raw_coords import to_raw_xy
from projection.affine_transform import AffineTransform
from projection.mixed import Frame, MixedProjection
from projection.presets import (
    create_mixed_projection,
    get_named_projection,
    create_albers_usa,
    get_albers_usa,
    project_geometry
)

__all__ = [
    'Projection',
    'ProjProjection',
    'ProjectionError',
    'get_projection',
    'to_raw_xy',
    'AffineTransform',
    'Frame',
    'MixedProjection',
    'create_mixed_projection',
    'get_named_projection',
    'create_albers_usa',
    'get_albers_usa',
    'project_geometry'
]
