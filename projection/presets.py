"""
Named Composite Projections

Builds MixedProjection instances from the definitions in
config/projections_config.json.

Functions:
    create_mixed_projection: Build a MixedProjection from a definition dict
    get_named_projection: Build a configured projection by name
    create_albers_usa: Albers USA with Alaska, Hawaii and optional Puerto Rico
    get_albers_usa: Factory form of create_albers_usa
    project_geometry: Reproject a lon/lat shapely geometry
"""

from typing import Callable, Dict, Optional

from shapely.geometry.base import BaseGeometry
from shapely.ops import transform

from config.config_loader import get_projection_definition, load_projection_settings
from projection.mixed import MixedProjection
from projection.providers import Projection, get_projection
from utils.logger import get_logger

logger = get_logger(__name__)


def create_mixed_projection(definition: Dict,
                            options: Optional[Dict] = None,
                            include_optional: bool = False) -> MixedProjection:
    """
    Build a MixedProjection from a configuration definition.

    Frames marked ``"optional": true`` are added only when ``options``
    contains a truthy entry under the frame's name (e.g. ``{'PR': True}``),
    or when ``include_optional`` is set.

    Args:
        definition: Dict with 'base' and 'frames' keys
        options: Per-frame switches keyed by frame name
        include_optional: Add every optional frame

    Returns:
        MixedProjection with frames registered in configuration order
    """
    options = options or {}
    mixed = MixedProjection(get_projection(definition['base']))

    for frame in definition.get('frames', []):
        name = frame.get('name')
        if frame.get('optional', False):
            enabled = options.get(name, include_optional) if name else include_optional
            if not enabled:
                logger.debug(f"Skipping optional frame {name}")
                continue
        mixed.add_frame(
            get_projection(frame['projection']),
            frame['source_center'],
            frame['dest_center'],
            float(frame['width']),
            float(frame['height']),
            float(frame.get('scale', 1.0)),
            float(frame.get('rotation', 0.0)),
            name=name
        )

    logger.info(f"Built composite projection with {len(mixed.frames)} frame(s)")
    return mixed


def get_named_projection(name: Optional[str] = None,
                         options: Optional[Dict] = None,
                         config: Optional[Dict] = None) -> MixedProjection:
    """
    Build a configured composite projection by name.

    Args:
        name: Projection name; defaults to settings.default_projection
        options: Per-frame switches, see create_mixed_projection
        config: Loaded configuration (optional, will load if not provided)

    Raises:
        ValueError: If the name is not configured
    """
    settings = load_projection_settings(config)
    name = name or settings['default_projection']
    definition = get_projection_definition(name, config)
    return create_mixed_projection(
        definition,
        options,
        include_optional=settings['include_optional_frames']
    )


def create_albers_usa(options: Optional[Dict] = None,
                      config: Optional[Dict] = None) -> MixedProjection:
    """
    Albers equal-area projection of the USA with inset frames.

    Alaska and Hawaii are always moved next to the contiguous states;
    Puerto Rico is added when ``options['PR']`` is true.
    """
    return get_named_projection('albersusa', options, config)


def get_albers_usa(options: Optional[Dict] = None) -> Callable[[], MixedProjection]:
    """Return a zero-argument factory for create_albers_usa."""
    def factory():
        return create_albers_usa(options or {})
    return factory


def project_geometry(geom: BaseGeometry, projection: Projection) -> BaseGeometry:
    """
    Reproject a shapely geometry from lon/lat degrees through ``projection``.

    Raises:
        ProjectionError: If any vertex cannot be projected
    """
    def _project_coords(xs, ys, zs=None):
        points = [projection.forward(x, y) for x, y in zip(xs, ys)]
        return tuple(p[0] for p in points), tuple(p[1] for p in points)

    return transform(_project_coords, geom)
