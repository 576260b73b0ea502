from __future__ import annotations

import logging

from chartcanvas.raster.surface import RasterSurface
from chartcanvas.surface import DrawingSurface


LOGGER = logging.getLogger(__name__)


class SurfaceRegistry:
    """Maps surface identifiers to drawing targets."""

    def __init__(self) -> None:
        self._surfaces: dict[str, DrawingSurface] = {}

    def register(self, surface_id: str, surface: DrawingSurface) -> DrawingSurface:
        if not surface_id:
            raise ValueError("surface_id must be non-empty")
        if surface_id in self._surfaces:
            LOGGER.debug("replacing surface %r", surface_id)
        self._surfaces[surface_id] = surface
        return surface

    def create(self, surface_id: str, width: int, height: int) -> RasterSurface:
        surface = RasterSurface(width, height)
        self.register(surface_id, surface)
        return surface

    def resolve(self, surface_id: str) -> DrawingSurface | None:
        return self._surfaces.get(surface_id)

    def remove(self, surface_id: str) -> DrawingSurface | None:
        return self._surfaces.pop(surface_id, None)

    def __contains__(self, surface_id: object) -> bool:
        return surface_id in self._surfaces

    def __len__(self) -> int:
        return len(self._surfaces)


DEFAULT_REGISTRY = SurfaceRegistry()
