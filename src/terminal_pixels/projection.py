"""Perspective projection of 3D points onto the drawing plane."""

from collections.abc import Iterable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .cells import Color
from .centering import center_points
from .points import DEFAULT_POINT_COLOR, map_points
from .surface import TerminalSurface

__all__ = ["Camera", "map_points_3d"]


class Camera:
    """A pinhole camera.

    Parameters
    ----------
    pos : ArrayLike, default: (0.0, 0.0, 0.0)
        Position of the camera.
    direction : ArrayLike, default: (0.0, 0.0, 1.0)
        Direction the camera looks in. Normalized on assignment.
    fov : float, default: 90.0
        Field of view of camera in degrees.
    near : float, default: 1e-6
        Points closer than this along `direction` are not projected.

    Attributes
    ----------
    pos : NDArray[np.float64]
        Position of the camera.
    direction : NDArray[np.float64]
        Unit vector the camera looks along.
    fov : float
        Field of view of camera in degrees.
    near : float
        Minimum depth of projectable points.

    Methods
    -------
    project(point)
        Project a point onto the image plane.
    project_points(points)
        Project many points, dropping those that can't be projected.
    """

    def __init__(
        self,
        pos: ArrayLike = (0.0, 0.0, 0.0),
        direction: ArrayLike = (0.0, 0.0, 1.0),
        fov: float = 90.0,
        near: float = 1e-6,
    ) -> None:
        if not 0 < fov < 180:
            raise ValueError(f"fov must be between 0 and 180 degrees, got {fov}")
        if near <= 0:
            raise ValueError(f"near must be positive, got {near}")
        self.pos = np.asarray(pos, dtype=float)
        self.direction = direction
        self.fov = fov
        self.near = near

    @property
    def direction(self) -> NDArray[np.float64]:
        """Unit vector the camera looks along."""
        return self._direction

    @direction.setter
    def direction(self, direction: ArrayLike) -> None:
        direction = np.asarray(direction, dtype=float)
        norm = np.linalg.norm(direction)
        if norm == 0:
            raise ValueError("camera direction can't be the zero vector")
        self._direction = direction = direction / norm

        # Image-plane axes; world y is "up" unless looking straight along it.
        up = np.array([0.0, 1.0, 0.0])
        if abs(direction @ up) > 1 - 1e-9:
            up = np.array([0.0, 0.0, 1.0])
        right = np.cross(up, direction)
        right /= np.linalg.norm(right)
        self._basis = np.stack([right, np.cross(direction, right)])

    @property
    def focal(self) -> float:
        """Scale applied to the image plane, ``tan(fov / 2)``."""
        return float(np.tan(np.radians(self.fov) / 2))

    def project(self, point: ArrayLike) -> tuple[float, float] | None:
        """Project a point onto the image plane.

        Parameters
        ----------
        point : ArrayLike
            A 3D point.

        Returns
        -------
        tuple[float, float] | None
            Image-plane coordinates, or None if the point is behind the camera
            or nearer than `near`.
        """
        relative = np.asarray(point, dtype=float) - self.pos
        depth = relative @ self.direction
        if depth <= self.near:
            return None
        x, y = (self.focal * (self._basis @ relative) / depth).tolist()
        return x, y

    def project_points(self, points: Iterable[ArrayLike]) -> list[tuple[float, float]]:
        """Project many points, dropping those that can't be projected."""
        projected = (self.project(point) for point in points)
        return [point for point in projected if point is not None]


def map_points_3d(
    surface: TerminalSurface,
    camera: Camera,
    points: Iterable[ArrayLike],
    scale: float = 10.0,
    color: Color = DEFAULT_POINT_COLOR,
) -> None:
    """Project, scale, center, and plot 3D points.

    Points the camera can't see are skipped.
    """
    projected = [(x * scale, y * scale) for x, y in camera.project_points(points)]
    map_points(surface, center_points(surface, projected), color)
