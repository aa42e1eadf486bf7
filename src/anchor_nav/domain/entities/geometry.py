# anchor_nav/domain/entities/geometry.py
"""4x4 rigid transforms in map space.

Column-vector convention: ``T[:3, :3]`` holds the rotation axes as columns,
``T[:3, 3]`` the position, ``T[3] == [0, 0, 0, 1]``.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray

Transform = NDArray[np.float64]
Vec3 = NDArray[np.float64]

UP = np.array([0.0, 1.0, 0.0])


def identity() -> Transform:
    return np.eye(4, dtype=np.float64)


def as_transform(m: ArrayLike) -> Transform:
    T = np.array(m, dtype=np.float64)
    if T.shape != (4, 4):
        raise ValueError(f"transform must be 4x4, got shape {T.shape}")
    return T


def from_position(x: float, y: float, z: float) -> Transform:
    T = identity()
    T[:3, 3] = (x, y, z)
    return T


def from_axes(x_axis: Vec3, y_axis: Vec3, z_axis: Vec3, position: Vec3) -> Transform:
    T = identity()
    T[:3, 0], T[:3, 1], T[:3, 2], T[:3, 3] = x_axis, y_axis, z_axis, position
    return T


def position(T: Transform) -> Vec3:
    return np.array(T[:3, 3], dtype=np.float64)


def distance(a: Transform, b: Transform) -> float:
    return float(np.linalg.norm(position(b) - position(a)))
