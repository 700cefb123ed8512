"""Homogeneous 4x4 transformation matrices."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


def _zeros() -> list[list[float]]:
    return [[0.0] * 4 for _ in range(4)]


@dataclass
class HMatrix:
    """A 4x4 homogeneous transform; all zeros until set."""

    matrix: list[list[float]] = field(default_factory=_zeros)

    def set_position(self, x: float, y: float, z: float) -> None:
        self.matrix = [
            [1.0, 0.0, 0.0, x],
            [0.0, 1.0, 0.0, y],
            [0.0, 0.0, 1.0, z],
            [0.0, 0.0, 0.0, 1.0],
        ]

    def set_rot_x(self, x: float) -> None:
        c, s = math.cos(x), math.sin(x)
        self.matrix = [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, c, -s, 0.0],
            [0.0, s, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]

    def set_rot_y(self, y: float) -> None:
        c, s = math.cos(y), math.sin(y)
        self.matrix = [
            [c, 0.0, s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]

    def set_rot_z(self, z: float) -> None:
        c, s = math.cos(z), math.sin(z)
        self.matrix = [
            [c, -s, 0.0, 0.0],
            [s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]


@dataclass
class Position:
    """A point in space with its translation matrix."""

    x: float
    y: float
    z: float
    mat: HMatrix = field(init=False)

    def __post_init__(self) -> None:
        self.mat = HMatrix()
        self.mat.set_position(self.x, self.y, self.z)


@dataclass
class Rotation:
    """Rotation angles about the three axes, with a matrix."""

    rox: float
    roy: float
    roz: float
    mat: HMatrix = field(default_factory=HMatrix)