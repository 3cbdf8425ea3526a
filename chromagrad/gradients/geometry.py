"""
Rectangles, alignments and gradient transforms.

Alignments are expressed in the usual [-1, 1] box coordinates, where
(-1, -1) is the top-left corner and (0, 0) is the center of the rect.
"""
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple, Union

import numpy as np

from ..types.gradient_types import Matrix4Storage, Offset, TextDirection


@dataclass(frozen=True)
class Rect:
    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def from_ltwh(cls, left: float, top: float, width: float, height: float) -> Rect:
        return cls(left, top, left + width, top + height)

    @classmethod
    def from_size(cls, width: float, height: float) -> Rect:
        return cls(0.0, 0.0, width, height)

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center(self) -> Offset:
        return (self.left + self.width / 2.0, self.top + self.height / 2.0)

    @property
    def shortest_side(self) -> float:
        return min(abs(self.width), abs(self.height))

    @property
    def longest_side(self) -> float:
        return max(abs(self.width), abs(self.height))


@dataclass(frozen=True)
class Alignment:
    x: float
    y: float

    top_left: ClassVar[Alignment]
    top_center: ClassVar[Alignment]
    top_right: ClassVar[Alignment]
    center_left: ClassVar[Alignment]
    center: ClassVar[Alignment]
    center_right: ClassVar[Alignment]
    bottom_left: ClassVar[Alignment]
    bottom_center: ClassVar[Alignment]
    bottom_right: ClassVar[Alignment]

    def resolve(self, text_direction: Optional[TextDirection] = None) -> Alignment:
        return self

    def within_rect(self, rect: Rect) -> Offset:
        half_w = rect.width / 2.0
        half_h = rect.height / 2.0
        return (rect.left + half_w + self.x * half_w, rect.top + half_h + self.y * half_h)


@dataclass(frozen=True)
class AlignmentDirectional:
    """An alignment whose horizontal component follows the reading direction."""
    start: float
    y: float

    top_start: ClassVar[AlignmentDirectional]
    top_end: ClassVar[AlignmentDirectional]
    center_start: ClassVar[AlignmentDirectional]
    center_end: ClassVar[AlignmentDirectional]
    bottom_start: ClassVar[AlignmentDirectional]
    bottom_end: ClassVar[AlignmentDirectional]

    def resolve(self, text_direction: Optional[TextDirection] = None) -> Alignment:
        if text_direction is None:
            raise ValueError(
                "AlignmentDirectional needs a text direction to resolve into an Alignment"
            )
        if TextDirection(text_direction) is TextDirection.RTL:
            return Alignment(-self.start, self.y)
        return Alignment(self.start, self.y)


AlignmentGeometry = Union[Alignment, AlignmentDirectional]

Alignment.top_left = Alignment(-1.0, -1.0)
Alignment.top_center = Alignment(0.0, -1.0)
Alignment.top_right = Alignment(1.0, -1.0)
Alignment.center_left = Alignment(-1.0, 0.0)
Alignment.center = Alignment(0.0, 0.0)
Alignment.center_right = Alignment(1.0, 0.0)
Alignment.bottom_left = Alignment(-1.0, 1.0)
Alignment.bottom_center = Alignment(0.0, 1.0)
Alignment.bottom_right = Alignment(1.0, 1.0)

AlignmentDirectional.top_start = AlignmentDirectional(-1.0, -1.0)
AlignmentDirectional.top_end = AlignmentDirectional(1.0, -1.0)
AlignmentDirectional.center_start = AlignmentDirectional(-1.0, 0.0)
AlignmentDirectional.center_end = AlignmentDirectional(1.0, 0.0)
AlignmentDirectional.bottom_start = AlignmentDirectional(-1.0, 1.0)
AlignmentDirectional.bottom_end = AlignmentDirectional(1.0, 1.0)


def resolve_point(alignment: AlignmentGeometry, rect: Rect,
                  text_direction: Optional[TextDirection] = None) -> Offset:
    return alignment.resolve(text_direction).within_rect(rect)


class GradientTransform:
    """Base for transforms applied to a gradient's shader in device space."""

    def matrix(self, bounds: Rect, text_direction: Optional[TextDirection] = None) -> np.ndarray:
        raise NotImplementedError

    def resolve(self, bounds: Rect, text_direction: Optional[TextDirection] = None) -> Matrix4Storage:
        """The 4x4 matrix flattened in column-major order."""
        m = self.matrix(bounds, text_direction)
        return tuple(float(v) for v in m.flatten(order='F'))


@dataclass(frozen=True)
class GradientRotation(GradientTransform):
    """Rotate the gradient by ``radians`` about the center of the bounds."""
    radians: float

    def matrix(self, bounds: Rect, text_direction: Optional[TextDirection] = None) -> np.ndarray:
        cx, cy = bounds.center
        sin = math.sin(self.radians)
        cos = math.cos(self.radians)
        origin_x = sin * cy + (1.0 - cos) * cx
        origin_y = -sin * cx + (1.0 - cos) * cy
        return np.array([
            [cos, -sin, 0.0, origin_x],
            [sin, cos, 0.0, origin_y],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ])


def resolve_transform(transform: Optional[GradientTransform], bounds: Rect,
                      text_direction: Optional[TextDirection] = None) -> Optional[Matrix4Storage]:
    if transform is None:
        return None
    return transform.resolve(bounds, text_direction)


def matrix_from_storage(storage: Matrix4Storage) -> np.ndarray:
    """Inverse of ``GradientTransform.resolve``."""
    return np.array(storage, dtype=float).reshape((4, 4), order='F')
