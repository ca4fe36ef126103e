# Copyright 2020 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from typing import NamedTuple


DEFAULT_ALMOST_EQUAL_TOLERANCE = 1e-9


def almost_equal(c1, c2, tolerance=DEFAULT_ALMOST_EQUAL_TOLERANCE) -> bool:
    return abs(c1 - c2) <= tolerance


class Point(NamedTuple):
    x: float = 0
    y: float = 0

    def __sub__(self, other: "Point") -> "Vector":
        """Return Vector from other to self."""
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __add__(self, other: "Vector") -> "Point":
        """Return Point translated by other Vector"""
        if isinstance(other, Vector):
            return self.__class__(self.x + other.x, self.y + other.y)
        return NotImplemented

    def reflect(self, center: "Point") -> "Point":
        """Return the mirror image of self through center."""
        return self.__class__(2 * center.x - self.x, 2 * center.y - self.y)

    def almost_equals(
        self, other: "Point", tolerance=DEFAULT_ALMOST_EQUAL_TOLERANCE
    ) -> bool:
        return almost_equal(self.x, other.x, tolerance) and almost_equal(
            self.y, other.y, tolerance
        )


class Vector(NamedTuple):
    x: float = 0
    y: float = 0

    def __mul__(self, scalar: float) -> "Vector":
        """Multiply vector by a scalar value."""
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return self.__class__(self.x * scalar, self.y * scalar)


class Rect(NamedTuple):
    x: float = 0
    y: float = 0
    w: float = 0
    h: float = 0

    @classmethod
    def from_center(cls, center: Point, rx: float, ry: float) -> "Rect":
        """Return the Rect bounding an axis-aligned ellipse."""
        return cls(center.x - rx, center.y - ry, 2 * rx, 2 * ry)

    def center(self) -> Point:
        return Point(self.x + self.w / 2, self.y + self.h / 2)
