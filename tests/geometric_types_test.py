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

from picopath.geometric_types import almost_equal, Point, Rect, Vector
import pytest


def test_point_subtraction_and_addition():
    p0 = Point(1, 3)
    p1 = Point(-2, 4)

    v = p1 - p0

    assert isinstance(v, Vector)
    assert v.x == -3
    assert v.y == 1

    p3 = p0 + v
    assert isinstance(p3, Point)
    assert p3 == p1


@pytest.mark.parametrize(
    "point, center, expected",
    [
        (Point(1, 1), Point(2, 2), Point(3, 3)),
        (Point(5, -1), Point(5, -1), Point(5, -1)),
        (Point(0, 0), Point(-1, 2), Point(-2, 4)),
    ],
)
def test_point_reflect(point, center, expected):
    assert point.reflect(center) == expected


def test_point_almost_equals():
    assert Point(1, 2).almost_equals(Point(1 + 1e-10, 2 - 1e-10))
    assert not Point(1, 2).almost_equals(Point(1.001, 2))
    assert Point(1, 2).almost_equals(Point(1.001, 2), tolerance=1e-2)


def test_almost_equal():
    assert almost_equal(0.1 + 0.2, 0.3)
    assert not almost_equal(0.1, 0.2)


def test_vector_multiply():
    v = Vector(3, 4)
    assert v * 2 == Vector(6, 8)
    assert v * 0.5 == Vector(1.5, 2)

    with pytest.raises(TypeError):
        _ = v * "a"


def test_rect_from_center():
    rect = Rect.from_center(Point(5, 6), 2, 3)
    assert rect == Rect(3, 3, 4, 6)
    assert rect.center() == Point(5, 6)
