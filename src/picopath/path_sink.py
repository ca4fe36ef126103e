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

"""Destinations for parsed path data.

All coordinates passed to a sink are absolute. Method names are camelCase to
match the FontTools Pen API.
"""
import abc
from math import cos, radians, sin
from typing import Any, List, Tuple
from picopath import svg_meta, svg_pathops
from picopath.arc import arc_segment_to_cubics
from picopath.geometric_types import Point, Rect
from picopath.svg_meta import SVGCommand
from picopath.svg_transform import Affine2D


# How far the current point may be from an arc's start before a line is added
_ARC_START_TOLERANCE = 1e-6


class PathSink(abc.ABC):
    @abc.abstractmethod
    def moveTo(self, x: float, y: float):
        ...

    @abc.abstractmethod
    def lineTo(self, x: float, y: float):
        ...

    @abc.abstractmethod
    def cubicTo(
        self, x1: float, y1: float, x2: float, y2: float, x: float, y: float
    ):
        ...

    @abc.abstractmethod
    def closePath(self):
        ...

    @abc.abstractmethod
    def arcSegment(self, rect: Rect, start_angle: float, sweep_angle: float):
        """Add the arc of the ellipse inscribed in rect.

        Angles are in degrees, 0 along +x and growing toward +y.
        """

    @abc.abstractmethod
    def applyTransform(self, affine: Affine2D):
        """Transform everything drawn so far."""


class RecordingPathSink(PathSink):
    """Records operations as (name, args) tuples."""

    def __init__(self):
        self.operations: List[Tuple[str, Tuple[Any, ...]]] = []

    def moveTo(self, x, y):
        self.operations.append(("moveTo", (x, y)))

    def lineTo(self, x, y):
        self.operations.append(("lineTo", (x, y)))

    def cubicTo(self, x1, y1, x2, y2, x, y):
        self.operations.append(("cubicTo", (x1, y1, x2, y2, x, y)))

    def closePath(self):
        self.operations.append(("closePath", ()))

    def arcSegment(self, rect, start_angle, sweep_angle):
        self.operations.append(("arcSegment", (rect, start_angle, sweep_angle)))

    def applyTransform(self, affine):
        self.operations.append(("applyTransform", (affine,)))


def _map_args(affine: Affine2D, cmd: str, args: Tuple[float, ...]):
    args = list(args)
    for x_idx, y_idx in zip(*svg_meta.cmd_coords(cmd)):
        args[x_idx], args[y_idx] = affine.map_point((args[x_idx], args[y_idx]))
    return tuple(args)


class SVGCommandSink(PathSink):
    """Accumulates absolute M, L, C and Z commands.

    Arcs are flattened to cubics. Transforms rewrite every stored command.
    """

    def __init__(self):
        self.commands: List[SVGCommand] = []
        self._current_point = Point()
        self._subpath_start = Point()

    @property
    def d(self) -> str:
        return " ".join(
            svg_meta.path_segment(cmd, *args) for cmd, args in self.commands
        )

    def moveTo(self, x, y):
        self.commands.append(("M", (x, y)))
        self._current_point = self._subpath_start = Point(x, y)

    def lineTo(self, x, y):
        self.commands.append(("L", (x, y)))
        self._current_point = Point(x, y)

    def cubicTo(self, x1, y1, x2, y2, x, y):
        self.commands.append(("C", (x1, y1, x2, y2, x, y)))
        self._current_point = Point(x, y)

    def closePath(self):
        self.commands.append(("Z", ()))
        self._current_point = self._subpath_start

    def arcSegment(self, rect, start_angle, sweep_angle):
        # like Skia/Android arcTo: connect to the arc start with a line
        theta = radians(start_angle)
        center = rect.center()
        start = Point(
            center.x + rect.w / 2 * cos(theta), center.y + rect.h / 2 * sin(theta)
        )
        if not self.commands:
            self.moveTo(*start)
        elif not start.almost_equals(self._current_point, _ARC_START_TOLERANCE):
            self.lineTo(*start)
        for point1, point2, end_point in arc_segment_to_cubics(
            rect, start_angle, sweep_angle
        ):
            self.cubicTo(*point1, *point2, *end_point)

    def applyTransform(self, affine):
        self.commands = [
            (cmd, _map_args(affine, cmd, args)) for cmd, args in self.commands
        ]
        self._current_point = affine.map_point(self._current_point)
        self._subpath_start = affine.map_point(self._subpath_start)

    def skia_path(self, fill_rule: str = "nonzero"):
        return svg_pathops.skia_path(self.commands, fill_rule)

    def bounds(self) -> Rect:
        return svg_pathops.bounding_box(self.commands)

    def area(self, fill_rule: str = "nonzero") -> float:
        return svg_pathops.path_area(self.commands, fill_rule)
