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

from typing import Optional, Tuple
from fontTools.pens.basePen import AbstractPen
from picopath.path_interpreter import parse_path
from picopath.path_sink import PathSink


class PenPathSink(PathSink):
    """A sink that draws onto a FontTools Pen.

    Pens have no arcs and can't transform what they already drew, so parse
    with native_arcs=False (or use draw_path). Contours are only started once
    they draw something; call endPath when done to end an open contour.

    Args:
        pen: the fontTools.pens.basePen.AbstractPen to draw on.
    """

    def __init__(self, pen: AbstractPen):
        self.pen = pen
        # drawing before any moveTo starts at the origin
        self._pending_move: Optional[Tuple[float, float]] = (0, 0)
        self._open = False

    def _begin(self):
        if self._pending_move is not None:
            self.pen.moveTo(self._pending_move)
            self._pending_move = None
            self._open = True

    def moveTo(self, x, y):
        self.endPath()
        self._pending_move = (x, y)

    def lineTo(self, x, y):
        self._begin()
        self.pen.lineTo((x, y))

    def cubicTo(self, x1, y1, x2, y2, x, y):
        self._begin()
        self.pen.curveTo((x1, y1), (x2, y2), (x, y))

    def closePath(self):
        if self._open:
            self.pen.closePath()
            self._open = False
        self._pending_move = None

    def endPath(self):
        if self._open:
            self.pen.endPath()
            self._open = False

    def arcSegment(self, rect, start_angle, sweep_angle):
        raise NotImplementedError("Pens have no arcs, parse with native_arcs=False")

    def applyTransform(self, affine):
        raise NotImplementedError("Pens can't transform what they already drew")


def draw_path(svg_path: str, pen: AbstractPen, strict: bool = True):
    """Draw svg path data onto a FontTools Pen."""
    sink = parse_path(svg_path, PenPathSink(pen), native_arcs=False, strict=strict)
    sink.endPath()
