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

"""Draw svg path data onto a sink.

Uppercase commands are absolute, lowercase are relative to the current point:

    M/m (x y)+                   move to; extra pairs are implicit line to
    Z/z                          close path, back to the subpath start
    L/l (x y)+                   line to
    H/h x+                       horizontal line to
    V/v y+                       vertical line to
    C/c (x1 y1 x2 y2 x y)+       cubic bezier to
    S/s (x2 y2 x y)+             cubic bezier to, first control point is the
                                 previous second control point reflected
    Q/q, T/t (x y)+              NOT curves: each pair is a line to, so
                                 "Q x1 y1 x y" draws two lines
    A/a (rx ry rot large sweep x y)+  elliptical arc to

See https://www.w3.org/TR/SVG11/paths.html#PathData
"""
import dataclasses
from absl import logging
from picopath import svg_meta
from picopath.arc import EllipticalArc, arc_to_cubic, draw_arc
from picopath.geometric_types import Point
from picopath.svg_path_iter import MalformedNumberError, iter_path_commands


# Commands that leave last_control alone; everything else resets it
_KEEPS_CONTROL_POINT = frozenset("CSZ")


@dataclasses.dataclass
class _PathState:
    sink: object
    native_arcs: bool
    current_point: Point = Point()
    subpath_start: Point = Point()
    # second control point of the last cubic, else the current point
    last_control: Point = Point()


def _absolute(state: _PathState, cmd, args):
    if cmd.isupper():
        return args
    args = list(args)
    x_coords, y_coords = svg_meta.cmd_coords(cmd)
    for i in x_coords:
        args[i] += state.current_point.x
    for i in y_coords:
        args[i] += state.current_point.y
    return tuple(args)


def _move(state: _PathState, x, y):
    state.sink.moveTo(x, y)
    state.current_point = state.subpath_start = Point(x, y)


def _close(state: _PathState):
    state.sink.closePath()
    state.sink.moveTo(*state.subpath_start)
    state.current_point = state.last_control = state.subpath_start


def _line(state: _PathState, x, y):
    state.sink.lineTo(x, y)
    state.current_point = Point(x, y)


def _horizontal_line(state: _PathState, x):
    _line(state, x, state.current_point.y)


def _vertical_line(state: _PathState, y):
    _line(state, state.current_point.x, y)


def _cubic(state: _PathState, x1, y1, x2, y2, x, y):
    state.sink.cubicTo(x1, y1, x2, y2, x, y)
    state.last_control = Point(x2, y2)
    state.current_point = Point(x, y)


def _smooth_cubic(state: _PathState, x2, y2, x, y):
    x1, y1 = state.last_control.reflect(state.current_point)
    _cubic(state, x1, y1, x2, y2, x, y)


def _arc(state: _PathState, rx, ry, rotation, large, sweep, x, y):
    end_point = Point(x, y)
    if state.native_arcs:
        draw_arc(
            state.sink,
            EllipticalArc(
                state.current_point, rx, ry, rotation, large, sweep, end_point
            ),
        )
    else:
        for point1, point2, arc_end in arc_to_cubic(
            state.current_point, rx, ry, rotation, large, sweep, end_point
        ):
            if point1 is None:
                state.sink.lineTo(*arc_end)
            else:
                state.sink.cubicTo(*point1, *point2, *arc_end)
    state.current_point = end_point


# Q and T never show up, svg_path_iter reads them as L
_CMD_HANDLERS = {
    "M": _move,
    "Z": _close,
    "L": _line,
    "H": _horizontal_line,
    "V": _vertical_line,
    "C": _cubic,
    "S": _smooth_cubic,
    "A": _arc,
}


def parse_path(svg_path: str, sink, native_arcs: bool = True, strict: bool = True):
    """Draw svg_path onto sink; returns sink.

    Args:
        svg_path: path data, e.g. "M250,150L150,350L350,350Z".
        sink: a picopath.path_sink.PathSink, or anything with the same methods.
        native_arcs: if True, arcs reach the sink as arcSegment calls, wrapped
            in applyTransform calls when the ellipse is rotated. If False arcs
            are flattened to cubicTo calls here.
        strict: if True, MalformedNumberError propagates once everything before
            the bad command has been drawn. If False it is logged and the
            partial path is kept.
    """
    state = _PathState(sink, native_arcs)
    try:
        for cmd, args in iter_path_commands(svg_path):
            upper_cmd = cmd.upper()
            _CMD_HANDLERS[upper_cmd](state, *_absolute(state, cmd, args))
            if upper_cmd not in _KEEPS_CONTROL_POINT:
                state.last_control = state.current_point
    except MalformedNumberError as e:
        if strict:
            raise
        logging.warning("Keeping partial path for %r: %s", svg_path, e)
    return sink
