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

"""SVG elliptical arcs.

Converts endpoint parametrization to center parametrization per
http://www.w3.org/TR/SVG/implnote.html#ArcImplementationNotes and either
hands the result to a sink as an axis-aligned arc or flattens it into cubics.

The flattening is adapted from FontTools fontTools/svgLib/path/arc.py, which in
turn is adapted from Blink's SVGPathNormalizer::DecomposeArcToCubic:
https://github.com/chromium/chromium/blob/93831f2/third_party/blink/renderer/core/svg/svg_path_parser.cc#L169-L278
"""
from math import (
    atan2,
    ceil,
    cos,
    degrees,
    fabs,
    fmod,
    isfinite,
    pi,
    radians,
    sin,
    sqrt,
    tan,
)
from typing import Iterator, NamedTuple, Optional, Tuple
from absl import logging
from picopath.geometric_types import Point, Rect, Vector
from picopath.svg_transform import Affine2D


PI_OVER_TWO = 0.5 * pi

# Radii are checked against the chord with this much slack
_RADII_SCALE_MARGIN = 1.001


class DegenerateArcError(ValueError):
    """No ellipse through both end points can be computed in floating point."""


class CenterParametrization(NamedTuple):
    center_point: Point
    rx: float
    ry: float
    # degrees
    start_angle: float
    sweep_angle: float


def _angle(u: Vector, v: Vector) -> float:
    # atan2 with swapped arguments measures from the y axis; the difference
    # is still the turn from u to v
    return fmod(degrees(atan2(u.x, u.y) - atan2(v.x, v.y)), 360)


class EllipticalArc(NamedTuple):
    start_point: Point
    rx: float
    ry: float
    rotation: float
    large: int
    sweep: int
    end_point: Point

    def is_straight_line(self) -> bool:
        # If rx = 0 or ry = 0 then this arc is treated as a straight line segment (a
        # "lineto") joining the endpoints.
        # http://www.w3.org/TR/SVG/implnote.html#ArcOutOfRangeParameters
        return not (self.rx and self.ry)

    def is_zero_length(self) -> bool:
        return self.end_point == self.start_point

    def local_transform(self, center_point: Point) -> Affine2D:
        """Maps the ellipse's unrotated frame, origin at its center, into place."""
        return (
            Affine2D.identity()
            .translate(center_point.x, center_point.y)
            .rotate(radians(self.rotation))
        )

    # https://www.w3.org/TR/SVG/implnote.html#ArcConversionEndpointToCenter
    def end_to_center_parametrization(self) -> CenterParametrization:
        if self.is_straight_line() or self.is_zero_length():
            raise ValueError(f"Can't compute center parametrization for {self}")
        if not all(isfinite(v) for v in (*self.start_point, *self.end_point)):
            raise DegenerateArcError(f"Non-finite end points in {self}")
        if not all(isfinite(v) for v in (self.rx, self.ry, self.rotation)):
            raise DegenerateArcError(f"Non-finite radii or rotation in {self}")

        rx = fabs(self.rx)
        ry = fabs(self.ry)

        # SVG rotation is expressed in degrees, whereas Affin2D.rotate uses radians
        angle = radians(self.rotation)
        x1t, y1t = (
            Affine2D.identity()
            .rotate(-angle)
            .map_vector((self.start_point - self.end_point) * 0.5)
        )
        square_x = x1t * x1t
        square_y = y1t * y1t
        if rx * rx == 0 or ry * ry == 0:
            raise DegenerateArcError(f"Radii underflow in {self}")

        # http://www.w3.org/TR/SVG/implnote.html#ArcCorrectionOutOfRangeRadii
        radii_scale = (
            square_x / (rx * rx) + square_y / (ry * ry)
        ) * _RADII_SCALE_MARGIN
        if radii_scale > 1:
            rx *= sqrt(radii_scale)
            ry *= sqrt(radii_scale)
        square_rx = rx * rx
        square_ry = ry * ry

        denominator = square_rx * square_y + square_ry * square_x
        if denominator == 0:
            raise DegenerateArcError(f"Chord underflow in {self}")
        scale_factor = sqrt(
            max(
                (square_rx * square_ry - square_rx * square_y - square_ry * square_x)
                / denominator,
                0.0,
            )
        )
        if self.large == self.sweep:
            scale_factor = -scale_factor

        cxt = scale_factor * rx * y1t / ry
        cyt = -scale_factor * ry * x1t / rx
        mid_point = Point(
            (self.start_point.x + self.end_point.x) / 2,
            (self.start_point.y + self.end_point.y) / 2,
        )
        center_point = mid_point + Affine2D.identity().rotate(angle).map_vector(
            (cxt, cyt)
        )

        v1 = Vector((x1t - cxt) / rx, (y1t - cyt) / ry)
        v2 = Vector((-x1t - cxt) / rx, (-y1t - cyt) / ry)
        start_angle = _angle(Vector(1, 0), v1)
        sweep_angle = _angle(v1, v2)
        if not self.sweep and sweep_angle > 0:
            sweep_angle -= 360
        elif self.sweep and sweep_angle < 0:
            sweep_angle += 360

        values = (*center_point, rx, ry, start_angle, sweep_angle)
        if not all(isfinite(v) for v in values):
            raise DegenerateArcError(f"Non-finite center parametrization for {self}")
        return CenterParametrization(center_point, rx, ry, start_angle, sweep_angle)


def _center_parametrization(arc: EllipticalArc) -> Optional[CenterParametrization]:
    try:
        return arc.end_to_center_parametrization()
    except DegenerateArcError as e:
        logging.vlog(1, "Drawing a line in place of arc: %s", e)
        return None


def draw_arc(sink, arc: EllipticalArc):
    """Emit arc onto sink as a line, nothing, or an axis-aligned arcSegment.

    Sinks only draw axis-aligned ellipses, so a rotated arc is drawn in the
    ellipse's own frame: everything drawn so far is moved into that frame by
    the inverse transform, the arc is added, and the forward transform puts
    it all back.
    """
    if arc.is_straight_line():
        sink.lineTo(*arc.end_point)
        return
    if arc.is_zero_length():
        return

    params = _center_parametrization(arc)
    if params is None:
        sink.lineTo(*arc.end_point)
        return
    if fmod(arc.rotation, 360) == 0:
        sink.arcSegment(
            Rect.from_center(params.center_point, params.rx, params.ry),
            params.start_angle,
            params.sweep_angle,
        )
        return

    forward = arc.local_transform(params.center_point)
    sink.applyTransform(forward.inverse())
    sink.arcSegment(
        Rect.from_center(Point(), params.rx, params.ry),
        params.start_angle,
        params.sweep_angle,
    )
    sink.applyTransform(forward)


def arc_segment_to_cubics(
    rect: Rect, start_angle: float, sweep_angle: float
) -> Iterator[Tuple[Point, Point, Point]]:
    """Approximate the arc of the ellipse inscribed in rect with cubics.

    Angles are in degrees, 0 along +x and growing toward +y. Each cubic spans
    at most 90 degrees. Yields (control1, control2, end) Points.
    """
    point_transform = (
        Affine2D.identity()
        .translate(*rect.center())
        .scale(rect.w / 2, rect.h / 2)
    )
    theta1 = radians(start_angle)
    theta_arc = radians(sweep_angle)
    if not (isfinite(theta1) and isfinite(theta_arc)):
        return

    # Some results of atan2 on some platform implementations are not exact
    # enough. So that we get more cubic curves than expected here. Adding 0.001f
    # reduces the count of sgements to the correct count.
    num_segments = int(ceil(fabs(theta_arc / (PI_OVER_TWO + 0.001))))
    for i in range(num_segments):
        start_theta = theta1 + i * theta_arc / num_segments
        end_theta = theta1 + (i + 1) * theta_arc / num_segments

        t = (4 / 3) * tan(0.25 * (end_theta - start_theta))
        if not isfinite(t):
            return

        sin_start_theta = sin(start_theta)
        cos_start_theta = cos(start_theta)
        sin_end_theta = sin(end_theta)
        cos_end_theta = cos(end_theta)

        point1 = Point(
            cos_start_theta - t * sin_start_theta, sin_start_theta + t * cos_start_theta
        )
        end_point = Point(cos_end_theta, sin_end_theta)
        point2 = end_point + Vector(t * sin_end_theta, -t * cos_end_theta)

        yield (
            point_transform.map_point(point1),
            point_transform.map_point(point2),
            point_transform.map_point(end_point),
        )


def arc_to_cubic(
    start_point: Tuple[float, float],
    rx: float,
    ry: float,
    rotation: float,
    large: int,
    sweep: int,
    end_point: Tuple[float, float],
) -> Iterator[Tuple[Optional[Point], Optional[Point], Point]]:
    """Convert arc to cubic(s).

    start/end point are (x,y) tuples with absolute coordinates; rotation is in
    degrees.

    Yields 3-tuples of Points for each Cubic bezier, i.e. two off-curve points and
    one on-curve end point. The last end point is exactly end_point.

    If either rx or ry is 0, or the center can't be computed in floating point,
    the arc is treated as a straight line joining the end points, and a
    (None, None, arc.end_point) tuple is yielded.

    Yields empty iterator if arc has zero length.
    """
    arc = EllipticalArc(
        Point(*start_point), rx, ry, rotation, large, sweep, Point(*end_point)
    )
    if arc.is_straight_line():
        yield None, None, arc.end_point
        return
    if arc.is_zero_length():
        return

    params = _center_parametrization(arc)
    if params is None:
        yield None, None, arc.end_point
        return
    point_transform = arc.local_transform(params.center_point)
    cubics = list(
        arc_segment_to_cubics(
            Rect.from_center(Point(), params.rx, params.ry),
            params.start_angle,
            params.sweep_angle,
        )
    )
    for i, (point1, point2, segment_end) in enumerate(cubics):
        if i == len(cubics) - 1:
            segment_end = arc.end_point
        else:
            segment_end = point_transform.map_point(segment_end)
        yield (
            point_transform.map_point(point1),
            point_transform.map_point(point2),
            segment_end,
        )
