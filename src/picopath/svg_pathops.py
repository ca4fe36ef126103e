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

"""Absolute svg commands => skia-pathops Path, for measuring parsed paths."""
import pathops  # pytype: disable=import-error
from picopath.geometric_types import Rect
from picopath.svg_meta import SVGCommandSeq


# Absolutes coords assumed
# A never occurs, sinks flatten arcs to cubics
# H, V, S, Q, T never occur, sinks only receive M, L, C, Z
_SVG_CMD_TO_SKIA_FN = {
    "M": pathops.Path.moveTo,
    "L": pathops.Path.lineTo,
    "Z": pathops.Path.close,
    "C": pathops.Path.cubicTo,
}

_SVG_FILL_RULE_TO_SKIA_FILL_TYPE = {
    "nonzero": pathops.FillType.WINDING,
    "evenodd": pathops.FillType.EVEN_ODD,
}


def skia_path(svg_cmds: SVGCommandSeq, fill_rule: str) -> pathops.Path:
    try:
        fill_type = _SVG_FILL_RULE_TO_SKIA_FILL_TYPE[fill_rule]
    except KeyError:
        raise ValueError(f"Invalid fill rule: {fill_rule!r}")
    sk_path = pathops.Path(fillType=fill_type)
    for cmd, args in svg_cmds:
        if cmd not in _SVG_CMD_TO_SKIA_FN:
            raise ValueError(f'No mapping to Skia for "{cmd} {args}"')
        _SVG_CMD_TO_SKIA_FN[cmd](sk_path, *args)
    return sk_path


def bounding_box(svg_cmds: SVGCommandSeq) -> Rect:
    x_min, y_min, x_max, y_max = skia_path(svg_cmds, fill_rule="nonzero").bounds
    return Rect(x_min, y_min, x_max - x_min, y_max - y_min)


def path_area(svg_cmds: SVGCommandSeq, fill_rule: str) -> float:
    """Return the path's absolute area."""
    sk_path = skia_path(svg_cmds, fill_rule=fill_rule)
    sk_path.simplify(fix_winding=True)
    return sk_path.area
