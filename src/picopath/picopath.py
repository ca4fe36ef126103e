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

"""Normalize svg path data.

Usage:
picopath.py icon.svg
<one line of absolute M/L/C/Z path data per <path> dumped to stdout>

picopath.py --print_ops paths.txt
<sink operations for each line of paths.txt>

With no file, path data is read from stdin, one path per line.
"""
from absl import app
from absl import flags
from absl import logging
from lxml import etree  # pytype: disable=import-error
from picopath.geometric_types import Rect
from picopath.path_interpreter import parse_path
from picopath.path_sink import RecordingPathSink, SVGCommandSink
from picopath.svg_meta import ntos, svgns
from picopath.svg_transform import Affine2D
import sys
from typing import Iterable, List


FLAGS = flags.FLAGS


flags.DEFINE_bool("flatten_arcs", False, "Flatten arcs to cubics while parsing")
flags.DEFINE_bool(
    "strict", True, "Fail on malformed numbers instead of keeping partial paths"
)
flags.DEFINE_bool("print_ops", False, "Print sink operations instead of path data")
flags.DEFINE_bool("bounds", False, "Print the bounding box of each path")
flags.DEFINE_string("output_file", "-", "Output file ('-' means stdout)")


def svg_path_data(svg_file) -> List[str]:
    """Return the d attribute of every <path> in an svg file."""
    tree = etree.parse(svg_file)
    return [
        el.attrib["d"]
        for el in tree.iter(f"{{{svgns()}}}path", "path")
        if "d" in el.attrib
    ]


def _lines(text: str) -> List[str]:
    return [line.strip() for line in text.splitlines() if line.strip()]


def _format_arg(arg) -> str:
    if isinstance(arg, Affine2D):
        return arg.tostring()
    if isinstance(arg, Rect):
        return f"Rect({', '.join(ntos(v) for v in arg)})"
    return ntos(arg)


def format_operations(sink: RecordingPathSink) -> str:
    return "\n".join(
        f"{name}({', '.join(_format_arg(a) for a in args)})"
        for name, args in sink.operations
    )


def process(path_data: Iterable[str]) -> List[str]:
    results = []
    for d in path_data:
        if FLAGS.print_ops:
            sink = parse_path(
                d,
                RecordingPathSink(),
                native_arcs=not FLAGS.flatten_arcs,
                strict=FLAGS.strict,
            )
            results.append(format_operations(sink))
            continue

        sink = parse_path(
            d, SVGCommandSink(), native_arcs=not FLAGS.flatten_arcs, strict=FLAGS.strict
        )
        if FLAGS.bounds:
            results.append(" ".join(ntos(v) for v in sink.bounds()))
        else:
            results.append(sink.d)
    return results


def _run(argv):
    try:
        input_file = argv[1]
    except IndexError:
        input_file = None

    if input_file and input_file.endswith(".svg"):
        path_data = svg_path_data(input_file)
    elif input_file:
        with open(input_file) as f:
            path_data = _lines(f.read())
    else:
        path_data = _lines(sys.stdin.read())
    logging.info("Processing %d paths", len(path_data))

    output = "\n".join(process(path_data))

    if FLAGS.output_file == "-":
        print(output)
    else:
        with open(FLAGS.output_file, "w") as f:
            f.write(output)


def main(argv=None):
    # We don't seem to be __main__ when run as cli tool installed by setuptools
    app.run(_run, argv=argv)


if __name__ == "__main__":
    main()
