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

"""Tokenize svg path data.

Numbers may be separated by whitespace, commas or nothing at all when the
next one starts with a sign or a decimal point, e.g. "M1-2.5.5" is
M 1 -2.5 0.5. Arc flags are a single character each, so "A1 1 0 10.5 2"
reads flags 1, 0 and then the number .5.
"""
import enum
import re
from absl import logging
from typing import Optional, Tuple
from picopath import svg_meta
from picopath.svg_meta import SVGCommandGen


_SEPARATOR_RE = re.compile(r"[\s,]*")
_FLOAT_RE = re.compile(
    r"[-+]?"  # optional sign
    r"(?:"
    r"[0-9]+(?:\.[0-9]*)?"  # int or float, '1.' is fine
    r"|"
    r"\.[0-9]+"  # float with leading dot (e.g. '.42')
    r")"
    r"(?:[eE][-+]?[0-9]+)?"  # optional scientific notiation
)
_FLAGS = ("0", "1")
_NUMBER_START = frozenset("0123456789+-.")
_CMDS = frozenset(svg_meta.cmds())
_REPEATABLE_CMDS = frozenset("lhvcsqta")


class MalformedNumberError(ValueError):
    """No number could be read where the path data requires one."""

    def __init__(self, text: str, pos: int):
        self.text = text
        self.pos = pos
        super().__init__(
            f"Expected a number at position {pos}, found {text[pos:pos + 10]!r}"
        )


class PathScanner:
    """Pulls numbers and flags out of path data, left to right."""

    def __init__(self, text: str, pos: int = 0):
        self.text = text
        self.pos = pos

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        """Return the current character, or "" at the end."""
        return self.text[self.pos : self.pos + 1]

    def advance(self):
        self.pos += 1

    def skip_separators(self):
        self.pos = _SEPARATOR_RE.match(self.text, self.pos).end()

    def next_float(self) -> float:
        self.skip_separators()
        match = _FLOAT_RE.match(self.text, self.pos)
        if not match:
            raise MalformedNumberError(self.text, self.pos)
        self.pos = match.end()
        return float(match.group())

    def next_flag(self) -> int:
        self.skip_separators()
        flag = self.peek()
        if flag not in _FLAGS:
            raise MalformedNumberError(self.text, self.pos)
        self.advance()
        return int(flag)


_ARC_ARGUMENT_READERS = (
    PathScanner.next_float,  # rx
    PathScanner.next_float,  # ry
    PathScanner.next_float,  # x-axis-rotation
    PathScanner.next_flag,  # large-arc-flag
    PathScanner.next_flag,  # sweep-flag
    PathScanner.next_float,  # x
    PathScanner.next_float,  # y
)


class ParseMode(enum.Enum):
    """What a number in command position means, given the last command."""

    START = "start"
    MOVETO = "moveto"
    REPEAT = "repeat"
    CLOSED = "closed"
    INVALID = "invalid"

    @classmethod
    def after(cls, cmd: str) -> "ParseMode":
        if cmd in ("M", "m"):
            return cls.MOVETO
        if cmd in ("Z", "z"):
            return cls.CLOSED
        if cmd.lower() in _REPEATABLE_CMDS:
            return cls.REPEAT
        return cls.INVALID

    def implicit_command(self, prev_cmd: Optional[str]) -> Optional[str]:
        """Return the command a bare number continues, None if there isn't one.

        https://www.w3.org/TR/SVG11/paths.html#PathDataMovetoCommands
        If a moveto is followed by multiple pairs of coordinates,
        the subsequent pairs are treated as implicit lineto commands
        """
        if self is ParseMode.MOVETO:
            return "L" if prev_cmd == "M" else "l"
        if self is ParseMode.REPEAT:
            return prev_cmd
        return None


def _read_args(scanner: PathScanner, cmd: str) -> Tuple[float, ...]:
    if cmd.upper() == "A":
        readers = _ARC_ARGUMENT_READERS
    else:
        readers = (PathScanner.next_float,) * svg_meta.num_args(cmd)
    return tuple(read(scanner) for read in readers)


def iter_path_commands(svg_path: str) -> SVGCommandGen:
    """Parses an svg path lazily.

    Yields (cmd, args) tuples, one per command, implicit repeats included,
    so "M1,1 2,2 3,3" yields M then two L. Q/q and T/t come out as L/l.

    Characters that can't start a command are skipped one at a time. Raises
    MalformedNumberError when a command runs out of numbers; everything
    yielded before that stands.
    """
    scanner = PathScanner(svg_path)
    mode = ParseMode.START
    prev_cmd = None
    scanner.skip_separators()
    while not scanner.at_end():
        char = scanner.peek()
        if char in _NUMBER_START:
            cmd = mode.implicit_command(prev_cmd)
            if cmd is None:
                logging.vlog(
                    1, "Skipping %r at %d, nothing to repeat", char, scanner.pos
                )
                scanner.advance()
                scanner.skip_separators()
                continue
        elif char in _CMDS:
            scanner.advance()
            cmd = prev_cmd = char
            mode = ParseMode.after(cmd)
        else:
            logging.vlog(1, "Skipping unknown %r at %d", char, scanner.pos)
            scanner.advance()
            scanner.skip_separators()
            prev_cmd = None
            mode = ParseMode.INVALID
            continue

        parsed_cmd = svg_meta.degraded_cmd(cmd)
        if parsed_cmd != cmd:
            logging.vlog(1, "No curve support for %r, drawing a line", cmd)
        yield parsed_cmd, _read_args(scanner, parsed_cmd)
        scanner.skip_separators()
