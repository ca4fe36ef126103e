from picopath.svg_path_iter import (
    iter_path_commands,
    MalformedNumberError,
    ParseMode,
    PathScanner,
)
import pytest


@pytest.mark.parametrize(
    "d, expected",
    [
        ("", ()),
        ("M0,0", (("M", (0, 0)),)),
        (
            "M0 0 1,2 3, 4 C5, 6-7.0.5 8-9Z",
            (
                ("M", (0, 0)),
                ("L", (1, 2)),
                ("L", (3, 4)),
                ("C", (5, 6, -7.0, 0.5, 8, -9)),
                ("Z", ()),
            ),
        ),
        ("m1 2 3 4", (("m", (1, 2)), ("l", (3, 4)))),
        ("A3.996 3.996 0 0016 9", (("A", (3.996, 3.996, 0, 0, 0, 16, 9)),)),
        (
            "a.1.2.3,10-.4-.5.6.7.8e+2,01.9+.1e-2",
            (
                ("a", (0.1, 0.2, 0.3, 1, 0, -0.4, -0.5)),
                ("a", (0.6, 0.7, 80.0, 0, 1, 0.9, 0.001)),
            ),
        ),
        ("M1e5 2E-1", (("M", (100000.0, 0.2)),)),
        ("M1. +2", (("M", (1.0, 2.0)),)),
        ("\tM 1\n2 ,, L3 4\r\n", (("M", (1, 2)), ("L", (3, 4)))),
        ("M1,1,L2,2", (("M", (1, 1)), ("L", (2, 2)))),
        ("H1 2 v3 4", (("H", (1,)), ("H", (2,)), ("v", (3,)), ("v", (4,)))),
        ("S1 2 3 4 5 6 7 8", (("S", (1, 2, 3, 4)), ("S", (5, 6, 7, 8)))),
        # no curves for quadratics, they read as lines
        ("Q1 2 3 4", (("L", (1, 2)), ("L", (3, 4)))),
        ("q1 2 t3 4", (("l", (1, 2)), ("l", (3, 4)))),
        # numbers with nothing to repeat are skipped
        ("1 2 M3 4", (("M", (3, 4)),)),
        ("M1 1 Z 2 2 L3 3", (("M", (1, 1)), ("Z", ()), ("L", (3, 3)))),
        # unknown characters are skipped and stop repetition
        ("M1 1 # 2 2 L3 3", (("M", (1, 1)), ("L", (3, 3)))),
        # real-world test case from https://github.com/googlefonts/picosvg/issues/171
        (
            "M448.6 997.7c.2 5.6 16.6 9.4 36.5 8.4s35.8-6.2 35.5-11.8"
            "a1.7 1.7 0 00-.1-.7c-1.5-5.2-17.3-8.6-36.4-7.7s-34.4 5.8-35.5 11.1z",
            (
                ("M", (448.6, 997.7)),
                ("c", (0.2, 5.6, 16.6, 9.4, 36.5, 8.4)),
                ("s", (35.8, -6.2, 35.5, -11.8)),
                ("a", (1.7, 1.7, 0.0, 0, 0, -0.1, -0.7)),
                ("c", (-1.5, -5.2, -17.3, -8.6, -36.4, -7.7)),
                ("s", (-34.4, 5.8, -35.5, 11.1)),
                ("z", ()),
            ),
        ),
    ],
)
def test_iter_path_commands(d, expected):
    assert tuple(iter_path_commands(d)) == expected


def test_self_delimiting_numbers():
    assert list(iter_path_commands("M1-2L3-4")) == list(
        iter_path_commands("M 1 -2 L 3 -4")
    )


@pytest.mark.parametrize(
    "d",
    [
        "M1",
        "L1 -",
        "M1e 2",
        "C1 2 3 4 5",
        # flags are a single 0 or 1
        "A1 1 0 2 0 3 3",
        "A1 1 0 1 . 3 3",
    ],
)
def test_malformed_number(d):
    with pytest.raises(MalformedNumberError):
        list(iter_path_commands(d))


def test_commands_before_malformed_number_are_yielded():
    commands = iter_path_commands("M1 2 L3")

    assert next(commands) == ("M", (1, 2))
    with pytest.raises(MalformedNumberError) as e:
        next(commands)
    assert e.value.pos == 7


class TestPathScanner:
    def test_skip_separators(self):
        scanner = PathScanner(" ,\t, 1")
        scanner.skip_separators()
        assert scanner.pos == 5
        scanner.skip_separators()
        assert scanner.pos == 5
        assert scanner.peek() == "1"

    def test_skip_separators_at_end(self):
        scanner = PathScanner("1 ,")
        scanner.pos = 1
        scanner.skip_separators()
        assert scanner.at_end()
        assert scanner.peek() == ""

    def test_next_float_needs_no_separator_before_sign(self):
        scanner = PathScanner("1-2+3")
        assert [scanner.next_float() for _ in range(3)] == [1.0, -2.0, 3.0]
        assert scanner.at_end()

    def test_next_float_leading_dot(self):
        scanner = PathScanner("0.5.25-.75")
        assert [scanner.next_float() for _ in range(3)] == [0.5, 0.25, -0.75]

    def test_next_float_leaves_dangling_exponent(self):
        scanner = PathScanner("2e")
        assert scanner.next_float() == 2.0
        assert scanner.peek() == "e"

    def test_next_flag_reads_one_character(self):
        scanner = PathScanner("10.5")
        assert scanner.next_flag() == 1
        assert scanner.next_flag() == 0
        assert scanner.next_float() == 0.5

    def test_malformed_number(self):
        scanner = PathScanner("  x")
        with pytest.raises(MalformedNumberError) as e:
            scanner.next_float()
        assert e.value.pos == 2
        assert isinstance(e.value, ValueError)

    def test_flag_at_end(self):
        with pytest.raises(MalformedNumberError):
            PathScanner("").next_flag()


@pytest.mark.parametrize(
    "cmd, expected_mode",
    [
        ("M", ParseMode.MOVETO),
        ("m", ParseMode.MOVETO),
        ("Z", ParseMode.CLOSED),
        ("z", ParseMode.CLOSED),
        ("L", ParseMode.REPEAT),
        ("h", ParseMode.REPEAT),
        ("V", ParseMode.REPEAT),
        ("c", ParseMode.REPEAT),
        ("S", ParseMode.REPEAT),
        ("q", ParseMode.REPEAT),
        ("T", ParseMode.REPEAT),
        ("a", ParseMode.REPEAT),
        ("#", ParseMode.INVALID),
    ],
)
def test_parse_mode_after(cmd, expected_mode):
    assert ParseMode.after(cmd) is expected_mode


@pytest.mark.parametrize(
    "mode, prev_cmd, expected",
    [
        (ParseMode.MOVETO, "M", "L"),
        (ParseMode.MOVETO, "m", "l"),
        (ParseMode.REPEAT, "C", "C"),
        (ParseMode.REPEAT, "a", "a"),
        (ParseMode.START, None, None),
        (ParseMode.CLOSED, "Z", None),
        (ParseMode.INVALID, None, None),
    ],
)
def test_implicit_command(mode, prev_cmd, expected):
    assert mode.implicit_command(prev_cmd) == expected
