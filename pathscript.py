#!/usr/bin/env python3
"""pathscript.py

A compact path-data language and its parser, with an SVG rendering backend.

Key features:
- Recursive-descent parser producing backend-agnostic drawing instructions.
- Implicit repetition: one command letter may carry many argument groups.
- Signed decimals with scientific notation ("-1.5E-3").
- Swappable replay onto any drawing surface; an SVG surface is included.
- JSON-based render configuration (style, scale, translate, document size).

Run:
  python pathscript.py parse "M0,0 L10,10 20,0 Z"
  python pathscript.py render "F1 M10,10 L90,10 90,90 Z" output.svg
  python pathscript.py --help
"""

from __future__ import annotations

import argparse
import enum
import json
import math
import os
import sys
from collections import Counter
from collections.abc import Callable, Iterable
from dataclasses import dataclass, fields
from typing import Any, Protocol, Union, cast

TAU = 2.0 * math.pi


# -------------------------
# Errors / Validation
# -------------------------


class ParseErrorKind(enum.Enum):
    INVALID_COMMAND = "invalid command"
    UNEXPECTED_END_OF_STREAM = "unexpected end of stream"
    INVALID_NUMBER = "invalid number"
    INVALID_FILL_RULE_VALUE = "invalid fill rule value"


class PathSyntaxError(ValueError):
    """Raised when path text does not follow the path grammar.

    ``kind`` lets callers branch on the failure; ``position`` is the index in
    the normalized (uppercased, trimmed) path text where it was detected.
    """

    def __init__(self, kind: ParseErrorKind, position: int, detail: str) -> None:
        self.kind = kind
        self.position = position
        self.detail = detail
        super().__init__(f"{kind.value} at position {position}: {detail}")


class ConfigError(ValueError):
    pass


def _require(cond: bool, msg: str) -> None:
    if not cond:
        raise ConfigError(msg)


def _as_float(x: Any, path: str) -> float:
    _require(
        isinstance(x, (int, float)) and not isinstance(x, bool),
        f"{path} must be a number",
    )
    return float(x)


def _as_int(x: Any, path: str) -> int:
    _require(
        isinstance(x, int) and not isinstance(x, bool), f"{path} must be an integer"
    )
    return int(x)


def _as_str(x: Any, path: str) -> str:
    _require(isinstance(x, str), f"{path} must be a string")
    return cast(str, x)


def _as_dict(x: Any, path: str) -> dict[str, Any]:
    _require(isinstance(x, dict), f"{path} must be an object")
    return cast(dict[str, Any], x)


# -------------------------
# Instruction model
# -------------------------


class FillRule(enum.Enum):
    EVEN_ODD = "evenodd"
    NON_ZERO = "nonzero"


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class SetFillRule:
    rule: FillRule


@dataclass(frozen=True)
class MoveTo:
    point: Point


@dataclass(frozen=True)
class LineTo:
    point: Point


@dataclass(frozen=True)
class CubicCurveTo:
    control1: Point
    control2: Point
    end: Point


@dataclass(frozen=True)
class QuadraticCurveTo:
    control: Point
    end: Point


@dataclass(frozen=True)
class ArcTo:
    center: Point
    radius: float
    start_angle: float
    end_angle: float
    counter_clockwise: bool


@dataclass(frozen=True)
class ClosePath:
    pass


DrawingInstruction = Union[
    SetFillRule, MoveTo, LineTo, CubicCurveTo, QuadraticCurveTo, ArcTo, ClosePath
]

_OP_NAMES: dict[type, str] = {
    SetFillRule: "set_fill_rule",
    MoveTo: "move_to",
    LineTo: "line_to",
    CubicCurveTo: "cubic_curve_to",
    QuadraticCurveTo: "quadratic_curve_to",
    ArcTo: "arc_to",
    ClosePath: "close_path",
}


def op_name(instruction: DrawingInstruction) -> str:
    return _OP_NAMES[type(instruction)]


def instruction_to_dict(instruction: DrawingInstruction) -> dict[str, Any]:
    """Tagged JSON-friendly form, e.g. {"op": "line_to", "point": [1.0, 2.0]}."""
    out: dict[str, Any] = {"op": op_name(instruction)}
    for f in fields(instruction):
        value = getattr(instruction, f.name)
        if isinstance(value, Point):
            value = [value.x, value.y]
        elif isinstance(value, FillRule):
            value = value.value
        out[f.name] = value
    return out


# -------------------------
# Cursor
# -------------------------


class TextCursor:
    """Forward-only read cursor; ``current()`` is None once input is exhausted."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.position = 0

    def current(self) -> str | None:
        if self.position < len(self.source):
            return self.source[self.position]
        return None

    def advance(self) -> bool:
        if self.position < len(self.source):
            self.position += 1
        return self.position < len(self.source)


# -------------------------
# Lexical classifiers
# -------------------------

_WHITESPACE = frozenset(" \t")
_DIGITS = frozenset("0123456789")
COMMAND_LETTERS = frozenset("MLCQAZ")
INITIAL_COMMAND_LETTERS = frozenset("FM")


def is_whitespace(ch: str | None) -> bool:
    return ch in _WHITESPACE


def is_comma(ch: str | None) -> bool:
    return ch == ","


def is_command_letter(ch: str | None) -> bool:
    return ch in COMMAND_LETTERS


def is_digit(ch: str | None) -> bool:
    return ch in _DIGITS


def is_minus_sign(ch: str | None) -> bool:
    return ch == "-"


def is_decimal_point(ch: str | None) -> bool:
    return ch == "."


def _describe(ch: str | None) -> str:
    return "end of input" if ch is None else repr(ch)


# -------------------------
# Number / point scanner
# -------------------------


def skip_whitespace(cursor: TextCursor) -> None:
    while is_whitespace(cursor.current()) and cursor.advance():
        pass


def skip_argument_separator(cursor: TextCursor) -> None:
    skip_whitespace(cursor)
    if is_comma(cursor.current()):
        cursor.advance()
    skip_whitespace(cursor)


def _read_digits(cursor: TextCursor) -> str:
    digits: list[str] = []
    while is_digit(cursor.current()):
        digits.append(cast(str, cursor.current()))
        cursor.advance()
    return "".join(digits)


def read_number(cursor: TextCursor) -> float:
    """Scan ``'-'? digit* ('.' digit+ ('E' '-'? digit+)?)?`` into a float.

    The exponent is only recognised after a fractional part. A token with no
    digit at all is rejected so that callers always make progress.
    """
    start = cursor.position
    text = ""

    if is_minus_sign(cursor.current()):
        text += "-"
        cursor.advance()

    integer = _read_digits(cursor)
    text += integer
    seen_digits = bool(integer)

    if is_decimal_point(cursor.current()):
        text += "."
        cursor.advance()

        fraction = _read_digits(cursor)
        if fraction:
            text += fraction
            seen_digits = True

            if cursor.current() == "E":
                text += "E"
                cursor.advance()
                if is_minus_sign(cursor.current()):
                    text += "-"
                    cursor.advance()

                exponent = _read_digits(cursor)
                if not exponent:
                    raise PathSyntaxError(
                        ParseErrorKind.INVALID_NUMBER,
                        cursor.position,
                        f"exponent of {text!r} has no digits, "
                        f"found {_describe(cursor.current())}",
                    )
                text += exponent

    if not seen_digits:
        raise PathSyntaxError(
            ParseErrorKind.INVALID_NUMBER,
            start,
            f"expected a number, found {_describe(cursor.current())}",
        )
    return float(text)


def read_point(cursor: TextCursor) -> Point:
    x = read_number(cursor)
    skip_argument_separator(cursor)
    y = read_number(cursor)
    return Point(x, y)


def _read_point_and_skip_separator(cursor: TextCursor) -> Point:
    p = read_point(cursor)
    skip_argument_separator(cursor)
    return p


def _read_number_and_skip_separator(cursor: TextCursor) -> float:
    n = read_number(cursor)
    skip_argument_separator(cursor)
    return n


# -------------------------
# Per-command grammars
# -------------------------

CommandGrammar = Callable[[TextCursor], list[DrawingInstruction]]


def _enter_command(cursor: TextCursor, name: str) -> None:
    letter = cursor.current()
    if not cursor.advance():
        raise PathSyntaxError(
            ParseErrorKind.UNEXPECTED_END_OF_STREAM,
            cursor.position,
            f"{name} command {letter!r} has no arguments",
        )
    skip_whitespace(cursor)


def _has_argument_group(cursor: TextCursor) -> bool:
    ch = cursor.current()
    return ch is not None and not is_command_letter(ch)


def parse_fill_rule(cursor: TextCursor) -> list[DrawingInstruction]:
    _enter_command(cursor, "fill rule")
    start = cursor.position
    value = read_number(cursor)
    skip_whitespace(cursor)

    if value == 0:
        rule = FillRule.EVEN_ODD
    elif value == 1:
        rule = FillRule.NON_ZERO
    else:
        raise PathSyntaxError(
            ParseErrorKind.INVALID_FILL_RULE_VALUE,
            start,
            f"got {value:g}; valid options are 0 (evenodd) and 1 (nonzero)",
        )
    return [SetFillRule(rule)]


def parse_move_to(cursor: TextCursor) -> list[DrawingInstruction]:
    _enter_command(cursor, "move to")
    p = read_point(cursor)
    skip_whitespace(cursor)
    return [MoveTo(p)]


def parse_line_to(cursor: TextCursor) -> list[DrawingInstruction]:
    _enter_command(cursor, "line to")
    out: list[DrawingInstruction] = []
    while _has_argument_group(cursor):
        out.append(LineTo(_read_point_and_skip_separator(cursor)))
    return out


def parse_cubic_curve_to(cursor: TextCursor) -> list[DrawingInstruction]:
    _enter_command(cursor, "cubic curve")
    out: list[DrawingInstruction] = []
    while _has_argument_group(cursor):
        c1 = _read_point_and_skip_separator(cursor)
        c2 = _read_point_and_skip_separator(cursor)
        end = _read_point_and_skip_separator(cursor)
        out.append(CubicCurveTo(c1, c2, end))
    return out


def parse_quadratic_curve_to(cursor: TextCursor) -> list[DrawingInstruction]:
    _enter_command(cursor, "quadratic curve")
    out: list[DrawingInstruction] = []
    while _has_argument_group(cursor):
        control = _read_point_and_skip_separator(cursor)
        end = _read_point_and_skip_separator(cursor)
        out.append(QuadraticCurveTo(control, end))
    return out


def parse_arc_to(cursor: TextCursor) -> list[DrawingInstruction]:
    _enter_command(cursor, "arc")
    out: list[DrawingInstruction] = []
    while _has_argument_group(cursor):
        center = _read_point_and_skip_separator(cursor)
        radius = _read_number_and_skip_separator(cursor)
        start_angle = _read_number_and_skip_separator(cursor)
        end_angle = _read_number_and_skip_separator(cursor)
        # Only an exact 1 selects counter-clockwise.
        ccw = _read_number_and_skip_separator(cursor) == 1
        out.append(ArcTo(center, radius, start_angle, end_angle, ccw))
    return out


def parse_close_path(cursor: TextCursor) -> list[DrawingInstruction]:
    # No arguments, so running out of input here is fine.
    cursor.advance()
    skip_whitespace(cursor)
    return [ClosePath()]


_GRAMMARS: dict[str, CommandGrammar] = {
    "F": parse_fill_rule,
    "M": parse_move_to,
    "L": parse_line_to,
    "C": parse_cubic_curve_to,
    "Q": parse_quadratic_curve_to,
    "A": parse_arc_to,
    "Z": parse_close_path,
}


# -------------------------
# Command resolver / driver
# -------------------------


def resolve_command(cursor: TextCursor, allowed: frozenset[str]) -> CommandGrammar:
    ch = cursor.current()
    if ch is None or ch not in allowed:
        raise PathSyntaxError(
            ParseErrorKind.INVALID_COMMAND,
            cursor.position,
            f"expected one of {', '.join(sorted(allowed))}, found {_describe(ch)}",
        )
    return _GRAMMARS[ch]


def normalize_path_text(path: str) -> str:
    return path.upper().strip()


def parse_path(path: str) -> list[DrawingInstruction]:
    """Parse path text into drawing instructions, in source order.

    The first command must be F (fill rule) or M; after that any of
    M, L, C, Q, A, Z may follow until the input is exhausted.
    Raises PathSyntaxError on the first grammar violation.
    """
    if not path:
        return []

    cursor = TextCursor(normalize_path_text(path))
    skip_whitespace(cursor)

    instructions = resolve_command(cursor, INITIAL_COMMAND_LETTERS)(cursor)
    while cursor.current() is not None:
        instructions.extend(resolve_command(cursor, COMMAND_LETTERS)(cursor))
        # One stray character after a body command is skipped.
        if _has_argument_group(cursor):
            cursor.advance()
    return instructions


# -------------------------
# Replay onto drawing surfaces
# -------------------------


class DrawingSurface(Protocol):
    def set_fill_rule(self, rule: FillRule) -> None: ...

    def move_to(self, p: Point) -> None: ...

    def line_to(self, p: Point) -> None: ...

    def cubic_curve_to(self, c1: Point, c2: Point, end: Point) -> None: ...

    def quadratic_curve_to(self, control: Point, end: Point) -> None: ...

    def arc_to(
        self,
        center: Point,
        radius: float,
        start_angle: float,
        end_angle: float,
        counter_clockwise: bool,
    ) -> None: ...

    def close_path(self) -> None: ...


def replay(
    instructions: Iterable[DrawingInstruction], surface: DrawingSurface
) -> None:
    """Issue one surface call per instruction, in order."""
    for ins in instructions:
        if isinstance(ins, SetFillRule):
            surface.set_fill_rule(ins.rule)
        elif isinstance(ins, MoveTo):
            surface.move_to(ins.point)
        elif isinstance(ins, LineTo):
            surface.line_to(ins.point)
        elif isinstance(ins, CubicCurveTo):
            surface.cubic_curve_to(ins.control1, ins.control2, ins.end)
        elif isinstance(ins, QuadraticCurveTo):
            surface.quadratic_curve_to(ins.control, ins.end)
        elif isinstance(ins, ArcTo):
            surface.arc_to(
                ins.center,
                ins.radius,
                ins.start_angle,
                ins.end_angle,
                ins.counter_clockwise,
            )
        elif isinstance(ins, ClosePath):
            surface.close_path()
        else:
            raise TypeError(f"Unknown drawing instruction {ins!r}")


def _fmt(x: float, precision: int) -> str:
    # Round first so tiny negatives never produce "-0" in SVG output.
    x = round(x, precision)
    if not x:
        x = 0.0
    # Strip trailing zeros for nicer SVG.
    s = f"{x:.{precision}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s or "0"


def _point_on_circle(center: Point, radius: float, angle: float) -> Point:
    return Point(
        center.x + radius * math.cos(angle), center.y + radius * math.sin(angle)
    )


def _arc_sweep(start_angle: float, end_angle: float, counter_clockwise: bool) -> float:
    """Swept angle (>= 0) with canvas semantics: a full turn or more is a circle."""
    delta = start_angle - end_angle if counter_clockwise else end_angle - start_angle
    if delta >= TAU:
        return TAU
    return delta % TAU


def _require_finite(*values: float) -> None:
    for v in values:
        if not math.isfinite(v):
            raise ValueError(f"path values must be finite, got {v}")


class SvgPathSurface:
    """Drawing surface that records SVG path data.

    Follows 2-D canvas conventions: angles in radians, y grows downward,
    line and curve calls without a current point start a new subpath.
    """

    def __init__(self, precision: int = 3) -> None:
        self.precision = precision
        self.fill_rule = FillRule.EVEN_ODD
        self.segments: list[str] = []
        self._current: Point | None = None
        self._subpath_start: Point | None = None

    @property
    def path_data(self) -> str:
        return " ".join(self.segments)

    def _xy(self, p: Point) -> str:
        return f"{_fmt(p.x, self.precision)},{_fmt(p.y, self.precision)}"

    def set_fill_rule(self, rule: FillRule) -> None:
        self.fill_rule = rule

    def move_to(self, p: Point) -> None:
        _require_finite(p.x, p.y)
        self.segments.append(f"M{self._xy(p)}")
        self._current = p
        self._subpath_start = p

    def line_to(self, p: Point) -> None:
        _require_finite(p.x, p.y)
        if self._current is None:
            self.move_to(p)
            return
        self.segments.append(f"L{self._xy(p)}")
        self._current = p

    def cubic_curve_to(self, c1: Point, c2: Point, end: Point) -> None:
        _require_finite(c1.x, c1.y, c2.x, c2.y, end.x, end.y)
        if self._current is None:
            self.move_to(c1)
        self.segments.append(f"C{self._xy(c1)} {self._xy(c2)} {self._xy(end)}")
        self._current = end

    def quadratic_curve_to(self, control: Point, end: Point) -> None:
        _require_finite(control.x, control.y, end.x, end.y)
        if self._current is None:
            self.move_to(control)
        self.segments.append(f"Q{self._xy(control)} {self._xy(end)}")
        self._current = end

    def arc_to(
        self,
        center: Point,
        radius: float,
        start_angle: float,
        end_angle: float,
        counter_clockwise: bool,
    ) -> None:
        _require_finite(center.x, center.y, radius, start_angle, end_angle)
        if radius < 0:
            raise ValueError(f"arc radius must be >= 0, got {radius:g}")

        start = _point_on_circle(center, radius, start_angle)
        if self._current is None:
            self.move_to(start)
        elif self._xy(self._current) != self._xy(start):
            self.line_to(start)

        sweep = _arc_sweep(start_angle, end_angle, counter_clockwise)
        if sweep == 0 or radius == 0:
            return

        direction = -1.0 if counter_clockwise else 1.0
        # SVG sweep-flag 1 is the positive-angle (clockwise on screen) direction.
        sweep_flag = 0 if counter_clockwise else 1
        if sweep >= TAU:
            # A single SVG arc cannot close on itself; split into two halves.
            mid = _point_on_circle(center, radius, start_angle + direction * math.pi)
            self._arc_segment(radius, False, sweep_flag, mid)
            self._arc_segment(radius, False, sweep_flag, start)
        else:
            end = _point_on_circle(center, radius, start_angle + direction * sweep)
            self._arc_segment(radius, sweep > math.pi, sweep_flag, end)

    def _arc_segment(
        self, radius: float, large_arc: bool, sweep_flag: int, end: Point
    ) -> None:
        r = _fmt(radius, self.precision)
        self.segments.append(
            f"A{r},{r} 0 {int(large_arc)} {sweep_flag} {self._xy(end)}"
        )
        self._current = end

    def close_path(self) -> None:
        if self._current is None:
            return
        self.segments.append("Z")
        self._current = self._subpath_start


# -------------------------
# Render configuration
# -------------------------


@dataclass(frozen=True)
class PathStyle:
    stroke: str = "black"
    fill: str = "black"
    stroke_width: float = 1.0
    scale_x: float = 1.0
    scale_y: float = 1.0
    translate_x: float = 0.0
    translate_y: float = 0.0

    @property
    def has_transform(self) -> bool:
        return (self.scale_x, self.scale_y, self.translate_x, self.translate_y) != (
            1.0,
            1.0,
            0.0,
            0.0,
        )


@dataclass(frozen=True)
class RenderConfig:
    name: str | None
    width: float
    height: float
    precision: int
    background: str | None
    style: PathStyle


def parse_config(obj: dict[str, Any]) -> RenderConfig:
    obj = _as_dict(obj, "root")

    name = obj.get("name")
    if name is not None:
        name = _as_str(name, "name")

    # Defaults match an HTML canvas element with no explicit size.
    width = _as_float(obj.get("width", 300), "width")
    _require(width > 0, "width must be > 0")
    height = _as_float(obj.get("height", 150), "height")
    _require(height > 0, "height must be > 0")

    precision = _as_int(obj.get("precision", 3), "precision")
    _require(0 <= precision <= 10, "precision must be between 0 and 10")

    background = obj.get("background")
    if background is not None:
        background = _as_str(background, "background")

    style_obj = _as_dict(obj.get("style", {}), "style")
    stroke = _as_str(style_obj.get("stroke", "black"), "style.stroke")
    # Fill follows the pen colour unless set explicitly.
    fill = _as_str(style_obj.get("fill", stroke), "style.fill")
    stroke_width = _as_float(style_obj.get("stroke_width", 1.0), "style.stroke_width")
    _require(stroke_width > 0, "style.stroke_width must be > 0")

    style = PathStyle(
        stroke=stroke,
        fill=fill,
        stroke_width=stroke_width,
        scale_x=_as_float(style_obj.get("scale_x", 1.0), "style.scale_x"),
        scale_y=_as_float(style_obj.get("scale_y", 1.0), "style.scale_y"),
        translate_x=_as_float(style_obj.get("translate_x", 0.0), "style.translate_x"),
        translate_y=_as_float(style_obj.get("translate_y", 0.0), "style.translate_y"),
    )

    return RenderConfig(
        name=name,
        width=width,
        height=height,
        precision=precision,
        background=background,
        style=style,
    )


def load_json(path: str) -> dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        try:
            return cast(dict[str, Any], json.load(f))
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {path}: {e}") from e


# -------------------------
# SVG writing
# -------------------------


def _ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(os.path.abspath(path)) or ".", exist_ok=True)


def _escape(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def draw_path(path_text: str, config: RenderConfig) -> SvgPathSurface:
    surface = SvgPathSurface(precision=config.precision)
    replay(parse_path(path_text), surface)
    return surface


def build_svg_document(surface: SvgPathSurface, config: RenderConfig) -> str:
    precision = config.precision
    style = config.style
    w = _fmt(config.width, precision)
    h = _fmt(config.height, precision)

    lines: list[str] = []
    lines.append('<?xml version="1.0" encoding="UTF-8"?>')
    lines.append(
        "<svg xmlns=\"http://www.w3.org/2000/svg\" version=\"1.1\" "
        f"viewBox=\"0 0 {w} {h}\" width=\"{w}\" height=\"{h}\">"
    )

    if config.name:
        lines.append(f"  <title>{_escape(config.name)}</title>")

    if config.background and config.background.lower() != "none":
        lines.append(
            f'  <rect x="0" y="0" width="{w}" height="{h}" '
            f'fill="{_escape(config.background)}" />'
        )

    if style.has_transform:
        # Same order as canvas scale() then translate().
        lines.append(
            f'  <g transform="scale({_fmt(style.scale_x, precision)},'
            f"{_fmt(style.scale_y, precision)}) "
            f"translate({_fmt(style.translate_x, precision)},"
            f'{_fmt(style.translate_y, precision)})">'
        )
        indent = "    "
    else:
        indent = "  "

    if surface.segments:
        lines.append(
            f'{indent}<path d="{surface.path_data}" '
            f'stroke="{_escape(style.stroke)}" '
            f'stroke-width="{_fmt(style.stroke_width, precision)}" '
            f'fill="{_escape(style.fill)}" '
            f'fill-rule="{surface.fill_rule.value}" />'
        )

    if style.has_transform:
        lines.append("  </g>")

    lines.append("</svg>")
    return "\n".join(lines) + "\n"


def write_svg(surface: SvgPathSurface, *, out_path: str, config: RenderConfig) -> None:
    _ensure_parent_dir(out_path)
    with open(out_path, "w", encoding="utf-8") as f:
        f.write(build_svg_document(surface, config))


# -------------------------
# CLI / Help
# -------------------------

HELP_EPILOG = r"""
PATH SYNTAX

A path is a sequence of single-letter commands, each followed by its
arguments. Letters are case-insensitive. Numbers may be negative and may use
a fraction with an exponent ("-1.5E-3"). Arguments are separated by spaces,
tabs, a comma, or a mix ("10,20", "10 20", "10 , 20").

  F <rule>
      Fill rule, only allowed as the very first command.
      0 = evenodd, 1 = nonzero.

  M <x,y>
      Move to a point (one point only). The first command must be F or M.

  L <x,y> [<x,y> ...]
      Line to each point in turn.

  C <c1x,c1y> <c2x,c2y> <x,y> [...]
      Cubic Bezier curve; repeat the three points for more curves.

  Q <cx,cy> <x,y> [...]
      Quadratic Bezier curve; repeat the two points for more curves.

  A <cx,cy> <radius> <start> <end> <ccw> [...]
      Circular arc around a center, angles in radians. ccw = 1 draws
      counter-clockwise, anything else clockwise.

  Z
      Close the current subpath.

Example

  F1 M10,10 L90,10 90,90 10,90 Z

RENDER CONFIG (render --config)

  {
    "name": "Square",            optional <title>
    "width": 300, "height": 150, document size
    "precision": 3,              coordinate digits, 0..10
    "background": "white",       optional background rect
    "style": {
      "stroke": "black", "fill": "<stroke>", "stroke_width": 1,
      "scale_x": 1, "scale_y": 1, "translate_x": 0, "translate_y": 0
    }
  }
"""


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="pathscript",
        description="Parse compact path data and render it to SVG.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=HELP_EPILOG,
    )

    sub = p.add_subparsers(dest="cmd", required=True)

    def add_path_argument(sp: argparse.ArgumentParser) -> None:
        sp.add_argument("path", help="Path data, or a file name with --file.")
        sp.add_argument(
            "--file",
            action="store_true",
            help="Read the path data from the file named by PATH.",
        )

    pr = sub.add_parser(
        "render",
        help="Render path data to an SVG file.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    add_path_argument(pr)
    pr.add_argument("output", help="Path to write the SVG output.")
    pr.add_argument(
        "--config", default=None, help="Optional JSON render configuration."
    )

    pp = sub.add_parser(
        "parse",
        help="Print the drawing instructions for path data.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    add_path_argument(pp)
    pp.add_argument(
        "--json", action="store_true", help="Print a JSON array instead of one per line."
    )

    pv = sub.add_parser(
        "validate",
        help="Check path data and print a brief summary.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    add_path_argument(pv)

    return p


# -------------------------
# Commands
# -------------------------


def read_path_argument(path: str, from_file: bool) -> str:
    if not from_file:
        return path
    with open(path, encoding="utf-8") as f:
        # Line breaks are not separators in the grammar.
        return " ".join(line.strip() for line in f)


def cmd_render(path_text: str, output_path: str, config_path: str | None) -> None:
    cfg_obj = load_json(config_path) if config_path else {}
    cfg = parse_config(cfg_obj)
    surface = draw_path(path_text, cfg)
    write_svg(surface, out_path=output_path, config=cfg)


def cmd_parse(path_text: str, as_json: bool) -> None:
    instructions = parse_path(path_text)
    if as_json:
        print(json.dumps([instruction_to_dict(i) for i in instructions], indent=2))
        return
    for ins in instructions:
        print(ins)


def cmd_validate(path_text: str) -> None:
    instructions = parse_path(path_text)
    counts = Counter(op_name(i) for i in instructions)
    rule = FillRule.EVEN_ODD
    for ins in instructions:
        if isinstance(ins, SetFillRule):
            rule = ins.rule

    print(f"instructions: {len(instructions)}")
    for name, count in sorted(counts.items()):
        print(f"  {name}: {count}")
    print(f"fill rule: {rule.value}")


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    try:
        path_text = read_path_argument(args.path, args.file)
        if args.cmd == "render":
            cmd_render(path_text, args.output, args.config)
        elif args.cmd == "parse":
            cmd_parse(path_text, args.json)
        elif args.cmd == "validate":
            cmd_validate(path_text)
        else:
            raise AssertionError("unreachable")
    except PathSyntaxError as e:
        print(f"Path error: {e}", file=sys.stderr)
        return 2
    except ConfigError as e:
        print(f"Config error: {e}", file=sys.stderr)
        return 2
    except UnicodeDecodeError as e:
        print(f"File error: {e}", file=sys.stderr)
        return 2
    except ValueError as e:
        print(f"Render error: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"File error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
