"""Path-data command stream — ``d`` attribute text <-> typed commands.

Only move, line and close are representable. Every other SVG path command
is rejected while tokenizing, so downstream code never sees one.
"""

from __future__ import annotations

import enum
import math
import re
from dataclasses import dataclass
from typing import Iterator, NamedTuple, Union

from pathfit.errors import MissingOperandError, ParseError, UnsupportedCommandError

_TOKEN_RE = re.compile(
    r"""
    (?P<cmd>[A-Za-z])
    | (?P<num>[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)
    | (?P<sep>[\s,]+)
    | (?P<bad>.)
    """,
    re.VERBOSE,
)

_SUPPORTED = frozenset("MLZ")
_UNSUPPORTED = frozenset("HVCSQTA")


class Point(NamedTuple):
    x: float
    y: float


class Position(enum.Enum):
    ABSOLUTE = "absolute"
    RELATIVE = "relative"


@dataclass(frozen=True)
class MoveTo:
    position: Position
    point: Point


@dataclass(frozen=True)
class LineTo:
    position: Position
    point: Point


@dataclass(frozen=True)
class ClosePath:
    pass


Command = Union[MoveTo, LineTo, ClosePath]


def _tokenize(d: str) -> Iterator[tuple[str, str, int]]:
    """Yield ``(kind, text, offset)`` for every command letter and number."""
    for match in _TOKEN_RE.finditer(d):
        kind = match.lastgroup
        if kind == "sep":
            continue
        if kind == "bad":
            raise ParseError(f"unexpected character {match.group()!r} at offset {match.start()}")
        yield kind, match.group(), match.start()


def parse_path_data(d: str) -> list[Command]:
    """Parse raw path data into an ordered list of commands."""
    groups: list[tuple[str, int, list[float]]] = []

    for kind, text, offset in _tokenize(d):
        if kind == "cmd":
            letter = text.upper()
            if letter in _UNSUPPORTED:
                raise UnsupportedCommandError(text, offset)
            if letter not in _SUPPORTED:
                raise ParseError(f"unknown path command {text!r} at offset {offset}")
            if not groups and letter != "M":
                raise ParseError(f"path data must start with a move, found {text!r}")
            groups.append((text, offset, []))
        else:
            if not groups:
                raise ParseError(f"path data must start with a command, found {text!r}")
            value = float(text)
            if not math.isfinite(value):
                raise ParseError(f"number {text!r} at offset {offset} is out of range")
            groups[-1][2].append(value)

    commands: list[Command] = []
    for letter, offset, operands in groups:
        commands.extend(_expand(letter, offset, operands))
    return commands


def _expand(letter: str, offset: int, operands: list[float]) -> list[Command]:
    """Turn one command letter plus its operands into commands.

    Extra coordinate pairs after a move are implicit lines of the same position.
    """
    if letter in "Zz":
        if operands:
            raise ParseError(f"{letter!r} at offset {offset} takes no operands")
        return [ClosePath()]

    if not operands or len(operands) % 2:
        raise MissingOperandError(
            f"{letter!r} at offset {offset} expects coordinate pairs, got {len(operands)} number(s)"
        )

    position = Position.RELATIVE if letter.islower() else Position.ABSOLUTE
    out: list[Command] = []
    for i in range(0, len(operands), 2):
        point = Point(operands[i], operands[i + 1])
        if letter in "Mm" and i == 0:
            out.append(MoveTo(position, point))
        else:
            out.append(LineTo(position, point))
    return out


def format_number(value: float, precision: int | None = None) -> str:
    if precision is not None:
        value = round(value, precision)
    if value == 0:
        return "0"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_path_data(commands: list[Command], precision: int | None = None) -> str:
    """Serialize commands as ``M0,0 L100,0 Z`` style path data."""
    parts: list[str] = []
    for cmd in commands:
        if isinstance(cmd, ClosePath):
            parts.append("Z")
            continue
        letter = "M" if isinstance(cmd, MoveTo) else "L"
        if cmd.position is Position.RELATIVE:
            letter = letter.lower()
        x = format_number(cmd.point.x, precision)
        y = format_number(cmd.point.y, precision)
        parts.append(f"{letter}{x},{y}")
    return " ".join(parts)
