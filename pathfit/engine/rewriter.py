"""PathRewriter — map every endpoint, force absolute positions, close the path."""

from __future__ import annotations

from collections.abc import Iterable

from pathfit.engine.mapper import CoordinateMapper
from pathfit.errors import UnsupportedCommandError
from pathfit.svg.path_data import ClosePath, Command, LineTo, MoveTo, Position


def rewrite_commands(commands: Iterable[Command], mapper: CoordinateMapper) -> list[Command]:
    """Return the rewritten command list; the input is left untouched.

    The result always ends with exactly one ``ClosePath``.
    """
    out: list[Command] = []
    for cmd in commands:
        if isinstance(cmd, MoveTo):
            out.append(MoveTo(Position.ABSOLUTE, mapper.map(cmd.point)))
        elif isinstance(cmd, LineTo):
            out.append(LineTo(Position.ABSOLUTE, mapper.map(cmd.point)))
        elif isinstance(cmd, ClosePath):
            out.append(cmd)
        else:
            raise UnsupportedCommandError(type(cmd).__name__)

    if not out or not isinstance(out[-1], ClosePath):
        out.append(ClosePath())
    return out
