"""Error taxonomy. Library code raises these; only the CLI turns them into exits."""

from __future__ import annotations


class PathFitError(Exception):
    """Base class for every fatal pathfit failure."""

    exit_code = 1


class IoError(PathFitError):
    """Input unreadable or output unwritable."""

    exit_code = 5


class ParseError(PathFitError):
    """Malformed document or path data, or a path element without ``d``."""

    exit_code = 4


class MissingOperandError(ParseError):
    """A move/line command without a complete coordinate pair."""


class UnsupportedCommandError(PathFitError):
    """A path command outside move/line/close (curves, arcs, H/V shorthand)."""

    exit_code = 4

    def __init__(self, command: str, offset: int | None = None) -> None:
        self.command = command
        self.offset = offset
        where = f" at offset {offset}" if offset is not None else ""
        super().__init__(f"command {command!r}{where} not implemented")


class GeometryError(PathFitError):
    """The document's geometry cannot be normalized."""

    exit_code = 3


class InvalidGeometryError(GeometryError):
    """A relative command was present, or no absolute point was observed."""


class DegenerateGeometryError(GeometryError):
    """The extent has zero width or height."""
