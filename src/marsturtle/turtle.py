"""Turtle state machine: positions, orientations and commands."""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .mars import Grid, ScentRegistry


class Orientation(str, Enum):
    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"

    def left(self) -> "Orientation":
        return _LEFT[self]

    def right(self) -> "Orientation":
        return _RIGHT[self]

    @classmethod
    def from_char(cls, c: str) -> "Orientation":
        return cls(c.upper())


_LEFT = {
    Orientation.NORTH: Orientation.WEST,
    Orientation.WEST: Orientation.SOUTH,
    Orientation.SOUTH: Orientation.EAST,
    Orientation.EAST: Orientation.NORTH,
}
_RIGHT = {v: k for k, v in _LEFT.items()}

# Unit step per orientation
_STEP = {
    Orientation.NORTH: (0, 1),
    Orientation.SOUTH: (0, -1),
    Orientation.EAST: (1, 0),
    Orientation.WEST: (-1, 0),
}


class Command(str, Enum):
    LEFT = "L"
    RIGHT = "R"
    FORWARD = "F"

    @classmethod
    def from_char(cls, c: str) -> "Command | None":
        try:
            return cls(c)
        except ValueError:
            return None

    @classmethod
    def from_string(cls, s: str) -> list["Command"]:
        """Parse a command string, dropping unrecognised characters."""
        commands = []
        for c in s:
            command = cls.from_char(c)
            if command is not None:
                commands.append(command)
        return commands


@dataclass(frozen=True)
class Position:
    x: int = 0
    y: int = 0

    def advanced(self, orientation: Orientation) -> "Position":
        dx, dy = _STEP[orientation]
        return Position(self.x + dx, self.y + dy)


@dataclass
class Turtle:
    """Robot state machine. Active until it falls off an unscented edge."""

    position: Position
    orientation: Orientation
    lost: bool = False

    def apply_command(self, command: Command, grid: "Grid", scents: "ScentRegistry"):
        if self.lost:
            return

        if command is Command.LEFT:
            self.orientation = self.orientation.left()
        elif command is Command.RIGHT:
            self.orientation = self.orientation.right()
        elif command is Command.FORWARD:
            self._forward(grid, scents)

    def _forward(self, grid: "Grid", scents: "ScentRegistry"):
        candidate = self.position.advanced(self.orientation)

        if grid.in_bounds(candidate):
            self.position = candidate
        elif not scents.has_scent(candidate):
            # Off-grid cell becomes the recorded final position
            self.position = candidate
            self.lost = True
            scents.add_scent(candidate)
