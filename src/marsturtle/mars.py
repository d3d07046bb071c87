"""Mars surface: bounded grid, scent memory and turtle orchestration."""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, NamedTuple

from .config import Config
from .turtle import Command, Orientation, Position, Turtle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Grid:
    upper_right: Position
    lower_left: Position = field(default_factory=Position)

    def in_bounds(self, position: Position) -> bool:
        lower, upper = self.lower_left, self.upper_right
        return lower.x <= position.x <= upper.x and lower.y <= position.y <= upper.y


class ScentRegistry:
    """Off-grid points where a turtle was lost. Only ever grows."""

    def __init__(self):
        self._scents: set[Position] = set()

    def has_scent(self, position: Position) -> bool:
        return position in self._scents

    def add_scent(self, position: Position):
        self._scents.add(position)

    def __contains__(self, position: object) -> bool:
        return position in self._scents

    def __iter__(self) -> Iterator[Position]:
        return iter(self._scents)

    def __len__(self) -> int:
        return len(self._scents)


class TurtleResult(NamedTuple):
    x: int
    y: int
    orientation: Orientation
    lost: bool


class Mars:
    """Owns the grid and scents, runs turtles one at a time and keeps the results."""

    def __init__(self, upper_right: Position, config: Config | None = None):
        self.config = config or Config()
        self.grid = Grid(upper_right)
        self.scents = ScentRegistry()
        self.turtles: list[Turtle] = []

    def run_turtle(self, turtle: Turtle, commands: Iterable[Command]) -> bool:
        """Run a turtle's commands until exhausted or lost.

        Turtles starting off the grid are discarded without touching the
        results or the scents. Returns whether the turtle was recorded.
        """
        if not self.grid.in_bounds(turtle.position):
            logger.debug("Discarding turtle starting off grid at %s", turtle.position)
            return False

        for command in commands:
            turtle.apply_command(command, self.grid, self.scents)
            if turtle.lost:
                logger.info("Turtle lost at %s, scent recorded", turtle.position)
                break

        self.turtles.append(turtle)
        return True

    def move_turtle(
        self, position: Position, orientation: Orientation, commands: Iterable[Command]
    ) -> bool:
        return self.run_turtle(Turtle(position, orientation), commands)

    def results(self) -> list[TurtleResult]:
        return [
            TurtleResult(t.position.x, t.position.y, t.orientation, t.lost)
            for t in self.turtles
        ]

    def report(self) -> list[str]:
        """One line per recorded turtle, in processing order."""
        from .report import format_result

        marker = self.config.report.lost_marker
        return [format_result(r, marker) for r in self.results()]
