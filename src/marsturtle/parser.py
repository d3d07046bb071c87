"""Mission input parsing: grid size, robot start lines and command strings."""

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from .config import Config
from .mars import Mars
from .turtle import Command, Orientation, Position

logger = logging.getLogger(__name__)

GRID_RE = re.compile(r"^\s*(\d+)\s+(\d+)\s*$")
ROBOT_RE = re.compile(r"^\s*(-?\d+)\s+(-?\d+)\s+([NESW])\s*$", re.IGNORECASE)


class ParseError(ValueError):
    def __init__(self, message: str, line_num: int = 0):
        self.line_num = line_num
        super().__init__(f"L{line_num}: {message}" if line_num else message)


class GridSizeError(ParseError):
    pass


class RobotLineError(ParseError):
    pass


@dataclass
class RobotOrder:
    position: Position
    orientation: Orientation
    commands: list[Command] = field(default_factory=list)


@dataclass
class Mission:
    upper_right: Position
    robots: list[RobotOrder] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def stats(self) -> dict:
        return {
            "robots": len(self.robots),
            "commands": sum(len(r.commands) for r in self.robots),
        }


def parse_grid(line: str, line_num: int = 0) -> Position:
    match = GRID_RE.match(line)
    if not match:
        raise GridSizeError(f"Invalid grid size {line.strip()!r}", line_num)
    return Position(int(match.group(1)), int(match.group(2)))


def parse_robot(line: str, line_num: int = 0) -> tuple[Position, Orientation]:
    match = ROBOT_RE.match(line)
    if not match:
        raise RobotLineError(f"Invalid robot position {line.strip()!r}", line_num)
    position = Position(int(match.group(1)), int(match.group(2)))
    return position, Orientation.from_char(match.group(3))


def parse_commands(line: str) -> list[Command]:
    return Command.from_string(line.strip())


def _next_content(numbered: Iterator[tuple[int, str]]) -> tuple[int, str] | None:
    for line_num, line in numbered:
        if line.strip():
            return line_num, line
    return None


def read_mission(lines: Iterable[str]) -> Mission:
    """Read a full mission from input lines.

    A bad grid line is fatal. A bad robot line ends the mission with the
    robots read so far. A missing or blank command line ends the input.
    """
    numbered = enumerate(lines, 1)

    first = _next_content(numbered)
    if first is None:
        raise GridSizeError("Missing grid size")
    mission = Mission(parse_grid(first[1], first[0]))

    while True:
        robot_line = _next_content(numbered)
        if robot_line is None:
            break

        line_num, line = robot_line
        try:
            position, orientation = parse_robot(line, line_num)
        except RobotLineError as e:
            logger.warning("Stopping input: %s", e)
            mission.errors.append(str(e))
            break

        command_line = next(numbered, None)
        if command_line is None or not command_line[1].strip():
            msg = f"L{line_num}: No commands for robot, treating as end of input"
            logger.warning(msg)
            mission.warnings.append(msg)
            break

        mission.robots.append(
            RobotOrder(position, orientation, parse_commands(command_line[1]))
        )

    return mission


def run_mission(mission: Mission, config: Config | None = None) -> Mars:
    """Run every robot of a mission, in order, on a fresh Mars."""
    mars = Mars(mission.upper_right, config)
    for order in mission.robots:
        mars.move_turtle(order.position, order.orientation, order.commands)
    return mars
