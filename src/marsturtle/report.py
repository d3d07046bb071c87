"""Text rendering of mission results."""

from .config import Config
from .mars import Mars, TurtleResult


def format_result(result: TurtleResult, lost_marker: str = "LOST") -> str:
    line = f"{result.x} {result.y} {result.orientation.value}"
    if result.lost:
        line += f" {lost_marker}"
    return line


class ReportExporter:
    """Exports the turtles recorded on a Mars surface as report text."""

    def __init__(self, config: Config | None = None):
        self.config = config or Config()

    def export(self, mars: Mars) -> str:
        marker = self.config.report.lost_marker
        return "\n".join(format_result(r, marker) for r in mars.results())
