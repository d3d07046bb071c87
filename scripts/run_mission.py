"""Run a mission file and print the report."""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from marsturtle.config import Config
from marsturtle.logging_config import setup_logging
from marsturtle.parser import read_mission, run_mission
from marsturtle.report import ReportExporter


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("input", type=Path, help="Mission input file")
    parser.add_argument("-c", "--config", type=Path, help="JSON config file")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    if not args.input.exists():
        print(f"No such file: {args.input}")
        return

    config = Config.load(args.config) if args.config else Config()
    setup_logging("DEBUG" if args.verbose else config.logging.level)

    mission = read_mission(args.input.read_text().splitlines())
    mars = run_mission(mission, config)

    print(ReportExporter(config).export(mars))
    print(f"Robots: {len(mars.turtles)}, scents: {len(mars.scents)}", file=sys.stderr)


if __name__ == "__main__":
    main()
