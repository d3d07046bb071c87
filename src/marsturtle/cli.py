"""CLI for marsturtle."""

from pathlib import Path

import click

from .config import Config


def _load_config(config_path: Path | None) -> Config:
    return Config.load(config_path) if config_path else Config()


@click.group()
def main():
    """marsturtle - Robots on a bounded Mars grid."""
    pass


@main.command()
@click.argument("input_file", type=click.File("r"), default="-")
@click.option("--config", "-c", "config_path", type=Path, help="JSON config file")
@click.option("--output", "-o", type=Path)
@click.option("--log-level", "-l", help="Override config log level")
@click.option("--log-file", type=Path)
def run(input_file, config_path: Path | None, output: Path | None, log_level: str | None, log_file: Path | None):
    """Run a mission and print the final robot states."""
    from .logging_config import setup_logging
    from .parser import ParseError, read_mission, run_mission
    from .report import ReportExporter

    config = _load_config(config_path)
    log_file = log_file or config.logging.file
    setup_logging(log_level or config.logging.level, str(log_file) if log_file else None)

    try:
        mission = read_mission(input_file)
    except ParseError as e:
        raise click.ClickException(str(e))

    for e in mission.errors:
        click.echo(click.style(f"Error: {e}", fg="yellow"), err=True)

    mars = run_mission(mission, config)
    report = ReportExporter(config).export(mars)

    if output:
        output.write_text(report + "\n" if report else "")
        click.echo(f"Saved: {output}", err=True)
    elif report:
        click.echo(report)


@main.command()
@click.argument("input_file", type=Path)
@click.option("--stats", is_flag=True)
def check(input_file: Path, stats: bool):
    """Parse mission input without running it."""
    from .parser import ParseError, read_mission

    try:
        mission = read_mission(input_file.read_text().splitlines())
    except ParseError as e:
        click.echo(click.style("Errors: 1", fg="red"))
        click.echo(f"  {e}")
        raise SystemExit(1)

    if mission.errors:
        click.echo(click.style(f"Errors: {len(mission.errors)}", fg="red"))
        for e in mission.errors:
            click.echo(f"  {e}")

    if mission.warnings:
        click.echo(click.style(f"Warnings: {len(mission.warnings)}", fg="yellow"))
        for w in mission.warnings:
            click.echo(f"  {w}")

    if stats:
        click.echo(f"Stats: {mission.stats}")

    if mission.valid:
        click.echo(click.style("OK", fg="green"))
    else:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
