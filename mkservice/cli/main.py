"""Main CLI entry point for mkservice."""

import logging
import sys

import click
from rich.console import Console
from rich.markup import escape

from mkservice import __version__
from mkservice.config import Settings
from mkservice.exceptions import MkserviceError, UsageError
from mkservice.models.service import ServiceLevel, ServiceSpec
from mkservice.provider import get_provider
from mkservice.utils.args import parse_env, validate_name

console = Console()


def error(msg: str) -> None:
    """Print an error message."""
    console.print(f"[red]Error:[/red] {escape(msg)}")


def info(msg: str) -> None:
    """Print an info message."""
    console.print(f"[dim]{escape(msg)}[/dim]")


def success(msg: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {escape(msg)}")


def setup_logging(level: str) -> None:
    """Configure root logging for a CLI run."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _validate_name(ctx: click.Context, param: click.Parameter, value: str) -> str:
    try:
        return validate_name(value)
    except UsageError as e:
        raise click.BadParameter(str(e)) from e


def _parse_env(
    ctx: click.Context, param: click.Parameter, value: tuple[str, ...]
) -> tuple[tuple[str, str], ...]:
    try:
        return tuple(parse_env(entry) for entry in value)
    except UsageError as e:
        raise click.BadParameter(str(e)) from e


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("name", callback=_validate_name)
@click.argument("command", nargs=-1, required=True)
@click.option(
    "-e",
    "--env",
    "env_vars",
    multiple=True,
    metavar="KEY=VALUE",
    callback=_parse_env,
    help="Environment variable for the service (repeatable)",
)
@click.option(
    "--level",
    type=click.Choice([level.value for level in ServiceLevel]),
    default=ServiceLevel.SYSTEM.value,
    show_default=True,
    help="Install as a user or system service",
)
@click.option("--start", is_flag=True, help="Start the service after enabling it")
@click.option("--debug/--no-debug", default=False, help="Show debug information")
@click.version_option(__version__, "-V", "--version", prog_name="mkservice")
def cli(
    name: str,
    command: tuple[str, ...],
    env_vars: tuple[tuple[str, str], ...],
    level: str,
    start: bool,
    debug: bool,
) -> None:
    """Create a systemd service NAME that runs COMMAND, then enable it.

    Arguments to COMMAND that start with a dash must follow "--":

        mkservice -e LOG_LEVEL=debug myprogram /usr/local/bin/myprogram -- --flag
    """
    service = ServiceSpec(
        name=name,
        command=command,
        env_vars=env_vars,
        level=ServiceLevel(level),
    )

    try:
        settings = Settings.from_env()
        setup_logging("DEBUG" if debug else settings.log_level)
        logging.getLogger(__name__).debug("Service: %r", service)

        provider = get_provider(service, settings)
        info(f"Installing {service.unit_name} ({service.level.value})...")
        path = provider.install()
        if start:
            provider.start()
    except MkserviceError as e:
        error(str(e))
        raise SystemExit(1) from e

    success(f"Service {service.name} installed at {path}")


def _debug_requested(argv: list[str]) -> bool:
    """Check for --debug among mkservice's own options, not the service COMMAND."""
    if "--" in argv:
        argv = argv[: argv.index("--")]
    return "--debug" in argv


def main() -> None:
    """Main entry point with error handling.

    Known errors are reported by the command itself; this catches the rest.
    """
    try:
        cli()
    except Exception as e:
        if _debug_requested(sys.argv[1:]):
            raise
        error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
