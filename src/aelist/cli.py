"""Command-line interface for aelist."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from aelist import __version__
from aelist.common.config import AppConfig
from aelist.common.errors import AelistError, ConfigurationError
from aelist.common.logging import console_suspended, setup_logging
from aelist.index import build_index
from aelist.interactive import run_interactive
from aelist.launcher import launch_detached
from aelist.paths import search_paths_from_environment
from aelist.settings import MAX_NPROMPT, DisplayMode, LauncherSettings, choose_random_mode


def resolve_mode(
    default: str,
    short: bool = False,
    line: bool = False,
    long_mode: bool = False,
    random_mode: bool = False,
) -> DisplayMode:
    """Pick the display mode from flags, falling back to the configured default.

    Precedence: -r, then -L, then -l, then -s.
    """
    if random_mode:
        return choose_random_mode()
    if long_mode:
        return DisplayMode.LONG
    if line:
        return DisplayMode.LINE
    if short:
        return DisplayMode.SHORT
    if default == "random":
        return choose_random_mode()
    return DisplayMode(default)


def build_settings(
    config: AppConfig,
    paths: tuple[str, ...],
    mode: DisplayMode,
    nprompt: int | None,
    skip_banner: bool,
    include_env_paths: bool,
) -> LauncherSettings:
    """Merge command-line flags over the loaded configuration."""
    launcher = config.launcher
    return LauncherSettings(
        paths=paths,
        mode=mode,
        nprompt=nprompt if nprompt is not None else launcher.nprompt_value,
        skip_banner=skip_banner or launcher.skip_banner,
        include_env_paths=include_env_paths or launcher.include_env_paths,
        path_env_var=launcher.path_env_var,
    )


def _fail(message: str, label: str = "Error") -> None:
    console = Console(stderr=True)
    console.print(f"[bold red]❌ {label}:[/bold red] {escape(message)}")
    sys.exit(1)


class LauncherCommand(click.Command):
    """Command that treats an unrecognised flag like -h: usage, then a clean exit."""

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except click.NoSuchOption as err:
            click.echo(f"Error: {err.format_message()}\n", err=True)
            click.echo(ctx.get_help(), err=True)
            ctx.exit(0)


@click.command(cls=LauncherCommand, context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("paths", nargs=-1)
@click.option("-s", "short", is_flag=True, help="Enable short display mode")
@click.option("-l", "line", is_flag=True, help="Enable line display mode")
@click.option("-L", "long_mode", is_flag=True, help="Enable long display mode")
@click.option("-r", "random_mode", is_flag=True, help="Pick a random display mode")
@click.option(
    "-n",
    "nprompt",
    type=click.IntRange(1, MAX_NPROMPT),
    help="Maximum number of matches to display (default: 30)",
)
@click.option("-S", "skip_banner", is_flag=True, help="Skip the very first loading info")
@click.option("-P", "include_env_paths", is_flag=True, help="Load $PATH in paths even when paths are given")
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to .env configuration file",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output (DEBUG level)")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write logs to this file",
)
@click.version_option(version=__version__)
def cli(
    paths,
    short,
    line,
    long_mode,
    random_mode,
    nprompt,
    skip_banner,
    include_env_paths,
    config_file,
    verbose,
    log_file,
):
    """
    aelist - Interactive launcher for executables in PATH.

    Indexes every executable in PATHS (or in $PATH when none are given),
    filters the list as you type and starts the best match, detached from
    the terminal, when you press Enter. Ctrl-C exits without launching.

    An exact name match is always preferred; otherwise the first executable
    whose name contains the typed text is selected.

    Examples:

        \b
        # Search everything in $PATH
        aelist

        \b
        # Long mode, 10 matches, only ~/bin and $PATH
        aelist -L -n 10 -P ~/bin
    """
    config = AppConfig(env_file=config_file) if config_file else AppConfig()

    logger = logging.getLogger("aelist")

    try:
        config.require_valid()
        level = logging.DEBUG if verbose else config.log_level
        logger = setup_logging("aelist", level=level, log_file=log_file or config.log_file, console=verbose)
        mode = resolve_mode(config.launcher.mode, short, line, long_mode, random_mode)
        settings = build_settings(config, tuple(paths), mode, nprompt, skip_banner, include_env_paths)
        logger.debug(f"Settings: {settings}")

        search_paths = search_paths_from_environment(
            settings.paths,
            include_env=settings.include_env_paths,
            env_var=settings.path_env_var,
        )
        index = build_index(search_paths)

        with console_suspended(logger):
            record = run_interactive(index, settings)
        launch_detached(record)

    except KeyboardInterrupt:
        logger.debug("Interrupted, exiting without launch")
        return
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        _fail(str(e), label="Configuration Error")
    except AelistError as e:
        logger.error(str(e))
        _fail(str(e))
    except Exception as e:
        logger.exception("Unexpected error")
        _fail(str(e))


def main() -> None:
    """Console-script entry point."""
    cli(prog_name="aelist")
