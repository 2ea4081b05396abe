"""Main CLI entry point for Rich Progress Bar."""

import sys
import time
import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from rich_progress_bar import __version__
from rich_progress_bar.core.progress_bar import ProgressBar, DisplayMode
from rich_progress_bar.ui.colors import color_names
from rich_progress_bar.utils.config import Config

# Configure logging
logging.basicConfig(level=logging.WARNING)
logger = logging.getLogger(__name__)

console = Console()


def setup_config(config_path: Optional[Path] = None) -> Config:
    """Setup and return configuration instance.

    Args:
        config_path: Optional path to config file

    Returns:
        Configuration instance
    """
    return Config(config_path)


def build_progress_bar(
    config: Config,
    total: Optional[int] = None,
    bar_length: Optional[int] = None,
    color: Optional[str] = None,
    display_mode: Optional[str] = None,
    no_color: bool = False
) -> ProgressBar:
    """Build a progress bar from config, with explicit options taking precedence.

    Args:
        config: Configuration supplying defaults
        total: Total count override
        bar_length: Bar length override
        color: Color name override
        display_mode: Display mode override
        no_color: Disable colored output

    Returns:
        Configured progress bar
    """
    settings = config.progress_bar_kwargs()
    progress = ProgressBar(use_color=False if no_color else None)
    progress \
        .set_color(color or settings.get("color", "white")) \
        .set_bar_length(bar_length if bar_length is not None else settings.get("bar_length", 90)) \
        .set_display_mode(display_mode or settings.get("display_mode", "inline")) \
        .set_total(total if total is not None else settings.get("total", 100))
    return progress


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def main(verbose: bool) -> None:
    """Rich Progress Bar - colored console progress bars."""
    if verbose:
        console.print(f"[bold green]Rich Progress Bar v{__version__}[/bold green]")
        console.print("Verbose mode enabled")
        logging.getLogger().setLevel(logging.INFO)


@main.command("demo")
@click.option("--total", type=click.IntRange(min=0), help="Number of units to complete")
@click.option("--bar-length", type=click.IntRange(min=0), help="Bar width in characters")
@click.option(
    "--color",
    type=click.Choice(color_names(), case_sensitive=False),
    help="Bar color (inline mode only)"
)
@click.option(
    "--mode",
    "display_mode",
    type=click.Choice([mode.value for mode in DisplayMode], case_sensitive=False),
    help="Overwrite one line (inline) or print a line per update (newline)"
)
@click.option("--delay", type=click.FloatRange(min=0), help="Seconds to wait between updates")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    envvar="RICH_PROGRESS_BAR_CONFIG",
    help="Path to JSON config file"
)
def demo_command(
    total: Optional[int],
    bar_length: Optional[int],
    color: Optional[str],
    display_mode: Optional[str],
    delay: Optional[float],
    no_color: bool,
    config_path: Optional[str]
) -> None:
    """Run a progress bar from zero to completion."""
    try:
        config = setup_config(Path(config_path) if config_path else None)
        progress = build_progress_bar(
            config,
            total=total,
            bar_length=bar_length,
            color=color,
            display_mode=display_mode,
            no_color=no_color
        )
        if delay is None:
            delay = float(config.get("delay", 0.15))

        logger.info(
            f"Running demo: total={progress.get_total()} "
            f"bar_length={progress.get_bar_length()} "
            f"color={progress.get_color().value} "
            f"mode={progress.get_display_mode().value}"
        )

        # A zero total is already complete; show its 100% line once
        if progress.get_total() == 0:
            progress.render()

        for _ in range(progress.get_total()):
            progress.increment()
            if delay:
                time.sleep(delay)

        if progress.get_display_mode() is DisplayMode.INLINE:
            console.print()

        console.print(
            f"[green]✓ Completed {progress.get_current()}/{progress.get_total()}[/green]"
        )

    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user.[/yellow]")
        sys.exit(1)
    except Exception as e:
        console.print(f"[red]Error: {str(e)}[/red]")
        logger.exception("Demo failed")
        sys.exit(1)


@main.command("colors")
def colors_command() -> None:
    """List the available bar colors."""
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Color", style="cyan")
    table.add_column("Sample")

    for name in color_names():
        table.add_row(name, f"[{name}]{'=' * 20}[/{name}]")

    console.print(table)


if __name__ == "__main__":
    main()
