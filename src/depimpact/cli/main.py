"""
CLI interface for the dependency impact toolkit using Click.
"""

from pathlib import Path

import click

from .. import __version__
from ..shared.logging import get_logger, setup_logging
from ..shared.models import ProcessingConfig
from .commands.analyze import analyze
from .commands.impact import impact
from .commands.reachability import reachability


@click.group()
@click.version_option(__version__, prog_name="depimpact")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option("--quiet", "-q", is_flag=True, help="Enable quiet mode")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Also write logs to this file",
)
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory for relative --output paths",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    log_file: Path | None,
    output_dir: Path | None,
) -> None:
    """Dependency Impact Toolkit - analyze vulnerability reports and simulate upgrades."""
    ctx.ensure_object(dict)

    if quiet:
        log_level = "WARNING"
    elif verbose:
        log_level = "DEBUG"
    else:
        log_level = "INFO"

    config = ProcessingConfig(output_dir=output_dir, log_level=log_level, log_file=log_file)
    ctx.obj["config"] = config

    setup_logging(config.log_level, config.log_file)
    ctx.obj["logger"] = get_logger()


cli.add_command(analyze)
cli.add_command(impact)
cli.add_command(reachability)


def main():
    """Entry point for CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
