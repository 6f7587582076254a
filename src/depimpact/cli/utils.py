"""
Utilities shared by CLI commands.
"""

import json
from pathlib import Path
from typing import Any

import click

from ..shared.exceptions import OutputWriteError, create_error_context, wrap_external_error
from ..shared.models import ProcessingConfig
from .output import CLIOutputManager, create_output_manager


def get_cli_flags(ctx: click.Context) -> dict[str, Any]:
    """Extract CLI flags from Click context, traversing parent contexts."""
    flags: dict[str, Any] = {}

    # Walk up to the root first so that child params override parent ones
    chain = []
    current_ctx: click.Context | None = ctx
    while current_ctx:
        chain.append(current_ctx)
        current_ctx = current_ctx.parent

    for context in reversed(chain):
        if context.params:
            flags.update(context.params)

    return flags


def get_output_manager_from_context(ctx: click.Context) -> CLIOutputManager:
    """Create output manager from Click context flags."""
    flags = get_cli_flags(ctx)
    return create_output_manager(quiet=flags.get("quiet", False), verbose=flags.get("verbose", False))


def get_config(ctx: click.Context) -> ProcessingConfig:
    """Return the processing configuration stored by the root command."""
    ctx.ensure_object(dict)
    config = ctx.obj.get("config")
    if config is None:
        config = ProcessingConfig()
        ctx.obj["config"] = config
    return config


def write_json(payload: dict[str, Any], output: Path, config: ProcessingConfig) -> Path:
    """Write a JSON payload, resolving relative paths against ``config.output_dir``.

    Raises:
        OutputWriteError: If the file or its parent directory cannot be written
    """
    if config.output_dir is not None and not output.is_absolute():
        output = config.output_dir / output

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        with open(output, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=config.json_indent)
    except OSError as e:
        context = create_error_context(path=str(output), operation="write_output")
        wrapped = wrap_external_error(e, context)
        raise OutputWriteError(
            "Failed to write output", {**wrapped.context, "details": wrapped.message}
        ) from e

    return output
