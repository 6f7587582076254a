"""
Impact command for the dependency impact toolkit CLI.
"""

import sys
from pathlib import Path

import click

from ...analysis.loaders import load_report
from ...analysis.pipeline import impact_analysis
from ...shared.exceptions import DepImpactError
from ..utils import get_config, get_output_manager_from_context, write_json


@click.command()
@click.argument("report_path", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("vulnerable_dependency")
@click.option(
    "--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Write JSON result here"
)
@click.pass_context
def impact(ctx, report_path, vulnerable_dependency, output):
    """Show clean dependents of VULNERABLE_DEPENDENCY and simulate upgrades."""
    logger = ctx.obj["logger"]
    config = get_config(ctx)
    out = get_output_manager_from_context(ctx)

    try:
        report = load_report(report_path)
        result = impact_analysis(report, vulnerable_dependency)

        if result.impact:
            out.status(f"Directly impacted by {vulnerable_dependency}:")
            for entry in result.impact:
                out.info(f"  {entry.target} ({entry.impact_level} impact)")
                out.debug(f"  {entry.recommendation}")
        else:
            out.status(f"No clean dependents of {vulnerable_dependency}")

        out.status("Upgrade simulations:")
        for simulation in result.simulations:
            out.info(
                f"  {simulation.recommended_version} "
                f"(severity score {simulation.severity_score}) - {simulation.id}"
            )

        if output:
            payload = {"vulnerableDependency": vulnerable_dependency, **result.to_dict()}
            written = write_json(payload, output, config)
            out.success(f"Impact analysis written to {written}")

        logger.info(f"Impact analysis completed for {vulnerable_dependency}")

    except DepImpactError as e:
        logger.error(f"Impact analysis failed: {e}")
        out.error(f"Impact analysis failed: {e}")
        sys.exit(1)
