"""
Reachability command for the dependency impact toolkit CLI.
"""

import sys
from pathlib import Path

import click

from ...analysis.edges import parse_dependency_edges
from ...analysis.loaders import load_graph_text, load_report
from ...analysis.pipeline import reachability_analysis
from ...shared.exceptions import DepImpactError
from ..utils import get_config, get_output_manager_from_context, write_json


@click.command()
@click.argument("report_path", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("graph_path", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Write JSON result here"
)
@click.pass_context
def reachability(ctx, report_path, graph_path, output):
    """Mark every component that transitively depends on a vulnerable one."""
    logger = ctx.obj["logger"]
    config = get_config(ctx)
    out = get_output_manager_from_context(ctx)

    try:
        graph_text = load_graph_text(graph_path)
        result = reachability_analysis(load_report(report_path), graph_text)

        if not parse_dependency_edges(graph_text):
            out.warning(f"No dependency edges found in {graph_path}")

        out.status(f"Vulnerable: {len(result.vulnerable)}")
        for name in result.vulnerable:
            out.info(f"  {name}", style="red")
        out.status(f"Transitively impacted: {len(result.impacted)}")
        for name in result.impacted:
            out.info(f"  {name}", style="yellow")
        out.status(f"Clean: {len(result.clean)}")
        for name in result.clean:
            out.debug(f"  {name}")

        if output:
            written = write_json(result.to_dict(), output, config)
            out.success(f"Reachability written to {written}")

        logger.info(f"Reachability analysis completed for {report_path}")

    except DepImpactError as e:
        logger.error(f"Reachability analysis failed: {e}")
        out.error(f"Reachability analysis failed: {e}")
        sys.exit(1)
