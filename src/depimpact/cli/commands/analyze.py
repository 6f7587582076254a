"""
Analyze command for the dependency impact toolkit CLI.
"""

import sys
from pathlib import Path

import click

from ...analysis.loaders import load_graph_text, load_report
from ...analysis.pipeline import analyze as run_analysis
from ...shared.exceptions import DepImpactError
from ..utils import get_config, get_output_manager_from_context, write_json


@click.command()
@click.argument("report_path", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--graph",
    "-g",
    "graph_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output of 'mvn dependency:tree -DoutputType=dot'",
)
@click.option(
    "--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Write JSON result here"
)
@click.option("--indent", type=int, help="JSON indentation (default: 2)")
@click.pass_context
def analyze(ctx, report_path, graph_path, output, indent):
    """Summarize a Dependency-Check JSON report and parse the build graph."""
    logger = ctx.obj["logger"]
    config = get_config(ctx)
    out = get_output_manager_from_context(ctx)

    if indent is not None:
        config.json_indent = indent

    try:
        report = load_report(report_path)
        graph_text = load_graph_text(graph_path) if graph_path else None

        result = run_analysis(report, graph_text)
        summary = result.summary

        out.status(f"Report: {report_path}")
        if result.report_date:
            out.info(f"  Report date:       {result.report_date}")
        out.info(f"  Dependencies:      {summary.total_dependencies}")
        out.info(f"  Vulnerable:        {summary.vulnerable_count}")
        out.info(f"  High severity:     {summary.high_severity}")
        out.info(f"  Medium severity:   {summary.medium_severity}")
        out.info(f"  Low severity:      {summary.low_severity}")
        if graph_path:
            out.info(f"  Graph edges:       {len(result.graph)}")
            if not result.graph:
                out.warning(f"No dependency edges found in {graph_path}")

        for record in result.dependencies:
            if record.used_in:
                out.debug(f"{record.file_name} used in: {', '.join(record.used_in)}")

        if output:
            written = write_json(result.to_dict(), output, config)
            out.success(f"Analysis written to {written}")

        logger.info(f"Analysis completed for {report_path}")

    except DepImpactError as e:
        logger.error(f"Analysis failed: {e}")
        out.error(f"Analysis failed: {e}")
        sys.exit(1)
