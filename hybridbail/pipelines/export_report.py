"""
hybridbail-report: render stored bail analysis results.

Usage:
  hybridbail-report export [OPTIONS] RESULT_JSON
  hybridbail-report parse [OPTIONS] NARRATIVE_TXT

Examples:
  hybridbail-report export result.json
  hybridbail-report export result.json --out reports/ --tex
  hybridbail-report parse reasoning.txt --fallback
"""
from __future__ import annotations

import datetime
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from hybridbail.reasoning.parser import parse_narrative
from hybridbail.reasoning.report import render_report_html, render_report_tex, report_filename
from hybridbail.reasoning.schema import AnalysisResult, ReportFrame
from hybridbail.utils.config import settings
from hybridbail.utils.logger import get_logger

log = get_logger(__name__)

app = typer.Typer(help=__doc__, no_args_is_help=True)


def load_result(path: Path) -> AnalysisResult:
    return AnalysisResult.model_validate_json(path.read_text(encoding="utf-8"))


def export_result(
    result: AnalysisResult,
    out_dir: Path,
    *,
    tex: bool = False,
    day: Optional[datetime.date] = None,
    frame: Optional[ReportFrame] = None,
) -> list[Path]:
    """Write the HTML report (and optionally the LaTeX one) for one result; returns the paths."""
    out_dir.mkdir(parents=True, exist_ok=True)
    parsed = parse_narrative(result.detailed_reasoning)
    if parsed.is_empty:
        log.warning("case %s: no reasoning sections found", result.case_id)

    written: list[Path] = []
    html_path = out_dir / report_filename(result.case_id, day)
    html_path.write_text(render_report_html(result, frame, parsed=parsed), encoding="utf-8")
    written.append(html_path)

    if tex:
        tex_path = out_dir / report_filename(result.case_id, day, ext="tex")
        tex_path.write_text(render_report_tex(result, frame, parsed=parsed), encoding="utf-8")
        written.append(tex_path)

    for p in written:
        log.info("report written: %s (%d sections)", p, len(parsed.sections))
    return written


@app.command("export", help="Render RESULT_JSON (analysis service payload) to a standalone report.")
def export(
    result_json: Path = typer.Argument(..., help="Analysis result JSON file"),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Output directory (default: outputs/reports)"),
    tex: bool = typer.Option(False, "--tex/--no-tex", help="Also write a LaTeX report"),
) -> None:
    try:
        result = load_result(result_json)
    except (OSError, ValidationError) as e:
        log.error("cannot read analysis result %s: %s", result_json, e)
        raise typer.Exit(code=1)

    out_dir = out or Path(settings.outputs_dir) / "reports"
    for p in export_result(result, out_dir, tex=tex):
        typer.echo(str(p))


@app.command("parse", help="Print the parsed section/block/run structure of a narrative as JSON.")
def parse(
    narrative_txt: Path = typer.Argument(..., help="Plain-text narrative file"),
    fallback: bool = typer.Option(
        settings.fallback_section,
        "--fallback/--no-fallback",
        help="Wrap a narrative without section markers into one section",
    ),
) -> None:
    try:
        text = narrative_txt.read_text(encoding="utf-8")
    except OSError as e:
        log.error("cannot read narrative %s: %s", narrative_txt, e)
        raise typer.Exit(code=1)

    parsed = parse_narrative(text, fallback=fallback)
    typer.echo(parsed.model_dump_json(indent=2))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
