"""Thin CLI over the extraction engine and the context use case.

Commands:
- extract: print the relevant passages of a text file for a question
- keywords: show the search terms derived from a question
- ask: run the configured context use case (settings-driven reference text)
"""

from __future__ import annotations

import json
import logging
import sys
import warnings
from pathlib import Path

import click
import typer

from passage_kb.config.composition import build_extractor, get_context_use_case
from passage_kb.config.settings import get_settings
from passage_kb.domain.extraction import ExtractionReport
from passage_kb.exceptions import ConfigurationError, DocumentLoadError
from passage_kb.infra.loaders import CachedTextFileLoader
from passage_kb.logging_setup import setup_logging

app = typer.Typer(add_completion=False, no_args_is_help=True, help="Relevant-passage tools")

log = logging.getLogger(__name__)


def _report_payload(question: str, report: ExtractionReport) -> dict[str, object]:
    return {
        "question": question,
        "keywords": report.keywords,
        "used_fallback": report.used_fallback,
        "passages": [
            {"start": s.start, "end": s.end, "score": s.score, "length": len(s.text)}
            for s in report.selected
        ],
        "context_length": len(report.text),
        "context": report.text,
    }


def _write_json(data: dict[str, object], outfile: Path | None) -> None:
    text = json.dumps(data, ensure_ascii=False, indent=2)
    if outfile:
        outfile.parent.mkdir(parents=True, exist_ok=True)
        with open(outfile, "w", encoding="utf-8", newline="\n") as f:
            f.write(text + "\n")
    else:
        typer.echo(text)


@app.command("extract")
def extract_cmd(
    question: str = typer.Argument(..., help="Question to extract passages for"),
    file: Path | None = typer.Option(  # noqa: B008 - Typer keeps options in signature
        None, "--file", "-f", help="Reference text file (default: settings data_dir/document)"
    ),
    domain: str | None = typer.Option(None, help="Keyword mapping preset ('none' to disable)"),
    mapping_file: Path | None = typer.Option(  # noqa: B008
        None, "--mapping-file", help="JSON keyword mapping file (overrides --domain)"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON report"),
    outfile: Path | None = typer.Option(  # noqa: B008
        None, "--outfile", "-o", help="Write the JSON report to a file (UTF-8); quiets logs"
    ),
) -> None:
    settings = get_settings()
    quiet = bool(as_json or outfile)
    setup_logging(logging.ERROR if quiet else settings.log_level)
    if quiet:
        warnings.filterwarnings("ignore")

    path = file or (settings.data_dir / settings.document_name)
    source = CachedTextFileLoader(path.parent, path.name)
    text = source.read_text() or ""

    extractor = build_extractor(
        domain if domain is not None else settings.domain,
        mapping_file or settings.mapping_file,
    )
    report = extractor.analyze(text, question)
    log.info(
        "keywords=%s selected=%d fallback=%s length=%d",
        report.keywords,
        len(report.selected),
        report.used_fallback,
        len(report.text),
    )

    if quiet:
        _write_json(_report_payload(question, report), outfile)
        raise typer.Exit()

    typer.echo(report.text)


@app.command("keywords")
def keywords_cmd(
    question: str = typer.Argument(..., help="Question to derive keywords from"),
    domain: str | None = typer.Option(None, help="Keyword mapping preset ('none' to disable)"),
    mapping_file: Path | None = typer.Option(  # noqa: B008
        None, "--mapping-file", help="JSON keyword mapping file (overrides --domain)"
    ),
) -> None:
    settings = get_settings()
    setup_logging(logging.WARNING)
    extractor = build_extractor(
        domain if domain is not None else settings.domain,
        mapping_file or settings.mapping_file,
    )
    keywords = extractor.deriver.derive(question)
    if not keywords:
        typer.echo("No keywords.")
        return
    for kw in keywords:
        typer.echo(kw)


@app.command("ask")
def ask_cmd(
    question: str = typer.Argument(..., help="Question about the configured reference text"),
    as_json: bool = typer.Option(False, "--json", help="Print the tool result as JSON"),
) -> None:
    setup_logging(logging.ERROR if as_json else get_settings().log_level)
    result = get_context_use_case().execute(question)
    if as_json:
        _write_json(result.to_dict(), None)
        raise typer.Exit()
    typer.echo(f"text_length={result.text_length} context_length={result.context_length}")
    typer.echo("-" * 80)
    typer.echo(result.context)


def main() -> int:
    try:
        rv = app(standalone_mode=False)
        # typer.Exit surfaces as its exit code when not in standalone mode
        return rv if isinstance(rv, int) else 0
    except click.ClickException as ce:
        ce.show()
        return ce.exit_code
    except ConfigurationError as ce:
        typer.secho(f"Config error: {ce}", fg=typer.colors.RED)
        return 2
    except DocumentLoadError as de:
        typer.secho(f"Document error: {de}", fg=typer.colors.RED)
        return 3
    except Exception as e:  # noqa: BLE001
        typer.secho(f"Unexpected error: {e}", fg=typer.colors.RED)
        return 1


if __name__ == "__main__":
    sys.exit(main())
