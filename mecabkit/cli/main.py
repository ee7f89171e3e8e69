"""
Command-line interface: decode raw MeCab output, parse text, show schemas.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import typer
from tqdm import tqdm

from mecabkit.core.constants import DEFAULT_BINARY, DEFAULT_ENGINE
from mecabkit.core.errors import MecabKitError
from mecabkit.core.models import Token
from mecabkit.processing.decoder import decode as decode_output
from mecabkit.schemas.registry import get_layouts
from mecabkit.tagger import MeCab

app = typer.Typer(add_completion=False, no_args_is_help=True)

FORMATS = ("json", "tsv")


def format_tokens(tokens: List[Token], output_format: str) -> str:
    """Render decoded tokens as a JSON array or as tab-separated rows."""
    if output_format == "json":
        return json.dumps([token.to_dict() for token in tokens], ensure_ascii=False, indent=2)
    rows = []
    for token in tokens:
        rows.append(
            "\t".join(
                [
                    token.surface,
                    "+".join(token.pos),
                    token.lemma,
                    token.pronunciation or "",
                ]
            )
        )
    return "\n".join(rows)


def _check_format(output_format: str) -> str:
    if output_format not in FORMATS:
        raise typer.BadParameter(f"format must be one of: {', '.join(FORMATS)}")
    return output_format


def _fail(exc: Exception) -> None:
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(code=1)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@app.command()
def decode(
    input_paths: List[Path] = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    engine: str = typer.Option(DEFAULT_ENGINE, "--engine", "-e", help="Engine tag (jp/ko)"),
    output_format: str = typer.Option("json", "--format", "-f", callback=_check_format),
    progress: bool = typer.Option(False, "--progress/--no-progress", help="Show a progress bar"),
) -> None:
    """Decode files of raw MeCab output."""
    tokens: List[Token] = []
    for path in tqdm(input_paths, desc="Decoding", unit="file", disable=not progress):
        try:
            tokens.extend(decode_output(path.read_text(encoding="utf-8"), engine))
        except MecabKitError as exc:
            _fail(exc)
    typer.echo(format_tokens(tokens, output_format))


@app.command()
def parse(
    text: Optional[str] = typer.Argument(None, help="Text to analyse; read from stdin when omitted"),
    engine: str = typer.Option(DEFAULT_ENGINE, "--engine", "-e", help="Engine tag (jp/ko)"),
    dict_path: Optional[Path] = typer.Option(None, "--dict-path", "-d", help="Compiled dictionary directory"),
    binary: str = typer.Option(DEFAULT_BINARY, "--binary", help="MeCab executable"),
    output_format: str = typer.Option("tsv", "--format", "-f", callback=_check_format),
) -> None:
    """Analyse text with MeCab and print the decoded tokens."""
    texts = [text] if text is not None else [line for line in sys.stdin.read().splitlines() if line.strip()]
    try:
        with MeCab(engine=engine, dict_path=dict_path, binary=binary) as mecab:
            sentences = mecab.parse_many(texts)
    except MecabKitError as exc:
        _fail(exc)
    for tokens in sentences:
        typer.echo(format_tokens(tokens, output_format))


@app.command()
def schema(
    engine: str = typer.Option(DEFAULT_ENGINE, "--engine", "-e", help="Engine tag (jp/ko)"),
) -> None:
    """Print the feature field table(s) of an engine."""
    try:
        layouts = get_layouts(engine)
    except MecabKitError as exc:
        _fail(exc)
    for layout in layouts:
        typer.echo(f"[{layout.engine}/{layout.name}]")
        for spec in layout.fields:
            typer.echo(f"{spec.index:>3}  {spec.attribute:<22}{type(spec.rule).__name__}")


def run() -> None:  # entry point for module execution
    app()


if __name__ == "__main__":
    run()
