"""CLI command implementations"""

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdpage.config import Settings, load_config
from mdpage.core.assemble import welcome_page
from mdpage.core.parse import Converter, make_converter
from mdpage.core.pipeline import build_toc, discover_files, load_markdown, render_path, split_location


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _converter(settings: Settings) -> Converter:
    """Build the Markdown converter, failing early on an unknown preset."""
    try:
        return make_converter(settings.parser_config)
    except KeyError as e:
        _fail(f"Unknown parser preset: {settings.parser_config}", e)


def _setup_logging(verbose: bool = False, debug: bool = False) -> None:
    level = logging.DEBUG if debug else (logging.INFO if verbose else logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", force=True)


def render_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file (optionally 'file.md#anchor') or directory")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    fragment: Annotated[Optional[str], typer.Option("--fragment", help="Anchor to scroll to on load")] = None,
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", help="Log progress")] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Log pipeline details")] = False,
    ):
    """Render Markdown file(s) to standalone HTML pages."""
    _setup_logging(verbose, debug)
    settings = _settings(overrides={"output_dir": out, "parser_config": parser})
    converter = _converter(settings)
    location, location_fragment = split_location(path)
    source = Path(location)
    if not source.exists():
        _fail(f"Path not found: {location}")

    files = discover_files(source, settings) if source.is_dir() else [source]
    if not files:
        _fail(f"No Markdown files found under {location}")

    output_dir = Path(settings.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    failed = 0
    for f in files:
        html, ok = render_path(f, initial_fragment=fragment or location_fragment, settings=settings,
                               converter=converter)
        relative = f.relative_to(source) if source.is_dir() else Path(f.name)
        out_file = output_dir / relative.with_suffix(".html")
        out_file.parent.mkdir(parents=True, exist_ok=True)
        out_file.write_text(html, encoding="utf-8")
        typer.echo(f"  {f} -> {out_file}" if ok else f"  {f} -> {out_file} (error page)")
        if not ok:
            failed += 1

    typer.echo(f"Rendered {len(files) - failed} document(s) to {output_dir}/")
    if failed:
        _fail(f"{failed} document(s) could not be rendered")


def toc_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file")],
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    ):
    """Print the table of contents of a Markdown file as JSON."""
    settings = _settings(overrides={"parser_config": parser})
    converter = _converter(settings)
    try:
        markdown = load_markdown(Path(path), settings)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        _fail(f"Cannot read {path}", e)
    entries = build_toc(markdown, settings, converter)
    typer.echo(json.dumps([e.model_dump() for e in entries], indent=2, ensure_ascii=False))


def welcome_cmd(
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    ):
    """Write the welcome page to <out-dir>/index.html."""
    settings = _settings(overrides={"output_dir": out})
    output_dir = Path(settings.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    index = output_dir / "index.html"
    index.write_text(welcome_page(settings), encoding="utf-8")
    typer.echo(f"Wrote {index}")
