from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

import typer

from .config import get_settings
from .detector import classify
from .fixer import fix_document
from .logs import configure_logging
from .pipeline import preview_document
from .renderer import DiagramRenderError, DiagramRenderer, normalize_format, render_document_diagrams
from .samples import SAMPLES, get_sample


app = typer.Typer(help="mdpreview: Markdown + Mermaid content detection and auto-fix")


@app.callback()
def main() -> None:
    configure_logging("mdpreview")


def _read_source(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise typer.BadParameter(f"Cannot read {source}: {exc}") from exc


@app.command("classify")
def classify_cmd(
    source: str = typer.Argument("-", help="File to inspect, or '-' for stdin"),
    as_json: bool = typer.Option(False, "--json", help="Emit the full result as JSON"),
):
    """Report whether the input is Markdown, raw Mermaid, mixed or empty."""
    result = classify(_read_source(source))
    if as_json:
        typer.echo(json.dumps(result.to_payload(), indent=2, ensure_ascii=False))
        return
    typer.echo(f"{result.kind.value}\t{result.hints.label}\t{result.reason}\tblocks={result.diagram_block_count}")


@app.command("fix")
def fix_cmd(
    source: str = typer.Argument("-", help="File to fix, or '-' for stdin"),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Write corrected text here instead of stdout"),
    check: bool = typer.Option(False, "--check", help="Exit with status 1 if fixes would be applied"),
):
    """Auto-fix Mermaid mistakes (wrapping raw Mermaid in a fence)."""
    text = _read_source(source)
    outcome = fix_document(text, classify(text).is_bare_diagram)
    for fix in outcome.applied_fixes:
        typer.echo(f"fixed: {fix}", err=True)
    if check:
        if outcome.was_modified:
            raise typer.Exit(code=1)
        return
    if out is not None:
        out.write_text(outcome.corrected_text, encoding="utf-8")
        typer.echo(f"Wrote {out}", err=True)
    else:
        typer.echo(outcome.corrected_text)


@app.command("preview")
def preview_cmd(
    source: str = typer.Argument("-", help="File to preview, or '-' for stdin"),
    as_json: bool = typer.Option(False, "--json", help="Emit classification and fixes as JSON"),
):
    """Run detection and auto-fix together, as the live editor does."""
    result = preview_document(_read_source(source))
    if as_json:
        typer.echo(json.dumps(result.to_payload(), indent=2, ensure_ascii=False))
        return
    hints = result.classification.hints
    typer.echo(f"[{hints.code}] {hints.label}: {hints.description}")
    for fix in result.fixes:
        typer.echo(f"  fixed: {fix}")
    typer.echo(result.text)


@app.command("render")
def render_cmd(
    source: str = typer.Argument(..., help="Markdown or Mermaid file"),
    fmt: str = typer.Option("", "--format", "-f", help="svg or png (defaults to MDPREVIEW_RENDER_FORMAT)"),
    out_dir: Path = typer.Option(Path("diagrams"), "--out-dir", help="Directory for rendered images"),
):
    """Send every (fixed) Mermaid block to the configured renderer."""
    settings = get_settings()
    fmt = normalize_format(fmt or settings.render_format)
    try:
        renderer = DiagramRenderer.from_settings()
    except DiagramRenderError as exc:
        raise typer.BadParameter(str(exc)) from exc
    result = preview_document(_read_source(source))
    diagrams = render_document_diagrams(result.text, renderer, fmt)
    if not diagrams:
        typer.echo("No Mermaid diagrams found.")
        return
    out_dir.mkdir(parents=True, exist_ok=True)
    failed = 0
    for diagram in diagrams:
        if not diagram.ok:
            failed += 1
            typer.echo(f"diagram {diagram.index}: {diagram.error}", err=True)
            continue
        target = out_dir / f"diagram_{diagram.index}.{fmt}"
        target.write_bytes(diagram.content or b"")
        typer.echo(f"diagram {diagram.index}: {target}")
    if failed:
        raise typer.Exit(code=1)


@app.command("sample")
def sample_cmd(name: Optional[str] = typer.Argument(None, help="Sample to print; omit to list")):
    """List or print the bundled sample documents."""
    if not name:
        for key in SAMPLES:
            typer.echo(key)
        return
    try:
        typer.echo(get_sample(name))
    except KeyError as exc:
        raise typer.BadParameter(f"Unknown sample {name!r}; choose from {', '.join(SAMPLES)}") from exc


@app.command("serve")
def serve_cmd(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address"),
    port: Optional[int] = typer.Option(None, "--port", help="Bind port"),
):
    """Run the HTTP API."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "api.main:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=settings.api_reload,
    )
