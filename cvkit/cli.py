# cvkit/cli.py
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Optional
import typer
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text
from rich.theme import Theme

from dotenv import load_dotenv
load_dotenv()  # load .env early

from cvkit.utils.logging import setup_logger
from cvkit.settings import SETTINGS
from cvkit.cv.document import SourceDocument
from cvkit.cv.exceptions import CVKitError
from cvkit.cv.parse import ParsedCV, parse_document
from cvkit.cv.record import OfflineCVStore, build_cv_record
from cvkit.cv.validate import validate_document

app = typer.Typer(add_completion=False, help="Parse CV uploads into text and basic identity fields.")

CVKIT_THEME = Theme({
    "info": "blue",
    "success": "green",
    "warning": "yellow",
    "error": "bold red",
    "banner": "bold blue",
    "table.title": "bold blue",
    "table.header": "green",
})
console = Console(theme=CVKIT_THEME)

PREVIEW_CHARS = 600


def _print_banner() -> None:
    """Startup panel; disable with CVKIT_NO_BANNER=1."""
    if os.getenv("CVKIT_NO_BANNER", "").strip().lower() in {"1", "true", "yes"}:
        return
    console.print(Panel(Text("cvkit · CV parser", style="banner"), border_style="blue", padding=(0, 2)))


def _load(path: Path, mime: Optional[str]) -> SourceDocument:
    try:
        return SourceDocument.from_path(path, mime)
    except FileNotFoundError:
        console.print(f"[error]File not found: {path}[/error]")
        raise typer.Exit(code=1)


def _render_parsed(parsed: ParsedCV) -> None:
    info = parsed.basic_info
    table = Table(title="Basic Info", title_style="table.title", header_style="table.header")
    table.add_column("Field", style="bold")
    table.add_column("Value", overflow="fold")
    table.add_row("Name", info.name or "—")
    table.add_row("Email", info.email or "—")
    table.add_row("Phone", info.phone or "—")
    table.add_row("Format", f"{parsed.format.value} ({parsed.mime_type})")
    table.add_row("Size", f"{parsed.size} bytes")
    console.print(table)

    if parsed.degraded:
        console.print("[warning]PDF text could not be extracted; stored a placeholder instead.[/warning]")

    preview = parsed.text[:PREVIEW_CHARS]
    if len(parsed.text) > PREVIEW_CHARS:
        preview += " …"
    console.print(Panel(Text(preview) if preview else Text("(empty)", style="dim"), title=f"Text ({len(parsed.text)} chars)"))


@app.callback()
def _setup() -> None:
    setup_logger(SETTINGS.log_level, SETTINGS.log_json)


@app.command()
def parse(
    path: Path = typer.Argument(..., help="CV file (.pdf, .docx, .doc, .txt)"),
    mime: Optional[str] = typer.Option(None, help="Declared MIME type; guessed from the extension when omitted."),
    as_json: bool = typer.Option(False, "--json", help="Print the CV record as JSON instead of tables."),
    save: bool = typer.Option(False, help="Keep the record in the offline CV store."),
    user_id: str = typer.Option("local", help="Owner id written into the record."),
):
    """Extract text and basic info from a CV."""
    doc = _load(path, mime)
    try:
        parsed = parse_document(doc)
    except CVKitError as e:
        console.print(f"[error]{e}[/error]")
        raise typer.Exit(code=1)

    record = build_cv_record(parsed, user_id)
    if save:
        record["id"] = OfflineCVStore().save(record)

    if as_json:
        typer.echo(json.dumps(record, ensure_ascii=False, indent=2))
        return

    _print_banner()
    _render_parsed(parsed)
    if save:
        console.print(f"[success]Saved offline record {record['id']} → {SETTINGS.store_path}[/success]")


@app.command()
def validate(
    path: Path = typer.Argument(..., help="CV file to check"),
    mime: Optional[str] = typer.Option(None, help="Declared MIME type; guessed from the extension when omitted."),
):
    """Check a CV against the upload size and type limits."""
    result = validate_document(_load(path, mime))
    if result.is_valid:
        console.print("[success]OK[/success]")
        return
    for err in result.errors:
        console.print(f"[error]{err.code}[/error]: {err}")
    raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
