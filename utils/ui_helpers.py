import os
import json
from typing import List, Dict
from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from book import Book
from config import settings

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"
OUTPUT_MODES = {"plain", "json", "rich"}

_console = Console()

def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in OUTPUT_MODES:
        os.environ[OUTPUT_MODE_ENV] = mode

def get_output_mode() -> str:
    mode = os.environ.get(OUTPUT_MODE_ENV, settings.output_mode).lower()
    return mode if mode in OUTPUT_MODES else "plain"

def print_list_result(books: List[Book], empty_message: str = "No books in library.") -> None:
    """Print books in the current output mode.
    - plain: 'Title by Author' lines, or the empty message
    - json: JSON array of {title, author}
    - rich: Rich table
    """
    mode = get_output_mode()

    if not books:
        print(empty_message)
        return

    if mode == "json":
        print(json.dumps([b.to_dict() for b in books], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title="📚 Books", show_lines=True, header_style="bold cyan")
        table.add_column("#", style="magenta", no_wrap=True)
        table.add_column("Title", style="white")
        table.add_column("Author", style="white")
        for i, b in enumerate(books, 1):
            table.add_row(str(i), b.title, b.author)
        _console.print(table)
    else:
        for b in books:
            print(b)

def print_stats_result(stats: Dict[str, int]) -> None:
    """Print catalog statistics in the current output mode."""
    mode = get_output_mode()

    total = stats.get("total_books", 0)
    authors = stats.get("unique_authors", 0)

    if mode == "json":
        print(json.dumps({"total_books": total, "unique_authors": authors}, ensure_ascii=False))
    elif mode == "rich":
        content = f"[bold]Total Books:[/] {total}\n[bold]Unique Authors:[/] {authors}"
        _console.print(Panel.fit(content, title="📊 Stats", border_style="blue"))
    else:
        print(f"Total Books: {total}")
        print(f"Unique Authors: {authors}")
