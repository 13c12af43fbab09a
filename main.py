import logging
import subprocess
import sys
from typing import List, Optional

import httpx
import typer
from rich.console import Console

from book import Book
from config import configure_logging, settings
from utils.ui_helpers import set_output_mode, print_list_result, print_stats_result

APP_NAME = "Library CLI"

console = Console()
logger = logging.getLogger(__name__)


def get_client() -> httpx.Client:
    """HTTP client for the running library service."""
    return httpx.Client(
        base_url=settings.api_base_url,
        headers={"X-API-Key": settings.api_key},
        timeout=settings.http_timeout,
    )


def _detail(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(payload, dict) and "detail" in payload:
        return str(payload["detail"])
    return response.text


def _books(response: httpx.Response) -> List[Book]:
    return [Book.from_dict(item) for item in response.json()]


def _request(method: str, url: str, **kwargs) -> httpx.Response:
    """Send a request, exiting with code 1 when the service is unreachable."""
    try:
        with get_client() as client:
            return client.request(method, url, **kwargs)
    except httpx.HTTPError as e:
        logger.error("Request %s %s failed: %s", method, url, e)
        print(f"Could not reach library service: {e}")
        raise typer.Exit(code=1)


# --- Typer CLI Application ---
app = typer.Typer(help=APP_NAME)

@app.callback()
def _global_options(
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    )
):
    """Global options for the CLI (e.g. output mode)."""
    configure_logging()
    if output:
        set_output_mode(output)

@app.command("list")
def cli_list():
    """List every book in the catalog."""
    response = _request("GET", "/books")
    if response.status_code != 200:
        print(f"Error: {_detail(response)}")
        return
    print_list_result(_books(response))

@app.command("add")
def cli_add(title: str, author: str):
    """Add a book by title and author."""
    response = _request("POST", "/books", json={"title": title, "author": author})
    if response.status_code == 201:
        book = Book.from_dict(response.json())
        print(f"Successfully added: {book}")
    else:
        print(f"Error: {_detail(response)}")

@app.command("remove")
def cli_remove(title: str, author: str):
    """Remove one book equal to TITLE/AUTHOR (case-insensitive)."""
    response = _request("DELETE", "/books", params={"title": title, "author": author})
    if response.status_code == 204:
        print(f"Removed: {title} by {author}")
    elif response.status_code == 404:
        print(f"Book not found: {title} by {author}")
    else:
        print(f"Error: {_detail(response)}")

@app.command("search")
def cli_search(
    title: Optional[str] = typer.Option(None, "--title", "-t", help="Exact title, any case"),
    author: Optional[str] = typer.Option(None, "--author", "-a", help="Exact author, any case"),
):
    """Search books by title and/or author."""
    params = {k: v for k, v in (("title", title), ("author", author)) if v is not None}
    response = _request("GET", "/books/search", params=params)
    if response.status_code != 200:
        print(f"Error: {_detail(response)}")
        return
    print_list_result(_books(response), empty_message="No books matched.")

@app.command("stats")
def cli_stats():
    """Show catalog statistics."""
    response = _request("GET", "/stats")
    if response.status_code != 200:
        print(f"Error: {_detail(response)}")
        return
    print_stats_result(response.json())

@app.command("serve")
def cli_serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address"),
    port: Optional[int] = typer.Option(None, "--port", help="Bind port"),
):
    """Start the library API with uvicorn."""
    host = host or settings.api_host
    port = int(port or settings.api_port)
    print(f"Starting library API on http://{host}:{port}/")
    args = [
        sys.executable,
        "-m", "uvicorn",
        "api:app",
        "--host", host,
        "--port", str(port),
        "--log-level", settings.log_level.lower(),
    ]
    try:
        subprocess.run(args, check=False)
    except FileNotFoundError:
        console.print("[bold red]Error:[/] `uvicorn` could not be started. Make sure it is installed.")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
