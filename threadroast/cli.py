"""Command-line interface for threadroast."""

import asyncio
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from threadroast import Roaster, RoastConfig, __version__
from threadroast.config import LogFormat
from threadroast.exceptions import ConfigError, RoastError

app = typer.Typer(
    name="threadroast",
    help="Roast a Threads account with an LLM",
    add_completion=False,
)
console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"threadroast version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """threadroast - roast a Threads account with an LLM."""
    pass


@app.command()
def roast(
    account_name: str = typer.Argument(..., help="Threads username to roast"),
    model: Optional[str] = typer.Option(None, "--model", "-m", help="Override the completion model"),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Print only the roast text"
    ),
):
    """Scrape a Threads account and print a roast of it."""
    overrides = {}
    if quiet:
        overrides.update(log_format=LogFormat.JSON, log_level="ERROR")
    if model:
        overrides["model"] = model
    config = RoastConfig(**overrides)

    async def run():
        async with Roaster(config) as roaster:
            return await roaster.roast(account_name)

    try:
        result = asyncio.run(run())
    except ConfigError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(2)
    except RoastError as e:
        console.print(f"[red]✗[/red] {e.message}")
        raise typer.Exit(1)

    if quiet:
        console.print(result.roast, markup=False, highlight=False)
    else:
        console.print(Panel(Text(result.roast), title=Text(f"@{account_name}"), expand=False))


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Bind address"),
    port: int = typer.Option(8000, "--port", "-p", help="Bind port"),
):
    """Run the roast HTTP API."""
    import uvicorn

    uvicorn.run("threadroast.api:app", host=host, port=port)


if __name__ == "__main__":
    app()
