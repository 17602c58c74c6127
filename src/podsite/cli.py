"""CLI entry point for podsite."""

import json
import logging
import sys
from pathlib import Path
from typing import Annotated, Any, NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from podsite.catalog import CatalogFetcher
from podsite.config.logging import setup_logging
from podsite.config.manager import ConfigManager
from podsite.config.schema import SiteConfig
from podsite.pipeline import PipelineOptions, PipelineOrchestrator
from podsite.utils.errors import BuildError, PodsiteError

app = typer.Typer(
    name="podsite",
    help="Regenerate podcast episode pages from the feed and the audio bucket",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

RootOption = Annotated[
    Path,
    typer.Option("--root", "-r", help="Site project root (holds podsite.yaml)"),
]
JsonOption = Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")]


def _load_config(root: Path, quiet: bool = False, **overrides: Any) -> SiteConfig:
    config = ConfigManager(root).load_config(overrides)
    logger = logging.getLogger("podsite")
    # --verbose already lowered the level; otherwise honour the config file
    if logger.level != logging.DEBUG:
        logger.setLevel(logging.WARNING if quiet else config.log_level)
    return config


def _fail(e: PodsiteError) -> NoReturn:
    err_console.print(f"[red]✗[/red] Error: {escape(str(e))}")
    sys.exit(1)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"
    ),
    log_file: Path | None = typer.Option(
        None, "--log-file", help="Write logs to file"
    ),
) -> None:
    """podsite - podcast episode pages from RSS and object storage."""
    setup_logging(verbose=verbose, log_file=log_file)


@app.command("version")
def show_version() -> None:
    """Show version information."""
    from podsite import __version__

    console.print(f"[bold cyan]podsite[/bold cyan] v{__version__}")


@app.command("init")
def init_config(
    root: RootOption = Path("."),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """Write a default podsite.yaml into the project root."""
    try:
        path = ConfigManager(root).create_default_config(overwrite=force)
        console.print(f"[green]✓[/green] Wrote {escape(str(path))}")
    except PodsiteError as e:
        _fail(e)


@app.command("generate")
def generate(
    root: RootOption = Path("."),
    feed: Annotated[
        Path | None, typer.Option("--feed", help="Source RSS feed file")
    ] = None,
    bucket_url: Annotated[
        str | None, typer.Option("--bucket-url", help="Audio bucket listing URL")
    ] = None,
    limit: Annotated[
        int | None, typer.Option("--limit", "-n", help="Episodes to render", min=0)
    ] = None,
    order: Annotated[
        str | None,
        typer.Option("--order", help="ascending (lowest numbers) or descending (highest)"),
    ] = None,
    lookup: Annotated[
        str | None,
        typer.Option("--lookup", help="Match audio by catalog position (index) or by number"),
    ] = None,
    skip_malformed: Annotated[
        bool, typer.Option("--skip-malformed", help="Skip audio names without a guest")
    ] = False,
    no_build: Annotated[
        bool, typer.Option("--no-build", help="Render pages but don't run the site builder")
    ] = False,
    dry_run: Annotated[
        bool, typer.Option("--dry-run", help="Reconcile only, write nothing")
    ] = False,
) -> None:
    """Render episode pages and build the site.

    Examples:
        podsite generate

        podsite generate --root ./site --limit 10 --order descending
    """
    try:
        config = _load_config(
            root,
            feed_path=feed,
            bucket_url=bucket_url,
            render_limit=limit,
            render_order=order,
            catalog_lookup=lookup,
            skip_malformed_audio=True if skip_malformed else None,
        )
        options = PipelineOptions(dry_run=dry_run, build=not no_build)
        result = PipelineOrchestrator(config).run(options)
    except BuildError as e:
        if e.stdout:
            print(e.stdout, end="")
        if e.stderr:
            print(e.stderr, end="", file=sys.stderr)
        _fail(e)
    except PodsiteError as e:
        _fail(e)

    console.print(
        f"[green]✓[/green] {len(result.episodes)} episodes reconciled, "
        f"{len(result.pages)} pages written"
    )
    for page in result.pages:
        console.print(f"  [dim]{escape(str(page.path))}[/dim]")

    if result.build is not None:
        print(result.build.stdout, end="")
        if result.build.stderr:
            print(result.build.stderr, end="", file=sys.stderr)


@app.command("catalog")
def show_catalog(
    root: RootOption = Path("."),
    bucket_url: Annotated[
        str | None, typer.Option("--bucket-url", help="Audio bucket listing URL")
    ] = None,
    json_output: JsonOption = False,
) -> None:
    """Fetch and list the audio catalog."""
    try:
        config = _load_config(root, quiet=json_output, bucket_url=bucket_url)
        catalog = CatalogFetcher(config.bucket_url, timeout=config.request_timeout).fetch()
    except PodsiteError as e:
        _fail(e)

    if json_output:
        data = [entry.model_dump() for entry in catalog]
        print(json.dumps({"audio": data, "total": len(catalog)}, indent=2))
        return

    table = Table(title="[bold]Audio Catalog[/bold]")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Number", style="cyan", justify="right")
    table.add_column("File", style="blue")
    for i, entry in enumerate(catalog):
        table.add_row(str(i), str(entry.number), escape(entry.name))

    console.print(table)
    console.print(f"\n[dim]Total: {len(catalog)} file(s)[/dim]")


@app.command("episodes")
def list_episodes(
    root: RootOption = Path("."),
    lookup: Annotated[
        str | None,
        typer.Option("--lookup", help="Match audio by catalog position (index) or by number"),
    ] = None,
    json_output: JsonOption = False,
) -> None:
    """Reconcile the feed with the catalog and list the episodes."""
    try:
        config = _load_config(root, quiet=json_output, catalog_lookup=lookup)
        _, episodes = PipelineOrchestrator(config).load_episodes()
    except PodsiteError as e:
        _fail(e)

    if json_output:
        data = [episode.model_dump(exclude={"content"}) for episode in episodes]
        print(json.dumps({"episodes": data, "total": len(episodes)}, indent=2))
        return

    table = Table(title="[bold]Episodes[/bold]")
    table.add_column("Number", style="cyan", justify="right")
    table.add_column("Date", style="green", width=12)
    table.add_column("Guest", style="yellow")
    table.add_column("Title", max_width=60)
    for episode in episodes:
        table.add_row(
            str(episode.number), episode.date, escape(episode.guest), escape(episode.title)
        )

    console.print(table)
    console.print(f"\n[dim]Total: {len(episodes)} episode(s)[/dim]")


if __name__ == "__main__":
    app()
