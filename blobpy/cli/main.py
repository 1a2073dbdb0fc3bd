"""blobpy CLI - Main commands."""
import asyncio
from pathlib import Path
from typing import List, Optional

import aiohttp
import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TaskProgressColumn
from rich.table import Table

from blobpy.core.api import DEFAULT_ENDPOINT

app = typer.Typer(
    name="blobpy",
    help="Add files to a content-addressed storage service",
    add_completion=False
)
console = Console()


def run_async(coro):
    """Run async function."""
    return asyncio.run(coro)


@app.callback()
def callback():
    """Add files to a content-addressed storage service."""


@app.command()
def put(
    files: List[Path] = typer.Argument(..., help="Local files to add", exists=True, dir_okay=False),
    endpoint: str = typer.Option(DEFAULT_ENDPOINT, "--endpoint", "-e", envvar="BLOBPY_API", help="Service API URL"),
    pin: Optional[bool] = typer.Option(None, "--pin/--no-pin", help="Pin added content"),
    cid_version: Optional[int] = typer.Option(None, "--cid-version", min=0, max=1, help="CID version (0 or 1)"),
    only_hash: bool = typer.Option(False, "--only-hash", help="Only compute identifiers, store nothing"),
    wrap: bool = typer.Option(False, "--wrap", "-w", help="Wrap files in a directory"),
    raw_leaves: bool = typer.Option(False, "--raw-leaves", help="Use raw blocks for leaf nodes"),
    trickle: bool = typer.Option(False, "--trickle", help="Use trickle-dag layout"),
    chunker: Optional[str] = typer.Option(None, "--chunker", help="Chunking algorithm"),
    hash_alg: Optional[str] = typer.Option(None, "--hash", help="Hash function"),
    timeout: Optional[float] = typer.Option(None, "--timeout", help="Request timeout in seconds"),
):
    """Add files and print their identifiers."""
    from blobpy import BlobClient, UploadOptions, UploadProgress, BlobException
    
    async def do_put():
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            console=console
        ) as progress:
            task = progress.add_task(f"Adding {len(files)} file(s)", total=100)
            
            def on_progress(p: UploadProgress):
                progress.update(task, completed=p.percentage)
            
            options = UploadOptions(
                chunker=chunker,
                cid_version=cid_version,
                hash_alg=hash_alg,
                only_hash=True if only_hash else None,
                pin=pin,
                raw_leaves=True if raw_leaves else None,
                trickle=True if trickle else None,
                wrap_with_directory=True if wrap else None,
                timeout=timeout,
                progress=on_progress,
            )
            
            async with BlobClient(endpoint) as client:
                try:
                    added = await client.put_paths(files, options)
                except (BlobException, aiohttp.ClientError, asyncio.TimeoutError) as e:
                    console.print(f"[red]Add failed: {e}[/red]")
                    raise typer.Exit(1)
        
        table = Table(title="Added")
        table.add_column("CID", style="cyan")
        table.add_column("Path")
        table.add_column("Size", justify="right")
        for entry in added:
            table.add_row(str(entry.cid), entry.path, f"{entry.size:,}")
        console.print(table)
    
    run_async(do_put())


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
