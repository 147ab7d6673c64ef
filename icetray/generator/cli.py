"""Command-line interface for IceCube EPICS generation."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from icetray.generator import epics
from icetray.generator.cube import IceCube
from icetray.generator.errors import IceCubeError

logger = logging.getLogger(__name__)


def _load(input_file: str, target_file: str = epics.DEFAULT_TARGET_FILE) -> IceCube:
    with open(input_file, encoding="utf-8") as f:
        text = f.read()

    try:
        return IceCube.from_json(text, target_file=target_file)
    except json.JSONDecodeError as e:
        click.echo(f"Error: {input_file} is not valid JSON: {e}", err=True)
        sys.exit(1)
    except IceCubeError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """IceCube EPICS database and protocol generator."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.option("--input", "-i", "input_file", required=True, help="Input IceCube JSON file")
@click.option("--db", "db_file", default=None, help="Output database file (default <name>.db)")
@click.option(
    "--proto", "proto_file", default=None, help="Output protocol file (default <name>.proto)"
)
@click.option(
    "--target-file",
    default=epics.DEFAULT_TARGET_FILE,
    show_default=True,
    help="File name referenced by the record INP/OUT links",
)
@click.option("--stdout", "to_stdout", is_flag=True, default=False, help="Print instead of writing")
def gen(
    input_file: str, db_file: str | None, proto_file: str | None, target_file: str, to_stdout: bool
) -> None:
    """Generate the EPICS database and protocol files for an IceCube."""
    cube = _load(input_file, target_file)

    if to_stdout:
        click.echo(cube.db_text, nl=False)
        click.echo(cube.proto_text, nl=False)
        return

    input_dir = Path(input_file).parent
    db_path = Path(db_file) if db_file else input_dir / f"{cube.name}.db"
    proto_path = Path(proto_file) if proto_file else input_dir / f"{cube.name}.proto"

    db_path.write_text(cube.db_text, encoding="utf-8")
    proto_path.write_text(cube.proto_text, encoding="utf-8")
    logger.info("Wrote %s and %s", db_path, proto_path)
    click.echo(f"Generated {db_path} and {proto_path}")


@cli.command()
@click.option("--input", "-i", "input_file", required=True, help="Input IceCube JSON file")
@click.option("--json", "output_json", is_flag=True, help="Output the canonical document as JSON")
def info(input_file: str, output_json: bool) -> None:
    """Display the signals of an IceCube and their protocol tags."""
    cube = _load(input_file)

    if output_json:
        click.echo(cube.to_json(indent=2))
    else:
        _output_plain(cube)


def _output_plain(cube: IceCube) -> None:
    """Output IceCube info using rich text formatting."""
    console = Console()

    console.print(f"[bold cyan]IceCube[/bold cyan] {cube.name}")
    summary = Table(show_header=False, box=None, padding=(0, 2, 0, 2))
    summary.add_column("Label", style="dim")
    summary.add_column("Value", style="white")
    summary.add_row("Read signals", str(cube.count_read()))
    summary.add_row("Write signals", str(cube.count_write()))
    summary.add_row("Tags used", f"{cube.count_all()}/{len(epics.TAG_ALPHABET)}")
    console.print(summary)
    console.print()

    console.print("[bold cyan]Signals[/bold cyan]")
    table = Table(show_header=True, box=None, padding=(0, 2, 0, 0))
    table.add_column("Tag", style="green")
    table.add_column("PV", style="white")
    table.add_column("Record", style="dim")
    table.add_column("Function", style="white")
    table.add_column("Scan", style="yellow")

    for signal, tag in cube.tags():
        table.add_row(
            tag,
            signal.pv_name,
            signal.record_type,
            signal.function_name,
            signal.scan_rate or "",
        )

    console.print(table)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
