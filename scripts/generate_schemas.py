#!/usr/bin/env python3
"""
CLI script to write the JSON Schemas of the iLEAP record types.

Usage:
    # Write into ./schemas
    python scripts/generate_schemas.py

    # Use a different output directory
    python scripts/generate_schemas.py --output-dir path/to/schemas

    # Using uv
    uv run python scripts/generate_schemas.py
"""

import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path so we can import ileap modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from ileap.services.schema_gen.schema_generator import SCHEMA_TYPES, write_schemas
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

console = Console()


def print_header(text: str, style: str = "bold cyan"):
    """Print a formatted header using Rich Panel."""
    console.print(
        Panel(
            Text(text, justify="center", style=style),
            border_style="cyan",
            padding=(1, 2),
        )
    )


def print_written(paths: list[Path]):
    """Print the written schema files using Rich Table."""
    table = Table(show_header=True, box=None, padding=(0, 2))
    table.add_column("Schema", style="bold cyan")
    table.add_column("Size", justify="right", style="bold green")

    for path in paths:
        table.add_row(str(path), f"{path.stat().st_size} B")

    console.print(table)
    console.print()


def main():
    """Main entry point for the schema generation script."""
    parser = argparse.ArgumentParser(
        description="Write JSON Schemas for the iLEAP data model"
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default="schemas",
        help="Directory the schema files are written to (default: schemas)",
    )

    args = parser.parse_args()

    print_header("SCHEMA GENERATION", "bold cyan")
    console.print(f"Types: [green]{', '.join(SCHEMA_TYPES)}[/green]")
    console.print()

    try:
        paths = write_schemas(args.output_dir)
        print_written(paths)
        console.print(
            Panel(
                Text(f"{len(paths)} schemas written", justify="center"),
                border_style="bold green",
                style="bold green",
            )
        )

    except Exception as e:
        logger.error(f"Schema generation failed: {e}", exc_info=True)
        console.print()
        console.print(
            Panel(
                f"[bold red]SCHEMA GENERATION FAILED[/bold red]\n\n[red]{e!s}[/red]",
                border_style="bold red",
            )
        )
        console.print()
        sys.exit(1)


if __name__ == "__main__":
    main()
