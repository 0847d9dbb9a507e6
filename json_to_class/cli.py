"""
Command-line interface for generating classes from JSON.

Generated code goes to stdout or the output file; diagnostics go to stderr.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .codegen import (
    ConfigError,
    GenerationResult,
    RegistryError,
    __version__,
    generate_from_json,
    list_all_language_info,
)
from .codegen.core.naming import NamingRule
from .logging_config import get_logger, setup_logging
from .utils import JSONLoaderError, load_json_from_file, load_json_from_text

logger = get_logger(__name__)

# Initialize rich console
console = Console(stderr=True)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="json-to-class",
        description="Generate serializable data classes from a JSON document",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  json-to-class -i data.json -n ApiResponse
  json-to-class -i data.json -r snake -o api_response.dart
  json-to-class -i - < data.json
  json-to-class --list-languages
        """.strip(),
    )

    parser.add_argument(
        "-i",
        "--input",
        metavar="PATH",
        help="JSON file to read ('-' for standard input)",
    )
    parser.add_argument(
        "-n",
        "--name",
        metavar="NAME",
        help="Name of the root class (default: Untitled)",
    )
    parser.add_argument(
        "-r",
        "--naming-rule",
        choices=[rule.value for rule in NamingRule],
        help="How the generated serializer maps field names to JSON keys "
        "(default: none)",
    )
    parser.add_argument(
        "-l",
        "--language",
        default="dart",
        help="Target language for code generation (default: dart)",
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        help="Output file for generated code (default: stdout)",
    )
    parser.add_argument(
        "--config", metavar="FILE", help="JSON configuration file for code generation"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging and show generation metadata",
    )
    parser.add_argument(
        "--list-languages",
        action="store_true",
        help="List supported target languages and exit",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    return parser


def _list_languages() -> int:
    """List supported languages with details."""
    table = Table(
        title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan"
    )

    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for lang_name, info in sorted(list_all_language_info().items()):
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(f"🔧 {lang_name}", info["file_extension"], info["class"], aliases)

    console.print(table)
    console.print(
        Panel(
            "[bold]Usage:[/bold] json-to-class -i [dim]input.json[/dim] "
            "-l [cyan]LANGUAGE[/cyan]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )
    return 0


def _load_input(path: str) -> Any:
    """Load the JSON document from a file or standard input."""
    if path == "-":
        return load_json_from_text(sys.stdin.read(), "<stdin>")[1]
    return load_json_from_file(path)[1]


def _write_output(result: GenerationResult, output: Optional[str]) -> int:
    if not output:
        sys.stdout.write(result.code)
        return 0

    output_path = Path(output)
    try:
        output_path.write_text(result.code, encoding="utf-8")
    except OSError as e:
        console.print(f"[red]✗ Failed to write to {output_path}:[/red] {e}")
        return 1

    console.print(f"[green]✓[/green] Generated code saved to [cyan]{output_path}[/cyan]")
    return 0


def _print_metadata(result: GenerationResult) -> None:
    metadata_table = Table(
        title="📊 Generation Metadata",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )

    metadata_table.add_column("Property", style="bold")
    metadata_table.add_column("Value", style="green")

    for key, value in result.metadata.items():
        metadata_table.add_row(key.replace("_", " ").title(), str(value))

    console.print(metadata_table)


def _print_warnings(warnings: List[str]) -> None:
    console.print("[yellow]⚠️  Warnings:[/yellow]")
    for warning in warnings:
        console.print(f"  [yellow]•[/yellow] {warning}")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command-line interface.

    Args:
        argv: Arguments to parse, defaults to ``sys.argv[1:]``

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    args = create_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    if args.list_languages:
        return _list_languages()

    if not args.input:
        console.print("[red]✗[/red] No input given, use -i/--input PATH")
        return 1

    try:
        data = _load_input(args.input)
    except (FileNotFoundError, JSONLoaderError) as e:
        console.print(f"[red]✗ Failed to load input:[/red] {e}")
        return 1

    try:
        result = generate_from_json(
            data,
            language=args.language,
            config=args.config,
            root_name=args.name,
            naming_rule=args.naming_rule,
        )
    except (ConfigError, RegistryError) as e:
        console.print(f"[red]✗ Configuration error:[/red] {e}")
        return 1

    if not result.success:
        console.print(f"[red]✗ Code generation failed:[/red] {result.error_message}")
        return 1

    logger.info("Generated %s classes", result.metadata.get("class_count"))

    exit_code = _write_output(result, args.output)

    if args.verbose and result.metadata:
        _print_metadata(result)

    if result.warnings:
        _print_warnings(result.warnings)

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
