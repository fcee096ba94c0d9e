"""
Command-line interface for directions generation.

Usage:
  safeargs generate nav_graph.json --application-id com.example.app -o build/gen
  safeargs generate --url https://host/nav_graph.json --dry-run
  safeargs inspect nav_graph.json --application-id com.example.app
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .codegen import (
    GeneratorConfig,
    GeneratorError,
    create_java_generator,
    generate_code,
    load_config,
)
from .codegen.core.config import ConfigError, get_config_manager
from .codegen.core.model import NavigationGraph
from .logging_config import configure_logging, get_logger
from .utils import (
    GraphLoaderError,
    SourceWriteError,
    load_graph,
    parse_graph,
    write_sources,
)

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Initialize rich console
console = Console()


def _add_input_args(parser: argparse.ArgumentParser):
    input_group = parser.add_mutually_exclusive_group(required=False)
    input_group.add_argument("file", nargs="?", help="Navigation graph JSON file")
    input_group.add_argument("--url", help="URL to fetch the graph JSON from")
    input_group.add_argument(
        "--stdin", action="store_true", help="Read the graph JSON from standard input"
    )

    parser.add_argument(
        "--application-id",
        "--app-id",
        metavar="PACKAGE",
        help="Application package used for destinations named '.Name'",
    )
    parser.add_argument("--config", metavar="FILE", help="JSON configuration file")


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its subcommands."""
    parser = argparse.ArgumentParser(
        prog="safeargs",
        description="Generate type-safe navigation directions classes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split("Usage:", 1)[1].rstrip() if __doc__ else None,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command")

    generate = subparsers.add_parser(
        "generate", help="Generate Java directions classes"
    )
    _add_input_args(generate)
    generate.add_argument(
        "--output-dir", "-o", metavar="DIR", help="Directory for generated sources"
    )
    generate.add_argument(
        "--dry-run",
        action="store_true",
        help="Print generated sources instead of writing them",
    )
    generate.add_argument(
        "--no-comments", action="store_true", help="Don't add the generated-file header"
    )
    generate.add_argument(
        "--indent-size", type=int, metavar="N", help="Spaces per indentation level"
    )
    generate.add_argument(
        "--navigation-package",
        metavar="PACKAGE",
        help="Package of NavDirections/NavOptions (default: android.arch.navigation)",
    )
    generate.add_argument(
        "--verbose", action="store_true", help="Show generation result metadata"
    )
    generate.set_defaults(func=_handle_generate)

    inspect = subparsers.add_parser(
        "inspect", help="List the directions classes a graph would produce"
    )
    _add_input_args(inspect)
    inspect.set_defaults(func=_handle_inspect)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the ``safeargs`` command."""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if not getattr(args, "func", None):
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except (
        CLIError,
        ConfigError,
        GraphLoaderError,
        SourceWriteError,
        FileNotFoundError,
    ) as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        logger.debug("Command failed", exc_info=True)
        return 1


def _load_input(args: argparse.Namespace, application_id: str = "") -> NavigationGraph:
    """Load the navigation graph from file, URL or stdin."""
    if args.file or args.url:
        source, graph = load_graph(
            file_path=args.file, url=args.url, application_id=application_id
        )
        console.print(f"📄 Loaded: {source}")
        return graph

    if args.stdin:
        try:
            data = json.load(sys.stdin)
        except json.JSONDecodeError as e:
            raise CLIError(f"Invalid JSON input: {e}")
        return parse_graph(data, "<stdin>", application_id)

    raise CLIError("Input source required (file, --url, or --stdin)")


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from the config file and CLI overrides."""
    overrides = {}

    if args.application_id:
        overrides["application_id"] = args.application_id

    if getattr(args, "output_dir", None):
        overrides["output_dir"] = args.output_dir

    if getattr(args, "no_comments", False):
        overrides["add_comments"] = False

    if getattr(args, "indent_size", None):
        overrides["indent_size"] = args.indent_size

    if getattr(args, "navigation_package", None):
        overrides["navigation_package"] = args.navigation_package

    config = load_config(custom_config=overrides, config_file=args.config)

    for warning in get_config_manager().validate_config(config):
        logger.warning(warning)

    return config


def _handle_generate(args: argparse.Namespace) -> int:
    """Generate sources and write or print them."""
    config = _build_config(args)
    graph = _load_input(args, config.application_id)

    if not args.dry_run and not config.output_dir:
        raise CLIError("--output-dir is required unless --dry-run is given")

    generator = create_java_generator(config=config)

    with console.status("[green]Generating directions...", spinner="dots"):
        result = generate_code(generator, graph)

    if not result.success:
        console.print(f"[red]✗ Code generation failed:[/red] {result.error_message}")
        return 1

    if args.dry_run:
        for path, source in result.files.items():
            console.print(Panel(Syntax(source, "java", theme="monokai"), title=path))
    else:
        written = write_sources(result.files, config.output_dir)
        console.print(
            f"[green]✓[/green] Generated {len(written)} file(s) in "
            f"[cyan]{Path(config.output_dir)}[/cyan]"
        )

    if args.verbose and result.metadata:
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

    if result.warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]•[/yellow] {warning}")

    return 0


def _handle_inspect(args: argparse.Namespace) -> int:
    """Show the classes, actions and factory signatures a graph produces."""
    config = _build_config(args)
    graph = _load_input(args, config.application_id)
    generator = create_java_generator(config=config)

    try:
        files = generator.build_files(graph)
    except GeneratorError as e:
        console.print(f"[red]✗ {e}[/red]")
        return 1

    if not files:
        console.print("[yellow]No destination declares actions.[/yellow]")
        return 0

    table = Table(title="🧭 Directions Classes", box=box.ROUNDED, title_style="bold cyan")
    table.add_column("Class", style="bold green", no_wrap=True)
    table.add_column("Factory", style="cyan")
    table.add_column("Destination Id", style="blue")

    for generated in files:
        for factory, nested in zip(generated.type_spec.methods, generated.type_spec.types):
            params = ", ".join(
                f"{p.type} {p.name}" for p in factory.parameters
            )
            destination_id = nested.method("getDestinationId").body()[0]
            table.add_row(
                generated.qualified_name,
                f"{factory.name}({params})",
                destination_id.replace("return ", "", 1),
            )

    console.print(table)
    return 0


if __name__ == "__main__":
    sys.exit(main())
