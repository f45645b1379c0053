"""
Command-line interface.

    processor-codegen generate config.json --output-root src/main/java
    processor-codegen generate --url https://example.com/onvopay.json --json
    processor-codegen contract
"""

import argparse
import json
import logging
import sys

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .codegen import GenerationCoordinator, GenerationResult, load_config
from .codegen.core.config import ConfigError, get_config_manager
from .codegen.core.contract import load_contract
from .codegen.core.generator import ContractNotFoundError
from .logging_config import get_logger, setup_logging
from .utils import JSONLoaderError, load_document

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Initialize rich console
console = Console()


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="processor-codegen",
        description="Generate Java integration sources from payment processor configs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  processor-codegen generate onvopay.json
  processor-codegen generate - --output-root src/main/java < onvopay.json
  processor-codegen generate --url https://example.com/onvopay.json --json
  processor-codegen contract --contract payment_processor.json
        """.strip(),
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command")

    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate the processor package",
        description="Generate the orchestration class and DTOs for a processor document",
    )

    # Input options (mutually exclusive)
    input_group = generate_parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument(
        "file", nargs="?", help="Processor JSON document ('-' reads standard input)"
    )
    input_group.add_argument("--url", help="URL to fetch the document from")

    generate_parser.add_argument(
        "--output-root", "-o", help="Root directory for generated packages"
    )
    generate_parser.add_argument(
        "--base-package", help="Package prefix, e.g. com.example.processors"
    )
    generate_parser.add_argument("--config", help="Configuration file path (JSON)")
    generate_parser.add_argument(
        "--contract", help="Capability contract definition file (JSON)"
    )
    generate_parser.add_argument(
        "--no-comments",
        action="store_true",
        help="Don't add usage comments to generated DTOs",
    )
    generate_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result envelope as JSON",
    )
    generate_parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    generate_parser.set_defaults(func=handle_generate)

    contract_parser = subparsers.add_parser(
        "contract",
        help="Show the capability contract",
        description="List the operations generated orchestration classes implement",
    )
    contract_parser.add_argument(
        "--contract", help="Capability contract definition file (JSON)"
    )
    contract_parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    contract_parser.set_defaults(func=handle_contract)

    return parser


def _build_config(args: argparse.Namespace):
    """Build configuration from CLI arguments."""
    overrides = {
        "output_root": args.output_root,
        "base_package": args.base_package,
        "contract_file": args.contract,
    }
    if args.no_comments:
        overrides["add_comments"] = False

    try:
        config = load_config(custom_config=overrides, config_file=args.config)
    except (ConfigError, TypeError) as e:
        raise CLIError(f"Configuration error: {e}") from e

    for warning in get_config_manager().validate_config(config):
        logger.warning("Configuration: %s", warning)
    return config


def handle_generate(args: argparse.Namespace) -> int:
    """Handle the generate command."""
    try:
        config = _build_config(args)
        source, text = load_document(file_path=args.file, url=args.url)
    except (CLIError, JSONLoaderError, FileNotFoundError) as e:
        if args.json:
            print(json.dumps({"success": False, "message": str(e), "error": type(e).__name__}))
        else:
            console.print(f"[red]✗ Error:[/red] {e}")
        return 1

    logger.info("Generating from %s", source)
    result = GenerationCoordinator(config).generate(text)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        _print_result(result, source)

    return 0 if result.success else 1


def _print_result(result: GenerationResult, source: str):
    if not result.success:
        console.print(f"[red]✗ Generation failed ({result.error}):[/red] {result.message}")
        return

    console.print(
        Panel(
            f"[bold]Source:[/bold] {source}\n"
            f"[bold]Package:[/bold] {result.package_name}\n"
            f"[bold]Main class:[/bold] {result.main_class}\n"
            f"[bold]Location:[/bold] {result.package_path}",
            title="✓ Package generated",
            border_style="green",
        )
    )

    table = Table(title="📄 Generated Files", box=box.SIMPLE, header_style="bold cyan")
    table.add_column("File", style="cyan")
    for path in result.generated_files:
        table.add_row(path)
    console.print(table)

    if result.warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]•[/yellow] {warning}")


def handle_contract(args: argparse.Namespace) -> int:
    """Handle the contract command."""
    try:
        contract = load_contract(args.contract)
    except ContractNotFoundError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1

    table = Table(
        title=f"📋 {contract.name}", box=box.ROUNDED, title_style="bold cyan"
    )
    table.add_column("Operation", style="bold green", no_wrap=True)
    table.add_column("Returns", style="cyan")
    table.add_column("Parameters", style="dim")

    for operation in contract.operations:
        parameters = ", ".join(f"{p.type} {p.name}" for p in operation.parameters)
        table.add_row(operation.name, operation.return_type_name, parameters or "-")

    console.print(table)
    if contract.import_path:
        console.print(f"[dim]import {contract.import_path};[/dim]")
    return 0


def main(argv=None) -> int:
    """Entry point; returns the process exit code."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not getattr(args, "func", None):
        parser.print_help()
        return 1

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
