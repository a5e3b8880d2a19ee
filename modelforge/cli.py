"""
Command-line interface for modelforge.

Usage:
  modelforge generate schema.json -o out/
  modelforge generate https://example.com/schema.json --dry-run
  modelforge languages
"""

import argparse
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .codegen import get_generator, get_registry, list_supported_languages
from .codegen.core.config import ConfigError, get_config_manager, load_config
from .codegen.core.generator import GeneratorError, generate_code
from .codegen.registry import RegistryError
from .logging_config import get_logger, setup_logging
from .utils import DocumentLoadError, load_document

logger = get_logger(__name__)

console = Console()


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="modelforge",
        description="Generate serde-ready Rust models from JSON Schema documents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  modelforge generate schema.json -o generated/
  modelforge generate asyncapi.yaml -o generated/ --package-name my-models
  modelforge generate schema.json --dry-run
  modelforge languages
        """.strip(),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: MODELFORGE_LOG_LEVEL or WARNING)",
    )
    parser.add_argument("--log-file", help="Also write logs to this file")

    subparsers = parser.add_subparsers(dest="command")

    generate = subparsers.add_parser("generate", help="Generate code from a schema document")
    generate.add_argument("input", help="Schema file (JSON/YAML) or http(s) URL")
    generate.add_argument("--output", "-o", metavar="DIR", help="Output directory")
    generate.add_argument(
        "--language", "-l", default="rust", help="Target language (default: rust)"
    )
    generate.add_argument("--config", metavar="FILE", help="JSON configuration file")
    generate.add_argument("--package-name", metavar="NAME", help="Crate name for Cargo.toml")
    generate.add_argument(
        "--no-initializer", action="store_true", help="Don't render new() initializers"
    )
    generate.add_argument(
        "--no-defaults", action="store_true", help="Don't render Default impls for enums"
    )
    generate.add_argument(
        "--no-support-files",
        action="store_true",
        help="Don't write Cargo.toml and src/lib.rs",
    )
    generate.add_argument(
        "--no-comments", action="store_true", help="Don't render doc comments"
    )
    generate.add_argument(
        "--workers", type=int, metavar="N", help="Render models on N threads"
    )
    generate.add_argument(
        "--dry-run",
        action="store_true",
        help="Print rendered modules instead of writing files",
    )
    generate.set_defaults(func=_handle_generate)

    languages = subparsers.add_parser("languages", help="List supported target languages")
    languages.set_defaults(func=_handle_languages)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point; returns the process exit code."""
    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    if not getattr(args, "func", None):
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1


def _build_overrides(args: argparse.Namespace) -> dict:
    """Collect configuration overrides from command line flags."""
    overrides = {}
    if args.package_name:
        overrides["package_name"] = args.package_name
    if args.no_initializer:
        overrides["render_initializer"] = False
    if args.no_defaults:
        overrides["render_defaults"] = False
    if args.no_support_files:
        overrides["render_supporting_files"] = False
    if args.no_comments:
        overrides["add_comments"] = False
    if args.workers is not None:
        overrides["max_workers"] = args.workers
    return overrides


def _handle_generate(args: argparse.Namespace) -> int:
    if not args.dry_run and not args.output:
        raise CLIError("--output is required unless --dry-run is given")

    try:
        language = get_registry().resolve(args.language)
        config = load_config(language, _build_overrides(args), args.config)
        generator = get_generator(language, config)
    except (ConfigError, RegistryError) as e:
        raise CLIError(str(e)) from e

    for warning in get_config_manager().validate_config(config, language):
        console.print(f"[yellow]⚠️  {warning}[/yellow]")

    try:
        source, document = load_document(args.input)
    except (DocumentLoadError, FileNotFoundError) as e:
        raise CLIError(f"Failed to load input: {e}") from e

    logger.info("Generating %s models from %s", language, source)

    if args.dry_run:
        return _print_models(generator, document, language)
    return _write_models(generator, document, args.output)


def _print_models(generator, document, language: str) -> int:
    result = generate_code(generator, document)
    if not result.success:
        console.print(f"[red]✗ Code generation failed:[/red] {result.error_message}")
        return 1

    for output in result.outputs:
        console.print(
            Panel(
                Syntax(output.result, language, theme="monokai"),
                title=f"📄 {output.file_name}",
                border_style="green",
            )
        )
    _print_warnings(result.warnings)
    return 0


def _write_models(generator, document, output_dir: str) -> int:
    try:
        outputs = generator.generate_to_files(document, output_dir)
    except GeneratorError as e:
        console.print(f"[red]✗[/red] {e}")
        return 1

    table = Table(title="📦 Generated Models", box=box.ROUNDED, title_style="bold cyan")
    table.add_column("Model", style="bold green", no_wrap=True)
    table.add_column("File", style="cyan")
    for output in outputs:
        table.add_row(output.model_name, output.file_name)
    console.print(table)
    console.print(f"[green]✓[/green] Wrote {len(outputs)} models to [cyan]{output_dir}[/cyan]")

    _print_warnings([w for output in outputs for w in output.warnings])
    return 0


def _print_warnings(warnings: List[str]) -> None:
    if not warnings:
        return
    console.print("\n[yellow]⚠️  Warnings:[/yellow]")
    for warning in dict.fromkeys(warnings):
        console.print(f"  [yellow]•[/yellow] {warning}")


def _handle_languages(args: argparse.Namespace) -> int:
    registry = get_registry()
    table = Table(title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan")
    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for language in list_supported_languages():
        info = registry.get_language_info(language)
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(f"🔧 {language}", info["file_extension"], info["class"], aliases)

    console.print(table)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
