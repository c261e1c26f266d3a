"""
The ``typeshape codegen`` command.

Reads a Type IR document from a file, a URL or stdin, renders it with the
chosen backend and writes the result to a file or stdout. Diagnostics go
to stderr through rich so piped output carries nothing but code.
"""

import argparse
import json
import sys
from pathlib import Path

import requests
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from typeshape.logging_config import get_logger
from . import (
    ConfigError,
    GenerationResult,
    GeneratorConfig,
    IRError,
    RegistryError,
    generate_code,
    get_registry,
    load_config,
    load_declarations,
)

logger = get_logger(__name__)

console = Console(stderr=True)


class CLIError(Exception):
    """A failure reported to the user as a one-line message."""

    pass


def create_codegen_subparser(subparsers) -> argparse.ArgumentParser:
    """Add the ``codegen`` command to the main parser."""
    parser = subparsers.add_parser(
        "codegen",
        help="Render a Type IR document into source code",
        description="Render resolved type declarations into source code",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  typeshape codegen types.json\n"
            "  typeshape codegen -l rs -o types.rs --stdin < types.json\n"
            "  typeshape codegen --language-info rust"
        ),
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument("file", nargs="?", help="Type IR JSON file")
    source.add_argument("--url", help="Fetch the Type IR over HTTP")
    source.add_argument("--stdin", action="store_true", help="Read the Type IR from stdin")

    parser.add_argument(
        "--language", "-l", default="rust", help="Target language or alias (default: rust)"
    )
    parser.add_argument("--output", "-o", help="Write code here instead of stdout")
    parser.add_argument("--config", help="JSON settings file")
    parser.add_argument(
        "--no-comments", action="store_true", help="Leave out documentation comments"
    )
    parser.add_argument("--header", help="Comment placed at the top of the file")
    parser.add_argument(
        "--show-metadata", action="store_true", help="Print generation statistics"
    )

    info = parser.add_argument_group("information")
    info.add_argument(
        "--list-languages", action="store_true", help="List backends and exit"
    )
    info.add_argument(
        "--language-info", metavar="LANGUAGE", help="Describe one backend and exit"
    )

    parser.set_defaults(func=handle_codegen_command)
    return parser


def handle_codegen_command(args: argparse.Namespace) -> int:
    """Run ``codegen``; returns the process exit code."""
    try:
        if args.list_languages:
            _print_languages()
        elif args.language_info:
            _print_language_info(args.language_info)
        else:
            _generate(args)
    except CLIError as e:
        logger.error("%s", e)
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1
    return 0


def _generate(args: argparse.Namespace):
    if not (args.file or args.url or args.stdin):
        raise CLIError("No input given: pass a file, --url or --stdin")

    config = _settings(args)
    try:
        generator = get_registry().create(args.language, config)
    except (RegistryError, ConfigError) as e:
        raise CLIError(str(e)) from e

    try:
        declarations = load_declarations(_read_document(args))
    except IRError as e:
        raise CLIError(f"Invalid Type IR: {e}") from e

    result = generate_code(generator, declarations)
    if not result.success:
        raise CLIError(result.error_message)

    _emit(result, config, generator.language_name)
    _report(result, args.show_metadata)


def _settings(args: argparse.Namespace) -> GeneratorConfig:
    """Settings file first, then the flags given on the command line."""
    overrides = {}
    if args.no_comments:
        overrides["add_comments"] = False
    if args.header:
        overrides["header"] = args.header
    if args.output:
        overrides["output_file"] = args.output

    try:
        return load_config(custom_config=overrides, config_file=args.config)
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e


def _read_document(args: argparse.Namespace):
    if args.url:
        return _fetch_document(args.url)

    source = "stdin" if args.stdin else args.file
    logger.debug("Reading Type IR from %s", source)
    try:
        if args.stdin:
            return json.load(sys.stdin)
        with open(args.file, encoding="utf-8") as handle:
            return json.load(handle)
    except json.JSONDecodeError as e:
        raise CLIError(f"{source} is not valid JSON: {e}") from e
    except OSError as e:
        raise CLIError(f"Cannot read {source}: {e}") from e


def _fetch_document(url: str, timeout: int = 30):
    logger.debug("Fetching Type IR from %s", url)
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        return response.json()
    except requests.exceptions.JSONDecodeError as e:
        raise CLIError(f"{url} did not return JSON: {e}") from e
    except requests.exceptions.RequestException as e:
        raise CLIError(f"Cannot fetch {url}: {e}") from e


def _emit(result: GenerationResult, config: GeneratorConfig, language: str):
    if config.output_file:
        path = Path(config.output_file)
        try:
            path.write_text(result.code, encoding="utf-8")
        except OSError as e:
            raise CLIError(f"Cannot write {path}: {e}") from e
        console.print(f"[green]✓[/green] Wrote {language} code to [cyan]{path}[/cyan]")
    elif sys.stdout.isatty():
        Console().print(Syntax(result.code, language, theme="monokai"))
    else:
        sys.stdout.write(result.code)


def _report(result: GenerationResult, show_metadata: bool):
    if show_metadata:
        table = Table(title="Generation", box=box.SIMPLE, header_style="bold cyan")
        table.add_column("Property", style="bold")
        table.add_column("Value", style="green")
        for key, value in result.metadata.items():
            table.add_row(key.replace("_", " "), str(value))
        console.print(table)

    for warning in result.warnings:
        console.print(f"[yellow]⚠[/yellow] {warning}")


def _print_languages():
    registry = get_registry()
    table = Table(title="Supported languages", box=box.ROUNDED, title_style="bold cyan")
    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Aliases", style="blue")

    for language in registry.languages():
        info = registry.describe(language)
        table.add_row(language, info["file_extension"], ", ".join(info["aliases"]) or "-")

    console.print(table)


def _print_language_info(name: str):
    try:
        info = get_registry().describe(name)
    except RegistryError as e:
        raise CLIError(str(e)) from e

    config = info["config"]
    lines = [
        f"[bold]Generator:[/bold] {info['module']}.{info['class']}",
        f"[bold]File extension:[/bold] {info['file_extension']}",
        f"[bold]Aliases:[/bold] {', '.join(info['aliases']) or '-'}",
        f"[bold]Indent size:[/bold] {config.indent_size}",
        f"[bold]Comments:[/bold] {'on' if config.add_comments else 'off'}",
    ]
    console.print(Panel("\n".join(lines), title=info["name"], border_style="green"))
