"""
loxpy CLI application.

Commands:
  run     Run a script file, or start the REPL when no script is given
  tokens  Show the scanner's token stream
  ast     Show the parsed expression tree
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table
from rich.text import Text

from loxpy.cli.repl import run_prompt
from loxpy.cli.utils import (
    configure_logging,
    console,
    print_diagnostics,
    print_error,
    print_value,
    read_source,
    set_color,
    version_callback,
)
from loxpy.core.errors import ErrorReporter, ExitCode
from loxpy.core.expression_lang.parser import Parser
from loxpy.core.expression_lang.printer import print_ast
from loxpy.core.expression_lang.scanner import Scanner
from loxpy.core.pipeline import run_source
from loxpy.core.settings import LoxSettings, load_settings, normalize_log_level

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="loxpy - scanner, parser and evaluator for Lox expressions.",
    no_args_is_help=True,
)

# Populated by the callback; commands read the resolved settings from here.
_settings = LoxSettings()


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and environment information",
        ),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", "-l", help="Logging level (default from lox.toml / LOX_LOG_LEVEL)"),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to lox.toml"),
    ] = None,
) -> None:
    """loxpy CLI main callback for global options."""
    global _settings
    try:
        _settings = load_settings(config)
        if log_level is not None:
            _settings.log_level = normalize_log_level(log_level)
    except ValueError as e:
        print_error(f"Error: {e}")
        raise typer.Exit(code=ExitCode.USAGE)

    configure_logging(_settings.log_level_value)
    set_color(_settings.color)


@app.command("run")
def run(
    scripts: Annotated[
        list[Path] | None,
        typer.Argument(help="Script to run. Omit to start the interactive prompt."),
    ] = None,
) -> None:
    """Run a Lox script, or start the REPL when no script is given."""
    if scripts and len(scripts) > 1:
        print_error("Usage: loxpy run [script]")
        raise typer.Exit(code=ExitCode.USAGE)

    if not scripts:
        run_prompt(_settings.prompt)
        return

    source = read_source(scripts[0], None)
    logger.debug("Running %s (%d chars)", scripts[0], len(source))

    result = run_source(source)
    if not result.ok:
        print_diagnostics(result.diagnostics)
        raise typer.Exit(code=result.exit_code)
    print_value(result.render())


@app.command("tokens")
def tokens(
    script: Annotated[Path | None, typer.Argument(help="Script to scan")] = None,
    expr: Annotated[str | None, typer.Option("--expr", "-e", help="Source text to scan")] = None,
) -> None:
    """Show the token stream for a script or an inline expression."""
    source = read_source(script, expr)
    reporter = ErrorReporter()
    token_list = Scanner(source, reporter).scan_tokens()

    table = Table(title="Tokens")
    table.add_column("Line", justify="right", style="dim")
    table.add_column("Kind")
    table.add_column("Lexeme")
    table.add_column("Literal")
    for tok in token_list:
        table.add_row(
            str(tok.line),
            tok.kind.name,
            Text(tok.lexeme),
            Text("" if tok.literal is None else str(tok.literal)),
        )
    console.print(table)

    if reporter.had_error:
        print_diagnostics(reporter.diagnostics)
        raise typer.Exit(code=reporter.exit_code or ExitCode.DATAERR)


@app.command("ast")
def ast(
    script: Annotated[Path | None, typer.Argument(help="Script to parse")] = None,
    expr: Annotated[str | None, typer.Option("--expr", "-e", help="Source text to parse")] = None,
) -> None:
    """Show the parsed expression tree in parenthesized prefix form."""
    source = read_source(script, expr)
    reporter = ErrorReporter()
    token_list = Scanner(source, reporter).scan_tokens()
    tree = None if reporter.had_error else Parser(token_list, reporter).parse()

    if tree is None:
        print_diagnostics(reporter.diagnostics)
        raise typer.Exit(code=reporter.exit_code or ExitCode.DATAERR)
    print_value(print_ast(tree))


def main() -> None:
    app()
