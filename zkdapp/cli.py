"""
Command-line interface for zkWasm application projects.

Provides commands for checking deployment readiness, validating project
structure and verifying the local toolchain.
"""

import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .config import ConfigError, ConfigLoader
from .deploy import DOCS_URL, FAILURE_HINT, NEXT_STEPS, CheckReport, ReadinessChecker
from .hub import DEFAULT_ENDPOINT, DEFAULT_TIMEOUT, HubClient
from .preflight import ProjectChecker, ValidationResult

console = Console()


def _configure_logging(debug: bool) -> None:
    """Route diagnostic logging through rich."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


# ============================================================
# Main CLI Group
# ============================================================

@click.group()
@click.version_option(version=__version__, prog_name="zkdapp")
@click.option("--debug", is_flag=True, envvar="ZKDAPP_DEBUG", help="Enable debug logging")
@click.pass_context
def cli(ctx, debug: bool):
    """
    zkWasm Application CLI

    Check deployment readiness, validate project structure and
    verify the zkWasm development toolchain.
    """
    ctx.ensure_object(dict)
    _configure_logging(debug)


# ============================================================
# CHECK Command
# ============================================================

@cli.command()
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.option(
    "--project",
    "-p",
    type=click.Path(file_okay=False),
    default=".",
    help="Project directory",
)
@click.option(
    "--endpoint",
    type=str,
    envvar="ZKWASM_HUB_ENDPOINT",
    default=DEFAULT_ENDPOINT,
    show_default=True,
    help="zkWasm hub endpoint (or set ZKWASM_HUB_ENDPOINT)",
)
@click.option(
    "--timeout",
    type=float,
    envvar="ZKWASM_HUB_TIMEOUT",
    default=DEFAULT_TIMEOUT,
    show_default=True,
    help="Hub request timeout in seconds (or set ZKWASM_HUB_TIMEOUT)",
)
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
def check(verbose: bool, project: str, endpoint: str, timeout: float, as_json: bool):
    """Check deployment readiness."""
    try:
        loader = ConfigLoader(project).load()
    except ConfigError as e:
        if as_json:
            report = CheckReport(errors=[f"Error during check: {e}"])
            click.echo(json.dumps(report.to_dict(), indent=2))
        else:
            console.print(f"[red]✗ Error during check: {escape(str(e))}[/red]")
        sys.exit(1)

    checker = ReadinessChecker(
        output_dir=loader.resolve_output_dir(),
        project_root=loader.project_root,
        client=HubClient(endpoint=endpoint, timeout=timeout),
    )

    if as_json:
        report = checker.run_all()
        click.echo(json.dumps(report.to_dict(), indent=2))
        sys.exit(0 if report.success else 1)

    console.print("\n[bold blue]Starting deployment readiness check...[/bold blue]\n")
    report = checker.run_all()
    _print_report(report, verbose)

    if not report.success:
        sys.exit(1)


def _print_report(report: CheckReport, verbose: bool) -> None:
    """Display a readiness report."""
    if verbose and report.details:
        for line in report.details:
            console.print(f"  [dim]•[/dim] {escape(line)}")

    console.print("\n[bold blue]Deployment Check Summary:[/bold blue]")
    console.print(f"[green]✓ Checks passed:[/green] {report.passed_count}")

    if report.warnings:
        console.print(f"[yellow]⚠ Warnings:[/yellow] {len(report.warnings)}")
        if verbose:
            for warning in report.warnings:
                console.print(f"[yellow]   - {escape(warning)}[/yellow]")

    if report.errors:
        console.print(f"[red]✗ Errors:[/red] {len(report.errors)}")
        for error in report.errors:
            console.print(f"[red]   - {escape(error)}[/red]")

    console.print()
    if report.success:
        steps = "\n".join(f"{i}. {step}" for i, step in enumerate(NEXT_STEPS, 1))
        console.print(Panel.fit(
            f"[green]All deployment checks passed![/green]\n\n"
            f"[bold]For automated deployment via GitHub CI/CD:[/bold]\n"
            f"[cyan]{steps}[/cyan]\n\n"
            f"[dim]For more details, see: {DOCS_URL}[/dim]",
            title="Ready for deployment",
        ))
    else:
        console.print("[red]✗ Deployment readiness check failed![/red]")
        console.print(f"\n[yellow]{FAILURE_HINT}[/yellow]")


# ============================================================
# VALIDATE Command
# ============================================================

@cli.command()
@click.option(
    "--project",
    "-p",
    type=click.Path(exists=True, file_okay=False),
    default=".",
    help="Project directory",
)
@click.option("--verbose", "-v", is_flag=True, help="Show detailed output")
@click.option("--skip-typecheck", is_flag=True, help="Skip the npx tsc --noEmit check")
def validate(project: str, verbose: bool, skip_typecheck: bool):
    """Validate current project structure."""
    console.print(f"\n[bold blue]Validating project structure: {escape(project)}[/bold blue]\n")

    result = ProjectChecker(Path(project), typecheck=not skip_typecheck).run_all()
    _print_results(result, verbose)

    console.print()
    if result.passed:
        console.print(f"[green]{result.summary()}[/green]")
        console.print("\n[bold]Project structure is valid![/bold]")
    else:
        console.print(f"[red]{result.summary()}[/red]")
        console.print("\n[bold]Please fix the errors above.[/bold]")
        sys.exit(1)


# ============================================================
# DOCTOR Command
# ============================================================

@cli.command()
@click.option("--verbose", "-v", is_flag=True, help="Show installation hints")
def doctor(verbose: bool):
    """Check the zkWasm development toolchain."""
    console.print("\n[bold blue]Checking development environment...[/bold blue]\n")

    result = ProjectChecker().run_toolchain()
    _print_results(result, verbose, title="Toolchain")

    console.print()
    if result.passed:
        console.print("[green]Environment is configured[/green]")
        return

    console.print(f"[red]Missing tools: {', '.join(c.name for c in result.errors)}[/red]")
    if not verbose:
        console.print("[dim]Run with --verbose for installation instructions[/dim]")
    sys.exit(1)


def _print_results(result: ValidationResult, verbose: bool, title: str = None) -> None:
    """Display check results as a table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Check")
    table.add_column("Status")
    table.add_column("Details")

    styles = {"PASS": "green", "FAIL": "red", "WARN": "yellow"}

    for item in result.checks:
        style = styles[item.status]
        details = escape(item.message)
        if verbose and item.details:
            details += escape(f" ({'; '.join(item.details)})")
        table.add_row(escape(item.name), f"[{style}]{item.status}[/{style}]", details)

    console.print(table)


# ============================================================
# Entry Point
# ============================================================

if __name__ == "__main__":
    cli()
