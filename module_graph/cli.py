"""Click CLI with analyze, dependents, and serve subcommands."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from module_graph import __version__
from module_graph.formatter import pretty_circular, pretty_tree, pretty_warning
from module_graph.models import normalize_options
from module_graph.report import analyze as run_analysis
from module_graph.report import load_imports
from module_graph.resolver import ResolutionError

_IMPORTS_ARG = click.Path(exists=True, dir_okay=False, path_type=Path)


def _parse_exit_code(value: str | None) -> dict[str, int]:
    codes: dict[str, int] = {}
    if not value:
        return codes
    for part in value.split(","):
        label, _, code = part.partition(":")
        if label.strip() != "circular" or not code.strip().isdigit():
            raise click.BadParameter(f"expected circular:<code>, got {part!r}", param_hint="--exit-code")
        codes["circular"] = int(code)
    return codes


def _load(imports_file: Path) -> dict[str, list[str]]:
    try:
        return load_imports(imports_file)
    except ValueError as e:
        raise click.ClickException(str(e))


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Log resolution details")
def cli(verbose: bool):
    """module-graph: Resolve imports, find cycles and lost modules."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("imports_file", type=_IMPORTS_ARG)
@click.argument("entries", nargs=-1)
@click.option("--context", type=click.Path(exists=True, file_okay=False), default=".", help="Project root")
@click.option("--extensions", "-e", help="Comma separated suffixes to try, in order")
@click.option("--include", help="Regex of files to traverse")
@click.option("--exclude", help="Regex of paths not to traverse")
@click.option("--transform", "-T", is_flag=True, help="Print paths relative to the context")
@click.option("--tree/--no-tree", default=True, help="Print the dependency tree")
@click.option("--circular/--no-circular", default=True, help="Print circular imports")
@click.option("--warning/--no-warning", default=True, help="Print warnings")
@click.option("-o", "--output", type=click.Path(dir_okay=False, path_type=Path), help="Write the report as JSON")
@click.option("--exit-code", help="Exit status on findings, e.g. circular:1")
@click.option("--strict", is_flag=True, help="Fail on filesystem errors instead of skipping")
def analyze(
    imports_file: Path,
    entries: tuple[str, ...],
    context: str,
    extensions: str | None,
    include: str | None,
    exclude: str | None,
    transform: bool,
    tree: bool,
    circular: bool,
    warning: bool,
    output: Path | None,
    exit_code: str | None,
    strict: bool,
):
    """Analyze the dependency graph described by IMPORTS_FILE."""
    codes = _parse_exit_code(exit_code)
    imports = _load(imports_file)
    options = normalize_options(
        context=context,
        extensions=extensions.split(",") if extensions is not None else None,
        include=include,
        exclude=exclude,
        strict=strict,
    )

    try:
        report = run_analysis(entries or list(imports), imports, options, transform=transform)
    except ResolutionError as e:
        raise click.ClickException(str(e))

    if output:
        output.write_text(json.dumps(report.to_dict(), indent=2) + "\n", encoding="utf-8")
        click.echo(f"Report written to {output}")

    if tree:
        click.echo(click.style("• Dependencies Tree", bold=True))
        click.echo(pretty_tree(report.tree, report.entries))
        click.echo()
    if circular:
        click.echo(click.style("• Circular Dependencies", bold=True))
        click.echo(pretty_circular(report.circulars) if report.circulars else "  None")
        click.echo()
    if warning:
        click.echo(click.style("• Warnings", bold=True))
        click.echo(pretty_warning(report.warnings) if report.warnings else "  None")
        click.echo()

    if report.circulars and "circular" in codes:
        click.get_current_context().exit(codes["circular"])


@cli.command()
@click.argument("imports_file", type=_IMPORTS_ARG)
@click.argument("module")
@click.option("--context", type=click.Path(exists=True, file_okay=False), default=".", help="Project root")
def dependents(imports_file: Path, module: str, context: str):
    """List the modules that import MODULE (path relative to the context)."""
    imports = _load(imports_file)
    options = normalize_options(context=context)
    report = run_analysis(list(imports), imports, options, transform=True)

    issuers = report.dependents.get(module, [])
    if not issuers:
        click.echo(f"Nothing imports {module}.")
        return
    click.echo(f"\n{len(issuers)} module(s) import {click.style(module, fg='cyan')}:\n")
    for issuer in issuers:
        click.echo(f"  {issuer}")


@cli.command()
@click.option("--port", "-p", default=8421, help="Port number")
@click.option("--host", default="127.0.0.1", help="Host address")
def serve(port: int, host: str):
    """Start the HTTP API."""
    try:
        import uvicorn
    except ImportError:
        raise click.ClickException(
            "uvicorn is required for the HTTP API. "
            "Install with: pip install 'module-graph[web]'"
        )

    from module_graph.web import create_app

    click.echo(f"Starting module-graph API at http://{host}:{port}")
    uvicorn.run(create_app(), host=host, port=port, log_level="info")


if __name__ == "__main__":
    cli()
