"""CLI entry point for ingress-annotations.

Invoked as::

    ingress-annotations [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m ingress_annotations.cli.main

Commands
--------
keys              Show the canonical and deprecated key for a name
get               Resolve one annotation from a manifest
inspect           List every prefixed annotation in a manifest
secure-upstream   Parse the secure backend annotations of a manifest
version           Show version information
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from ingress_annotations.resource.nodes import Ingress

console = Console()
err_console = Console(stderr=True)

_GETTERS = ("bool", "string", "int")


def _read_source(path: str) -> str:
    """Read a manifest file, exiting on error."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] File not found: {path}")
        sys.exit(1)
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {path}: {exc}")
        sys.exit(1)


def _load_or_exit(path: str) -> "Ingress":
    """Load an ingress manifest, printing errors and exiting on failure."""
    from ingress_annotations.resource import ManifestError, ManifestSerializer

    source = _read_source(path)
    serializer = ManifestSerializer()
    try:
        if path.endswith(".json"):
            return serializer.from_json(source)
        return serializer.from_yaml(source)
    except ManifestError as exc:
        err_console.print(f"[red]Invalid manifest[/red] {path}: {exc}")
        sys.exit(1)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="ingress-annotations")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="Logging level for diagnostic output on stderr.",
)
def cli(log_level: str) -> None:
    """Typed access to ingress annotations with deprecated-prefix fallback."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from ingress_annotations import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]ingress-annotations[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# keys command
# ---------------------------------------------------------------------------


@cli.command(name="keys")
@click.argument("name")
def keys_command(name: str) -> None:
    """Show the fully qualified keys NAME is looked up under."""
    from ingress_annotations.parser import (
        annotation_with_deprecated_prefix,
        annotation_with_prefix,
    )

    console.print(annotation_with_prefix(name), markup=False, highlight=False, soft_wrap=True)
    console.print(annotation_with_deprecated_prefix(name), markup=False, highlight=False, soft_wrap=True)


# ---------------------------------------------------------------------------
# get command
# ---------------------------------------------------------------------------


@cli.command(name="get")
@click.argument("file", type=click.Path(exists=False))
@click.argument("name")
@click.option(
    "--type",
    "value_type",
    type=click.Choice(_GETTERS, case_sensitive=False),
    default="string",
    help="Type to parse the annotation value as (default: string).",
)
def get_command(file: str, name: str, value_type: str) -> None:
    """Resolve annotation NAME from the ingress manifest FILE.

    Examples:

    \b
        ingress-annotations get ingress.yaml secure-backends --type bool
        ingress-annotations get ingress.json upstream-max-fails --type int
    """
    from ingress_annotations.errors import AnnotationError
    from ingress_annotations.parser import (
        get_bool_annotation,
        get_int_annotation,
        get_string_annotation,
    )

    getters = {
        "bool": get_bool_annotation,
        "string": get_string_annotation,
        "int": get_int_annotation,
    }
    ingress = _load_or_exit(file)
    try:
        value = getters[value_type.lower()](name, ingress)
    except AnnotationError as exc:
        err_console.print(f"[red]Error:[/red] {escape(name)}: {escape(str(exc))}")
        sys.exit(1)

    if isinstance(value, bool):
        text = "true" if value else "false"
    else:
        text = str(value)
    console.print(text, markup=False, highlight=False, soft_wrap=True)


# ---------------------------------------------------------------------------
# inspect command
# ---------------------------------------------------------------------------


@cli.command(name="inspect")
@click.argument("file", type=click.Path(exists=False))
def inspect_command(file: str) -> None:
    """List every annotation of FILE that uses a known prefix."""
    from ingress_annotations.parser import ANNOTATIONS_PREFIX, DEPRECATED_ANNOTATIONS_PREFIX

    ingress = _load_or_exit(file)
    prefixes = {
        f"{ANNOTATIONS_PREFIX}/": "canonical",
        f"{DEPRECATED_ANNOTATIONS_PREFIX}/": "[yellow]deprecated[/yellow]",
    }

    table = Table(title=f"Annotations: {ingress.namespace}/{ingress.name}")
    table.add_column("Name", style="bold")
    table.add_column("Prefix")
    table.add_column("Value")

    count = 0
    for key, value in sorted(ingress.get_annotations().items()):
        for prefix, label in prefixes.items():
            if key.startswith(prefix):
                table.add_row(escape(key[len(prefix):]), label, escape(value))
                count += 1
                break

    if count == 0:
        console.print(f"[dim]No prefixed annotations in {file}[/dim]")
        return
    console.print(table)


# ---------------------------------------------------------------------------
# secure-upstream command
# ---------------------------------------------------------------------------


@cli.command(name="secure-upstream")
@click.argument("file", type=click.Path(exists=False))
@click.option(
    "--cert",
    "certs",
    multiple=True,
    help="Secret available to the resolver, as NAMESPACE/NAME. Repeatable.",
)
def secure_upstream_command(file: str, certs: tuple[str, ...]) -> None:
    """Parse the secure backend annotations of FILE."""
    from ingress_annotations.resolver import AuthSSLCert, StaticResolver
    from ingress_annotations.secureupstream import SecureUpstreamError, SecureUpstreamParser

    ingress = _load_or_exit(file)
    resolver = StaticResolver({name: AuthSSLCert(secret=name) for name in certs})
    try:
        config = SecureUpstreamParser(resolver).parse(ingress)
    except SecureUpstreamError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        sys.exit(1)

    table = Table(show_header=False, box=None)
    table.add_row("secure", "true" if config.secure else "false")
    table.add_row("ca secret", escape(config.ca_cert.secret) or "-")
    table.add_row("client ca secret", escape(config.client_ca_cert.secret) or "-")
    console.print(table)


if __name__ == "__main__":
    cli()
