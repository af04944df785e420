# sfdx_manifest/cli/utils/output.py
"""Output formatting utilities"""

import json
from typing import Any, Dict, Mapping, Optional, Sequence

import click
import yaml
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from ...constants import EMOJI_FOLDER, EMOJI_PACKAGE
from ...models import DiscoveryResult, TreeNode

# Tables and trees go to stdout, messages and logs to stderr
console = Console()
err_console = Console(stderr=True)


def format_metadata_table(metadata: Mapping[str, Sequence[str]],
                          api_version: str,
                          title: str = "Project Metadata") -> None:
    """Format and display discovered metadata"""
    table = Table(title=title, box=box.ROUNDED, caption=f"API version {api_version}")
    table.add_column("Type", style="cyan", no_wrap=True)
    table.add_column("Count", justify="right", style="yellow")
    table.add_column("Components", style="green")

    for comp_type, names in metadata.items():
        table.add_row(comp_type, str(len(names)), "\n".join(names))

    console.print(table)


def _add_tree_children(branch: Tree, node: TreeNode) -> None:
    for child in node.children:
        if child.children:
            label = f"{EMOJI_FOLDER} {child.display_name}"
            if child.selectable:
                label += " [green]✓[/green]"
            _add_tree_children(branch.add(label), child)
        else:
            branch.add(f"[green]{child.display_name}[/green]")


def format_type_trees(trees: Mapping[str, TreeNode]) -> None:
    """Format and display one tree per metadata type"""
    root = Tree(f"{EMOJI_PACKAGE} [bold]Metadata[/bold]")

    for comp_type, node in trees.items():
        count = sum(1 for _ in node.selectable_names())
        branch = root.add(f"[bold cyan]{comp_type}[/bold cyan] [dim]({count})[/dim]")
        _add_tree_children(branch, node)

    console.print(root)


def echo_json(data: Any) -> None:
    """Write JSON to stdout"""
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


def echo_yaml(data: Any) -> None:
    """Write YAML to stdout"""
    click.echo(yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True), nl=False)


def show_discovery_messages(result: DiscoveryResult) -> None:
    """Display the warnings and errors collected during discovery"""
    for message in result.warnings:
        print_warning(message)
    for message in result.errors:
        print_error(message)


def format_checks(rows: Sequence[Dict[str, str]], title: str = "Diagnostic Results") -> None:
    """Format and display diagnostic rows with name, status and details"""
    table = Table(title=title, box=box.ROUNDED)
    table.add_column("Check", style="cyan")
    table.add_column("Status", justify="center")
    table.add_column("Details")

    for row in rows:
        table.add_row(row["name"], row["status"], row.get("details", ""))

    console.print(table)


def print_error(message: str, error: Optional[Exception] = None) -> None:
    """Print error message"""
    if error:
        err_console.print(f"[red]Error:[/red] {escape(message)}: {escape(str(error))}")
    else:
        err_console.print(f"[red]Error:[/red] {escape(message)}")


def print_warning(message: str) -> None:
    """Print warning message"""
    err_console.print(f"[yellow]Warning:[/yellow] {escape(message)}")
