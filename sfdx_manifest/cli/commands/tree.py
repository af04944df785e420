# sfdx_manifest/cli/commands/tree.py
"""Metadata tree command"""

import click

from ..decorators import handle_errors
from ..utils.output import echo_json, format_type_trees, print_warning, show_discovery_messages
from ...constants import MSG_NO_METADATA


@click.command()
@click.option('--type', 'comp_type', help='Only show this metadata type')
@click.option('--format', 'output_format', type=click.Choice(['text', 'json']),
              default='text', help='Output format')
@click.pass_context
@handle_errors
def tree(ctx, comp_type, output_format):
    """Show discovered metadata as a tree per type

    Custom objects, Apex classes and triggers are nested on "/" in their
    names; other types are listed flat.

    Examples:

        sfdx-manifest tree
        sfdx-manifest tree --type CustomObject --format json
    """
    query = ctx.obj.query
    result = query.discover()
    show_discovery_messages(result)

    trees = query.tree(comp_type, result=result)

    if output_format == 'json':
        echo_json({t: node.to_dict() for t, node in trees.items()})
    elif trees:
        format_type_trees(trees)
    elif result.success:
        print_warning(f"No components found with type '{comp_type}'" if comp_type else MSG_NO_METADATA)

    if not result.success:
        ctx.exit(1)
