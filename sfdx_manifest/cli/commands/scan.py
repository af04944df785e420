# sfdx_manifest/cli/commands/scan.py
"""Metadata discovery command"""

import click

from ..decorators import handle_errors
from ..utils.output import (
    echo_json,
    echo_yaml,
    format_metadata_table,
    print_warning,
    show_discovery_messages,
)
from ...constants import MSG_NO_METADATA


@click.command()
@click.option('--type', 'comp_type', help='Only show this metadata type')
@click.option('--format', 'output_format', type=click.Choice(['table', 'json', 'yaml']),
              default='table', help='Output format')
@click.pass_context
@handle_errors
def scan(ctx, comp_type, output_format):
    """Discover metadata components in the project

    Examples:

        # Show everything found under the package directories
        sfdx-manifest scan

        # Only Apex classes, as JSON
        sfdx-manifest scan --type ApexClass --format json
    """
    result = ctx.obj.query.discover()
    show_discovery_messages(result)

    metadata = result.metadata.to_dict()
    if comp_type:
        metadata = {t: names for t, names in metadata.items() if t == comp_type}

    if output_format == 'json':
        echo_json({"apiVersion": result.api_version, "metadata": metadata})
    elif output_format == 'yaml':
        echo_yaml({"apiVersion": result.api_version, "metadata": metadata})
    elif metadata:
        format_metadata_table(metadata, result.api_version)
    elif comp_type and not result.is_empty:
        print_warning(f"No components found with type '{comp_type}'")
    elif result.success:
        print_warning(MSG_NO_METADATA)

    if not result.success:
        ctx.exit(1)
