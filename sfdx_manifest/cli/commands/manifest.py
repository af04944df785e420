# sfdx_manifest/cli/commands/manifest.py
"""package.xml generation command"""

from pathlib import Path

import click

from ..decorators import handle_errors
from ..utils.output import err_console, print_warning, show_discovery_messages
from ...api.exceptions import SelectionError
from ...constants import MSG_EMPTY_SELECTION, MSG_MANIFEST_WRITTEN
from ...core import render_manifest


@click.command()
@click.option('-m', '--metadata', 'specs', multiple=True, metavar='TYPE:NAME',
              help='Component to include, Type:* selects a whole type (repeatable)')
@click.option('--selection', 'selection_file', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='YAML/JSON file listing the components to include')
@click.option('--all', 'include_all', is_flag=True, help='Include every discovered component')
@click.option('--api-version', help="Override the project's sourceApiVersion")
@click.option('-o', '--output', type=click.Path(dir_okay=False, path_type=Path),
              help='Write to this file instead of stdout')
@click.option('--force', is_flag=True, help='Overwrite an existing output file')
@click.option('--allow-empty', is_flag=True, help='Emit a manifest even when nothing is selected')
@click.pass_context
@handle_errors
def manifest(ctx, specs, selection_file, include_all, api_version, output, force, allow_empty):
    """Build a package.xml for selected components

    Examples:

        # Two classes and every custom object
        sfdx-manifest manifest -m ApexClass:AccountService -m ApexClass:AccountServiceTest -m 'CustomObject:*'

        # Everything, written to manifest/package.xml
        sfdx-manifest manifest --all -o manifest/package.xml

        # Selection kept in a file
        sfdx-manifest manifest --selection release.yaml
    """
    query = ctx.obj.query
    result = query.discover()
    show_discovery_messages(result)

    selected = query.select(specs,
                            selection_file=selection_file.resolve() if selection_file else None,
                            include_all=include_all, result=result)

    if not selected and not allow_empty:
        raise SelectionError(MSG_EMPTY_SELECTION)

    package = query.manifest(selected, api_version=api_version, result=result)

    if output:
        path = query.write_manifest(package, output.resolve(), force=force)
        err_console.print(MSG_MANIFEST_WRITTEN.format(path=path, count=package.component_count))
    else:
        click.echo(render_manifest(package), nl=False)

    if not package.types:
        print_warning(MSG_EMPTY_SELECTION)
