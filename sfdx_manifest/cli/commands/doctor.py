# sfdx_manifest/cli/commands/doctor.py
"""Project diagnostic command"""

from typing import List

import click

from ..decorators import handle_errors
from ..utils.output import console, format_checks
from ...constants import EMOJI_ERROR, EMOJI_SUCCESS, EMOJI_WARNING, METADATA_TYPE_MAP
from ...models import LookupStatus, ProjectLookup
from ...utils.file_utils import list_subdirectories


class DiagnosticCheck:
    """Base class for diagnostic checks"""

    def __init__(self, name: str, description: str):
        self.name = name
        self.description = description
        self.passed = False
        self.warning = False
        self.message = ""

    def run(self, query, lookup: ProjectLookup) -> 'DiagnosticCheck':
        """Run the diagnostic check"""
        raise NotImplementedError

    @property
    def status(self) -> str:
        if not self.passed:
            return f"[red]{EMOJI_ERROR} FAIL[/red]"
        if self.warning:
            return f"[yellow]{EMOJI_WARNING} WARN[/yellow]"
        return f"[green]{EMOJI_SUCCESS} PASS[/green]"


class ProjectConfigCheck(DiagnosticCheck):
    """Check sfdx-project.json can be read"""

    def __init__(self):
        super().__init__(
            "Project Config",
            "Verify sfdx-project.json exists and parses"
        )

    def run(self, query, lookup):
        if lookup.status == LookupStatus.FOUND:
            self.passed = True
            self.message = f"{lookup.config_path} (API version {lookup.project.api_version})"
        elif lookup.status == LookupStatus.NOT_FOUND:
            self.message = f"{lookup.config_path} not found"
        else:
            self.message = lookup.error or "Invalid configuration"
        return self


class PackageDirectoriesCheck(DiagnosticCheck):
    """Check every package directory has a main/default source folder"""

    def __init__(self):
        super().__init__(
            "Package Directories",
            "Verify package directories contain main/default"
        )

    def run(self, query, lookup):
        if not lookup.found:
            self.message = "Skipped: no project configuration"
            return self

        source_dirs = query.path_resolver.get_source_dirs(lookup.project)
        if not source_dirs:
            self.message = "No packageDirectories declared"
            return self

        missing = [d for d in source_dirs if not d.is_dir()]
        self.passed = len(missing) < len(source_dirs)
        self.warning = bool(missing)

        lines = []
        for source_dir in source_dirs:
            mark = EMOJI_ERROR if source_dir in missing else EMOJI_SUCCESS
            lines.append(f"{mark} {query.path_resolver.make_relative(source_dir)}")
        self.message = "\n".join(lines)
        return self


class MetadataFoldersCheck(DiagnosticCheck):
    """Report metadata folders that discovery does not understand"""

    def __init__(self):
        super().__init__(
            "Metadata Folders",
            "List folders that are not recognized metadata types"
        )

    def run(self, query, lookup):
        if not lookup.found:
            self.message = "Skipped: no project configuration"
            return self

        known: List[str] = []
        unknown: List[str] = []
        for source_dir in query.path_resolver.get_source_dirs(lookup.project):
            for folder in list_subdirectories(source_dir):
                (known if folder.name in METADATA_TYPE_MAP else unknown).append(folder.name)

        self.passed = True
        self.warning = bool(unknown)
        self.message = f"{len(known)} recognized"
        if unknown:
            self.message += f", ignored: {', '.join(sorted(set(unknown)))}"
        return self


@click.command()
@click.pass_context
@handle_errors
def doctor(ctx):
    """Run project diagnostics

    Checks that sfdx-project.json is readable, that its package
    directories exist and which metadata folders will be scanned.

    Examples:

        sfdx-manifest doctor
    """
    query = ctx.obj.query
    lookup = query.scanner.load_project()

    console.print(f"[bold]Project root:[/bold] {query.project_root}\n")

    checks = [
        ProjectConfigCheck(),
        PackageDirectoriesCheck(),
        MetadataFoldersCheck(),
    ]
    for check in checks:
        check.run(query, lookup)

    format_checks([
        {"name": check.name, "status": check.status, "details": check.message}
        for check in checks
    ])

    failed = [check for check in checks if not check.passed]
    if failed:
        console.print(f"\n[red]{len(failed)} check(s) failed[/red]")
        ctx.exit(1)
