# sfdx_manifest/cli/commands/__init__.py
"""CLI commands"""

from . import scan
from . import tree
from . import manifest
from . import doctor

__all__ = [
    "scan",
    "tree",
    "manifest",
    "doctor",
]
