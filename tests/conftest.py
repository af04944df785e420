"""Shared fixtures: SFDX project trees built in a temporary directory."""

import json
from pathlib import Path
from typing import Dict, Iterable, Optional

import pytest


def write_files(root: Path, files: Iterable[str]) -> None:
    """Create empty files at the given relative paths."""
    for rel_path in files:
        path = root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("<xml/>", encoding="utf-8")


SAMPLE_SOURCE_FILES = [
    "classes/AccountService.cls",
    "classes/AccountService.cls-meta.xml",
    "classes/util/StringUtils.cls",
    "classes/util/StringUtils.cls-meta.xml",
    "triggers/AccountTrigger.trigger",
    "triggers/AccountTrigger.trigger-meta.xml",
    "aura/myAuraCmp/myAuraCmp.cmp",
    "aura/myAuraCmp/myAuraCmp.cmp-meta.xml",
    "aura/.internal/cache.json",
    "lwc/myComponent/myComponent.js",
    "lwc/myComponent/myComponent.html",
    "lwc/myComponent/myComponent.js-meta.xml",
    "lwc/.internal/cache.json",
    "objects/Account/Account.object-meta.xml",
    "objects/Account/fields/MyField__c.field-meta.xml",
    "objects/Account/validationRules/Rule1.validationRule-meta.xml",
    "objects/Account/listViews/All.listView-meta.xml",
    "objects/Contact/fields/Email__c.field-meta.xml",
    "labels/CustomLabels.labels-meta.xml",
    "labels/Other.labels-meta.xml",
    "workflows/Account.workflow-meta.xml",
    "workflows/sub/Case.workflow-meta.xml",
    "staticresources/.DS_Store",
    "unknownfolder/Foo.txt",
]

SAMPLE_METADATA = {
    "ApexClass": ["AccountService", "OtherClass", "StringUtils"],
    "ApexTrigger": ["AccountTrigger"],
    "AuraDefinitionBundle": ["myAuraCmp"],
    "CustomField": ["Email__c", "MyField__c"],
    "CustomLabels": ["CustomLabels"],
    "CustomObject": ["Account"],
    "LightningComponentBundle": ["myComponent"],
    "ListView": ["All"],
    "ValidationRule": ["Rule1"],
    "Workflow": ["Account", "sub/Case"],
}


@pytest.fixture
def make_project(tmp_path):
    """Factory building an SFDX project under tmp_path.

    ``sources`` maps a package directory to files relative to its
    ``main/default`` folder. ``config`` overrides the sfdx-project.json
    content; pass ``False`` to omit the file or a string for raw content.
    """

    def _make(sources: Dict[str, Iterable[str]],
              api_version: Optional[str] = "58.0",
              config=None,
              extra_dirs: Iterable[str] = ()) -> Path:
        root = tmp_path / "project"
        root.mkdir(exist_ok=True)

        for package_dir, files in sources.items():
            write_files(root / package_dir / "main" / "default", files)

        if config is False:
            return root
        if isinstance(config, str):
            (root / "sfdx-project.json").write_text(config, encoding="utf-8")
            return root

        if config is None:
            config = {
                "packageDirectories": [
                    {"path": d, "default": i == 0}
                    for i, d in enumerate([*sources, *extra_dirs])
                ],
            }
            if api_version is not None:
                config["sourceApiVersion"] = api_version

        (root / "sfdx-project.json").write_text(json.dumps(config), encoding="utf-8")
        return root

    return _make


@pytest.fixture
def sample_project(make_project):
    """A two-package project plus one declared package that does not exist."""
    return make_project(
        {
            "force-app": SAMPLE_SOURCE_FILES,
            "other-app": [
                "classes/OtherClass.cls",
                "classes/OtherClass.cls-meta.xml",
                "classes/AccountService.cls",
            ],
        },
        extra_dirs=["missing-app"],
    )
