"""Load sfdx-project.json as an explicit found / not found / malformed result"""

import json
import logging
from pathlib import Path

from ..api.exceptions import ConfigError
from ..models.project import ProjectLookup, LookupStatus, SfdxProject

logger = logging.getLogger(__name__)


def load_project(config_path: Path) -> ProjectLookup:
    """Read and parse a project configuration file

    This never raises for a missing or broken file; callers branch on
    ``ProjectLookup.status`` instead.

    Args:
        config_path: Path to sfdx-project.json

    Returns:
        ProjectLookup describing the outcome
    """
    config_path = Path(config_path)

    if not config_path.is_file():
        logger.debug("Project configuration not found: %s", config_path)
        return ProjectLookup.not_found(config_path)

    try:
        with open(config_path, 'r', encoding='utf-8-sig') as f:
            data = json.load(f)
        project = SfdxProject.from_dict(data)

    except json.JSONDecodeError as e:
        return ProjectLookup.malformed(config_path, f"Invalid JSON in {config_path.name}: {e}")
    except ConfigError as e:
        return ProjectLookup.malformed(config_path, str(e))
    except (OSError, UnicodeDecodeError) as e:
        return ProjectLookup.malformed(config_path, f"Cannot read {config_path.name}: {e}")

    logger.debug(
        "Loaded %s: %d package director%s, API version %s",
        config_path, len(project.package_directories),
        "y" if len(project.package_directories) == 1 else "ies",
        project.api_version
    )
    return ProjectLookup(status=LookupStatus.FOUND, config_path=config_path, project=project)
