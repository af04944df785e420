"""Exception definitions for sfdx-manifest API"""

from ..constants import ErrorCode


class SfdxManifestError(Exception):
    """Base exception for sfdx-manifest"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class ConfigError(SfdxManifestError):
    """Configuration error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFIG_FORMAT_ERROR)


class ValidationError(SfdxManifestError):
    """Invalid value passed to a model or builder"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.VALIDATION_FAILED)


class SelectionError(SfdxManifestError):
    """Malformed component selection"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.INVALID_SELECTION)


class ManifestParseError(SfdxManifestError):
    """Manifest document could not be parsed"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.MANIFEST_PARSE_FAILED)


class PathError(SfdxManifestError):
    """Path related error"""
    pass


class ProjectNotFoundError(PathError):
    """Project root not found error"""

    def __init__(self, message: str = None):
        if message is None:
            message = (
                "No SFDX project found. Please ensure:\n"
                "1. You are in a project directory\n"
                "2. The project root contains sfdx-project.json\n"
                "3. Or use --project-root parameter to specify project location"
            )
        super().__init__(message, ErrorCode.PROJECT_NOT_FOUND)


class FileExistsError(SfdxManifestError):
    """File already exists error"""

    def __init__(self, file_path: str):
        message = f"File already exists: {file_path}. Use --force to overwrite."
        super().__init__(message, ErrorCode.FILE_ALREADY_EXISTS)
        self.file_path = file_path
