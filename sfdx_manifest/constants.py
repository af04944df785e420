"""Global constants for sfdx-manifest"""

APP_NAME = "sfdx-manifest"
LOG_FORMAT = "%(message)s"

# Project identification
PROJECT_CONFIG_FILE = "sfdx-project.json"
PROJECT_MARKERS = [
    PROJECT_CONFIG_FILE,
]

# Source layout: <packageDirectory>/main/default/<typeFolder>
SOURCE_SUBPATH = ("main", "default")

# Manifest defaults
DEFAULT_API_VERSION = "60.0"
DEFAULT_MANIFEST_FILE = "package.xml"
METADATA_NAMESPACE = "http://soap.sforce.com/2006/04/metadata"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
XML_INDENT = "    "

# Source folder short name -> metadata type
METADATA_TYPE_MAP = {
    "classes": "ApexClass",
    "triggers": "ApexTrigger",
    "aura": "AuraDefinitionBundle",
    "lwc": "LightningComponentBundle",
    "pages": "ApexPage",
    "components": "ApexComponent",
    "staticresources": "StaticResource",
    "objects": "CustomObject",
    "tabs": "CustomTab",
    "permissionsets": "PermissionSet",
    "profiles": "Profile",
    "workflows": "Workflow",
    "labels": "CustomLabels",
}

# Types whose unit of identity is a directory, not a file
BUNDLE_METADATA_TYPES = frozenset([
    "AuraDefinitionBundle",
    "LightningComponentBundle",
])

# Types whose sub-folders are part of the component name
FOLDER_AWARE_METADATA_TYPES = frozenset([
    "Report",
    "Dashboard",
    "EmailTemplate",
    "Document",
    "Flow",
    "Workflow",
])

# Composite type and its sub-components: sub-folder -> (file suffix, type)
COMPOSITE_METADATA_TYPE = "CustomObject"
COMPOSITE_OBJECT_SUFFIX = ".object-meta.xml"
CUSTOM_OBJECT_CHILD_TYPES = {
    "fields": (".field-meta.xml", "CustomField"),
    "validationRules": (".validationRule-meta.xml", "ValidationRule"),
    "listViews": (".listView-meta.xml", "ListView"),
    "webLinks": (".webLink-meta.xml", "WebLink"),
    "recordTypes": (".recordType-meta.xml", "RecordType"),
    "compactLayouts": (".compactLayout-meta.xml", "CompactLayout"),
    "businessProcesses": (".businessProcess-meta.xml", "BusinessProcess"),
}

# Sidecar metadata suffixes, checked in order
META_SUFFIXES = ("-meta.xml", ".meta.xml")

# Only one CustomLabels component exists per org
SINGLETON_METADATA_TYPES = {
    "CustomLabels": "CustomLabels",
}

# Types displayed as nested trees, split on "/"
HIERARCHICAL_METADATA_TYPES = frozenset([
    "CustomObject",
    "ApexClass",
    "ApexTrigger",
])

HIDDEN_PREFIX = "."
NAME_SEPARATOR = "/"
SELECTION_WILDCARD = "*"
SELECTION_SEPARATOR = ":"


# Error codes
class ErrorCode:
    CONFIG_FORMAT_ERROR = "SM001"
    PROJECT_NOT_FOUND = "SM002"
    VALIDATION_FAILED = "SM003"
    INVALID_SELECTION = "SM004"
    MANIFEST_PARSE_FAILED = "SM005"
    FILE_ALREADY_EXISTS = "SM006"


# Environment variables
ENV_PROJECT_ROOT = "SFDX_MANIFEST_PROJECT_ROOT"
ENV_LOG_LEVEL = "SFDX_MANIFEST_LOG_LEVEL"

# Display constants
EMOJI_SUCCESS = "✓"
EMOJI_ERROR = "✗"
EMOJI_WARNING = "⚠"
EMOJI_FOLDER = "📁"
EMOJI_PACKAGE = "📦"

# Messages templates
MSG_MANIFEST_WRITTEN = f"{EMOJI_SUCCESS} Manifest written: {{path}} ({{count}} component(s))"
MSG_NO_METADATA = "No metadata found. Make sure your sfdx-project.json is configured correctly."
MSG_EMPTY_SELECTION = "No metadata components were selected."
