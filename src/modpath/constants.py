"""Constants used in the project."""

from enum import Enum


class PathProblem(Enum):
    """Structural problems found while validating a path.

    Args:
        Enum (string): Message template for the problem.
    """

    EMPTY_STRING = "empty string"
    LEADING_DASH = "leading dash"
    DOUBLE_SLASH = "double slash"
    TRAILING_SLASH = "trailing slash"
    EMPTY_ELEMENT = "empty path element"
    DOTS_ONLY = "invalid path element {element}"
    LEADING_DOT = "leading dot in path element"
    TRAILING_DOT = "trailing dot in path element"
    WINDOWS_NAME = "{element} disallowed as path element component on Windows"
    WINDOWS_SHORT_NAME = "trailing tilde and digits in path element"
    LEADING_SLASH = "leading slash"
    MISSING_DOT = "missing dot in first path element"
    LEADING_DASH_FIRST = "leading dash in first path element"
    MAJOR_ONLY = "path can contain major version only"
    IMPORT_MAJOR_ONLY = "import paths can only contain a major version specifier"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    LOG_FORMAT = "[%(levelname)s] %(message)s"
    ENV_LOG_LEVEL = "MODPATH_LOG_LEVEL"
    DEFAULT_LOG_LEVEL = "WARNING"

    ESCAPE_MARKER = "!"
    VERSION_SEPARATOR = "@"
    QUALIFIER_SEPARATOR = ":"
    MODULE_PUNCTUATION = "-._~+"
    FIRST_ELEMENT_PUNCTUATION = "-."
    FILE_NAME_PUNCTUATION = "!#$%&()+,-.=@[]^_{}~ "

    # Majors that may appear without an @vN suffix on the module path.
    UNSUFFIXED_MAJORS = ("v0", "v1")

    # Device names reserved by Windows in any path element, compared
    # case-insensitively against the text before the first dot.
    BAD_WINDOWS_NAMES = [
        "CON",
        "PRN",
        "AUX",
        "NUL",
        "COM1",
        "COM2",
        "COM3",
        "COM4",
        "COM5",
        "COM6",
        "COM7",
        "COM8",
        "COM9",
        "LPT1",
        "LPT2",
        "LPT3",
        "LPT4",
        "LPT5",
        "LPT6",
        "LPT7",
        "LPT8",
        "LPT9",
    ]
