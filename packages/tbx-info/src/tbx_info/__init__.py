# SPDX-License-Identifier: MIT
"""Toolbox metadata built around semantic versions.

This package provides:
- The ToolboxInfo record and its toolbox.cfg JSON form
- Validation with structured error reporting
- Locating the first semantic version in free-form text

Example:
    >>> from tbx_info import ToolboxInfo, find_version
    >>>
    >>> info = ToolboxInfo(name="emd", title="Empirical Mode Decomposition", version="1.0.0")
    >>> str(info.bump("minor").version)
    '1.1.0'
    >>> str(find_version("EMD toolbox\\nVersion 2.3.1-beta 01-Jan-2020"))
    '2.3.1-beta'
"""

__version__ = "0.1.0"

from .schema import (
    DEFAULT_BRANCH,
    GIT_URL_PATTERN,
    MAX_TITLE_LENGTH,
    NAME_PATTERN,
    TOOLBOX_DEFAULTS,
    TOOLBOX_SCHEMA,
    get_toolbox_schema,
)
from .validator import (
    RecordError,
    RecordValidationError,
    ValidationErrorDetail,
    ValidationResult,
    validate_record,
    validate_record_strict,
)
from .record import (
    DEFAULT_VERSION,
    ToolboxInfo,
)
from .scan import (
    VERSION_CANDIDATE,
    VersionNotFoundError,
    find_version,
    iter_versions,
)

__all__ = [
    # Schema
    "TOOLBOX_SCHEMA",
    "TOOLBOX_DEFAULTS",
    "NAME_PATTERN",
    "GIT_URL_PATTERN",
    "MAX_TITLE_LENGTH",
    "DEFAULT_BRANCH",
    "get_toolbox_schema",
    # Validation
    "validate_record",
    "validate_record_strict",
    "ValidationResult",
    "ValidationErrorDetail",
    "RecordError",
    "RecordValidationError",
    # Record
    "ToolboxInfo",
    "DEFAULT_VERSION",
    # Scanning
    "find_version",
    "iter_versions",
    "VERSION_CANDIDATE",
    "VersionNotFoundError",
]
