"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    └── ApplicationError       (application.py)
        ├── QueryParseError
        └── ConfigError        (logscrub.config.validation)
            └── InvalidSettingValueError
"""

from logscrub.kernel.errors.application import ApplicationError, QueryParseError
from logscrub.kernel.errors.base import BaseError

__all__ = [
    "ApplicationError",
    "BaseError",
    "QueryParseError",
]
