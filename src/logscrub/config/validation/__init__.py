"""Config validation errors and checks."""
from logscrub.config.validation.checks import check_names, check_placeholder
from logscrub.config.validation.errors import ConfigError, InvalidSettingValueError

__all__ = ["ConfigError", "InvalidSettingValueError", "check_names", "check_placeholder"]
