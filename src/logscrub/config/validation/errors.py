"""Config validation errors."""
from logscrub.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Redaction settings could not be loaded."""
    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """A setting would make redaction unsafe or the scrubbed output unusable.

    Only the setting name and reason go into ``detail``; the rejected value
    stays in the message, which is meant for startup failures, not log lines.
    """
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Redaction setting '{setting_name}' rejected {value!r}: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError"]
