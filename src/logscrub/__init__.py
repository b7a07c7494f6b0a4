"""
logscrub – Redact sensitive values from request logs.

Import path convention::

    from logscrub.query import ScrubbingPrinter, ScrubConfig
    from logscrub.params import ParameterFilter, build_parameter_filter
    from logscrub.config import load_settings
    from logscrub.adapters.fastapi import FastAPIRequestLoggingMiddleware
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
