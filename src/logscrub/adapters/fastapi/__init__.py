"""FastAPI adapter – request parameter logging middleware."""
from logscrub.adapters.fastapi.middleware import FastAPIRequestLoggingMiddleware

__all__ = ["FastAPIRequestLoggingMiddleware"]
