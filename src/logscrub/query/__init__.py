"""Query – scrub sensitive arguments from GraphQL documents."""
from logscrub.query.config import ScrubConfig
from logscrub.query.printer import ScrubbingPrinter, scrub_document, scrub_query

__all__ = [
    "ScrubConfig",
    "ScrubbingPrinter",
    "scrub_document",
    "scrub_query",
]
