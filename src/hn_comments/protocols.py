import logging
from typing import Protocol

from hn_comments.models import Diagnostic

class DiagnosticsSink(Protocol):
    """
    Receiver of per-item diagnostics emitted while generating the feed.
    """

    def __call__(self, diagnostic: Diagnostic) -> None:
        ...

def discard_diagnostics(diagnostic: Diagnostic) -> None:
    """
    Sink that drops every diagnostic.
    """

def logging_diagnostics_sink(enabled: bool) -> DiagnosticsSink:
    """
    Build a sink that logs diagnostics at debug level when enabled.
    """
    if not enabled:
        return discard_diagnostics

    def sink(diagnostic: Diagnostic) -> None:
        logging.debug(f"{diagnostic.message}: \"{diagnostic.item_title}\" ({diagnostic.item_link})")

    return sink
