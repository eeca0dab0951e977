import logging

from hn_comments.models import Diagnostic, DiagnosticReason
from hn_comments.protocols import logging_diagnostics_sink

def diagnostic() -> Diagnostic:
    return Diagnostic(
        reason=DiagnosticReason.NO_COMMENT_LINK,
        message="Failed to parse comment link from item",
        item_title="Test Item 1",
        item_link="https://example.com/test-item-1",
    )

def test_logging_diagnostics_sink_enabled(caplog):
    sink = logging_diagnostics_sink(enabled=True)

    with caplog.at_level(logging.DEBUG):
        sink(diagnostic())

    assert len(caplog.records) == 1
    assert caplog.records[0].levelno == logging.DEBUG
    assert "Test Item 1" in caplog.text
    assert "https://example.com/test-item-1" in caplog.text

def test_logging_diagnostics_sink_disabled(caplog):
    sink = logging_diagnostics_sink(enabled=False)

    with caplog.at_level(logging.DEBUG):
        sink(diagnostic())

    assert caplog.records == []
