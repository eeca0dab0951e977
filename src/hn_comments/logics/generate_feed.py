import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional

from hn_comments.logics.extract_comment_link import extract_comment_link
from hn_comments.models import (
    Diagnostic,
    DiagnosticReason,
    OutputFeed,
    OutputFeedItem,
    SourceFeed,
)
from hn_comments.protocols import DiagnosticsSink, discard_diagnostics

COPYRIGHT_NOTICE = "Copyright © 2005–2018 Y Combinator, LLC. All rights reserved."

def utc_now() -> datetime:
    return datetime.now(timezone.utc)

def generate_feed(
    source_feed: SourceFeed, # The parsed source feed
    diagnostics: Optional[DiagnosticsSink] = None, # Receives a message for every skipped item
    now: Callable[[], datetime] = utc_now, # Clock for the generation timestamp
) -> OutputFeed:
    """
    Generate a feed linking each source item to its comment page.
    Items without a comment link or publish date are skipped.
    """
    diagnostics = diagnostics or discard_diagnostics
    logging.info(f"Generating comment feed for {source_feed.title}, {len(source_feed.items)} source items")

    output_items: List[OutputFeedItem] = []
    for item in source_feed.items:
        comment_link = extract_comment_link(item.description_markup)
        if comment_link is None:
            diagnostics(Diagnostic(
                reason=DiagnosticReason.NO_COMMENT_LINK,
                message="Failed to parse comment link from item",
                item_title=item.title,
                item_link=item.article_link,
            ))
            continue
        if item.published_at is None:
            diagnostics(Diagnostic(
                reason=DiagnosticReason.MISSING_TIMESTAMP,
                message="Missing or unparseable publish date for item",
                item_title=item.title,
                item_link=item.article_link,
            ))
            continue
        output_items.append(OutputFeedItem(
            title=item.title,
            comment_link=comment_link,
            created_at=item.published_at.astimezone(timezone.utc),
            body_text=f"Submitted link: {item.article_link}",
        ))

    logging.info(f"Comment feed generated: {len(output_items)} items kept, {len(source_feed.items) - len(output_items)} items skipped")
    return OutputFeed(
        title=source_feed.title,
        link=source_feed.link,
        description=source_feed.description,
        copyright_notice=COPYRIGHT_NOTICE,
        generated_at=now().astimezone(timezone.utc),
        items=output_items,
    )
