import logging
from typing import Optional
from xml.sax import SAXException

import feedparser

from hn_comments.errors import ParseError
from hn_comments.models import SourceFeed, SourceFeedItem
from hn_comments.utils.date_parser import DateParserProtocol, RobustDateParser

def parse_feed(
    raw: bytes, # Raw feed document
    date_parser: Optional[DateParserProtocol] = None, # Parser for publish dates
) -> SourceFeed:
    """
    Parse the raw feed into a source feed. Unknown elements are ignored.
    """
    date_parser = date_parser or RobustDateParser()
    # Descriptions are kept as published, extraction depends on their exact quoting
    parsed_feed = feedparser.parse(raw, sanitize_html=False, resolve_relative_uris=False)

    if parsed_feed.bozo:
        exception = parsed_feed.get("bozo_exception")
        if isinstance(exception, SAXException):
            raise ParseError(f"Feed is not well-formed: {exception}") from exception
        logging.warning(f"Feed parsed with warning: {exception.__class__.__name__}: {exception}")
    if not parsed_feed.version:
        raise ParseError("Document is not a recognized RSS or Atom feed.")

    # Items.
    items = []
    for entry in parsed_feed.entries:
        items.append(SourceFeedItem(
            title=entry.get("title", ""),
            article_link=entry.get("link", ""),
            description_markup=entry.get("description", ""),
            published_at=date_parser.parse_date(entry.get("published") or entry.get("updated")),
        ))

    feed = SourceFeed(
        title=parsed_feed.feed.get("title", ""),
        link=parsed_feed.feed.get("link", ""),
        description=parsed_feed.feed.get("description", ""),
        items=items,
    )
    logging.info(f"Parsed feed \"{feed.title}\" with {len(items)} items.")
    return feed
