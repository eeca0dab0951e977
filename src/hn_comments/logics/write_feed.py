import os
import logging
import xml.etree.ElementTree as ET
from datetime import datetime, timezone
from email.utils import format_datetime

from hn_comments.errors import WriteError
from hn_comments.models import OutputFeed

def rfc822_date(value: datetime) -> str:
    return format_datetime(value.astimezone(timezone.utc), usegmt=True)

def render_feed(feed: OutputFeed) -> bytes:
    """
    Serialize the feed as an RSS 2.0 document.
    """
    rss = ET.Element("rss", version="2.0")
    channel = ET.SubElement(rss, "channel")

    # Add channel metadata
    ET.SubElement(channel, "title").text = feed.title
    ET.SubElement(channel, "link").text = feed.link
    ET.SubElement(channel, "description").text = feed.description
    ET.SubElement(channel, "copyright").text = feed.copyright_notice
    ET.SubElement(channel, "lastBuildDate").text = rfc822_date(feed.generated_at)

    # Add each item
    for output_item in feed.items:
        item = ET.SubElement(channel, "item")
        ET.SubElement(item, "title").text = output_item.title
        ET.SubElement(item, "link").text = output_item.comment_link
        ET.SubElement(item, "description").text = output_item.body_text
        ET.SubElement(item, "pubDate").text = rfc822_date(output_item.created_at)

    return ET.tostring(rss, encoding="utf-8", xml_declaration=True)

def write_feed(
    feed: OutputFeed, # The feed to write
    path: str, # Destination file path, overwritten if it exists
) -> str:
    """
    Write the feed to a file. Returns the cleaned path that was written.
    """
    path = os.path.normpath(path)
    logging.info(f"Writing feed to \"{path}\"")
    content = render_feed(feed)
    try:
        with open(path, "wb") as f:
            f.write(content)
    except OSError as e:
        raise WriteError(f"Failed to write the feed to \"{path}\": {e}") from e
    logging.info(f"Feed saved to \"{path}\"")
    return path
