from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict

# URL of the Hacker News front page feed.
DEFAULT_FEED_URL = "https://news.ycombinator.com/rss"
# User agent sent with every feed request.
DEFAULT_USER_AGENT = "HNcomments/0.1"
# Path of the generated feed file.
DEFAULT_OUTPUT_PATH = "comments.rss"
# HTTP client timeout in seconds.
DEFAULT_TIMEOUT = 60

### Source feed

class SourceFeedItem(BaseModel):
    """
    Item of the fetched feed.
    """
    title: str # The title of the item.
    article_link: str # The URL of the submitted article.
    description_markup: str # The raw description, embedding the comment page URL.
    published_at: Optional[datetime] = None # Publish date in UTC, None if absent or unparseable.

    model_config = ConfigDict(
        frozen = True,
    )

class SourceFeed(BaseModel):
    """
    Fetched feed.
    """
    title: str # The title of the feed.
    link: str # The URL of the feed's website.
    description: str # The description of the feed.
    items: List[SourceFeedItem] # Items in the original feed order.

    model_config = ConfigDict(
        frozen = True,
    )

### Output feed

class OutputFeedItem(BaseModel):
    """
    Item of the republished feed, linking to the comment page.
    """
    title: str # The title of the original item.
    comment_link: str # The URL of the discussion page.
    created_at: datetime # Publish date of the original item in UTC.
    body_text: str # Text referencing the submitted article.

    model_config = ConfigDict(
        frozen = True,
    )

class OutputFeed(BaseModel):
    """
    Republished feed.
    """
    title: str # The title of the source feed.
    link: str # The link of the source feed.
    description: str # The description of the source feed.
    copyright_notice: str # Fixed copyright line.
    generated_at: datetime # When the feed was generated, in UTC.
    items: List[OutputFeedItem] # Items in the source feed order.

### Diagnostics

class DiagnosticReason(str, Enum):
    """
    Why an item was left out of the output feed.
    """
    NO_COMMENT_LINK = "no_comment_link"
    MISSING_TIMESTAMP = "missing_timestamp"

class Diagnostic(BaseModel):
    """
    Structured message about a skipped item.
    """
    reason: DiagnosticReason # Why the item was skipped.
    message: str # Human readable description.
    item_title: Optional[str] = None # Title of the offending item.
    item_link: Optional[str] = None # Article link of the offending item.

    model_config = ConfigDict(
        frozen = True,
    )

### App

class AppEnvSettings(BaseSettings):
    """
    App settings from environment variables.
    """
    feed_url: Optional[str] = None # The URL of the feed to republish.
    timeout: Optional[int] = None # HTTP client timeout in seconds.
    output: Optional[str] = None # The file path to write the feed to.
    debug: bool = False # Whether to print debug messages.

    model_config = SettingsConfigDict(
        env_prefix="HN_COMMENTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        frozen=True,
        extra="ignore",
    )

class AppConfig(BaseModel):
    """
    Global app config.
    """
    feed_url: str = DEFAULT_FEED_URL # The URL of the feed to republish.
    timeout: int = DEFAULT_TIMEOUT # HTTP client timeout in seconds.
    output: str = DEFAULT_OUTPUT_PATH # The file path to write the feed to.
    debug: bool = False # Whether to print debug messages.
    user_agent: str = DEFAULT_USER_AGENT # User agent of the HTTP client.

    model_config = ConfigDict(
        frozen = True,
    )
