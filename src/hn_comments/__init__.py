"""HN Comments: republish the Hacker News RSS feed with comment-page links."""

__version__ = "0.1.0"
