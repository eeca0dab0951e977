import logging

import requests

from hn_comments.errors import FetchError
from hn_comments.models import DEFAULT_USER_AGENT

def fetch_feed(
    url: str, # The URL of the feed
    timeout: int, # HTTP client timeout in seconds
    user_agent: str = DEFAULT_USER_AGENT, # User agent sent with the request
) -> bytes:
    """
    Download the raw feed.
    """
    logging.info(f"Fetching RSS feed from {url}.")
    try:
        response = requests.get(
            url,
            timeout=timeout,
            headers={"User-Agent": user_agent},
        )
    except requests.RequestException as e:
        raise FetchError(f"Failed to fetch the RSS feed from {url}: {e}") from e

    if response.status_code < 200 or response.status_code > 299:
        raise FetchError(
            f"Failed to fetch the RSS feed from {url}. Code: {response.status_code}",
            status_code=response.status_code,
        )

    logging.info(f"Successfully fetched RSS feed from {url}.")
    return response.content
