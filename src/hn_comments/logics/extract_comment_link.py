from typing import Optional

def extract_comment_link(
    description_markup: str, # The description of a feed item
) -> Optional[str]:
    """
    Extract the comment page URL from an item description.

    Hacker News descriptions hold a single anchor, `<a href="URL">Comments</a>`,
    so the URL is the only quoted value. Splitting on the double quote must give
    exactly three parts and the URL is the middle one. Any other shape returns None.
    The value is not validated as a URL.
    """
    parts = description_markup.split("\"")
    if len(parts) != 3:
        return None
    return parts[1]
