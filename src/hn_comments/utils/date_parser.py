"""Utility for normalizing feed date strings to UTC."""

import datetime
import logging
import re
from datetime import timezone
from typing import Optional, Protocol

from dateutil import parser


class DateParserProtocol(Protocol):
    """Protocol defining the interface for date parsing."""

    def parse_date(self, date_str: Optional[str]) -> Optional[datetime.datetime]:
        """Parse a date string into a timezone-aware datetime object (UTC).

        Args:
            date_str: The date string to parse.

        Returns:
            A timezone-aware datetime object (UTC) or None if parsing fails.
        """
        ...


class RobustDateParser(DateParserProtocol):
    """Parses the date formats found in RSS and Atom feeds, including named US/EU timezones."""

    # Timezone abbreviations dateutil does not resolve on its own
    _timezone_replacements = {
        "PDT": "-0700",
        "PST": "-0800",
        "EDT": "-0400",
        "EST": "-0500",
        "CEST": "+0200",
        "CET": "+0100",
        "AEST": "+1000",
        "AEDT": "+1100",
        "GMT": "+0000",
        "UTC": "+0000",
    }

    _default_a = datetime.datetime(2000, 1, 1)
    _default_b = datetime.datetime(2001, 2, 2)

    def _normalize_timezones(self, date_str: str) -> str:
        """Replace standalone timezone abbreviations with numeric offsets."""
        normalized = date_str
        for tz, offset in self._timezone_replacements.items():
            normalized = re.sub(r"\b" + re.escape(tz) + r"\b", offset, normalized)
        return normalized

    def parse_date(self, date_str: Optional[str]) -> Optional[datetime.datetime]:
        """Parse a date string into a timezone-aware datetime object (UTC)."""
        if not date_str:
            return None

        normalized_date_str = self._normalize_timezones(date_str)
        try:
            # dateutil fills missing fields from the default, two different
            # defaults only agree when the string holds a full date
            parsed_date = parser.parse(normalized_date_str, default=self._default_a)
            other_date = parser.parse(normalized_date_str, default=self._default_b)
        except (ValueError, OverflowError):
            parsed_date = other_date = None

        if parsed_date is None or parsed_date != other_date:
            logging.debug(f"Could not parse date: \"{date_str}\"")
            return None

        # Naive dates are assumed to be UTC
        if parsed_date.tzinfo is None:
            parsed_date = parsed_date.replace(tzinfo=timezone.utc)
        return parsed_date.astimezone(timezone.utc)
