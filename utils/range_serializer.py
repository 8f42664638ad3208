# utils/range_serializer.py
"""Encoding of applied ranges as "start-end" timestamp tokens."""

import re
from typing import Optional, Tuple

_TOKEN_PATTERN = re.compile(r"(\d+)-(\d+)")


class RangeSerializer:
    """Converts between timestamp pairs and the label token format."""

    @staticmethod
    def encode(start_timestamp: int, end_timestamp: int) -> str:
        """
        Join two millisecond timestamps with a hyphen.

        Args:
            start_timestamp: Range start in ms since the epoch
            end_timestamp: Range end in ms since the epoch

        Returns:
            Token such as "1704067200000-1704412800000"
        """
        return f"{int(start_timestamp)}-{int(end_timestamp)}"

    @staticmethod
    def decode(token: Optional[str]) -> Optional[Tuple[int, int]]:
        """
        Parse a token back into timestamps.

        Anything that is not two non-negative integers joined by a single
        hyphen is treated as no range.

        Args:
            token: Previously encoded token, possibly empty

        Returns:
            (start, end) timestamps or None
        """
        if not token or not isinstance(token, str):
            return None

        match = _TOKEN_PATTERN.fullmatch(token.strip())
        if not match:
            return None

        start_timestamp, end_timestamp = (int(part) for part in match.groups())
        return start_timestamp, end_timestamp
