"""Quote- and escape-aware splitting of a query string into clauses."""

import logging

from namerec.qfilter.constants import ESCAPE
from namerec.qfilter.constants import QUOTE

logger = logging.getLogger(__name__)


def split_clauses(text: str, delimiter: str) -> list[str]:
    """
    Split a query string into clauses on a delimiter.

    Delimiters inside a double-quoted region do not separate clauses. A
    backslash escapes the character after it, so an escaped quote never
    opens or closes a region and an escaped delimiter is not a boundary.
    Quotes and backslashes are kept verbatim in the returned clauses, and
    clauses are not trimmed.

    A leading delimiter yields a leading empty clause, while a delimiter
    that ends the input yields no trailing empty clause. An unterminated
    quote turns the rest of the input into one final clause.

    Args:
        text: Raw query string
        delimiter: Non-empty clause separator

    Returns:
        Clauses in input order

    Raises:
        ValueError: If delimiter is empty

    Examples:
        >>> split_clauses('a=1&b="x&y"&c=3', '&')
        ['a=1', 'b="x&y"', 'c=3']
        >>> split_clauses('&a=1&', '&')
        ['', 'a=1']
    """
    if not delimiter:
        msg = 'delimiter must not be empty'
        raise ValueError(msg)

    clauses: list[str] = []
    length = len(text)
    start = 0

    while start < length:
        in_quote = False
        boundary = text.find(delimiter, start)
        pos = start
        while pos < length:
            if not in_quote:
                if boundary != -1 and boundary < pos:
                    # An escape skipped over the candidate, look for the next one
                    boundary = text.find(delimiter, pos)
                if pos == boundary:
                    break
            char = text[pos]
            if char == ESCAPE:
                pos += 2
                continue
            if char == QUOTE:
                in_quote = not in_quote
                if not in_quote:
                    boundary = text.find(delimiter, pos + 1)
            pos += 1

        if pos < length:
            clauses.append(text[start:pos])
            start = pos + len(delimiter)
        else:
            if in_quote:
                logger.debug(f'Unterminated quote at offset {start}, keeping remaining text as one clause')
            clauses.append(text[start:])
            break

    logger.debug(f'Split query into {len(clauses)} clauses')
    return clauses
