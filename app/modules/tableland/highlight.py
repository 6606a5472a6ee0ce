"""Mark the character a syntax error points at."""

import re

ERROR_POSITION = re.compile(r"syntax error at position ([0-9]+)")
MARKER = "⚠️"


def highlight(message: str, query: str) -> str:
    """Return ``query`` with the character named by ``message`` marked.

    ``message`` is a validator diagnostic such as
    ``"syntax error at position 5 near 'T'"``; the position is 1-based. The
    character at that position is followed by a warning sign. When the
    message carries no position, or the position falls outside the query,
    the query is returned unchanged.

        >>> highlight("syntax error at position 5 near token", "SELECT* FROM t")
        'SELEC⚠️T* FROM t'
    """
    if not isinstance(message, str) or not isinstance(query, str):
        return query

    match = ERROR_POSITION.search(message)
    if match is None:
        return query

    # More digits than the query length has cannot be in range
    digits = match.group(1).lstrip("0") or "0"
    if len(digits) > len(str(len(query))):
        return query

    position = int(digits)
    if position < 1 or position > len(query):
        return query

    index = position - 1
    return query[:index] + query[index] + MARKER + query[index + 1 :]
