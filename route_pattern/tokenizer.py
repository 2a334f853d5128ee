"""Template tokenizer."""

import logging
import re
from typing import List, Optional

from route_pattern.patterns import escape_group_expr, escape_string_expr, path_expr
from route_pattern.types import Literal, Options, Segment, Token

log = logging.getLogger(__name__)


def escape_string(string: str) -> str:
    """Escape regex metacharacters in literal text."""
    return escape_string_expr.sub(r"\\\1", string)


def _escape_group_char(res: "re.Match[str]") -> str:
    escaped, special = res.groups()
    return escaped or f"\\{special}"


def escape_group(group: str) -> str:
    """Escape characters with a special meaning inside a capturing group."""
    return escape_group_expr.sub(_escape_group_char, group)


def _default_pattern(delimiter: str, default_delimiter: str) -> str:
    if delimiter == default_delimiter:
        delimiters = delimiter
    else:
        delimiters = delimiter + default_delimiter
    return f"[^{escape_string(delimiters)}]+?"


def tokenize(text: str, options: Optional[Options] = None) -> List[Segment]:
    """Split a template into literal and parameter segments.

    Scanning is permissive: anything that is not an escape or a parameter
    marker (stray backslashes, unbalanced parentheses) stays literal text.
    """
    options = options or Options()
    default_delimiter = options.delimiter
    whitelist = options.whitelist

    segments: List[Segment] = []
    key = 0
    index = 0
    path = ""
    path_escaped = False

    for res in path_expr.finditer(text):
        path += text[index : res.start()]
        index = res.end()

        escaped = res.group(1)
        if escaped:
            path += escaped[1]
            path_escaped = True
            continue

        name, capture, group, modifier = res.group(2, 3, 4, 5)

        prev = ""
        if path and not path_escaped:
            c = path[-1]
            if not whitelist or c in whitelist:
                prev = c
                path = path[:-1]

        if path:
            segments.append(Literal(path))
            path = ""
        path_escaped = False

        delimiter = prev[0] if prev else default_delimiter
        pattern = capture or group
        if pattern:
            pattern = escape_group(pattern)
        else:
            pattern = _default_pattern(delimiter, default_delimiter)

        if not name:
            name = str(key)
            key += 1

        segments.append(
            Token(
                name=name,
                prefix=prev,
                delimiter=delimiter,
                optional=modifier in ("?", "*"),
                repeat=modifier in ("+", "*"),
                pattern=pattern,
            )
        )

    # Push any remaining characters.
    path += text[index:]
    if path:
        segments.append(Literal(path))

    log.debug("Tokenized %r into %d segments", text, len(segments))
    return segments
