"""Compile template segments into a regular expression."""

import logging
import re
from typing import Optional, Sequence

from route_pattern.errors import PatternCompileError
from route_pattern.tokenizer import escape_string
from route_pattern.types import Literal, Options, Segment, Token

log = logging.getLogger(__name__)


def flags(route: str, options: Options) -> str:
    """Apply the case-insensitive inline flag unless matching is sensitive."""
    if not options.sensitive:
        # Python only accepts global inline flags at the start.
        return f"(?i){route}"
    return route


def _capture(token: Token) -> str:
    if token.repeat:
        delimiter = escape_string(token.delimiter)
        return f"(?:{token.pattern})(?:{delimiter}(?:{token.pattern}))*"
    return token.pattern


def _is_end_delimited(segments: Sequence[Segment], delimiter: str) -> bool:
    if not segments:
        return True
    last = segments[-1]
    if isinstance(last, Literal):
        return last.text[-1] == delimiter
    return False


def compile(segments: Sequence[Segment], options: Optional[Options] = None) -> str:
    """Build the pattern source for a tokenized template.

    The result holds exactly one capturing group per parameter token, in
    segment order.
    """
    options = options or Options()
    delimiter = escape_string(options.delimiter)
    ends_with = "|".join([escape_string(s) for s in options.ends_with] + ["$"])

    route = "^" if options.start else ""
    for segment in segments:
        if isinstance(segment, Literal):
            route += escape_string(segment.text)
            continue

        prefix = escape_string(segment.prefix)
        capture = _capture(segment)
        if segment.optional:
            # The prefix is optional together with the value, so "/user/:id?"
            # also matches "/user". This replaces the older shape that emitted
            # a bare "(capture)" for prefixed optional tokens, which could
            # match neither "/user" nor "/user/7". The group never captures
            # the prefix.
            route += f"(?:{prefix}({capture}))?"
        else:
            route += f"{prefix}({capture})"

    if options.end:
        if not options.strict:
            route += f"(?:{delimiter})?"
        route += "$" if not options.ends_with else f"(?={ends_with})"
    else:
        if not options.strict:
            route += f"(?:{delimiter}(?={ends_with}))?"
        # Keeps "/user" from matching the start of "/username".
        if not _is_end_delimited(segments, options.delimiter):
            route += f"(?={delimiter}|{ends_with})"

    route = flags(route, options)
    log.debug("Compiled route pattern %s", route)
    return route


def compile_source(source: str) -> "re.Pattern[str]":
    """Build the regex object, raising PatternCompileError when invalid."""
    try:
        return re.compile(source)
    except re.error as exc:
        raise PatternCompileError(source, str(exc)) from exc


def to_regexp(
    segments: Sequence[Segment], options: Optional[Options] = None
) -> "re.Pattern[str]":
    """Compile segments straight into a regex object."""
    return compile_source(compile(segments, options))
