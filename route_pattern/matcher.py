"""Match text against a compiled route pattern."""

import logging
import re
from typing import List, Sequence, Union

from route_pattern.compiler import compile_source
from route_pattern.types import Match, Segment, Token

log = logging.getLogger(__name__)


def execute(
    pattern: Union[str, "re.Pattern[str]"], segments: Sequence[Segment], text: str
) -> List[Match]:
    """Return the parameter values captured from ``text``.

    An empty list means either no match or a match without parameters.
    Capture groups map to the parameter tokens of ``segments`` by position.
    A repeated parameter yields one value spanning every occurrence, e.g.
    "a/b/c" for "/:path+", since the whole repetition sits in one group.
    """
    regexp = compile_source(pattern) if isinstance(pattern, str) else pattern

    res = regexp.search(text)
    if res is None:
        log.debug("No match for %r", text)
        return []

    tokens = [segment for segment in segments if isinstance(segment, Token)]
    full = res.group(0)

    matches: List[Match] = []
    for token, value in zip(tokens, res.groups()):
        # Groups that did not participate are None, unlike an empty capture.
        if value is None:
            continue
        if len(value) == len(full):
            continue
        matches.append(Match(token.name, value))

    log.debug("Matched %r with %d parameters", text, len(matches))
    return matches


def match_str(
    text: str, regexp: Union[str, "re.Pattern[str]"], segments: Sequence[Segment]
) -> List[Match]:
    """Execute with the text given first."""
    return execute(regexp, segments, text)
