"""Route objects keeping a template's segments and compiled pattern together."""

import logging
import re
import sys
from dataclasses import fields
from typing import Dict, List, Optional, Tuple

from route_pattern.compiler import compile, compile_source
from route_pattern.matcher import execute
from route_pattern.tokenizer import tokenize
from route_pattern.types import Match, Options, Segment, Token

FORMAT_STRING = "[%(name)s] - [%(levelname)s] - %(message)s"

log = logging.getLogger("route_pattern")

OPTION_FIELDS = [f.name for f in fields(Options)]


def _already_configured(logger: logging.Logger) -> bool:
    if not logger.handlers:
        return False

    for handler in logger.handlers:
        if isinstance(handler, logging.StreamHandler):
            if handler.stream == sys.stdout:
                return True

    return False


def _configure_logging(debug: bool = False) -> None:
    if _already_configured(log):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(FORMAT_STRING))
    log.propagate = False
    if debug:
        level = logging.DEBUG
    else:
        level = logging.ERROR
    log.setLevel(level)
    log.addHandler(handler)


class Route:
    """Compiled route template."""

    def __init__(
        self,
        path: str,
        options: Optional[Options] = None,
        configure_logs: bool = False,
        debug: bool = False,
        **kwargs,
    ) -> None:
        """Tokenize and compile ``path`` once."""
        unknown = [key for key in kwargs if key not in OPTION_FIELDS]
        if unknown:
            raise TypeError(
                f"TypeError: Route() got unexpected keyword "
                f"arguments: {', '.join(unknown)}"
            )
        if options is not None and kwargs:
            raise TypeError("Route() takes either options or option keywords")

        if configure_logs:
            _configure_logging(debug)

        self.path = path
        self.options = options or Options(**kwargs)
        self.segments: List[Segment] = tokenize(path, self.options)
        self.source = compile(self.segments, self.options)
        self.regexp = compile_source(self.source)

    def __eq__(self, other) -> bool:
        """Check for equality."""
        if not isinstance(other, Route):
            return NotImplemented
        return self.path == other.path and self.options == other.options

    def __repr__(self) -> str:
        return f"Route({self.path!r})"

    @property
    def keys(self) -> List[Token]:
        """Parameter tokens in template order."""
        return [segment for segment in self.segments if isinstance(segment, Token)]

    def match(self, text: str) -> List[Match]:
        """Return the parameters captured from ``text``."""
        return execute(self.regexp, self.segments, text)

    def params(self, text: str) -> Dict[str, str]:
        """Return the parameters captured from ``text`` keyed by name."""
        return dict(self.match(text))


def path_to_regexp(
    path: str, options: Optional[Options] = None
) -> Tuple["re.Pattern[str]", List[Token]]:
    """Compile ``path`` and return the regex with its parameter keys."""
    route = Route(path, options)
    return route.regexp, route.keys
