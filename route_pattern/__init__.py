"""route-pattern: compile Express-style route templates to regular expressions."""

from route_pattern.compiler import compile, compile_source, flags, to_regexp
from route_pattern.errors import PatternCompileError
from route_pattern.matcher import execute, match_str
from route_pattern.routing import Route, path_to_regexp
from route_pattern.tokenizer import escape_group, escape_string, tokenize
from route_pattern.types import DEFAULT_DELIMITER, Literal, Match, Options, Token

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_DELIMITER",
    "Literal",
    "Match",
    "Options",
    "PatternCompileError",
    "Route",
    "Token",
    "compile",
    "compile_source",
    "escape_group",
    "escape_string",
    "execute",
    "flags",
    "match_str",
    "path_to_regexp",
    "tokenize",
    "to_regexp",
]
