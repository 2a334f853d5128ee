from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, NamedTuple, Tuple, Union

DEFAULT_DELIMITER = "/"


@dataclass(frozen=True)
class Options:
    """Options shared by the tokenizer, the compiler and the matcher.

    An empty ``whitelist`` places no restriction on prefixes: the last
    character of the literal text before a parameter always becomes that
    parameter's prefix. A non-empty ``whitelist`` limits prefixes to its
    members.
    """

    delimiter: str = DEFAULT_DELIMITER
    whitelist: FrozenSet[str] = field(default_factory=frozenset)
    strict: bool = False
    sensitive: bool = False
    start: bool = True
    end: bool = True
    ends_with: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.delimiter, str) or len(self.delimiter) != 1:
            raise ValueError(f"'{self.delimiter}' is not a single character delimiter")
        object.__setattr__(self, "whitelist", frozenset(self.whitelist))
        object.__setattr__(self, "ends_with", _as_tuple(self.ends_with))


def _as_tuple(value: Union[str, Iterable[str]]) -> Tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    return tuple(value)


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class Token:
    """Parameter placeholder parsed from a template."""

    name: str
    prefix: str
    delimiter: str
    optional: bool
    repeat: bool
    pattern: str


Segment = Union[Literal, Token]


class Match(NamedTuple):
    name: str
    value: str
