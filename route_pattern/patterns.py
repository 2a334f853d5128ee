"""Regex patterns for template scanning and escaping."""

import re

# Template scanning expression. Alternatives, in priority order:
#
# "\\X"           => ["\\X", NONE, NONE, NONE, NONE]
# ":test(\\d+)?"  => [NONE, "test", "\\d+", NONE, "?"]
# "(\\d+)"        => [NONE, NONE, NONE, "\\d+", NONE]
path_expr = re.compile(
    "|".join(
        [
            r"(\\.)",
            r"(?::(\w+)(?:\(((?:\\.|[^\\()])+)\))?|\(((?:\\.|[^\\()])+)\))([+*?])?",
        ]
    )
)

# Characters with a special meaning anywhere in a regular expression.
escape_string_expr = re.compile(r"([.+*?=^!:${}()\[\]|/\\])")

# Characters with a special meaning inside a capturing group. Escape pairs
# already written by the template author are matched first and kept as is.
escape_group_expr = re.compile(r"(\\.)|([=!:$/()])")
