"""Command-bar grammar: one verb and at most one argument.

The grammar is minimal. There is no quoting or escaping, and
anything after the second whitespace-separated token is ignored, so
``cp a b`` means ``cp a``.
"""

from __future__ import annotations

VERB_MKDIR = "mkdir"
VERB_TOUCH = "touch"
VERB_RENAME = "mv"
VERB_COPY = "cp"
VERB_DELETE = "rm"
VERB_CD = "cd"
VERB_FIND = "find"
VERB_ZIP = "zip"
VERB_UNZIP = "unzip"

KNOWN_VERBS = frozenset(
    {VERB_MKDIR, VERB_TOUCH, VERB_RENAME, VERB_COPY, VERB_DELETE, VERB_CD, VERB_FIND, VERB_ZIP, VERB_UNZIP}
)


def parse_command(line: str) -> tuple[str, str]:
    """Split ``line`` into ``(verb, arg)``; missing parts are empty strings."""
    tokens = line.split(maxsplit=2)
    if not tokens:
        return "", ""
    if len(tokens) == 1:
        return tokens[0], ""
    return tokens[0], tokens[1]


__all__ = [
    "KNOWN_VERBS",
    "VERB_CD",
    "VERB_COPY",
    "VERB_DELETE",
    "VERB_FIND",
    "VERB_MKDIR",
    "VERB_RENAME",
    "VERB_TOUCH",
    "VERB_UNZIP",
    "VERB_ZIP",
    "parse_command",
]
