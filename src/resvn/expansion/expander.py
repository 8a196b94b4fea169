"""Placeholder expansion of svn command templates.

Placeholders, substituted per matched repository:

    @   repository URL (only as the first character of an argument)
    ^   repository base name
    &   preceding argument, trailing "/" removed
    $   last path component of "&"
    !   parent path component of "&"
"""

import posixpath

from resvn.core.models.command import PlaceholderContext

URL_PLACEHOLDER = "@"
NAME_PLACEHOLDER = "^"
PRECEDING_PLACEHOLDER = "&"
BASENAME_PLACEHOLDER = "$"
PARENT_PLACEHOLDER = "!"

SEPARATOR = "/"


def trim_trailing(text: str, char: str = SEPARATOR, keep_sole: bool = True) -> str:
    """Strip a trailing run of char.

    If text consists only of char, a single char is kept when keep_sole is
    set (so "/" stays the root) and the empty string returned otherwise.
    """
    if not text:
        return text
    trimmed = text.rstrip(char)
    if not trimmed:
        return char if keep_sole else ""
    return trimmed


def last_component(path: str) -> str:
    """Final element of a slash-separated path, "." for an empty path."""
    if not path:
        return "."
    stripped = path.rstrip(SEPARATOR)
    if not stripped:
        return SEPARATOR
    return posixpath.basename(stripped)


def parent_component(path: str) -> str:
    """Final element of the parent of a slash-separated path."""
    return last_component(posixpath.dirname(path))


def expand(token: str, url: str, base_name: str, preceding: str = "") -> str:
    """Expand all placeholders in one argument token."""
    if token.startswith(URL_PLACEHOLDER):
        token = url + token[len(URL_PLACEHOLDER):]

    preceding = trim_trailing(preceding)

    # $ and ! are derived from the value substituted for &
    token = token.replace(NAME_PLACEHOLDER, base_name)
    token = token.replace(PRECEDING_PLACEHOLDER, preceding)
    token = token.replace(BASENAME_PLACEHOLDER, last_component(preceding))
    token = token.replace(PARENT_PLACEHOLDER, parent_component(preceding))
    return token


def expand_in_context(token: str, context: PlaceholderContext) -> str:
    return expand(token, context.url, context.base_name, context.preceding)


def expand_command(template: list[str], url: str, base_name: str) -> list[str]:
    """Expand a whole template left to right.

    Each token sees the already expanded previous token as its preceding
    argument; the first token sees an empty one.
    """
    expanded: list[str] = []
    for token in template:
        context = PlaceholderContext(
            url=url,
            base_name=base_name,
            preceding=expanded[-1] if expanded else "",
        )
        expanded.append(expand_in_context(token, context))
    return expanded
