# borders/debug.py
"""Debug-text conversion: a structured representation with strings quoted.

Strings are always wrapped in double quotes, containers are rendered
element by element with the same rules, and anything else falls back to
``repr``. Objects can take over by defining ``__debug_text__()``.

Only the exact built-in container types are expanded. Subclasses such as
``Counter``, ``OrderedDict``, ``defaultdict`` or namedtuples keep their own
``repr``, so strings nested inside them use single quotes.

Example:
    >>> debug_text("hello")
    '"hello"'
    >>> debug_text({"a": [1, "b"]})
    '{"a": [1, "b"]}'
"""

from typing import Any, Set

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

# Exact types only; subclasses such as namedtuples keep their own repr
_CONTAINERS = (list, tuple, dict, set, frozenset)


def quote(text: str) -> str:
    """Wrap text in double quotes, escaping quotes and control characters."""
    parts = []
    for char in text:
        if char in _ESCAPES:
            parts.append(_ESCAPES[char])
        elif char.isprintable():
            parts.append(char)
        else:
            # e.g. \x00 or \u200b, without repr's surrounding quotes
            parts.append(repr(char)[1:-1])
    return '"' + "".join(parts) + '"'


def debug_text(value: Any) -> str:
    """Return the debug representation of value.

    Args:
        value: Any object.

    Returns:
        Structured text, with strings (including nested ones) quoted.
    """
    return _render(value, set())


def _render(value: Any, active: Set[int]) -> str:
    hook = getattr(type(value), "__debug_text__", None)
    if hook is not None:
        return hook(value)
    if isinstance(value, str):
        return quote(value)

    if type(value) in _CONTAINERS:
        marker = id(value)
        if marker in active:
            return _recursion_placeholder(value)
        active.add(marker)
        try:
            return _render_container(value, active)
        finally:
            active.discard(marker)

    return repr(value)


def _render_container(value: Any, active: Set[int]) -> str:
    if isinstance(value, dict):
        body = ", ".join(
            f"{_render(k, active)}: {_render(v, active)}" for k, v in value.items()
        )
        return "{" + body + "}"

    items = [_render(item, active) for item in value]
    if isinstance(value, list):
        return "[" + ", ".join(items) + "]"
    if isinstance(value, tuple):
        if len(items) == 1:
            return "(" + items[0] + ",)"
        return "(" + ", ".join(items) + ")"
    if not items:
        return f"{type(value).__name__}()"
    return "{" + ", ".join(items) + "}"


def _recursion_placeholder(value: Any) -> str:
    if isinstance(value, list):
        return "[...]"
    if isinstance(value, tuple):
        return "(...)"
    return "{...}"
