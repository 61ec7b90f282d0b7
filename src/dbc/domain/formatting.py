"""Message formatting and scanning helpers for the validation engine.

Everything here is pure and only ever runs once a check has already failed,
except ``index_of_null_element`` and ``is_blank`` which are the checks
themselves.
"""

from __future__ import annotations

import re
from typing import Any, Iterable

# printf-style conversion specifier, e.g. %s, %5d, %-.2f, %*d
_SPECIFIER = re.compile(
    r"%(?P<flags>[#0\- +]*)(?P<width>\*|\d+)?(?:\.(?P<precision>\*|\d*))?[hlL]?"
    r"(?P<type>[diouxXeEfFgGcrsa%])"
)


def _arity(template: str) -> int:
    """Number of positional arguments the template consumes."""
    count = 0
    for match in _SPECIFIER.finditer(template):
        if match.group("type") == "%":
            continue
        count += 1
        if match.group("width") == "*":
            count += 1
        if match.group("precision") == "*":
            count += 1
    return count


def format_message(template: str, *args: Any) -> str:
    """Substitute ``args`` into a printf-style ``template``.

    Without arguments the template is returned as is.  Arguments beyond what
    the template asks for are ignored; too few raise ``TypeError``.
    """
    if template is None:
        raise TypeError("message template must not be None")
    if not args:
        return template
    return template % args[: _arity(template)]


def index_of_null_element(iterable: Iterable[Any]) -> int:
    """Return the index of the first None in ``iterable``, or -1."""
    for index, element in enumerate(iterable):
        if element is None:
            return index
    return -1


def is_blank(chars: str | None) -> bool:
    return chars is None or len(chars) == 0 or chars.isspace()


def type_name(cls: type | None) -> str:
    """Fully qualified name of a type; builtins are left unqualified."""
    if cls is None:
        return "None"
    module = getattr(cls, "__module__", None)
    qualname = getattr(cls, "__qualname__", None) or repr(cls)
    if module in (None, "builtins"):
        return qualname
    return f"{module}.{qualname}"
