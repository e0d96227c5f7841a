"""Property name to accessor name conversion."""

from typing import Tuple

SEPARATORS = "_."

READ_PREFIXES: Tuple[str, ...] = ("get", "is", "has")
WRITE_PREFIX = "set"


def accessor_fragment(name: str) -> str:
    """
    Convert a snake/dot separated property name to its PascalCase fragment.

    Each run of ``_``/``.`` separators is dropped and the following character is
    uppercased. A run ending in ``.`` inside the name leaves a single ``_`` in
    front of the capital, so ``address.city`` becomes ``Address_City``; a
    leading dot run leaves nothing.

    Args:
        name: Property name, any string

    Returns:
        PascalCase fragment to append to ``get``/``is``/``has``/``set``
    """
    fragment = []
    at_boundary = True
    last_separator = ""

    for char in name:
        if char in SEPARATORS:
            at_boundary = True
            last_separator = char
            continue

        if at_boundary:
            if last_separator == "." and fragment:
                fragment.append("_")
            fragment.append(char.upper())
            at_boundary = False
            last_separator = ""
        else:
            fragment.append(char)

    return "".join(fragment)


def accessor_candidates(prefix: str, name: str) -> Tuple[str, ...]:
    """
    Method names probed for ``prefix`` and ``name``, most preferred first.

    The PascalCase form (``getFirstName``) comes first, followed by the
    snake_case form (``get_first_name``) when ``name`` is a valid identifier.
    Names made only of separators have no accessors.
    """
    fragment = accessor_fragment(name)
    if not fragment:
        return ()

    candidates = [f"{prefix}{fragment}"]
    if name.isidentifier():
        snake = f"{prefix}_{name}"
        if snake not in candidates:
            candidates.append(snake)
    return tuple(candidates)
