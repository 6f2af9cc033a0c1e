"""Position resolver — recover source ranges for diagnostics by text search.

The standard ``json`` parser discards source offsets, so every diagnostic
is re-anchored with a single forward line scan keyed on the quoted token
being reported. The first matching line wins: when the same literal
occurs on several lines the diagnostic lands on the earliest one. That
ambiguity is accepted; the range is still on a line carrying the token.
"""

from __future__ import annotations

import json
from typing import Any

from widget_schema.model.diagnostic import Range


def quote_token(value: Any) -> str:
    """Return *value* as it appears between double quotes in the search.

    Strings are used verbatim; other scalars are rendered the way JSON
    spells them (``true``, ``null``, ``5``).
    """
    if isinstance(value, str):
        text = value
    else:
        try:
            text = json.dumps(value)
        except (TypeError, ValueError):
            text = str(value)
    return f'"{text}"'


def resolve_property_position(
    text: str,
    property_name: str,
    expected_value: Any = None,
) -> Range:
    """Locate a property (or a property/value pair) in *text*.

    With *expected_value*, the first line containing both the quoted
    property name and the quoted value is used and the range spans the
    quoted value. Without it, the range spans the quoted property name on
    the first line containing it. No match yields :meth:`Range.zero`.
    """
    name_token = quote_token(property_name)
    # An empty expected value searches by name only.
    value_token = (
        quote_token(expected_value)
        if expected_value is not None and expected_value != ""
        else None
    )

    for index, line in enumerate(text.split("\n")):
        if name_token not in line:
            continue
        if value_token is None:
            start = line.index(name_token)
            return Range.from_coords(index, start, index, start + len(name_token))
        if value_token in line:
            start = line.index(value_token)
            return Range.from_coords(index, start, index, start + len(value_token))

    return Range.zero()


def resolve_key_value_position(text: str, key_value: Any) -> Range:
    """Anchor on the line carrying ``"key": "<key_value>"``."""
    return resolve_property_position(text, "key", key_value)
