"""
Nested bracket field names.

Every stateful input a table emits is named ``form[segment1][segment2]...``.
The same path is used to read the value back out of the nested payload that
the submission decodes into. ``encode`` and ``decode`` are the two halves of
that contract; ``to_payload`` turns the flat pairs a browser submits into the
nested payload ``decode`` walks.
"""

import re
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

_SEGMENT_PATTERN = re.compile(r'\[([^\[\]]*)\]')


def encode(form_name: str, segments: Sequence[Any]) -> str:
    """
    Build the qualified submission key for a nested path.

    Example:
        >>> encode('cities', ['sort', 'city'])
        'cities[sort][city]'
    """
    return form_name + ''.join(f'[{segment}]' for segment in segments)


def decode(payload: Any, form_name: str, segments: Sequence[Any], default: Any = None) -> Any:
    """
    Look up a nested value under ``payload[form_name][segment]...``.

    Returns ``default`` when any level is missing or is not a mapping. An
    empty string found at the end of the path is a value, not an absence.
    """
    current = payload
    for key in [form_name, *segments]:
        if not isinstance(current, Mapping):
            return default
        key = str(key)
        if key not in current:
            return default
        current = current[key]
    return current


def split_field_name(name: str) -> Tuple[str, List[str]]:
    """
    Split a qualified field name into its form name and segments.

    A name whose bracket part is malformed is returned whole, with no
    segments, so it lands as a plain top-level key.

    Example:
        >>> split_field_name('cities[sort][city]')
        ('cities', ['sort', 'city'])
    """
    bracket = name.find('[')
    if bracket <= 0:
        return name, []

    head, rest = name[:bracket], name[bracket:]
    segments = []
    position = 0
    for match in _SEGMENT_PATTERN.finditer(rest):
        if match.start() != position:
            break
        segments.append(match.group(1))
        position = match.end()
    if position != len(rest):
        return name, []
    return head, segments


def to_payload(pairs: Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]) -> dict:
    """
    Nest flat ``name -> value`` submission pairs into a payload dict.

    Accepts a mapping (including Flask's ``MultiDict``, whose ``items()``
    yields the first value of each key) or an iterable of pairs. Later pairs
    overwrite earlier ones at the same path.

    Example:
        >>> to_payload({'cities[sort][city]': 'asc', 'page': '2'})
        {'cities': {'sort': {'city': 'asc'}}, 'page': '2'}
    """
    items = pairs.items() if isinstance(pairs, Mapping) else pairs
    payload: dict = {}
    for name, value in items:
        head, segments = split_field_name(str(name))
        if not segments:
            payload[head] = value
            continue
        _assign(payload, [head, *segments], value)
    return payload


def _assign(payload: dict, path: List[str], value: Any) -> None:
    node = payload
    for key in path[:-1]:
        child: Optional[Any] = node.get(key)
        if not isinstance(child, dict):
            child = {}
            node[key] = child
        node = child
    node[path[-1]] = value
