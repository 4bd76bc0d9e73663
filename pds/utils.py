"""
Path addressing helpers for nested form documents.

A path is a dot-separated list of keys where any key may carry one or more
[index] suffixes, e.g. 'workExperience[0].positionTitle' or
'personalInformation.residentialAddress.barangay'.

These helpers work on plain dict/list trees only.
"""

import re
from typing import Any, Dict, List, Union

PathToken = Union[str, int]

SEGMENT_PATTERN = re.compile(r'^([^.\[\]]+)((?:\[\d+\])*)$')
INDEX_PATTERN = re.compile(r'\[(\d+)\]')


def parse_path(path: str) -> List[PathToken]:
    """
    Split a path string into keys and list indexes.

    Args:
        path: Path such as 'references[2].name'

    Returns:
        Token list, e.g. ['references', 2, 'name']

    Raises:
        ValueError: If the path is empty or malformed
    """
    if not isinstance(path, str) or path == '':
        raise ValueError('Path must be a non-empty string')

    tokens: List[PathToken] = []
    for segment in path.split('.'):
        match = SEGMENT_PATTERN.match(segment)
        if not match:
            raise ValueError(f'Invalid path segment {segment!r} in {path!r}')
        tokens.append(match.group(1))
        tokens.extend(int(index) for index in INDEX_PATTERN.findall(match.group(2)))
    return tokens


def path_leaf(path: str) -> str:
    """Return the last key name of a path ('references[0].name' -> 'name')."""
    try:
        tokens = parse_path(path)
    except ValueError:
        return ''
    for token in reversed(tokens):
        if isinstance(token, str):
            return token
    return ''


def get_nested_value(obj: Any, path: str) -> Any:
    """
    Read the value at a path.

    Missing keys, out-of-range indexes, type mismatches along the way and
    malformed paths all yield None.
    """
    try:
        tokens = parse_path(path)
    except ValueError:
        return None

    current = obj
    for token in tokens:
        if isinstance(token, int):
            if not isinstance(current, list) or token >= len(current):
                return None
            current = current[token]
        else:
            if not isinstance(current, dict):
                return None
            current = current.get(token)
        if current is None:
            return None
    return current


def _child(container: Union[Dict, List], token: PathToken) -> Any:
    if isinstance(token, int):
        return container[token] if token < len(container) else None
    return container.get(token)


def _put(container: Union[Dict, List], token: PathToken, value: Any):
    if isinstance(token, int):
        while len(container) <= token:
            container.append(None)
    container[token] = value


def set_nested_value(obj: Dict[str, Any], path: str, value: Any):
    """
    Write a value at a path, creating missing intermediate containers.

    A missing (or wrongly typed) intermediate becomes a list when the next
    token is an index and a dict otherwise. Lists are padded with None up to
    the requested index.

    Raises:
        ValueError: If the path is malformed or the root is not a dict
    """
    tokens = parse_path(path)
    if not isinstance(obj, dict):
        raise ValueError('Root object must be a dict')

    current = obj
    for token, next_token in zip(tokens, tokens[1:]):
        child = _child(current, token)
        expected = list if isinstance(next_token, int) else dict
        if not isinstance(child, expected):
            child = expected()
            _put(current, token, child)
        current = child
    _put(current, tokens[-1], value)
