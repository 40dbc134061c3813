"""
Dotted-key helpers for nested translation trees.

A catalog tree is a JSON object. Objects are branches, everything else
(strings, numbers, null and arrays) is a leaf. Arrays are never walked into,
so ``flatten`` stops at the array itself.
"""

from typing import Any, Dict, List, Tuple

from .config import DEFAULT_NAMESPACE

NAMESPACE_SEPARATOR = ':'
PATH_SEPARATOR = '.'


class _NotFound:
    def __repr__(self) -> str:
        return 'NOT_FOUND'

    def __bool__(self) -> bool:
        return False


NOT_FOUND = _NotFound()


def is_branch(value: Any) -> bool:
    return isinstance(value, dict)


def flatten(tree: Dict[str, Any], prefix: str = '') -> List[str]:
    """Return the dotted path of every leaf, in document order."""
    keys = []
    for key, value in tree.items():
        full_key = f"{prefix}{PATH_SEPARATOR}{key}" if prefix else key
        if is_branch(value):
            keys.extend(flatten(value, full_key))
        else:
            keys.append(full_key)
    return keys


def resolve(tree: Dict[str, Any], path: str) -> Any:
    """Walk ``path`` through nested objects, returning NOT_FOUND when it breaks off."""
    current: Any = tree
    for segment in path.split(PATH_SEPARATOR):
        if not is_branch(current) or segment not in current:
            return NOT_FOUND
        current = current[segment]
    return current


def has_key(tree: Dict[str, Any], path: str) -> bool:
    return resolve(tree, path) is not NOT_FOUND


def remove_at_path(tree: Dict[str, Any], path: str) -> bool:
    """
    Delete the value at ``path`` and report whether anything was removed.

    Emptied parent objects are left in place.
    """
    *parents, last = path.split(PATH_SEPARATOR)
    parent = resolve(tree, PATH_SEPARATOR.join(parents)) if parents else tree
    if is_branch(parent) and last in parent:
        del parent[last]
        return True
    return False


def parse_reference(reference: str, default_namespace: str = DEFAULT_NAMESPACE) -> Tuple[str, str]:
    """
    Split a source reference into (namespace, key).

    Only the first colon separates the namespace; later colons belong to the key.
    A reference without a colon belongs to ``default_namespace``.
    """
    if NAMESPACE_SEPARATOR in reference:
        namespace, key = reference.split(NAMESPACE_SEPARATOR, 1)
        return namespace, key
    return default_namespace, reference


def qualify(namespace: str, key: str) -> str:
    return f"{namespace}{NAMESPACE_SEPARATOR}{key}"
