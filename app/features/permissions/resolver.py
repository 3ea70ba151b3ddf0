"""
Keeps a role's permission set closed under the dependency graph when a
single permission is switched on or off.
"""
from typing import FrozenSet, Iterable

from app.features.permissions.graph import PermissionGraph


def grant(permission: str, current: Iterable[str], graph: PermissionGraph) -> FrozenSet[str]:
    """Add ``permission`` and every permission above it in the graph."""
    return frozenset(current) | {permission} | graph.ancestors(permission)


def revoke(permission: str, current: Iterable[str], graph: PermissionGraph) -> FrozenSet[str]:
    """Remove ``permission`` and every permission below it in the graph."""
    return frozenset(current) - {permission} - graph.descendants(permission)


def toggle(permission: str, checked: bool, current: Iterable[str], graph: PermissionGraph) -> FrozenSet[str]:
    """Checkbox semantics of the role editor: checked grants, unchecked revokes."""
    if checked:
        return grant(permission, current, graph)
    return revoke(permission, current, graph)
