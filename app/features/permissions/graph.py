"""
Permission dependency graph.

A parent permission implies its children: a role holding a child must also
hold every parent above it, and losing a parent means losing every child
below it. The graph is built once and never changes afterwards.
"""
import json
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple

from app.core import config
from app.features.permissions.catalog import ALL_PERMISSIONS, DEFAULT_PERMISSION_TREE
from app.utils import get_logger


log = get_logger(__name__)


class PermissionGraph:
    """
    Immutable parent -> children implication map with a derived reverse index.

    Unknown permissions are leaves: they have no parents and no children.
    Traversals keep a visited set, so a misconfigured cyclic graph still
    terminates.
    """

    def __init__(self, tree: Mapping[str, Iterable[str]]):
        children: Dict[str, Tuple[str, ...]] = {}
        parents: Dict[str, List[str]] = {}

        for parent, kids in tree.items():
            # dict.fromkeys drops duplicates and keeps declaration order
            unique_kids = tuple(dict.fromkeys(kids))
            children[parent] = unique_kids
            for kid in unique_kids:
                parents.setdefault(kid, []).append(parent)

        self._children = MappingProxyType(children)
        self._parents = MappingProxyType({k: tuple(v) for k, v in parents.items()})

    def __repr__(self) -> str:
        return f"<PermissionGraph(parents={len(self._children)}, nodes={len(self.nodes)})>"

    def __contains__(self, permission: object) -> bool:
        return permission in self._children or permission in self._parents

    @property
    def nodes(self) -> FrozenSet[str]:
        """Every permission that appears in the graph as a parent or a child."""
        return frozenset(self._children) | frozenset(self._parents)

    def as_dict(self) -> Dict[str, List[str]]:
        return {parent: list(kids) for parent, kids in self._children.items()}

    def children(self, permission: str) -> Tuple[str, ...]:
        return self._children.get(permission, ())

    def parents(self, permission: str) -> Tuple[str, ...]:
        return self._parents.get(permission, ())

    def ancestors(self, permission: str) -> FrozenSet[str]:
        """All permissions that transitively imply ``permission``."""
        return self._walk(permission, self._parents)

    def descendants(self, permission: str) -> FrozenSet[str]:
        """All permissions transitively implied by ``permission``."""
        return self._walk(permission, self._children)

    def dangling(self, known: Iterable[str]) -> FrozenSet[str]:
        """Permissions referenced by the graph that are missing from ``known``."""
        return self.nodes - frozenset(known)

    @staticmethod
    def _walk(start: str, edges: Mapping[str, Tuple[str, ...]]) -> FrozenSet[str]:
        seen = set()
        stack = list(edges.get(start, ()))
        while stack:
            current = stack.pop()
            if current in seen:
                continue
            seen.add(current)
            stack.extend(edges.get(current, ()))
        return frozenset(seen)

    @classmethod
    def from_json_file(cls, path: str | Path) -> "PermissionGraph":
        """
        Build a graph from a JSON object mapping each parent to a list of children.

        Raises:
            ValueError: If the document is not an object of string lists
        """
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)

        if not isinstance(data, dict):
            raise ValueError(f"Permission tree in {path} must be a JSON object")
        for parent, kids in data.items():
            if not isinstance(kids, list) or not all(isinstance(k, str) for k in kids):
                raise ValueError(f"Children of {parent!r} in {path} must be a list of strings")

        return cls(data)


def load_permission_graph(path: Optional[str] = None) -> PermissionGraph:
    """
    Build the permission graph from ``path`` or, when empty, the built-in tree.

    References to permissions missing from the catalog are logged, not rejected.
    """
    if path:
        log.info("Loading permission tree from %s", path)
        graph = PermissionGraph.from_json_file(path)
    else:
        graph = PermissionGraph(DEFAULT_PERMISSION_TREE)

    unknown = graph.dangling(ALL_PERMISSIONS)
    if unknown:
        log.warning("Permission tree references unknown permissions: %s", sorted(unknown))

    return graph


@lru_cache(maxsize=1)
def get_permission_graph() -> PermissionGraph:
    """
    Process-wide graph, built on first use.

    Usage in FastAPI routes:
        @router.post("/resolve")
        async def resolve(graph: PermissionGraph = Depends(get_permission_graph)):
            ...
    """
    return load_permission_graph(config.PERMISSION_TREE_FILE)
