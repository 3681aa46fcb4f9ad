"""PackageRegistry — one NetworkX DiGraph holding every known package.

The registry is the arena: graph nodes are package names, and an edge
``A -> B`` means "A depends on B".  :class:`Package` is a handle onto one
node; its relations are read straight from the graph, so both directions
stay symmetric by construction.

Entries are created lazily on first reference and never pruned.  Edge
insertion order is preserved by the graph's adjacency dicts, which fixes
the order dependencies are visited in.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import networkx as nx

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)

_Graph = nx.DiGraph


class Package:
    """A named vertex in the dependency graph.

    Create packages through :meth:`PackageRegistry.get`, never directly,
    so each name maps to exactly one instance.
    """

    __slots__ = ("_graph", "_registry", "name")

    def __init__(self, name: str, registry: PackageRegistry) -> None:
        self.name = name
        self._registry = registry
        self._graph = registry.graph

    @property
    def dependencies(self) -> list[Package]:
        """Packages this one depends on, in the order the edges were added."""
        return [self._registry.get(n) for n in self._graph.successors(self.name)]

    @property
    def dependents(self) -> list[Package]:
        """Packages that depend on this one, in the order the edges were added."""
        return [self._registry.get(n) for n in self._graph.predecessors(self.name)]

    def depends_on(self, other: Package) -> bool:
        return self._graph.has_edge(self.name, other.name)

    def add_dependency(self, other: Package) -> None:
        """Record that this package depends on *other*.

        Idempotent: adding an existing edge is a no-op.
        """
        if self._graph.has_edge(self.name, other.name):
            return
        self._graph.add_edge(self.name, other.name)
        logger.debug("Added dependency %s -> %s", self.name, other.name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Package):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"Package({self.name!r})"


class PackageRegistry:
    """Deduplicating factory and cache for :class:`Package` handles."""

    def __init__(self) -> None:
        self._graph: _Graph = nx.DiGraph()
        self._packages: dict[str, Package] = {}

    @property
    def graph(self) -> _Graph:
        """The underlying dependency graph (edges point at dependencies)."""
        return self._graph

    def get(self, name: str) -> Package:
        """Return the package called *name*, creating it on first reference."""
        pkg = self._packages.get(name)
        if pkg is None:
            self._graph.add_node(name)
            pkg = Package(name, self)
            self._packages[name] = pkg
        return pkg

    def find(self, name: str) -> Package | None:
        """Return the package called *name*, or None if it was never referenced."""
        return self._packages.get(name)

    def names(self) -> list[str]:
        """All known package names, in first-reference order."""
        return list(self._packages)

    def would_create_cycle(self, name: str, dependency: str) -> bool:
        """Check whether adding the edge ``name -> dependency`` closes a cycle.

        A package depending on itself counts as a cycle.  Names that are not
        yet registered cannot be part of a cycle.
        """
        if name == dependency:
            return True
        if name not in self._graph or dependency not in self._graph:
            return False
        return nx.has_path(self._graph, dependency, name)

    def __contains__(self, name: object) -> bool:
        return name in self._packages

    def __len__(self) -> int:
        return len(self._packages)

    def __iter__(self) -> Iterator[Package]:
        return iter(list(self._packages.values()))
