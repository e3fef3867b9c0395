"""Transitive closure over duplicate pairs."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import combinations

import networkx as nx

from relprofile.dedup.models import Duplicate


def transitive_closure(duplicates: Iterable[Duplicate]) -> set[Duplicate]:
    """Add every duplicate pair implied by transitivity.

    If (1, 2) and (2, 3) are duplicates, (1, 3) is added. Input pairs are
    returned unchanged; inferred pairs are flagged ``inferred=True`` and carry
    the lowest similarity among the input pairs of their cluster.
    """
    closed: set[Duplicate] = set(duplicates)
    if len(closed) <= 1:
        return closed

    relations = {id(d.relation): d.relation for d in closed}
    for relation in relations.values():
        graph: nx.Graph = nx.Graph()  # type: ignore[type-arg]
        for d in closed:
            if d.relation is relation:
                graph.add_edge(d.index1, d.index2, similarity=d.similarity)

        for component in nx.connected_components(graph):
            if len(component) < 3:
                continue
            subgraph = graph.subgraph(component)
            floor = min(sim for _, _, sim in subgraph.edges(data="similarity"))
            for first, second in combinations(sorted(component), 2):
                if not graph.has_edge(first, second):
                    closed.add(Duplicate(first, second, floor, relation, inferred=True))

    return closed
