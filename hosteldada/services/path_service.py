"""Shortest path search over the small campus graph."""

from __future__ import annotations

import heapq
import math
from collections import defaultdict
from typing import Iterable, Mapping

from hosteldada.domain.constraints import validate_edge_weights
from hosteldada.domain.models import Edge, Route
from hosteldada.utils.logger import get_logger


logger = get_logger(__name__)

Graph = Mapping[str, Mapping[str, float]]


class PathValidationError(Exception):
    """Raised when the graph or the query endpoints are invalid."""


def build_graph(edges: Iterable[Edge], *, directed: bool = False) -> dict[str, dict[str, float]]:
    """Turn an edge list into an adjacency mapping.

    Parallel edges keep the lightest weight.
    """
    edges = list(edges)
    try:
        validate_edge_weights(edges)
    except ValueError as exc:
        raise PathValidationError(str(exc)) from exc

    graph: dict[str, dict[str, float]] = defaultdict(dict)
    for edge in edges:
        pairs = [(edge.source, edge.target)]
        if not directed:
            pairs.append((edge.target, edge.source))
        for source, target in pairs:
            current = graph[source].get(target)
            if current is None or edge.weight < current:
                graph[source][target] = edge.weight
            graph.setdefault(target, {})
    return dict(graph)


def _graph_nodes(graph: Graph) -> set[str]:
    nodes = set(graph)
    for neighbours in graph.values():
        nodes.update(neighbours)
    return nodes


def _relax(graph: Graph, source: str) -> tuple[dict[str, float], dict[str, str]]:
    # Nodes that only appear as edge targets still count as graph nodes.
    distances = {node: math.inf for node in _graph_nodes(graph)}
    if source not in distances:
        raise PathValidationError(f"unknown source node '{source}'")
    distances[source] = 0
    previous: dict[str, str] = {}
    heap: list[tuple[float, str]] = [(0, source)]

    while heap:
        distance, node = heapq.heappop(heap)
        if distance > distances[node]:
            continue
        for neighbour, weight in graph.get(node, {}).items():
            if weight < 0:
                raise PathValidationError(
                    f"edge {node}-{neighbour} has negative weight {weight}"
                )
            candidate = distance + weight
            if candidate < distances.get(neighbour, math.inf):
                distances[neighbour] = candidate
                previous[neighbour] = node
                heapq.heappush(heap, (candidate, neighbour))
    return distances, previous


class PathFinder:
    """Answers single-source shortest path queries on a fixed graph."""

    def __init__(self, graph: Graph) -> None:
        self._graph = graph

    @classmethod
    def from_edges(cls, edges: Iterable[Edge], *, directed: bool = False) -> PathFinder:
        return cls(build_graph(edges, directed=directed))

    @property
    def nodes(self) -> list[str]:
        return sorted(_graph_nodes(self._graph))

    def shortest_path(self, source: str, destination: str) -> float:
        """Return the minimum total weight, or math.inf when unreachable."""
        distances, _ = _relax(self._graph, source)
        return distances.get(destination, math.inf)

    def shortest_route(self, source: str, destination: str) -> Route:
        distances, previous = _relax(self._graph, source)
        distance = distances.get(destination, math.inf)
        if math.isinf(distance):
            logger.info("Route unreachable | source=%s | destination=%s", source, destination)
            return Route(source=source, destination=destination, nodes=[], distance=math.inf)

        nodes = [destination]
        while nodes[-1] != source:
            nodes.append(previous[nodes[-1]])
        nodes.reverse()
        logger.debug(
            "Route found | source=%s | destination=%s | distance=%s | nodes=%s",
            source,
            destination,
            distance,
            nodes,
        )
        return Route(source=source, destination=destination, nodes=nodes, distance=distance)
