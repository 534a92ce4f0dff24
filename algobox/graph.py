"""Undirected graphs stored as adjacency lists and as an adjacency matrix."""

from __future__ import annotations


class AdjacencyListGraph:
    """An undirected graph keeping, per vertex, its neighbours in insertion order."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("vertex count must not be negative")
        self._adjacency: list[list[int]] = [[] for _ in range(vertices)]

    @property
    def vertices(self) -> int:
        return len(self._adjacency)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise IndexError(f"vertex {vertex} out of range")

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v``; an edge already present is left alone."""
        self._check(u)
        self._check(v)
        if v in self._adjacency[u]:
            return
        self._adjacency[u].append(v)
        if u != v and u not in self._adjacency[v]:
            self._adjacency[v].append(u)

    def neighbours(self, vertex: int) -> list[int]:
        """Neighbours of ``vertex`` in the order their edges were added."""
        self._check(vertex)
        return list(self._adjacency[vertex])

    def format(self) -> str:
        """A text listing of every vertex's adjacency list."""
        return "\n".join(
            f"The Adjacency list of vertex {vertex} is: \n head "
            + "".join(f"{neighbour} -> " for neighbour in neighbours)
            for vertex, neighbours in enumerate(self._adjacency)
        )


class AdjacencyMatrixGraph:
    """An undirected graph stored as a square matrix of 0/1 entries."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("vertex count must not be negative")
        self._matrix: list[list[int]] = [[0] * vertices for _ in range(vertices)]

    @property
    def vertices(self) -> int:
        return len(self._matrix)

    def _in_range(self, vertex: int) -> bool:
        return 0 <= vertex < len(self._matrix)

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v``; edges naming a missing vertex are ignored."""
        if self._in_range(u) and self._in_range(v):
            self._matrix[u][v] = 1
            self._matrix[v][u] = 1

    def has_edge(self, u: int, v: int) -> bool:
        """Whether ``u`` and ``v`` are connected."""
        if not (self._in_range(u) and self._in_range(v)):
            raise IndexError("vertex out of range")
        return self._matrix[u][v] == 1

    def format(self) -> str:
        """The matrix as a text table with vertex numbers on both axes."""
        header = "".join(f"    {vertex} " for vertex in range(len(self._matrix)))
        rows = [
            f"{vertex} " + "".join(f"| {cell} | " for cell in row)
            for vertex, row in enumerate(self._matrix)
        ]
        return "\n".join([header, *rows])