"""
Breadth-first search over the implicit word-ladder graph.

Graph:
  - nodes = words of one WordSet
  - edges = pairs accepted by adjacency.are_adjacent

Two queries:
  - shortest_path(start, end): one minimum-edge chain, or [] if none
  - distances_from(source):    BFS depth of every word reachable from source

Neighbor lookup (default) scans the WHOLE WordSet for each dequeued word:
O(|V|) per expansion, zero preprocessing. Passing use_index=True builds a
wildcard-bucket index once ("C_T" -> {CAT, COT, CUT}) and answers neighbors
from the buckets instead. Both modes return the same distances; only the
cost of a lookup differs.

Sentinels, never exceptions:
  - word not in the WordSet   -> [] / {}
  - no path (disconnected)    -> [] / key absent
"""

from __future__ import annotations

from collections import defaultdict, deque
from typing import Deque, Dict, List, Optional, Set

from .adjacency import are_adjacent, wildcard_keys
from .wordset import WordSet

DistanceMap = Dict[str, int]
Chain = List[str]


class ShortestPathEngine:
    def __init__(self, word_set: WordSet, *, use_index: bool = False):
        self.word_set = word_set
        self.use_index = use_index
        self._buckets: Optional[Dict[str, Set[str]]] = None

    # ---- neighbor lookup ----
    def _build_index(self) -> Dict[str, Set[str]]:
        buckets: Dict[str, Set[str]] = defaultdict(set)
        for w in self.word_set:
            for key in wildcard_keys(w):
                buckets[key].add(w)
        return dict(buckets)

    def neighbors(self, word: str) -> List[str]:
        """All words in the set exactly one letter away from `word`."""
        if not self.use_index:
            return [w for w in self.word_set if are_adjacent(w, word)]

        if self._buckets is None:
            self._buckets = self._build_index()
        out: Set[str] = set()
        for key in wildcard_keys(word):
            out.update(self._buckets.get(key, ()))
        out.discard(word)
        # Keep scan-mode ordering so both modes discover ties identically.
        return sorted(out)

    # ---- queries ----
    def shortest_path(self, start: str, end: str) -> Chain:
        """
        Minimum-edge chain from `start` to `end` (both endpoints included).

        Strict FIFO: the first time `end` is dequeued its path is minimal.
        Among equally short chains the one returned depends on discovery
        order; callers must not rely on which one they get.
        """
        if start not in self.word_set or end not in self.word_set:
            return []

        parent: Dict[str, Optional[str]] = {start: None}
        queue: Deque[str] = deque([start])

        while queue:
            current = queue.popleft()
            if current == end:
                return self._unwind(parent, end)
            for nxt in self.neighbors(current):
                if nxt not in parent:
                    parent[nxt] = current
                    queue.append(nxt)

        return []

    def distances_from(self, source: str) -> DistanceMap:
        """
        BFS depth from `source` to every word reachable from it.

        Unreachable words are absent. The graph is undirected, so this is
        also the distance TO `source` from every word.
        """
        if source not in self.word_set:
            return {}

        dist: DistanceMap = {source: 0}
        queue: Deque[str] = deque([source])
        while queue:
            current = queue.popleft()
            d = dist[current] + 1
            for nxt in self.neighbors(current):
                if nxt not in dist:
                    dist[nxt] = d
                    queue.append(nxt)
        return dist

    @staticmethod
    def _unwind(parent: Dict[str, Optional[str]], end: str) -> Chain:
        path: Chain = []
        node: Optional[str] = end
        while node is not None:
            path.append(node)
            node = parent[node]
        path.reverse()
        return path
