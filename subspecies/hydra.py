"""
Hydra Encoding of 亞 Terms

Terms whose subscripts are all numerals can be drawn as a "hydra": a rooted
tree whose nodes are labelled with natural numbers. The tree is stored as a
flat sequence of (depth, label) pairs in pre-order:
- 0 has no nodes
- a sum lists the nodes of its addends one after another
- 亞(n, b) is a node labelled n at depth 0, with the nodes of b one level below

Any other term has no hydra and term_to_hydra() returns None.

HydraLayout computes the drawing geometry (node centres, parents, canvas
size) as numpy arrays; actual drawing is left to the caller.
"""

from __future__ import annotations
from dataclasses import dataclass
from functools import cached_property
from typing import List, Optional, Tuple

import numpy as np

from .terms import Term, Zero, Sum, numeral_value, sanitize_plus


HYDRA_UNAVAILABLE = "This term cannot be drawn as a hydra"

ROOT = (-1, 0)


def term_to_hydra(t: Term) -> Optional[List[Tuple[int, int]]]:
    """The (depth, label) sequence of t, or None."""
    if isinstance(t, Zero):
        return []

    if isinstance(t, Sum):
        head = term_to_hydra(t.addends[0])
        if head is None:
            return None
        rest = term_to_hydra(sanitize_plus(t.addends[1:]))
        if rest is None:
            return None
        return head + rest

    label = numeral_value(t.sub)
    if label is None:
        return None
    below = term_to_hydra(t.arg)
    if below is None:
        return None
    return [(0, label)] + [(depth + 1, lab) for depth, lab in below]


@dataclass
class HydraLayout:
    """
    Drawing geometry for a hydra.

    Row 0 of `sequence` is the root (-1, 0). Depths are shifted by one so the
    root sits at depth 0; node i is centred at x = (i + 0.5) * node_distance,
    with deeper nodes drawn higher up the canvas.
    """
    sequence: np.ndarray            # (n, 2) int array of (depth, label)
    node_size: float = 50.0
    node_distance: float = 50.0

    @classmethod
    def from_term(
        cls,
        t: Term,
        node_size: float = 50.0,
        node_distance: float = 50.0,
    ) -> Optional[HydraLayout]:
        nodes = term_to_hydra(t)
        if nodes is None:
            return None
        sequence = np.array([ROOT] + nodes, dtype=np.int64).reshape(-1, 2)
        return cls(sequence=sequence, node_size=node_size, node_distance=node_distance)

    @property
    def n_nodes(self) -> int:
        return len(self.sequence)

    @cached_property
    def depths(self) -> np.ndarray:
        return self.sequence[:, 0] + 1

    @property
    def labels(self) -> np.ndarray:
        return self.sequence[:, 1]

    @cached_property
    def parents(self) -> np.ndarray:
        """Index of each node's parent: the nearest earlier node that is shallower (-1 for the root)."""
        depths = self.depths
        parents = np.full(self.n_nodes, -1, dtype=np.int64)
        for i in range(self.n_nodes):
            p = i - 1
            while p >= 0 and depths[p] >= depths[i]:
                p -= 1
            parents[i] = p
        return parents

    @property
    def max_depth(self) -> int:
        return int(self.depths.max())

    @property
    def width(self) -> float:
        return (0.5 + self.n_nodes) * self.node_distance

    @property
    def height(self) -> float:
        return (0.5 + self.max_depth) * self.node_distance + 0.5 * self.node_distance

    @cached_property
    def positions(self) -> np.ndarray:
        """(n, 2) float array of node centres on the canvas."""
        xs = (0.5 + np.arange(self.n_nodes)) * self.node_distance
        ys = (0.5 + self.max_depth - self.depths) * self.node_distance
        return np.stack([xs, ys.astype(np.float64)], axis=1)

    def edges(self) -> List[Tuple[int, int]]:
        """(parent, child) index pairs."""
        return [(int(p), i) for i, p in enumerate(self.parents) if p >= 0]

    def describe(self) -> str:
        """Indented text outline of the hydra, one node per line."""
        lines = ["*"]
        for depth, label in self.sequence[1:]:
            lines.append("  " * (int(depth) + 1) + str(int(label)))
        return "\n".join(lines)
