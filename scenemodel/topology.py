"""A candidate topology of object relations and its evaluation results."""

from __future__ import annotations

from dataclasses import dataclass, field

from scenemodel.relation import Relation
from scenemodel.tree_node import TreeNode


@dataclass
class Topology:
    """A set of relations with its identifier, evaluation results and cost."""

    relations: list[Relation] = field(default_factory=list)
    identifier: str = ""
    used_in_optimization: bool = False
    _average_recognition_runtime: float = field(default=0.0, init=False, repr=False)
    _false_positives: float = field(default=0.0, init=False, repr=False)
    _false_negatives: float = field(default=0.0, init=False, repr=False)
    _evaluated: bool = field(default=False, init=False, repr=False)
    _cost: float = field(default=0.0, init=False, repr=False)
    _cost_valid: bool = field(default=False, init=False, repr=False)
    _tree: TreeNode | None = field(default=None, init=False, repr=False)

    def set_evaluation_result(
        self,
        average_recognition_runtime: float,
        false_positives: float,
        false_negatives: float,
    ) -> None:
        """Store the results of evaluating this topology."""
        self._average_recognition_runtime = average_recognition_runtime
        self._false_positives = false_positives
        self._false_negatives = false_negatives
        self._evaluated = True

    def _require_evaluated(self, what: str) -> None:
        if not self._evaluated:
            raise RuntimeError(
                f"trying to access {what} without having evaluated the topology first"
            )

    @property
    def average_recognition_runtime(self) -> float:
        """Average recognition runtime; raises if not evaluated."""
        self._require_evaluated("average recognition runtime")
        return self._average_recognition_runtime

    @property
    def false_positives(self) -> float:
        """Number of false positives; raises if not evaluated."""
        self._require_evaluated("number of false positives")
        return self._false_positives

    @property
    def false_negatives(self) -> float:
        """Number of false negatives; raises if not evaluated."""
        self._require_evaluated("number of false negatives")
        return self._false_negatives

    @property
    def is_evaluated(self) -> bool:
        return self._evaluated

    def set_cost(self, cost: float) -> None:
        """Store the cost of this topology."""
        self._cost = cost
        self._cost_valid = True

    @property
    def cost(self) -> float:
        """The cost; raises if it has not been set."""
        if not self._cost_valid:
            raise RuntimeError("trying to access cost without having calculated it first")
        return self._cost

    @property
    def is_cost_valid(self) -> bool:
        return self._cost_valid

    @property
    def tree(self) -> TreeNode:
        """The root of the tree; raises if no tree has been set.

        The stored node may have become an inner node after the tree was
        rearranged, so the parent links are followed up to the root.
        """
        if self._tree is None:
            raise RuntimeError("trying to access tree without having set it first")
        while self._tree.parent is not None:
            self._tree = self._tree.parent
        return self._tree

    @tree.setter
    def tree(self, tree: TreeNode | None) -> None:
        self._tree = tree

    @property
    def is_tree_valid(self) -> bool:
        return self._tree is not None