"""Object relation tree used to express hierarchical relations between objects."""

from __future__ import annotations

import itertools
from collections import deque
from collections.abc import Iterator

from scenemodel.objects import ObjectSet


def _node_type(node: TreeNode) -> str:
    return node.object_set.objects[0].type


def _remove_by_identity(nodes: list[TreeNode], target: TreeNode) -> None:
    for position, node in enumerate(nodes):
        if node is target:
            del nodes[position]
            return


class TreeNode:
    """A node of the object relation tree.

    Each node stands for one object, given by the trajectory of its
    observations. A reference node stands in for another node of the tree,
    has no children and points to that node through ``reference_to``.
    """

    def __init__(self, object_set: ObjectSet) -> None:
        self.object_set = object_set
        self.parent: TreeNode | None = None
        self.children: list[TreeNode] = []
        self.is_reference = False
        self.reference_to: TreeNode | None = None
        self.id = 0

    def copy(self) -> TreeNode:
        """Return a new root node sharing this node's object set and children.

        The children are not copied; they are attached to the new node and
        their parent is set to it.
        """
        duplicate = TreeNode(self.object_set)
        for child in list(self.children):
            duplicate.add_child(child)
        return duplicate

    def set_new_root_node_by_type(self, object_type: str) -> TreeNode:
        """Rebuild the tree so the first node of ``object_type`` becomes root.

        The search is breadth first from this node along children and parents;
        reference nodes are never chosen. Returns the new root node.
        """
        new_root = self._find_by_type(object_type)
        if new_root is None:
            raise ValueError(f"no node of type {object_type!r} in the tree")

        if new_root.parent is not None:
            new_root.parent._reassign_new_parent_node(new_root)
            new_root.parent = None

        for reversed_reference in new_root._update_references(new_root):
            new_root.add_child(reversed_reference)

        new_root.set_ids()
        return new_root

    def add_child(self, child: TreeNode) -> None:
        """Append ``child`` to the children and make this node its parent."""
        child.parent = self
        self.children.append(child)

    def number_of_nodes(self) -> int:
        """Return the number of nodes in the subtree rooted here."""
        return 1 + sum(child.number_of_nodes() for child in self.children)

    def format_tree(self, space: int = 0) -> str:
        """Return the tree as text, one node per line, indented by depth."""
        return "".join(self._format_lines(space))

    def print_tree(self, space: int = 0) -> None:
        """Print the tree to standard output."""
        print(self.format_tree(space), end="")

    def set_ids(self) -> None:
        """Number the nodes depth first, non-reference nodes before references."""
        self.id = 0
        counter = itertools.count(1)
        for child in self.children:
            child._update_ids(counter, update_references=False)
        for child in self.children:
            child._update_ids(counter, update_references=True)

    def _find_by_type(self, object_type: str) -> TreeNode | None:
        to_visit: deque[TreeNode] = deque([self])
        visited: set[int] = set()
        while to_visit:
            node = to_visit.popleft()
            if id(node) in visited:
                continue
            visited.add(id(node))
            if node.is_reference:
                continue
            if _node_type(node) == object_type:
                return node
            to_visit.extend(node.children)
            if node.parent is not None:
                to_visit.append(node.parent)
        return None

    def _format_lines(self, space: int) -> Iterator[str]:
        referencing = self.id
        if self.is_reference and self.reference_to is not None:
            referencing = self.reference_to.id
        yield (
            f"{' ' * space}-{_node_type(self)}"
            f"({len(self.children)}/{len(self.object_set.objects)})"
            f" ID {self.id} -> {referencing}\n"
        )
        if not self.is_reference:
            for child in self.children:
                yield from child._format_lines(space + 1)

    def _reassign_new_parent_node(self, parent: TreeNode) -> None:
        if self.parent is not None:
            self.parent._reassign_new_parent_node(self)

        self.parent = parent
        parent.children.append(self)
        _remove_by_identity(self.children, parent)

        for reversed_reference in self._update_references(self):
            self.add_child(reversed_reference)

    def _update_ids(self, counter: Iterator[int], update_references: bool) -> None:
        if (not self.is_reference) ^ update_references:
            self.id = next(counter)
        if not self.is_reference:
            for child in self.children:
                child._update_ids(counter, update_references)

    def _update_references(self, root: TreeNode) -> list[TreeNode]:
        """Flip references pointing at ``root`` so they point out of it instead."""
        if self.is_reference:
            return []
        reversed_references: list[TreeNode] = []
        to_delete: list[TreeNode] = []
        for child in self.children:
            if child.is_reference:
                if child.reference_to is root:
                    reversed_reference = TreeNode(self.object_set)
                    reversed_reference.reference_to = self
                    reversed_reference.is_reference = True
                    reversed_references.append(reversed_reference)
                    to_delete.append(child)
            else:
                reversed_references.extend(child._update_references(root))
        for child in to_delete:
            _remove_by_identity(self.children, child)
        return reversed_references