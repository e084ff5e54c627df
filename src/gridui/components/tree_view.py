"""
Tree of checkable, collapsible nodes.

Nodes own their children; the parent link is a weak reference. When a round
trip changes the check state of several nodes at once, the tree view reports
a single node as the cause of the change.
"""

from __future__ import annotations

import weakref
from collections.abc import Iterable, Iterator
from enum import Enum
from typing import Any

from ..core.exceptions import CompositionError, TreeViewDuplicateItemsError
from ..core.id import new_node_key
from ..models.blocks import BlockType
from ..models.results import UIResults
from .events import TreeViewChangedEvent, TreeViewNodesEvent
from .interactive import InteractiveWidget


class TreeViewNodeStyle(str, Enum):
    NONE = "none"
    CHECKBOX = "checkbox"


class TreeViewNode:
    """
    One item of a tree view.

    Checking a node with ``check_recursive`` checks all its descendants.
    Unchecking a node unchecks its parent when the parent checks recursively,
    which may cascade further up.
    """

    def __init__(
        self,
        text: str = "Node",
        is_checked: bool = False,
        key: str | None = None,
        children: Iterable[TreeViewNode] = (),
        check_recursive: bool = True,
        is_collapsed: bool = True,
        style: TreeViewNodeStyle = TreeViewNodeStyle.NONE,
    ) -> None:
        self.key = key if key is not None else new_node_key()
        self.text = text
        self.check_recursive = check_recursive
        self.is_collapsed = is_collapsed
        self.style = TreeViewNodeStyle(style)
        self._parent: weakref.ReferenceType[TreeViewNode] | None = None
        self._children: list[TreeViewNode] = []
        self._is_checked = False
        self.is_checked = is_checked
        for child in children:
            self.add_child(child)

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    @property
    def parent(self) -> TreeViewNode | None:
        return self._parent() if self._parent is not None else None

    @property
    def children(self) -> tuple[TreeViewNode, ...]:
        return tuple(self._children)

    def add_child(self, node: TreeViewNode) -> None:
        """
        Attach ``node`` as the last child.

        Raises:
            CompositionError: If the node already has a parent or is an ancestor
            TreeViewDuplicateItemsError: If a child with the same key exists
        """
        if node.parent is not None:
            raise CompositionError("Node already has a parent")
        if node is self or node in self.ancestors:
            raise CompositionError("A node cannot be added below itself")
        if any(child.key == node.key for child in self._children):
            raise TreeViewDuplicateItemsError(node.key)

        node._parent = weakref.ref(self)
        self._children.append(node)
        if self.check_recursive and self._is_checked:
            node.is_checked = True

    def remove_child(self, node: TreeViewNode) -> bool:
        if node not in self._children:
            return False
        self._children.remove(node)
        node._parent = None
        return True

    def set_children(self, nodes: Iterable[TreeViewNode]) -> None:
        """Replace all children."""
        for child in self._children:
            child._parent = None
        self._children = []
        for node in nodes:
            self.add_child(node)

    @property
    def is_leaf(self) -> bool:
        return not self._children

    @property
    def is_internal_node(self) -> bool:
        return bool(self._children)

    @property
    def depth(self) -> int:
        """Distance to the root; root nodes have depth 0."""
        return sum(1 for _ in self.ancestors)

    @property
    def ancestors(self) -> Iterator[TreeViewNode]:
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    @property
    def descendants(self) -> Iterator[TreeViewNode]:
        """Depth first, this node excluded."""
        for child in self._children:
            yield child
            yield from child.descendants

    @property
    def siblings(self) -> list[TreeViewNode]:
        parent = self.parent
        if parent is None:
            return []
        return [node for node in parent._children if node is not self]

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def is_checked(self) -> bool:
        return self._is_checked

    @is_checked.setter
    def is_checked(self, value: bool) -> None:
        self._is_checked = value
        if self.check_recursive and value:
            for child in self._children:
                child.is_checked = True

        parent = self.parent
        if parent is not None and parent.check_recursive and not value:
            parent.is_checked = False

    def to_item(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "text": self.text,
            "is_checked": self._is_checked,
            "is_collapsed": self.is_collapsed,
            "check_recursive": self.check_recursive,
            "style": self.style.value,
            "children": [child.to_item() for child in self._children],
        }

    def __repr__(self) -> str:
        return f"TreeViewNode(key={self.key!r}, text={self.text!r}, checked={self._is_checked})"


def find_node_that_caused_change(changed: list[TreeViewNode]) -> TreeViewNode:
    """
    Attribute a batch of check state changes to one node.

    The shallowest changed node is the cause when all its direct children
    ended up in its own state (its toggle cascaded down). Otherwise the deepest changed
    node is the cause (an uncheck that cascaded up). Ties go to the node
    found first.
    """
    shallowest = min(changed, key=lambda node: node.depth)
    if all(child.is_checked == shallowest.is_checked for child in shallowest.children):
        return shallowest
    return max(changed, key=lambda node: node.depth)


class TreeView(InteractiveWidget):
    """
    Tree of nodes with check boxes.

    Hooks:
        changed: check state changed; the event names the attributed node
        expanded: nodes that were expanded this round
        collapsed: nodes that were collapsed this round
    """

    block_type = BlockType.TREE_VIEW

    def __init__(self, root_nodes: Iterable[TreeViewNode] = ()) -> None:
        super().__init__()
        self._root_nodes: list[TreeViewNode] = []
        self.set_root_nodes(root_nodes)
        self.changed = self._hook("changed")
        self.expanded = self._hook("expanded")
        self.collapsed = self._hook("collapsed")

    @property
    def root_nodes(self) -> tuple[TreeViewNode, ...]:
        return tuple(self._root_nodes)

    def set_root_nodes(self, nodes: Iterable[TreeViewNode]) -> None:
        candidates = list(nodes)
        for node in candidates:
            if node.parent is not None:
                raise CompositionError("Root node already has a parent")
        self._check_unique_keys(candidates)
        self._root_nodes = candidates

    def add_root_node(self, node: TreeViewNode) -> None:
        if node.parent is not None:
            raise CompositionError("Root node already has a parent")
        self._check_unique_keys([*self._root_nodes, node])
        self._root_nodes.append(node)

    def remove_root_node(self, node: TreeViewNode) -> bool:
        if node not in self._root_nodes:
            return False
        self._root_nodes.remove(node)
        return True

    @staticmethod
    def _iter_nodes(roots: Iterable[TreeViewNode]) -> Iterator[TreeViewNode]:
        for root in roots:
            yield root
            yield from root.descendants

    def _check_unique_keys(self, roots: Iterable[TreeViewNode]) -> None:
        seen: set[str] = set()
        for node in self._iter_nodes(roots):
            if node.key in seen:
                raise TreeViewDuplicateItemsError(node.key)
            seen.add(node.key)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def nodes(self) -> list[TreeViewNode]:
        """Every node, depth first."""
        return list(self._iter_nodes(self._root_nodes))

    @property
    def leaves(self) -> list[TreeViewNode]:
        return [node for node in self.nodes if node.is_leaf]

    @property
    def internal_nodes(self) -> list[TreeViewNode]:
        return [node for node in self.nodes if node.is_internal_node]

    @property
    def checked_nodes(self) -> list[TreeViewNode]:
        return [node for node in self.nodes if node.is_checked]

    @property
    def checked_leaves(self) -> list[TreeViewNode]:
        return [node for node in self.nodes if node.is_leaf and node.is_checked]

    @property
    def unchecked_nodes(self) -> list[TreeViewNode]:
        return [node for node in self.nodes if not node.is_checked]

    def get_node(self, key: str) -> TreeViewNode | None:
        for node in self._iter_nodes(self._root_nodes):
            if node.key == key:
                return node
        return None

    def collapse(self) -> None:
        for node in self.nodes:
            node.is_collapsed = True

    def expand(self) -> None:
        for node in self.nodes:
            node.is_collapsed = False

    # ------------------------------------------------------------------
    # Two-phase update
    # ------------------------------------------------------------------

    def _props(self) -> dict[str, Any]:
        self._check_unique_keys(self._root_nodes)
        return {"items": [node.to_item() for node in self._root_nodes]}

    def _load_result(self, results: UIResults) -> Any | None:
        checked_keys = set(results.get_checked_item_keys(self.dest_var))
        expanded_keys = set(results.get_expanded_item_keys(self.dest_var))
        nodes = self.nodes

        changed_check: list[TreeViewNode] = []
        expanded: list[TreeViewNode] = []
        collapsed: list[TreeViewNode] = []
        for node in nodes:
            if node.is_checked != (node.key in checked_keys):
                changed_check.append(node)

            is_collapsed = node.key not in expanded_keys
            if node.is_collapsed != is_collapsed:
                (collapsed if is_collapsed else expanded).append(node)
            node.is_collapsed = is_collapsed

        # Ancestors come first; later nodes are not compared again after a cascade
        for node in changed_check:
            node.is_checked = node.key in checked_keys

        cause = find_node_that_caused_change(changed_check) if changed_check else None
        if cause is None and not expanded and not collapsed:
            return None
        return cause, tuple(expanded), tuple(collapsed)

    def _raise(self, payload: Any) -> None:
        cause, expanded, collapsed = payload
        if cause is not None:
            self.changed.fire(TreeViewChangedEvent(self, cause))
        if expanded:
            self.expanded.fire(TreeViewNodesEvent(self, expanded))
        if collapsed:
            self.collapsed.fire(TreeViewNodesEvent(self, collapsed))
