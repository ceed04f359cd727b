"""Cursor Tree
---

A binary tree of labelled nodes with a single movable cursor, `current`.
Every edit acts on the cursor: children are inserted under it, child
subtrees are deleted from it, and it moves one step at a time to its parent
or to one of its children.

Operations that cannot be carried out (inserting into an occupied slot,
deleting from an empty one, moving past the edge of the tree) leave the tree
untouched and return an `EditResult` saying why.
"""
import sys
from typing import IO, Iterator, List, Optional, Tuple

from wasabi import msg

from ..config import TreeConfig
from ..errors import AllocationError
from ..types import EditResult
from .render import render_tree
from .tree import LEFT, RIGHT, TreeNode, walk_inorder

WARNINGS = {
    (EditResult.SLOT_OCCUPIED, LEFT): "Left child already exists",
    (EditResult.SLOT_OCCUPIED, RIGHT): "Right child already exists",
    (EditResult.SLOT_EMPTY, LEFT): "There is no left subtree to delete",
    (EditResult.SLOT_EMPTY, RIGHT): "There is no right subtree to delete",
    (EditResult.NO_CHILD, LEFT): "The current node has no left child",
    (EditResult.NO_CHILD, RIGHT): "The current node has no right child",
    (EditResult.NO_PARENT, None): "The current node is the root",
    (EditResult.NO_CURSOR, None): "The tree has been destroyed",
}


class CursorTree:
    """A binary tree editor with a movable cursor."""

    root: Optional[TreeNode]
    config: TreeConfig

    def __init__(self, label: str, config: Optional[TreeConfig] = None):
        if config is None:
            config = TreeConfig()
        if not isinstance(config, TreeConfig):
            raise ValueError("config must be a TreeConfig instance")
        self.config = config
        self.root = _allocate(label)
        self._current: Optional[TreeNode] = self.root

    @property
    def current(self) -> Optional[TreeNode]:
        """The node edits act on. None only once the tree is destroyed."""
        return self._current

    @property
    def is_destroyed(self) -> bool:
        return self.root is None

    def __len__(self) -> int:
        return self.root.size() if self.root is not None else 0

    def __repr__(self):
        current = self._current.label if self._current else None
        return f"<CursorTree size={len(self)} current={current!r}>"

    def walk(self) -> Iterator[Tuple[TreeNode, int]]:
        """Lazily yield `(node, depth)` pairs for the whole tree, in-order."""
        return walk_inorder(self.root)

    def labels(self) -> List[str]:
        """The labels of every node, in left-self-right order."""
        return [node.label for node, _ in self.walk()]

    # **Editing**

    def insert_left(self, label: str) -> EditResult:
        """Attach a new node labelled `label` as the left child of the cursor."""
        return self._insert(LEFT, label)

    def insert_right(self, label: str) -> EditResult:
        """Attach a new node labelled `label` as the right child of the cursor."""
        return self._insert(RIGHT, label)

    def delete_left_subtree(self) -> EditResult:
        """Release the cursor's whole left subtree and empty the slot."""
        return self._delete(LEFT)

    def delete_right_subtree(self) -> EditResult:
        """Release the cursor's whole right subtree and empty the slot."""
        return self._delete(RIGHT)

    # **Navigation**

    def move_to_parent(self) -> EditResult:
        if self._current is None:
            return self._report(EditResult.NO_CURSOR)
        parent = self._current.parent
        if parent is None:
            return self._report(EditResult.NO_PARENT)
        self._current = parent
        return EditResult.OK

    def move_to_left_child(self) -> EditResult:
        return self._move_to_child(LEFT)

    def move_to_right_child(self) -> EditResult:
        return self._move_to_child(RIGHT)

    # **Output**

    def render(self) -> str:
        return render_tree(self.current, self.walk(), self.config)

    def print_tree(self, file: Optional[IO[str]] = None) -> None:
        """Write the rendered tree to `file` (stdout by default)."""
        print(self.render(), end="", file=file if file is not None else sys.stdout)

    # **Lifecycle**

    def destroy(self) -> int:
        """Release every node, children before parents, and drop the cursor.

        Returns the number of released nodes. Destroying twice is a no-op."""
        if self.root is None:
            return 0
        released = self.root.detach()
        self.root = None
        self._current = None
        return released

    def _insert(self, side: str, label: str) -> EditResult:
        current = self._current
        if current is None:
            return self._report(EditResult.NO_CURSOR)
        if current.get_child(side) is not None:
            return self._report(EditResult.SLOT_OCCUPIED, side)
        current.set_side(_allocate(label), side)
        return EditResult.OK

    def _delete(self, side: str) -> EditResult:
        current = self._current
        if current is None:
            return self._report(EditResult.NO_CURSOR)
        child = current.get_child(side)
        if child is None:
            return self._report(EditResult.SLOT_EMPTY, side)
        # Only the cursor's own child slots are deleted, so the cursor stays live.
        child.detach()
        return EditResult.OK

    def _move_to_child(self, side: str) -> EditResult:
        current = self._current
        if current is None:
            return self._report(EditResult.NO_CURSOR)
        child = current.get_child(side)
        if child is None:
            return self._report(EditResult.NO_CHILD, side)
        self._current = child
        return EditResult.OK

    def _report(self, result: EditResult, side: Optional[str] = None) -> EditResult:
        if self.config.verbose:
            msg.warn(WARNINGS[(result, side)])
        return result


def _allocate(label: str) -> TreeNode:
    try:
        return TreeNode(label)
    except MemoryError as error:
        raise AllocationError(label) from error


def create(label: str, config: Optional[TreeConfig] = None) -> CursorTree:
    """Create a tree holding a single root node labelled `label`. The cursor
    starts on the root."""
    return CursorTree(label, config=config)


def destroy(tree: Optional[CursorTree]) -> int:
    """Release every node of `tree`. A missing or destroyed tree is a no-op."""
    if tree is None:
        return 0
    return tree.destroy()
