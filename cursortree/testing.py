import weakref
from typing import Iterator, List, Optional
from unittest.mock import patch

from .core import cursor
from .core.tree import TreeNode


class NodeTracker:
    """Keep a weak reference to every node a cursor tree allocates while the
    tracker is active, so tests can count how many are still alive.

    ```python
    with NodeTracker() as tracker:
        tree = CursorTree("root")
        tree.insert_left("x")
        tree.destroy()
    assert tracker.live == 0
    ```
    """

    def __init__(self):
        self._refs: List["weakref.ReferenceType[TreeNode]"] = []
        self._patch: Optional[object] = None

    def _allocate(self, label: str) -> TreeNode:
        node = TreeNode(label)
        self._refs.append(weakref.ref(node))
        return node

    def __enter__(self) -> "NodeTracker":
        self._patch = patch.object(cursor, "TreeNode", side_effect=self._allocate)
        self._patch.start()  # type: ignore
        return self

    def __exit__(self, *exc_info):
        self._patch.stop()  # type: ignore
        self._patch = None

    @property
    def allocated(self) -> int:
        """The number of nodes created while tracking."""
        return len(self._refs)

    @property
    def live(self) -> int:
        """The number of tracked nodes that have not been released."""
        return sum(1 for _ in self.live_nodes())

    def live_nodes(self) -> Iterator[TreeNode]:
        for ref in self._refs:
            node = ref()
            if node is not None:
                yield node
