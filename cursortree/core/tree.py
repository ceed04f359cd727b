import weakref
from typing import Iterator, List, Optional, Tuple

# ## Constants

# The constant representing the left child side of a node.
LEFT = "left"
# The constant representing the right child side of a node.
RIGHT = "right"


class TreeNode:
    """
    The tree node holds a text label and owns up to two children, one in its
    left slot and one in its right slot. It also knows its parent, but only
    through a weak reference: parents own children, never the reverse, so a
    subtree that is cut loose from its owner is released as soon as nobody
    else holds on to it.
    """

    _idCounter = 0

    label: str
    left: Optional["TreeNode"]
    right: Optional["TreeNode"]

    #  Allow specifying children in the constructor
    def __init__(
        self,
        label: str = "",
        left: "TreeNode" = None,
        right: "TreeNode" = None,
        id: Optional[str] = None,
    ):
        if id is None:
            TreeNode._idCounter = TreeNode._idCounter + 1
            id = f"tn-{TreeNode._idCounter}"
        self.id = id
        self.label = label
        self._parent: Optional["weakref.ReferenceType[TreeNode]"] = None
        self.left = None
        self.right = None
        self.set_left(left)
        self.set_right(right)

    @property
    def parent(self) -> Optional["TreeNode"]:
        """The node that owns this one, or None for a root."""
        if self._parent is None:
            return None
        return self._parent()

    @parent.setter
    def parent(self, node: Optional["TreeNode"]):
        self._parent = weakref.ref(node) if node is not None else None

    def __str__(self):
        return self.label

    def __repr__(self):
        return f"<TreeNode {self.id} '{self.label}'>"

    def size(self) -> int:
        """The number of nodes in the subtree rooted at this node."""
        return sum(1 for _ in walk_inorder(self))

    # **Child Management**
    #
    # Methods for setting the children on this node.  These take care of
    # making sure that the proper parent assignments also take place.

    def set_left(self, child: "TreeNode" = None) -> "TreeNode":
        """Set the left node to the passed `child`"""
        return self._attach(LEFT, child)

    def set_right(self, child: "TreeNode" = None) -> "TreeNode":
        """Set the right node to the passed `child`"""
        return self._attach(RIGHT, child)

    def get_side(self, child: "TreeNode") -> str:
        """Determine whether the given `child` is the left or right child of this
        node"""
        if child is self.left:
            return LEFT

        if child is self.right:
            return RIGHT

        raise ValueError("TreeNode.get_side: not a child of this node")

    def set_side(self, child: Optional["TreeNode"], side: str) -> "TreeNode":
        """Set a new `child` on the given `side`"""
        if side not in (LEFT, RIGHT):
            raise ValueError("TreeNode.set_side: Invalid side")
        return self._attach(side, child)

    def get_child(self, side: str) -> Optional["TreeNode"]:
        """Return the child in the given slot, or None if the slot is empty"""
        if side == LEFT:
            return self.left

        if side == RIGHT:
            return self.right

        raise ValueError("TreeNode.get_child: Invalid side")

    def get_children(self) -> List["TreeNode"]:
        """Get children as an array.  If there are two children, the first object will
        always represent the left child, and the second will represent the right."""
        result = []
        if self.left:
            result.append(self.left)

        if self.right:
            result.append(self.right)

        return result

    def detach(self) -> int:
        """Cut this subtree loose from its parent and release it.

        Nodes are released children first (post-order): every node drops its
        child slots and its parent link. Returns the number of released nodes.
        """
        parent = self.parent
        if parent is not None:
            parent.set_side(None, parent.get_side(self))
        released = 0
        for node, _ in walk_postorder(self):
            node.left = None
            node.right = None
            node.parent = None
            released += 1
        return released

    def _attach(self, side: str, child: Optional["TreeNode"]) -> "TreeNode":
        old = self.get_child(side)
        if child is not None and child is not old:
            if child.parent is not None:
                raise ValueError("node already has a parent, detach it first")
            ancestor: Optional[TreeNode] = self
            while ancestor is not None:
                if ancestor is child:
                    raise ValueError("nodes cannot be their own children")
                ancestor = ancestor.parent
        if old is not None and old is not child:
            old.parent = None
        setattr(self, side, child)
        if child is not None:
            child.parent = self
        return self


def walk_inorder(node: Optional[TreeNode], depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
    """Lazily yield `(node, depth)` pairs in left-self-right order.

    Each call returns a fresh generator, so the walk can be restarted at any
    time. `depth` is the depth assigned to `node` itself."""
    stack: List[Tuple[TreeNode, int]] = []
    while stack or node is not None:
        while node is not None:
            stack.append((node, depth))
            node = node.left
            depth += 1
        node, depth = stack.pop()
        yield node, depth
        node = node.right
        depth += 1


def walk_postorder(
    node: Optional[TreeNode], depth: int = 0
) -> Iterator[Tuple[TreeNode, int]]:
    """Lazily yield `(node, depth)` pairs in left-right-self order.

    Children are always produced before their parent, which makes this the
    order to release a subtree in."""
    if node is None:
        return
    stack: List[Tuple[TreeNode, int, bool]] = [(node, depth, False)]
    while stack:
        current, level, expanded = stack.pop()
        if expanded:
            yield current, level
            continue
        stack.append((current, level, True))
        for child in reversed(current.get_children()):
            stack.append((child, level + 1, False))
