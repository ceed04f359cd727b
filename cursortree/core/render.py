"""Tree Rendering
---

A diagnostic text dump of a cursor tree. The header names the node under the
cursor, then every node is listed in left-self-right order with one indent
unit per level of depth, so the tree reads sideways with the root at the left
margin:

```
Tree (current node: B):
		D
	B
A
	C

```

There is no parser for this format; it is for reading, not for storing.
Line breaks inside labels are shown as `\\n` and `\\r` so that every node
keeps to a single line.
"""
from typing import Iterable, List, Optional, Tuple

from ..config import TreeConfig
from .tree import TreeNode


LINE_BREAKS = str.maketrans({"\n": "\\n", "\r": "\\r"})


def one_line(text: str) -> str:
    return text.translate(LINE_BREAKS)


def render_header(current: Optional[TreeNode], config: TreeConfig) -> str:
    label = current.label if current is not None else config.null_marker
    return config.header.replace("{label}", one_line(label))


def render_lines(nodes: Iterable[Tuple[TreeNode, int]], config: TreeConfig) -> List[str]:
    return [f"{config.indent * depth}{one_line(node.label)}" for node, depth in nodes]


def render_tree(
    current: Optional[TreeNode],
    nodes: Iterable[Tuple[TreeNode, int]],
    config: Optional[TreeConfig] = None,
) -> str:
    """Render the header for `current` followed by the `(node, depth)` pairs
    in `nodes`, and a trailing blank line."""
    if config is None:
        config = TreeConfig()
    lines = [render_header(current, config)] + render_lines(nodes, config)
    return "\n".join(lines) + "\n\n"
