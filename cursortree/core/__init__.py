from .tree import LEFT, RIGHT, TreeNode, walk_inorder, walk_postorder
from .render import render_tree
from .cursor import CursorTree, create, destroy
