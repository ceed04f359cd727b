from .about import __version__
from .config import TreeConfig
from .core import (
    LEFT,
    RIGHT,
    CursorTree,
    TreeNode,
    create,
    destroy,
    render_tree,
    walk_inorder,
    walk_postorder,
)
from .errors import AllocationError, ScriptError
from .script import ScriptStep, run_script
from .types import EditResult
