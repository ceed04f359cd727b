"""Edit Scripts
---

Drive a `CursorTree` from plain text, one command per line:

```
# build A(B(D), C) and look at it
insert-left B
insert-right C
left
insert-left D
print
```

Blank lines and lines starting with `#` are ignored. Labels run to the end
of the line, so they may contain spaces.
"""
from typing import Callable, Dict, Iterable, List, NamedTuple, Optional, Tuple

from .core.cursor import CursorTree
from .errors import ScriptError
from .types import EditResult

PRINT = "print"

# command -> (takes a label, operation)
COMMANDS: Dict[str, Tuple[bool, Callable[..., EditResult]]] = {
    "insert-left": (True, CursorTree.insert_left),
    "insert-right": (True, CursorTree.insert_right),
    "delete-left": (False, CursorTree.delete_left_subtree),
    "delete-right": (False, CursorTree.delete_right_subtree),
    "parent": (False, CursorTree.move_to_parent),
    "left": (False, CursorTree.move_to_left_child),
    "right": (False, CursorTree.move_to_right_child),
}


class ScriptCommand(NamedTuple):
    line_number: int
    name: str
    label: Optional[str] = None


class ScriptStep(NamedTuple):
    line_number: int
    command: str
    result: EditResult


def parse_line(line_number: int, line: str) -> Optional[ScriptCommand]:
    """Parse one script line. Returns None for blank lines and comments."""
    text = line.strip()
    if not text or text.startswith("#"):
        return None
    parts = text.split(None, 1)
    name = parts[0].lower()
    label = parts[1] if len(parts) > 1 else None
    if name == PRINT:
        takes_label = False
    elif name in COMMANDS:
        takes_label = COMMANDS[name][0]
    else:
        raise ScriptError(line_number, text, f"unknown command '{name}'")
    if takes_label and label is None:
        raise ScriptError(line_number, text, f"'{name}' needs a label")
    if not takes_label and label is not None:
        raise ScriptError(line_number, text, f"'{name}' takes no arguments")
    return ScriptCommand(line_number, name, label)


def parse_script(lines: Iterable[str]) -> List[ScriptCommand]:
    """Parse every line up front so that a bad script edits nothing."""
    commands = []
    for line_number, line in enumerate(lines, start=1):
        command = parse_line(line_number, line)
        if command is not None:
            commands.append(command)
    return commands


def run_script(
    tree: CursorTree,
    lines: Iterable[str],
    on_print: Optional[Callable[[str], None]] = None,
) -> List[ScriptStep]:
    """Apply the script in `lines` to `tree`.

    `print` commands pass the rendered tree to `on_print`; without one they
    are recorded as steps and otherwise ignored."""
    steps = []
    for command in parse_script(lines):
        if command.name == PRINT:
            if on_print is not None:
                on_print(tree.render())
            result = EditResult.OK
        else:
            takes_label, operation = COMMANDS[command.name]
            args = (command.label,) if takes_label else ()
            result = operation(tree, *args)
        steps.append(ScriptStep(command.line_number, command.name, result))
    return steps
