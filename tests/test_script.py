import pytest

from cursortree import EditResult, ScriptError, create, run_script
from cursortree.script import ScriptCommand, parse_line, parse_script

ABCD = """
# the A/B/C/D example
insert-left B
insert-right C

left
insert-left D
"""


def test_parse_line_skips_blank_and_comments():
    assert parse_line(1, "") is None
    assert parse_line(2, "   ") is None
    assert parse_line(3, "# comment") is None


def test_parse_line_commands():
    assert parse_line(1, "insert-left B\n") == ScriptCommand(1, "insert-left", "B")
    assert parse_line(2, "  PARENT  ") == ScriptCommand(2, "parent", None)
    assert parse_line(3, "insert-right two words") == ScriptCommand(
        3, "insert-right", "two words"
    )
    assert parse_line(4, "print") == ScriptCommand(4, "print", None)


@pytest.mark.parametrize(
    "line,reason",
    [
        ("jump", "unknown command"),
        ("insert-left", "needs a label"),
        ("delete-left now", "takes no arguments"),
        ("print everything", "takes no arguments"),
    ],
)
def test_parse_line_errors(line: str, reason: str):
    with pytest.raises(ScriptError) as error:
        parse_line(7, line)
    assert error.value.line_number == 7
    assert reason in str(error.value)


def test_parse_script_line_numbers():
    commands = parse_script(ABCD.splitlines())
    assert [c.line_number for c in commands] == [3, 4, 6, 7]


def test_run_script():
    tree = create("A")
    steps = run_script(tree, ABCD.splitlines())
    assert [s.command for s in steps] == ["insert-left", "insert-right", "left", "insert-left"]
    assert all(s.result == EditResult.OK for s in steps)
    assert tree.labels() == ["D", "B", "A", "C"]
    assert tree.current.label == "B"


def test_run_script_reports_invalid_operations():
    tree = create("root")
    steps = run_script(
        tree, ["insert-left x", "insert-left y", "delete-left", "left", "parent"]
    )
    assert [s.result for s in steps] == [
        EditResult.OK,
        EditResult.SLOT_OCCUPIED,
        EditResult.OK,
        EditResult.NO_CHILD,
        EditResult.NO_PARENT,
    ]
    assert tree.current.label == "root"


def test_run_script_print():
    tree = create("A")
    printed = []
    run_script(tree, ["print", "insert-right B", "right", "print"], on_print=printed.append)
    assert printed == [
        "Tree (current node: A):\nA\n\n",
        "Tree (current node: B):\nA\n\tB\n\n",
    ]


def test_run_script_bad_line_edits_nothing():
    tree = create("A")
    with pytest.raises(ScriptError):
        run_script(tree, ["insert-left B", "fly"])
    assert tree.labels() == ["A"]
