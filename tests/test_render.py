import io

from cursortree import CursorTree, TreeConfig, TreeNode, create, render_tree, walk_inorder


def test_render_abcd():
    tree = create("A")
    tree.insert_left("B")
    tree.insert_right("C")
    tree.move_to_left_child()
    tree.insert_left("D")
    assert tree.render() == (
        "Tree (current node: B):\n" "\t\tD\n" "\tB\n" "A\n" "\tC\n" "\n"
    )


def test_render_single_node():
    assert create("root").render() == "Tree (current node: root):\nroot\n\n"


def test_render_after_destroy_uses_null_marker():
    tree = create("root")
    tree.destroy()
    assert tree.render() == "Tree (current node: NULL):\n\n"


def test_render_config():
    config = TreeConfig(indent="..", null_marker="<none>", header="[{label}]")
    tree = CursorTree("A", config=config)
    tree.insert_right("B")
    assert tree.render() == "[A]\nA\n..B\n\n"
    tree.destroy()
    assert tree.render() == "[<none>]\n\n"


def test_render_labels_with_spaces():
    tree = create("two words")
    tree.insert_left("three more words")
    assert tree.render().splitlines()[1] == "\tthree more words"


def test_render_tree_function():
    root = TreeNode("b", TreeNode("a"), TreeNode("c"))
    text = render_tree(root.left, walk_inorder(root))
    assert text == "Tree (current node: a):\n\ta\nb\n\tc\n\n"


def test_print_tree():
    tree = create("A")
    tree.insert_left("B")
    out = io.StringIO()
    tree.print_tree(file=out)
    assert out.getvalue() == tree.render()


def test_print_tree_stdout(capsys):
    tree = create("A")
    tree.print_tree()
    assert capsys.readouterr().out == "Tree (current node: A):\nA\n\n"


def test_render_labels_with_line_breaks():
    tree = create("top\nline")
    tree.insert_left("a\r\nb")
    text = tree.render()
    assert text == "Tree (current node: top\\nline):\n\ta\\r\\nb\ntop\\nline\n\n"
    # one header, one line per node, one blank line
    assert len(text.splitlines()) == 4
    assert tree.root.label == "top\nline"


def test_render_header_with_other_braces():
    config = TreeConfig(header="{x} {0} {} [{label}] {label}")
    tree = CursorTree("A", config=config)
    assert tree.render().splitlines()[0] == "{x} {0} {} [A] A"
    tree.destroy()
    assert tree.render() == "{x} {0} {} [NULL] NULL\n\n"


def test_render_label_with_braces():
    tree = create("{label}")
    assert tree.render() == "Tree (current node: {label}):\n{label}\n\n"
