"""Cursortree CLI
---

Command line application for building and printing cursor trees from edit
scripts.
"""

import click
from wasabi import msg

from .about import __version__
from .config import TreeConfig
from .core.cursor import CursorTree
from .errors import ScriptError
from .script import run_script

DEMO_SCRIPT = """
insert-left B
insert-right C
left
insert-left D
"""


@click.group()
@click.version_option(version=__version__)
def cli():
    """
    Cursortree

    Edit a binary tree one node at a time through a movable cursor.
    """


@cli.command("run")
@click.argument("root_label", type=str)
@click.argument("script", type=click.File("r"))
@click.option(
    "quiet",
    "--quiet",
    default=False,
    is_flag=True,
    help="Do not warn about edits that could not be applied",
)
@click.option(
    "indent", "--indent", default="\t", help="Text repeated once per tree level"
)
@click.option(
    "null_marker",
    "--null-marker",
    default="NULL",
    help="Shown in the header when there is no current node",
)
def cli_run(root_label: str, script, quiet: bool, indent: str, null_marker: str):
    """Create a tree with ROOT_LABEL at its root, apply the edit commands in
    SCRIPT (use - for stdin), and print the result."""
    config = TreeConfig(indent=indent, null_marker=null_marker, verbose=not quiet)
    tree = CursorTree(root_label, config=config)
    try:
        steps = run_script(tree, script, on_print=echo_tree)
    except ScriptError as error:
        msg.fail(f"Invalid script: {error}")
        raise SystemExit(1)
    failed = [step for step in steps if not step.result.ok]
    echo_tree(tree.render())
    if failed and not quiet:
        msg.info(f"{len(failed)} of {len(steps)} commands were not applied")


@cli.command("demo")
def cli_demo():
    """Build a small example tree and print it."""
    tree = CursorTree("A")
    msg.divider("create A, add B and C, then D under B")
    run_script(tree, DEMO_SCRIPT.splitlines())
    echo_tree(tree.render())
    msg.good(f"Built a tree with {len(tree)} nodes")


def echo_tree(text: str):
    click.echo(text, nl=False)


if __name__ == "__main__":
    cli()
