from pydantic import BaseModel


class TreeConfig(BaseModel):
    # Repeated once per depth level in front of each rendered label
    indent: str = "\t"
    # Shown in the header when the tree has no cursor (e.g. after destroy)
    null_marker: str = "NULL"
    # Header line, every "{label}" is replaced with the current node's label and
    # any other text, braces included, is printed as is
    header: str = "Tree (current node: {label}):"
    # Print a warning for every edit that turns out to be an invalid operation
    verbose: bool = False
