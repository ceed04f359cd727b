from enum import Enum


class EditResult(Enum):
    """The outcome of a cursor edit or move.

    Anything other than `OK` is an invalid operation that left the tree
    untouched. These are reported, never raised."""

    OK = "ok"
    # insert into a slot that already holds a child
    SLOT_OCCUPIED = "slot_occupied"
    # delete from a slot that holds nothing
    SLOT_EMPTY = "slot_empty"
    # move to the parent of the root
    NO_PARENT = "no_parent"
    # move to a child that is not there
    NO_CHILD = "no_child"
    # the tree has been destroyed
    NO_CURSOR = "no_cursor"

    @property
    def ok(self) -> bool:
        return self is EditResult.OK

    def __bool__(self) -> bool:
        return self.ok
