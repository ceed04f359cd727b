class AllocationError(MemoryError):
    """Storage for a tree or one of its nodes could not be obtained.

    Raised by tree creation and the insert operations. The tree being edited
    is left exactly as it was before the call."""

    def __init__(self, label: str, reason: str = "out of memory"):
        self.label = label
        self.reason = reason
        super(AllocationError, self).__init__(
            f"could not allocate node '{label}': {reason}"
        )


class ScriptError(ValueError):
    """An edit script line could not be understood."""

    def __init__(self, line_number: int, line: str, reason: str):
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super(ScriptError, self).__init__(f"line {line_number}: {reason} ('{line}')")
