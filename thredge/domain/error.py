"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class TreeError(DomainError):
    """Base error for reply tree operations."""

    pass


class CycleDetectedError(TreeError):
    """Raised when walking parent links does not reach a root.

    Signals corrupted data. The operation that needed the result must be
    refused rather than guessing a depth.
    """

    def __init__(self, entry_id: str):
        self.entry_id = entry_id
        super().__init__(f"Invalid reply chain at entry {entry_id}")


class DepthLimitExceededError(TreeError):
    """Raised when an entry would end up deeper than the nesting limit."""

    def __init__(self, entry_id: str, resulting_depth: int, max_depth: int):
        self.entry_id = entry_id
        self.resulting_depth = resulting_depth
        self.max_depth = max_depth
        super().__init__(
            f"Reply depth limit reached: entry {entry_id} would reach depth "
            f"{resulting_depth} (max {max_depth})"
        )


class SelfContainmentError(TreeError):
    """Raised when an entry would be placed at or inside its own subtree."""

    def __init__(self, entry_id: str, target_id: str):
        self.entry_id = entry_id
        self.target_id = target_id
        super().__init__(
            f"Invalid move target: {target_id} is {entry_id} or one of its replies"
        )


class TargetNotFoundError(TreeError):
    """Raised when the drop target is missing, e.g. hidden concurrently.

    Callers should refresh the thread and retry.
    """

    def __init__(self, target_id: str):
        self.target_id = target_id
        super().__init__(f"Target entry not found: {target_id}")


class EntryLockedError(TreeError):
    """Raised when a reply that has replies of its own is moved one step."""

    def __init__(self, entry_id: str):
        self.entry_id = entry_id
        super().__init__(f"Entries with replies cannot be moved: {entry_id}")
