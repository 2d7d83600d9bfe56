class WorkEntryLockedError(Exception):
    """Raised when an approved (locked) work entry is edited or deleted.

    Args:
        entry_id: Identifier of the locked entry.
        action: The attempted action, such as "edit" or "delete".
    """

    def __init__(self, entry_id, action="edit"):
        self.entry_id = entry_id
        self.action = action
        message = (
            f"Cannot {action} approved work entry. Approved entries are immutable."
        )
        super().__init__(message)


class InvalidTransitionError(Exception):
    """Raised when a status change is not allowed from the current status.

    Args:
        entity: The entity type, such as "work entry".
        current: The status the object is in.
        target: The status that was requested.
    """

    def __init__(self, entity, current, target):
        self.entity = entity
        self.current = current
        self.target = target
        message = f"Cannot move {entity} from '{current}' to '{target}'"
        super().__init__(message)


class InvitationCodeError(Exception):
    """Raised when an invitation code is unknown, already used or expired."""

    def __init__(self, message="Invalid or expired invitation code"):
        super().__init__(message)


class DuplicateError(Exception):
    """Raised when a record that must be unique already exists.

    Args:
        message: Human readable error returned to the client.
        field: Optional name of the offending field.
    """

    def __init__(self, message, field=None):
        self.field = field
        super().__init__(message)


class ConflictError(Exception):
    """Raised when a request conflicts with the current state, such as a second bootstrap admin."""
