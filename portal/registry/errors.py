"""Registry error taxonomy.

Every failure is raised before any state changes, so a caller that
catches one of these can rely on the registry being untouched.
"""


class RegistryError(Exception):
    """Base exception for student registry errors."""

    def __init__(self, message: str, student_id: int | None = None) -> None:
        self.message = message
        self.student_id = student_id
        super().__init__(message)


class UnauthorizedError(RegistryError):
    """Caller is not the registry owner."""

    def __init__(self, caller: str) -> None:
        super().__init__("Only the owner can perform this action")
        self.caller = caller


class InvalidIdError(RegistryError):
    """Student ID does not refer to an allocated slot."""

    def __init__(self, student_id: int) -> None:
        super().__init__("Invalid student ID", student_id)


class StudentNotFoundError(RegistryError):
    """Slot exists but the student has been deleted."""

    def __init__(self, student_id: int) -> None:
        super().__init__("Student not found", student_id)


class AlreadyDeletedError(RegistryError):
    """Slot was already soft-deleted."""

    def __init__(self, student_id: int) -> None:
        super().__init__("Student already deleted", student_id)
