"""
Custom exceptions for the catalog

Every error carries a developer message, a user-facing message and an error
code so that an outer controller can decide presentation without inspecting
the exception type.
"""


class CatalogError(Exception):
    """Root of every error raised by catalog code"""

    def __init__(self, message: str, user_message: str = None, error_code: str = None):
        super().__init__(message)
        self.user_message = user_message or "The catalog request could not be completed."
        self.error_code = error_code or "GENERAL_ERROR"


class ValidationError(CatalogError):
    """Input fails a domain invariant"""

    def __init__(self, message: str, field: str = None):
        # The message names the offending field, so it doubles as user text.
        super().__init__(message, message, "VALIDATION_ERROR")
        self.field = field


class RepositoryError(CatalogError):
    """Repository precondition violated"""

    def __init__(self, message: str, user_message: str = None, error_code: str = None):
        super().__init__(message, user_message, error_code or "REPOSITORY_ERROR")


class NilEntityError(RepositoryError):
    """No entity was given to the repository"""

    def __init__(self, operation: str = "save"):
        super().__init__(
            f"Cannot {operation} a nil entity",
            "Nothing to store was provided.",
            "NIL_ENTITY",
        )
        self.operation = operation


class NotFoundError(RepositoryError):
    """No stored entity has the requested ID"""

    def __init__(self, entity_id: int, entity_name: str = "Category"):
        super().__init__(
            f"{entity_name} not found: {entity_id}",
            f"{entity_name} #{entity_id} not found.",
            "NOT_FOUND",
        )
        self.entity_id = entity_id


class UnsupportedFormatError(CatalogError):
    """Presenter asked for an output format it cannot produce"""

    def __init__(self, fmt: str):
        super().__init__(
            f"Unsupported output format: {fmt}",
            "The requested response format is not available.",
            "UNSUPPORTED_FORMAT",
        )
        self.fmt = fmt


def validate_and_raise(condition: bool, error_class: type, *args, **kwargs):
    """Helper function to validate condition and raise specific error"""
    if not condition:
        raise error_class(*args, **kwargs)
