"""Domain-level exceptions.

All failures are expressed as subclasses of DomainException so the
controller and the CLI layer can catch them uniformly and display a
single user-friendly message.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A required field is missing or a value cannot be coerced."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist in the local cache."""


class ConfigurationError(DomainException):
    """A setting read from the environment is invalid."""


class ApiError(DomainException):
    """The product API could not complete a request.

    Each subclass carries a generic message for its operation type;
    the underlying transport error is chained as ``__cause__``.
    """

    default_message = "The product service could not be reached"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class FetchError(ApiError):
    default_message = "Failed to load products"


class SaveError(ApiError):
    default_message = "Failed to save product"


class UpdateError(ApiError):
    default_message = "Failed to update product"


class DeleteError(ApiError):
    default_message = "Failed to delete product"
