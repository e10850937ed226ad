"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the application and CLI layers can catch them uniformly and translate
them into user-facing messages.

    DomainException
    ├── ValidationError            a supplied value is invalid
    │   └── NullArgumentError      a required argument is missing
    ├── IllegalOperationError
    │   ├── IllegalStateError      transition not allowed from current status
    │   └── CurrencyMismatchError  Money operands use different currencies
    ├── DivideByZeroError          Money divided by zero
    └── EntityNotFoundError        a requested entity does not exist
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated by a supplied value."""


class NullArgumentError(ValidationError):
    """A required argument was ``None``."""

    def __init__(self, param_name: str) -> None:
        self.param_name = param_name
        super().__init__(f"Argument '{param_name}' is required")


class IllegalOperationError(DomainException):
    """The operation cannot be performed on these operands or in this state."""


class IllegalStateError(IllegalOperationError):
    """A status transition is not permitted from the current status."""


class CurrencyMismatchError(IllegalOperationError):
    """Two Money values with different currencies were combined."""


class DivideByZeroError(DomainException, ZeroDivisionError):
    """Money was divided by zero."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
