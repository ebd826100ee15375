"""Exceptions raised while resolving and building validators.

Configuration problems detected by a validator itself are reported with
:class:`proofreader.config.exceptions.ConfigurationError`.
"""

from proofreader.exceptions import ProofreaderError

__all__ = [
    "NoSuchValidatorError",
    "ValidatorConstructionError",
    "ValidatorError",
]


class ValidatorError(ProofreaderError):
    """Base exception for validator lookup and construction errors.

    Attributes:
        message: Human-readable error description.

    """

    def __init__(self, message: str) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.

        """
        self.message = message
        super().__init__(message)


class NoSuchValidatorError(ValidatorError):
    """No registered or loadable validator has the requested name.

    Attributes:
        name: The requested short name.

    """

    def __init__(self, name: str) -> None:
        """Initialize the exception.

        Args:
            name: The requested short name.

        """
        self.name = name
        super().__init__(f"There is no such validator: {name}")


class ValidatorConstructionError(ValidatorError):
    """A validator class was found but could not be built without arguments.

    Attributes:
        validator_class: The class that failed to construct.

    """

    def __init__(self, validator_class: type, reason: str | None = None) -> None:
        """Initialize the exception.

        Args:
            validator_class: The class that failed to construct.
            reason: Optional description of the underlying failure.

        """
        self.validator_class = validator_class
        message = (
            f"Cannot create instance of {validator_class.__module__}."
            f"{validator_class.__qualname__} using default constructor"
        )
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
