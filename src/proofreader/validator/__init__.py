"""Validators and the factory that finds, builds and configures them.

Validator classes placed anywhere under this package are registered
automatically under their class name minus the ``Validator`` suffix.
Use :func:`get_instance` to obtain a configured validator and
:func:`get_configurations` to list defaults for a language.
"""

from proofreader.validator.base import PropertyValue, ValidationIssue, Validator
from proofreader.validator.exceptions import (
    NoSuchValidatorError,
    ValidatorConstructionError,
    ValidatorError,
)
from proofreader.validator.factory import (
    VALIDATOR_PACKAGES,
    ValidatorFactory,
    get_configurations,
    get_default_factory,
    get_instance,
    to_strings,
)
from proofreader.validator.naming import VALIDATOR_SUFFIX, validator_name

__all__ = [
    "NoSuchValidatorError",
    "PropertyValue",
    "VALIDATOR_PACKAGES",
    "VALIDATOR_SUFFIX",
    "ValidationIssue",
    "Validator",
    "ValidatorConstructionError",
    "ValidatorError",
    "ValidatorFactory",
    "get_configurations",
    "get_default_factory",
    "get_instance",
    "to_strings",
    "validator_name",
]
