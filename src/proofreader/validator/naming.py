"""Naming convention linking validator classes to their short names.

A validator class ``FooBarValidator`` is registered as ``FooBar``. The
fallback loader reverses the convention: it looks for ``FooBarValidator``
either as an attribute of a candidate package or inside that package's
``foo_bar`` module. Both directions live here so they stay in step.
"""

import re

__all__ = [
    "VALIDATOR_SUFFIX",
    "validator_class_name",
    "validator_module_name",
    "validator_name",
]

VALIDATOR_SUFFIX = "Validator"

_WORD_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def validator_name(validator_class: type) -> str:
    """Derive the canonical short name of a validator class.

    Args:
        validator_class: A validator class.

    Returns:
        The class name without its trailing ``Validator`` suffix.

    """
    class_name = validator_class.__name__
    if class_name.endswith(VALIDATOR_SUFFIX) and class_name != VALIDATOR_SUFFIX:
        return class_name[: -len(VALIDATOR_SUFFIX)]
    return class_name


def validator_class_name(name: str) -> str:
    """Return the class name the fallback loader searches for *name*."""
    return f"{name}{VALIDATOR_SUFFIX}"


def validator_module_name(name: str) -> str:
    """Return the module expected to define the validator called *name*.

    Examples:
        >>> validator_module_name("SentenceLength")
        'sentence_length'
        >>> validator_module_name("HTMLTag")
        'html_tag'

    """
    return _WORD_BOUNDARY_RE.sub("_", name).lower()
