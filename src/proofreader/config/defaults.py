"""Default values for proofreader configuration.

Kept in one place so settings, records and the CLI agree on them.
"""

__all__ = [
    "DEFAULT_LANG",
    "DEFAULT_VARIANT",
    "DEFAULT_ENTRY_POINT_GROUP",
    "PROPERTY_LIST_SEPARATOR",
]

DEFAULT_LANG = "en"
DEFAULT_VARIANT = ""

# Installed distributions advertise extra validator classes under this group
DEFAULT_ENTRY_POINT_GROUP = "proofreader.validators"

PROPERTY_LIST_SEPARATOR = ","
