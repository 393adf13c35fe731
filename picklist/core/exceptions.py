"""The module contains the global picklist exception and warning classes."""


class ImproperlyConfigured(Exception):
    """Raised when picklist is somehow improperly configured."""


class OptionsFormatIsInvalid(Exception):
    """Raised when options are specified but their format is invalid
    (e.g., an entry is not a (value, label) pair or a value is duplicated).
    """
