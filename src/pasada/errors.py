"""Exception classes for Pasada.

Conversion itself never fails: malformed markup is passed through as
literal text. These exceptions cover programming errors around the
pipeline (bad configuration, a failing custom pass).
"""

from __future__ import annotations


class PasadaError(Exception):
    """Base exception for all Pasada errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(PasadaError):
    """Invalid configuration value.

    Raised when a ConvertConfig is created with a value outside its domain.
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize config error.

        Args:
            field: Name of the offending ConvertConfig field
            message: Description of the problem
        """
        self.field = field
        super().__init__(f"Config field '{field}': {message}")


class TransformError(PasadaError):
    """Error raised by a pass while converting.

    The original exception is available as ``__cause__``.
    """

    def __init__(self, transform_name: str, message: str) -> None:
        """Initialize transform error.

        Args:
            transform_name: Name of the failing pass (e.g., "tables")
            message: Description of the error
        """
        self.transform_name = transform_name
        super().__init__(f"Transform '{transform_name}': {message}")
