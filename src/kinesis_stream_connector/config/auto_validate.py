"""Auto-validation decorator for configuration classes.

This module provides a decorator that validates configuration objects once
all of their initialization is complete.
"""

from typing import TypeVar, Type
from functools import wraps
import logging

logger = logging.getLogger(__name__)

T = TypeVar('T')


def auto_validate_after_init(cls: Type[T]) -> Type[T]:
    """Class decorator that validates configuration after initialization.

    The wrapped __init__ runs validation after the original one returns and
    logs any warnings. A failing validation does not fail initialization;
    the error stays available through validate() and is_validated.

    Example:
        @auto_validate_after_init
        class MyConfig(BaseConfig):
            def __init__(self, value):
                super().__init__()
                self.value = value

            def _validate_impl(self):
                errors = []
                if not self.value:
                    errors.append("value cannot be empty")
                return ValidationResult(is_valid=len(errors)==0, errors=errors)

    Args:
        cls: The configuration class to decorate

    Returns:
        The decorated class with auto-validation
    """
    original_init = cls.__init__

    @wraps(original_init)
    def wrapped_init(self, *args, **kwargs):
        original_init(self, *args, **kwargs)

        # Subclasses share this wrapper through inheritance; only validate
        # once the most-derived __init__ has finished.
        if type(self).__init__ is not wrapped_init:
            return

        try:
            result = self.validate()
            logger.debug(f"Auto-validated {cls.__name__}: valid={result.is_valid}")
            for warning in result.warnings:
                logger.warning(f"{cls.__name__}: {warning}")
        except Exception as e:
            logger.debug(f"Auto-validation failed for {cls.__name__}: {e}")

    cls.__init__ = wrapped_init
    return cls
