"""Base configuration class for kinesis-stream-connector configurations.

This module provides the abstract base class that defines the validation
caching pattern shared by the connector configuration objects.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
from dataclasses import dataclass
import threading


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


@dataclass(frozen=True)
class ValidationResult:
    """Result of configuration validation."""
    is_valid: bool
    errors: list[str]
    warnings: Optional[list[str]] = None

    def __post_init__(self):
        if self.warnings is None:
            object.__setattr__(self, 'warnings', [])


class BaseConfig(ABC):
    """Abstract base class for all configuration objects.

    Subclasses implement _validate_impl() with their own rules. The result
    is cached until the subclass calls _invalidate_validation(), which every
    mutating method must do.
    """

    def __init__(self) -> None:
        """Initialize the base configuration."""
        self._validation_result: Optional[ValidationResult] = None
        self._validation_lock = threading.RLock()

    @property
    def is_validated(self) -> bool:
        """Check if this configuration validates successfully.

        This will trigger validation if it hasn't been performed yet.

        Returns:
            True if validate() succeeds, False otherwise.
        """
        try:
            result = self.validate()
            return result.is_valid
        except ConfigValidationError:
            return False

    @property
    def validation_result(self) -> Optional[ValidationResult]:
        """Get the last validation result, or None if it is stale or missing."""
        with self._validation_lock:
            return self._validation_result

    def validate(self) -> ValidationResult:
        """Validate the configuration parameters.

        Returns:
            ValidationResult containing validation status and any warnings.

        Raises:
            ConfigValidationError: If validation fails with critical errors.
        """
        with self._validation_lock:
            if self._validation_result is not None:
                return self._validation_result

            self._validation_result = self._validate_impl()

            if not self._validation_result.is_valid:
                raise ConfigValidationError(
                    f"Configuration validation failed: {'; '.join(self._validation_result.errors)}"
                )

            return self._validation_result

    def _invalidate_validation(self) -> None:
        with self._validation_lock:
            self._validation_result = None

    @abstractmethod
    def _validate_impl(self) -> ValidationResult:
        """Implement specific validation logic.

        Returns:
            ValidationResult with validation status and messages.
        """
        pass

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a plain dictionary representation."""
        pass

    def ensure_valid(self) -> None:
        """Ensure the configuration is valid, raising an exception if not.

        Raises:
            ConfigValidationError: If the configuration is invalid.
        """
        self.validate()

    def __getstate__(self) -> Dict[str, Any]:
        state = self.__dict__.copy()
        state.pop('_validation_lock', None)
        state['_validation_result'] = None
        return state

    def __setstate__(self, state: Dict[str, Any]) -> None:
        self.__dict__.update(state)
        self._validation_lock = threading.RLock()
