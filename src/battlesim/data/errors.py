"""Custom exceptions for data loading and validation."""

from battlesim.errors import BattleSimError


class DataError(BattleSimError):
    """Base exception for the data layer."""


class DataLoadError(DataError):
    """Raised when JSON files are missing or invalid."""


class DataValidationError(DataError):
    """Raised when JSON content fails structural validation."""
