"""Custom exceptions for the application."""

from typing import Optional, Any, Dict


class AppException(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidOfferError(AppException):
    """Exception raised when a rate offer has a non-positive duration or rate."""

    pass


class InsufficientOffersError(AppException):
    """Exception raised when a rate table holds fewer than two offers."""

    pass


class DegenerateRatioError(AppException):
    """Exception raised when a split ratio falls outside the open interval (0, 1)."""

    pass


class ConfigurationError(AppException):
    """Exception raised when configuration is invalid."""

    pass
