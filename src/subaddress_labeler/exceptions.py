"""Custom exceptions for Subaddress Labeler."""


class LabelerError(Exception):
    """Base exception for all Subaddress Labeler errors."""


class GmailAPIError(LabelerError):
    """Exception raised for Gmail API related errors."""


class ConfigurationError(LabelerError):
    """Exception raised for configuration related errors."""


class AuthenticationError(LabelerError):
    """Exception raised for authentication failures."""
