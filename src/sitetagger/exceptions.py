"""Custom exceptions for sitetagger."""


class SiteTaggerError(Exception):
    """Base exception for sitetagger."""


class ConfigError(SiteTaggerError):
    """Raised when configuration is missing or invalid."""


class InputError(SiteTaggerError):
    """Raised when a site carries nothing to tag."""


class TransportError(SiteTaggerError):
    """Raised when a request never got a response (network, timeout)."""


class ResponseError(SiteTaggerError):
    """Raised when the completion API answers with an error or no content."""
