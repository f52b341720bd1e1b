"""
Errors - Exception hierarchy for the token broker

Every failure raised by the broker derives from BrokerError so the
lifecycle boundary can turn it into a structured response.
"""

from typing import Optional


class BrokerError(Exception):
    """Base class for all broker failures."""


class ValidationError(BrokerError):
    """Malformed or missing input."""


class MissingFieldError(ValidationError):
    def __init__(self, field: str):
        super().__init__(f"You must provide {field}")
        self.field = field


class InvalidHostnameError(ValidationError):
    def __init__(self, message: str = "Invalid hostname"):
        super().__init__(message)


class InvalidIpError(ValidationError):
    def __init__(self, message: str = "Invalid IP address"):
        super().__init__(message)


class InvalidTokenError(ValidationError):
    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class ConflictError(BrokerError):
    """The requested resource is already claimed."""


class HostnameTakenError(ConflictError):
    def __init__(self, hostname: str):
        super().__init__("Hostname already exists")
        self.hostname = hostname


class NotFoundError(BrokerError):
    """The referenced binding does not exist."""


class UnknownTokenError(NotFoundError):
    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class UnknownHostnameError(NotFoundError):
    def __init__(self, hostname: str):
        super().__init__(f"Unknown hostname: {hostname}")
        self.hostname = hostname


class ExecutionError(BrokerError):
    """The DNS-update agent could not apply a transaction."""

    def __init__(
        self,
        message: str,
        returncode: Optional[int] = None,
        signal: Optional[int] = None,
        reason: Optional[str] = None,
    ):
        super().__init__(message)
        self.returncode = returncode
        self.signal = signal
        self.reason = reason
