"""
Domain errors for the SMS client.

Every failure surfaced by the client derives from ``SMSError`` so callers
can catch a single type and still branch on ``code``.
"""

from typing import Optional, Any


class SMSError(Exception):
    """Base class for all SMS client errors."""

    def __init__(
        self,
        message: str,
        code: str = "SMS_ERROR",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


class SMSConfigurationError(SMSError):
    """Raised when the client cannot be built from the given configuration."""

    def __init__(
        self,
        message: str = "missing parameter: endpoint",
        code: str = "SMS_CONFIGURATION_ERROR",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)


class SMSParameterError(SMSError):
    """Raised when a send call is missing required arguments."""

    def __init__(
        self,
        message: str = "missing parameter: targetPhoneNumber",
        code: str = "SMS_PARAMETER_ERROR",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)


class SMSTransportError(SMSError):
    """Raised when the request could not be built or delivered."""

    def __init__(
        self,
        message: str = "error sending request",
        code: str = "SMS_TRANSPORT_ERROR",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)


class SMSSendFailedError(SMSError):
    """Raised when the provider answers with a non-200 status."""

    def __init__(
        self,
        message: str = "message sending failed",
        code: str = "SMS_SEND_FAILED",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)


class SMSResponseDecodeError(SMSError):
    """Raised when the response body is not the JSON the provider documents."""

    def __init__(
        self,
        message: str = "error parsing response body",
        code: str = "SMS_RESPONSE_DECODE_ERROR",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)


class SMSDeliveryError(SMSSendFailedError):
    """Raised when the provider reports a recipient as unsuccessful."""

    def __init__(
        self,
        recipient: str,
        message: Optional[str] = None,
        code: str = "SMS_DELIVERY_FAILED",
        error_message: Optional[str] = None,
        http_status_code: Optional[int] = None,
    ):
        details = {
            "recipient": recipient,
            "error_message": error_message,
            "http_status_code": http_status_code,
        }
        # Filter None values
        details = {k: v for k, v in details.items() if v is not None}
        super().__init__(
            message or f"message sending failed for target phone number {recipient}",
            code,
            details,
        )
        self.recipient = recipient
        self.error_message = error_message
        self.http_status_code = http_status_code
