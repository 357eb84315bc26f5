"""Domain layer for SMS sending."""

from acs_sms.domain.errors import (
    SMSError,
    SMSConfigurationError,
    SMSParameterError,
    SMSTransportError,
    SMSSendFailedError,
    SMSResponseDecodeError,
    SMSDeliveryError,
)
from acs_sms.domain.value_objects import (
    SMSSendResult,
    SMSSendResponse,
)

__all__ = [
    # Errors
    "SMSError",
    "SMSConfigurationError",
    "SMSParameterError",
    "SMSTransportError",
    "SMSSendFailedError",
    "SMSResponseDecodeError",
    "SMSDeliveryError",
    # Value Objects
    "SMSSendResult",
    "SMSSendResponse",
]
