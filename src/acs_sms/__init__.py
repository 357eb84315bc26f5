"""
py-acs-sms: template-rendered SMS through Azure Communication Services.
"""

__version__ = "0.1.0"

from acs_sms.adapters.azure import (
    AzureSMSConfig,
    AzureSMSClient,
)
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
from acs_sms.factory import create_default_sms_client
from acs_sms.ports.communication import SMSSenderPort
from acs_sms.templating import render_template

__all__ = [
    # Version
    "__version__",
    # Client
    "AzureSMSConfig",
    "AzureSMSClient",
    "SMSSenderPort",
    "create_default_sms_client",
    "render_template",
    # Results
    "SMSSendResult",
    "SMSSendResponse",
    # Errors
    "SMSError",
    "SMSConfigurationError",
    "SMSParameterError",
    "SMSTransportError",
    "SMSSendFailedError",
    "SMSResponseDecodeError",
    "SMSDeliveryError",
]
