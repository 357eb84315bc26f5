"""Concrete SMS provider adapters."""

from acs_sms.adapters.azure import (
    AzureSMSConfig,
    AzureSMSClient,
    DEFAULT_API_VERSION,
)

__all__ = [
    "AzureSMSConfig",
    "AzureSMSClient",
    "DEFAULT_API_VERSION",
]
