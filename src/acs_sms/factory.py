"""
Factory functions for automatic client creation.

Implements the 'if not provide create' pattern for framework integrations.
"""

import os
import logging
from typing import Optional

from acs_sms.adapters.azure import AzureSMSClient, DEFAULT_API_VERSION

logger = logging.getLogger(__name__)


def _parse_timeout(value) -> Optional[float]:
    if value in (None, ""):
        return None
    return float(value)


def _client_from_django() -> Optional[AzureSMSClient]:
    try:
        from django.conf import settings
        from django.core.exceptions import ImproperlyConfigured
    except ImportError:
        return None

    try:
        sms_config = getattr(settings, "ACS_SMS", None)
    except ImproperlyConfigured:
        # Django installed but no settings module in use
        return None

    if not sms_config:
        return None

    endpoint = sms_config.get("ENDPOINT")
    return AzureSMSClient.from_endpoints(
        api_key=sms_config.get("API_KEY", ""),
        template=sms_config.get("TEMPLATE", ""),
        endpoints=[endpoint] if endpoint else [],
        api_version=sms_config.get("API_VERSION", DEFAULT_API_VERSION),
        timeout=_parse_timeout(sms_config.get("TIMEOUT")),
    )


def _client_from_env() -> Optional[AzureSMSClient]:
    api_key = os.environ.get("ACS_SMS_API_KEY")
    endpoint = os.environ.get("ACS_SMS_ENDPOINT")
    if not api_key and not endpoint:
        return None

    return AzureSMSClient.from_endpoints(
        api_key=api_key or "",
        template=os.environ.get("ACS_SMS_TEMPLATE", ""),
        endpoints=[endpoint] if endpoint else [],
        api_version=os.environ.get("ACS_SMS_API_VERSION", DEFAULT_API_VERSION),
        timeout=_parse_timeout(os.environ.get("ACS_SMS_TIMEOUT")),
    )


def create_default_sms_client() -> Optional[AzureSMSClient]:
    """
    Create a default AzureSMSClient from Django settings or environment variables.

    Returns None when neither source configures the client.

    Raises:
        SMSConfigurationError: If a source is present but has no endpoint
    """
    # 1. Try Django settings first
    client = _client_from_django()
    if client is not None:
        logger.debug("Created SMS client from Django settings")
        return client

    # 2. Fall back to environment variables
    client = _client_from_env()
    if client is not None:
        logger.debug("Created SMS client from environment")
        return client

    # 3. Last resort: Return None
    logger.warning("No SMS client configured (set ACS_SMS_ENDPOINT and ACS_SMS_API_KEY)")
    return None
