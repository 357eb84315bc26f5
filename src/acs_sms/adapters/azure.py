"""
Azure Communication Services SMS Adapter.

Implements SMSSenderPort against the ACS SMS REST API.
Uses httpx for both blocking and asynchronous delivery.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence

import httpx

from acs_sms.ports.communication import SMSSenderPort
from acs_sms.domain.value_objects import SMSSendResponse
from acs_sms.domain.errors import (
    SMSConfigurationError,
    SMSParameterError,
    SMSTransportError,
    SMSSendFailedError,
    SMSResponseDecodeError,
    SMSDeliveryError,
)
from acs_sms.templating import render_template

logger = logging.getLogger("acs_sms.adapters.azure")

DEFAULT_API_VERSION = "2021-03-07"


# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class AzureSMSConfig:
    """Configuration for the Azure SMS adapter."""

    api_key: str = field(repr=False)
    endpoint: str  # e.g., "https://my-resource.communication.azure.com"
    template: str  # e.g., "Your code is {code}"

    api_version: str = DEFAULT_API_VERSION

    # None keeps the httpx default
    timeout: Optional[float] = None


class AzureSMSClient(SMSSenderPort):
    """
    Azure Communication Services implementation of SMSSenderPort.

    The first target number is sent as the ``from`` field and only the
    remaining numbers are listed as recipients. This mirrors how the
    provider account this adapter was written for is set up; a caller that
    passes a single number sends to nobody.

    Example usage:
        client = AzureSMSClient.from_endpoints(
            api_key="secret",
            template="Your code is {code}",
            endpoints=["https://my-resource.communication.azure.com"],
        )

        client.send_message({"code": "4821"}, "+15550000000", "+15551234")
    """

    def __init__(self, config: AzureSMSConfig):
        self._config = config

    @classmethod
    def from_endpoints(
        cls,
        api_key: str,
        template: str,
        endpoints: Sequence[str],
        **options: Any,
    ) -> "AzureSMSClient":
        """
        Build a client from an endpoint list; only the first entry is used.

        Raises:
            SMSConfigurationError: If ``endpoints`` is empty
        """
        if not endpoints:
            raise SMSConfigurationError()

        return cls(
            AzureSMSConfig(
                api_key=api_key,
                endpoint=endpoints[0],
                template=template,
                **options,
            )
        )

    @property
    def config(self) -> AzureSMSConfig:
        return self._config

    @property
    def sms_url(self) -> str:
        endpoint = self._config.endpoint.rstrip("/")
        return f"{endpoint}/sms?api-version={self._config.api_version}"

    # ═══════ REQUEST ═══════

    def render(self, params: Optional[Mapping[str, str]] = None) -> str:
        """Render the configured template with ``params``."""
        return render_template(self._config.template, params)

    def build_payload(
        self, params: Optional[Mapping[str, str]], target_phone_numbers: Sequence[str]
    ) -> Dict[str, Any]:
        """
        Build the JSON request body.

        Raises:
            SMSParameterError: If no target number is given
        """
        if not target_phone_numbers:
            raise SMSParameterError()

        from_phone_number, *recipients = target_phone_numbers
        sms_recipients: List[Dict[str, str]] = [{"to": number} for number in recipients]

        return {
            "from": from_phone_number,
            "message": self.render(params),
            "smsSendOptions": {
                "enableDeliveryReport": True,
            },
            "smsRecipients": sms_recipients,
        }

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self._config.api_key}",
            "Content-Type": "application/json",
        }

    def _client_options(self) -> Dict[str, Any]:
        if self._config.timeout is None:
            return {}
        return {"timeout": self._config.timeout}

    # ═══════ SEND ═══════

    def send_message(
        self, params: Mapping[str, str], *target_phone_numbers: str
    ) -> SMSSendResponse:
        """
        Send the rendered template to ``target_phone_numbers``.

        Args:
            params: Placeholder name to replacement text
            target_phone_numbers: Sender first, then recipients

        Returns:
            The decoded per-recipient results, all successful

        Raises:
            SMSParameterError: If no target number is given
            SMSTransportError: If the request could not be delivered
            SMSSendFailedError: If the provider answers with a non-200 status
            SMSResponseDecodeError: If the response body cannot be decoded
            SMSDeliveryError: If any recipient is reported unsuccessful
        """
        payload = self.build_payload(params, target_phone_numbers)
        logger.debug(
            f"Sending SMS from {payload['from']} to "
            f"{len(payload['smsRecipients'])} recipient(s)"
        )

        try:
            with httpx.Client(**self._client_options()) as client:
                response = client.post(self.sms_url, json=payload, headers=self._headers())
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Failed to send SMS from {payload['from']}: {str(e)}")
            raise SMSTransportError(f"error sending request: {str(e)}") from e

        return self._interpret(response)

    async def send_message_async(
        self, params: Mapping[str, str], *target_phone_numbers: str
    ) -> SMSSendResponse:
        """Async variant of ``send_message`` with the same errors."""
        payload = self.build_payload(params, target_phone_numbers)
        logger.debug(
            f"Sending SMS from {payload['from']} to "
            f"{len(payload['smsRecipients'])} recipient(s)"
        )

        try:
            async with httpx.AsyncClient(**self._client_options()) as client:
                response = await client.post(
                    self.sms_url, json=payload, headers=self._headers()
                )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Failed to send SMS from {payload['from']}: {str(e)}")
            raise SMSTransportError(f"error sending request: {str(e)}") from e

        return self._interpret(response)

    # ═══════ RESPONSE ═══════

    def _interpret(self, response: httpx.Response) -> SMSSendResponse:
        if response.status_code != 200:
            logger.error(f"SMS provider returned HTTP {response.status_code}")
            raise SMSSendFailedError()

        try:
            body = response.json()
        except ValueError as e:
            logger.error(f"SMS provider returned a malformed body: {str(e)}")
            raise SMSResponseDecodeError(f"error parsing response body: {str(e)}") from e

        result = SMSSendResponse.from_dict(body)

        failure = result.first_failure()
        if failure is not None:
            logger.error(
                f"SMS delivery failed for {failure.to}: "
                f"{failure.error_message or 'no error message'}"
            )
            raise SMSDeliveryError(
                failure.to,
                error_message=failure.error_message,
                http_status_code=failure.http_status_code,
            )

        logger.info(f"SMS sent successfully to {len(result.results)} recipient(s)")
        return result


__all__ = [
    "AzureSMSConfig",
    "AzureSMSClient",
    "DEFAULT_API_VERSION",
]
