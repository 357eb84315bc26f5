"""
Communication Ports.

Defines the protocol for sending template-rendered SMS messages.
"""

from typing import Mapping, Protocol

from acs_sms.domain.value_objects import SMSSendResponse


class SMSSenderPort(Protocol):
    """
    Port for sending SMS.

    Implementations: Azure Communication Services.
    """

    def send_message(
        self, params: Mapping[str, str], *target_phone_numbers: str
    ) -> SMSSendResponse:
        """
        Render the configured template with ``params`` and send it.

        Args:
            params: Placeholder name to replacement text
            target_phone_numbers: Phone numbers, at least one

        Raises:
            SMSError: If sending fails
        """
        ...

    async def send_message_async(
        self, params: Mapping[str, str], *target_phone_numbers: str
    ) -> SMSSendResponse:
        """Async variant of ``send_message``."""
        ...
