"""
Domain value objects for SMS sending.

Value objects are immutable and defined only by their attributes. These
hold the decoded provider response for a single send call; they are
transient and never persisted.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from acs_sms.domain.errors import SMSResponseDecodeError


def _optional_str(data: dict, key: str) -> Optional[str]:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise SMSResponseDecodeError(f"error parsing response body: '{key}' must be a string")
    return value


# ═══════════════════════════════════════════════════════════════
# PER-RECIPIENT RESULT
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class SMSSendResult:
    """
    Outcome the provider reports for one recipient.

    ``repeatability_result`` tells whether the provider treated the request
    as a duplicate of an earlier one (e.g. "accepted", "rejected").
    """

    to: str
    successful: bool
    message_id: Optional[str] = None
    http_status_code: Optional[int] = None
    error_message: Optional[str] = None
    repeatability_result: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "SMSSendResult":
        if not isinstance(data, dict):
            raise SMSResponseDecodeError(
                f"error parsing response body: expected object, got {type(data).__name__}"
            )

        to = data.get("to")
        if to is not None and not isinstance(to, str):
            raise SMSResponseDecodeError("error parsing response body: 'to' must be a string")

        successful = data.get("successful")
        if successful is None:
            successful = False
        if not isinstance(successful, bool):
            raise SMSResponseDecodeError(
                "error parsing response body: 'successful' must be a boolean"
            )

        status = data.get("httpStatusCode")
        # bool is an int subclass
        if status is not None and (isinstance(status, bool) or not isinstance(status, int)):
            raise SMSResponseDecodeError(
                "error parsing response body: 'httpStatusCode' must be an integer"
            )

        return cls(
            to=to or "",
            successful=successful,
            message_id=_optional_str(data, "messageId"),
            http_status_code=status,
            error_message=_optional_str(data, "errorMessage"),
            repeatability_result=_optional_str(data, "repeatabilityResult"),
        )


# ═══════════════════════════════════════════════════════════════
# WHOLE RESPONSE
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class SMSSendResponse:
    """Decoded body of a send call: one result per recipient, in order."""

    results: tuple[SMSSendResult, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Any) -> "SMSSendResponse":
        """
        Decode ``{"value": [...]}``.

        Raises:
            SMSResponseDecodeError: If the body does not have that shape
        """
        if not isinstance(data, dict):
            raise SMSResponseDecodeError(
                f"error parsing response body: expected object, got {type(data).__name__}"
            )
        if "value" not in data:
            raise SMSResponseDecodeError("error parsing response body: missing 'value'")

        value = data["value"]
        if not isinstance(value, list):
            raise SMSResponseDecodeError("error parsing response body: 'value' must be a list")

        return cls(results=tuple(SMSSendResult.from_dict(item) for item in value))

    @property
    def successful(self) -> bool:
        return all(result.successful for result in self.results)

    def first_failure(self) -> Optional[SMSSendResult]:
        """Return the first recipient the provider marked unsuccessful, if any."""
        for result in self.results:
            if not result.successful:
                return result
        return None
