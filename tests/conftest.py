"""
Pytest configuration for py-acs-sms tests.
"""

import pytest
from unittest.mock import MagicMock

from acs_sms.adapters.azure import AzureSMSClient, AzureSMSConfig


@pytest.fixture
def azure_config():
    return AzureSMSConfig(
        api_key="test-key",
        endpoint="https://acs.example.com",
        template="Your code is {code}",
    )


@pytest.fixture
def azure_client(azure_config):
    return AzureSMSClient(azure_config)


# -----------------------------------------------------------------------------
# MOCKS
# -----------------------------------------------------------------------------


@pytest.fixture
def make_response():
    """Build a fake httpx.Response with a status code and JSON body."""

    def _make(status_code=200, body=None, json_error=None):
        response = MagicMock()
        response.status_code = status_code
        if json_error is not None:
            response.json.side_effect = json_error
        else:
            response.json.return_value = body
        return response

    return _make


@pytest.fixture
def all_successful_body():
    return {
        "value": [
            {
                "to": "+15551234",
                "messageId": "msg-1",
                "httpStatusCode": 202,
                "errorMessage": None,
                "repeatabilityResult": "accepted",
                "successful": True,
            },
            {
                "to": "+15555678",
                "messageId": "msg-2",
                "httpStatusCode": 202,
                "errorMessage": None,
                "repeatabilityResult": "accepted",
                "successful": True,
            },
        ]
    }
