"""
Tests for default client creation.
"""

import sys
import types

import pytest
from unittest.mock import patch

from acs_sms.adapters.azure import AzureSMSClient
from acs_sms.domain.errors import SMSConfigurationError
from acs_sms.factory import create_default_sms_client


ENV_VARS = [
    "ACS_SMS_API_KEY",
    "ACS_SMS_ENDPOINT",
    "ACS_SMS_TEMPLATE",
    "ACS_SMS_TIMEOUT",
    "ACS_SMS_API_VERSION",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def no_django():
    with patch("acs_sms.factory._client_from_django", return_value=None):
        yield


def _fake_django(acs_sms_settings):
    class ImproperlyConfigured(Exception):
        pass

    django = types.ModuleType("django")
    conf = types.ModuleType("django.conf")
    core = types.ModuleType("django.core")
    exceptions = types.ModuleType("django.core.exceptions")

    conf.settings = types.SimpleNamespace(ACS_SMS=acs_sms_settings)
    exceptions.ImproperlyConfigured = ImproperlyConfigured
    django.conf = conf
    django.core = core
    core.exceptions = exceptions

    return {
        "django": django,
        "django.conf": conf,
        "django.core": core,
        "django.core.exceptions": exceptions,
    }


def test_env_configuration(clean_env, no_django):
    clean_env.setenv("ACS_SMS_API_KEY", "env-key")
    clean_env.setenv("ACS_SMS_ENDPOINT", "https://env.example.com")
    clean_env.setenv("ACS_SMS_TEMPLATE", "Code {code}")
    clean_env.setenv("ACS_SMS_TIMEOUT", "3")

    client = create_default_sms_client()

    assert isinstance(client, AzureSMSClient)
    assert client.config.api_key == "env-key"
    assert client.config.endpoint == "https://env.example.com"
    assert client.config.timeout == 3.0
    assert client.render({"code": "7"}) == "Code 7"


def test_env_api_version_override(clean_env, no_django):
    clean_env.setenv("ACS_SMS_API_KEY", "env-key")
    clean_env.setenv("ACS_SMS_ENDPOINT", "https://env.example.com")
    clean_env.setenv("ACS_SMS_API_VERSION", "2025-01-01")

    client = create_default_sms_client()

    assert client.sms_url == "https://env.example.com/sms?api-version=2025-01-01"


def test_env_missing_endpoint_fails(clean_env, no_django):
    clean_env.setenv("ACS_SMS_API_KEY", "env-key")

    with pytest.raises(SMSConfigurationError):
        create_default_sms_client()


def test_nothing_configured_returns_none(clean_env, no_django):
    assert create_default_sms_client() is None


def test_django_settings_take_precedence(clean_env):
    clean_env.setenv("ACS_SMS_API_KEY", "env-key")
    clean_env.setenv("ACS_SMS_ENDPOINT", "https://env.example.com")

    modules = _fake_django(
        {
            "API_KEY": "django-key",
            "ENDPOINT": "https://django.example.com",
            "TEMPLATE": "Hello {name}",
        }
    )

    with patch.dict(sys.modules, modules):
        client = create_default_sms_client()

    assert client.config.api_key == "django-key"
    assert client.config.endpoint == "https://django.example.com"
    assert client.config.timeout is None
    assert client.config.api_version == "2021-03-07"


def test_django_without_sms_settings_falls_back_to_env(clean_env):
    clean_env.setenv("ACS_SMS_API_KEY", "env-key")
    clean_env.setenv("ACS_SMS_ENDPOINT", "https://env.example.com")

    with patch.dict(sys.modules, _fake_django(None)):
        client = create_default_sms_client()

    assert client.config.api_key == "env-key"
