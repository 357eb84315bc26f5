"""Ports (interfaces) for SMS sending."""

from acs_sms.ports.communication import SMSSenderPort

__all__ = ["SMSSenderPort"]
