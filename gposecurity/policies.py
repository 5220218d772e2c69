"""Single-block settings sections of the GPO security template."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, TypeVar

_T = TypeVar("_T")


class PolicyDecodeError(ValueError):
    """Raised when resource data cannot be decoded into a settings block."""


def _decode_block(cls: type[_T], data: Mapping[str, Any]) -> _T:
    """Build a settings block of type ``cls`` from resource key/value pairs.

    Keys that the block does not know are ignored.
    """
    if not isinstance(data, Mapping):
        raise PolicyDecodeError(
            f"expected a mapping for {cls.__name__}, got {type(data).__name__}"
        )
    values: dict[str, str] = {}
    for field in fields(cls):  # type: ignore[arg-type]
        value = data.get(field.name)
        if value is None:
            continue
        if not isinstance(value, str):
            raise PolicyDecodeError(
                f"'{field.name}' expected type 'string', got {type(value).__name__}"
            )
        values[field.name] = value
    return cls(**values)


def _encode_block(block: Any) -> list[dict[str, str]]:
    """Return a settings block in the form stored under its resource attribute."""
    return [{field.name: getattr(block, field.name) for field in fields(block)}]


@dataclass
class EventLogPolicy:
    """Settings shared by the system, audit and application log sections."""

    maximum_log_size: str = ""
    audit_log_retention_period: str = ""
    retention_days: str = ""
    restrict_guest_access: str = ""

    @classmethod
    def from_resource(cls, data: Mapping[str, Any]) -> "EventLogPolicy":
        """Build the section from a mapping of resource keys to string values."""
        return _decode_block(cls, data)

    def to_resource_data(self) -> list[dict[str, str]]:
        """Return the section in the form stored under its resource attribute."""
        return _encode_block(self)


@dataclass
class SystemLog(EventLogPolicy):
    """The System Log section."""


@dataclass
class AuditLog(EventLogPolicy):
    """The Audit Log section."""


@dataclass
class ApplicationLog(EventLogPolicy):
    """The Application Log section."""


@dataclass
class AccountLockout:
    """The account lockout part of the System Access section."""

    force_logoff_when_hour_expire: str = ""
    lockout_duration: str = ""
    lockout_bad_count: str = ""
    reset_lockout_count: str = ""

    @classmethod
    def from_resource(cls, data: Mapping[str, Any]) -> "AccountLockout":
        """Build the section from a mapping of resource keys to string values."""
        return _decode_block(cls, data)

    def to_resource_data(self) -> list[dict[str, str]]:
        """Return the section in the form stored under its resource attribute."""
        return _encode_block(self)


@dataclass
class EventAudit:
    """The Event Audit section."""

    audit_account_manage: str = ""
    audit_ds_access: str = ""
    audit_account_logon: str = ""
    audit_logon_events: str = ""
    audit_object_access: str = ""
    audit_policy_change: str = ""
    audit_privilege_use: str = ""
    audit_process_tracking: str = ""
    audit_system_events: str = ""

    @classmethod
    def from_resource(cls, data: Mapping[str, Any]) -> "EventAudit":
        """Build the section from a mapping of resource keys to string values."""
        return _decode_block(cls, data)

    def to_resource_data(self) -> list[dict[str, str]]:
        """Return the section in the form stored under its resource attribute."""
        return _encode_block(self)


@dataclass
class KerberosPolicy:
    """The Kerberos Policy section."""

    max_service_age: str = ""
    max_ticket_age: str = ""
    max_renew_age: str = ""
    max_clock_skew: str = ""
    ticket_validate_client: str = ""

    @classmethod
    def from_resource(cls, data: Mapping[str, Any]) -> "KerberosPolicy":
        """Build the section from a mapping of resource keys to string values."""
        return _decode_block(cls, data)

    def to_resource_data(self) -> list[dict[str, str]]:
        """Return the section in the form stored under its resource attribute."""
        return _encode_block(self)


@dataclass
class PasswordPolicies:
    """The password policy part of the System Access section."""

    maximum_password_age: str = ""
    minimum_password_age: str = ""
    minimum_password_length: str = ""
    password_complexity: str = ""
    clear_text_password: str = ""
    password_history_size: str = ""

    @classmethod
    def from_resource(cls, data: Mapping[str, Any]) -> "PasswordPolicies":
        """Build the section from a mapping of resource keys to string values."""
        return _decode_block(cls, data)

    def to_resource_data(self) -> list[dict[str, str]]:
        """Return the section in the form stored under its resource attribute."""
        return _encode_block(self)