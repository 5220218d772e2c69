"""Resource schema for GPO security settings."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional


class FieldType(enum.Enum):
    """Kind of value a schema field holds."""

    STRING = "string"
    BOOL = "bool"
    LIST = "list"
    SET = "set"


@dataclass(frozen=True)
class SchemaField:
    """Description of one attribute of a resource."""

    type: FieldType
    description: str = ""
    required: bool = False
    optional: bool = False
    force_new: bool = False
    max_items: int = 0
    elem: Optional[Mapping[str, "SchemaField"]] = None

    @property
    def is_block(self) -> bool:
        """True when the field holds nested resource blocks."""
        return self.elem is not None


def _settings(descriptions: Mapping[str, str]) -> Mapping[str, SchemaField]:
    """Build a block of optional string settings from key descriptions."""
    return MappingProxyType(
        {
            key: SchemaField(FieldType.STRING, description=text, optional=True)
            for key, text in descriptions.items()
        }
    )


def _required_strings(descriptions: Mapping[str, str]) -> Mapping[str, SchemaField]:
    return MappingProxyType(
        {
            key: SchemaField(FieldType.STRING, description=text, required=True)
            for key, text in descriptions.items()
        }
    )


_MAX_AGE_DOC = (
    "Number of days before password expires (-1-999). "
    "If set to -1, it means the password never expires."
)
_MIN_AGE_DOC = "Number of days a password must be used before changing it (0-999)."
_MIN_LENGTH_DOC = (
    "Minimum number of characters used in a password (0-2^16). "
    "If set to 0, it means no password is required."
)
_COMPLEXITY_DOC = (
    "Password must meet complexity requirements (0-2^16). If set to 0, then "
    "requirements do not apply, any other value means requirements are applied"
)
_CLEAR_TEXT_DOC = (
    "Store password with reversible encryption (0-2^16). The password will not "
    "be stored with reversible encryption if the value is set to 0. Reversible "
    "encryption will be used in any other case."
)
_HISTORY_DOC = (
    "The number of unique new passwords that are required before an old "
    "password can be reused in association with a user account (0-2^16).  "
    "A value of 0 indicates that the password history is disabled."
)
_POLICIES_BLOCK_DOC = "Settings related to password policies."


def _password_policies() -> Mapping[str, SchemaField]:
    return _settings(
        {
            "maximum_password_age": _MAX_AGE_DOC,
            "minimum_password_age": _MIN_AGE_DOC,
            "minimum_password_length": _MIN_LENGTH_DOC,
            "password_complexity": _COMPLEXITY_DOC,
            "clear_text_password": _CLEAR_TEXT_DOC,
            "password_history_size": _HISTORY_DOC,
        }
    )


def _account_lockout() -> Mapping[str, SchemaField]:
    return _settings(
        {
            "force_logoff_when_hour_expire": "Disconnect SMB sessions when logon hours expire.",
            "lockout_duration": "Number of minutes a locked out account must remain locked out.",
            "lockout_bad_count": "Number of failed logon attempts until a account is locked.",
            "reset_lockout_count": "Number of minutes a account will remain locked after a failed logon attempt.",
        }
    )


def _kerberos_policy() -> Mapping[str, SchemaField]:
    return _settings(
        {
            "max_service_age": "Maximum amount of minutes a ticket must be valid to access a service or resource. Minimum should be 10 and maximum should be equal to `max_ticket_age`.",
            "max_ticket_age": "Maximum amount of hours a ticket-granting ticket is valid (0-99999).",
            "max_renew_age": "Number of days during which a ticket-granting ticket can be renewed (0-99999).",
            "max_clock_skew": "Maximum time difference, in minutes, between the client clock and the server clock. (0-99999).",
            "ticket_validate_client": "Control if the session ticket is validated for every request. A non-zero value disables the policy.",
        }
    )


def _event_audit() -> Mapping[str, SchemaField]:
    return _settings(
        {
            "audit_system_events": "Audit system events.",
            "audit_logon_events": "Audit logon events.",
            "audit_privilege_use": "Audit user attempts of exercising user rights.",
            "audit_policy_change": "Audit attempts to change a policy.",
            "audit_account_manage": "Audit account management events.",
            "audit_process_tracking": "Audit process related events.",
            "audit_ds_access": "Audit access attempts to AD objects.",
            "audit_object_access": "Audit access attempts to non-AD objects.",
            "audit_account_logon": "Audit credential validation.",
        }
    )


def _event_log() -> Mapping[str, SchemaField]:
    # System, audit and application logs share the same keys.
    return _settings(
        {
            "maximum_log_size": "Maximum size of log in KiloBytes. (64-4194240)",
            "audit_log_retention_period": "Control log retention. Values: 0: overwrite events as needed, 1: overwrite events as specified specified by `retention_days`, 2: never overwrite events.",
            "retention_days": "Number of days before new events overwrite old events. (1-365)",
            "restrict_guest_access": "Restrict access to logs for guest users. A non-zero value restricts access to guest users.",
        }
    )


_ACL_DESCRIPTION = "Security descriptor to apply."


def _restricted_groups() -> Mapping[str, SchemaField]:
    return _required_strings(
        {
            "group_name": "Name of the group we are managing.",
            "group_members": "Comma separated list of group names or SIDs that are members of the group.",
            "group_memberof": "Comma separated list of group names or SIDs that this group belongs to.",
        }
    )


def _registry_values() -> Mapping[str, SchemaField]:
    return _required_strings(
        {
            "key_name": "Fully qualified name of the key.",
            "value_type": "Data type of the key's value. 1: String, 2: Expand String, 3: Binary, 4: DWORD, 5: MULTI_SZ.",
            "value": "The value of the key, matching the type set in `value_type`.",
        }
    )


def _registry_keys() -> Mapping[str, SchemaField]:
    return _required_strings(
        {
            "key_name": "Fully qualified name of the key.",
            "propagation_mode": "Control permission propagation. 0: Propagate permissions to all subkeys, 1: Replace existing permissions on all subkeys, 2: Do not allow permissions to be replaced on the key.",
            "acl": _ACL_DESCRIPTION,
        }
    )


def _system_services() -> Mapping[str, SchemaField]:
    return _required_strings(
        {
            "service_name": "Name of the service.",
            "startup_mode": "Startup mode of the service. Possible values are 2: Automatic, 3: Manual, 4: Disabled.",
            "acl": _ACL_DESCRIPTION,
        }
    )


def _filesystem() -> Mapping[str, SchemaField]:
    return _required_strings(
        {
            "path": "Path of the file or directory.",
            "propagation_mode": "Control permission propagation. 0: Propagate permissions to all subfolders and files, 1: Replace existing permissions on all subfolders and files, 2: Do not allow permissions to be replaced.",
            "acl": _ACL_DESCRIPTION,
        }
    )


def _single_block(elem: Mapping[str, SchemaField], description: str) -> SchemaField:
    return SchemaField(
        FieldType.LIST, description=description, optional=True, max_items=1, elem=elem
    )


def _set_block(elem: Mapping[str, SchemaField], description: str) -> SchemaField:
    return SchemaField(FieldType.SET, description=description, optional=True, elem=elem)


def gpo_security_schema() -> dict[str, SchemaField]:
    """Return the schema of the GPO security settings resource."""
    policies_block = _single_block(_password_policies(), _POLICIES_BLOCK_DOC)
    return {
        "gpo_container": SchemaField(
            FieldType.STRING,
            description="The GUID of the container the security settings belong to.",
            required=True,
            force_new=True,
        ),
        "password_policies": policies_block,
        "account_lockout": _single_block(
            _account_lockout(), "Settings related to account lockout."
        ),
        "kerberos_policy": _single_block(
            _kerberos_policy(), "Settings related to kerberos policies."
        ),
        "system_log": _single_block(_event_log(), "System log related settings."),
        "audit_log": _single_block(_event_log(), "Audit log related settings."),
        "application_log": _single_block(
            _event_log(), "Application log related settings."
        ),
        "event_audit": _single_block(
            _event_audit(),
            "Event audit related settings. Valid values for all items below are: "
            "0 (None), 1 (Success audits only), 2 (Failure audits only), "
            "3 (Success and failure audits), 4 (None)",
        ),
        "restricted_groups": _set_block(
            _restricted_groups(), "Settings related to Groups Membership."
        ),
        "registry_values": _set_block(
            _registry_values(), "Settings related to Registry Values."
        ),
        "system_services": _set_block(
            _system_services(), "Settings related to System Services."
        ),
        "registry_keys": _set_block(
            _registry_keys(), "Settings related to Registry Keys."
        ),
        "filesystem": _set_block(
            _filesystem(), "Settings related to File System permissions."
        ),
    }


def gpo_security_schema_keys() -> list[str]:
    """Return every top-level key of the GPO security settings schema."""
    return list(gpo_security_schema())