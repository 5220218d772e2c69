import pytest

from gposecurity.policies import (
    AccountLockout,
    ApplicationLog,
    AuditLog,
    EventAudit,
    EventLogPolicy,
    KerberosPolicy,
    PasswordPolicies,
    PolicyDecodeError,
    SystemLog,
)
from gposecurity.schema import gpo_security_schema


def test_event_log_policy_from_resource():
    out = EventLogPolicy.from_resource({"maximum_log_size": "10"})
    assert out.maximum_log_size == "10"
    assert out.retention_days == ""


def test_account_lockout_from_resource():
    out = AccountLockout.from_resource({"force_logoff_when_hour_expire": "10"})
    assert out.force_logoff_when_hour_expire == "10"


def test_account_lockout_resource_data():
    data = AccountLockout(lockout_bad_count="10").to_resource_data()
    assert data[0]["lockout_bad_count"] == "10"


@pytest.mark.parametrize("cls", [ApplicationLog, AuditLog, SystemLog])
def test_log_from_resource(cls):
    out = cls.from_resource({"maximum_log_size": "10"})
    assert isinstance(out, cls)
    assert out.maximum_log_size == "10"


@pytest.mark.parametrize("cls", [ApplicationLog, AuditLog, SystemLog])
def test_log_resource_data(cls):
    data = cls(maximum_log_size="10").to_resource_data()
    assert data[0]["maximum_log_size"] == "10"


def test_event_audit_from_resource():
    out = EventAudit.from_resource({"audit_logon_events": "1"})
    assert out.audit_logon_events == "1"


def test_event_audit_resource_data():
    data = EventAudit(audit_account_logon="10").to_resource_data()
    assert data[0]["audit_account_logon"] == "10"


def test_kerberos_from_resource():
    out = KerberosPolicy.from_resource({"max_service_age": "10"})
    assert out.max_service_age == "10"


def test_kerberos_resource_data():
    data = KerberosPolicy(max_ticket_age="10").to_resource_data()
    assert data[0]["max_ticket_age"] == "10"


def test_password_policies_from_resource():
    out = PasswordPolicies.from_resource({"maximum_password_age": "placeholder"})
    assert out.maximum_password_age == "placeholder"


def test_password_policies_resource_data():
    data = PasswordPolicies(maximum_password_age="placeholder").to_resource_data()
    assert data[0]["maximum_password_age"] == "placeholder"


@pytest.mark.parametrize(
    "cls, key",
    [
        (PasswordPolicies, "password_policies"),
        (AccountLockout, "account_lockout"),
        (KerberosPolicy, "kerberos_policy"),
        (SystemLog, "system_log"),
        (AuditLog, "audit_log"),
        (ApplicationLog, "application_log"),
        (EventAudit, "event_audit"),
    ],
)
def test_resource_data_matches_schema(cls, key):
    data = cls().to_resource_data()
    assert len(data) == 1
    assert set(data[0]) == set(gpo_security_schema()[key].elem)


def test_round_trip():
    original = KerberosPolicy(max_clock_skew="5", ticket_validate_client="1")
    assert KerberosPolicy.from_resource(original.to_resource_data()[0]) == original


def test_unknown_keys_are_ignored():
    out = EventAudit.from_resource({"not_a_setting": "x", "audit_ds_access": "2"})
    assert out == EventAudit(audit_ds_access="2")


def test_none_value_left_empty():
    out = AccountLockout.from_resource({"lockout_duration": None})
    assert out.lockout_duration == ""


def test_non_string_value_rejected():
    with pytest.raises(PolicyDecodeError):
        PasswordPolicies.from_resource({"maximum_password_age": 10})


def test_non_mapping_rejected():
    with pytest.raises(PolicyDecodeError):
        EventLogPolicy.from_resource(["maximum_log_size"])