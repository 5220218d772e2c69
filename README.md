# gposecurity

Data models for the Security Settings extension of Group Policy Objects.
The package has three modules:

- `gposecurity.schema`: the schema of the attributes a GPO security
  settings resource accepts;
- `gposecurity.policies`: the single-block policy sections (password
  policies, account lockout, Kerberos policy, system/audit/application
  logs, event audit);
- `gposecurity.sections`: a small INF template reader and writer, and the
  line-based sections (file system, registry keys, registry values,
  restricted groups, system services).

It has no dependencies beyond the standard library.

## Installation

```
pip install gposecurity
```

## Schema

```python
from gposecurity.schema import FieldType, gpo_security_schema, gpo_security_schema_keys

schema = gpo_security_schema()
field = schema["password_policies"]
print(field.type is FieldType.LIST, field.max_items, field.is_block)
print(sorted(field.elem))           # the keys of the nested block
print(gpo_security_schema_keys())   # every top-level key, gpo_container included
```

Each entry is a frozen `SchemaField` with `type` (a `FieldType`:
`STRING`, `BOOL`, `LIST` or `SET`), `description`, `required`,
`optional`, `force_new`, `max_items` and `elem` (the nested block's fields,
or `None`). `gpo_container` is a required string that forces a new
resource; the policy sections are optional lists of at most one block, and
the line-based sections are optional sets of blocks.

## Policy sections

Each policy section is a dataclass of string settings, all empty by
default. `from_resource` builds one from a mapping of resource keys to
strings; `to_resource_data` returns it as a list holding one mapping, the
form a resource stores it in.

```python
from gposecurity.policies import PasswordPolicies, SystemLog

pp = PasswordPolicies.from_resource({"maximum_password_age": "10"})
assert pp.maximum_password_age == "10"
print(pp.to_resource_data())

log = SystemLog.from_resource({"maximum_log_size": "10"})
assert log.maximum_log_size == "10"
```

`SystemLog`, `AuditLog` and `ApplicationLog` share the fields of
`EventLogPolicy`. Keys a section does not know and values of `None` are
ignored; data that is not a mapping, or a known key with a value that is
not a string, raises `PolicyDecodeError` (a `ValueError`).

## INF templates and line-based sections

`InfDocument` reads and writes INI-style templates: `=` separates a key
from its value, a line without one is a key on its own, lines starting
with `#` or `;` are comments, and output uses CRLF line breaks.

```python
from gposecurity.sections import InfDocument, RegistryKeys

rk = RegistryKeys.from_resource([
    {"key_name": r"HKLM\Some\Key", "propagation_mode": "2", "acl": "D:ACL"},
])
print(rk.keys)            # ['"HKLM\\Some\\Key",2,"D:ACL"']

doc = InfDocument()
rk.write_ini(doc)
print(doc.section("Registry Keys").body)
text = doc.dumps()

parsed = InfDocument.parse(text)
again = RegistryKeys.from_ini(parsed, "Registry Keys")
assert again.keys == rk.keys
```

The sections and the template section each one writes:

| Class | Section written |
| --- | --- |
| `FileSystem` | `File Security` |
| `RegistryKeys` | `Registry Keys` |
| `RegistryValues` | `Registry Values` |
| `RestrictedGroups` | `Group Membership` |
| `SystemServices` | `Service General Setting` |

All of them offer `from_resource(items)`, `from_ini(doc, section_name)`,
`to_resource_data()` and `write_ini(doc)`. Nothing is written for an empty
section. `RestrictedGroups` stores each `RestrictedGroup` as
`<name>__Members` and `<name>__Memberof` keys; `SystemServices.from_ini`
drops double quotes from the lines it reads.

`SectionError` (a `ValueError`) is raised when a section named in
`from_ini` is missing, when a resource block lacks an attribute or holds a
non-string one, when a line does not split into three comma-separated
fields, when a restricted-groups key is not of the form `<name>__<kind>`,
and when a template cannot be parsed.

## What this package does not do

It only models, reads and writes the settings. It does not connect to a
domain controller, create or link Group Policy Objects, or apply a
template, and it provides no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```