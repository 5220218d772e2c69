"""Line-based sections of the GPO security template and a small INF document model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Mapping, Optional

LINE_BREAK = "\r\n"
_DEFAULT_SECTION = "DEFAULT"
_DELIMITER = "="


class SectionError(ValueError):
    """Raised when a template section cannot be read, built or written."""


def _strip_surrounding_quotes(text: str) -> str:
    """Drop one pair of double quotes when they wrap the text and no other quote appears."""
    if len(text) >= 2 and text[0] == '"' and text[-1] == '"' and text.count('"') == 2:
        return text[1:-1]
    return text


@dataclass
class InfSection:
    """A named section holding ordered keys, or a raw body of text."""

    name: str
    raw_body: Optional[str] = None
    _keys: dict[str, Optional[str]] = field(default_factory=dict, repr=False)

    def key_strings(self) -> list[str]:
        """Return the key names in the order they were added."""
        return list(self._keys)

    def get(self, key: str) -> str:
        """Return the value of a key; keys without a value read as "true"."""
        try:
            value = self._keys[key]
        except KeyError:
            raise KeyError(f"key {key!r} not exists in section {self.name!r}") from None
        return "true" if value is None else value

    def set(self, key: str, value: Optional[str]) -> None:
        """Add or replace a key; a value of None makes a key without a value."""
        key = key.strip()
        if not key:
            raise SectionError("key name cannot be empty")
        self._keys[key] = value

    @property
    def body(self) -> str:
        """The raw body of the section with surrounding whitespace removed."""
        return (self.raw_body or "").strip()

    def __contains__(self, key: object) -> bool:
        return key in self._keys

    def _lines(self) -> Iterator[str]:
        if self.raw_body is not None:
            body = self.raw_body
            if body and not body.endswith(("\n", "\r")):
                body += LINE_BREAK
            yield body
            return
        for key, value in self._keys.items():
            yield key + LINE_BREAK if value is None else f"{key}{_DELIMITER}{value}{LINE_BREAK}"


class InfDocument:
    """An INI-style security template: "=" delimits values, lines without one are keys."""

    def __init__(self) -> None:
        self._sections: dict[str, InfSection] = {}

    @classmethod
    def parse(cls, text: str) -> "InfDocument":
        """Read a template from text."""
        doc = cls()
        current: Optional[InfSection] = None
        for number, raw_line in enumerate(text.splitlines(), start=1):
            line = raw_line.strip()
            if not line or line[0] in "#;":
                continue
            if line[0] == "[":
                close = line.rfind("]")
                if close == -1:
                    raise SectionError(f"unclosed section on line {number}: {line}")
                name = line[1:close].strip()
                if not name:
                    raise SectionError(f"empty section name on line {number}")
                current = doc.new_section(name)
                continue
            if current is None:
                current = doc.new_section(_DEFAULT_SECTION)
            key, value = cls._split_key_value(line, number)
            current.set(key, value)
        return doc

    @staticmethod
    def _split_key_value(line: str, number: int) -> tuple[str, Optional[str]]:
        if line[0] == '"':
            close = line.find('"', 1)
            if close == -1:
                raise SectionError(f"missing closing key quote on line {number}: {line}")
            delimiter = line.find(_DELIMITER, close + 1)
            if delimiter == -1:
                return _strip_surrounding_quotes(line), None
            key = line[1:close]
        else:
            delimiter = line.find(_DELIMITER)
            if delimiter == -1:
                return _strip_surrounding_quotes(line), None
            key = line[:delimiter].strip()
        value = _strip_surrounding_quotes(line[delimiter + 1 :].strip())
        return key, value

    def new_section(self, name: str) -> InfSection:
        """Return the named section, creating it when missing."""
        if not name:
            raise SectionError("empty section name")
        section = self._sections.get(name)
        if section is None:
            section = InfSection(name)
            self._sections[name] = section
        return section

    def new_raw_section(self, name: str, body: str) -> InfSection:
        """Create or replace the named section with a raw body."""
        section = self.new_section(name)
        section.raw_body = body
        return section

    def get_section(self, name: str) -> InfSection:
        """Return an existing section or raise SectionError."""
        try:
            return self._sections[name]
        except KeyError:
            raise SectionError(f"section {name!r} does not exist") from None

    def section(self, name: str) -> InfSection:
        """Return the named section, creating an empty one when missing."""
        return self.new_section(name)

    def sections(self) -> list[str]:
        """Return the section names in order."""
        return list(self._sections)

    def __contains__(self, name: object) -> bool:
        return name in self._sections

    def dumps(self) -> str:
        """Render the template as text with CRLF line breaks."""
        parts: list[str] = []
        for section in self._sections.values():
            if section.name == _DEFAULT_SECTION and not section.key_strings():
                continue
            parts.append(f"[{section.name}]{LINE_BREAK}")
            parts.extend(section._lines())
            parts.append(LINE_BREAK)
        return "".join(parts)


def _field(item: Mapping[str, Any], name: str) -> str:
    try:
        value = item[name]
    except (KeyError, TypeError):
        raise SectionError(f"missing attribute {name!r}") from None
    if not isinstance(value, str):
        raise SectionError(f"attribute {name!r} must be a string, got {type(value).__name__}")
    return value


def _format_line(item: Mapping[str, Any], first: str, middle: str, last: str) -> str:
    return f'"{_field(item, first)}",{_field(item, middle)},"{_field(item, last)}"'


def _split_line(line: str, columns: tuple[str, str, str], kind: str) -> dict[str, str]:
    values = line.split(",", 2)
    if len(values) != 3:
        raise SectionError(f"invalid {kind} line: {line}")
    return dict(zip(columns, values))


def _write_raw(doc: InfDocument, name: str, lines: list[str]) -> None:
    if not lines:
        return
    doc.new_raw_section(name, LINE_BREAK.join(lines) + LINE_BREAK)


def _load_section(doc: InfDocument, section_name: str) -> InfSection:
    try:
        return doc.get_section(section_name)
    except SectionError as exc:
        raise SectionError(f"error while parsing section {section_name!r}: {exc}") from exc


@dataclass
class FileSystem:
    """The File Security section: one permission line per path."""

    SECTION_NAME = "File Security"
    _COLUMNS = ("path", "propagation_mode", "acl")

    paths: list[str] = field(default_factory=list)

    @classmethod
    def from_resource(cls, items: Iterable[Mapping[str, Any]]) -> "FileSystem":
        """Build the section from resource blocks."""
        return cls([_format_line(item, *cls._COLUMNS) for item in items])

    @classmethod
    def from_ini(cls, doc: InfDocument, section_name: str) -> "FileSystem":
        """Read the section's lines from a template."""
        return cls(_load_section(doc, section_name).key_strings())

    def to_resource_data(self) -> list[dict[str, str]]:
        """Return the lines as resource blocks."""
        return [_split_line(line, self._COLUMNS, "filesystem") for line in self.paths]

    def write_ini(self, doc: InfDocument) -> None:
        """Write the section into a template; nothing is written when empty."""
        _write_raw(doc, self.SECTION_NAME, self.paths)


@dataclass
class RegistryKeys:
    """The Registry Keys section: one permission line per key."""

    SECTION_NAME = "Registry Keys"
    _COLUMNS = ("key_name", "propagation_mode", "acl")

    keys: list[str] = field(default_factory=list)

    @classmethod
    def from_resource(cls, items: Iterable[Mapping[str, Any]]) -> "RegistryKeys":
        """Build the section from resource blocks."""
        return cls([_format_line(item, *cls._COLUMNS) for item in items])

    @classmethod
    def from_ini(cls, doc: InfDocument, section_name: str) -> "RegistryKeys":
        """Read the section's lines from a template."""
        return cls(_load_section(doc, section_name).key_strings())

    def to_resource_data(self) -> list[dict[str, str]]:
        """Return the lines as resource blocks."""
        return [_split_line(line, self._COLUMNS, "registry keys") for line in self.keys]

    def write_ini(self, doc: InfDocument) -> None:
        """Write the section into a template; nothing is written when empty."""
        _write_raw(doc, self.SECTION_NAME, self.keys)


@dataclass
class RegistryValues:
    """The Registry Values section: one typed value per registry key."""

    SECTION_NAME = "Registry Values"
    _COLUMNS = ("key_name", "value_type", "value")

    values: list[str] = field(default_factory=list)

    @classmethod
    def from_resource(cls, items: Iterable[Mapping[str, Any]]) -> "RegistryValues":
        """Build the section from resource blocks."""
        return cls([_format_line(item, *cls._COLUMNS) for item in items])

    @classmethod
    def from_ini(cls, doc: InfDocument, section_name: str) -> "RegistryValues":
        """Read the section's lines from a template."""
        return cls(_load_section(doc, section_name).key_strings())

    def to_resource_data(self) -> list[dict[str, str]]:
        """Return the lines as resource blocks."""
        return [_split_line(line, self._COLUMNS, "registry values") for line in self.values]

    def write_ini(self, doc: InfDocument) -> None:
        """Write the section into a template; nothing is written when empty."""
        _write_raw(doc, self.SECTION_NAME, self.values)


@dataclass
class RestrictedGroup:
    """A group whose membership is managed by the policy."""

    group_name: str
    group_members: str = ""
    group_parents: str = ""


@dataclass
class RestrictedGroups:
    """The Group Membership section."""

    SECTION_NAME = "Group Membership"

    groups: list[RestrictedGroup] = field(default_factory=list)

    @classmethod
    def from_resource(cls, items: Iterable[Mapping[str, Any]]) -> "RestrictedGroups":
        """Build the section from resource blocks."""
        return cls(
            [
                RestrictedGroup(
                    group_name=_field(item, "group_name"),
                    group_members=_field(item, "group_members"),
                    group_parents=_field(item, "group_memberof"),
                )
                for item in items
            ]
        )

    @classmethod
    def from_ini(cls, doc: InfDocument, section_name: str) -> "RestrictedGroups":
        """Read groups from "<name>__Members" and "<name>__Memberof" keys."""
        section = _load_section(doc, section_name)
        names: dict[str, None] = {}
        for key in section.key_strings():
            parts = key.split("__")
            if len(parts) != 2:
                raise SectionError(f"invalid key while processing restricted groups: {key!r}")
            names[parts[0]] = None

        groups = []
        for name in names:
            group = RestrictedGroup(group_name=name)
            if f"{name}__Members" in section:
                group.group_members = section.get(f"{name}__Members")
            if f"{name}__Memberof" in section:
                group.group_parents = section.get(f"{name}__Memberof")
            groups.append(group)
        return cls(groups)

    def to_resource_data(self) -> list[dict[str, str]]:
        """Return the groups as resource blocks."""
        return [
            {
                "group_name": group.group_name,
                "group_members": group.group_members,
                "group_memberof": group.group_parents,
            }
            for group in self.groups
        ]

    def write_ini(self, doc: InfDocument) -> None:
        """Write the section into a template; nothing is written when empty."""
        if not self.groups:
            return
        section = doc.new_section(self.SECTION_NAME)
        for group in self.groups:
            try:
                section.set(f"{group.group_name}__Members", group.group_members)
                section.set(f"{group.group_name}__Memberof", group.group_parents)
            except SectionError as exc:
                raise SectionError(
                    f"error while creating keys for group {group.group_name!r}: {exc}"
                ) from exc


@dataclass
class SystemServices:
    """The Service General Setting section: startup mode and ACL per service."""

    SECTION_NAME = "Service General Setting"
    _COLUMNS = ("service_name", "startup_mode", "acl")

    services: list[str] = field(default_factory=list)

    @classmethod
    def from_resource(cls, items: Iterable[Mapping[str, Any]]) -> "SystemServices":
        """Build the section from resource blocks."""
        return cls([_format_line(item, *cls._COLUMNS) for item in items])

    @classmethod
    def from_ini(cls, doc: InfDocument, section_name: str) -> "SystemServices":
        """Read the section's lines from a template, dropping double quotes."""
        section = _load_section(doc, section_name)
        return cls([key.replace('"', "") for key in section.key_strings()])

    def to_resource_data(self) -> list[dict[str, str]]:
        """Return the lines as resource blocks."""
        return [_split_line(line, self._COLUMNS, "services") for line in self.services]

    def write_ini(self, doc: InfDocument) -> None:
        """Write the section into a template; nothing is written when empty."""
        _write_raw(doc, self.SECTION_NAME, self.services)