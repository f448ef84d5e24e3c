"""Page metadata from ``<tola-meta>`` and conversion of content elements to HTML."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union

__all__ = [
    "MetadataError",
    "Space",
    "Linebreak",
    "Text",
    "Strike",
    "Link",
    "Sequence",
    "Unknown",
    "Element",
    "parse_element",
    "html_escape",
    "ContentMeta",
]


class MetadataError(ValueError):
    """Raised when page metadata or a content element is malformed."""


_ESCAPES = str.maketrans({"<": "&lt;", ">": "&gt;", "&": "&amp;", '"': "&quot;"})


def html_escape(text: str) -> str:
    """Escape ``<``, ``>``, ``&`` and ``"`` for inclusion in HTML."""
    return text.translate(_ESCAPES)


@dataclass(frozen=True)
class Space:
    """A space between words."""

    def to_html(self) -> str:
        return " "


@dataclass(frozen=True)
class Linebreak:
    """A forced line break."""

    def to_html(self) -> str:
        return "<br/>"


@dataclass(frozen=True)
class Text:
    """A run of plain text."""

    text: str

    def to_html(self) -> str:
        return html_escape(self.text)


@dataclass(frozen=True)
class Strike:
    """Struck-through text."""

    text: str

    def to_html(self) -> str:
        return f"<s>{html_escape(self.text)}</s>"


@dataclass(frozen=True)
class Link:
    """A hyperlink wrapping another element."""

    dest: str
    body: Element

    def to_html(self) -> str:
        return f'<a href="{self.dest}">{self.body.to_html()}</a>'


@dataclass(frozen=True)
class Sequence:
    """Several elements rendered one after another."""

    children: tuple[Element, ...] = ()

    def to_html(self) -> str:
        return "".join(child.to_html() for child in self.children)


@dataclass(frozen=True)
class Unknown:
    """An element kind that is not rendered."""

    def to_html(self) -> str:
        return ""


Element = Union[Space, Linebreak, Text, Strike, Link, Sequence, Unknown]


def _require_str(data: Mapping[str, Any], key: str, kind: str) -> str:
    if key not in data:
        raise MetadataError(f"missing field `{key}` in {kind} element")
    value = data[key]
    if not isinstance(value, str):
        raise MetadataError(f"field `{key}` of {kind} element must be a string")
    return value


def parse_element(data: Any) -> Element:
    """Build an element from its JSON form, a mapping tagged by ``func``."""
    if not isinstance(data, Mapping):
        raise MetadataError("element must be an object")
    if "func" not in data:
        raise MetadataError("missing field `func`")
    func = data["func"]
    if not isinstance(func, str):
        raise MetadataError("field `func` must be a string")

    match func:
        case "space":
            return Space()
        case "linebreak":
            return Linebreak()
        case "text":
            return Text(_require_str(data, "text", func))
        case "strike":
            return Strike(_require_str(data, "text", func))
        case "link":
            dest = _require_str(data, "dest", func)
            if "body" not in data:
                raise MetadataError("missing field `body` in link element")
            return Link(dest, parse_element(data["body"]))
        case "sequence":
            if "children" not in data:
                raise MetadataError("missing field `children` in sequence element")
            children = data["children"]
            if not isinstance(children, list):
                raise MetadataError("field `children` must be an array")
            return Sequence(tuple(parse_element(child) for child in children))
        case _:
            return Unknown()


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None or isinstance(value, str):
        return value
    raise MetadataError(f"field `{key}` must be a string")


def _summary(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        return html_escape(value)
    try:
        return parse_element(value).to_html()
    except MetadataError as exc:
        raise MetadataError(f"Invalid summary format: {exc}") from exc


@dataclass
class ContentMeta:
    """Content metadata declared with ``#metadata(...) <tola-meta>``."""

    title: str | None = None
    summary: str | None = None
    date: str | None = None
    update: str | None = None
    author: str | None = None
    draft: bool = False
    tags: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> ContentMeta:
        """Build metadata from a decoded JSON object; unknown keys are ignored."""
        if not isinstance(data, Mapping):
            raise MetadataError("metadata must be an object")

        draft = data.get("draft", False)
        if not isinstance(draft, bool):
            raise MetadataError("field `draft` must be a boolean")

        tags = data.get("tags", [])
        if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
            raise MetadataError("field `tags` must be an array of strings")

        return cls(
            title=_optional_str(data, "title"),
            summary=_summary(data.get("summary")),
            date=_optional_str(data, "date"),
            update=_optional_str(data, "update"),
            author=_optional_str(data, "author"),
            draft=draft,
            tags=list(tags),
        )

    @classmethod
    def from_json(cls, text: str | bytes) -> ContentMeta:
        """Parse metadata from JSON text."""
        try:
            data = json.loads(text)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise MetadataError(f"invalid JSON: {exc}") from exc
        return cls.from_dict(data)