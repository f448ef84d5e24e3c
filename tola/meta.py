"""Path, URL and timestamp metadata for pages and assets."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path, PurePath

from tola.elements import ContentMeta

__all__ = [
    "TOLA_META_LABEL",
    "days_to_ymd",
    "url_from_output_path",
    "PagePaths",
    "PageMeta",
    "Pages",
    "AssetPaths",
    "AssetMeta",
]

StrPath = str | PathLike[str]

TOLA_META_LABEL = "tola-meta"
"""Label that marks the page metadata inside a document."""

_SECONDS_PER_DAY = 86400


def days_to_ymd(days: int) -> tuple[int, int, int]:
    """Convert days since 1970-01-01 to a proleptic Gregorian (year, month, day)."""
    z = days + 719_468
    era = z // 146_097
    doe = z - era * 146_097
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146_096) // 365
    year = yoe + era * 400
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    if month <= 2:
        year += 1
    return year, month, day


def _relative_to(path: StrPath, root: StrPath, what: str) -> PurePath:
    try:
        return PurePath(path).relative_to(PurePath(root))
    except ValueError:
        raise ValueError(f"{what}: {PurePath(path)}") from None


def url_from_output_path(path: StrPath, output_root: StrPath) -> str:
    """Return the site URL of a file below the output root, starting with ``/``."""
    rel = _relative_to(path, output_root, "Path is not in output directory")
    path_str = "/".join(rel.parts).replace("\\", "/")
    return path_str if path_str.startswith("/") else f"/{path_str}"


@dataclass(frozen=True)
class PagePaths:
    """Where a page comes from and where it ends up."""

    source: Path
    html: Path
    relative: str
    url_path: str
    full_url: str


@dataclass
class PageMeta:
    """Everything known about one content page."""

    paths: PagePaths
    lastmod: float | None = None
    content_meta: ContentMeta | None = None
    compiled_html: bytes | None = None

    def with_content(self, content: ContentMeta | None) -> PageMeta | None:
        """Attach content metadata; return None when the page is a draft."""
        if content is not None and content.draft:
            return None
        return dataclasses.replace(self, content_meta=content)

    def lastmod_ymd(self) -> str | None:
        """Return the modification date as ``YYYY-MM-DD``, if known."""
        if self.lastmod is None or self.lastmod < 0:
            return None
        days = int(self.lastmod) // _SECONDS_PER_DAY
        year, month, day = days_to_ymd(days)
        return f"{year:04}-{month:02}-{day:02}"


@dataclass
class Pages:
    """All pages of the site."""

    items: list[PageMeta] = field(default_factory=list)

    def __iter__(self) -> Iterator[PageMeta]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class AssetPaths:
    """Where an asset comes from, where it is copied and how it is linked."""

    source: Path
    dest: Path
    relative: str
    url: str


@dataclass(frozen=True)
class AssetMeta:
    """Resolved paths for a static asset."""

    paths: AssetPaths

    @classmethod
    def from_source(
        cls,
        source: StrPath,
        assets_dir: StrPath,
        output_dir: StrPath,
        output_root: StrPath,
    ) -> AssetMeta:
        """Resolve an asset below ``assets_dir`` to its place in ``output_dir``."""
        source = Path(source)
        relative = str(_relative_to(source, assets_dir, "File is not in assets directory"))
        dest = Path(output_dir) / relative
        url = url_from_output_path(dest, output_root)
        return cls(AssetPaths(source=source, dest=dest, relative=relative, url=url))