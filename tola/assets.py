"""Copying static assets into the output directory."""

from __future__ import annotations

import shutil
from os import PathLike
from pathlib import Path, PurePath

from tola.files import is_up_to_date
from tola.meta import AssetMeta

__all__ = ["process_asset", "process_rel_asset"]

StrPath = str | PathLike[str]


def _copy(source: Path, dest: Path) -> None:
    dest.parent.mkdir(parents=True, exist_ok=True)
    shutil.copy(source, dest)


def process_asset(
    asset_path: StrPath,
    assets_dir: StrPath,
    output_dir: StrPath,
    output_root: StrPath,
    clean: bool = False,
) -> bool:
    """Copy a file from the assets directory to the output directory.

    Unless ``clean`` is set, an up-to-date destination is left alone.
    Returns True when the file was copied.
    """
    meta = AssetMeta.from_source(asset_path, assets_dir, output_dir, output_root)
    if not clean and is_up_to_date(asset_path, meta.paths.dest):
        return False
    _copy(meta.paths.source, meta.paths.dest)
    return True


def process_rel_asset(
    path: StrPath,
    content_dir: StrPath,
    output_dir: StrPath,
    clean: bool = False,
) -> bool:
    """Copy a non-page file from the content directory beside the pages.

    Unless ``clean`` is set, an up-to-date destination is left alone.
    Returns True when the file was copied.
    """
    source = Path(path)
    try:
        rel = PurePath(source).relative_to(PurePath(content_dir))
    except ValueError:
        raise ValueError(f"File is not in content directory: {source}") from None
    output_path = Path(output_dir) / rel
    if not clean and is_up_to_date(source, output_path):
        return False
    _copy(source, output_path)
    return True