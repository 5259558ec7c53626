"""ZIP and JSON packaging for downloads."""

from __future__ import annotations

import io
import json
from collections.abc import Mapping
from zipfile import ZIP_DEFLATED, ZipFile, ZipInfo

from brand_weaver.models import ProfileData

__all__ = [
    "PROFILE_JSON_NAME",
    "WEBSITE_DIR",
    "bundle_to_zip",
    "full_export_zip",
    "profile_to_json",
]

PROFILE_JSON_NAME = "profile-data.json"
WEBSITE_DIR = "website"

# Fixed entry timestamp so identical inputs give identical archives.
_ZIP_EPOCH = (1980, 1, 1, 0, 0, 0)


def _write_entries(entries: Mapping[str, str]) -> bytes:
    buffer = io.BytesIO()
    with ZipFile(buffer, "w", compression=ZIP_DEFLATED) as archive:
        for name in sorted(entries):
            info = ZipInfo(name, date_time=_ZIP_EPOCH)
            info.compress_type = ZIP_DEFLATED
            info.external_attr = 0o644 << 16
            archive.writestr(info, entries[name].encode("utf-8"))
    return buffer.getvalue()


def profile_to_json(profile: ProfileData) -> str:
    """Pretty-printed camelCase JSON of *profile*."""
    return json.dumps(profile.to_json_dict(), indent=2, ensure_ascii=False) + "\n"


def bundle_to_zip(bundle: Mapping[str, str]) -> bytes:
    """Archive a generated bundle, one entry per file."""
    return _write_entries(bundle)


def full_export_zip(profile: ProfileData, bundle: Mapping[str, str] | None = None) -> bytes:
    """Archive the profile JSON plus, when given, the site under ``website/``."""
    entries = {PROFILE_JSON_NAME: profile_to_json(profile)}
    for name, content in (bundle or {}).items():
        entries[f"{WEBSITE_DIR}/{name}"] = content
    return _write_entries(entries)
