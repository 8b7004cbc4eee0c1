"""
JSON writer for result records.

Serializes a `ResultRecord` to minified JSON (non-ASCII characters kept
as-is) and writes it to disk.  When the user asks for ``--json auto``
the destination is derived from the province, district and mode names
as ``vakitler/<il>/<ilce>/<vakit_tipi>.json``.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Union

from ..errors import OutputWriteError
from .schema import ResultRecord, ScheduleMode

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_ROOT = "vakitler"

_FILENAME_REPLACEMENTS = {
    "İ": "I", "ı": "i", "Ğ": "G", "ğ": "g", "Ü": "U", "ü": "u",
    "Ş": "S", "ş": "s", "Ö": "O", "ö": "o", "Ç": "C", "ç": "c",
    " ": "_", "-": "_", "&": "ve",
}
_UNSAFE_RE = re.compile(r"[^a-zA-Z0-9_]")


def record_to_json(record: ResultRecord) -> str:
    return json.dumps(record.to_dict(), ensure_ascii=False, separators=(",", ":"))


def clean_file_name(name: str) -> str:
    """Make a province/district name safe for use as a path segment."""
    result = name
    for old, new in _FILENAME_REPLACEMENTS.items():
        result = result.replace(old, new)
    result = _UNSAFE_RE.sub("", result)
    return result.lower()


def auto_output_path(
    region_name: str,
    sub_region_name: str,
    mode: Union[ScheduleMode, str],
    root: Union[str, Path] = DEFAULT_OUTPUT_ROOT,
) -> Path:
    mode_value = ScheduleMode.from_text(mode).value
    return Path(root) / clean_file_name(region_name) / clean_file_name(sub_region_name) / f"{mode_value}.json"


def write_json_file(text: str, path: Union[str, Path]) -> Path:
    """Write serialized JSON to `path`, creating parent directories.

    Args:
        text: The JSON document.
        path: Destination file.  An existing file is overwritten.

    Returns:
        The path written to.

    Raises:
        OutputWriteError: If the directory cannot be created or the
            file cannot be written.
    """
    target = Path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputWriteError(f"klasör oluşturulamadı: {target.parent}: {exc}") from exc
    try:
        target.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise OutputWriteError(f"JSON dosyası yazılamadı: {target}: {exc}") from exc
    logger.info("Wrote %s", target)
    return target
