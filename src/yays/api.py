"""Public API functions for yays.

This module provides the user-facing functions: sort_yaml (text in, text
out), sort_file (optionally writing the result back) and write_file.  Each sort
creates a fresh YamlSorter to guarantee zero global state mutation between calls.
"""

from __future__ import annotations

import logging
import stat
from collections.abc import Iterable
from pathlib import Path

from yays.errors import YamlDecodeError
from yays.ordering.config import SortConfig, SortMode
from yays.sorter import YamlSorter
from yays.tree.io import dump_document, load_document

__all__ = ["sort_file", "sort_yaml", "write_file"]

logger = logging.getLogger(__name__)


def sort_yaml(
    text: str,
    paths: Iterable[str],
    mode: SortMode | str = SortMode.ALPHANUMERIC,
    indent: int | None = None,
) -> str:
    """Sort YAML text at the given paths and return the result.

    Args:
        text:   YAML source.  Only the first document is sorted.
        paths:  Path strings, applied in order (e.g. ``["."]``,
                ``["spec.containers[*]"]``).
        mode:   Key ordering mode, ``"alphanumeric"`` (default) or ``"human"``.
        indent: Output indentation width.  Defaults to the width detected in
                ``text``.

    Returns:
        The sorted YAML text.

    Raises:
        YaysError: On invalid YAML, a malformed path, a path that does not fit
            the document, or an unsortable target.
    """
    document = load_document(text)
    YamlSorter(config=SortConfig(mode=mode)).apply_all(document, paths)
    return dump_document(document, indent=indent)


def sort_file(
    path: str | Path,
    paths: Iterable[str],
    mode: SortMode | str = SortMode.ALPHANUMERIC,
    write: bool = False,
) -> str:
    """Sort a YAML file at the given paths.

    Args:
        path:  The YAML file to read.
        paths: Path strings, applied in order.
        mode:  Key ordering mode.
        write: When True, write the result back to ``path``, keeping the
               file's permission bits.

    Returns:
        The sorted YAML text.

    Raises:
        OSError:         If the file cannot be read or written.
        YamlDecodeError: If the file is not UTF-8 text.
        YaysError:       As for ``sort_yaml``.
    """
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise YamlDecodeError(f"failed to decode YAML: {exc}") from exc

    result = sort_yaml(text, paths, mode=mode)
    if write:
        write_file(file_path, result)
    return result


def write_file(path: str | Path, text: str) -> None:
    """Overwrite ``path`` with ``text``, keeping the file's permission bits."""
    file_path = Path(path)
    permissions = stat.S_IMODE(file_path.stat().st_mode)
    file_path.write_text(text, encoding="utf-8")
    file_path.chmod(permissions)
    logger.info("Wrote sorted YAML to %s", file_path)
