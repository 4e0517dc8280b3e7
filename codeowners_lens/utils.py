import json
import os
from pathlib import Path, PurePath
from typing import Any


def read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def read_json_safe(path: Path) -> tuple[Any | None, str | None]:
    if not path.exists():
        return None, None
    if path.stat().st_size == 0:
        return None, None
    try:
        return read_json(path), None
    except Exception as exc:
        return None, str(exc)


def relative_posix(path: str | PurePath, root: str | PurePath) -> str | None:
    """Return ``path`` relative to ``root`` with forward slashes, or None if outside.

    Both paths are normalised first, so ``..`` cannot climb out of ``root``.
    """
    try:
        relative = PurePath(os.path.normpath(path)).relative_to(os.path.normpath(root))
    except ValueError:
        return None
    return relative.as_posix()


def compact_home_path(path: str | Path) -> str:
    text = str(path)
    home = str(Path.home())
    if text == home:
        return "~"
    home_prefix = f"{home}/"
    if text.startswith(home_prefix):
        return f"~/{text[len(home_prefix):]}"
    return text
