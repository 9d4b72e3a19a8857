from __future__ import annotations
from pathlib import Path
from typing import Iterable, Iterator, List


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines (CR/LF stripped).
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    # utf-8-sig: exported spreadsheets often start with a BOM
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8-sig").splitlines()]


def first_fields(lines: Iterable[str]) -> Iterator[str]:
    """
    Yield the first comma-separated field of each non-blank line, stripped.
    Plain one-word-per-line files pass through unchanged.
    """
    for ln in lines:
        field = ln.split(",", 1)[0].strip()
        if field:
            yield field


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file with a trailing newline; creates parent dirs.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)
