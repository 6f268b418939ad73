"""Output path helper shared by the file exporters."""
from __future__ import annotations

from pathlib import Path
from typing import Union


def with_default_suffix(path: Union[str, Path], suffix: str) -> Path:
    """Append *suffix* to *path* unless it already has one (``result`` -> ``result.csv``)."""
    p = Path(path)
    return p if p.suffix else p.with_name(p.name + suffix)
