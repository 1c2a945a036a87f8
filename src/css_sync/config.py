from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


def find_root(start: Path) -> Path:
    """Nearest ancestor of *start* (inclusive) holding a ``package.json``."""
    current = start.resolve()
    for candidate in (current, *current.parents):
        if (candidate / "package.json").exists():
            return candidate
    return current


@dataclass(frozen=True)
class SyncConfig:
    target_dir: Path = Path("src")
    gen: bool = False
    sort: bool = False
    sort_path: Path | None = None  # None = built-in default spec
    watch: bool = False
    headers: bool = True
    interval: float = 0.5  # seconds between watch polls

    @classmethod
    def for_directory(cls, cwd: Path, dir_name: str = "src", **options: object) -> SyncConfig:
        """Resolve *dir_name* the way the CLI does.

        When already inside a directory named *dir_name* it is used as is;
        otherwise *dir_name* is taken relative to the project root.
        """
        cwd = cwd.resolve()
        if cwd.name == dir_name:
            target = cwd
        else:
            target = (find_root(cwd) / dir_name).resolve()
        return cls(target_dir=target, **options)  # type: ignore[arg-type]
