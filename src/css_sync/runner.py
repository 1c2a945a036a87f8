from __future__ import annotations

import logging
import threading
from pathlib import Path

from css_sync.config import SyncConfig
from css_sync.model.category import CategorySpec
from css_sync.spec import load_spec_with_fallback
from css_sync.sync.files import (
    SyncResult,
    adopt_orphan,
    format_css_file,
    is_component,
    sync_component,
)

logger = logging.getLogger(__name__)

_WATCHED_SUFFIXES = (".jsx", ".tsx", ".css")

Snapshot = dict[Path, int]


def _skipped(path: Path) -> bool:
    return "node_modules" in path.parts


def _written_by(result: SyncResult) -> list[Path]:
    paths: list[Path] = []
    if result.import_changed:
        paths.append(result.component)
    if result.css_path is not None and (result.created or result.css_changed):
        paths.append(result.css_path)
    return paths


class SyncRunner:
    """Drives component syncing over a source tree, once or continuously."""

    def __init__(
        self,
        config: SyncConfig,
        *,
        spec: list[CategorySpec] | None = None,
    ) -> None:
        self.config = config
        if spec is not None:
            self.spec = spec
        elif config.sort:
            self.spec = load_spec_with_fallback(config.sort_path)
        else:
            self.spec = []
        self._stop = threading.Event()

    def components(self) -> list[Path]:
        """All ``.jsx``/``.tsx`` files under the target dir, outside node_modules."""
        return sorted(
            path
            for path in self.config.target_dir.rglob("*")
            if path.is_file() and is_component(path) and not _skipped(path)
        )

    def sync(self, component: Path) -> SyncResult:
        return sync_component(
            component, self.spec, gen=self.config.gen, headers=self.config.headers
        )

    def scan(self) -> list[SyncResult]:
        """Sync every component once.  Returns the results that changed files."""
        target = self.config.target_dir
        if not target.is_dir():
            logger.error("Error scanning %s: not a directory", target)
            return []
        results = [self.sync(component) for component in self.components()]
        return [result for result in results if result.changed]

    # --- watch ---------------------------------------------------------------

    def snapshot(self) -> Snapshot:
        """Modification times of every watched file under the target dir."""
        snap: Snapshot = {}
        for path in self.config.target_dir.rglob("*"):
            if path.suffix not in _WATCHED_SUFFIXES or _skipped(path):
                continue
            try:
                snap[path] = path.stat().st_mtime_ns
            except OSError:
                continue  # removed between listing and stat
        return snap

    def poll(self, previous: Snapshot) -> Snapshot:
        """Handle files added or modified since *previous*; return the new snapshot."""
        current = self.snapshot()
        written: set[Path] = set()
        for path, mtime in sorted(current.items()):
            is_new = path not in previous
            if not is_new and previous[path] == mtime:
                continue
            if is_component(path):
                if is_new and self.config.gen:
                    adopted = adopt_orphan(path)
                    if adopted is not None:
                        written.add(adopted)
                written.update(_written_by(self.sync(path)))
            elif self.config.sort and path.suffix == ".css":
                if format_css_file(path, self.spec, headers=self.config.headers):
                    written.add(path)

        # Only our own writes are absorbed; edits made meanwhile stay pending.
        for path in written:
            try:
                current[path] = path.stat().st_mtime_ns
            except OSError:
                current.pop(path, None)
        return current

    def watch(self, *, max_polls: int | None = None) -> None:
        """Poll the target dir until ``stop()`` is called (or *max_polls* ran)."""
        logger.info("Watching for changes...")
        snap = self.snapshot()
        polls = 0
        while max_polls is None or polls < max_polls:
            if self._stop.wait(self.config.interval):
                break
            snap = self.poll(snap)
            polls += 1

    def stop(self) -> None:
        self._stop.set()

    def run(self) -> list[SyncResult]:
        """Scan once, then keep watching if configured to."""
        results = self.scan()
        if self.config.watch:
            self.watch()
        return results
