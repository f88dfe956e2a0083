"""Background loader for detail-pane file previews."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from queue import Empty, Queue

from ..ansi import expand_tabs
from .epoch import Stamped

logger = logging.getLogger(__name__)

PREVIEW_MAX_BYTES = 64 * 1024


def read_preview_lines(path: Path, max_bytes: int = PREVIEW_MAX_BYTES) -> list[str]:
    """Read up to ``max_bytes`` of ``path`` as text lines, or list a directory."""
    if path.is_dir():
        names = sorted(child.name + ("/" if child.is_dir() else "") for child in path.iterdir())
        return names or ["(empty directory)"]
    with path.open("rb") as handle:
        raw = handle.read(max_bytes)
    if b"\x00" in raw:
        return ["(binary file)"]
    for encoding in ("utf-8", "latin-1"):
        try:
            text = raw.decode(encoding)
        except UnicodeDecodeError:
            continue
        return [expand_tabs(line) for line in text.splitlines()]
    return []


@dataclass(frozen=True)
class PreviewRequest:
    """One preview job, stamped with the epoch it was issued under."""

    request_id: int
    epoch: int
    path: Path


@dataclass(frozen=True)
class PreviewResult:
    request: PreviewRequest
    lines: tuple[str, ...] = ()
    error: str | None = None

    @property
    def epoch(self) -> int:
        return self.request.epoch


class PreviewLoader:
    """Single-worker latest-request-wins preview scheduler."""

    def __init__(self, read_lines: Callable[[Path], list[str]] = read_preview_lines) -> None:
        self._read_lines = read_lines
        self._lock = threading.Lock()
        self._pending: PreviewRequest | None = None
        self._running = False
        self._next_request_id = 1
        self._results: Queue[PreviewResult] = Queue()

    def _load(self, request: PreviewRequest) -> PreviewResult:
        try:
            lines = self._read_lines(request.path)
        except Exception as exc:
            logger.debug("preview of %s failed: %s", request.path, exc)
            return PreviewResult(request, error=str(exc) or type(exc).__name__)
        return PreviewResult(request, lines=tuple(lines))

    def _worker(self) -> None:
        while True:
            with self._lock:
                request = self._pending
                self._pending = None
                if request is None:
                    self._running = False
                    return
            self._results.put(self._load(request))

    def schedule(self, target: Stamped[Path]) -> int:
        """Queue or replace pending work for an epoch-stamped path; returns the request id."""
        with self._lock:
            request_id = self._next_request_id
            self._next_request_id += 1
            self._pending = PreviewRequest(request_id=request_id, epoch=target.epoch, path=target.value)
            if self._running:
                return request_id
            self._running = True

        worker = threading.Thread(
            target=self._worker,
            name="lazydash-preview-loader",
            daemon=True,
        )
        worker.start()
        return request_id

    def drain_results(self) -> list[PreviewResult]:
        """Drain all completed preview results."""
        out: list[PreviewResult] = []
        while True:
            try:
                out.append(self._results.get_nowait())
            except Empty:
                break
        return out


__all__ = [
    "PreviewLoader",
    "PreviewRequest",
    "PreviewResult",
    "read_preview_lines",
]
