"""Watch mode implementation for the linemark CLI.

A watched markup file is re-converted in full every time it changes, giving
a live HTML preview on disk. There is no incremental parsing: one change
event triggers one complete conversion.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Any, Callable, Optional

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from linemark.api import convert_file
from linemark.constants import DEFAULT_ENCODING, DEFAULT_WATCH_DEBOUNCE
from linemark.exceptions import LinemarkError
from linemark.progress import ProgressCallback, ProgressEvent

logger = logging.getLogger(__name__)


class LiveConversionHandler(FileSystemEventHandler):
    """File system event handler that re-renders one markup file.

    Parameters
    ----------
    source : Path
        Markup file to watch
    output : Path
        HTML file rewritten after every change
    encoding : str, default "utf-8"
        Encoding for reading and writing
    debounce_seconds : float, default 0.5
        Events for the source arriving within this window after a conversion
        are ignored
    progress_callback : ProgressCallback, optional
        Receives an "error" event when a conversion fails
    clock : callable, optional
        Time source, defaults to time.monotonic

    """

    def __init__(
        self,
        source: Path,
        output: Path,
        encoding: str = DEFAULT_ENCODING,
        debounce_seconds: float = DEFAULT_WATCH_DEBOUNCE,
        progress_callback: Optional[ProgressCallback] = None,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        """Initialize the handler with the watched and output paths."""
        super().__init__()
        self.source = Path(source).resolve()
        self.output = Path(output)
        self.encoding = encoding
        self.debounce_seconds = debounce_seconds
        self.progress_callback = progress_callback
        self._clock = clock or time.monotonic
        self._last_converted: Optional[float] = None
        self.conversions = 0

    def is_source(self, path: str | bytes) -> bool:
        """Return True when ``path`` refers to the watched file."""
        if isinstance(path, bytes):
            path = path.decode()
        return Path(path).resolve() == self.source

    def should_process(self, path: str | bytes) -> bool:
        """Check whether an event for ``path`` should trigger a conversion."""
        if not self.is_source(path):
            return False

        if self._last_converted is not None and self._clock() - self._last_converted < self.debounce_seconds:
            logger.debug("Skipping %s: debounce delay not met", path)
            return False

        return True

    def convert(self) -> bool:
        """Convert the watched file once.

        Returns
        -------
        bool
            True if the output was written

        """
        start = self._clock()
        try:
            convert_file(self.source, output=self.output, encoding=self.encoding)
        except LinemarkError as e:
            logger.error("Conversion error for %s: %s", self.source, e)
            self._report_error(e)
            return False
        finally:
            self._last_converted = self._clock()

        self.conversions += 1
        logger.info("Converted %s -> %s (%.3fs)", self.source, self.output, self._clock() - start)
        return True

    def _report_error(self, error: LinemarkError) -> None:
        if self.progress_callback is None:
            return
        try:
            self.progress_callback(
                ProgressEvent("error", f"Failed to convert {self.source}", metadata={"error": str(error)})
            )
        except Exception as e:
            logger.warning("Progress callback failed on error event: %s", e)

    def _handle(self, path: Any) -> None:
        if self.should_process(path):
            self.convert()

    def on_modified(self, event: FileSystemEvent) -> None:
        """Handle file modification events."""
        if not event.is_directory:
            self._handle(event.src_path)

    def on_created(self, event: FileSystemEvent) -> None:
        """Handle file creation events."""
        if not event.is_directory:
            self._handle(event.src_path)

    def on_moved(self, event: FileSystemEvent) -> None:
        """Handle file move events; editors often save by renaming over the target."""
        if not event.is_directory:
            self._handle(event.dest_path)


def run_watch_mode(
    source: Path,
    output: Path,
    encoding: str = DEFAULT_ENCODING,
    debounce: float = DEFAULT_WATCH_DEBOUNCE,
) -> int:
    """Convert ``source`` now and again whenever it changes.

    Runs until interrupted with Ctrl+C.

    Parameters
    ----------
    source : Path
        Markup file to watch
    output : Path
        HTML file to keep up to date
    encoding : str, default "utf-8"
        Encoding for reading and writing
    debounce : float, default 0.5
        Debounce delay in seconds

    Returns
    -------
    int
        Exit code (0 for success)

    """
    handler = LiveConversionHandler(source, output, encoding=encoding, debounce_seconds=debounce)
    handler.convert()

    observer = Observer()
    # Watch the parent directory; the handler filters for the source file
    observer.schedule(handler, str(handler.source.parent), recursive=False)
    observer.start()
    logger.info("Watching file: %s", handler.source)

    print(f"Watch mode active. Writing {output} on every change to {source}. Press Ctrl+C to stop.")

    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        print("\nStopping watch mode...")
        observer.stop()

    observer.join()
    logger.info("Watch mode stopped")
    return 0
