"""
Progress reporting for the fetch stage.

The fetcher pushes stage names onto a queue and a background display task
drains it into a spinner status line. Messages are cosmetic, so delivery never
blocks the producer.
"""

import queue
import threading

from rich.console import Console

from config import logger

# Marks the end of the event stream
STOP = object()


def new_event_queue():
    """Returns an unbounded queue for stage events."""
    return queue.Queue()


def emit(events, message):
    """Push a stage name onto the queue, if there is one."""
    if events is None:
        return
    try:
        events.put_nowait(message)
    except queue.Full:
        logger.debug(f"Dropped progress event: {message}")


def close(events):
    """Signal the display task that no more events will arrive."""
    if events is None:
        return
    try:
        events.put_nowait(STOP)
    except queue.Full:
        logger.debug("Progress queue full, display task will stop on join timeout")


class SpinnerDisplay:
    """
    Shows a spinner with the latest stage name until the event stream closes.
    """

    def __init__(self, events, console=None, spinner="dots"):
        self.events = events
        self.console = console or Console(stderr=True)
        self.spinner = spinner
        self.messages = []
        self._thread = threading.Thread(target=self._run, name="gitx-spinner", daemon=True)

    def start(self):
        self._thread.start()
        return self

    def stop(self, timeout=5.0):
        """Wait for the display task to drain the queue and clear the spinner."""
        self._thread.join(timeout)
        if self._thread.is_alive():
            logger.warning("Spinner did not stop in time")

    def _run(self):
        with self.console.status("Starting ...", spinner=self.spinner) as status:
            while True:
                message = self.events.get()
                if message is STOP:
                    break
                self.messages.append(message)
                status.update(f"{message} ...")

    def __enter__(self):
        return self.start()

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False
