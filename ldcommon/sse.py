"""Incremental parser for server-sent event streams."""

from __future__ import annotations

from typing import Callable, Optional, Union

from .logger import LogLevel, log

Dispatch = Callable[[str, str], object]


class DispatchAborted(Exception):
    """Raised when the dispatch callback returns False to stop the stream."""


class SSEParser:
    """Splits incoming bytes into lines and hands complete events to ``dispatch``.

    ``dispatch(name, body)`` is called for each event that has both an
    ``event:`` name and at least one ``data:`` line. Returning False from it
    aborts processing with DispatchAborted; any other result continues.
    """

    def __init__(self, dispatch: Dispatch) -> None:
        if not callable(dispatch):
            raise TypeError("dispatch must be callable")
        self._dispatch = dispatch
        self._buffer = bytearray()
        self._event_name: Optional[str] = None
        self._event_body: Optional[str] = None

    def __enter__(self) -> SSEParser:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def feed(self, data: Union[bytes, bytearray, str]) -> None:
        """Take in a chunk of the stream and process every complete line."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        if not data:
            return
        self._buffer.extend(data)
        while True:
            end = self._buffer.find(b"\n")
            if end < 0:
                break
            line = bytes(self._buffer[:end]).decode("utf-8", errors="replace")
            del self._buffer[: end + 1]
            self._process_line(line)

    def close(self) -> None:
        """Discard any buffered input and any partly read event."""
        self._buffer.clear()
        self._event_name = None
        self._event_body = None

    @staticmethod
    def _field_value(line: str, prefix: str) -> str:
        value = line[len(prefix):]
        return value[1:] if value.startswith(" ") else value

    def _process_line(self, line: str) -> None:
        if line.startswith(":"):
            return
        if line == "":
            self._finish_event()
        elif line.startswith("data:"):
            value = self._field_value(line, "data:")
            if self._event_body is None:
                self._event_body = value
            else:
                self._event_body = f"{self._event_body}\n{value}"
        elif line.startswith("event:"):
            self._event_name = self._field_value(line, "event:")

    def _finish_event(self) -> None:
        name, body = self._event_name, self._event_body
        self._event_name = None
        self._event_body = None
        if name is None:
            log(LogLevel.WARNING, "SSE dispatch without an event name")
            return
        if body is None:
            log(LogLevel.WARNING, "SSE dispatch without an event body")
            return
        if self._dispatch(name, body) is False:
            raise DispatchAborted(name)