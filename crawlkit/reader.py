"""A reader whose content can be read again and again."""

from __future__ import annotations

import io
from typing import Any, Optional


class MultipleReader:
    """Holds all data of a source so fresh readers can be handed out."""

    def __init__(self, source: Optional[Any] = None) -> None:
        if source is None:
            data: Any = b""
        else:
            try:
                data = source.read()
            except OSError as exc:
                raise OSError(
                    f"multiple reader: couldn't create a new one: {exc}"
                ) from exc
        if isinstance(data, str):
            data = data.encode("utf-8")
        self._data = bytes(data)

    @property
    def data(self) -> bytes:
        """The bytes held by this reader."""
        return self._data

    def reader(self) -> io.BytesIO:
        """Return a new binary stream over the held data."""
        return io.BytesIO(self._data)