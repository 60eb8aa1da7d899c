"""Append-only interning table for relay URLs.

Evidence records refer to relays by a small integer "serial" (the URL's
position in the table) instead of holding the string. A URL keeps its serial
for the lifetime of the table and is never removed.

Relay identity is exact string equality: ``wss://relay.example.com`` and
``wss://relay.example.com/`` intern to different serials.

Note:
    The table does no locking of its own. The owning
    [MemoryHintDB][relayhints.hints.memory.MemoryHintDB] only touches it
    while holding the store lock.
"""

from __future__ import annotations


class RelayTable:
    """Bidirectional relay URL <-> serial mapping preserving insertion order.

    Examples:
        ```python
        table = RelayTable()
        table.intern("wss://relay.damus.io")  # 0
        table.intern("wss://nos.lol")         # 1
        table.intern("wss://relay.damus.io")  # 0
        table.url(1)                          # 'wss://nos.lol'
        ```
    """

    __slots__ = ("_serials", "_urls")

    def __init__(self) -> None:
        self._urls: list[str] = []
        self._serials: dict[str, int] = {}

    def intern(self, url: str) -> int:
        """Return the serial for ``url``, appending it on first sighting."""
        serial = self._serials.get(url)
        if serial is None:
            serial = len(self._urls)
            self._urls.append(url)
            self._serials[url] = serial
        return serial

    def url(self, serial: int) -> str:
        """Relay URL for ``serial``.

        Raises:
            IndexError: If ``serial`` was never handed out by this table.
        """
        if serial < 0:
            raise IndexError(f"relay serial out of range: {serial}")
        return self._urls[serial]

    def __len__(self) -> int:
        return len(self._urls)
