from __future__ import annotations

from typing import Iterator, List, Optional

from .board import Snapshot


class History:
    """
    Arena of snapshots for one game, addressed by integer handles.

    Handles are list positions. Each snapshot's `previous` holds the handle of
    the snapshot that was current before it, so the chain from the head back
    to handle 0 is the full undo history. Only the head can be discarded,
    which keeps every live handle valid.
    """

    def __init__(self, initial: Snapshot) -> None:
        initial.previous = None
        self._records: List[Snapshot] = [initial]

    @property
    def head(self) -> int:
        return len(self._records) - 1

    @property
    def current(self) -> Snapshot:
        return self._records[self.head]

    @property
    def depth(self) -> int:
        """Number of snapshots pushed on top of the initial one."""
        return self.head

    def __len__(self) -> int:
        return len(self._records)

    def push(self, snapshot: Snapshot) -> int:
        """Links `snapshot` to the current head and makes it the new head."""
        snapshot.previous = self.head
        self._records.append(snapshot)
        return self.head

    def replace_head(self, snapshot: Snapshot) -> None:
        """Swaps in a new version of the head, keeping its link and position."""
        snapshot.previous = self.current.previous
        self._records[self.head] = snapshot

    def discard_head(self) -> Optional[Snapshot]:
        """Drops the head and returns it; None when only the initial snapshot is left."""
        if self.current.previous is None:
            return None
        return self._records.pop()

    def chain(self) -> Iterator[Snapshot]:
        """Walks from the head back to the initial snapshot following `previous` handles."""
        handle: Optional[int] = self.head
        while handle is not None:
            snapshot = self._records[handle]
            yield snapshot
            handle = snapshot.previous

    def clear(self) -> None:
        del self._records[1:]
