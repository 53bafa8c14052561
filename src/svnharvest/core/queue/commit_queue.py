# -----------------------------------------------------------------------------
# /*
#  * Copyright (C) 2025 CodeStory
#  *
#  * This program is free software; you can redistribute it and/or modify
#  * it under the terms of the GNU General Public License as published by
#  * the Free Software Foundation; Version 2.
#  *
#  * This program is distributed in the hope that it will be useful,
#  * but WITHOUT ANY WARRANTY; without even the implied warranty of
#  * MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#  * GNU General Public License for more details.
#  *
#  * You should have received a copy of the GNU General Public License
#  * along with this program; if not, you can contact us at support@codestory.build
#  */
# -----------------------------------------------------------------------------

import queue
from enum import Enum

from svnharvest.constants import DEFAULT_QUEUE_CAPACITY
from svnharvest.core.data.commit import Commit
from svnharvest.core.exceptions import QueueClosedError


class QueueState(Enum):
    OPEN = "open"
    CLOSED = "closed"


class CommitQueue:
    """
    Bounded hand-off between the extractor (producer) and whatever analyses
    the commits (consumer).

    The producer closes the queue once it is done; consumers keep reading
    until the queue is closed and empty.
    """

    def __init__(self, capacity: int = DEFAULT_QUEUE_CAPACITY):
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._queue: queue.Queue[Commit] = queue.Queue(maxsize=capacity)
        self._state = QueueState.OPEN

    @property
    def state(self) -> QueueState:
        return self._state

    def set_state(self, state: QueueState) -> None:
        self._state = state

    def close(self) -> None:
        self.set_state(QueueState.CLOSED)

    def add_commit(self, commit: Commit, timeout: float = 0.1) -> bool:
        """
        Offers a commit, waiting at most `timeout` seconds for free space.

        Returns False if the queue stayed full; raises QueueClosedError if
        the queue no longer accepts commits.
        """
        if self._state is QueueState.CLOSED:
            raise QueueClosedError(
                f'Commit queue is closed; cannot add commit "{commit.id}"'
            )
        try:
            self._queue.put(commit, timeout=timeout)
        except queue.Full:
            return False
        return True

    def get_commit(self, timeout: float = 0.1) -> Commit | None:
        try:
            return self._queue.get(timeout=timeout)
        except queue.Empty:
            return None

    def is_open(self) -> bool:
        return self._state is QueueState.OPEN or not self._queue.empty()

    def __len__(self) -> int:
        return self._queue.qsize()
