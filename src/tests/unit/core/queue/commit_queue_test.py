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

import pytest

from svnharvest.core.data.commit import Commit
from svnharvest.core.exceptions import QueueClosedError
from svnharvest.core.queue.commit_queue import CommitQueue, QueueState


def _commit(commit_id: str = "r1") -> Commit:
    return Commit(id=commit_id, date="2020-01-01", header=[], artifacts=[])


def test_add_and_get():
    queue = CommitQueue(2)

    assert queue.add_commit(_commit("r1"))
    assert queue.add_commit(_commit("r2"))
    assert len(queue) == 2
    assert queue.get_commit().id == "r1"
    assert queue.get_commit().id == "r2"


def test_full_queue_rejects_commit():
    queue = CommitQueue(1)
    queue.add_commit(_commit("r1"))

    assert queue.add_commit(_commit("r2"), timeout=0.01) is False


def test_closed_queue_raises():
    queue = CommitQueue(1)
    queue.close()

    with pytest.raises(QueueClosedError):
        queue.add_commit(_commit())


def test_get_from_empty_queue():
    assert CommitQueue().get_commit(timeout=0.01) is None


def test_is_open_until_closed_and_drained():
    queue = CommitQueue(2)
    assert queue.is_open()

    queue.add_commit(_commit())
    queue.set_state(QueueState.CLOSED)
    assert queue.is_open()

    queue.get_commit()
    assert not queue.is_open()


def test_rejects_non_positive_capacity():
    with pytest.raises(ValueError):
        CommitQueue(0)
