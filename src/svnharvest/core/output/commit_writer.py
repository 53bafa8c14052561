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

import json
from typing import TextIO

from loguru import logger

from svnharvest.core.queue.commit_queue import CommitQueue


class CommitWriter:
    """
    Consumer side of the commit queue: writes every commit as one JSON
    object per line until the queue is closed and drained.
    """

    def __init__(self, commit_queue: CommitQueue, stream: TextIO):
        self.commit_queue = commit_queue
        self.stream = stream
        self.written = 0

    def drain(self) -> int:
        while self.commit_queue.is_open():
            commit = self.commit_queue.get_commit()
            if commit is None:
                continue

            self.stream.write(json.dumps(commit.to_dict(), ensure_ascii=False))
            self.stream.write("\n")
            self.stream.flush()
            self.written += 1
            logger.debug(f'Wrote commit "{commit.id}"')

        return self.written
