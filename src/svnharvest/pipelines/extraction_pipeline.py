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

import contextlib
import sys
import threading
from collections.abc import Callable
from pathlib import Path

from loguru import logger

from svnharvest.context import GlobalContext
from svnharvest.core.exceptions import FileSystemError
from svnharvest.core.extractor.svn_commit_extractor import SvnCommitExtractor
from svnharvest.core.logging.utils import time_block
from svnharvest.core.output.commit_writer import CommitWriter


@contextlib.contextmanager
def _open_output(output: Path | None):
    if output is None:
        yield sys.stdout
        return
    try:
        stream = open(output, "w", encoding="utf-8")
    except OSError as e:
        raise FileSystemError(f"Cannot write to {output}", str(e))
    with stream:
        yield stream


class ExtractionPipeline:
    """
    Wires an SvnCommitExtractor (producer) to a CommitWriter (consumer)
    running on its own thread, with the commit queue between them.
    """

    def __init__(
        self,
        global_context: GlobalContext,
        output: Path | None = None,
        check_availability: bool = True,
    ):
        self.global_context = global_context
        self.output = output
        self.check_availability = check_availability

    def run(self, extraction: Callable[[SvnCommitExtractor], bool]) -> bool:
        commit_queue = self.global_context.create_queue()
        writer_errors: list[Exception] = []

        with _open_output(self.output) as stream:
            writer = CommitWriter(commit_queue, stream)

            def consume() -> None:
                try:
                    writer.drain()
                except Exception as e:
                    writer_errors.append(e)
                finally:
                    # a dead writer must not leave the extractor waiting on a full queue
                    commit_queue.close()

            consumer = threading.Thread(
                target=consume, name="commit-writer", daemon=True
            )
            consumer.start()

            try:
                extractor = SvnCommitExtractor(
                    commit_queue,
                    self.global_context.svn_interface,
                    self.global_context.config.max_attempts,
                    check_availability=self.check_availability,
                )
                with time_block("Extraction"):
                    successful = extraction(extractor)
            finally:
                # lets the writer finish once everything queued is written
                commit_queue.close()
                consumer.join()

        if writer_errors:
            error = writer_errors[0]
            if isinstance(error, OSError):
                raise FileSystemError(
                    f"Writing commits failed after {writer.written} commit(s)", str(error)
                ) from error
            raise error

        logger.info(f"Extracted {writer.written} commit(s)")
        return successful
