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

from pathlib import Path

from loguru import logger

from svnharvest.constants import (
    DEFAULT_MAX_ATTEMPTS,
    NO_DATE,
    NO_ID,
    REVISION_PATTERN,
    REVISION_PREFIX,
    SUPPORTED_VCS,
    TERMINATION_TOKEN,
)
from svnharvest.core.assembler.commit_assembler import (
    create_commit,
    create_commit_header,
)
from svnharvest.core.data.commit import Commit
from svnharvest.core.exceptions import (
    QueueClosedError,
    invalid_max_attempts,
    svn_not_found,
)
from svnharvest.core.logging.utils import log_commit, time_block
from svnharvest.core.parser.diff_parser import DiffParser
from svnharvest.core.parser.revision_log_parser import parse_revision_log
from svnharvest.core.queue.commit_queue import CommitQueue
from svnharvest.core.svn_commands.command_runner import CommandRunner
from svnharvest.core.svn_commands.svn_commands import SvnCommands
from svnharvest.core.svn_interface.interface import SvnInterface


def validate_max_attempts(max_attempts) -> int:
    """Accepts positive ints and their string form (as read from config files)."""
    if isinstance(max_attempts, bool):
        raise invalid_max_attempts(max_attempts)
    try:
        value = int(str(max_attempts).strip())
    except ValueError:
        raise invalid_max_attempts(max_attempts)
    if value < 1:
        raise invalid_max_attempts(max_attempts)
    return value


def _revision_number(revision: str) -> int:
    return int(revision[1:])


def _strip_termination(commit_text: str) -> str:
    lines = commit_text.split("\n")
    for index, line in enumerate(lines):
        if line.rstrip("\r") == TERMINATION_TOKEN:
            return "\n".join(lines[:index])
    return commit_text


class SvnCommitExtractor:
    """
    Extracts commits from SVN repositories and hands them to a CommitQueue.

    Three modes are supported: all revisions of a repository (`extract`),
    a list of revisions (`extract_selected`) and a single commit given as
    text (`extract_single`). Each returns True if the extraction finished
    without a fatal problem.
    """

    def __init__(
        self,
        commit_queue: CommitQueue,
        svn: SvnInterface,
        max_attempts: int | str = DEFAULT_MAX_ATTEMPTS,
        check_availability: bool = True,
    ):
        self.commit_queue = commit_queue
        self.max_attempts = validate_max_attempts(max_attempts)
        self.svn_commands = SvnCommands(CommandRunner(svn, self.max_attempts))
        self.parser = DiffParser()

        if check_availability:
            self._prepare()

        logger.debug(f"{type(self).__name__} created (max_attempts={self.max_attempts})")

    def _prepare(self) -> None:
        outcome = self.svn_commands.check_available()
        if not outcome.succeeded:
            raise svn_not_found(outcome.error_output or None)

    # -------------------------------
    # Extraction modes
    # -------------------------------

    def extract(self, repository: str | Path) -> bool:
        """Full extraction of all revisions in the repository."""
        logger.debug("Full extraction of all available revisions in the repository")

        outcome = self.svn_commands.get_revisions_log(repository)
        revisions = parse_revision_log(outcome.output) if outcome.succeeded else {}

        if not revisions:
            logger.error(
                f'Full extraction of all available revisions from repository "{repository}" failed: '
                f'retrieving revisions log using "svn {" ".join(outcome.command)}" returned no revision numbers'
            )
            if outcome.error_output:
                logger.debug(outcome.error_output)
            return False

        return self._extract_revisions(repository, revisions)

    def extract_selected(self, repository: str | Path, revisions: list[str]) -> bool:
        """Extraction of the given revisions ("r70", "r71", ...) only."""
        logger.debug(f"Selective extraction of {len(revisions)} revision(s)")

        confirmed: dict[str, str] = {}
        for raw_revision in revisions:
            revision = raw_revision.strip()
            if not REVISION_PATTERN.fullmatch(revision):
                logger.info(
                    f'Excluding commit from extraction: "{revision}" is not a valid SVN revision, like "r70"'
                )
                continue

            outcome = self.svn_commands.get_revision_log(repository, revision)
            if not outcome.succeeded:
                logger.warning(
                    f'Retrieving revision log failed: "{revision}" seems to be an unknown revision'
                )
                continue

            revision_log = parse_revision_log(outcome.output)
            if not revision_log:
                logger.warning(
                    f'Selective extraction of revision "{revision}" failed: '
                    f'retrieving revision log returned no revision number; this revision is skipped'
                )
                continue

            confirmed.update(revision_log)

        if not confirmed:
            logger.error(
                f'Selective extraction from repository "{repository}" failed: '
                "none of the specified revisions could be found"
            )
            return False

        return self._extract_revisions(repository, confirmed)

    def extract_single(self, commit_text: str) -> bool:
        """
        Parses a single commit given as text.

        The first line may hold the revision ("r78"); the rest is the
        output of `svn diff`. Anything after a line reading "!q!" is
        ignored. No svn command is executed.
        """
        logger.debug("Extraction (parsing) of single commit")

        commit_text = _strip_termination(commit_text)
        first_line, separator, remainder = commit_text.partition("\n")

        commit_id = NO_ID
        if REVISION_PATTERN.fullmatch(first_line.strip()):
            commit_id = first_line.strip()
            commit_text = remainder if separator else ""
        elif first_line.startswith(REVISION_PREFIX):
            logger.warning(
                'Identifying the commit id failed: the first line does not exclusively contain "r<REVISION>"; '
                f'using "{NO_ID}" as commit id'
            )

        commit = create_commit(commit_id, NO_DATE, [], commit_text, self.parser)
        if commit is None:
            return False
        return self._enqueue(commit)

    # -------------------------------
    # Helpers
    # -------------------------------

    def _extract_revisions(self, repository: str | Path, revisions: dict[str, str]) -> bool:
        logger.debug(f'Extracting {len(revisions)} revisions from "{repository}"')

        for revision in sorted(revisions, key=_revision_number):
            with time_block(f"Revision {revision}"):
                header: list[str] = []
                header_outcome = self.svn_commands.get_commit_header(repository, revision)
                if header_outcome.succeeded:
                    header = create_commit_header(header_outcome.output)
                else:
                    logger.warning(
                        f'Retrieving commit header information for revision "{revision}" failed; '
                        "creating commit without commit header information"
                    )

                changes_outcome = self.svn_commands.get_commit_changes(repository, revision)
                if not changes_outcome.succeeded:
                    logger.error(
                        f'Retrieving commit changes information for revision "{revision}" failed '
                        f'(svn {" ".join(changes_outcome.command)}): {changes_outcome.error_output.strip()}; '
                        "extraction terminated"
                    )
                    return False

                commit = create_commit(
                    revision, revisions[revision], header, changes_outcome.output, self.parser
                )
                if commit is not None and not self._enqueue(commit):
                    return False

        return True

    def _enqueue(self, commit: Commit) -> bool:
        log_commit(commit)
        while True:
            try:
                if self.commit_queue.add_commit(commit):
                    return True
            except QueueClosedError as e:
                logger.error(f"{e.message}; extraction stopped")
                return False
            logger.debug("Waiting to add commit to queue")

    # -------------------------------
    # Capabilities
    # -------------------------------

    @staticmethod
    def operating_system_supported(operating_system: str) -> bool:
        # svn behaves the same everywhere
        logger.debug("Supported operating systems: all")
        return True

    @staticmethod
    def version_control_system_supported(version_control_system: str) -> bool:
        logger.debug(f"Supported version control system: {SUPPORTED_VCS}")
        return version_control_system.lower() == SUPPORTED_VCS
