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

from .command_runner import CommandOutcome, CommandRunner


class SvnCommands:
    """The svn invocations the extractor relies on."""

    VERSION_ARGS = ["--version"]
    LOG_ARGS = ["log"]
    REVISION_LOG_ARGS = ["log", "-q"]
    # -U100000 keeps whole files as context so content lines are complete
    COMMIT_CHANGES_ARGS = ["diff", "-x", "-U100000", "-c"]

    def __init__(self, runner: CommandRunner):
        self.runner = runner

    # -------------------------------
    # Core methods
    # -------------------------------

    def check_available(self) -> CommandOutcome:
        return self.runner.run(self.VERSION_ARGS)

    def get_revisions_log(self, repository: str | Path) -> CommandOutcome:
        """`svn log -q`: one "r<N> | author | date" line per revision."""
        return self.runner.run(self.REVISION_LOG_ARGS, cwd=repository)

    def get_revision_log(self, repository: str | Path, revision: str) -> CommandOutcome:
        """`svn log -q -r<N>`: the revision line of a single revision."""
        return self.runner.run(self.REVISION_LOG_ARGS + [f"-{revision}"], cwd=repository)

    def get_commit_header(self, repository: str | Path, revision: str) -> CommandOutcome:
        """`svn log -r<N>`: author, date and message of a revision."""
        return self.runner.run(self.LOG_ARGS + [f"-{revision}"], cwd=repository)

    def get_commit_changes(self, repository: str | Path, revision: str) -> CommandOutcome:
        """`svn diff -x -U100000 -c -r<N>`: the changes introduced by a revision."""
        return self.runner.run(
            self.COMMIT_CHANGES_ARGS + [f"-{revision}"], cwd=repository
        )

