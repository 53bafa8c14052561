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

from loguru import logger

from svnharvest.core.data.commit import Commit
from svnharvest.core.parser.diff_parser import DiffParser


def create_commit_header(commit_header: str) -> list[str]:
    """Splits the output of `svn log -r<N>` into header lines."""
    if not commit_header:
        return []
    return commit_header.split("\n")


def create_commit(
    revision: str | None,
    date: str | None,
    header: list[str],
    diff_text: str | None,
    parser: DiffParser | None = None,
) -> Commit | None:
    """
    Builds a Commit from its parts.

    Returns None, after logging the reason, if the revision, the date or the
    diff text is missing. An empty diff text is valid and results in a
    commit without changed artifacts.
    """
    if not revision:
        logger.warning("Commit number not available; no commit created")
        return None

    if not date:
        logger.warning(
            f'Commit date for commit "{revision}" not available; no commit created'
        )
        return None

    if diff_text is None:
        logger.warning(
            f'Commit content for commit "{revision}" not available; no commit created'
        )
        return None

    artifacts = (parser or DiffParser()).parse(diff_text)
    return Commit(id=revision, date=date, header=list(header), artifacts=artifacts)
