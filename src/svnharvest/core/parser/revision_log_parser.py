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

from svnharvest.constants import REVISION_PATTERN, REVISION_PREFIX


def _revision_token(line: str) -> str:
    parts = line.split(maxsplit=1)
    return parts[0] if parts else ""


def _commit_date(line: str) -> str:
    # localized dates may contain anything, only the last pipe is structural
    _, separator, date = line.rpartition("|")
    return date.strip() if separator else ""


def parse_revision_log(revision_log: str) -> dict[str, str]:
    """
    Extracts revision numbers and commit dates from `svn log -q` output.

    Each revision line looks like
        r78 | alice | 2020-01-01 10:00:00 +0100 (Wed, 01 Jan 2020)
    and is surrounded by dashed separator lines, which are ignored.

    Returns:
        Mapping of revision token (e.g. "r78") to the text following the
        last "|" of its line, in log order.
    """
    logger.debug("Extracting revision numbers and commit dates from log")

    revisions: dict[str, str] = {}
    for line in revision_log.split("\n"):
        if not line or not line.startswith(REVISION_PREFIX):
            continue

        revision = _revision_token(line)
        if not REVISION_PATTERN.fullmatch(revision):
            logger.debug(f'Skipping log line without revision token: "{line}"')
            continue

        revisions[revision] = _commit_date(line)

    return revisions
