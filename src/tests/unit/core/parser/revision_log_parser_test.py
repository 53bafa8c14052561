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

from svnharvest.core.parser.revision_log_parser import parse_revision_log
from tests.svn_fixtures import REVISIONS_LOG


def test_parse_simple_log():
    log = (
        "r2 | alice | 2020-01-01 10:00:00\n"
        "------\n"
        "r1 | bob | 2019-12-31 09:00:00\n"
        "------"
    )

    assert parse_revision_log(log) == {
        "r2": "2020-01-01 10:00:00",
        "r1": "2019-12-31 09:00:00",
    }


def test_keeps_log_order():
    assert list(parse_revision_log(REVISIONS_LOG)) == ["r2", "r1"]


def test_date_is_text_after_last_pipe():
    log = "r7 | carol | 2021-03-04 12:00:00 +0100 (Do, 04 Mär | 2021)\n"

    assert parse_revision_log(log) == {"r7": "2021)"}


def test_localized_date_is_kept_verbatim():
    revisions = parse_revision_log(REVISIONS_LOG)

    assert revisions["r2"] == "2020-01-01 10:00:00 +0100 (Wed, 01 Jan 2020)"


def test_separator_and_empty_lines_are_ignored():
    log = "\n------------------------------------------------------------------------\n\n"

    assert parse_revision_log(log) == {}


def test_empty_log():
    assert parse_revision_log("") == {}


def test_line_without_pipe_has_empty_date():
    assert parse_revision_log("r5 something\n") == {"r5": ""}


def test_lines_without_revision_token_are_skipped():
    log = "readme | x | y\nr12 | dave | 2022-02-02\nrandom text\n"

    assert parse_revision_log(log) == {"r12": "2022-02-02"}


def test_duplicate_revisions_collapse():
    log = "r3 | a | first\nr3 | a | second\n"

    assert parse_revision_log(log) == {"r3": "second"}
