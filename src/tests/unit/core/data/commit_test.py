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

from svnharvest.constants import ARTIFACT_START_MARKER, NO_PATH
from svnharvest.core.data.commit import ChangedArtifact, Commit
from svnharvest.core.parser.diff_parser import DiffParser


@pytest.mark.parametrize(
    "index_line, path, name",
    [
        ("Index: dir1/fileDir1.txt", "dir1/fileDir1.txt", "fileDir1.txt"),
        ("Index: file1.txt", "file1.txt", "file1.txt"),
        ("Index: a/b/c/deep.java", "a/b/c/deep.java", "deep.java"),
        ("Index: docs/", "docs/", "docs/"),
        ("Index: my file.txt", "my file.txt", "my file.txt"),
        ("Index:", "<no_path>", "<no_path>"),
        ("Index: ", "<no_path>", "<no_path>"),
    ],
)
def test_from_index_line(index_line, path, name):
    artifact = ChangedArtifact.from_index_line(index_line)

    assert artifact.path == path
    assert artifact.name == name
    assert artifact.diff_header_lines == [index_line]
    assert artifact.content_lines == []


def test_parser_and_artifact_agree_on_marker():
    bare = ChangedArtifact.from_index_line(ARTIFACT_START_MARKER)
    (parsed,) = DiffParser().parse(f"{ARTIFACT_START_MARKER} dir/b.txt\n@@ -0,0 +1 @@\n+b\n")

    assert bare.path == NO_PATH
    assert parsed.path == "dir/b.txt"
    assert parsed.diff_header_lines[0] == f"{ARTIFACT_START_MARKER} dir/b.txt"


def test_artifacts_do_not_share_lists():
    first = ChangedArtifact.from_index_line("Index: a.txt")
    second = ChangedArtifact.from_index_line("Index: b.txt")
    first.content_lines.append("+x")

    assert second.content_lines == []


def test_commit_to_dict():
    artifact = ChangedArtifact("a.txt", "a.txt", ["Index: a.txt"], ["+x"])
    commit = Commit("r1", "2020-01-01", ["header"], [artifact])

    assert commit.to_dict() == {
        "id": "r1",
        "date": "2020-01-01",
        "header": ["header"],
        "artifacts": [
            {
                "path": "a.txt",
                "name": "a.txt",
                "diff_header_lines": ["Index: a.txt"],
                "content_lines": ["+x"],
            }
        ],
    }
