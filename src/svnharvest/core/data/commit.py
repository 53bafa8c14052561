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

from dataclasses import asdict, dataclass, field

from loguru import logger

from svnharvest.constants import ARTIFACT_START_MARKER, NO_PATH


@dataclass
class ChangedArtifact:
    """
    A single file (or directory) changed by a commit.

    diff_header_lines holds everything svn prints about the artifact
    itself (Index line, separator, ---/+++ lines, hunk marker, property
    block), content_lines holds the hunk body.
    """

    path: str
    name: str
    diff_header_lines: list[str] = field(default_factory=list)
    content_lines: list[str] = field(default_factory=list)

    @staticmethod
    def from_index_line(index_line: str) -> "ChangedArtifact":
        # "Index: dir1/fileDir1.txt" -> path "dir1/fileDir1.txt", name "fileDir1.txt"
        _, separator, path = index_line.partition(" ")
        if not separator:
            path = index_line[len(ARTIFACT_START_MARKER) :]

        if not path:
            logger.warning(f'No artifact path in "{index_line}"; using "{NO_PATH}"')
            path = NO_PATH

        artifact = ChangedArtifact(path=path, name=path.rsplit("/", 1)[-1] or path)
        artifact.diff_header_lines.append(index_line)
        return artifact


@dataclass(frozen=True)
class Commit:
    id: str
    date: str
    header: list[str]
    artifacts: list[ChangedArtifact]

    def to_dict(self) -> dict:
        return asdict(self)
