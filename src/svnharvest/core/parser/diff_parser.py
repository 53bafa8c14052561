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

from enum import Enum

from loguru import logger

from svnharvest.constants import ARTIFACT_START_MARKER
from svnharvest.core.data.commit import ChangedArtifact


class ParserState(Enum):
    SEARCHING = "searching"
    IN_HEADER = "in_header"
    IN_PROPERTY_BLOCK = "in_property_block"
    IN_CONTENT = "in_content"


class DiffParser:
    """
    Splits the output of `svn diff -c` into ChangedArtifacts.

    A changed artifact in that output looks like

        Index: dir1/file.txt
        ===================================================================
        --- dir1/file.txt	(revision 1)
        +++ dir1/file.txt	(revision 2)
        @@ -1,2 +1,2 @@
         unchanged line
        -old line
        +new line

        Property changes on: dir1/file.txt
        ___________________________________________________________________
        Added: svn:executable
        ## -0,0 +1 ##
        +*

    where the hunk and the property block are both optional. Everything up
    to the hunk marker, and the whole property block, is diff header; the
    hunk body is content.
    """

    HUNK_MARKER = "@@"
    PROPERTY_START_MARKER = "Property changes on:"
    PROPERTY_END_MARKER = "##"
    NO_NEWLINE_MARKER = "\\ No newline at end of"

    def parse(self, diff_text: str) -> list[ChangedArtifact]:
        lines = self._split_lines(diff_text)
        if len(lines) <= 1:
            logger.debug(f"Diff text has {len(lines)} line(s); no changed artifacts")
            return []

        artifacts: list[ChangedArtifact] = []
        artifact: ChangedArtifact | None = None
        state = ParserState.SEARCHING

        i = 0
        while i < len(lines):
            line = lines[i]

            if line.startswith(self.NO_NEWLINE_MARKER):
                i += 1
                continue

            if line.startswith(ARTIFACT_START_MARKER):
                # start of the next artifact, finish the previous one
                if artifact is not None:
                    artifacts.append(artifact)
                artifact = ChangedArtifact.from_index_line(line)
                state = ParserState.IN_HEADER
                i += 1
                continue

            if state is ParserState.IN_HEADER:
                artifact.diff_header_lines.append(line)
                if line.startswith(self.HUNK_MARKER):
                    state = ParserState.IN_CONTENT

            elif state is ParserState.IN_CONTENT:
                if line.startswith(self.PROPERTY_START_MARKER):
                    # handle this line again as part of the property block
                    state = ParserState.IN_PROPERTY_BLOCK
                    continue
                # blank lines separate the hunk from a following property block
                if line:
                    artifact.content_lines.append(line)

            elif state is ParserState.IN_PROPERTY_BLOCK:
                artifact.diff_header_lines.append(line)
                if line.startswith(self.PROPERTY_END_MARKER):
                    # the line after "## -0,0 +1 ##" holds the property value
                    if i + 1 < len(lines):
                        artifact.diff_header_lines.append(lines[i + 1])
                    else:
                        logger.warning(
                            f'Property block of "{artifact.path}" ends without a value line'
                        )
                    state = ParserState.SEARCHING

            i += 1

        if artifact is not None:
            artifacts.append(artifact)

        return artifacts

    @staticmethod
    def _split_lines(diff_text: str) -> list[str]:
        lines = diff_text.split("\n")
        while lines and not lines[-1]:
            lines.pop()
        return lines


def parse_changed_artifacts(diff_text: str) -> list[ChangedArtifact]:
    return DiffParser().parse(diff_text)
