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

import sys
from pathlib import Path
from typing import TextIO

import typer
from loguru import logger

from svnharvest.constants import TERMINATION_TOKEN
from svnharvest.context import GlobalContext, ParseContext
from svnharvest.core.exceptions import (
    ValidationError,
    handle_svnharvest_exception,
    path_not_found,
)
from svnharvest.pipelines.extraction_pipeline import ExtractionPipeline


def read_commit_text(stream: TextIO) -> str:
    """Reads lines until the termination token (or end of input)."""
    lines = []
    for line in stream:
        line = line.rstrip("\n")
        if line.rstrip("\r") == TERMINATION_TOKEN:
            break
        lines.append(line)
    return "\n".join(lines)


def run_parse(global_context: GlobalContext, parse_context: ParseContext) -> bool:
    # parsing text needs no svn installation
    pipeline = ExtractionPipeline(
        global_context, parse_context.output, check_availability=False
    )
    return pipeline.run(
        lambda extractor: extractor.extract_single(parse_context.commit_text)
    )


def main(
    ctx: typer.Context,
    commit_file: Path | None = typer.Argument(
        None,
        help="File holding the commit. Reads stdin when omitted.",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the commit to this file instead of stdout (one JSON object per line).",
    ),
) -> None:
    """Parse a single commit given as text.

    The optional first line holds the revision (e.g. r78), followed by the
    output of `svn diff`. Input ends at a line reading "!q!".

    Examples:
        svn diff -c 78 | svh parse
        svh parse commit.txt -o commit.jsonl
    """
    with handle_svnharvest_exception():
        global_context: GlobalContext = ctx.obj

        if commit_file is None:
            commit_text = read_commit_text(sys.stdin)
        elif not commit_file.is_file():
            raise path_not_found(str(commit_file))
        else:
            try:
                with open(commit_file, encoding="utf-8") as f:
                    commit_text = read_commit_text(f)
            except OSError as e:
                raise ValidationError(f"Cannot read {commit_file}", str(e))

        if not run_parse(global_context, ParseContext(commit_text, output)):
            logger.error("Parsing the commit failed")
            raise typer.Exit(1)
