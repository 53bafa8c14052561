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

import typer
from loguru import logger

from svnharvest.context import ExtractContext, GlobalContext
from svnharvest.core.exceptions import (
    ValidationError,
    handle_svnharvest_exception,
    path_not_found,
)
from svnharvest.pipelines.extraction_pipeline import ExtractionPipeline


def read_commit_list(commit_list: Path) -> list[str]:
    """Reads one revision per line, ignoring blank lines."""
    if not commit_list.is_file():
        raise path_not_found(str(commit_list))
    try:
        lines = commit_list.read_text(encoding="utf-8").splitlines()
    except OSError as e:
        raise ValidationError(f"Cannot read commit list {commit_list}", str(e))
    return [line.strip() for line in lines if line.strip()]


def run_extract(global_context: GlobalContext, extract_context: ExtractContext) -> bool:
    repository = extract_context.repository
    if not repository.is_dir():
        raise path_not_found(str(repository))

    pipeline = ExtractionPipeline(global_context, extract_context.output)

    if extract_context.revisions is None:
        logger.debug(f"Full extraction of {repository}")
        return pipeline.run(lambda extractor: extractor.extract(repository))

    logger.debug(
        f"Selective extraction of {len(extract_context.revisions)} revision(s) from {repository}"
    )
    return pipeline.run(
        lambda extractor: extractor.extract_selected(
            repository, extract_context.revisions
        )
    )


def main(
    ctx: typer.Context,
    repository: Path = typer.Argument(
        ...,
        help="Path to an svn working copy.",
    ),
    commits: Path | None = typer.Option(
        None,
        "--commits",
        "-c",
        help="File listing the revisions to extract, one per line (e.g. r70). Defaults to all revisions.",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write commits to this file instead of stdout (one JSON object per line).",
    ),
) -> None:
    """Extract commits from an svn working copy.

    Examples:
        # Extract every revision
        svh extract path/to/working-copy

        # Extract the revisions listed in commits.txt into commits.jsonl
        svh extract path/to/working-copy --commits commits.txt -o commits.jsonl
    """
    with handle_svnharvest_exception():
        global_context: GlobalContext = ctx.obj

        revisions = read_commit_list(commits) if commits is not None else None
        extract_context = ExtractContext(repository, revisions, output)

        if not run_extract(global_context, extract_context):
            logger.error("Extraction failed")
            raise typer.Exit(1)

        logger.success("Extraction completed successfully")
