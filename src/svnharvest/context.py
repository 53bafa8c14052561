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

from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, Field

from svnharvest.constants import DEFAULT_MAX_ATTEMPTS, DEFAULT_QUEUE_CAPACITY
from svnharvest.core.queue.commit_queue import CommitQueue
from svnharvest.core.svn_interface.interface import SvnInterface
from svnharvest.core.svn_interface.SubprocessSvnInterface import (
    SubprocessSvnInterface,
)


class GlobalConfig(BaseModel):
    svn_executable: str = Field(
        default="svn", description="Name or path of the svn executable"
    )
    max_attempts: int = Field(
        default=DEFAULT_MAX_ATTEMPTS,
        ge=1,
        description="How often an svn command is executed before giving up",
    )
    queue_capacity: int = Field(
        default=DEFAULT_QUEUE_CAPACITY,
        ge=1,
        description="Number of extracted commits buffered before the extractor waits",
    )
    verbose: bool = Field(default=False, description="Enable verbose logging output")
    silent: bool = Field(
        default=False, description="Do not output any log text to the console"
    )


@dataclass(frozen=True)
class GlobalContext:
    svn_interface: SvnInterface
    config: GlobalConfig

    @classmethod
    def from_global_config(cls, config: GlobalConfig):
        svn_interface = SubprocessSvnInterface(config.svn_executable)
        return GlobalContext(svn_interface, config)

    def create_queue(self) -> CommitQueue:
        return CommitQueue(self.config.queue_capacity)


@dataclass(frozen=True)
class ExtractContext:
    repository: Path
    revisions: list[str] | None = None
    output: Path | None = None


@dataclass(frozen=True)
class ParseContext:
    commit_text: str
    output: Path | None = None
