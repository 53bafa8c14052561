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

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ExecutionResult:
    """Outcome of a single svn process."""

    command: list[str]
    successful: bool
    standard_output: str = ""
    error_output: str = ""


class SvnInterface(ABC):
    """
    Abstract interface for running svn commands.
    This abstracts away the details of how svn commands are executed.
    """

    @abstractmethod
    def run_svn(
        self,
        args: list[str],
        cwd: str | Path | None = None,
    ) -> ExecutionResult:
        """Run an svn command with text output. Never raises on command failure."""
