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

import subprocess
from pathlib import Path

from loguru import logger

from .interface import ExecutionResult, SvnInterface

_LOG_LIMIT = 2000


def _truncate(text: str) -> str:
    return text[:_LOG_LIMIT] + ("...(truncated)" if len(text) > _LOG_LIMIT else "")


class SubprocessSvnInterface(SvnInterface):
    def __init__(
        self, executable: str = "svn", repo_path: str | Path | None = None
    ) -> None:
        self.executable = executable
        # Ensure repo_path is a Path object for consistency
        self.repo_path = Path(repo_path) if repo_path is not None else None

    def run_svn(
        self,
        args: list[str],
        cwd: str | Path | None = None,
    ) -> ExecutionResult:
        if cwd is not None:
            effective_cwd = str(cwd)
        elif self.repo_path is not None:
            effective_cwd = str(self.repo_path)
        else:
            effective_cwd = None

        cmd = [self.executable] + args
        logger.debug(f"Running svn command: {' '.join(cmd)} cwd={effective_cwd}")

        try:
            result = subprocess.run(
                cmd,
                text=True,
                encoding="utf-8",
                errors="replace",
                capture_output=True,
                check=True,
                cwd=effective_cwd,
            )
        except subprocess.CalledProcessError as e:
            logger.debug(
                f"Svn command failed: {' '.join(cmd)} code={e.returncode} stderr={e.stderr}"
            )
            return ExecutionResult(cmd, False, e.stdout or "", e.stderr or "")
        except OSError as e:
            # executable missing or cwd not accessible
            logger.debug(f"Svn command could not be started: {' '.join(cmd)} error={e}")
            return ExecutionResult(cmd, False, "", str(e))

        if result.stdout:
            logger.debug(f"svn stdout (text): {_truncate(result.stdout)}")
        if result.stderr:
            logger.debug(f"svn stderr (text): {_truncate(result.stderr)}")
        logger.debug(f"svn returncode: {result.returncode}")

        return ExecutionResult(cmd, True, result.stdout, result.stderr)
