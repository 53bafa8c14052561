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

from loguru import logger
from tenacity import RetryCallState, Retrying, retry_if_result, stop_after_attempt

from svnharvest.constants import DEFAULT_MAX_ATTEMPTS
from svnharvest.core.svn_interface.interface import ExecutionResult, SvnInterface


@dataclass(frozen=True)
class CommandOutcome:
    command: list[str]
    # None once all attempts failed; "" is a valid (empty) success
    output: str | None
    error_output: str
    attempts: int

    @property
    def succeeded(self) -> bool:
        return self.output is not None


def _unsuccessful(result: ExecutionResult) -> bool:
    return not result.successful


class CommandRunner:
    """
    Runs svn commands, retrying failed executions immediately until
    max_attempts executions have been made.
    """

    def __init__(self, svn: SvnInterface, max_attempts: int = DEFAULT_MAX_ATTEMPTS):
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be positive, got {max_attempts}")
        self.svn = svn
        self.max_attempts = max_attempts

    def run(self, args: list[str], cwd: str | Path | None = None) -> CommandOutcome:
        command_string = " ".join(args)

        def log_failed_attempt(retry_state: RetryCallState) -> None:
            error_output = retry_state.outcome.result().error_output
            logger.warning(
                f'Attempt {retry_state.attempt_number} of {self.max_attempts} to execute SVN command "{command_string}" failed: {error_output.strip()}'
            )

        def abort(retry_state: RetryCallState) -> ExecutionResult:
            logger.warning(f'Aborting execution of SVN command "{command_string}"')
            return retry_state.outcome.result()

        # no wait: a failed command is re-invoked right away
        retrying = Retrying(
            stop=stop_after_attempt(self.max_attempts),
            retry=retry_if_result(_unsuccessful),
            after=log_failed_attempt,
            retry_error_callback=abort,
        )
        result = retrying(self.svn.run_svn, args, cwd=cwd)
        attempts = retrying.statistics.get("attempt_number", 1)

        if result.successful:
            return CommandOutcome(args, result.standard_output, "", attempts)
        return CommandOutcome(args, None, result.error_output, attempts)
