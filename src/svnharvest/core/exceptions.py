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

"""
Custom exception hierarchy for the svnharvest CLI application.

This module defines the exception hierarchy used by the extractor and
the CLI. Setup problems are raised as exceptions, while failures of a
single svn command or revision are reported through return values and
logged where they happen.
"""

from contextlib import contextmanager

import typer
from loguru import logger


class svnharvestError(Exception):
    """
    Base exception for all svnharvest-related errors.

    All svnharvest-specific exceptions should inherit from this class
    to enable consistent error handling throughout the application.
    """

    def __init__(self, message: str, details: str = None):
        """
        Initialize a svnharvestError.

        Args:
            message: Main error message for the user
            details: Additional technical details for logging
        """
        self.message = message
        self.details = details
        super().__init__(message)


class ExtractionSetupError(svnharvestError):
    """
    Errors while preparing an extraction.

    Raised before any revision is touched, e.g. when svn cannot be
    invoked or the configured number of attempts is not usable.
    """

    pass


class ValidationError(svnharvestError):
    """
    Input validation errors.

    Raised when user input fails validation checks,
    such as missing repository paths or unreadable commit lists.
    """

    pass


class ConfigurationError(svnharvestError):
    """
    Configuration-related errors.

    Raised when configuration files are invalid, missing,
    or contain incompatible settings.
    """

    pass


class QueueClosedError(svnharvestError):
    """Raised when a commit is offered to a closed commit queue."""

    pass


class FileSystemError(svnharvestError):
    """
    File system operation errors.

    Raised when file or directory operations fail,
    such as permission issues or missing files.
    """

    pass


# Convenience functions for creating common errors
def svn_not_found(details: str | None = None) -> ExtractionSetupError:
    """Create an ExtractionSetupError for when svn is not available."""
    return ExtractionSetupError(
        "Testing SVN availability failed",
        details
        or "Please install svn and ensure it's available in your PATH environment variable",
    )


def invalid_max_attempts(value) -> ExtractionSetupError:
    """Create an ExtractionSetupError for an unusable attempt count."""
    return ExtractionSetupError(
        f"The maximum of attempts to execute an SVN command is not a positive number: {value!r}",
        "Set max_attempts to an integer greater than or equal to 1",
    )


def path_not_found(path: str) -> ValidationError:
    """Create a ValidationError for non-existent paths."""
    return ValidationError(
        f"Path not found: {path}",
        "Please check that the path exists and is accessible",
    )


@contextmanager
def handle_svnharvest_exception(exit_on_fail: bool = True):
    """
    Log svnharvest errors at the CLI edge and turn them into exit codes.
    """
    try:
        yield
    except svnharvestError as e:
        logger.error(e.message)
        if e.details:
            logger.debug(e.details)
        if exit_on_fail:
            raise typer.Exit(1)
    except KeyboardInterrupt:
        logger.info("Operation cancelled by user")
        raise typer.Exit(130)
