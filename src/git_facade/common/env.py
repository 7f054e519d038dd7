"""Environment configuration interface for git-facade.

This module provides a clean interface for accessing environment variables,
centralizing all environment variable access in one place.
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()


class Environment:
    """Interface for accessing environment configuration."""

    @staticmethod
    def git_executable() -> str:
        """Get the name or path of the git executable.

        Returns:
            Executable placed before every subcommand, defaults to 'git'
        """
        return os.getenv("GIT_EXECUTABLE", "git")

    @staticmethod
    def git_locale() -> str:
        """Get the locale forced onto git subprocesses on POSIX hosts.

        Returns:
            Value for LC_ALL, defaults to 'en_US.UTF-8'
        """
        return os.getenv("GIT_LOCALE", "en_US.UTF-8")

    @staticmethod
    def log_level() -> str:
        """Get the default logging level.

        Returns:
            Upper-cased level name, defaults to 'INFO'
        """
        return os.getenv("LOG_LEVEL", "INFO").upper()


# Singleton instance for convenient access
env = Environment()
