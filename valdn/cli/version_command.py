"""Show version information."""

import argparse
from importlib import metadata as importlib_metadata

from .command_base import CommandBase


class VersionCommand(CommandBase):
    """Command to show version information."""

    @property
    def name(self) -> str:
        return "version"

    @property
    def help(self) -> str:
        return "Show version information"

    def _get_version(self) -> str:
        """Resolve version from package metadata, fallback to the module attribute."""
        try:
            return importlib_metadata.version("valdn")
        except importlib_metadata.PackageNotFoundError:
            from valdn import __version__

            return __version__

    def execute(self, args: argparse.Namespace) -> int:
        print(f"valdn v{self._get_version()}")
        return 0
