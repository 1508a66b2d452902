"""
BoostKit CLI argument parser.

Entry point of the ``setup-boost`` command and of the GitHub Action step.
Every flag can also be supplied as an action input.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from boostkit.ci.actions import ActionsHost
from boostkit.cli.utils import find_config_file, load_yaml_config, resolve_settings
from boostkit.core.exceptions import BoostKitError
from boostkit.install.installer import INSTALL_METHODS, BoostInstaller

# Get version from package
try:
    from importlib.metadata import version

    __version__ = version("boostkit")
except Exception:
    __version__ = "0.1.0"

logger = logging.getLogger(__name__)


class CLI:
    """BoostKit command-line interface."""

    def __init__(self, host: Optional[ActionsHost] = None):
        """
        Initialize CLI with argument parser.

        Args:
            host: GitHub Actions host; created from the process environment if None
        """
        self.host = host or ActionsHost()
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser.

        Returns:
            Configured ArgumentParser instance
        """
        parser = argparse.ArgumentParser(
            prog="setup-boost",
            description="Install a prebuilt Boost release on a CI build agent",
            epilog="Options not given on the command line are read from "
            "GitHub Actions inputs (INPUT_BOOST_VERSION, ...).",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        parser.add_argument(
            "--version", action="version", version=f"BoostKit {__version__}"
        )
        parser.add_argument(
            "--verbose", "-v", action="store_true", help="Enable verbose output"
        )
        parser.add_argument(
            "--quiet",
            "-q",
            action="store_true",
            help="Enable minimal output (errors only)",
        )
        parser.add_argument(
            "--config",
            type=Path,
            metavar="PATH",
            help="Path to configuration file (default: ./boostkit.yaml)",
        )
        parser.add_argument(
            "--boost-version",
            dest="boost_version",
            metavar="VERSION",
            help="Boost version to install (e.g., 1.82.0)",
        )
        parser.add_argument(
            "--toolset",
            metavar="NAME",
            help="Only accept packages built with this toolset (e.g., gcc, msvc-14.3)",
        )
        parser.add_argument(
            "--platform-version",
            dest="platform_version",
            metavar="VERSION",
            help="Only accept packages built for this OS version (e.g., 22.04, 2022)",
        )
        parser.add_argument(
            "--root-dir",
            dest="root_dir",
            type=Path,
            metavar="PATH",
            help="Installation root (default: D:\\boost on Windows, /usr/boost elsewhere)",
        )
        parser.add_argument(
            "--manifest-url",
            dest="manifest_url",
            metavar="URL",
            help="Versions manifest to resolve packages from",
        )
        parser.add_argument(
            "--method",
            choices=sorted(INSTALL_METHODS),
            help="Install method [default: current]",
        )

        return parser

    def parse_args(self, args: Optional[List[str]] = None):
        """
        Parse command-line arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Parsed arguments namespace
        """
        return self.parser.parse_args(args)

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run CLI with given arguments.

        Args:
            args: Arguments to parse (uses sys.argv if None)

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        parsed_args = self.parse_args(args)

        self._configure_logging(parsed_args)

        try:
            return self._install(parsed_args)
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130  # Standard exit code for SIGINT
        except BoostKitError as e:
            self.host.set_failed(str(e))
            return 1
        except Exception as e:
            self.host.set_failed(str(e))
            if parsed_args.verbose:
                import traceback

                traceback.print_exc()
            return 1

    def _configure_logging(self, args):
        """
        Configure logging based on verbose/quiet flags.

        Args:
            args: Parsed arguments with verbose/quiet flags
        """
        if args.verbose or self.host.is_debug:
            level = logging.DEBUG
            format_str = "%(levelname)s [%(name)s] %(message)s"
        elif args.quiet:
            level = logging.ERROR
            format_str = "%(levelname)s: %(message)s"
        else:
            level = logging.INFO
            format_str = "%(message)s"

        logging.basicConfig(
            level=level,
            format=format_str,
            force=True,  # Reconfigure if already configured
        )

    def _install(self, args) -> int:
        """
        Resolve settings, install Boost and publish the outputs.

        Args:
            args: Parsed arguments

        Returns:
            Exit code
        """
        config_file = find_config_file(args.config)
        config = (
            load_yaml_config(config_file, required=args.config is not None)
            if config_file
            else {}
        )
        settings = resolve_settings(args, self.host, config)

        installer = BoostInstaller(
            root_dir=settings.root_dir,
            method=settings.method,
            manifest_url=settings.manifest_url,
            host=self.host,
        )
        result = installer.install(
            settings.boost_version, settings.toolset, settings.platform_version
        )

        self.host.set_output("BOOST_ROOT", str(result.boost_root))
        self.host.set_output("BOOST_VER", result.boost_ver)

        logger.info("Boost download finished")
        return 0


def main():
    """Main entry point for CLI."""
    cli = CLI()
    sys.exit(cli.run())


if __name__ == "__main__":
    main()
