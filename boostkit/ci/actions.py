"""
GitHub Actions integration for BoostKit.

Implements the small part of the runner protocol the installer needs:
reading inputs from ``INPUT_*`` environment variables, appending outputs to
the ``$GITHUB_OUTPUT`` file, grouping log lines, and marking the run failed.
Outside of Actions the same calls fall back to plain logging.
"""

import logging
import os
import sys
import uuid
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator, Mapping, Optional, TextIO

logger = logging.getLogger(__name__)


class ActionsHost:
    """Reads inputs from and reports results to the GitHub Actions runner."""

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        stream: Optional[TextIO] = None,
    ):
        """
        Initialize host integration.

        Args:
            environ: Environment to read from (defaults to ``os.environ``)
            stream: Stream workflow commands are written to (defaults to stdout)
        """
        self.environ = environ if environ is not None else os.environ
        self.stream = stream
        self.outputs: Dict[str, str] = {}

    @property
    def is_actions(self) -> bool:
        """True when running inside a GitHub Actions job."""
        return self.environ.get("GITHUB_ACTIONS") == "true"

    @property
    def is_debug(self) -> bool:
        """True when step debug logging is enabled for the job."""
        return self.environ.get("RUNNER_DEBUG") == "1"

    def _write(self, line: str) -> None:
        stream = self.stream or sys.stdout
        stream.write(line + "\n")
        stream.flush()

    def get_input(self, name: str, required: bool = False) -> str:
        """
        Read an action input.

        Args:
            name: Input name as declared in action.yml (e.g. 'boost_version')
            required: Raise if the input is empty

        Returns:
            The stripped input value, '' when unset

        Raises:
            ValueError: If required and not supplied
        """
        key = f"INPUT_{name.replace(' ', '_').upper()}"
        value = self.environ.get(key, "").strip()
        if required and not value:
            raise ValueError(f"Input required and not supplied: {name}")
        return value

    def set_output(self, name: str, value: str) -> None:
        """
        Publish a step output.

        Appends to ``$GITHUB_OUTPUT`` when the runner provides it; otherwise
        prints the legacy ``::set-output`` command.
        """
        value = str(value)
        self.outputs[name] = value
        logger.debug(f"Output {name}={value}")

        output_file = self.environ.get("GITHUB_OUTPUT")
        if not output_file:
            self._write(f"::set-output name={name}::{_escape_data(value)}")
            return

        with open(Path(output_file), "a", encoding="utf-8") as f:
            if "\n" in value:
                delimiter = f"ghadelimiter_{uuid.uuid4()}"
                f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
            else:
                f.write(f"{name}={value}\n")

    @contextmanager
    def group(self, title: str) -> Iterator[None]:
        """Fold all output written inside the block under ``title``."""
        if self.is_actions:
            self._write(f"::group::{title}")
        else:
            logger.info(f"== {title} ==")
        try:
            yield
        finally:
            if self.is_actions:
                self._write("::endgroup::")

    def debug(self, message: str) -> None:
        """Write a debug message, shown only when step debugging is on."""
        if self.is_actions:
            self._write(f"::debug::{_escape_data(message)}")
        else:
            logger.debug(message)

    def set_failed(self, message: str) -> None:
        """Report the run as failed with ``message`` as its diagnostic."""
        if self.is_actions:
            self._write(f"::error::{_escape_data(message)}")
        else:
            logger.error(f"Error: {message}")


def _escape_data(value: str) -> str:
    """Escape a value for use in a workflow command."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
