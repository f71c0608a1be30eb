"""Status reporting for the hosting environment"""

import logging
import os
import uuid
from contextlib import contextmanager
from typing import Dict, Generator, Mapping, Optional

from ..constants import ENV_GITHUB_ACTIONS, ENV_GITHUB_OUTPUT, TRUE_STRING

logger = logging.getLogger(__name__)


def escape_data(value: str) -> str:
    """Escape a workflow command message"""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class Reporter:
    """Reports progress, outputs and the final failure of a run

    Messages always go through logging. When running inside GitHub
    Actions the reporter also writes workflow commands to stdout and
    appends outputs to the file named by GITHUB_OUTPUT.
    """

    def __init__(self,
                 environ: Optional[Mapping[str, str]] = None,
                 annotations: Optional[bool] = None):
        """
        Initialize reporter

        Args:
            environ: Environment to read (default: os.environ)
            annotations: Force workflow commands on or off (default: detect)
        """
        self.environ = environ if environ is not None else os.environ
        if annotations is None:
            annotations = self.environ.get(ENV_GITHUB_ACTIONS, "") == TRUE_STRING
        self.annotations = annotations
        self.outputs: Dict[str, str] = {}
        self.failure: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.failure is not None

    def info(self, message: str) -> None:
        logger.info(message)

    def warning(self, message: str) -> None:
        logger.warning(message)
        self._command("warning", message)

    def error(self, message: str) -> None:
        logger.error(message)
        self._command("error", message)

    @contextmanager
    def group(self, title: str) -> Generator[None, None, None]:
        """Fold the enclosed output under a title"""
        self._command("group", title)
        logger.info(title)
        try:
            yield
        finally:
            self._command("endgroup", "")

    def set_output(self, name: str, value: str) -> None:
        """Publish a named output value"""
        value = str(value)
        self.outputs[name] = value
        logger.debug(f"Output {name}={value}")

        output_file = self.environ.get(ENV_GITHUB_OUTPUT)
        if self.annotations and output_file:
            delimiter = f"ghadelimiter_{uuid.uuid4()}"
            with open(output_file, "a", encoding="utf-8") as f:
                f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")

    def set_failed(self, message: str) -> None:
        """Record the run as failed"""
        self.failure = message
        self.error(message)

    def _command(self, command: str, message: str) -> None:
        if self.annotations:
            print(f"::{command}::{escape_data(message)}", flush=True)
