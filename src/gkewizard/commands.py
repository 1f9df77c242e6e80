import shutil
import subprocess
from pathlib import Path

from .exceptions import ExternalCommandError
from .logger import logger


def require_binaries(*names: str) -> None:
    """Fails fast when a tool the wizard shells out to is not installed."""
    missing = [name for name in names if shutil.which(name) is None]
    if missing:
        raise ExternalCommandError(
            list(missing), None, "not found on PATH, please install and rerun"
        )


class CommandRunner:
    """
    Runs gcloud, terraform and kubectl.

    `run` lets the command talk to the terminal (gcloud auth login opens a
    browser, terraform streams its plan); `output` captures stdout for parsing.
    Any non-zero exit raises ExternalCommandError.
    """

    def run(self, *args: str, cwd: Path | None = None) -> None:
        cmd = list(args)
        logger.debug(f"Running: {' '.join(cmd)}")
        try:
            res = subprocess.run(cmd, cwd=cwd)
        except OSError as e:
            raise ExternalCommandError(cmd, None, str(e)) from e
        if res.returncode != 0:
            raise ExternalCommandError(cmd, res.returncode)

    def output(self, *args: str, cwd: Path | None = None) -> str:
        cmd = list(args)
        logger.debug(f"Running: {' '.join(cmd)}")
        try:
            res = subprocess.run(
                cmd, cwd=cwd, capture_output=True, text=True, errors="replace"
            )
        except OSError as e:
            raise ExternalCommandError(cmd, None, str(e)) from e
        if res.returncode != 0:
            err = res.stderr.strip().splitlines()[-1] if res.stderr.strip() else ""
            raise ExternalCommandError(cmd, res.returncode, err)
        return res.stdout.strip()
