"""Invoke the external static-site builder."""

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from pydantic import BaseModel, Field

from podsite.utils.errors import BuildError

logger = logging.getLogger(__name__)


class BuildResult(BaseModel):
    """Outcome of one builder run."""

    command: list[str] = Field(..., description="Command that was run")
    returncode: int = Field(0, description="Process exit status")
    stdout: str = Field("", description="Captured standard output")
    stderr: str = Field("", description="Captured standard error")


class SiteBuilder:
    """Runs the site builder (``hugo`` by default) in the project root."""

    def __init__(self, root_dir: Path, command: Sequence[str] = ("hugo",)) -> None:
        """Initialize the builder.

        Args:
            root_dir: Working directory for the build
            command: Builder executable and arguments
        """
        if not command:
            raise ValueError("Build command must not be empty")
        self.root_dir = root_dir
        self.command = list(command)

    def build(self) -> BuildResult:
        """Run the build once, capturing its output.

        Returns:
            BuildResult with the captured output

        Raises:
            BuildError: If the builder can't be launched or exits non-zero
        """
        logger.info("Running %s in %s", " ".join(self.command), self.root_dir)
        try:
            result = subprocess.run(
                self.command,
                cwd=self.root_dir,
                capture_output=True,
                text=True,
                check=True,
            )
        except FileNotFoundError as e:
            raise BuildError(f"Site builder not found: {self.command[0]}") from e
        except subprocess.CalledProcessError as e:
            raise BuildError(
                f"Site build failed with exit code {e.returncode}",
                returncode=e.returncode,
                stdout=e.stdout or "",
                stderr=e.stderr or "",
            ) from e
        except OSError as e:
            raise BuildError(f"Failed to launch {self.command[0]}: {e}") from e

        return BuildResult(
            command=self.command,
            returncode=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
        )
