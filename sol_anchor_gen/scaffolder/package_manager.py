"""Invokes the JavaScript package manager that installs project dependencies."""

from __future__ import annotations

from pathlib import Path

from sol_anchor_gen.errors import DependencyInstallError, ToolNotInstalledError
from sol_anchor_gen.utils import run_command

_INSTALL_INSTRUCTIONS: dict[str, str] = {
    "pnpm": (
        "Install pnpm: npm install -g pnpm\n"
        "Or visit: https://pnpm.io/installation"
    ),
    "npm": "Install Node.js (which bundles npm): https://nodejs.org/",
    "yarn": (
        "Install yarn: npm install -g yarn\n"
        "Or visit: https://yarnpkg.com/getting-started/install"
    ),
}


class PackageManager:
    """Thin async wrapper around ``<tool> --version`` and ``<tool> install``.

    Args:
        tool: Executable name, ``pnpm`` unless configured otherwise.
        probe_timeout: Seconds allowed for the ``--version`` probe.
    """

    def __init__(self, tool: str = "pnpm", probe_timeout: float = 15) -> None:
        self.tool = tool
        self.probe_timeout = probe_timeout

    async def version(self) -> str | None:
        """Return the tool's reported version, or ``None`` when unavailable."""
        try:
            rc, stdout, _ = await run_command(
                [self.tool, "--version"], timeout=self.probe_timeout
            )
        except OSError:
            return None
        if rc != 0:
            return None
        return stdout.strip() or None

    async def is_available(self) -> bool:
        return await self.version() is not None

    async def install(self, project_path: str | Path) -> None:
        """Run ``<tool> install`` inside *project_path*.

        Output streams straight to the terminal and there is no timeout.

        Raises:
            ToolNotInstalledError: The tool is not on ``PATH``.
            DependencyInstallError: The process could not be spawned or
                exited with a non-zero status.
        """
        if not await self.is_available():
            raise ToolNotInstalledError(self.tool, self.install_instructions())

        try:
            rc, _, _ = await run_command(
                [self.tool, "install"], cwd=project_path, timeout=None, capture=False
            )
        except OSError as exc:
            raise DependencyInstallError(
                f"Failed to run {self.tool} install: {exc}", cause=exc
            ) from exc

        if rc != 0:
            raise DependencyInstallError(
                f"{self.tool} install failed with exit code {rc}", returncode=rc
            )

    def install_instructions(self) -> str:
        return _INSTALL_INSTRUCTIONS.get(
            self.tool, f"Install {self.tool} and make sure it is on your PATH"
        )
