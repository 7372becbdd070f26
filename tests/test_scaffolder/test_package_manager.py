"""Tests for the PackageManager invoker (subprocess calls mocked)."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from sol_anchor_gen.errors import DependencyInstallError, ToolNotInstalledError
from sol_anchor_gen.scaffolder import PackageManager

pytestmark = pytest.mark.unit

RUN_COMMAND = "sol_anchor_gen.scaffolder.package_manager.run_command"


class TestProbe:
    async def test_version(self):
        with patch(RUN_COMMAND, new=AsyncMock(return_value=(0, "8.15.1\n", ""))) as mock_run:
            assert await PackageManager().version() == "8.15.1"
        assert mock_run.await_args.args[0] == ["pnpm", "--version"]

    async def test_nonzero_exit_is_unavailable(self):
        with patch(RUN_COMMAND, new=AsyncMock(return_value=(1, "", "boom"))):
            assert await PackageManager().is_available() is False

    async def test_missing_executable_is_unavailable(self):
        with patch(RUN_COMMAND, new=AsyncMock(side_effect=FileNotFoundError("pnpm"))):
            assert await PackageManager().is_available() is False
            assert await PackageManager().version() is None

    async def test_custom_tool(self):
        with patch(RUN_COMMAND, new=AsyncMock(return_value=(0, "10.2.0", ""))) as mock_run:
            assert await PackageManager("npm").is_available()
        assert mock_run.await_args.args[0] == ["npm", "--version"]


class TestInstall:
    async def test_success(self, tmp_path: Path):
        mock_run = AsyncMock(side_effect=[(0, "8.15.1", ""), (0, "", "")])
        with patch(RUN_COMMAND, new=mock_run):
            await PackageManager().install(tmp_path)

        install_call = mock_run.await_args_list[1]
        assert install_call.args[0] == ["pnpm", "install"]
        assert install_call.kwargs["cwd"] == tmp_path
        assert install_call.kwargs["timeout"] is None
        assert install_call.kwargs["capture"] is False

    async def test_not_installed(self, tmp_path: Path):
        with patch(RUN_COMMAND, new=AsyncMock(side_effect=FileNotFoundError("pnpm"))):
            with pytest.raises(ToolNotInstalledError) as exc_info:
                await PackageManager().install(tmp_path)
        assert exc_info.value.tool == "pnpm"
        assert any("npm install -g pnpm" in s for s in exc_info.value.suggestions)

    async def test_nonzero_exit(self, tmp_path: Path):
        mock_run = AsyncMock(side_effect=[(0, "8.15.1", ""), (1, "", "")])
        with patch(RUN_COMMAND, new=mock_run):
            with pytest.raises(DependencyInstallError) as exc_info:
                await PackageManager().install(tmp_path)
        assert exc_info.value.returncode == 1

    async def test_spawn_failure(self, tmp_path: Path):
        cause = PermissionError("not executable")
        mock_run = AsyncMock(side_effect=[(0, "8.15.1", ""), cause])
        with patch(RUN_COMMAND, new=mock_run):
            with pytest.raises(DependencyInstallError) as exc_info:
                await PackageManager().install(tmp_path)
        assert exc_info.value.cause is cause
        assert exc_info.value.returncode is None


class TestInstructions:
    def test_pnpm(self):
        text = PackageManager().install_instructions()
        assert "npm install -g pnpm" in text
        assert "https://pnpm.io/installation" in text

    def test_unknown_tool(self):
        assert "bun" in PackageManager("bun").install_instructions()
