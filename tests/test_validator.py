"""Unit tests for project name and template id validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from sol_anchor_gen.errors import InvalidProjectNameError, TemplateNotFoundError
from sol_anchor_gen.validator import (
    MAX_PROJECT_NAME_LENGTH,
    resolve_template,
    validate_project_name,
)

pytestmark = pytest.mark.unit


class TestValidateProjectName:
    @pytest.mark.parametrize("name", ["my-vault", "dao_v2", "Staking", "a", "x" * MAX_PROJECT_NAME_LENGTH])
    def test_valid(self, name: str, tmp_path: Path):
        assert validate_project_name(name, tmp_path) == name

    @pytest.mark.parametrize(
        "name, reason",
        [
            ("", "Project name cannot be empty"),
            ("   ", "Project name cannot be empty"),
            ("my project", "can only contain letters, numbers, hyphens, and underscores"),
            ("my.project", "can only contain letters, numbers, hyphens, and underscores"),
            ("../escape", "can only contain letters, numbers, hyphens, and underscores"),
            ("café", "can only contain letters, numbers, hyphens, and underscores"),
            ("1project", "Project name must start with a letter"),
            ("-project", "Project name must start with a letter"),
            ("_project", "Project name must start with a letter"),
            ("x" * (MAX_PROJECT_NAME_LENGTH + 1), "Project name must be 50 characters or less"),
            ("test", 'Project name "test" is reserved and cannot be used'),
            ("node_modules", 'Project name "node_modules" is reserved and cannot be used'),
            ("Build", 'Project name "Build" is reserved and cannot be used'),
        ],
    )
    def test_invalid(self, name: str, reason: str, tmp_path: Path):
        with pytest.raises(InvalidProjectNameError) as exc_info:
            validate_project_name(name, tmp_path)
        assert reason in exc_info.value.message
        assert exc_info.value.suggestions

    def test_existing_directory(self, tmp_path: Path):
        (tmp_path / "taken").mkdir()
        with pytest.raises(InvalidProjectNameError) as exc_info:
            validate_project_name("taken", tmp_path)
        assert exc_info.value.message == 'Directory "taken" already exists in the current location'

    def test_existing_file(self, tmp_path: Path):
        (tmp_path / "taken").write_text("", encoding="utf-8")
        with pytest.raises(InvalidProjectNameError):
            validate_project_name("taken", tmp_path)

    def test_defaults_to_cwd(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "here").mkdir()
        with pytest.raises(InvalidProjectNameError):
            validate_project_name("here")
        assert validate_project_name("elsewhere") == "elsewhere"


class TestResolveTemplate:
    def test_known(self, registry):
        assert resolve_template("vault", registry).id == "vault"
        assert resolve_template(" vault ", registry).id == "vault"

    @pytest.mark.parametrize("template_id", ["unknown", "", "VAULT"])
    def test_unknown_lists_every_id(self, template_id: str, registry):
        with pytest.raises(TemplateNotFoundError) as exc_info:
            resolve_template(template_id, registry)
        assert exc_info.value.available == registry.ids()
        for known in registry.ids():
            assert known in exc_info.value.message
