"""Unit tests for the Jinja2 TemplateRenderer."""

from __future__ import annotations

from pathlib import Path

import pytest
from jinja2 import TemplateNotFound, UndefinedError

from sol_anchor_gen.rendering import TemplateRenderer

pytestmark = pytest.mark.unit

PATTERNS = ("nft-minting", "staking", "escrow", "governance", "marketplace", "vault")
PATTERN_ASSETS = ("lib.rs.j2", "test.ts.j2", "sdk.ts.j2", "README.md.j2")
SHARED_ASSETS = ("Anchor.toml.j2", "Cargo.toml.j2", "README.md.j2", "tsconfig.json.j2")


@pytest.fixture
def custom_renderer(tmp_path: Path) -> TemplateRenderer:
    return TemplateRenderer(tmp_path)


def _write(root: Path, name: str, body: str) -> None:
    (root / name).write_text(body, encoding="utf-8")


class TestRender:
    def test_substitutes_variables(self, custom_renderer, tmp_path: Path):
        _write(tmp_path, "hello.txt.j2", "Hello {{ name }}!\n")
        assert custom_renderer.render("hello.txt.j2", {"name": "Anchor"}) == "Hello Anchor!\n"

    def test_no_html_escaping(self, custom_renderer, tmp_path: Path):
        _write(tmp_path, "code.j2", "{{ code }}")
        code = "Result<Vec<u8>> && 'x'"
        assert custom_renderer.render("code.j2", {"code": code}) == code

    def test_undefined_variable_raises(self, custom_renderer, tmp_path: Path):
        _write(tmp_path, "broken.j2", "{{ missing }}")
        with pytest.raises(UndefinedError):
            custom_renderer.render("broken.j2", {})

    def test_missing_template(self, custom_renderer):
        with pytest.raises(TemplateNotFound):
            custom_renderer.render("nope.j2", {})

    @pytest.mark.parametrize(
        "value, expected",
        [("my-dapp", "MyDapp"), ("dao_v2", "DaoV2"), ("myDapp", "MyDapp"), ("x", "X")],
    )
    def test_pascal_case_filter(self, custom_renderer, tmp_path: Path, value, expected):
        _write(tmp_path, "name.j2", "{{ value | pascal_case }}")
        assert custom_renderer.render("name.j2", {"value": value}) == expected


class TestBundledAssets:
    def test_shared_assets(self, renderer):
        for name in SHARED_ASSETS:
            assert (renderer.template_dir / "shared" / name).is_file()

    @pytest.mark.parametrize("pattern", PATTERNS)
    def test_every_pattern_ships_its_assets(self, renderer, pattern):
        for name in PATTERN_ASSETS:
            assert (renderer.template_dir / pattern / name).is_file()
