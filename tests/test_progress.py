"""Unit tests for the step-by-step ProgressReporter."""

from __future__ import annotations

import pytest

from sol_anchor_gen.progress import ProgressReporter, StepStatus

pytestmark = pytest.mark.unit


class TestStepLifecycle:
    def test_start_and_complete(self, progress: ProgressReporter, record_console):
        progress.start_step("Creating package.json...")
        assert progress.current_step is not None
        assert progress.current_step.status is StepStatus.IN_PROGRESS

        progress.complete_step("Created package.json")
        assert progress.current_step is None
        assert progress.steps[0].status is StepStatus.COMPLETE
        assert "✓ Created package.json" in record_console.export_text()

    def test_complete_defaults_to_step_label(self, progress, record_console):
        progress.start_step("Linking")
        progress.complete_step()
        assert "✓ Linking" in record_console.export_text()

    def test_fail(self, progress, record_console):
        progress.start_step("Installing dependencies with pnpm...")
        progress.fail_step("Installing dependencies with pnpm failed")
        assert progress.steps[0].status is StepStatus.ERROR
        assert "✗ Installing dependencies with pnpm failed" in record_console.export_text()

    def test_starting_a_step_completes_the_open_one(self, progress):
        progress.start_step("first")
        progress.start_step("second")
        assert [s.status for s in progress.steps] == [StepStatus.COMPLETE, StepStatus.IN_PROGRESS]
        assert progress.current_step.label == "second"

    def test_complete_and_fail_without_open_step_are_noops(self, progress, record_console):
        progress.complete_step("nothing")
        progress.fail_step("nothing")
        assert progress.steps == []
        assert record_console.export_text() == ""

    def test_second_finish_is_noop(self, progress, record_console):
        progress.start_step("once")
        progress.complete_step()
        progress.fail_step("late failure")
        assert progress.steps[0].status is StepStatus.COMPLETE
        assert "late failure" not in record_console.export_text()


class TestMessages:
    def test_info_and_warning(self, progress, record_console):
        progress.info("Using template vault")
        progress.warning("Option [x] ignored")
        output = record_console.export_text()
        assert "ℹ Using template vault" in output
        assert "⚠ Option [x] ignored" in output

    def test_display_summary(self, progress, record_console):
        progress.display_summary("my-vault", ["cd my-vault", "anchor build", "anchor test"])
        output = record_console.export_text()
        assert '✓ Success! Project "my-vault" has been created!' in output
        assert "Next steps:" in output
        assert "1. cd my-vault" in output
        assert "3. anchor test" in output

    def test_display_error_summary(self, progress, record_console):
        progress.display_error_summary("pnpm is not installed", ["Install pnpm: npm install -g pnpm"])
        output = record_console.export_text()
        assert "✗ Error: pnpm is not installed" in output
        assert "Suggestions:" in output
        assert "• Install pnpm: npm install -g pnpm" in output

    def test_display_error_summary_without_suggestions(self, progress, record_console):
        progress.display_error_summary("boom")
        assert "Suggestions:" not in record_console.export_text()
