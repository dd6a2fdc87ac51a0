"""Tests for rotation use cases."""
import threading
from unittest.mock import patch

import pytest

from batch_rotate.application.commands.start_rotation_command import StartRotationCommand
from batch_rotate.application.use_cases.rotation_use_cases import (
    build_rotation_job,
    execute_rotation_job,
    start_rotation_job,
)
from batch_rotate.domain.entities.rotation_job import RotationJob, RotationOutcome
from batch_rotate.domain.exceptions import RotationValidationError
from batch_rotate.domain.value_objects.cancellation_token import CancellationToken

WAIT = 10


def _command(input_folder, output_folder, **overrides) -> StartRotationCommand:
    values = dict(
        files=(str(input_folder / "a.jpg"), str(input_folder / "b.png")),
        output_folder=str(output_folder),
        angle=90,
        suffix="",
        overwrite=True,
    )
    values.update(overrides)
    return StartRotationCommand(**values)


@pytest.mark.unit
class TestBuildRotationJob:
    """Tests for build_rotation_job."""

    def test_valid_command(self, input_folder, output_folder):
        job = build_rotation_job(_command(input_folder, output_folder, angle=-90, suffix="  _x{angle}  "))
        assert job.angle == 270
        assert job.suffix == "_x{angle}"
        assert job.total == 2

    def test_angle_not_multiple_of_90(self, input_folder, output_folder):
        with pytest.raises(RotationValidationError):
            build_rotation_job(_command(input_folder, output_folder, angle=45))

    def test_suffix_with_illegal_characters(self, input_folder, output_folder):
        with pytest.raises(RotationValidationError):
            build_rotation_job(_command(input_folder, output_folder, suffix="a/b"))

    def test_missing_output_folder(self, input_folder):
        with pytest.raises(RotationValidationError):
            build_rotation_job(_command(input_folder, "", files=()))


@pytest.mark.unit
class TestExecuteRotationJob:
    """Tests for execute_rotation_job outcome mapping."""

    def test_success(self, input_folder, output_folder, progress_sink):
        events, sink = progress_sink
        job = RotationJob.create([input_folder / "a.jpg", input_folder / "b.png"], str(output_folder), 90)

        result = execute_rotation_job(job, sink)

        assert result.outcome == RotationOutcome.SUCCESS
        assert (result.processed, result.total) == (2, 2)
        assert [(e.processed, e.total) for e in events] == [(1, 2), (2, 2)]

    def test_cancelled_is_not_a_failure(self, input_folder, output_folder):
        token = CancellationToken()
        job = RotationJob.create([input_folder / "a.jpg", input_folder / "b.png"], str(output_folder), 90, "", True)

        result = execute_rotation_job(job, lambda event: token.cancel(), token)

        assert result.outcome == RotationOutcome.CANCELLED
        assert result.processed == 1
        assert result.error is None
        assert not (output_folder / "b_r90.png").exists()

    def test_failure_carries_cause(self, input_folder, output_folder, progress_sink):
        events, sink = progress_sink
        (input_folder / "a.jpg").write_bytes(b"corrupt")
        job = RotationJob.create([input_folder / "a.jpg", input_folder / "b.png"], str(output_folder), 90, "", True)

        result = execute_rotation_job(job, sink)

        assert result.outcome == RotationOutcome.FAIL
        assert isinstance(result.error, OSError)
        assert result.processed == 0
        assert events == []
        assert not (output_folder / "b_r90.png").exists()


@pytest.mark.integration
class TestStartRotationJob:
    """Tests for start_rotation_job running on the worker thread."""

    def test_success_end_to_end(self, input_folder, output_folder):
        handle = start_rotation_job(_command(input_folder, output_folder))

        events = list(handle.progress)
        result = handle.result(timeout=WAIT)

        assert result.outcome == RotationOutcome.SUCCESS
        assert [(e.processed, e.total) for e in events] == [(1, 2), (2, 2)]
        assert [e.source_path for e in events] == list(handle.job.files)
        assert (output_folder / "a_r90.jpg").exists()
        assert (output_folder / "b_r90.png").exists()
        assert handle.progress.is_closed

    def test_runs_on_a_different_thread(self, input_folder, output_folder):
        seen = []
        handle = start_rotation_job(
            _command(input_folder, output_folder),
            progress_listener=lambda event: seen.append(threading.current_thread()),
        )
        handle.result(timeout=WAIT)
        assert seen and all(t is not threading.current_thread() for t in seen)

    def test_cancel_after_first_event(self, input_folder, output_folder):
        token = CancellationToken()
        handle = start_rotation_job(
            _command(input_folder, output_folder),
            progress_listener=lambda event: token.cancel(),
            cancellation_token=token,
        )

        result = handle.result(timeout=WAIT)
        events = list(handle.progress)

        assert result.outcome == RotationOutcome.CANCELLED
        assert len(events) == 1
        assert not (output_folder / "b_r90.png").exists()

    def test_cancel_through_handle_before_work(self, input_folder, output_folder):
        token = CancellationToken()
        token.cancel()
        handle = start_rotation_job(_command(input_folder, output_folder), cancellation_token=token)

        assert handle.result(timeout=WAIT).outcome == RotationOutcome.CANCELLED
        assert handle.progress.drain() == []
        assert handle.cancellation_token is token

    def test_failure_outcome(self, input_folder, output_folder):
        (input_folder / "a.jpg").write_bytes(b"corrupt")
        completed = []
        handle = start_rotation_job(_command(input_folder, output_folder), on_complete=completed.append)

        result = handle.result(timeout=WAIT)

        assert result.outcome == RotationOutcome.FAIL
        assert result.error_message
        assert list(handle.progress) == []
        assert completed == [result]
        assert not (output_folder / "b_r90.png").exists()

    def test_empty_job_succeeds_without_output_folder(self, output_folder):
        handle = start_rotation_job(StartRotationCommand(files=(), output_folder=str(output_folder), angle=90))
        result = handle.result(timeout=WAIT)
        assert result.outcome == RotationOutcome.SUCCESS
        assert result.total == 0
        assert not output_folder.exists()

    def test_validation_happens_before_worker(self, input_folder, output_folder):
        with patch("batch_rotate.application.use_cases.rotation_use_cases.run_in_worker") as mock_worker:
            with pytest.raises(RotationValidationError):
                start_rotation_job(_command(input_folder, output_folder, angle=100))
        mock_worker.assert_not_called()

    def test_failing_completion_handler_does_not_break_result(self, input_folder, output_folder):
        def _boom(result):
            raise RuntimeError("handler broke")

        handle = start_rotation_job(_command(input_folder, output_folder), on_complete=_boom)
        assert handle.result(timeout=WAIT).outcome == RotationOutcome.SUCCESS
