from datetime import datetime, timedelta
from pathlib import Path

from batch_transcoder.config.common import (
    OUTCOME_PROCESSED,
    OUTCOME_SKIPPED_ALREADY_CLAIMED,
    OUTCOME_TRANSCODE_FAILED,
    SUMMARY_FOOTER,
    SUMMARY_HEADER,
)
from batch_transcoder.domain.run_summary import RunSummary
from batch_transcoder.services.logging_service import ErrorLog, RunReporter


def make_summary():
    started = datetime(2024, 5, 1, 22, 0, 0)
    summary = RunSummary(started_at=started)
    summary.record(Path("/rec/A.ts"), OUTCOME_PROCESSED)
    summary.record(Path("/rec/B.ts"), OUTCOME_SKIPPED_ALREADY_CLAIMED)
    summary.record(Path("/rec/C.ts"), OUTCOME_TRANSCODE_FAILED, detail="no output")
    summary.ended_at = started + timedelta(hours=1, minutes=2, seconds=3)
    return summary


def test_render_frames_entries_in_order_with_timestamps():
    lines = RunReporter.render(make_summary())

    assert lines[0] == SUMMARY_HEADER
    assert lines[-1] == SUMMARY_FOOTER
    assert lines[1] == "Started:  2024-05-01 22:00:00"
    body = lines[2:5]
    assert body[0].startswith(OUTCOME_PROCESSED) and body[0].endswith("A.ts")
    assert body[1].startswith(OUTCOME_SKIPPED_ALREADY_CLAIMED) and body[1].endswith("B.ts")
    assert body[2].startswith(OUTCOME_TRANSCODE_FAILED) and body[2].endswith("C.ts (no output)")
    assert "Ended:    2024-05-01 23:02:03" in lines
    assert "Elapsed:  01:02:03" in lines


def test_render_counts_outcomes():
    lines = RunReporter.render(make_summary())

    totals = next(line for line in lines if line.startswith("Totals:"))
    assert "Processed=1" in totals
    assert "SkippedAlreadyClaimed=1" in totals
    assert "TranscodeFailed=1" in totals


def test_render_empty_run():
    summary = RunSummary().finish()

    lines = RunReporter.render(summary)

    assert "No candidates found." in lines
    assert not any(line.startswith("Totals:") for line in lines)


def test_render_marks_interrupted_runs():
    summary = make_summary()
    summary.interrupted = True

    assert any("interrupted" in line for line in RunReporter.render(summary))


def test_report_sends_every_line_to_emit():
    emitted = []

    RunReporter(emit=emitted.append).report(make_summary())

    assert emitted == RunReporter.render(make_summary())


def test_report_defaults_to_the_logger(log_messages):
    RunReporter().report(make_summary())

    assert SUMMARY_HEADER in log_messages
    assert SUMMARY_FOOTER in log_messages


def test_error_log_appends_entries(tmp_path):
    error_log = ErrorLog(tmp_path / "markers")

    error_log.write("TranscodeFailed: /rec/A.ts", "Error: no output")
    error_log.write("ArchiveFailed: /rec/B.ts")

    text = (tmp_path / "markers" / "error.txt").read_text(encoding="utf-8")
    assert text == (
        "TranscodeFailed: /rec/A.ts\nError: no output\n" + "=" * 50 + "\n"
        "ArchiveFailed: /rec/B.ts\n" + "=" * 50 + "\n"
    )


def test_error_log_ignores_empty_writes(tmp_path):
    error_log = ErrorLog(tmp_path)

    error_log.write()

    assert not error_log.log_file_path.exists()


def test_error_log_falls_back_to_logger_when_file_is_unwritable(tmp_path, log_messages):
    error_log = ErrorLog(tmp_path)
    error_log.log_file_path.mkdir()

    error_log.write("Failed: /rec/A.ts", "Error: boom")

    (message,) = [m for m in log_messages if m.startswith("Cannot append to")]
    assert "Failed: /rec/A.ts\nError: boom\n" + "=" * 50 in message
