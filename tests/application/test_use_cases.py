from __future__ import annotations

from lib_log_syslog.application.diagnostics import build_diagnostic_emitter
from lib_log_syslog.application.use_cases.shutdown import create_shutdown
from tests.os_markers import OS_AGNOSTIC

pytestmark = [OS_AGNOSTIC]


class _Recorder:
    def __init__(self) -> None:
        self.calls: list[str] = []


class _FakeSink:
    def __init__(self, recorder: _Recorder) -> None:
        self.recorder = recorder

    def accept(self, event) -> None:
        self.recorder.calls.append("accept")

    def emit_batch(self, events) -> None:
        self.recorder.calls.append("emit_batch")

    def flush(self) -> None:
        self.recorder.calls.append("flush")

    def shutdown(self) -> None:
        self.recorder.calls.append("shutdown")


def test_shutdown_detaches_producers_before_closing_sink() -> None:
    recorder = _Recorder()
    shutdown = create_shutdown(
        sink=_FakeSink(recorder),
        detach=[lambda: recorder.calls.append("detach-handler"), lambda: recorder.calls.append("close-handler")],
    )

    shutdown()

    assert recorder.calls == ["detach-handler", "close-handler", "shutdown"]


def test_shutdown_without_sink_only_detaches() -> None:
    recorder = _Recorder()
    create_shutdown(sink=None, detach=[lambda: recorder.calls.append("detach")])()
    assert recorder.calls == ["detach"]


def test_diagnostic_emitter_swallows_hook_failures(caplog) -> None:
    def broken(name: str, payload: dict) -> None:
        raise RuntimeError("hook exploded")

    emit = build_diagnostic_emitter(broken)
    emit("syslog_flush", {"events": 1})

    assert "Diagnostic hook raised while reporting syslog_flush" in caplog.text
