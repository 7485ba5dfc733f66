"""Tests for copy sinks."""

import pyperclip

from colorconverter.sinks import ClipboardSink, MemorySink


def test_memory_sink_records_copies():
    sink = MemorySink()
    assert sink.last is None
    assert sink.copy("#151F29") is True
    assert sink.copy("rgb(1, 2, 3)") is True
    assert sink.copied == ["#151F29", "rgb(1, 2, 3)"]
    assert sink.last == "rgb(1, 2, 3)"


def test_clipboard_sink_copies(monkeypatch):
    copied = []
    monkeypatch.setattr(pyperclip, "copy", copied.append)

    assert ClipboardSink().copy("#151F29") is True
    assert copied == ["#151F29"]


def test_clipboard_sink_reports_failure(monkeypatch):
    def unavailable(text):
        raise pyperclip.PyperclipException("no clipboard mechanism")

    monkeypatch.setattr(pyperclip, "copy", unavailable)

    assert ClipboardSink().copy("#151F29") is False
