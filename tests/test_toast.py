"""Tests for toast notifications."""

import os

import pytest

from timephrase.notify.toast import Notifier, ToastDuration


class FakeDisplay:
    """Records shown messages."""

    def __init__(self):
        self.shown = []

    def show(self, message, duration):
        self.shown.append((message, duration))


def test_empty_messages_are_dropped():
    """Test that None and empty messages never reach the display."""
    display = FakeDisplay()
    notifier = Notifier(display)
    assert not notifier.show_message(None)
    assert not notifier.show_message("")
    assert display.shown == []


def test_messages_forwarded_with_duration():
    """Test that messages reach the display with their duration."""
    display = FakeDisplay()
    notifier = Notifier(display)
    assert notifier.show_message("已保存")
    assert notifier.show_message("网络错误", ToastDuration.LONG)
    assert display.shown == [("已保存", ToastDuration.SHORT), ("网络错误", ToastDuration.LONG)]


def test_qt_display_reuses_label():
    """Test that the Qt display reuses one label for successive messages."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    QtWidgets = pytest.importorskip("PyQt6.QtWidgets")
    from timephrase.notify.qt_toast import QtToastDisplay

    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    display = QtToastDisplay()
    notifier = Notifier(display)

    notifier.show_message("第一条")
    label = display.label
    assert label.text() == "第一条"
    assert display.is_showing()

    notifier.show_message("第二条", ToastDuration.LONG)
    assert display.label is label
    assert label.text() == "第二条"

    display._hide()
    assert not label.isVisible()
    assert app is not None
