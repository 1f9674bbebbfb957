import time

import pytest
from PySide6.QtWidgets import QApplication

from dialogs import Dialogs
from enumerations import Channel, OutputMode
from main import MainWindow
from performancelogger import PerfLogger
from settings import SettingsDialog, app_settings


@pytest.fixture
def window(qapp):
    w = MainWindow()
    yield w
    w.close()


def _wait_until(qapp, condition, timeout=5.0):
    deadline = time.monotonic() + timeout
    while not condition() and time.monotonic() < deadline:
        qapp.processEvents()
        time.sleep(0.01)
    return condition()


def test_initial_state(window):
    ui = window.ui
    assert window.windowTitle() == "HSV Range Finder"
    assert ui.statusbar.currentMessage() == "Welcome to HSV Range Finder for USB Camera!"
    assert ui.buttonStartCapture.isEnabled()
    assert not ui.buttonStopCapture.isEnabled()
    assert ui.spinBoxCamNo.value() == 1
    assert ui.spinBox_H_high.value() == 255
    assert ui.horizontalSlider_V_low.value() == 0


def test_spin_box_moves_slider(window):
    window.ui.spinBox_S_low.setValue(40)

    assert window.ui.horizontalSlider_S_low.value() == 40
    assert window._hsv_range.lower() == (0, 40, 0)
    assert window.ui.labelRange.text() == "Lower: (0, 40, 0)  Upper: (255, 255, 255)"


def test_slider_moves_spin_box(window):
    window.ui.horizontalSlider_V_high.setValue(180)

    assert window.ui.spinBox_V_high.value() == 180
    assert window._hsv_range.upper() == (255, 255, 180)


def test_low_cannot_pass_high(window):
    ui = window.ui
    ui.spinBox_H_high.setValue(100)
    ui.spinBox_H_low.setValue(150)

    assert ui.spinBox_H_low.value() == 100
    assert ui.horizontalSlider_H_low.value() == 100
    assert window._hsv_range.lower()[Channel.H.value] == 100


def test_high_cannot_pass_low(window):
    ui = window.ui
    ui.horizontalSlider_V_low.setValue(50)
    ui.horizontalSlider_V_high.setValue(20)

    assert ui.horizontalSlider_V_high.value() == 50
    assert ui.spinBox_V_high.value() == 50


def test_reset_range(window):
    window.ui.spinBox_S_low.setValue(40)
    window.ui.spinBox_H_high.setValue(60)

    window.ResetRange()

    assert window.ui.spinBox_S_low.value() == 0
    assert window.ui.horizontalSlider_H_high.value() == 255
    assert window._hsv_range.bounds() == ((0, 0, 0), (255, 255, 255))


def test_copy_range(window):
    window.ui.spinBox_H_low.setValue(12)
    window.CopyRangeHandler()

    assert QApplication.clipboard().text() == "Lower: (12, 0, 0)  Upper: (255, 255, 255)"


def test_snapshot_needs_a_frame(window):
    window.SaveSnapshotHandler()
    assert window.ui.statusbar.currentMessage().startswith("No frame to save")


def test_start_and_stop_capture(qapp, window, fake_camera, frame):
    cam = fake_camera(repeat=frame)
    ui = window.ui

    window.StartCapture()

    assert not ui.buttonStartCapture.isEnabled()
    assert ui.buttonStopCapture.isEnabled()
    assert not ui.spinBoxCamNo.isEnabled()
    assert _wait_until(qapp, lambda: window._last_frames is not None)
    assert not ui.label_raw_frame.pixmap().isNull()
    assert not ui.label_proc_frame.pixmap().isNull()

    window.StopCapture()

    assert ui.statusbar.currentMessage() == "No capture"
    assert ui.buttonStartCapture.isEnabled()
    assert not ui.buttonStopCapture.isEnabled()
    assert ui.spinBoxCamNo.isEnabled()
    assert ui.label_raw_frame.pixmap().isNull()
    assert cam.opened_ids == [1]
    assert cam.released


def test_second_start_is_ignored(qapp, window, fake_camera, frame):
    cam = fake_camera(repeat=frame)

    window.StartCapture()
    first = window._capture_thread
    assert _wait_until(qapp, lambda: cam.opened_ids)
    window.StartCapture()

    assert window._capture_thread is first
    assert cam.opened_ids == [1]
    window.StopCapture()


def test_camera_number_locked_while_capturing(window, fake_camera, frame):
    fake_camera(repeat=frame)
    window.ui.spinBoxCamNo.setValue(2)
    window.StartCapture()

    window.ui.spinBoxCamNo.setValue(5)

    assert window.ui.spinBoxCamNo.value() == 2
    window.StopCapture()

    window.ui.spinBoxCamNo.setValue(5)
    assert window._cam_no == 5


def test_missing_camera_returns_to_idle(qapp, window, fake_camera):
    fake_camera(opened=False)
    window.StartCapture()

    assert _wait_until(qapp, lambda: window._capture_thread is None)
    assert window.ui.statusbar.currentMessage() == "Cannot open camera with ID: 1"
    assert window.ui.buttonStartCapture.isEnabled()
    assert not window.ui.buttonStopCapture.isEnabled()


def test_camera_disconnect_returns_to_idle(qapp, window, fake_camera, frame):
    fake_camera(frames=[frame])
    window.StartCapture()

    assert _wait_until(qapp, lambda: window._capture_thread is None)
    ui = window.ui
    assert ui.statusbar.currentMessage() == "Camera disconnected (empty frame error)"
    assert ui.buttonStartCapture.isEnabled()
    assert not ui.buttonStopCapture.isEnabled()
    assert ui.spinBoxCamNo.isEnabled()
    assert ui.label_raw_frame.pixmap().isNull()


def test_frames_queued_before_stop_are_dropped(qapp, window, fake_camera, frame):
    fake_camera(repeat=frame)
    window.StartCapture()
    assert _wait_until(qapp, lambda: window._last_frames is not None)

    # let the worker queue more frames without delivering them
    time.sleep(0.1)
    window.StopCapture()
    for _ in range(5):
        qapp.processEvents()

    assert window._last_frames is None
    assert window.ui.label_raw_frame.pixmap().isNull()
    assert window.ui.label_proc_frame.pixmap().isNull()
    assert window.ui.statusbar.currentMessage() == "No capture"


def test_binary_output_switches_running_capture(window, fake_camera, frame):
    fake_camera(repeat=frame)
    window.StartCapture()

    window.ui.checkBoxBinaryOut.setChecked(True)

    assert window._capture_thread._output_mode is OutputMode.BINARY_MASK
    window.StopCapture()


def test_settings_survive_restart(qapp):
    first = MainWindow()
    first.ui.spinBox_H_high.setValue(30)
    first.ui.spinBox_H_low.setValue(10)
    first.ui.spinBoxCamNo.setValue(3)
    first.ui.checkBoxBinaryOut.setChecked(True)
    first.close()

    second = MainWindow()
    try:
        assert second.ui.spinBox_H_low.value() == 10
        assert second.ui.horizontalSlider_H_high.value() == 30
        assert second.ui.spinBoxCamNo.value() == 3
        assert second.ui.checkBoxBinaryOut.isChecked()
        assert app_settings().value("range/H_low", type=int) == 10
        assert app_settings().value("range/H_high", type=int) == 30
    finally:
        second.close()


def test_range_not_saved_when_not_remembered(qapp):
    app_settings().setValue("range/remember", False)

    first = MainWindow()
    first.ui.spinBox_S_low.setValue(99)
    first.close()

    second = MainWindow()
    try:
        assert second.ui.spinBox_S_low.value() == 0
    finally:
        second.close()


def test_settings_dialog_writes_and_notifies(qapp, tmp_path):
    dlg = SettingsDialog()
    changed = []
    dlg.settings_changed.connect(lambda: changed.append(True))

    dlg.ui.spinBoxFps.setValue(15)
    dlg.ui.lineEditSnapshotDir.setText(str(tmp_path / "elsewhere"))
    dlg.ui.checkBoxRememberRange.setChecked(False)
    dlg.accept()

    settings = app_settings()
    assert changed == [True]
    assert settings.value("capture/fps", type=int) == 15
    assert settings.value("snapshots/dir", type=str) == str(tmp_path / "elsewhere")
    assert settings.value("range/remember", type=bool) is False


def test_window_picks_up_new_settings(window):
    settings = app_settings()
    settings.setValue("capture/fps", 12)
    settings.sync()

    window.ReloadSettings()

    assert window._fps == 12


def test_console_toggle_keeps_session_log(qapp, window, fake_camera, frame):
    fake_camera(repeat=frame)
    window.StartCapture()
    assert _wait_until(qapp, lambda: window._last_frames is not None)

    settings = app_settings()
    settings.setValue("logging/console", True)
    settings.sync()
    window.ReloadSettings()
    window.StopCapture()

    log_text = PerfLogger.get().log_path.read_text(encoding="utf-8")
    assert "capture stopped" in log_text


def test_snapshot_from_running_capture(qapp, window, fake_camera, frame, tmp_path):
    fake_camera(repeat=frame)
    window.StartCapture()
    assert _wait_until(qapp, lambda: window._last_frames is not None)

    window.SaveSnapshotHandler()

    assert _wait_until(qapp, lambda: window.ui.statusbar.currentMessage().startswith("Snapshot saved"))
    window.StopCapture()
    assert len(list((tmp_path / "snapshots").glob("*.png"))) == 2


def test_snapshot_failure_shows_error(qapp, window, fake_camera, frame, tmp_path, monkeypatch):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    settings = app_settings()
    settings.setValue("snapshots/dir", str(blocker))
    settings.sync()
    window.ReloadSettings()

    shown = []
    monkeypatch.setattr(Dialogs, "display_error_message", lambda parent, message: shown.append(message))

    fake_camera(repeat=frame)
    window.StartCapture()
    assert _wait_until(qapp, lambda: window._last_frames is not None)
    window.SaveSnapshotHandler()

    assert _wait_until(qapp, lambda: shown)
    window.StopCapture()
    assert str(blocker) in shown[0]
