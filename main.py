import re
import sys

from PySide6 import QtWidgets
from PySide6.QtCore import Qt
from PySide6.QtGui import QPixmap

from capture_thread import CaptureThread, DEFAULT_FPS
from dialogs import Dialogs
from enumerations import Bound, Channel, OutputMode
from frame_processing import to_qimage
from hsv_range import HsvRange
from mainWindow import Ui_MainWindow
from performancelogger import PerfLogger
from settings import (DEFAULT_CAM_NO, DEFAULT_LOG_DIR, DEFAULT_SNAPSHOT_DIR,
                      SettingsDialog, app_settings)
from snapshot_thread import SnapshotThread

RANGE_WIDGET = re.compile(r"(?:spinBox|horizontalSlider)_(H|S|V)_(low|high)$")


# ----- Main class -----
class MainWindow(QtWidgets.QMainWindow):

    def __init__(self):
        super().__init__()

        self._hsv_range = HsvRange()
        self._capture_thread = None
        self._snapshot_thread = None
        self._last_frames = None
        self._cam_no = DEFAULT_CAM_NO
        self._binary_output = False

        self.ui = Ui_MainWindow()
        self.ui.setupUi(self)

        self.LoadSettings()
        self._log = PerfLogger.configure(self._log_dir, also_console=self._log_console)
        self._log.log("application started", cam_no=self._cam_no, fps=self._fps)

        self.ui.spinBoxCamNo.setValue(self._cam_no)
        self.ui.checkBoxBinaryOut.setChecked(self._binary_output)
        self.SyncRangeWidgets()

        # Stop is only available while capturing
        self.ui.buttonStopCapture.setEnabled(False)
        self.ui.statusbar.showMessage("Welcome to HSV Range Finder for USB Camera!")


# Settings
    def LoadSettings(self):
        settings = app_settings()

        self._cam_no = settings.value("camera/number", DEFAULT_CAM_NO, type=int)
        self._binary_output = settings.value("output/binary", False, type=bool)
        self._log_dir = settings.value("logging/dir", DEFAULT_LOG_DIR, type=str)
        self.ReloadSettings()

        if self._remember_range:
            defaults = self._hsv_range.to_dict()
            self._hsv_range.from_dict({k: settings.value(f"range/{k}", v, type=int) for k, v in defaults.items()})


    def ReloadSettings(self):
        settings = app_settings()

        self._fps = settings.value("capture/fps", DEFAULT_FPS, type=int)
        self._snapshot_dir = settings.value("snapshots/dir", DEFAULT_SNAPSHOT_DIR, type=str)
        self._remember_range = settings.value("range/remember", True, type=bool)

        log_console = settings.value("logging/console", False, type=bool)
        if hasattr(self, "_log") and log_console != self._log_console:
            self._log = PerfLogger.configure(self._log_dir, also_console=log_console)
        self._log_console = log_console


    def SaveSettings(self):
        settings = app_settings()
        settings.setValue("camera/number", self._cam_no)
        settings.setValue("output/binary", self._binary_output)

        if self._remember_range:
            for key, value in self._hsv_range.to_dict().items():
                settings.setValue(f"range/{key}", value)

        settings.sync()


    def SettingsHandler(self, checked=False):
        dlg = SettingsDialog(self)
        dlg.settings_changed.connect(self.ReloadSettings)
        dlg.exec()


# Camera selection
    def CamNoChanged(self, value):
        if self._capture_thread is None:
            self._cam_no = value
        else:
            # camera is locked while capturing
            blocked = self.ui.spinBoxCamNo.blockSignals(True)
            self.ui.spinBoxCamNo.setValue(self._cam_no)
            self.ui.spinBoxCamNo.blockSignals(blocked)


# Capture controls
    def StartCapture(self, checked=False):
        if self._capture_thread is not None:
            return

        self.ui.spinBoxCamNo.setEnabled(False)
        self.ui.buttonStartCapture.setEnabled(False)
        self.ui.buttonStopCapture.setEnabled(True)

        t = CaptureThread(self._cam_no, self._hsv_range, self._fps, self._output_mode())
        t.setParent(self)
        t.frame_processed.connect(self.ShowFrames)
        t.status_message.connect(self.ShowStatus)
        t.finished.connect(self.CaptureFinished)
        self._capture_thread = t
        t.start()


    def StopCapture(self, checked=False):
        t = self._capture_thread
        self._capture_thread = None

        if t is not None:
            t.stop()
            t.wait()
            t.deleteLater()

        self._set_idle_controls()
        self.ui.statusbar.showMessage("No capture")


    def CaptureFinished(self):
        t = self.sender()
        if t is None or t is not self._capture_thread:
            return

        # the thread gave up on its own, its message stays in the status bar
        self._capture_thread = None
        t.deleteLater()
        self._set_idle_controls()


    def _set_idle_controls(self):
        self.ui.buttonStopCapture.setEnabled(False)
        self.ui.buttonStartCapture.setEnabled(True)
        self.ui.spinBoxCamNo.setEnabled(True)

        self._last_frames = None
        self.ui.label_raw_frame.clear()
        self.ui.label_proc_frame.clear()


    def ShowStatus(self, message):
        if self.sender() is not self._capture_thread:
            return
        self.ui.statusbar.showMessage(message)


    def ShowFrames(self, raw, processed):
        # frames queued by a thread that has since been stopped are dropped
        if self.sender() is not self._capture_thread:
            return

        self._last_frames = (raw, processed)
        self._show_frame(self.ui.label_raw_frame, raw)
        self._show_frame(self.ui.label_proc_frame, processed)


    def _show_frame(self, label, frame):
        pixmap = QPixmap.fromImage(to_qimage(frame))
        label.setPixmap(pixmap.scaled(label.size(), Qt.KeepAspectRatio, Qt.SmoothTransformation))


    def BinaryOutputToggled(self, checked):
        self._binary_output = checked
        if self._capture_thread is not None:
            self._capture_thread.set_output_mode(self._output_mode())


    def _output_mode(self):
        return OutputMode.BINARY_MASK if self._binary_output else OutputMode.COLORED_ROI


# HSV sliders & inputs
    def RangeSliderChanged(self, position):
        self._set_range_value(self.sender(), position)


    def RangeSpinChanged(self, value):
        self._set_range_value(self.sender(), value)


    def _set_range_value(self, widget, value):
        m = RANGE_WIDGET.match(widget.objectName()) if widget is not None else None
        if not m:
            return

        channel, bound = Channel[m.group(1)], Bound(m.group(2))
        stored = self._hsv_range.set(channel, bound, value)
        self._show_range_value(channel, bound, stored)
        self.UpdateRangeLabel()


    def _show_range_value(self, channel, bound, value):
        for prefix in ("spinBox", "horizontalSlider"):
            widget = getattr(self.ui, f"{prefix}_{channel.name}_{bound.value}")
            if widget.value() != value:
                blocked = widget.blockSignals(True)
                widget.setValue(value)
                widget.blockSignals(blocked)


    def SyncRangeWidgets(self):
        for channel in Channel:
            for bound in Bound:
                self._show_range_value(channel, bound, self._hsv_range.get(channel, bound))
        self.UpdateRangeLabel()


    def UpdateRangeLabel(self):
        self.ui.labelRange.setText(self._hsv_range.describe())


    def ResetRangeHandler(self, checked=False):
        if Dialogs.ask_confirmation(self, "reset the HSV range"):
            self.ResetRange()


    def ResetRange(self):
        self._hsv_range.reset()
        self.SyncRangeWidgets()
        self._log.log("range reset")


    def CopyRangeHandler(self, checked=False):
        text = self._hsv_range.describe()
        QtWidgets.QApplication.clipboard().setText(text)
        self.ui.statusbar.showMessage(f"Copied to clipboard: {text}", 5000)


# Snapshots
    def SaveSnapshotHandler(self, checked=False):
        if self._last_frames is None:
            self.ui.statusbar.showMessage("No frame to save, start the capture first", 5000)
            return

        if self._snapshot_thread is not None:
            if self._snapshot_thread.isRunning():
                return
            self._snapshot_thread.deleteLater()

        raw, processed = self._last_frames
        lower, upper = self._hsv_range.bounds()

        t = SnapshotThread(self._snapshot_dir, raw.copy(), processed.copy(), lower, upper)
        t.setParent(self)
        t.saved.connect(self.SnapshotSaved)
        t.failed.connect(self.SnapshotFailed)
        self._snapshot_thread = t
        t.start()


    def SnapshotSaved(self, paths):
        self.ui.statusbar.showMessage(f"Snapshot saved: {', '.join(paths)}", 5000)


    def SnapshotFailed(self, message):
        self._log.error(message, tag="snapshot")
        Dialogs.display_error_message(self, message)


    def closeEvent(self, event):
        if self._capture_thread is not None:
            self.StopCapture()

        if self._snapshot_thread is not None:
            self._snapshot_thread.wait()

        self.SaveSettings()
        self._log.log("application closed")
        super().closeEvent(event)


def run():
    app = QtWidgets.QApplication(sys.argv)
    window = MainWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    run()
