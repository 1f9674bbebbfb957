from pathlib import Path

from PySide6 import QtWidgets
from PySide6.QtCore import QSettings, Signal
from PySide6.QtWidgets import QFileDialog

from capture_thread import DEFAULT_FPS
from settingsWindow import Ui_DialogSettings

ORGANIZATION = "HsvRangeFinder"
APPLICATION = "HsvRangeFinder"

DEFAULT_CAM_NO = 1
DEFAULT_SNAPSHOT_DIR = str(Path.cwd() / "Snapshots")
DEFAULT_LOG_DIR = str(Path.cwd() / "logs")


def app_settings() -> QSettings:
    return QSettings(QSettings.IniFormat, QSettings.UserScope, ORGANIZATION, APPLICATION)


class SettingsDialog(QtWidgets.QDialog):
    settings_changed = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)

        self.ui = Ui_DialogSettings()
        self.ui.setupUi(self)

        settings = app_settings()

        self.ui.spinBoxFps.setValue(settings.value("capture/fps", DEFAULT_FPS, type=int))
        self.ui.lineEditSnapshotDir.setText(settings.value("snapshots/dir", DEFAULT_SNAPSHOT_DIR, type=str))
        self.ui.checkBoxRememberRange.setChecked(settings.value("range/remember", True, type=bool))
        self.ui.checkBoxLogConsole.setChecked(settings.value("logging/console", False, type=bool))

        self.ui.buttonBox.accepted.connect(self.accept)
        self.ui.buttonBox.rejected.connect(self.reject)


    def accept(self):
        settings = app_settings()
        settings.setValue("capture/fps", self.ui.spinBoxFps.value())
        settings.setValue("snapshots/dir", self.ui.lineEditSnapshotDir.text().strip() or DEFAULT_SNAPSHOT_DIR)
        settings.setValue("range/remember", self.ui.checkBoxRememberRange.isChecked())
        settings.setValue("logging/console", self.ui.checkBoxLogConsole.isChecked())
        settings.sync()
        self.settings_changed.emit()
        super().accept()


    def browse_snapshot_dir(self):
        folder = QFileDialog.getExistingDirectory(self, "Snapshot folder", self.ui.lineEditSnapshotDir.text())
        if folder:
            self.ui.lineEditSnapshotDir.setText(folder)
