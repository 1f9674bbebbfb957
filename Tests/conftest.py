import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import cv2
import numpy as np
import pytest
from PySide6.QtCore import QSettings
from PySide6.QtWidgets import QApplication

from performancelogger import PerfLogger
from settings import app_settings

RED = (0, 0, 255)
BLUE = (255, 0, 0)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


def make_frame():
    """2x2 BGR frame: red, blue / white, black."""
    return np.array([[RED, BLUE], [WHITE, BLACK]], dtype=np.uint8)


class FakeCapture:
    def __init__(self, frames=(), repeat=None, opened=True):
        self.frames = list(frames)
        self.repeat = repeat
        self.opened = opened
        self.released = False

    def isOpened(self):
        return self.opened

    def read(self):
        if self.frames:
            return True, self.frames.pop(0)
        if self.repeat is not None:
            return True, self.repeat.copy()
        return False, None

    def release(self):
        self.released = True


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path):
    QSettings.setPath(QSettings.IniFormat, QSettings.UserScope, str(tmp_path / "config"))
    settings = app_settings()
    settings.clear()
    settings.setValue("logging/dir", str(tmp_path / "logs"))
    settings.setValue("snapshots/dir", str(tmp_path / "snapshots"))
    settings.sync()
    PerfLogger.configure(tmp_path / "logs")
    yield tmp_path


@pytest.fixture
def fake_camera(monkeypatch):
    """Replace cv2.VideoCapture; call with FakeCapture kwargs, returns the fake."""
    opened = []

    def install(**kwargs):
        cam = FakeCapture(**kwargs)

        def factory(cam_no):
            opened.append(cam_no)
            return cam

        monkeypatch.setattr(cv2, "VideoCapture", factory)
        cam.opened_ids = opened
        return cam

    return install


@pytest.fixture
def frame():
    return make_frame()
