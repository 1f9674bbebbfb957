import threading

import cv2
from PySide6.QtCore import QThread, Signal

from enumerations import OutputMode
from frame_processing import process_frame
from performancelogger import PerfLogger

DEFAULT_FPS = 30


class CaptureThread(QThread):
    """
    Reads frames from one camera, thresholds them with the current bounds
    and emits the raw and processed frame until stop() is called or the
    camera stops delivering frames.
    """
    frame_processed = Signal(object, object)
    status_message = Signal(str)

    def __init__(self, cam_no, hsv_range, fps=DEFAULT_FPS, output_mode=OutputMode.COLORED_ROI):
        super().__init__()
        self._cam_no = cam_no
        self._hsv_range = hsv_range
        self._fps = max(1, int(fps))
        self._output_mode = output_mode
        self._permit = threading.Event()
        self._permit.set()
        self._log = PerfLogger.get()
        self._tag = f"capture/{cam_no}"


    @property
    def cam_no(self):
        return self._cam_no


    def set_output_mode(self, output_mode: OutputMode):
        self._output_mode = output_mode


    def stop(self):
        self._permit.clear()


    def run(self):
        cam = cv2.VideoCapture(self._cam_no)

        try:
            if not cam.isOpened():
                self._log.warning("camera not available", tag=self._tag)
                self.status_message.emit(f"Cannot open camera with ID: {self._cam_no}")
                return

            self._log.start_timer(self._tag, message="capture started", fps=self._fps)
            self.status_message.emit("Capturing...")

            sleep_ms = 1000 // self._fps
            frames = 0

            while self._permit.is_set():
                ok, frame = cam.read()

                if not ok or frame is None or frame.size == 0:
                    self._log.warning("empty frame", tag=self._tag, frames=frames)
                    self.status_message.emit("Camera disconnected (empty frame error)")
                    break

                lower, upper = self._hsv_range.bounds()
                processed = process_frame(frame, lower, upper, self._output_mode)
                self.frame_processed.emit(frame, processed)

                frames += 1
                self._log.count_frame(self._tag)
                self.msleep(sleep_ms)

            self._log.stop_timer(self._tag, message="capture stopped", frames=frames)
        finally:
            cam.release()
