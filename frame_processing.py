import cv2
import numpy as np
from PySide6.QtGui import QImage

from enumerations import OutputMode


def _check_frame(frame):
    if frame is None or frame.size == 0:
        raise ValueError("Empty frame")


def threshold_mask(frame_bgr, lower, upper):
    _check_frame(frame_bgr)
    hsv = cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2HSV)
    return cv2.inRange(hsv,
                       np.array(lower, dtype=np.uint8),
                       np.array(upper, dtype=np.uint8))


def colored_roi(frame_bgr, mask):
    roi = frame_bgr.copy()
    roi[mask == 0] = (0, 0, 0)
    return roi


def binary_view(mask):
    return cv2.cvtColor(mask, cv2.COLOR_GRAY2BGR)


def process_frame(frame_bgr, lower, upper, output_mode=OutputMode.COLORED_ROI):
    mask = threshold_mask(frame_bgr, lower, upper)

    if output_mode is OutputMode.BINARY_MASK:
        return binary_view(mask)
    return colored_roi(frame_bgr, mask)


def to_qimage(frame_bgr) -> QImage:
    _check_frame(frame_bgr)
    frame = np.ascontiguousarray(frame_bgr)
    h, w = frame.shape[:2]

    # copy() so the image owns its pixels once the array goes away
    return QImage(frame.data, w, h, frame.strides[0], QImage.Format_BGR888).copy()
