from pathlib import Path

import cv2
from PIL import Image
from PySide6.QtCore import QThread, Signal

from performancelogger import PerfLogger


def range_tag(lower, upper):
    return "H{}-{}_S{}-{}_V{}-{}".format(lower[0], upper[0], lower[1], upper[1], lower[2], upper[2])


class SnapshotThread(QThread):
    saved = Signal(list)
    failed = Signal(str)

    def __init__(self, imgdir, raw, processed, lower, upper):
        super().__init__()
        self._imgdir = Path(imgdir)
        self._frames = {"raw": raw, "processed": processed}
        self._tag = range_tag(lower, upper)


    def _next_paths(self):
        fileindex = 0

        while True:
            paths = {kind: self._imgdir / f"{kind}_{self._tag}_{fileindex:04d}.png" for kind in self._frames}
            if not any(p.exists() for p in paths.values()):
                return paths
            fileindex += 1


    def run(self):
        log = PerfLogger.get()

        try:
            with log.measure("snapshot", range=self._tag):
                self._imgdir.mkdir(parents=True, exist_ok=True)
                paths = self._next_paths()

                for kind, frame in self._frames.items():
                    rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
                    Image.fromarray(rgb).save(paths[kind], format="PNG")
        except OSError as e:
            self.failed.emit(f"Could not save snapshot to {self._imgdir}: {e}")
            return

        written = [str(p) for p in paths.values()]
        log.log("snapshot saved", tag="snapshot", files=",".join(written))
        self.saved.emit(written)
