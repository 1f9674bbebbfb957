from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from threading import RLock
from time import perf_counter_ns
from typing import Any, Dict, Optional

APP_NAME = "hsv_range_finder"
RESERVED_FIELDS = ("time", "elapsed_s", "local_elapsed_s", "tag", "message")


def _now_iso() -> str:
    return datetime.now().astimezone().isoformat(timespec="milliseconds")


def _ns_to_s(ns: int) -> float:
    return ns / 1_000_000_000.0


class PerfLogger:
    """
    Application log with timing helpers.
    PerfLogger.get() returns the shared instance, PerfLogger.configure()
    points it at a new log directory or console setting.

    Lines look like:
        time=... | elapsed_s=... | tag=capture/1 | message=... | fps=29.8
    """

    _instance: Optional["PerfLogger"] = None
    _inst_lock = RLock()

    @classmethod
    def get(cls) -> "PerfLogger":
        with cls._inst_lock:
            if cls._instance is None:
                cls._instance = PerfLogger()
            return cls._instance

    @classmethod
    def configure(cls, log_dir: Path | str = "logs", also_console: bool = False) -> "PerfLogger":
        # handlers are swapped in place, running timers and held references stay valid
        with cls._inst_lock:
            if cls._instance is None:
                cls._instance = PerfLogger(log_dir=log_dir, also_console=also_console)
            else:
                cls._instance.open(log_dir, also_console)
            return cls._instance

    def __init__(self,
                 log_dir: Path | str = "logs",
                 app_name: str = APP_NAME,
                 also_console: bool = False) -> None:
        self._lock = RLock()
        self._start_ns = perf_counter_ns()
        self._timers: Dict[str, int] = {}
        self._frame_windows: Dict[str, list] = {}
        self._app_name = app_name

        self._logger = logging.getLogger(f"{app_name}.{id(self)}")
        self._logger.setLevel(logging.INFO)
        self._logger.propagate = False

        self.open(log_dir, also_console)

    def open(self, log_dir: Path | str, also_console: bool = False) -> None:
        """Close the current handlers and log to a new file in `log_dir`."""
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        ts = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")

        with self._lock:
            self.close()
            self.log_path = log_dir / f"{self._app_name}_{ts}.log"

            fmt = logging.Formatter("%(levelname)s | %(message)s")
            fh = logging.FileHandler(self.log_path, encoding="utf-8")
            fh.setFormatter(fmt)
            self._logger.addHandler(fh)

            if also_console:
                ch = logging.StreamHandler()
                ch.setFormatter(fmt)
                self._logger.addHandler(ch)

        self.log("Logger initialized", console=also_console)

    def close(self) -> None:
        with self._lock:
            for handler in list(self._logger.handlers):
                handler.close()
                self._logger.removeHandler(handler)

    # ---------- Core ----------

    def _emit(self, level: int, message: str, tag: Optional[str], extra: Optional[Dict[str, Any]] = None) -> None:
        with self._lock:
            fields = [
                f"time={_now_iso()}",
                f"elapsed_s={round(_ns_to_s(perf_counter_ns() - self._start_ns), 6)}",
            ]
            start = self._timers.get(tag) if tag is not None else None
            if start is not None:
                fields.append(f"local_elapsed_s={round(_ns_to_s(perf_counter_ns() - start), 6)}")
            fields.append(f"tag={tag}")
            fields.append(f"message={message}")

            for k in sorted(extra or {}):
                if k not in RESERVED_FIELDS:
                    fields.append(f"{k}={extra[k]}")

            self._logger.log(level, " | ".join(fields))

    # ---------- Public API ----------

    def log(self, message: str, *, tag: Optional[str] = None, **extra: Any) -> None:
        self._emit(logging.INFO, message, tag, extra)

    def warning(self, message: str, *, tag: Optional[str] = None, **extra: Any) -> None:
        self._emit(logging.WARNING, message, tag, extra)

    def error(self, message: str, *, tag: Optional[str] = None, **extra: Any) -> None:
        self._emit(logging.ERROR, message, tag, extra)

    def start_timer(self, tag: str, *, message: str = "timer started", **extra: Any) -> None:
        with self._lock:
            self._timers[tag] = perf_counter_ns()
        self._emit(logging.INFO, message, tag, extra)

    def tick(self, tag: str, message: str, **extra: Any) -> None:
        if tag not in self._timers:
            self._emit(logging.WARNING, f"[no active timer] {message}", tag, extra)
        else:
            self._emit(logging.INFO, message, tag, extra)

    def stop_timer(self, tag: str, *, message: str = "timer stopped", **extra: Any) -> Optional[float]:
        """
        Stop the timer for `tag` and log its total. Returns the elapsed seconds,
        or None when no timer was running.
        """
        with self._lock:
            start = self._timers.get(tag)
            if start is None:
                self._emit(logging.WARNING, f"[no active timer] {message}", tag, extra)
                return None
            elapsed = round(_ns_to_s(perf_counter_ns() - start), 6)
            self._emit(logging.INFO, message, tag, {"total_s": elapsed, **extra})
            self._timers.pop(tag, None)
            self._frame_windows.pop(tag, None)
        return elapsed

    def count_frame(self, tag: str) -> Optional[float]:
        """
        Count one frame for `tag`. Once a second of frames has been counted the
        measured rate is logged and returned, otherwise None.
        """
        now = perf_counter_ns()
        with self._lock:
            window = self._frame_windows.setdefault(tag, [now, 0])
            window[1] += 1
            span = now - window[0]
            if span < 1_000_000_000:
                return None
            fps = round(window[1] / _ns_to_s(span), 1)
            self._frame_windows[tag] = [now, 0]
        self.tick(tag, "frame rate", fps=fps)
        return fps

    @contextmanager
    def measure(self, tag: str, *, start_message: str = "timer started", stop_message: str = "timer stopped", **start_extra: Any):
        """
            with PerfLogger.get().measure("snapshot"):
                save_files()
        """
        self.start_timer(tag, message=start_message, **start_extra)
        try:
            yield
        except Exception as e:
            self._emit(logging.ERROR, f"exception: {type(e).__name__}: {e}", tag)
            raise
        finally:
            self.stop_timer(tag, message=stop_message)
