"""A source that reads rows produced by an external spreadsheet-fetching script."""

from __future__ import annotations

import json
import logging
import subprocess
import time
from collections import deque
from datetime import timedelta
from typing import Any, Callable, Iterable, Mapping

from .common import PLUGIN_PROTOCOL_VERSION, ReturnType, SourceError

log = logging.getLogger(__name__)

MAX_OUTPUT_SIZE = 10 * 1024 * 1024
_EMPTY_PAUSE = 0.1


def _entries(parsed: Any) -> Iterable[Any]:
    """Yield the elements of a parsed document the way a JSON container iterates."""
    if parsed is None:
        return []
    if isinstance(parsed, list):
        return parsed
    if isinstance(parsed, dict):
        return [parsed[key] for key in sorted(parsed)]
    return [parsed]


def _dump(value: Any) -> str:
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


class GSheetSource:
    """Emits one JSON record per call, refilling its queue by running a script."""

    version = PLUGIN_PROTOCOL_VERSION

    def __init__(
        self,
        *,
        interpreter: str = "python3",
        sleep: Callable[[float], Any] = time.sleep,
    ) -> None:
        self.interpreter = interpreter
        self.params: dict[str, Any] = {}
        self.agent_id = ""
        self.script_path = ""
        self.poll_interval = timedelta(minutes=5)
        self._sleep = sleep
        self._queue: deque[Any] = deque()

    @staticmethod
    def server_name() -> str:
        return "SourceServer"

    @staticmethod
    def kind_static() -> str:
        return "source_gsheet"

    def kind(self) -> str:
        return self.kind_static()

    def set_params(self, params: Mapping[str, Any] | None) -> None:
        """Apply settings; invalid settings are logged and the rest ignored."""
        if params is None:
            log.error("set_params: no parameters given")
            return
        try:
            self.params = dict(params)
            agent_id = self.params.get("agent_id", "")
            if not isinstance(agent_id, str):
                raise TypeError("agent_id must be a string")
            self.agent_id = agent_id
            script_path = self.params.get("script_path", "fetch_gsheet.py")
            if not isinstance(script_path, str):
                raise TypeError("script_path must be a string")
            self.script_path = script_path
            if "poll_interval_minutes" in self.params:
                interval = self.params["poll_interval_minutes"]
                if isinstance(interval, bool) or not isinstance(interval, int):
                    raise TypeError("poll_interval_minutes must be an integer")
                if interval > 0:
                    self.poll_interval = timedelta(minutes=interval)
                    log.debug("polling every %d minutes", interval)
        except (TypeError, ValueError) as exc:
            log.error("set_params failed: %s", exc)

    def _run_script(self) -> str:
        command = f"{self.interpreter} {self.script_path}"
        log.debug("running: %s", command)
        try:
            completed = subprocess.run(
                command, shell=True, stdout=subprocess.PIPE, check=False
            )
        except OSError as exc:
            log.error("could not start script: %s", exc)
            return "{}"
        log.debug("script finished with code %d", completed.returncode)
        result = completed.stdout.decode("utf-8", errors="replace")
        if not result:
            return "{}"
        if len(result) > MAX_OUTPUT_SIZE:
            log.warning("script output too large, truncated")
            result = result[:MAX_OUTPUT_SIZE]
        log.debug("result (%d chars): %s", len(result), result[:200])
        return result

    def _refill(self) -> None:
        raw = self._run_script()
        try:
            parsed = json.loads(raw)
        except ValueError as exc:
            raise SourceError(f"JSON parsing failed: {exc}") from exc
        self._queue.extend(_entries(parsed))
        log.debug("loaded %d entries", len(self._queue))
        if not self._queue:
            self._sleep(_EMPTY_PAUSE)
            raise SourceError("no data to send")

    def get_output(self) -> Any:
        """Return the next record, running the script first when the queue is empty."""
        if not self._queue:
            self._refill()
        out = self._queue.popleft()
        if self.agent_id:
            if out is None:
                out = {}
            if not isinstance(out, dict):
                raise SourceError("cannot attach agent_id to a non-object record")
            out["agent_id"] = self.agent_id
        log.debug("sending: %s", _dump(out))
        if not self._queue:
            log.debug("last queued record sent")
            self._sleep(self.poll_interval.total_seconds())
        return out

    def next_line(self) -> str | None:
        """Return the next record as compact JSON, or None when none could be read."""
        try:
            return _dump(self.get_output())
        except SourceError as exc:
            if exc.code is not ReturnType.ERROR:
                raise
            return None

    def blob_format(self) -> str:
        return ""

    def info(self) -> dict[str, str]:
        return {
            "name": "Google Sheets Source",
            "description": "Reads data from a Google Sheet via Python script",
            "blob_format": "none",
        }