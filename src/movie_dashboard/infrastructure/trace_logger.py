"""HTTP trace log with optional webhook forwarding."""

import time
import uuid
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple, TypeVar
from urllib.parse import urlsplit

import aiofiles
import httpx
from pydantic import ValidationError

from .. import __version__
from ..config.models import Config
from ..core.interfaces import IClock, ITraceLogger
from ..core.models import HttpTrace, WebhookEvent, WebhookPayload
from .logging import LoggerMixin

T = TypeVar("T")

# Query parameters never written to traces
SENSITIVE_PARAMS = frozenset({"api_key", "apikey", "token", "access_token"})


class TraceLogger(ITraceLogger, LoggerMixin):
    """Appends HTTP traces to a JSONL file and forwards them to a webhook."""

    def __init__(self, config: Config, clock: IClock) -> None:
        """Initialize trace logger.

        Args:
            config: Application configuration.
            clock: Clock used for trace timestamps and retention.
        """
        self._config = config
        self._traces_config = config.traces
        self._clock = clock

    @property
    def trace_file(self) -> Path:
        """Path of the JSONL trace file."""
        return Path(self._traces_config.directory) / self._traces_config.file_name

    async def log_http_trace(
        self,
        method: str,
        url: str,
        status: int,
        duration_ms: float,
        payload_size: int = 0,
        response_size: int = 0,
        params: Optional[Dict[str, Any]] = None,
        error: Optional[str] = None,
    ) -> HttpTrace:
        """Record one HTTP call.

        Args:
            method: HTTP method.
            url: Request URL.
            status: Response status, 0 when no response was received.
            duration_ms: Call duration in milliseconds.
            payload_size: Request body size in bytes.
            response_size: Response body size in bytes.
            params: Query parameters; credentials are removed.
            error: Error message if the call failed.

        Returns:
            The recorded trace.
        """
        parts = urlsplit(url)
        trace = HttpTrace(
            id=self._generate_trace_id(),
            timestamp=self._clock.now().isoformat(),
            method=method.upper(),
            url=url,
            base_url=f"{parts.scheme}://{parts.netloc}",
            status=status,
            duration=round(duration_ms),
            payload_size=payload_size,
            response_size=response_size,
            params=_redact(params),
            error=error,
        )

        if not self._traces_config.enabled:
            return trace

        try:
            self.trace_file.parent.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(self.trace_file, "a", encoding="utf-8") as f:
                await f.write(trace.model_dump_json() + "\n")
        except OSError as e:
            self.logger.warning(f"Failed to write HTTP trace: {e}")

        await self._send_webhook(trace)
        return trace

    async def get_recent_traces(self, limit: int = 100) -> List[HttpTrace]:
        """Get the most recent traces.

        Malformed lines are skipped.

        Args:
            limit: Maximum number of traces.

        Returns:
            Traces, newest first.
        """
        traces = await self._read_traces()
        if limit <= 0:
            return []
        return list(reversed(traces[-limit:]))

    async def clean_old_logs(self, retention_days: Optional[int] = None) -> int:
        """Drop traces older than the retention period.

        Args:
            retention_days: Days to keep, configured value when None.

        Returns:
            Number of removed traces.
        """
        days = retention_days if retention_days is not None else self._traces_config.retention_days
        cutoff = self._clock.now() - timedelta(days=days)

        traces = await self._read_traces()
        recent = [trace for trace in traces if _is_newer(trace, cutoff)]
        removed = len(traces) - len(recent)

        if removed:
            try:
                async with aiofiles.open(self.trace_file, "w", encoding="utf-8") as f:
                    await f.write("".join(trace.model_dump_json() + "\n" for trace in recent))
            except OSError as e:
                self.logger.warning(f"Failed to rewrite trace log: {e}")
                return 0
            self.logger.info(f"Cleaned {removed} old trace entries")

        return removed

    async def _read_traces(self) -> List[HttpTrace]:
        """Read all traces in file order."""
        if not self.trace_file.exists():
            return []

        try:
            async with aiofiles.open(self.trace_file, "r", encoding="utf-8") as f:
                content = await f.read()
        except OSError as e:
            self.logger.warning(f"Failed to read trace log: {e}")
            return []

        traces = []
        for line in content.splitlines():
            if not line.strip():
                continue
            try:
                traces.append(HttpTrace.model_validate_json(line))
            except ValidationError:
                self.logger.debug("Skipping malformed trace line")
        return traces

    async def _send_webhook(self, trace: HttpTrace) -> None:
        """Forward a trace to the configured webhook."""
        webhook = self._traces_config.webhook
        if not webhook.enabled or not webhook.url:
            return

        if not webhook.url.startswith(("http://", "https://")):
            self.logger.warning("Invalid webhook URL configured, skipping webhook")
            return

        payload = WebhookPayload(
            event=WebhookEvent.ERROR if trace.status >= 400 else WebhookEvent.SUCCESS,
            trace=trace,
            metadata={
                "environment": self._config.app.environment,
                "service": self._config.app.service_name,
                "version": __version__,
            },
        )

        try:
            async with httpx.AsyncClient(timeout=webhook.timeout) as client:
                response = await client.post(
                    webhook.url,
                    json=payload.model_dump(mode="json"),
                    headers={"User-Agent": f"MovieDashboard/{__version__}"},
                )
            if response.is_error:
                self.logger.warning(f"Webhook failed: {response.status_code}")
        except httpx.HTTPError as e:
            self.logger.warning(f"Webhook error: {e}")

    def _generate_trace_id(self) -> str:
        """Generate a unique trace ID."""
        epoch_ms = int(self._clock.timestamp() * 1000)
        return f"trace_{epoch_ms}_{uuid.uuid4().hex[:9]}"


def _redact(params: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if params is None:
        return None
    return {key: value for key, value in params.items() if key.lower() not in SENSITIVE_PARAMS}


def _is_newer(trace: HttpTrace, cutoff: datetime) -> bool:
    timestamp = _parse_timestamp(trace.timestamp)
    return timestamp is not None and timestamp > cutoff


def _parse_timestamp(value: str) -> Optional[datetime]:
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


async def measure_time(operation: Callable[[], Awaitable[T]]) -> Tuple[T, int]:
    """Await an operation and measure how long it took.

    Args:
        operation: Coroutine factory.

    Returns:
        Result and duration in whole milliseconds.
    """
    start = time.perf_counter()
    result = await operation()
    return result, round((time.perf_counter() - start) * 1000)
