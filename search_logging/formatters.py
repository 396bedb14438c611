"""로그 포매터"""

import json
import logging
from datetime import datetime, timezone
from typing import Any

# LogRecord 기본 속성 (extra 필드 추출 시 제외)
_SKIP_ATTRS = {
    "name", "msg", "args", "created", "filename", "funcName",
    "levelname", "levelno", "lineno", "module", "msecs",
    "pathname", "process", "processName", "relativeCreated",
    "stack_info", "exc_info", "exc_text", "thread", "threadName",
    "taskName", "message",
}


class ConsoleFormatter(logging.Formatter):
    """
    콘솔용 사람이 읽기 쉬운 포맷

    출력 예시:
    2024-01-15 10:30:45 [INFO] [open_library] 검색 중 (name): "Dune"
    2024-01-15 10:30:45 [DEBUG] [open_library] HTTP GET https://... (245ms, 45KB)
    """

    # ANSI 색상 코드
    COLORS = {
        logging.DEBUG: "\033[36m",  # Cyan
        logging.INFO: "\033[32m",   # Green
        logging.WARNING: "\033[33m",  # Yellow
        logging.ERROR: "\033[31m",  # Red
    }
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")

        level_color = self.COLORS.get(record.levelno, "")
        level_name = record.levelname

        component = getattr(record, "component", "")
        event = getattr(record, "event", "")

        prefix = f"{self.DIM}{timestamp}{self.RESET} [{level_color}{level_name}{self.RESET}]"
        if component:
            prefix += f" [{self.BOLD}{component}{self.RESET}]"

        message = self._format_event(record, event)

        return f"{prefix} {message}"

    def _format_event(self, record: logging.LogRecord, event: str) -> str:
        """이벤트 타입별 메시지 포맷팅"""

        if event == "http_request":
            method = getattr(record, "method", "GET")
            url = getattr(record, "url", "")
            status = getattr(record, "status", 0)
            elapsed_ms = getattr(record, "elapsed_ms", 0)
            size = getattr(record, "size", 0)

            # URL 축약 (너무 길면)
            if len(url) > 80:
                url = url[:77] + "..."

            size_str = self._format_size(size)
            return f"HTTP {method} {url}\n  → {status} ({elapsed_ms:.0f}ms, {size_str})"

        elif event == "http_error":
            method = getattr(record, "method", "GET")
            url = getattr(record, "url", "")
            error = getattr(record, "error", "")
            return f"HTTP {method} 실패: {url}\n  → {error}"

        elif event == "search_start":
            kind = getattr(record, "kind", "")
            query = getattr(record, "query", "")
            return f"검색 중 ({kind}): \"{query}\""

        elif event == "search_complete":
            kind = getattr(record, "kind", "")
            query = getattr(record, "query", "")
            found = getattr(record, "found", 0)
            if found:
                return f"검색 완료 ({kind}): \"{query}\" → {found}건"
            return f"검색 결과 없음 ({kind}): \"{query}\""

        elif event == "record_skipped":
            kind = getattr(record, "kind", "")
            index = getattr(record, "index", 0)
            field = getattr(record, "field", "")
            return f"레코드 건너뜀 ({kind} #{index}): '{field}' 필드 없음"

        elif event == "random_pick":
            index = getattr(record, "index", 0)
            total = getattr(record, "total", 0)
            title = getattr(record, "title", "")
            return f"랜덤 선택: [{index}/{total}] \"{title}\""

        elif event == "debug":
            return getattr(record, "debug_msg", "")

        else:
            error = getattr(record, "error", "")
            if error:
                return f"{event}: {error}"
            return event

    def _format_size(self, size: int) -> str:
        """바이트 크기를 읽기 쉬운 형식으로"""
        if size < 1024:
            return f"{size}B"
        elif size < 1024 * 1024:
            return f"{size / 1024:.1f}KB"
        else:
            return f"{size / (1024 * 1024):.1f}MB"


class JsonFormatter(logging.Formatter):
    """
    JSON Lines 포맷 (기계 분석용)

    출력 예시:
    {"ts":"2024-01-15T10:30:45.123Z","level":"INFO","component":"open_library","event":"search_complete",...}
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
        }

        for key, value in record.__dict__.items():
            if key not in _SKIP_ATTRS and not key.startswith("_"):
                # JSON 직렬화 가능한 값만 포함
                if isinstance(value, (str, int, float, bool, type(None), list, dict)):
                    log_entry[key] = value
                else:
                    log_entry[key] = str(value)

        return json.dumps(log_entry, ensure_ascii=False)
