"""검색 CLI 전용 로거"""

import logging
import sys
from pathlib import Path
from typing import Any

from .formatters import ConsoleFormatter, JsonFormatter

ROOT_LOGGER_NAME = "novel_search"


class SearchLogger:
    """
    검색 CLI 전용 구조화 로거

    - 콘솔: 사람이 읽기 쉬운 컬러 포맷 (stderr, 검색 결과 출력과 분리)
    - 파일: JSON Lines 포맷 (기계 분석용)

    Usage:
        logger = SearchLogger("open_library")
        logger.http_request("GET", url, 200, 156.3, 2341)
        logger.search_complete("name", "Dune", found=1)
    """

    def __init__(self, name: str):
        self.name = name
        self.logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")

    @classmethod
    def configure(
        cls,
        level: str = "WARNING",
        log_file: str | Path | None = None,
        console: bool = True,
    ) -> None:
        """
        전역 로깅 설정

        Args:
            level: 로깅 레벨 (DEBUG, INFO, WARNING, ERROR)
            log_file: JSON Lines 로그 파일 경로
            console: 콘솔(stderr) 출력 여부
        """
        root = logging.getLogger(ROOT_LOGGER_NAME)
        root.setLevel(getattr(logging, level.upper()))
        root.propagate = False

        # 기존 핸들러 제거
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()

        if console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(ConsoleFormatter())
            root.addHandler(console_handler)

        if log_file:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(JsonFormatter())
            root.addHandler(file_handler)

    def _log(self, level: int, event: str, **kwargs: Any) -> None:
        """구조화된 로그 출력"""
        extra = {
            "component": self.name,
            "event": event,
            **kwargs,
        }
        self.logger.log(level, "", extra=extra)

    # === HTTP 요청 로깅 ===

    def http_request(
        self,
        method: str,
        url: str,
        status: int,
        elapsed_ms: float,
        size: int = 0,
    ) -> None:
        """
        HTTP 요청/응답 로깅

        Args:
            method: HTTP 메서드
            url: 요청 URL
            status: 응답 상태 코드
            elapsed_ms: 응답 시간 (밀리초)
            size: 응답 크기 (바이트)
        """
        self._log(
            logging.DEBUG,
            "http_request",
            method=method,
            url=url,
            status=status,
            elapsed_ms=round(elapsed_ms, 1),
            size=size,
        )

    def http_error(
        self,
        method: str,
        url: str,
        error: str,
        elapsed_ms: float = 0,
    ) -> None:
        """HTTP 요청 실패 로깅"""
        self._log(
            logging.ERROR,
            "http_error",
            method=method,
            url=url,
            error=error,
            elapsed_ms=round(elapsed_ms, 1),
        )

    # === 검색 로깅 ===

    def search_start(self, kind: str, query: str) -> None:
        """검색 시작 로깅"""
        self._log(logging.INFO, "search_start", kind=kind, query=query)

    def search_complete(self, kind: str, query: str, found: int) -> None:
        """
        검색 완료 로깅

        Args:
            kind: 검색 종류 (name, ISBN, subject, genre)
            query: 검색어
            found: 정규화 후 남은 레코드 수
        """
        level = logging.INFO if found else logging.WARNING
        self._log(level, "search_complete", kind=kind, query=query, found=found)

    # === 정규화 로깅 ===

    def record_skipped(self, kind: str, index: int, field: str) -> None:
        """필수 필드가 없어 건너뛴 레코드 로깅"""
        self._log(
            logging.WARNING,
            "record_skipped",
            kind=kind,
            index=index,
            field=field,
        )

    def random_pick(self, genre: str, index: int, total: int, title: str) -> None:
        """랜덤 선택 결과 로깅"""
        self._log(
            logging.INFO,
            "random_pick",
            genre=genre,
            index=index,
            total=total,
            title=title,
        )

    # === 에러 로깅 ===

    def error(self, event: str, error: str, context: dict[str, Any] | None = None) -> None:
        """에러 로깅"""
        self._log(
            logging.ERROR,
            event,
            error=error,
            **(context or {}),
        )

    # === 디버그 로깅 ===

    def debug(self, debug_msg: str, **kwargs: Any) -> None:
        """디버그 메시지 로깅"""
        self._log(logging.DEBUG, "debug", debug_msg=debug_msg, **kwargs)
