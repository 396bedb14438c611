#!/usr/bin/env python3
"""
novel-search - Open Library 책 검색 CLI
제목, ISBN, 주제로 책을 찾거나 장르에서 랜덤 책을 고릅니다.
"""

import argparse
import asyncio
import sys

from clients import OpenLibraryClient, SearchError
from models.query import DEFAULT_LIMIT
from presenter import format_isbn_results, format_name_results, format_subject_titles
from search_logging import SearchLogger

__version__ = "0.1.0"

logger = SearchLogger("main")

SEARCH_TYPES = ("name", "isbn", "subject")


async def run_command(args: argparse.Namespace, client: OpenLibraryClient | None = None) -> str:
    """
    파싱된 명령 1건 실행 후 출력할 텍스트 반환

    Args:
        args: 파싱된 CLI 인자
        client: 사용할 클라이언트 (테스트용, None이면 새로 생성)

    Raises:
        SearchError: 전송/파싱 실패 또는 랜덤 선택 결과 없음
    """
    async with client or OpenLibraryClient() as ol:
        if args.command == "random":
            return format_name_results(await ol.random_book(args.genre))

        if args.search_type == "name":
            return format_name_results(await ol.search_name(args.query, args.limit))
        if args.search_type == "isbn":
            return format_isbn_results(await ol.search_isbn(args.query))
        return format_subject_titles(await ol.search_subject(args.query, args.limit))


def positive_int(value: str) -> int:
    """argparse용 양의 정수 타입"""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"정수가 아닙니다: {value}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"1 이상이어야 합니다: {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="novel-search",
        description="A simple CLI-tool to browse books from the Open Library API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
예시:
  novel-search search "Dune" name --limit 3
  novel-search search 0441013597 isbn
  novel-search search fantasy subject -l 5
  novel-search random horror
        """,
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="로깅 레벨 (기본: WARNING)",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="로그 파일 경로 (JSON Lines 포맷)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    search = subparsers.add_parser("search", help="Search for books by name, ISBN, or subject")
    search.add_argument("query", help="The search query. Can be a name, ISBN, or subject")
    search.add_argument("search_type", choices=SEARCH_TYPES, help="The type of search query")
    search.add_argument(
        "--limit",
        "-l",
        type=positive_int,
        default=DEFAULT_LIMIT,
        help=f"The number of results to return, not applicable for ISBN search (기본: {DEFAULT_LIMIT})",
    )

    random_cmd = subparsers.add_parser("random", help="Get a random book from a genre")
    random_cmd.add_argument("genre", help="The genre to get a random book from")

    return parser


def main(argv: list[str] | None = None, client: OpenLibraryClient | None = None) -> int:
    """
    CLI 진입점

    SearchError는 여기서만 처리: 한 줄 메시지를 stdout에 출력하고 1 반환.

    Returns:
        종료 코드 (성공 0, 실패 1)
    """
    args = build_parser().parse_args(argv)

    SearchLogger.configure(level=args.log_level, log_file=args.log_file, console=True)

    try:
        output = asyncio.run(run_command(args, client))
    except SearchError as e:
        logger.error(
            "search_failed",
            e.detail or e.user_message,
            {"error_type": type(e).__name__, "kind": e.label, "query": e.query},
        )
        print(e.user_message)
        return 1

    print(output, end="" if args.command == "search" and args.search_type == "subject" else "\n")
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
