"""검색 결과 텍스트 출력 포맷"""

from models.book import UNKNOWN, BookRecord, SubjectWork

DIVIDER = "-" * 50


def _format_records(records: list[BookRecord], header: str, author_label: str) -> str:
    lines = [header, DIVIDER, DIVIDER]
    for r in records:
        lines.append(f"Title: {r.title}")
        lines.append(f"{author_label}: {r.author_display}")
        lines.append(f"ISBN: {r.isbn}")
        lines.append(f"URL: {r.url or UNKNOWN}")
        lines.append(DIVIDER)
    lines.append(DIVIDER)
    return "\n".join(lines)


def format_name_results(records: list[BookRecord]) -> str:
    """
    제목 검색 결과

    헤더의 건수는 실제로 출력되는 레코드 수 (제목 없는 문서 제외 후).
    """
    return _format_records(records, f"Found {len(records)} books", "Author")


def format_isbn_results(records: list[BookRecord]) -> str:
    """ISBN 조회 결과 (저자는 전원 ", "로 연결)"""
    return _format_records(records, f"Found {len(records)} matches", "Authors")


def format_subject_titles(works: list[SubjectWork]) -> str:
    """주제 목록: 제목 줄만, 작품 사이 빈 줄"""
    return "".join(f"Title: {w.title}\n\n" for w in works)
