"""검색 요청 → 요청 URL 변환 (I/O 없음)"""

import random
import urllib.parse

from models.query import IsbnSearch, NameSearch, Query, RandomGenre, SubjectSearch

OPEN_LIBRARY_URL = "https://openlibrary.org"

# 랜덤 장르 조회 시 limit/offset 범위 (8비트 부호 없는 정수)
RANDOM_PAGE_MAX = 255


def _subject_path(subject: str) -> str:
    """주제명을 소문자로 바꾸고 경로 세그먼트 하나로 인코딩 (/ 포함)"""
    return urllib.parse.quote(subject.lower(), safe="")


def build_url(query: Query, rng: random.Random | None = None) -> str:
    """
    검색 요청 하나를 요청 URL 하나로 변환

    Args:
        query: 검색 요청
        rng: RandomGenre의 limit/offset 추첨용 난수 생성기 (기본: random 모듈)

    Returns:
        완성된 요청 URL
    """
    if isinstance(query, NameSearch):
        params = urllib.parse.urlencode({"title": query.text, "limit": query.limit})
        return f"{OPEN_LIBRARY_URL}/search.json?{params}"

    if isinstance(query, IsbnSearch):
        # ISBN 형식/체크섬 검증 없이 그대로 경로에 삽입
        isbn = urllib.parse.quote(query.isbn, safe="")
        return f"{OPEN_LIBRARY_URL}/api/volumes/brief/isbn/{isbn}.json"

    if isinstance(query, SubjectSearch):
        return f"{OPEN_LIBRARY_URL}/subjects/{_subject_path(query.subject)}.json?limit={query.limit}"

    if isinstance(query, RandomGenre):
        rng = rng or random
        limit = rng.randint(0, RANDOM_PAGE_MAX)
        offset = rng.randint(0, RANDOM_PAGE_MAX)
        return (
            f"{OPEN_LIBRARY_URL}/subjects/{_subject_path(query.genre)}.json"
            f"?limit={limit}&offset={offset}"
        )

    raise TypeError(f"지원하지 않는 검색 요청: {query!r}")
