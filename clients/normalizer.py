"""
Open Library 응답 정규화

세 가지 응답 형태를 하나의 레코드 타입으로 변환:
- 제목 검색 (search.json): docs[] 또는 works[]
- ISBN 조회 (api/volumes/brief): items[] + records{}
- 주제 목록 (subjects/*.json): works[]

레코드 단위 필드 누락은 해당 레코드만 건너뛰고(MissingFieldError → 로그),
최상위 배열 누락이나 잘못된 JSON만 전체 명령을 중단시킨다(ParseError).
"""

import json
from typing import Any

from clients.errors import MissingFieldError, ParseError
from clients.query import OPEN_LIBRARY_URL
from models.book import UNKNOWN, BookRecord, SubjectWork
from models.query import Query
from search_logging import SearchLogger

logger = SearchLogger("normalizer")


def decode_payload(content: bytes, query: Query) -> dict[str, Any]:
    """
    응답 본문을 JSON 객체로 디코딩

    Raises:
        ParseError: JSON이 아니거나 최상위가 객체가 아닌 경우
    """
    try:
        payload = json.loads(content)
    except ValueError as e:
        raise ParseError(query.label, query.text, f"JSON 파싱 실패: {e}") from e

    if not isinstance(payload, dict):
        raise ParseError(
            query.label, query.text, f"최상위 JSON이 객체가 아님: {type(payload).__name__}"
        )
    return payload


def _require_array(payload: dict[str, Any], keys: tuple[str, ...], query: Query) -> list:
    """keys 순서대로 찾은 첫 번째 배열 반환"""
    for key in keys:
        value = payload.get(key)
        if isinstance(value, list):
            return value
    raise ParseError(query.label, query.text, f"결과 배열 없음: {' / '.join(keys)}")


def _title(doc: Any) -> str:
    title = doc.get("title") if isinstance(doc, dict) else None
    if not isinstance(title, str) or not title:
        raise MissingFieldError("title")
    return title


def _first_string(value: Any) -> str | None:
    """배열의 첫 번째 문자열 (배열이 아니면 문자열 자체)"""
    if isinstance(value, list):
        value = value[0] if value else None
    return value if isinstance(value, str) and value else None


def _normalize(docs: list, query: Query, extract) -> list:
    """레코드별 추출, 필드 누락 레코드는 건너뜀"""
    records = []
    for index, doc in enumerate(docs):
        try:
            records.append(extract(doc))
        except MissingFieldError as e:
            if e.field == "title":
                logger.debug("제목 없는 레코드 건너뜀", kind=query.label, index=index)
            else:
                logger.record_skipped(query.label, index, e.field)
    return records


# === 제목 검색 ===


def _name_record(doc: Any) -> BookRecord:
    title = _title(doc)

    key = doc.get("key")
    if not isinstance(key, str) or not key:
        raise MissingFieldError("key")

    return BookRecord(
        title=title,
        authors=[_first_string(doc.get("author_name")) or UNKNOWN],
        isbn=_first_string(doc.get("isbn")) or UNKNOWN,
        url=f"{OPEN_LIBRARY_URL}{key}",
    )


def parse_name_results(payload: dict[str, Any], query: Query) -> list[BookRecord]:
    """
    제목 검색 응답 → BookRecord 목록

    결과 배열은 docs 키가 기본이고, 없으면 works 키를 사용한다.
    제목 없는 문서는 조용히, key 없는 문서는 경고 로그와 함께 건너뛴다.

    Raises:
        ParseError: docs/works 배열이 모두 없는 경우
    """
    docs = _require_array(payload, ("docs", "works"), query)
    return _normalize(docs, query, _name_record)


# === ISBN 조회 ===


def _author_names(data: dict[str, Any]) -> list[str]:
    """authors[].name을 원본 순서대로 (이름 없는 항목 제외)"""
    authors = data.get("authors")
    if not isinstance(authors, list):
        return []
    return [
        author["name"]
        for author in authors
        if isinstance(author, dict) and isinstance(author.get("name"), str)
    ]


def _isbn_identifier(data: dict[str, Any]) -> str:
    """ISBN-10 우선, 없으면 ISBN-13, 둘 다 없으면 Unknown"""
    identifiers = data.get("identifiers")
    if not isinstance(identifiers, dict):
        return UNKNOWN
    return (
        _first_string(identifiers.get("isbn_10"))
        or _first_string(identifiers.get("isbn_13"))
        or UNKNOWN
    )


def parse_isbn_results(payload: dict[str, Any], query: Query) -> list[BookRecord]:
    """
    ISBN 조회 응답 → BookRecord 목록

    item.fromRecord → records[id].data 로 조인한 뒤 제목/저자/ISBN 추출.
    저자가 없으면 "Unknown"이 아닌 빈 문자열로 출력된다.

    Raises:
        ParseError: items 배열이 없는 경우
    """
    items = _require_array(payload, ("items",), query)
    records = payload.get("records")
    if not isinstance(records, dict):
        records = {}

    def extract(item: Any) -> BookRecord:
        if not isinstance(item, dict):
            raise MissingFieldError("fromRecord")
        record_id = item.get("fromRecord")
        record = records.get(record_id) if isinstance(record_id, str) else None
        if not isinstance(record, dict):
            raise MissingFieldError("fromRecord")
        data = record.get("data")
        if not isinstance(data, dict):
            raise MissingFieldError("data")

        url = item.get("itemURL")
        return BookRecord(
            title=_title(data),
            authors=_author_names(data),
            isbn=_isbn_identifier(data),
            url=url if isinstance(url, str) else None,
        )

    return _normalize(items, query, extract)


# === 주제 목록 ===


def _subject_work(work: Any) -> SubjectWork:
    return SubjectWork(title=_title(work))


def parse_subject_listing(payload: dict[str, Any], query: Query) -> list[SubjectWork]:
    """
    주제 목록 응답 → SubjectWork 목록

    Raises:
        ParseError: works 배열이 없는 경우
    """
    works = _require_array(payload, ("works",), query)
    return _normalize(works, query, _subject_work)
