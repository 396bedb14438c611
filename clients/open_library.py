"""Open Library API 클라이언트"""

import random

import httpx

from clients.base_http import BaseHttpClient
from clients.errors import NoResultsError
from clients.normalizer import (
    decode_payload,
    parse_isbn_results,
    parse_name_results,
    parse_subject_listing,
)
from clients.query import build_url
from clients.selector import select_random_title
from models.book import BookRecord, SubjectWork
from models.query import IsbnSearch, NameSearch, RandomGenre, SubjectSearch


class OpenLibraryClient(BaseHttpClient):
    """
    Open Library 클라이언트 (API 키 불필요)

    검색 1건 = URL 생성 → GET 1회 → 정규화.
    랜덤 장르 조회만 두 번의 순차 요청을 보낸다 (주제 목록 → 제목 검색).
    """

    name = "open_library"

    def __init__(
        self,
        transport: httpx.AsyncBaseTransport | None = None,
        rng: random.Random | None = None,
    ):
        super().__init__(transport=transport)
        self.rng = rng or random.Random()

    async def search_name(self, text: str, limit: int = 2) -> list[BookRecord]:
        """제목으로 검색"""
        query = NameSearch(text, limit)
        self.logger.search_start(query.label, query.text)

        payload = decode_payload(await self.fetch(build_url(query), query), query)
        records = parse_name_results(payload, query)

        self.logger.search_complete(query.label, query.text, found=len(records))
        return records

    async def search_isbn(self, isbn: str) -> list[BookRecord]:
        """ISBN으로 판본 조회"""
        query = IsbnSearch(isbn)
        self.logger.search_start(query.label, query.text)

        payload = decode_payload(await self.fetch(build_url(query), query), query)
        records = parse_isbn_results(payload, query)

        self.logger.search_complete(query.label, query.text, found=len(records))
        return records

    async def search_subject(self, subject: str, limit: int = 2) -> list[SubjectWork]:
        """주제로 작품 목록 조회"""
        query = SubjectSearch(subject, limit)
        self.logger.search_start(query.label, query.text)

        payload = decode_payload(await self.fetch(build_url(query), query), query)
        works = parse_subject_listing(payload, query)

        self.logger.search_complete(query.label, query.text, found=len(works))
        return works

    async def random_book(self, genre: str) -> list[BookRecord]:
        """
        장르에서 랜덤 책 1권

        1. 무작위 limit/offset으로 주제 목록 조회
        2. 목록에서 제목 하나를 균등 확률로 선택
        3. 그 제목으로 limit=1 제목 검색

        Returns:
            제목 검색 결과 (항상 1건 이상)

        Raises:
            NoResultsError: 주제 목록 또는 제목 재검색 결과가 비어 있는 경우
        """
        query = RandomGenre(genre)
        self.logger.search_start(query.label, query.text)

        payload = decode_payload(
            await self.fetch(build_url(query, self.rng), query), query
        )
        works = parse_subject_listing(payload, query)
        index, title = select_random_title(works, query, self.rng)
        self.logger.random_pick(genre, index, len(works), title)

        records = await self.search_name(title, 1)
        if not records:
            raise NoResultsError(query.label, query.text, f"제목 재검색 결과 없음: {title}")

        self.logger.search_complete(query.label, query.text, found=len(records))
        return records
