"""응답 정규화 테스트"""

import json

import pytest

from clients.errors import ParseError
from clients.normalizer import (
    decode_payload,
    parse_isbn_results,
    parse_name_results,
    parse_subject_listing,
)
from models.book import UNKNOWN
from models.query import IsbnSearch, NameSearch, RandomGenre, SubjectSearch


class TestDecodePayload:
    """decode_payload 테스트"""

    def test_valid_object(self):
        assert decode_payload(b'{"docs": []}', NameSearch("x")) == {"docs": []}

    def test_invalid_json_raises_parse_error(self):
        with pytest.raises(ParseError) as exc_info:
            decode_payload(b"<html>Service Unavailable</html>", NameSearch("Dune"))

        assert exc_info.value.user_message == "No books found with the name: Dune"

    def test_non_object_top_level(self):
        """최상위가 배열이면 ParseError"""
        with pytest.raises(ParseError):
            decode_payload(b"[]", IsbnSearch("123"))


class TestParseNameResults:
    """제목 검색 응답 정규화"""

    def test_dune_example(self, load_json):
        """문서 1건 → 저자/ISBN/URL 추출"""
        records = parse_name_results(load_json("name_search_dune.json"), NameSearch("Dune", 1))

        assert len(records) == 1
        record = records[0]
        assert record.title == "Dune"
        assert record.authors == ["Frank Herbert"]
        assert record.isbn == "9780441013593"
        assert record.url == "https://openlibrary.org/works/OL893415W"

    def test_missing_author_is_unknown(self):
        payload = {"docs": [{"title": "Beowulf", "key": "/works/OL1W"}]}

        record = parse_name_results(payload, NameSearch("Beowulf"))[0]

        assert record.authors == [UNKNOWN]

    def test_empty_author_array_is_unknown(self):
        payload = {"docs": [{"title": "Beowulf", "key": "/works/OL1W", "author_name": []}]}

        assert parse_name_results(payload, NameSearch("Beowulf"))[0].authors == [UNKNOWN]

    def test_first_author_only(self):
        payload = {"docs": [{"title": "Good Omens", "key": "/works/OL2W",
                             "author_name": ["Terry Pratchett", "Neil Gaiman"]}]}

        assert parse_name_results(payload, NameSearch("Good Omens"))[0].authors == ["Terry Pratchett"]

    def test_missing_or_empty_isbn_is_unknown(self):
        payload = {"docs": [
            {"title": "A", "key": "/works/OL1W"},
            {"title": "B", "key": "/works/OL2W", "isbn": []},
        ]}

        records = parse_name_results(payload, NameSearch("x"))

        assert [r.isbn for r in records] == [UNKNOWN, UNKNOWN]

    def test_skips_untitled_and_keyless_documents(self, load_json):
        """제목 없는 문서, key 없는 문서는 건너뛰고 나머지는 유지"""
        records = parse_name_results(load_json("name_search_mixed.json"), NameSearch("x"))

        assert [r.title for r in records] == ["The Lord of the Rings", "Anonymous Tales"]

    def test_filtering_is_idempotent(self, load_json):
        """걸러진 결과를 다시 정규화해도 동일"""
        query = NameSearch("x")
        once = parse_name_results(load_json("name_search_mixed.json"), query)

        docs = [
            {"title": r.title, "key": r.url.removeprefix("https://openlibrary.org"),
             "author_name": r.authors, "isbn": [r.isbn] if r.isbn != UNKNOWN else []}
            for r in once
        ]
        twice = parse_name_results({"docs": docs}, query)

        assert twice == once

    def test_works_key_fallback(self):
        """docs가 없으면 works 배열 사용"""
        payload = {"works": [{"title": "Dracula", "key": "/works/OL85892W",
                              "author_name": ["Bram Stoker"]}]}

        records = parse_name_results(payload, NameSearch("Dracula", 1))

        assert records[0].title == "Dracula"
        assert records[0].authors == ["Bram Stoker"]

    def test_missing_results_array(self):
        with pytest.raises(ParseError):
            parse_name_results({"numFound": 0}, NameSearch("Dune"))

    def test_all_titled_documents_kept(self):
        """제목이 모두 있으면 N건 그대로"""
        docs = [{"title": f"Book {i}", "key": f"/works/OL{i}W"} for i in range(5)]

        assert len(parse_name_results({"docs": docs}, NameSearch("Book", 5))) == 5


class TestParseIsbnResults:
    """ISBN 조회 응답 정규화"""

    def test_join_item_to_record(self, load_json):
        records = parse_isbn_results(load_json("isbn_volumes.json"), IsbnSearch("0140328726"))

        assert len(records) == 1
        record = records[0]
        assert record.title == "Fantastic Mr. Fox"
        assert record.author_display == "Roald Dahl, Quentin Blake"
        assert record.url == "https://archive.org/details/fantasticmrfoxpu00dahl"

    def test_isbn_10_preferred_regardless_of_order(self, load_json):
        """isbn_10이 있으면 필드 순서와 무관하게 우선"""
        payload = load_json("isbn_volumes.json")
        data = payload["records"]["/books/OL7353617M"]["data"]
        data["identifiers"] = dict(reversed(list(data["identifiers"].items())))

        records = parse_isbn_results(payload, IsbnSearch("0140328726"))

        assert records[0].isbn == "0140328726"

    def test_isbn_13_fallback(self, load_json):
        payload = load_json("isbn_volumes.json")
        del payload["records"]["/books/OL7353617M"]["data"]["identifiers"]["isbn_10"]

        assert parse_isbn_results(payload, IsbnSearch("x"))[0].isbn == "9780140328721"

    def test_no_identifiers_is_unknown(self, load_json):
        payload = load_json("isbn_volumes.json")
        del payload["records"]["/books/OL7353617M"]["data"]["identifiers"]

        assert parse_isbn_results(payload, IsbnSearch("x"))[0].isbn == UNKNOWN

    def test_bare_string_identifier(self):
        payload = {
            "items": [{"fromRecord": "r1"}],
            "records": {"r1": {"data": {"title": "T", "identifiers": {"isbn_10": "0123456789"}}}},
        }

        assert parse_isbn_results(payload, IsbnSearch("x"))[0].isbn == "0123456789"

    def test_no_authors_is_empty_string(self):
        """저자 배열이 비면 "Unknown"이 아닌 빈 문자열"""
        payload = {
            "items": [{"fromRecord": "r1"}],
            "records": {"r1": {"data": {"title": "T", "authors": []}}},
        }

        record = parse_isbn_results(payload, IsbnSearch("x"))[0]

        assert record.authors == []
        assert record.author_display == ""
        assert record.url is None

    def test_empty_items(self):
        """items가 비어 있으면 오류 없이 0건"""
        assert parse_isbn_results({"items": [], "records": {}}, IsbnSearch("x")) == []

    def test_broken_links_skipped(self):
        """fromRecord/records/data/title 누락 항목은 건너뜀"""
        payload = {
            "items": [
                {"itemURL": "u0"},
                {"fromRecord": "missing"},
                {"fromRecord": "nodata"},
                {"fromRecord": "notitle"},
                {"fromRecord": "ok", "itemURL": "u4"},
            ],
            "records": {
                "nodata": {},
                "notitle": {"data": {"authors": [{"name": "A"}]}},
                "ok": {"data": {"title": "Kept"}},
            },
        }

        records = parse_isbn_results(payload, IsbnSearch("x"))

        assert [(r.title, r.url) for r in records] == [("Kept", "u4")]

    def test_missing_items(self):
        with pytest.raises(ParseError) as exc_info:
            parse_isbn_results({"records": {}}, IsbnSearch("0000"))

        assert exc_info.value.label == "ISBN"


class TestParseSubjectListing:
    """주제 목록 정규화"""

    def test_titles_in_order(self, load_json):
        works = parse_subject_listing(load_json("subject_fantasy.json"), SubjectSearch("fantasy", 3))

        assert [w.title for w in works] == [
            "Alice's Adventures in Wonderland",
            "The Lord of the Rings",
            "Harry Potter and the Philosopher's Stone",
        ]

    def test_untitled_work_skipped(self):
        payload = {"works": [{"key": "/works/OL1W"}, {"title": "Carrie"}]}

        assert [w.title for w in parse_subject_listing(payload, RandomGenre("horror"))] == ["Carrie"]

    def test_missing_works(self):
        with pytest.raises(ParseError):
            parse_subject_listing(json.loads('{"error": "not found"}'), SubjectSearch("x"))
