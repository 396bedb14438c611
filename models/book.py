from dataclasses import dataclass, field

UNKNOWN = "Unknown"


@dataclass
class BookRecord:
    """정규화된 책 정보 (이름/ISBN 검색 결과 1건)"""

    title: str  # 책 제목 (필수)
    authors: list[str] = field(default_factory=list)  # 저자 목록 (원본 순서 유지)
    isbn: str = UNKNOWN  # ISBN (없으면 "Unknown")
    url: str | None = None  # Open Library 상세 페이지 URL

    @property
    def author_display(self) -> str:
        """출력용 저자 문자열 (", "로 연결)"""
        return ", ".join(self.authors)


@dataclass
class SubjectWork:
    """주제(subject) 목록의 작품 1건"""

    title: str
