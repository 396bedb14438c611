"""검색 요청 모델"""

from dataclasses import dataclass

DEFAULT_LIMIT = 2


def _check_limit(limit: int) -> None:
    if limit < 1:
        raise ValueError(f"limit은 양의 정수여야 합니다: {limit}")


@dataclass(frozen=True)
class NameSearch:
    """제목 검색"""

    text: str
    limit: int = DEFAULT_LIMIT

    label = "name"

    def __post_init__(self):
        _check_limit(self.limit)


@dataclass(frozen=True)
class IsbnSearch:
    """ISBN 검색 (검증 없이 그대로 전달)"""

    isbn: str

    label = "ISBN"

    @property
    def text(self) -> str:
        return self.isbn


@dataclass(frozen=True)
class SubjectSearch:
    """주제 검색"""

    subject: str
    limit: int = DEFAULT_LIMIT

    label = "subject"

    def __post_init__(self):
        _check_limit(self.limit)

    @property
    def text(self) -> str:
        return self.subject


@dataclass(frozen=True)
class RandomGenre:
    """장르 내 랜덤 책 (limit/offset은 URL 생성 시 무작위로 결정)"""

    genre: str

    label = "genre"

    @property
    def text(self) -> str:
        return self.genre


Query = NameSearch | IsbnSearch | SubjectSearch | RandomGenre
