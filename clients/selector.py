"""주제 목록에서 랜덤 작품 선택"""

import random

from clients.errors import NoResultsError
from models.book import SubjectWork
from models.query import Query


def select_random_index(total: int, rng: random.Random | None = None) -> int:
    """
    [0, total) 범위의 인덱스 선택

    32비트 부호 없는 정수를 total로 나눈 나머지를 사용하므로 약간의
    모듈로 편향이 있다 (암호학적 용도 아님).
    """
    rng = rng or random
    return rng.getrandbits(32) % total


def select_random_title(
    works: list[SubjectWork],
    query: Query,
    rng: random.Random | None = None,
) -> tuple[int, str]:
    """
    작품 목록에서 하나를 골라 (인덱스, 제목) 반환

    Raises:
        NoResultsError: 목록이 비어 있는 경우
    """
    if not works:
        raise NoResultsError(query.label, query.text, "주제 목록이 비어 있음")
    index = select_random_index(len(works), rng)
    return index, works[index].title
