"""검색 실패 예외 계층"""


class SearchError(Exception):
    """
    명령 전체를 중단시키는 검색 실패의 베이스 클래스

    CLI 최상위(main.main)에서만 잡아서 한 줄 메시지 출력 후 종료 코드 1로 매핑.
    """

    def __init__(self, label: str, query: str, detail: str = ""):
        self.label = label
        self.query = query
        self.detail = detail
        super().__init__(detail or self.user_message)

    @property
    def user_message(self) -> str:
        """사용자에게 보여줄 한 줄 메시지"""
        return f"No books found with the {self.label}: {self.query}"


class TransportError(SearchError):
    """네트워크/DNS/HTTP 상태 코드 오류"""


class ParseError(SearchError):
    """JSON이 아니거나 최상위 결과 배열이 없는 응답"""


class NoResultsError(SearchError):
    """정상 응답이지만 결과가 비어 있음 (랜덤 선택 흐름)"""


class MissingFieldError(Exception):
    """
    레코드 단위 필수 필드 누락

    정규화 단계에서 해당 레코드만 건너뛰고 복구됨.
    """

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"필수 필드 없음: {field}")
