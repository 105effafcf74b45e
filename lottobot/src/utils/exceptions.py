"""
로또 모듈 예외 정의
"""


class LottoError(Exception):
    """로또 모듈 기본 예외"""


class ValidationError(LottoError, ValueError):
    """당첨 기록 형식 오류 (번호 개수, 범위, 중복)"""


class InvalidInputError(LottoError, ValueError):
    """핫/콜드 번호 입력 오류"""


class DrawFetchError(LottoError):
    """당첨 기록 조회 중 통신/파싱 오류"""


class DrawNotFoundError(LottoError):
    """아직 추첨되지 않았거나 존재하지 않는 회차"""

    def __init__(self, message: str, draw_no: int = None):
        super().__init__(message)
        self.draw_no = draw_no
