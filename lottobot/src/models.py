"""
로또 데이터 모델

이 모듈은 당첨 기록, 번호 통계, 예측 세트를 표현하는 불변 데이터 클래스를 제공합니다.
"""

from dataclasses import dataclass, field
from numbers import Integral
from typing import Iterable, Optional, Tuple

from .utils.exceptions import ValidationError

MIN_NUMBER = 1
MAX_NUMBER = 45
NUMBERS_PER_DRAW = 6
LOW_HIGH_BOUNDARY = 22  # 저번호 1-22, 고번호 23-45


def is_valid_number(n) -> bool:
    """1~45 범위의 정수인지 확인"""
    return isinstance(n, Integral) and not isinstance(n, bool) and MIN_NUMBER <= n <= MAX_NUMBER


@dataclass(frozen=True)
class DrawResult:
    """로또 1회차 당첨 결과"""
    draw_no: int
    draw_date: str
    numbers: Tuple[int, ...]
    bonus: int
    first_prize: int = 0
    first_winners: int = 0

    def __post_init__(self):
        object.__setattr__(self, 'numbers', tuple(self.numbers))
        self.validate()

    def validate(self) -> None:
        """
        당첨 기록 유효성 검사

        보너스 번호와 본번호의 중복 여부는 원본 데이터를 그대로 유지하기 위해 검사하지 않습니다.

        Raises:
            ValidationError: 회차, 번호 개수, 범위, 중복 오류
        """
        if not isinstance(self.draw_no, Integral) or self.draw_no <= 0:
            raise ValidationError(f"회차 번호가 잘못되었습니다: {self.draw_no}")
        if len(self.numbers) != NUMBERS_PER_DRAW:
            raise ValidationError(
                f"당첨 번호는 {NUMBERS_PER_DRAW}개여야 합니다: {list(self.numbers)} (회차: {self.draw_no})"
            )
        if not all(is_valid_number(n) for n in self.numbers):
            raise ValidationError(f"숫자 범위가 잘못되었습니다: {list(self.numbers)} (회차: {self.draw_no})")
        if len(set(self.numbers)) != NUMBERS_PER_DRAW:
            raise ValidationError(f"중복된 번호가 있습니다: {list(self.numbers)} (회차: {self.draw_no})")
        if not is_valid_number(self.bonus):
            raise ValidationError(f"보너스 번호 범위가 잘못되었습니다: {self.bonus} (회차: {self.draw_no})")
        if self.first_prize < 0 or self.first_winners < 0:
            raise ValidationError(f"당첨금/당첨자 수는 음수일 수 없습니다 (회차: {self.draw_no})")

    @property
    def sorted_numbers(self) -> Tuple[int, ...]:
        return tuple(sorted(self.numbers))


@dataclass(frozen=True)
class NumberFrequency:
    """번호별 출현 통계"""
    number: int
    frequency: int
    # 마지막 출현 회차 (현재 계산에서는 채우지 않음)
    last_drawn: Optional[int] = None


@dataclass(frozen=True)
class PredictionSet:
    """예측 번호 한 세트"""
    key: str
    name: str
    numbers: Tuple[int, ...] = field(default_factory=tuple)
    method: str = ''

    @classmethod
    def create(cls, key: str, name: str, numbers: Iterable[int], method: str) -> 'PredictionSet':
        return cls(key=key, name=name, numbers=tuple(sorted(int(n) for n in numbers)), method=method)
