"""
계정별 시드 기반 예측 번호 생성 모듈

같은 날 같은 계정은 항상 같은 예측 번호를, 다른 계정이나 다른 날은 다른 예측 번호를 받습니다.
시드는 날짜 문자열과 계정 이름의 문자 코드 합으로 만들고, 호출마다 새 난수 생성기를 만듭니다.

생성 전략 (순서 고정):
1. 완전 랜덤
2. 핫넘버 조합
3. 콜드넘버 조합
4. 균형 조합 (핫 + 콜드)
5. 고저 균형 (저번호 3개 + 고번호 3개)
"""

import datetime
import logging
from typing import List, Optional, Sequence, Set

import numpy as np

from shared.error_handler import log_performance
from ..models import MAX_NUMBER, MIN_NUMBER, NUMBERS_PER_DRAW, PredictionSet, is_valid_number
from ..utils.config import PredictionConfig
from ..utils.exceptions import InvalidInputError

logger = logging.getLogger(__name__)

STRATEGIES = (
    ('random', '🎲 완전 랜덤', '1~45 중 무작위 6개'),
    ('hot', '🔥 핫넘버 조합', '최근 자주 나온 번호 중심'),
    ('cold', '❄️ 콜드넘버 조합', '최근 안 나온 번호 중심'),
    ('balanced', '⚖️ 균형 조합', '핫넘버 3개 + 콜드넘버 3개'),
    ('high_low', '📊 고저 균형', '저번호(1-22) 3개 + 고번호(23-45) 3개'),
)

class SeededPredictionGenerator:
    """날짜 + 계정 기반 시드로 예측 번호 5세트 생성"""

    def __init__(self, config: Optional[PredictionConfig] = None):
        """
        Args:
            config: 생성 설정 (없으면 기본값)

        Raises:
            InvalidInputError: 고저 경계나 풀 선택 개수가 생성 불가능한 값인 경우
        """
        self.config = config or PredictionConfig()
        self._validate_config()

    def _validate_config(self) -> None:
        half = NUMBERS_PER_DRAW // 2
        boundary = self.config.low_high_boundary
        # 저번호/고번호 구간 모두 최소 3개의 번호가 있어야 중복 없이 뽑을 수 있음
        if not MIN_NUMBER + half - 1 <= boundary <= MAX_NUMBER - half:
            raise InvalidInputError(
                f"고저 경계는 {MIN_NUMBER + half - 1}~{MAX_NUMBER - half} 범위여야 합니다: {boundary}"
            )
        for name in ('pool_pick', 'balanced_pick'):
            value = getattr(self.config, name)
            if not 0 <= value <= NUMBERS_PER_DRAW:
                raise InvalidInputError(f"{name}는 0~{NUMBERS_PER_DRAW} 범위여야 합니다: {value}")

    def derive_seed(self, identity: str, today: Optional[datetime.date] = None) -> int:
        """
        시드 계산

        Args:
            identity: 계정 이름
            today: 기준 날짜 (없으면 오늘)

        Returns:
            날짜(YYYY-MM-DD) 문자 코드 합 + 계정 이름 문자 코드 합 × 가중치
        """
        today = today or datetime.date.today()
        seed = sum(ord(c) for c in today.strftime('%Y-%m-%d'))
        seed += sum(ord(c) * self.config.identity_weight for c in identity)
        return seed

    @staticmethod
    def _validate_pool(name: str, pool: Sequence[int]) -> List[int]:
        invalid = [n for n in pool if not is_valid_number(n)]
        if invalid:
            raise InvalidInputError(f"{name} 번호는 {MIN_NUMBER}~{MAX_NUMBER} 범위의 정수여야 합니다: {invalid}")
        return [int(n) for n in pool]

    @staticmethod
    def _draw_unique(rng: np.random.Generator, chosen: Set[int], result: List[int],
                     low: int, high: int, target: int) -> None:
        # low~high 범위에서 target개가 될 때까지 중복 없이 추가
        while len(result) < target:
            n = int(rng.integers(low, high + 1))
            if n not in chosen:
                chosen.add(n)
                result.append(n)

    def _take_from_pool(self, rng: np.random.Generator, pool: List[int], chosen: Set[int],
                        result: List[int], count: int) -> None:
        shuffled = list(pool)
        rng.shuffle(shuffled)
        for n in shuffled[:count]:
            if len(result) >= NUMBERS_PER_DRAW:
                break
            if n not in chosen:
                chosen.add(n)
                result.append(n)

    def generate_random(self, rng: np.random.Generator) -> List[int]:
        """완전 랜덤 6개"""
        chosen, result = set(), []
        self._draw_unique(rng, chosen, result, MIN_NUMBER, MAX_NUMBER, NUMBERS_PER_DRAW)
        return sorted(result)

    def generate_from_pool(self, rng: np.random.Generator, pool: List[int]) -> List[int]:
        """풀에서 우선 선택 후 나머지는 랜덤"""
        chosen, result = set(), []
        self._take_from_pool(rng, pool, chosen, result, self.config.pool_pick)
        self._draw_unique(rng, chosen, result, MIN_NUMBER, MAX_NUMBER, NUMBERS_PER_DRAW)
        return sorted(result)

    def generate_balanced(self, rng: np.random.Generator, hot: List[int], cold: List[int]) -> List[int]:
        """핫/콜드 균형"""
        chosen, result = set(), []
        self._take_from_pool(rng, hot, chosen, result, self.config.balanced_pick)
        self._take_from_pool(rng, cold, chosen, result, self.config.balanced_pick)
        # 부족하면 랜덤 추가
        self._draw_unique(rng, chosen, result, MIN_NUMBER, MAX_NUMBER, NUMBERS_PER_DRAW)
        return sorted(result)

    def generate_high_low(self, rng: np.random.Generator) -> List[int]:
        """저번호 3개 + 고번호 3개"""
        boundary = self.config.low_high_boundary
        half = NUMBERS_PER_DRAW // 2
        chosen, result = set(), []
        self._draw_unique(rng, chosen, result, MIN_NUMBER, boundary, half)
        self._draw_unique(rng, chosen, result, boundary + 1, MAX_NUMBER, NUMBERS_PER_DRAW)
        return sorted(result)

    @log_performance
    def generate(self, hot_numbers: Sequence[int], cold_numbers: Sequence[int], identity: str,
                 today: Optional[datetime.date] = None) -> List[PredictionSet]:
        """
        예측 번호 5세트 생성

        Args:
            hot_numbers: 핫넘버 목록
            cold_numbers: 콜드넘버 목록
            identity: 계정 이름
            today: 기준 날짜 (없으면 오늘)

        Returns:
            전략 순서대로 PredictionSet 5개

        Raises:
            InvalidInputError: 핫/콜드 번호가 1~45 범위의 정수가 아닌 경우
        """
        hot = self._validate_pool('핫넘버', hot_numbers)
        cold = self._validate_pool('콜드넘버', cold_numbers)

        seed = self.derive_seed(identity, today)
        rng = np.random.default_rng(seed)
        logger.debug(f"예측 번호 생성: identity={identity}, seed={seed}")

        # 하나의 난수 스트림을 공유하므로 순서를 바꾸면 결과가 달라짐
        picks = [
            self.generate_random(rng),
            self.generate_from_pool(rng, hot),
            self.generate_from_pool(rng, cold),
            self.generate_balanced(rng, hot, cold),
            self.generate_high_low(rng),
        ]

        return [
            PredictionSet.create(key=key, name=name, numbers=numbers, method=method)
            for (key, name, method), numbers in zip(STRATEGIES, picks)
        ]


def derive_seed(identity: str, today: Optional[datetime.date] = None) -> int:
    return SeededPredictionGenerator().derive_seed(identity, today)


def generate_predictions(hot_numbers: Sequence[int], cold_numbers: Sequence[int], identity: str,
                         today: Optional[datetime.date] = None) -> List[PredictionSet]:
    """기본 설정으로 예측 번호 5세트 생성"""
    return SeededPredictionGenerator().generate(hot_numbers, cold_numbers, identity, today)
