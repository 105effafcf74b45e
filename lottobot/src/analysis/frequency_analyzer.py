"""
로또 번호의 출현 빈도를 분석하는 모듈

이 모듈은 과거 당첨 번호로부터 다음과 같은 정보를 제공합니다:
- 번호별 출현 빈도 및 순위
- 핫넘버(자주 출현) / 콜드넘버(적게 출현)
- 구간별, 홀짝, 고저 분포
- 카이제곱 기반 균등성 검정
- 빈도 막대 그래프
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union
import logging

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns
from scipy import stats

from shared.error_handler import log_performance, safe_execute
from ..models import (
    DrawResult,
    LOW_HIGH_BOUNDARY,
    MAX_NUMBER,
    MIN_NUMBER,
    NUMBERS_PER_DRAW,
    NumberFrequency,
)
from ..utils.config import AnalysisConfig
from ..utils.exceptions import ValidationError

logger = logging.getLogger(__name__)

RANGE_BANDS = (
    ('1-10', 1, 10),
    ('11-20', 11, 20),
    ('21-30', 21, 30),
    ('31-40', 31, 40),
    ('41-45', 41, 45),
)

@dataclass
class FrequencyAnalysis:
    """빈도 분석 결과"""
    total_draws: int
    hot_numbers: List[int]
    cold_numbers: List[int]
    frequencies: List[NumberFrequency]

class FrequencyAnalyzer:
    """로또 번호 출현 빈도 분석"""

    def __init__(self, config: Optional[AnalysisConfig] = None):
        """
        빈도 분석기 초기화

        Args:
            config: 분석 설정 (없으면 기본값)

        Raises:
            ValidationError: 핫/콜드 개수가 1 미만이거나 합이 45를 넘는 경우
        """
        self.config = config or AnalysisConfig()
        self._validate_config()

    def _validate_config(self) -> None:
        hot_count, cold_count = self.config.hot_count, self.config.cold_count
        if hot_count < 1 or cold_count < 1:
            raise ValidationError(f"핫/콜드 개수는 1 이상이어야 합니다: hot={hot_count}, cold={cold_count}")
        # 핫넘버와 콜드넘버가 겹치지 않으려면 합이 전체 번호 수 이하
        if hot_count + cold_count > MAX_NUMBER:
            raise ValidationError(
                f"핫/콜드 개수의 합은 {MAX_NUMBER} 이하여야 합니다: hot={hot_count}, cold={cold_count}"
            )

    def count_numbers(self, draws: Sequence[DrawResult]) -> np.ndarray:
        """
        번호별 출현 횟수 계산 (보너스 번호 제외)

        Args:
            draws: 당첨 기록 목록

        Returns:
            길이 46 배열 (인덱스가 번호, 0번 인덱스는 사용하지 않음)
        """
        counts = np.zeros(MAX_NUMBER + 1, dtype=np.int64)
        for draw in draws:
            numbers = list(draw.numbers)
            if len(numbers) != NUMBERS_PER_DRAW or any(
                not MIN_NUMBER <= n <= MAX_NUMBER for n in numbers
            ):
                raise ValidationError(f"숫자 범위가 잘못되었습니다: {numbers} (회차: {draw.draw_no})")
            np.add.at(counts, numbers, 1)
        return counts

    def rank_numbers(self, counts: np.ndarray) -> np.ndarray:
        """
        출현 횟수 내림차순, 동률이면 번호 오름차순으로 정렬한 번호 배열 반환
        """
        numbers = np.arange(MIN_NUMBER, MAX_NUMBER + 1)
        order = np.lexsort((numbers, -counts[MIN_NUMBER:]))
        return numbers[order]

    @log_performance
    def analyze_numbers(self, draws: Sequence[DrawResult]) -> Tuple[List[int], List[int]]:
        """
        핫넘버/콜드넘버 계산

        Args:
            draws: 당첨 기록 목록 (빈 목록 허용)

        Returns:
            (핫넘버, 콜드넘버) 튜플. 핫넘버는 순위순, 콜드넘버는 가장 적게 나온 번호부터
        """
        ranked = self.rank_numbers(self.count_numbers(draws))
        hot_numbers = [int(n) for n in ranked[:self.config.hot_count]]
        cold_numbers = [int(n) for n in ranked[::-1][:self.config.cold_count]]

        logger.debug(f"빈도 분석 완료: {len(draws)}회차, 핫={hot_numbers}, 콜드={cold_numbers}")
        return hot_numbers, cold_numbers

    def frequency_table(self, draws: Sequence[DrawResult]) -> List[NumberFrequency]:
        """순위순 번호별 출현 통계"""
        counts = self.count_numbers(draws)
        return [
            NumberFrequency(number=int(n), frequency=int(counts[n]))
            for n in self.rank_numbers(counts)
        ]

    def to_dataframe(self, draws: Sequence[DrawResult]) -> pd.DataFrame:
        """번호별 출현 통계를 데이터프레임으로 변환"""
        table = self.frequency_table(draws)
        df = pd.DataFrame({
            'number': [f.number for f in table],
            'frequency': [f.frequency for f in table],
        })
        df['rank'] = np.arange(1, len(df) + 1)
        return df

    def range_distribution(self, draws: Sequence[DrawResult]) -> Dict[str, int]:
        """번호대별 분포"""
        counts = self.count_numbers(draws)
        return {label: int(counts[low:high + 1].sum()) for label, low, high in RANGE_BANDS}

    def odd_even_distribution(self, draws: Sequence[DrawResult]) -> Dict[str, int]:
        """홀짝 분포"""
        counts = self.count_numbers(draws)
        return {
            'odd': int(counts[1::2].sum()),
            'even': int(counts[2::2].sum()),
        }

    def low_high_distribution(self, draws: Sequence[DrawResult]) -> Dict[str, int]:
        """고저 분포 (저번호 1-22, 고번호 23-45)"""
        counts = self.count_numbers(draws)
        return {
            'low': int(counts[MIN_NUMBER:LOW_HIGH_BOUNDARY + 1].sum()),
            'high': int(counts[LOW_HIGH_BOUNDARY + 1:].sum()),
        }

    def uniformity_test(self, draws: Sequence[DrawResult]) -> Dict[str, Optional[float]]:
        """
        번호 출현이 균등분포를 따르는지 카이제곱 검정

        Returns:
            chi2_stat, p_value (기록이 없으면 None)
        """
        if not draws:
            return {'chi2_stat': None, 'p_value': None}

        observed = self.count_numbers(draws)[MIN_NUMBER:]
        chi2_stat, p_value = stats.chisquare(observed)
        return {'chi2_stat': float(chi2_stat), 'p_value': float(p_value)}

    @log_performance
    def analyze(self, draws: Sequence[DrawResult]) -> Dict[str, Any]:
        """전체 분석 수행"""
        hot_numbers, cold_numbers = self.analyze_numbers(draws)
        frequencies = self.frequency_table(draws)
        return {
            'total_draws': len(draws),
            'hot_numbers': hot_numbers,
            'cold_numbers': cold_numbers,
            'frequency': {f.number: f.frequency for f in frequencies},
            'range_distribution': self.range_distribution(draws),
            'oddeven_distribution': self.odd_even_distribution(draws),
            'lowhigh_distribution': self.low_high_distribution(draws),
            'uniformity': self.uniformity_test(draws),
        }

    def summarize(self, draws: Sequence[DrawResult]) -> FrequencyAnalysis:
        hot_numbers, cold_numbers = self.analyze_numbers(draws)
        return FrequencyAnalysis(
            total_draws=len(draws),
            hot_numbers=hot_numbers,
            cold_numbers=cold_numbers,
            frequencies=self.frequency_table(draws),
        )

    @safe_execute(default_return=None)
    def plot_frequency(self, draws: Sequence[DrawResult], save_path: Union[str, Path]) -> Optional[Path]:
        """
        번호별 출현 빈도 막대 그래프 저장

        Args:
            draws: 당첨 기록 목록
            save_path: 저장할 파일 경로

        Returns:
            저장된 경로 (실패 시 None)
        """
        counts = self.count_numbers(draws)
        hot_numbers, cold_numbers = self.analyze_numbers(draws)
        # 번호를 범주형으로 다루기 위해 문자열 라벨 사용
        labels = [str(n) for n in range(MIN_NUMBER, MAX_NUMBER + 1)]
        palette = {
            str(n): '#e65100' if n in hot_numbers else '#1565c0' if n in cold_numbers else '#b0bec5'
            for n in range(MIN_NUMBER, MAX_NUMBER + 1)
        }

        save_path = Path(save_path)
        save_path.parent.mkdir(parents=True, exist_ok=True)

        sns.set_theme(style="whitegrid")
        fig, ax = plt.subplots(figsize=(14, 5))
        try:
            sns.barplot(x=labels, y=counts[MIN_NUMBER:], hue=labels, palette=palette,
                        legend=False, ax=ax)
            ax.set_title(f'Number frequency (last {len(draws)} draws)')
            ax.set_xlabel('Number')
            ax.set_ylabel('Count')
            fig.tight_layout()
            fig.savefig(save_path)
        finally:
            plt.close(fig)

        logger.info(f"빈도 그래프 저장 완료: {save_path}")
        return save_path


_default_analyzer = FrequencyAnalyzer()

def analyze_numbers(draws: Sequence[DrawResult]) -> Tuple[List[int], List[int]]:
    """기본 설정(핫 10개, 콜드 10개)으로 핫넘버/콜드넘버 계산"""
    return _default_analyzer.analyze_numbers(draws)
