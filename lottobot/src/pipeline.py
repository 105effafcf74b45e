"""
로또 포스트 데이터 생성 파이프라인

당첨 기록 조회 → 빈도 분석 → 계정별 예측 번호 생성 → 포스트 데이터 조립
"""

import datetime
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Iterable, List, Optional, Tuple

from shared.error_handler import setup_logger
from .analysis.frequency_analyzer import FrequencyAnalyzer
from .models import DrawResult
from .prediction.seeded_generator import SeededPredictionGenerator
from .report.report_builder import (
    DrawReport,
    PredictionReport,
    build_draw_report,
    build_prediction_report,
)
from .store.base import DrawRecordStore
from .utils.config import Config
from .utils.exceptions import DrawNotFoundError

logger = logging.getLogger(__name__)

class PredictionPipeline:
    """로또 당첨/예측 포스트 데이터 생성기"""

    def __init__(self, store: DrawRecordStore, config: Optional[Config] = None):
        """
        Args:
            store: 당첨 기록 저장소
            config: 설정 객체 (없으면 기본값)
        """
        self.store = store
        self.config = config or Config()
        setup_logger(
            'lottobot',
            log_file=self.config.logging.log_file,
            level=self.config.logging.level,
            console_level=self.config.logging.console_level,
        )
        self.analyzer = FrequencyAnalyzer(self.config.analysis)
        self.generator = SeededPredictionGenerator(self.config.prediction)

    def latest_draw_report(self) -> DrawReport:
        """최신 회차 당첨 결과 포스트 데이터"""
        draw = self.store.get_latest()
        logger.info(f"최신 회차: {draw.draw_no}회 ({draw.draw_date})")
        return build_draw_report(draw)

    def recent_draws(self) -> List[DrawResult]:
        """분석 구간(최근 N회차) 당첨 기록"""
        draws = self.store.get_recent(self.config.analysis.window)
        if not draws:
            raise DrawNotFoundError("분석할 당첨 기록이 없습니다.")
        return draws

    def _analyze(self, draws: List[DrawResult]) -> Tuple[List[int], List[int]]:
        # 핫/콜드 계산, 차트 경로가 설정되어 있으면 빈도 그래프도 저장
        hot, cold = self.analyzer.analyze_numbers(draws)
        if self.config.analysis.chart_path:
            self.analyzer.plot_frequency(draws, self.config.analysis.chart_path)
        return hot, cold

    def _build_report(self, draws: List[DrawResult], hot: List[int], cold: List[int],
                      identity: str, today: datetime.date) -> PredictionReport:
        predictions = self.generator.generate(hot, cold, identity, today)
        next_round = max(d.draw_no for d in draws) + 1
        return build_prediction_report(
            next_round, predictions, hot, cold, today=today, window=len(draws),
        )

    def prediction_report(self, identity: str, today: Optional[datetime.date] = None) -> PredictionReport:
        """
        계정별 예측 번호 포스트 데이터

        Args:
            identity: 계정 이름
            today: 기준 날짜 (없으면 오늘)

        Returns:
            PredictionReport
        """
        # 시드와 제목이 같은 날짜를 쓰도록 한 번만 결정
        today = today or datetime.date.today()
        draws = self.recent_draws()
        hot, cold = self._analyze(draws)
        return self._build_report(draws, hot, cold, identity, today)

    def prediction_reports(self, identities: Iterable[str],
                           today: Optional[datetime.date] = None) -> Dict[str, PredictionReport]:
        """
        여러 계정의 예측 번호 포스트 데이터를 병렬 생성

        당첨 기록 조회와 빈도 분석은 한 번만 수행하고, 계정마다 별도의 난수 생성기를 사용합니다.
        모든 계정은 같은 기준 날짜를 사용합니다.
        """
        today = today or datetime.date.today()
        identities = list(identities)
        draws = self.recent_draws()
        hot, cold = self._analyze(draws)

        with ThreadPoolExecutor(max_workers=self.config.prediction.max_workers) as executor:
            futures = {
                identity: executor.submit(self._build_report, draws, hot, cold, identity, today)
                for identity in identities
            }
            reports = {identity: future.result() for identity, future in futures.items()}

        logger.info(f"예측 포스트 데이터 생성 완료: {len(reports)}개 계정")
        return reports
