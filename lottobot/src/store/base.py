"""
당첨 기록 저장소 인터페이스
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List
import logging

from ..models import DrawResult
from ..utils.exceptions import DrawFetchError, DrawNotFoundError

logger = logging.getLogger(__name__)

class DrawRecordStore(ABC):
    """회차별 당첨 기록 조회"""

    @abstractmethod
    def get_round(self, draw_no: int) -> DrawResult:
        """
        특정 회차 당첨 기록 조회

        Raises:
            DrawNotFoundError: 아직 추첨되지 않았거나 없는 회차
            DrawFetchError: 조회 중 통신/파싱 오류
        """

    @abstractmethod
    def get_latest(self) -> DrawResult:
        """가장 최근에 추첨된 회차 조회"""

    def get_recent(self, count: int) -> List[DrawResult]:
        """
        최근 N회차 당첨 기록 조회 (최신 회차부터)

        조회에 실패한 회차는 건너뜁니다.

        Args:
            count: 조회할 회차 수

        Returns:
            최신순 당첨 기록 목록
        """
        latest = self.get_latest()
        results = [latest]

        for offset in range(1, count):
            draw_no = latest.draw_no - offset
            if draw_no < 1:
                break
            try:
                results.append(self.get_round(draw_no))
            except (DrawFetchError, DrawNotFoundError) as e:
                logger.warning(f"{draw_no}회차 조회 실패, 건너뜀: {e}")

        logger.info(f"최근 {len(results)}회차 조회 완료 ({latest.draw_no}회 기준)")
        return results[:count]

class InMemoryDrawStore(DrawRecordStore):
    """이미 가지고 있는 당첨 기록을 감싸는 저장소"""

    def __init__(self, draws: Iterable[DrawResult] = ()):
        self._draws: Dict[int, DrawResult] = {d.draw_no: d for d in draws}

    def __len__(self) -> int:
        return len(self._draws)

    def add(self, draw: DrawResult) -> None:
        self._draws[draw.draw_no] = draw

    def get_round(self, draw_no: int) -> DrawResult:
        try:
            return self._draws[draw_no]
        except KeyError:
            raise DrawNotFoundError(f"{draw_no}회차 기록이 없습니다.", draw_no) from None

    def get_latest(self) -> DrawResult:
        if not self._draws:
            raise DrawNotFoundError("저장된 당첨 기록이 없습니다.")
        return self._draws[max(self._draws)]
