"""
동행복권 API 기반 당첨 기록 저장소
"""

import datetime
import logging
import threading
from typing import Any, Dict, Optional

import requests

from ..models import DrawResult
from ..utils.config import StoreConfig
from ..utils.exceptions import DrawFetchError, DrawNotFoundError
from .base import DrawRecordStore
from .schemas import convert_new_format, is_drawn, load_draw

logger = logging.getLogger(__name__)

class LottoApiStore(DrawRecordStore):
    """동행복권 API에서 회차별 당첨 기록을 가져오는 저장소"""

    def __init__(self, config: Optional[StoreConfig] = None, session: Optional[requests.Session] = None):
        """
        Args:
            config: 저장소 설정 (없으면 기본값)
            session: HTTP 세션 (테스트에서 주입)
        """
        self.config = config or StoreConfig()
        self.session = session or requests.Session()
        self.session.headers.update({
            'User-Agent': self.config.user_agent,
            'Accept': 'application/json, text/javascript, */*; q=0.01',
        })
        # 추첨이 끝난 회차는 바뀌지 않으므로 메모리에 보관
        self._cache: Dict[int, DrawResult] = {}
        self._cache_lock = threading.Lock()

    def _request(self, draw_no: int) -> Dict[str, Any]:
        url = self.config.api_url.format(draw_no)
        logger.debug(f"{draw_no}회차 요청: {url}")
        try:
            response = self.session.get(url, timeout=self.config.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            raise DrawFetchError(f"{draw_no}회차: 네트워크 오류 ({e})") from e
        except ValueError as e:
            raise DrawFetchError(f"{draw_no}회차: 데이터 파싱 오류 ({e})") from e

        if not isinstance(payload, dict):
            raise DrawFetchError(f"{draw_no}회차: 예상하지 못한 응답 형식")

        # 신 API 형식 처리
        if 'data' in payload:
            payload = convert_new_format(payload) or {'returnValue': 'fail'}
        return payload

    def get_round(self, draw_no: int) -> DrawResult:
        if draw_no < 1:
            raise DrawNotFoundError(f"{draw_no}회차는 존재하지 않습니다.", draw_no)

        with self._cache_lock:
            cached = self._cache.get(draw_no)
        if cached is not None:
            return cached

        payload = self._request(draw_no)
        if not is_drawn(payload):
            raise DrawNotFoundError(f"{draw_no}회차는 아직 추첨 전입니다.", draw_no)

        draw = load_draw(payload)
        with self._cache_lock:
            self._cache[draw.draw_no] = draw
        logger.info(f"{draw.draw_no}회차 조회 완료 ({draw.draw_date})")
        return draw

    def estimate_round(self, today: Optional[datetime.date] = None) -> int:
        """
        최신 회차 추정 (2002년 12월 7일 1회차 기준)

        계산 오차를 방지하기 위해 여유 회차를 더하고, 실제 데이터로 확인합니다.
        """
        today = today or datetime.date.today()
        first_draw = datetime.date.fromisoformat(self.config.first_draw_date)
        weeks = (today - first_draw).days // 7
        return weeks + self.config.latest_slack

    def get_latest(self, today: Optional[datetime.date] = None) -> DrawResult:
        """
        최신 회차 조회

        추정 회차부터 한 회차씩 내려가며 추첨이 끝난 회차를 찾습니다.

        Raises:
            DrawNotFoundError: 1회차까지 내려가도 기록이 없는 경우
            DrawFetchError: 조회 중 통신/파싱 오류
        """
        draw_no = self.estimate_round(today)
        while draw_no >= 1:
            try:
                return self.get_round(draw_no)
            except DrawNotFoundError:
                logger.debug(f"{draw_no}회차 추첨 전, 이전 회차 조회")
                draw_no -= 1

        raise DrawNotFoundError("추첨된 회차를 찾을 수 없습니다.")

    def close(self) -> None:
        self.session.close()
