"""
설정 관리 모듈

이 모듈은 프로젝트의 설정을 관리하는 Config 클래스를 제공합니다.
"""

from typing import Any, Dict, Optional
from dataclasses import dataclass, asdict
from pathlib import Path
import logging
import yaml

logger = logging.getLogger(__name__)

@dataclass
class StoreConfig:
    """당첨 기록 저장소 설정"""
    api_url: str = 'https://www.dhlottery.co.kr/common.do?method=getLottoNumber&drwNo={}'
    timeout: float = 30.0
    user_agent: str = 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36'
    first_draw_date: str = '2002-12-07'
    latest_slack: int = 5
    history_csv_path: Optional[str] = None

@dataclass
class AnalysisConfig:
    """빈도 분석 설정"""
    window: int = 20
    hot_count: int = 10
    cold_count: int = 10
    chart_path: Optional[str] = None

@dataclass
class PredictionConfig:
    """예측 번호 생성 설정"""
    identity_weight: int = 7
    pool_pick: int = 4
    balanced_pick: int = 3
    low_high_boundary: int = 22
    max_workers: int = 4

@dataclass
class LoggingConfig:
    """로깅 설정"""
    level: str = 'INFO'
    console_level: str = 'WARNING'
    log_file: Optional[str] = None

class Config:
    """설정 관리 클래스"""

    SECTIONS = {
        'store': StoreConfig,
        'analysis': AnalysisConfig,
        'prediction': PredictionConfig,
        'logging': LoggingConfig,
    }

    def __init__(self, config_dict: Dict[str, Any] = None):
        """
        설정 객체 초기화

        Args:
            config_dict: 설정 딕셔너리 (없는 섹션은 기본값 사용)
        """
        self._config = config_dict or {}

        self.store = StoreConfig(**self._config.get('store', {}))
        self.analysis = AnalysisConfig(**self._config.get('analysis', {}))
        self.prediction = PredictionConfig(**self._config.get('prediction', {}))
        self.logging = LoggingConfig(**self._config.get('logging', {}))

    def get(self, key: str, default: Any = None) -> Any:
        """
        설정값 조회

        Args:
            key: 설정 키
            default: 기본값

        Returns:
            설정값
        """
        return self._config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """
        설정값 설정

        Args:
            key: 설정 키
            value: 설정값
        """
        self._config[key] = value
        if key in self.SECTIONS:
            setattr(self, key, self.SECTIONS[key](**value))

    def update(self, config_dict: Dict[str, Any]) -> None:
        """
        설정 업데이트 (섹션 단위 병합)

        Args:
            config_dict: 업데이트할 설정 딕셔너리
        """
        for key, value in config_dict.items():
            if key in self.SECTIONS and isinstance(value, dict):
                merged = {**self._config.get(key, {}), **value}
                self.set(key, merged)
            else:
                self._config[key] = value

    def save(self, filepath: str) -> None:
        """
        설정 저장

        Args:
            filepath: 저장할 파일 경로
        """
        try:
            save_dir = Path(filepath).parent
            save_dir.mkdir(parents=True, exist_ok=True)

            with open(filepath, 'w', encoding='utf-8') as f:
                yaml.safe_dump(self.to_dict(), f, allow_unicode=True, default_flow_style=False, sort_keys=False)
            logger.info(f'설정 저장 완료: {filepath}')
        except Exception as e:
            logger.error(f'설정 저장 실패: {str(e)}')
            raise

    def load(self, filepath: str) -> None:
        """
        설정 로드

        Args:
            filepath: 로드할 파일 경로
        """
        try:
            if not Path(filepath).exists():
                raise FileNotFoundError(f'설정 파일을 찾을 수 없습니다: {filepath}')

            with open(filepath, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f) or {}
            logger.info(f'설정 로드 완료: {filepath}')

            # 설정 객체 재초기화
            self.__init__(loaded)
        except Exception as e:
            logger.error(f'설정 로드 실패: {str(e)}')
            raise

    @classmethod
    def from_file(cls, filepath: str) -> 'Config':
        config = cls()
        config.load(filepath)
        return config

    def to_dict(self) -> Dict[str, Any]:
        """
        설정을 딕셔너리로 변환

        Returns:
            설정 딕셔너리
        """
        return {
            'store': asdict(self.store),
            'analysis': asdict(self.analysis),
            'prediction': asdict(self.prediction),
            'logging': asdict(self.logging),
        }

    def __str__(self) -> str:
        """문자열 표현"""
        return str(self.to_dict())

    def __repr__(self) -> str:
        """표현식 문자열"""
        return f'Config({self.to_dict()})'
