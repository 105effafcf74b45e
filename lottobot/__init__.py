"""
로또 통계/예측 시스템

이 패키지는 블로그 자동 포스팅용 로또 당첨 번호 분석 및 계정별 예측 번호 생성 기능을 제공합니다.
"""

from pathlib import Path
from .src.utils.config import Config
from .src.analysis.frequency_analyzer import FrequencyAnalyzer, analyze_numbers
from .src.prediction.seeded_generator import SeededPredictionGenerator, generate_predictions
from .src.models import DrawResult, NumberFrequency, PredictionSet
from .src.pipeline import PredictionPipeline
from .src.store import CsvDrawStore, DrawRecordStore, InMemoryDrawStore, LottoApiStore

# 프로젝트 루트 디렉토리
ROOT_DIR = Path(__file__).parent

# 버전
__version__ = "1.0.0"

__all__ = [
    'Config', 'CsvDrawStore', 'DrawRecordStore', 'DrawResult', 'FrequencyAnalyzer',
    'InMemoryDrawStore', 'LottoApiStore', 'NumberFrequency', 'PredictionPipeline', 'PredictionSet',
    'SeededPredictionGenerator', 'analyze_numbers', 'generate_predictions',
]
