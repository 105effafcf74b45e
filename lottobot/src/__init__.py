"""
로또 통계/예측 시스템 - 소스 코드

이 패키지는 당첨 기록 조회, 빈도 분석, 예측 번호 생성, 포스트 데이터 조립 기능을 구현합니다.
"""

from .analysis.frequency_analyzer import FrequencyAnalyzer, analyze_numbers
from .models import DrawResult, NumberFrequency, PredictionSet
from .pipeline import PredictionPipeline
from .prediction.seeded_generator import SeededPredictionGenerator, generate_predictions

__all__ = [
    'DrawResult', 'FrequencyAnalyzer', 'NumberFrequency', 'PredictionPipeline', 'PredictionSet',
    'SeededPredictionGenerator', 'analyze_numbers', 'generate_predictions',
]
