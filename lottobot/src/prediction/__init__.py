"""
예측 번호 생성 모듈
"""

from .seeded_generator import STRATEGIES, SeededPredictionGenerator, derive_seed, generate_predictions

__all__ = ['STRATEGIES', 'SeededPredictionGenerator', 'derive_seed', 'generate_predictions']
