"""
설정 및 예외 유틸리티
"""

from .config import AnalysisConfig, Config, LoggingConfig, PredictionConfig, StoreConfig
from .exceptions import (
    DrawFetchError,
    DrawNotFoundError,
    InvalidInputError,
    LottoError,
    ValidationError,
)

__all__ = [
    'AnalysisConfig', 'Config', 'LoggingConfig', 'PredictionConfig', 'StoreConfig',
    'DrawFetchError', 'DrawNotFoundError', 'InvalidInputError', 'LottoError', 'ValidationError',
]
