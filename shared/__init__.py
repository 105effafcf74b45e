"""
공용 유틸리티 (로깅, 오류 처리)
"""

from .error_handler import get_logger, log_performance, safe_execute, setup_logger

__all__ = ['get_logger', 'log_performance', 'safe_execute', 'setup_logger']
