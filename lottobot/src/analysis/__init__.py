"""
로또 번호 분석 모듈

이 패키지는 로또 번호의 출현 빈도를 분석하는 기능을 제공합니다.
"""

from .frequency_analyzer import FrequencyAnalysis, FrequencyAnalyzer, analyze_numbers

__all__ = ['FrequencyAnalysis', 'FrequencyAnalyzer', 'analyze_numbers']
