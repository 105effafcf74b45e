"""
오류 처리 및 로깅 유틸리티

콘솔 로그는 컬러로 표시하고, 로그 파일이 지정되면 같은 내용을 파일에도 기록합니다.
"""

import functools
import logging
import os
import sys
import time
import traceback
from pathlib import Path
from typing import Callable, Optional, TypeVar, Union

# ANSI 컬러 코드
COLORS = {
    'DEBUG': '\033[94m',  # 파란색
    'INFO': '\033[92m',   # 녹색
    'WARNING': '\033[93m', # 노란색
    'ERROR': '\033[91m',  # 빨간색
    'CRITICAL': '\033[41m\033[97m', # 배경 빨간색, 글자 흰색
    'RESET': '\033[0m'    # 리셋
}

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class ColoredFormatter(logging.Formatter):
    """컬러 로그 포매터"""

    def format(self, record):
        levelname = record.levelname
        message = super().format(record)

        if levelname in COLORS:
            return f"{COLORS[levelname]}{message}{COLORS['RESET']}"
        return message


def get_logger(name: str) -> logging.Logger:
    """모듈별 로거 생성"""
    return logging.getLogger(name)


def setup_logger(
    name: str,
    log_file: Optional[Union[str, Path]] = None,
    level: Union[int, str] = logging.INFO,
    console_level: Union[int, str] = logging.WARNING,
) -> logging.Logger:
    """로거 설정

    다시 호출하면 콘솔 핸들러는 재사용하고, 로그 파일 경로가 바뀌었으면 파일 핸들러를 교체합니다.

    Args:
        name: 로거 이름
        log_file: 로그 파일 경로 (없으면 콘솔만 사용)
        level: 로거 및 파일 핸들러 레벨
        console_level: 콘솔 핸들러 레벨

    Returns:
        설정된 로거
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    console_handlers = [
        h for h in logger.handlers
        if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
    ]
    if console_handlers:
        for handler in console_handlers:
            handler.setLevel(console_level)
    else:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(console_level)
        console_handler.setFormatter(ColoredFormatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(console_handler)

    target = os.path.abspath(log_file) if log_file else None
    for handler in [h for h in logger.handlers if isinstance(h, logging.FileHandler)]:
        if handler.baseFilename == target:
            handler.setLevel(level)
            return logger
        logger.removeHandler(handler)
        handler.close()

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(
            LOG_FORMAT + ' - [%(filename)s:%(lineno)d]',
            datefmt=DATE_FORMAT
        ))
        logger.addHandler(file_handler)

    return logger


def log_performance(func: Callable) -> Callable:
    """함수 실행 시간을 로깅하는 데코레이터"""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger(func.__module__)
        start_time = time.perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            logger.error(
                f"함수 {func.__name__} 실행 실패: "
                f"시간={time.perf_counter() - start_time:.3f}초, "
                f"오류={str(e)}"
            )
            raise

        logger.debug(f"함수 {func.__name__} 실행 완료: 시간={time.perf_counter() - start_time:.4f}초")
        return result
    return wrapper


T = TypeVar('T')


def safe_execute(default_return: Optional[T] = None) -> Callable:
    """
    안전한 실행 데코레이터

    부가 산출물(차트 등)처럼 실패해도 본 흐름을 막지 않아야 하는 함수에만 사용합니다.

    Args:
        default_return: 오류 발생 시 반환할 기본값
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Optional[T]:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                logger = get_logger(func.__module__)
                logger.error(
                    f"함수 {func.__name__} 실행 중 오류 발생:\n"
                    f"오류: {str(e)}\n"
                    f"스택 트레이스:\n{traceback.format_exc()}"
                )
                return default_return
        return wrapper
    return decorator
