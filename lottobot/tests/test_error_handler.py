"""
로깅 유틸리티 테스트 모듈
"""

import logging
import os
import shutil
import tempfile
import unittest
from pathlib import Path
import sys

# 프로젝트 루트 디렉토리를 Python 경로에 추가
project_root = str(Path(__file__).parent.parent.parent)
if project_root not in sys.path:
    sys.path.append(project_root)

from shared.error_handler import setup_logger


class TestSetupLogger(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.name = f'lottobot.test.{self.id()}'

    def tearDown(self):
        logger = logging.getLogger(self.name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def file_handlers(self, logger):
        return [h for h in logger.handlers if isinstance(h, logging.FileHandler)]

    def test_file_handler_replaced(self):
        """로그 파일 경로가 바뀌면 파일 핸들러 교체"""
        first = Path(self.temp_dir) / 'first' / 'app.log'
        second = Path(self.temp_dir) / 'second' / 'app.log'

        setup_logger(self.name, log_file=first)
        logger = setup_logger(self.name, log_file=second, level='DEBUG')

        handlers = self.file_handlers(logger)
        self.assertEqual(len(handlers), 1)
        self.assertEqual(handlers[0].baseFilename, os.path.abspath(second))
        self.assertEqual(len(logger.handlers), 2)

        logger.info('written to second')
        handlers[0].flush()
        self.assertIn('written to second', second.read_text(encoding='utf-8'))

    def test_same_file_reused(self):
        path = Path(self.temp_dir) / 'app.log'
        first = self.file_handlers(setup_logger(self.name, log_file=path))[0]
        second = self.file_handlers(setup_logger(self.name, log_file=path))

        self.assertEqual(second, [first])

    def test_file_handler_removed(self):
        """로그 파일 없이 다시 설정하면 콘솔만 사용"""
        setup_logger(self.name, log_file=Path(self.temp_dir) / 'app.log')
        logger = setup_logger(self.name, console_level='ERROR')

        self.assertEqual(self.file_handlers(logger), [])
        self.assertEqual(len(logger.handlers), 1)
        self.assertEqual(logger.handlers[0].level, logging.ERROR)


if __name__ == '__main__':
    unittest.main()
