"""
CSV 파일 기반 당첨 기록 저장소

과거 당첨 번호 CSV(seqNum, num1~num6, bonus 필수)를 읽어 회차별로 제공합니다.
"""

from pathlib import Path
from typing import Dict, List, Union
import logging

import pandas as pd

from ..models import DrawResult, MAX_NUMBER, MIN_NUMBER
from ..utils.exceptions import DrawNotFoundError, ValidationError
from .base import DrawRecordStore

logger = logging.getLogger(__name__)

NUMBER_COLUMNS = ['num1', 'num2', 'num3', 'num4', 'num5', 'num6']
REQUIRED_COLUMNS = ['seqNum'] + NUMBER_COLUMNS + ['bonus']
OPTIONAL_COLUMNS = {'date': '', 'first_prize': 0, 'first_winners': 0}

class CsvDrawStore(DrawRecordStore):
    """CSV 당첨 기록 저장소"""

    def __init__(self, path: Union[str, Path]):
        """
        Args:
            path: 당첨 기록 CSV 경로
        """
        self.path = Path(path)
        self._draws: Dict[int, DrawResult] = {}
        self.load_data()

    def load_data(self) -> None:
        """데이터 로드"""
        if not self.path.exists():
            raise FileNotFoundError(f"데이터 파일을 찾을 수 없습니다: {self.path}")

        df = pd.read_csv(self.path)
        self._validate_data(df)
        self._draws = {draw.draw_no: draw for draw in self._to_draws(df)}
        logger.info(f"데이터 로드 완료: {len(self._draws)} 행 ({self.path})")

    def _validate_data(self, df: pd.DataFrame) -> None:
        """
        데이터 유효성 검사

        Args:
            df: 검사할 데이터프레임
        """
        missing_columns = [col for col in REQUIRED_COLUMNS if col not in df.columns]
        if missing_columns:
            raise ValidationError(f"필수 컬럼이 없습니다: {missing_columns}")

        if df[REQUIRED_COLUMNS].isna().any().any():
            raise ValidationError("비어 있는 값이 있습니다.")

        # 숫자 범위 검사
        for col in NUMBER_COLUMNS:
            if not df[col].between(MIN_NUMBER, MAX_NUMBER).all():
                raise ValidationError(f"숫자 범위가 잘못되었습니다: {col}")

        # 중복 번호 검사
        duplicated = df[NUMBER_COLUMNS].nunique(axis=1) != len(NUMBER_COLUMNS)
        if duplicated.any():
            rounds = df.loc[duplicated, 'seqNum'].tolist()
            raise ValidationError(f"중복된 번호가 있습니다 (회차: {rounds})")

        if df['seqNum'].duplicated().any():
            raise ValidationError("중복된 회차가 있습니다.")

    def _to_draws(self, df: pd.DataFrame) -> List[DrawResult]:
        df = df.copy()
        for col, default in OPTIONAL_COLUMNS.items():
            if col not in df.columns:
                df[col] = default
            df[col] = df[col].fillna(default)

        return [
            DrawResult(
                draw_no=int(row['seqNum']),
                draw_date=str(row['date']),
                numbers=tuple(int(row[col]) for col in NUMBER_COLUMNS),
                bonus=int(row['bonus']),
                first_prize=int(row['first_prize']),
                first_winners=int(row['first_winners']),
            )
            for row in df.to_dict('records')
        ]

    def get_round(self, draw_no: int) -> DrawResult:
        try:
            return self._draws[draw_no]
        except KeyError:
            raise DrawNotFoundError(f"{draw_no}회차 기록이 없습니다.", draw_no) from None

    def get_latest(self) -> DrawResult:
        if not self._draws:
            raise DrawNotFoundError("저장된 당첨 기록이 없습니다.")
        return self._draws[max(self._draws)]

    def to_dataframe(self) -> pd.DataFrame:
        """회차순 당첨 기록 데이터프레임"""
        records = [
            {'seqNum': d.draw_no, 'date': d.draw_date,
             **{col: n for col, n in zip(NUMBER_COLUMNS, d.numbers)},
             'bonus': d.bonus, 'first_prize': d.first_prize, 'first_winners': d.first_winners}
            for d in sorted(self._draws.values(), key=lambda d: d.draw_no)
        ]
        return pd.DataFrame(records, columns=['seqNum', 'date'] + NUMBER_COLUMNS +
                            ['bonus', 'first_prize', 'first_winners'])
