"""
시드 기반 예측 번호 생성기 테스트 모듈
"""

import datetime
import unittest
from pathlib import Path
import sys

# 프로젝트 루트 디렉토리를 Python 경로에 추가
project_root = str(Path(__file__).parent.parent.parent)
if project_root not in sys.path:
    sys.path.append(project_root)

from lottobot.src.prediction.seeded_generator import (
    STRATEGIES,
    SeededPredictionGenerator,
    derive_seed,
    generate_predictions,
)
from lottobot.src.utils.config import PredictionConfig
from lottobot.src.utils.exceptions import InvalidInputError

TODAY = datetime.date(2026, 10, 19)
HOT = [7, 12, 33, 1, 18, 27, 40, 3, 21, 9]
COLD = [45, 44, 43, 38, 36, 31, 29, 25, 16, 14]


class TestSeededPredictionGenerator(unittest.TestCase):
    """예측 번호 생성 테스트"""

    def setUp(self):
        self.generator = SeededPredictionGenerator()

    def assertValidSet(self, numbers):
        self.assertEqual(len(numbers), 6)
        self.assertEqual(len(set(numbers)), 6)
        self.assertTrue(all(1 <= n <= 45 for n in numbers))
        self.assertTrue(all(a < b for a, b in zip(numbers, numbers[1:])))
        self.assertTrue(all(isinstance(n, int) for n in numbers))

    def test_derive_seed(self):
        """날짜 문자 코드 합 + 계정 문자 코드 합 × 7"""
        # '2026-10-19' 문자 코드 합 = 495
        self.assertEqual(derive_seed('', TODAY), 495)
        self.assertEqual(derive_seed('a', TODAY), 495 + 97 * 7)

    def test_derive_seed_custom_weight(self):
        generator = SeededPredictionGenerator(PredictionConfig(identity_weight=3))
        self.assertEqual(generator.derive_seed('a', TODAY), 495 + 97 * 3)

    def test_five_strategies_in_order(self):
        """전략 5개, 고정 순서"""
        predictions = self.generator.generate(HOT, COLD, 'accountA', TODAY)

        self.assertEqual(len(predictions), 5)
        self.assertEqual([p.key for p in predictions], [s[0] for s in STRATEGIES])
        self.assertEqual(
            [p.key for p in predictions],
            ['random', 'hot', 'cold', 'balanced', 'high_low'],
        )
        for p in predictions:
            self.assertTrue(p.name)
            self.assertTrue(p.method)

    def test_determinism(self):
        """같은 날, 같은 계정은 같은 결과"""
        first = generate_predictions(HOT, COLD, 'accountA', TODAY)
        second = generate_predictions(HOT, COLD, 'accountA', TODAY)
        self.assertEqual(first, second)

    def test_accounts_differ(self):
        """같은 날, 다른 계정은 다른 결과"""
        a = generate_predictions(HOT, COLD, 'accountA', TODAY)
        b = generate_predictions(HOT, COLD, 'accountB', TODAY)
        self.assertNotEqual([p.numbers for p in a], [p.numbers for p in b])

    def test_days_differ(self):
        """같은 계정, 다른 날은 다른 결과"""
        a = generate_predictions(HOT, COLD, 'accountA', TODAY)
        b = generate_predictions(HOT, COLD, 'accountA', TODAY + datetime.timedelta(days=1))
        self.assertNotEqual([p.numbers for p in a], [p.numbers for p in b])

    def test_identity_sensitivity(self):
        """여러 계정의 결과가 모두 같지 않음"""
        results = {
            tuple(p.numbers for p in generate_predictions(HOT, COLD, f'blog-{i:02d}', TODAY))
            for i in range(25)
        }
        self.assertGreater(len(results), 1)

    def test_set_invariants(self):
        """중복 없음, 범위, 오름차순"""
        for i in range(30):
            for p in self.generator.generate(HOT, COLD, f'user{i}', TODAY):
                self.assertValidSet(list(p.numbers))

    def test_high_low_split(self):
        """고저 균형은 저번호 3개, 고번호 3개"""
        for i in range(50):
            high_low = self.generator.generate(HOT, COLD, f'user{i}', TODAY)[4]
            self.assertEqual(sum(1 for n in high_low.numbers if n <= 22), 3)
            self.assertEqual(sum(1 for n in high_low.numbers if n >= 23), 3)

    def test_pool_strategies_use_pools(self):
        """핫/콜드 조합은 풀에서 4개 이상, 균형 조합은 핫/콜드에서 각 3개 이상"""
        for i in range(30):
            predictions = self.generator.generate(HOT, COLD, f'user{i}', TODAY)
            self.assertGreaterEqual(len(set(predictions[1].numbers) & set(HOT)), 4)
            self.assertGreaterEqual(len(set(predictions[2].numbers) & set(COLD)), 4)
            self.assertGreaterEqual(len(set(predictions[3].numbers) & set(HOT)), 3)
            self.assertGreaterEqual(len(set(predictions[3].numbers) & set(COLD)), 3)

    def test_empty_pools(self):
        """핫/콜드 목록이 비어도 랜덤으로 채움"""
        for p in self.generator.generate([], [], 'accountA', TODAY):
            self.assertValidSet(list(p.numbers))

    def test_small_pools(self):
        """풀이 4개보다 작으면 있는 만큼만 사용"""
        predictions = self.generator.generate([5, 6], [44], 'accountA', TODAY)
        self.assertTrue({5, 6} <= set(predictions[1].numbers))
        self.assertIn(44, predictions[2].numbers)
        for p in predictions:
            self.assertValidSet(list(p.numbers))

    def test_overlapping_pools(self):
        """핫/콜드가 겹쳐도 중복 없이 채움"""
        pool = [1, 2, 3, 4, 5]
        for p in self.generator.generate(pool, pool, 'accountA', TODAY):
            self.assertValidSet(list(p.numbers))

    def test_duplicate_pool_entries(self):
        for p in self.generator.generate([9, 9, 9, 9, 9], [10, 10], 'accountA', TODAY):
            self.assertValidSet(list(p.numbers))

    def test_invalid_input(self):
        """범위 밖 번호나 정수가 아닌 값은 InvalidInputError"""
        for hot, cold in [
            ([0, 1, 2], COLD),
            (HOT, [46]),
            (['7'], COLD),
            ([7.5], COLD),
            (HOT, [None]),
            ([True], COLD),
        ]:
            with self.assertRaises(InvalidInputError):
                self.generator.generate(hot, cold, 'accountA', TODAY)

    def test_does_not_mutate_inputs(self):
        hot, cold = list(HOT), list(COLD)
        self.generator.generate(hot, cold, 'accountA', TODAY)
        self.assertEqual(hot, HOT)
        self.assertEqual(cold, COLD)

    def test_invalid_config_rejected(self):
        """생성이 끝나지 않는 설정은 생성기 초기화 시점에 거부"""
        for kwargs in [
            {'low_high_boundary': 44},
            {'low_high_boundary': 43},
            {'low_high_boundary': 2},
            {'low_high_boundary': 0},
            {'pool_pick': -1},
            {'pool_pick': 7},
            {'balanced_pick': -1},
        ]:
            with self.assertRaises(InvalidInputError):
                SeededPredictionGenerator(PredictionConfig(**kwargs))

    def test_boundary_extremes(self):
        """경계값 3, 42에서도 저번호 3개 + 고번호 3개"""
        for boundary in (3, 42):
            generator = SeededPredictionGenerator(PredictionConfig(low_high_boundary=boundary))
            high_low = generator.generate(HOT, COLD, 'accountA', TODAY)[4]
            self.assertValidSet(list(high_low.numbers))
            self.assertEqual(sum(1 for n in high_low.numbers if n <= boundary), 3)

    def test_default_date_is_today(self):
        """날짜를 생략하면 오늘 기준"""
        self.assertEqual(
            self.generator.derive_seed('accountA'),
            self.generator.derive_seed('accountA', datetime.date.today()),
        )


if __name__ == '__main__':
    unittest.main()
