"""
YAML 설정 파일 생성 스크립트
"""

from pathlib import Path

from lottobot.src.utils.config import Config

# 설정 파일 경로
config_path = Path(__file__).parent.parent.parent / 'config' / 'lotto_config.yaml'


def main(path: Path = config_path) -> Path:
    config = Config({
        'analysis': {
            'window': 20,
            'chart_path': 'lottobot/data/results/graph/frequency.png'
        },
        'logging': {
            'log_file': 'lottobot/logs/app.log'
        }
    })
    config.save(str(path))
    print(f"설정 파일이 생성되었습니다: {path}")
    return path


if __name__ == '__main__':
    main()
