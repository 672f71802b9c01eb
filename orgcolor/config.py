# -*- coding: utf-8 -*-
"""
프로젝트 설정 및 기본값 관리

환경변수 또는 기본값을 통해 설정합니다.

환경변수:
- ORGCOLOR_CONFIG: YAML 설정 파일 경로
- ORGCOLOR_LOG_LEVEL: 로그 레벨 (DEBUG, INFO, WARNING ...)
"""

import os
import logging
from pathlib import Path
from typing import Optional


# ============================================================
# 기본 경로 설정
# ============================================================

# 패키지 루트 디렉토리
PROJECT_ROOT = Path(__file__).parent.resolve()

# 기본 설정 파일 이름 (현재 작업 디렉토리 기준)
DEFAULT_CONFIG_NAME = 'orgcolor.yaml'

# 외부 설정 파일 경로 (환경변수로 설정 가능)
CONFIG_ENV_VAR = 'ORGCOLOR_CONFIG'
LOG_LEVEL_ENV_VAR = 'ORGCOLOR_LOG_LEVEL'


# ============================================================
# 색상 적용 기본값
# ============================================================

# 1행/1열은 헤더로 간주 (단위 행이 있으면 3으로 지정)
DEFAULT_MIN_ROW = 2
DEFAULT_MIN_COL = 2

# 테이블 바로 위의 주석 키워드 (#+HEADER: :color-min 3)
ANNOTATION_KEYWORD = 'HEADER'

# 주석에서 인식하는 키
KEY_COLOR = 'color'
KEY_COLOR_MIN = 'color-min'
KEY_COLOR_MIN_ROW = 'color-min-row'
KEY_COLOR_MIN_COL = 'color-min-col'

# color 키가 없을 때 사용하는 분류 함수 이름
DEFAULT_CLASSIFIER = 'correlation'


def get_config_path() -> Optional[Path]:
    """설정 파일 경로 반환 (환경변수 > 현재 디렉토리 순)"""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)

    local_path = Path.cwd() / DEFAULT_CONFIG_NAME
    if local_path.exists():
        return local_path

    return None


def get_log_level(default: int = logging.INFO) -> int:
    """환경변수에서 로그 레벨 읽기"""
    name = os.environ.get(LOG_LEVEL_ENV_VAR, '').strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


# ============================================================
# 로깅 설정
# ============================================================

def setup_logging(level: Optional[int] = None) -> logging.Logger:
    """로깅 설정"""
    logger = logging.getLogger('orgcolor')

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level if level is not None else get_log_level())
    return logger
