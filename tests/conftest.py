# -*- coding: utf-8 -*-
"""테스트 공통 fixture"""

import pytest

from orgcolor.document import OrgDocument


# 1행 헤더, 1열 라벨인 4행 x 3열 테이블
CORRELATION_ORG = """\
* 상관계수

#+NAME: corr
| name | a    | b    |
|------+------+------|
| x    | 1    | 0.35 |
| y    | 0.1  | -0.6 |
| z    | -0.4 | abc  |

본문
"""

# 주석이 붙은 테이블 2개
ANNOTATED_ORG = """\
#+HEADER: :color-min 3
| h1   | h2   | h3   |
| unit | unit | unit |
| 0.9  | 0.9  | 0.9  |

#+HEADER: :color-min-row 2 :color-min-col 3
| h1  | h2  | h3  |
| 0.9 | 0.9 | 0.9 |
"""


@pytest.fixture
def correlation_doc() -> OrgDocument:
    return OrgDocument.from_text(CORRELATION_ORG)


@pytest.fixture
def annotated_doc() -> OrgDocument:
    return OrgDocument.from_text(ANNOTATED_ORG)


@pytest.fixture
def org_file(tmp_path, monkeypatch):
    """임시 org 파일 (설정 파일/환경변수 영향 제거)"""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv('ORGCOLOR_CONFIG', raising=False)
    path = tmp_path / 'report.org'
    path.write_text(CORRELATION_ORG, encoding='utf-8')
    return path
