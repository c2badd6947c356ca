"""
carddeck测试配置 - pytest配置文件

提供通用的牌组fixture和测试标记定义。
"""

from typing import List

import pytest

from carddeck.core import Card, Deck
from carddeck.tests.helpers import build_canonical_cards


@pytest.fixture
def canonical_cards() -> List[Card]:
    """标准顺序的52张牌"""
    return build_canonical_cards()


@pytest.fixture
def deck() -> Deck:
    """新建的标准牌组"""
    return Deck()


@pytest.fixture
def reversed_deck(canonical_cards) -> Deck:
    """通过测试注入接口创建的倒序牌组"""
    return Deck.from_cards(list(reversed(canonical_cards)))


def pytest_configure(config):
    """pytest配置"""
    config.addinivalue_line(
        "markers", "unit: 单元测试"
    )
    config.addinivalue_line(
        "markers", "fast: 快速测试"
    )
    config.addinivalue_line(
        "markers", "property_test: 标记基于属性的测试"
    )
    config.addinivalue_line(
        "markers", "integration: 标记集成测试"
    )
