"""
52张扑克牌组的构建、洗牌、排序和发牌.

核心接口见carddeck.core，命令行演示见carddeck.ui.cli.
"""

from .core import (
    Suit, Rank, Card, Deck, new_deck, new_deck_from,
    compare_deck_cards, CardDeckError, InvalidDealRequestError, DeckConfigError,
)
from .config import DemoConfig, LoggingConfig

__version__ = "0.1.0"

__all__ = [
    'Suit', 'Rank', 'Card', 'Deck', 'new_deck', 'new_deck_from',
    'compare_deck_cards', 'CardDeckError', 'InvalidDealRequestError', 'DeckConfigError',
    'DemoConfig', 'LoggingConfig',
]
