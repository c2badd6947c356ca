"""
牌组核心模块.

包含花色/点数枚举、扑克牌、牌组排序规则、牌组和异常定义.
"""

from .types import Suit, Rank, get_all_suits, get_playable_ranks
from .card import Card
from .ordering import (
    SUIT_PRIORITY, SORT_STRATEGIES, compare_deck_cards, deck_sort_key,
    selection_sort, builtin_sort, is_canonical_order,
)
from .deck import Deck, STANDARD_DECK_SIZE, new_deck, new_deck_from
from .exceptions import CardDeckError, InvalidDealRequestError, DeckConfigError

__all__ = [
    # 枚举类型
    'Suit', 'Rank', 'get_all_suits', 'get_playable_ranks',

    # 卡牌和牌组
    'Card', 'Deck', 'STANDARD_DECK_SIZE', 'new_deck', 'new_deck_from',

    # 排序规则
    'SUIT_PRIORITY', 'SORT_STRATEGIES', 'compare_deck_cards', 'deck_sort_key',
    'selection_sort', 'builtin_sort', 'is_canonical_order',

    # 异常类型
    'CardDeckError', 'InvalidDealRequestError', 'DeckConfigError',
]
