"""
牌组排序规则.

牌组的标准顺序:
    1. 按花色优先级: 方块 < 梅花 < 红桃 < 黑桃
    2. 同花色内按点数声明顺序: A < 2 < ... < K

花色优先级是一张独立的查找表，与Suit枚举的声明顺序无关.
这里定义的是牌在牌组中的排列顺序，不是牌面大小.
"""

from functools import cmp_to_key
from types import MappingProxyType
from typing import Callable, List, Mapping, Sequence, Tuple

from .card import Card
from .types import Suit


SUIT_PRIORITY: Mapping[Suit, int] = MappingProxyType({
    Suit.DIAMONDS: 0,
    Suit.CLUBS: 1,
    Suit.HEARTS: 2,
    Suit.SPADES: 3,
})

CardComparator = Callable[[Card, Card], int]
SortStrategy = Callable[[List[Card]], None]


def compare_deck_cards(c1: Card, c2: Card) -> int:
    """
    按牌组顺序比较两张牌.

    Args:
        c1: 第一张牌
        c2: 第二张牌

    Returns:
        int: c1排在c2之前返回负数，相同返回0，之后返回正数
    """
    difference = SUIT_PRIORITY[c1.suit] - SUIT_PRIORITY[c2.suit]
    if difference != 0:
        return difference
    return int(c1.rank) - int(c2.rank)


def deck_sort_key(card: Card) -> Tuple[int, int]:
    """与compare_deck_cards等价的排序键"""
    return SUIT_PRIORITY[card.suit], int(card.rank)


def selection_sort(cards: List[Card], compare: CardComparator = compare_deck_cards) -> None:
    """
    选择排序，原地修改.

    对每个位置i，从i向后找出最小的牌并交换到i。
    比较次数为O(n²)，对52张牌而言可以忽略.

    Args:
        cards: 待排序的牌列表
        compare: 比较函数
    """
    size = len(cards)
    for i in range(size):
        smallest = i
        for j in range(i + 1, size):
            if compare(cards[j], cards[smallest]) < 0:
                smallest = j
        if smallest != i:
            cards[i], cards[smallest] = cards[smallest], cards[i]


def builtin_sort(cards: List[Card], compare: CardComparator = compare_deck_cards) -> None:
    """使用list.sort的排序策略，结果与selection_sort相同"""
    cards.sort(key=cmp_to_key(compare))


SORT_STRATEGIES: Mapping[str, SortStrategy] = MappingProxyType({
    "selection": selection_sort,
    "builtin": builtin_sort,
})


def is_canonical_order(cards: Sequence[Card]) -> bool:
    """
    检查牌序列是否符合牌组标准顺序.

    Returns:
        bool: 每对相邻的牌都满足compare <= 0时返回True
    """
    return all(
        compare_deck_cards(cards[i], cards[i + 1]) <= 0
        for i in range(len(cards) - 1)
    )
