"""
扑克牌组管理.

定义Deck类，管理标准52张牌的构建、洗牌、排序和分组发牌.
"""

import logging
import random
from typing import Iterator, List, Optional, Sequence

from .card import Card
from .exceptions import InvalidDealRequestError
from .ordering import SortStrategy, selection_sort
from .types import get_all_suits, get_playable_ranks

STANDARD_DECK_SIZE = 52
SEED_MASK = 0xFFFFFFFF


class Deck:
    """
    表示一副52张的扑克牌.

    牌组独占内部的牌列表，所有读取接口都返回独立副本.
    只有shuffle和sort会改变牌的顺序，二者都只做排列，不增删牌.

    Deck不是线程安全的，多线程访问需要调用方自行加锁.

    Attributes:
        _cards: 当前顺序的牌列表
        _sort_strategy: 原地排序函数
        _logger: 日志记录器

    Examples:
        >>> deck = Deck()
        >>> deck.shuffle(15)
        >>> deck.sort()
        >>> str(deck.snapshot()[0])
        'AD'
    """

    def __init__(self, sort_strategy: Optional[SortStrategy] = None,
                 logger: Optional[logging.Logger] = None) -> None:
        """
        创建一副标准顺序的新牌组.

        先按花色、点数的声明顺序生成52张牌（跳过占位点数），
        再立即排序为牌组标准顺序.

        Args:
            sort_strategy: 原地排序函数，默认使用选择排序
            logger: 日志记录器，默认使用模块日志
        """
        self._init_collaborators(sort_strategy, logger)
        self._cards: List[Card] = [
            Card(suit, rank)
            for suit in get_all_suits()
            for rank in get_playable_ranks()
        ]
        self.sort()

    @classmethod
    def from_cards(cls, cards: Sequence[Card],
                   sort_strategy: Optional[SortStrategy] = None,
                   logger: Optional[logging.Logger] = None) -> 'Deck':
        """
        使用外部提供的牌序列创建牌组，主要用于测试.

        注意: 这里有意绕过了标准构造的不变量。
        传入序列会被原样复制，不排序、不去重、也不检查是否完整.
        重复或缺失的牌由调用方负责，这里只记录一条警告日志.

        Args:
            cards: 有序的牌序列
            sort_strategy: 原地排序函数
            logger: 日志记录器

        Returns:
            Deck: 内部顺序与cards相同的新牌组
        """
        deck = cls.__new__(cls)
        deck._init_collaborators(sort_strategy, logger)
        deck._cards = list(cards)
        if len(deck._cards) != STANDARD_DECK_SIZE or len(set(deck._cards)) != len(deck._cards):
            deck._logger.warning(
                "Deck built from %d cards (%d unique); expected %d unique cards",
                len(deck._cards), len(set(deck._cards)), STANDARD_DECK_SIZE,
            )
        return deck

    def _init_collaborators(self, sort_strategy: Optional[SortStrategy],
                            logger: Optional[logging.Logger]) -> None:
        self._sort_strategy: SortStrategy = sort_strategy or selection_sort
        self._logger = logger or logging.getLogger(__name__)

    def shuffle(self, seed: int) -> None:
        """
        使用给定种子洗牌.

        采用Fisher-Yates算法: 从最后一个位置向前，每一步与0..i中
        随机选出的位置交换。相同种子、相同初始顺序总是得到相同结果.

        警告: 这不是安全的洗牌。种子只有2^32种取值，
        远小于52!（约8.07e67）种排列，不能用于真钱游戏等需要不可预测性的场景.

        Args:
            seed: 32位整数种子，超出范围的值按低32位截断

        Raises:
            TypeError: 当seed不是整数时
        """
        if isinstance(seed, bool) or not isinstance(seed, int):
            raise TypeError(f"seed must be an int, got {type(seed).__name__}")

        random.Random(seed & SEED_MASK).shuffle(self._cards)
        self._logger.debug("Shuffled deck with seed %d", seed)

    def sort(self) -> None:
        """将牌组原地恢复为标准顺序: 方块、梅花、红桃、黑桃，同花色内A到K"""
        self._sort_strategy(self._cards)
        self._logger.debug("Sorted deck using %s", getattr(self._sort_strategy, "__name__", "strategy"))

    def snapshot(self) -> List[Card]:
        """
        获取当前牌序的副本.

        Returns:
            List[Card]: 与内部列表无关联的新列表
        """
        return list(self._cards)

    def deal_hand(self, set_count: int, cards_per_set: int) -> List[List[Card]]:
        """
        从牌组顶部取出连续的牌并分组，不改变牌组.

        第k组为当前顺序中[k*cards_per_set, (k+1)*cards_per_set)位置的牌.

        Args:
            set_count: 分组数
            cards_per_set: 每组张数

        Returns:
            List[List[Card]]: set_count个分组，每组cards_per_set张牌

        Raises:
            InvalidDealRequestError: 参数不是非负整数，总张数超过牌组张数，
                或分组数超过牌组张数时（每组0张也一样）
        """
        available = len(self._cards)
        for value in (set_count, cards_per_set):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidDealRequestError(set_count, cards_per_set, available,
                                              "arguments must be integers")
        if set_count < 0 or cards_per_set < 0:
            raise InvalidDealRequestError(set_count, cards_per_set, available,
                                          "arguments must be non-negative")
        if set_count * cards_per_set > available:
            raise InvalidDealRequestError(set_count, cards_per_set, available,
                                          "not enough cards")
        if set_count > available:
            raise InvalidDealRequestError(set_count, cards_per_set, available,
                                          "more sets than cards")

        return [
            self._cards[index * cards_per_set:(index + 1) * cards_per_set]
            for index in range(set_count)
        ]

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        """遍历当前牌序的副本"""
        return iter(self.snapshot())

    def __str__(self) -> str:
        return " ".join(str(card) for card in self._cards)

    def __repr__(self) -> str:
        return f"Deck(cards={len(self._cards)})"


def new_deck(sort_strategy: Optional[SortStrategy] = None) -> Deck:
    """创建标准顺序的新牌组"""
    return Deck(sort_strategy=sort_strategy)


def new_deck_from(cards: Sequence[Card]) -> Deck:
    """使用给定牌序列创建牌组，见Deck.from_cards"""
    return Deck.from_cards(cards)
