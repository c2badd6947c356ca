"""
扑克牌组相关类型定义.

定义扑克牌的花色、点数等基础枚举类型.
花色的声明顺序只是枚举的自然顺序，与牌组排序使用的优先级无关.
"""

from enum import Enum, IntEnum
from typing import List


class Suit(Enum):
    """
    扑克牌花色枚举.

    值为花色的单字母代码，symbol属性返回Unicode符号.
    """

    HEARTS = "H"      # 红桃
    DIAMONDS = "D"    # 方块
    CLUBS = "C"       # 梅花
    SPADES = "S"      # 黑桃

    def __str__(self) -> str:
        return self.value

    @property
    def symbol(self) -> str:
        """返回花色符号"""
        symbols = {
            Suit.HEARTS: "♥",
            Suit.DIAMONDS: "♦",
            Suit.CLUBS: "♣",
            Suit.SPADES: "♠",
        }
        return symbols[self]


class Rank(IntEnum):
    """
    扑克牌点数枚举.

    A为最小，K为最大，数值即声明顺序.
    JOKER是占位成员，预留给无点数的牌，构建52张牌组时总是被跳过.
    """

    JOKER = 0
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        """返回点数的简短表示"""
        return _RANK_TOKENS[self]

    @property
    def is_playable(self) -> bool:
        """占位点数不参与52张牌组"""
        return self is not Rank.JOKER

    @classmethod
    def from_str(cls, rank_str: str) -> 'Rank':
        """
        从字符串创建Rank对象.

        Args:
            rank_str: 点数字符串，如"A"、"10"、"T"、"k"

        Returns:
            Rank: 对应的点数

        Raises:
            ValueError: 当字符串不是有效点数时
        """
        token = rank_str.strip().upper()
        if token == "T":
            token = "10"
        for rank, rank_token in _RANK_TOKENS.items():
            if rank.is_playable and rank_token == token:
                return rank
        raise ValueError(f"Invalid rank: {rank_str!r}")


_RANK_TOKENS = {
    Rank.JOKER: "*",
    Rank.ACE: "A",
    Rank.TWO: "2", Rank.THREE: "3", Rank.FOUR: "4", Rank.FIVE: "5",
    Rank.SIX: "6", Rank.SEVEN: "7", Rank.EIGHT: "8", Rank.NINE: "9",
    Rank.TEN: "10", Rank.JACK: "J", Rank.QUEEN: "Q", Rank.KING: "K",
}


def get_all_suits() -> List[Suit]:
    """
    获取所有花色.

    Returns:
        List[Suit]: 按声明顺序排列的四种花色
    """
    return list(Suit)


def get_playable_ranks() -> List[Rank]:
    """
    获取所有可用点数.

    Returns:
        List[Rank]: 按声明顺序排列的13种点数，不包含占位点数
    """
    return [rank for rank in Rank if rank.is_playable]
