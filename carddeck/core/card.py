"""
扑克牌数据结构.

定义不可变的Card类。Card本身没有大小顺序，
牌组中的排列顺序由Deck使用的比较函数决定.
"""

from dataclasses import dataclass

from .types import Suit, Rank


@dataclass(frozen=True)
class Card:
    """
    表示一张扑克牌.

    不可变数据类，花色和点数都相同的两张牌视为同一张牌.

    Attributes:
        suit: 花色
        rank: 点数

    Examples:
        >>> card = Card(Suit.DIAMONDS, Rank.ACE)
        >>> str(card)
        'AD'
        >>> card.to_display_str()
        'A♦'
    """

    suit: Suit
    rank: Rank

    def __post_init__(self) -> None:
        """
        验证扑克牌数据的有效性.

        Raises:
            TypeError: 当花色或点数类型无效时
        """
        if not isinstance(self.suit, Suit):
            raise TypeError(f"suit must be a Suit, got {type(self.suit).__name__}")
        if not isinstance(self.rank, Rank):
            raise TypeError(f"rank must be a Rank, got {type(self.rank).__name__}")

    def __str__(self) -> str:
        """返回"点数+花色字母"形式的简短表示，如"10S" """
        return str(self.rank) + str(self.suit)

    def __repr__(self) -> str:
        return f"Card({self.suit.name}, {self.rank.name})"

    def to_display_str(self) -> str:
        """
        返回使用花色符号的显示字符串.

        Returns:
            str: 如"A♠"、"10♥"
        """
        return str(self.rank) + self.suit.symbol

    @classmethod
    def from_str(cls, card_str: str) -> 'Card':
        """
        从字符串创建扑克牌对象.

        Args:
            card_str: 格式为"点数花色"的字符串，如"AS"、"10d"、"Th"

        Returns:
            Card: 对应的扑克牌对象

        Raises:
            TypeError: 当输入不是字符串时
            ValueError: 当字符串格式无效时
        """
        if not isinstance(card_str, str):
            raise TypeError(f"card string must be str, got {type(card_str).__name__}")

        token = card_str.strip()
        if len(token) < 2:
            raise ValueError(f"Invalid card string: {card_str!r}")

        rank_str, suit_str = token[:-1], token[-1].upper()
        try:
            suit = Suit(suit_str)
        except ValueError:
            raise ValueError(f"Invalid suit in card string: {card_str!r}") from None
        return cls(suit, Rank.from_str(rank_str))
