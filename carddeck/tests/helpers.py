"""测试辅助函数"""

from typing import List

from carddeck.core import Card, Rank, Suit

# 牌组标准顺序中的花色顺序
CANONICAL_SUIT_ORDER = [Suit.DIAMONDS, Suit.CLUBS, Suit.HEARTS, Suit.SPADES]


def build_canonical_cards() -> List[Card]:
    """按标准顺序逐张列出52张牌，不依赖被测的排序代码"""
    ranks = [
        Rank.ACE, Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE, Rank.SIX, Rank.SEVEN,
        Rank.EIGHT, Rank.NINE, Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING,
    ]
    return [Card(suit, rank) for suit in CANONICAL_SUIT_ORDER for rank in ranks]
