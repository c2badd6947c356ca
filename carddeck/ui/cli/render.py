"""牌组CLI渲染模块.

这个模块负责将牌组快照和发牌结果渲染为命令行显示文本，
实现显示逻辑与牌组核心逻辑的分离。
"""

from typing import List, Sequence

from carddeck.core import Card, Deck

SECTION_RULE_WIDTH = 30


class CLIRenderer:
    """CLI渲染器.

    所有渲染方法都是纯函数，只依赖传入的牌序列，不访问牌组内部状态。
    """

    @staticmethod
    def format_card(card: Card, use_symbols: bool = False) -> str:
        """渲染单张牌.

        Args:
            card: 扑克牌
            use_symbols: 是否使用花色符号

        Returns:
            如"AD"，使用符号时为"A♦"
        """
        return card.to_display_str() if use_symbols else str(card)

    @staticmethod
    def render_cards(cards: Sequence[Card], columns: int = 13, use_symbols: bool = False) -> str:
        """按固定列数渲染牌序列.

        Args:
            cards: 牌序列
            columns: 每行张数
            use_symbols: 是否使用花色符号

        Returns:
            多行字符串，每行最多columns张牌
        """
        tokens = [CLIRenderer.format_card(card, use_symbols) for card in cards]
        rows = [tokens[i:i + columns] for i in range(0, len(tokens), columns)]
        return "\n".join(" ".join(row) for row in rows)

    @staticmethod
    def render_deck(deck: Deck, columns: int = 13, use_symbols: bool = False) -> str:
        """渲染整副牌，默认4行13列"""
        return CLIRenderer.render_cards(deck.snapshot(), columns, use_symbols)

    @staticmethod
    def render_hands(groups: List[List[Card]], use_symbols: bool = False) -> str:
        """渲染发牌结果，每组一行"""
        return "\n".join(
            " ".join(CLIRenderer.format_card(card, use_symbols) for card in group)
            for group in groups
        )

    @staticmethod
    def render_section(title: str) -> str:
        """渲染分节标题，如"=== Sorted Deck =====...". """
        return f"=== {title} " + "=" * SECTION_RULE_WIDTH
