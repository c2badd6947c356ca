"""
牌组业务异常定义.

业务异常直接抛给调用方，核心模块不做恢复或重试.
"""


class CardDeckError(Exception):
    """牌组基础异常类"""
    pass


class InvalidDealRequestError(CardDeckError, ValueError):
    """
    发牌请求无效异常.

    当分组数或每组张数为负数，或请求总张数超过牌组现有张数时抛出.
    """

    def __init__(self, set_count: int, cards_per_set: int, available: int, reason: str = ""):
        self.set_count = set_count
        self.cards_per_set = cards_per_set
        self.available = available
        message = (
            f"Cannot deal {set_count} sets of {cards_per_set} cards "
            f"from a deck of {available}"
        )
        if reason:
            message += f": {reason}"
        super().__init__(message)


class DeckConfigError(CardDeckError, ValueError):
    """配置错误异常"""
    pass
