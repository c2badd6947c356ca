"""
演示程序配置相关类的实现
包含日志配置和演示流程配置
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple

from .core.deck import STANDARD_DECK_SIZE
from .core.exceptions import DeckConfigError
from .core.ordering import SORT_STRATEGIES, SortStrategy

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LoggingConfig:
    """
    日志配置
    """
    level: str = "INFO"
    fmt: str = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"
    datefmt: str = "%H:%M:%S"

    def __post_init__(self):
        """验证日志级别"""
        self.level = self.level.upper()
        if self.level not in LOG_LEVELS:
            raise DeckConfigError(f"Invalid log level: {self.level}")

    @property
    def numeric_level(self) -> int:
        return getattr(logging, self.level)


@dataclass
class DemoConfig:
    """
    演示流程配置
    包含三次洗牌的种子、发牌规格和显示设置
    """
    # 洗牌种子
    first_seed: int = 15
    second_seed: int = 34
    third_seed: int = 99

    # 发牌设置
    set_count: int = 3
    cards_per_set: int = 5

    # 显示设置
    columns: int = 13
    use_symbols: bool = False

    sort_strategy: str = "selection"    # "selection" | "builtin"
    logging_config: LoggingConfig = field(default_factory=LoggingConfig)

    def __post_init__(self):
        """验证配置的有效性"""
        if self.set_count < 0 or self.cards_per_set < 0:
            raise DeckConfigError(
                f"Deal sizes must be non-negative: {self.set_count}x{self.cards_per_set}"
            )

        if self.set_count * self.cards_per_set > STANDARD_DECK_SIZE:
            raise DeckConfigError(
                f"Cannot deal {self.set_count}x{self.cards_per_set} cards "
                f"from a {STANDARD_DECK_SIZE}-card deck"
            )

        if self.columns <= 0:
            raise DeckConfigError(f"Columns must be positive: {self.columns}")

        if self.sort_strategy not in SORT_STRATEGIES:
            raise DeckConfigError(f"Unknown sort strategy: {self.sort_strategy}")

    @property
    def seeds(self) -> Tuple[int, int, int]:
        return self.first_seed, self.second_seed, self.third_seed

    def resolve_sort_strategy(self) -> SortStrategy:
        """返回sort_strategy名称对应的排序函数"""
        return SORT_STRATEGIES[self.sort_strategy]

    @classmethod
    def default(cls) -> 'DemoConfig':
        """
        创建默认配置
        种子15、34、99，发3组每组5张
        """
        return cls()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'DemoConfig':
        """
        从环境变量创建配置

        支持的变量:
            CARDDECK_LOG_LEVEL: 日志级别
            CARDDECK_SEEDS: 逗号分隔的三个整数种子，如"15,34,99"
            CARDDECK_SORT: 排序策略名称
        """
        environ = os.environ if environ is None else environ
        kwargs = {}

        seeds = environ.get("CARDDECK_SEEDS")
        if seeds:
            try:
                values = [int(part) for part in seeds.split(",")]
            except ValueError:
                raise DeckConfigError(f"CARDDECK_SEEDS must be integers: {seeds!r}") from None
            if len(values) != 3:
                raise DeckConfigError(f"CARDDECK_SEEDS needs exactly 3 values: {seeds!r}")
            kwargs.update(first_seed=values[0], second_seed=values[1], third_seed=values[2])

        if environ.get("CARDDECK_SORT"):
            kwargs["sort_strategy"] = environ["CARDDECK_SORT"]

        kwargs["logging_config"] = LoggingConfig(level=environ.get("CARDDECK_LOG_LEVEL", "INFO"))
        return cls(**kwargs)
