"""牌组CLI演示程序.

依次演示洗牌、排序、再洗牌、两次发牌，以及洗牌后再次发牌。
"""

import dataclasses
import logging
import os
from typing import Optional, Tuple

import click

from carddeck.config import DemoConfig
from carddeck.core import Deck, CardDeckError
from carddeck.logging_setup import configure_logging, get_logger
from .render import CLIRenderer


class DeckDemoCLI:
    """牌组演示CLI.

    所有输出都通过click.echo完成，牌组本身不做任何输出。
    """

    def __init__(self, config: Optional[DemoConfig] = None,
                 logger: Optional[logging.Logger] = None):
        """初始化演示.

        Args:
            config: 演示配置，默认使用DemoConfig.default()
            logger: 日志记录器
        """
        self.config = config or DemoConfig.default()
        self.logger = logger or get_logger(__name__)
        self.deck = Deck(sort_strategy=self.config.resolve_sort_strategy(), logger=self.logger)

    def run(self) -> None:
        """运行完整的演示流程."""
        first_seed, second_seed, third_seed = self.config.seeds
        self.logger.info("Running deck demo with seeds %s", self.config.seeds)

        self._section("Shuffle Deck")
        self.deck.shuffle(first_seed)
        self._print_deck()

        self._section("Sorted Deck")
        self.deck.sort()
        self._print_deck()

        self._section("Shuffled Again")
        self.deck.shuffle(second_seed)
        self._print_deck()

        self._section(f"Deal {self.config.set_count} sets of {self.config.cards_per_set} cards")
        self._deal()

        self._section("Deal again")
        self._deal()

        self._section("Shuffle and deal again")
        self.deck.shuffle(third_seed)
        self._deal()

    def _section(self, title: str) -> None:
        click.echo(CLIRenderer.render_section(title))

    def _print_deck(self) -> None:
        click.echo(CLIRenderer.render_deck(self.deck, self.config.columns, self.config.use_symbols))

    def _deal(self) -> None:
        groups = self.deck.deal_hand(self.config.set_count, self.config.cards_per_set)
        click.echo(CLIRenderer.render_hands(groups, self.config.use_symbols))


@click.command(name="carddeck-demo")
@click.option("--seeds", nargs=3, type=int, default=None,
              help="三次洗牌使用的种子，默认15 34 99")
@click.option("--sets", "set_count", type=int, default=None, help="发牌分组数")
@click.option("--cards", "cards_per_set", type=int, default=None, help="每组张数")
@click.option("--columns", type=int, default=None, help="打印整副牌时每行张数")
@click.option("--symbols/--no-symbols", "use_symbols", default=None, help="使用花色符号显示")
@click.option("--sort", "sort_strategy", type=click.Choice(["selection", "builtin"]),
              default=None, help="排序策略")
@click.option("--log-level", type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                                               case_sensitive=False),
              default=None, help="日志级别")
def main(seeds: Optional[Tuple[int, int, int]], set_count: Optional[int],
         cards_per_set: Optional[int], columns: Optional[int], use_symbols: Optional[bool],
         sort_strategy: Optional[str], log_level: Optional[str]) -> None:
    """演示52张牌组的洗牌、排序和发牌."""
    logger = get_logger(__name__)
    # 命令行参数优先于环境变量，在校验环境变量之前覆盖
    environ = dict(os.environ)
    if seeds:
        environ["CARDDECK_SEEDS"] = ",".join(str(seed) for seed in seeds)
    if sort_strategy:
        environ["CARDDECK_SORT"] = sort_strategy
    if log_level:
        environ["CARDDECK_LOG_LEVEL"] = log_level

    # 日志尚未初始化，配置错误只交给click输出
    try:
        config = DemoConfig.from_env(environ)
        overrides = {
            "set_count": set_count,
            "cards_per_set": cards_per_set,
            "columns": columns,
            "use_symbols": use_symbols,
        }
        config = dataclasses.replace(
            config, **{key: value for key, value in overrides.items() if value is not None}
        )
    except CardDeckError as e:
        raise click.ClickException(str(e)) from e

    configure_logging(config.logging_config)
    try:
        DeckDemoCLI(config, logger).run()
    except CardDeckError as e:
        logger.error("Deck demo failed: %s", e)
        raise click.ClickException(str(e)) from e


if __name__ == "__main__":
    main()
