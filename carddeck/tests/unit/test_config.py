"""
演示配置(DemoConfig)和日志配置(LoggingConfig)单元测试.
"""

import logging

import pytest

from carddeck.config import DemoConfig, LoggingConfig
from carddeck.core import DeckConfigError, selection_sort, builtin_sort


@pytest.mark.unit
@pytest.mark.fast
class TestLoggingConfig:
    """日志配置测试"""

    def test_defaults(self):
        config = LoggingConfig()
        assert config.level == "INFO"
        assert config.numeric_level == logging.INFO

    def test_level_is_case_insensitive(self):
        assert LoggingConfig(level="debug").numeric_level == logging.DEBUG

    def test_invalid_level(self):
        with pytest.raises(DeckConfigError):
            LoggingConfig(level="LOUD")


@pytest.mark.unit
@pytest.mark.fast
class TestDemoConfig:
    """演示配置测试"""

    def test_default_config(self):
        config = DemoConfig.default()

        assert config.seeds == (15, 34, 99)
        assert config.set_count == 3
        assert config.cards_per_set == 5
        assert config.columns == 13
        assert not config.use_symbols
        assert config.resolve_sort_strategy() is selection_sort

    def test_builtin_strategy(self):
        assert DemoConfig(sort_strategy="builtin").resolve_sort_strategy() is builtin_sort

    @pytest.mark.parametrize("kwargs", [
        {"set_count": -1},
        {"cards_per_set": -5},
        {"set_count": 11, "cards_per_set": 5},
        {"columns": 0},
        {"sort_strategy": "bogo"},
    ])
    def test_validation(self, kwargs):
        with pytest.raises(DeckConfigError):
            DemoConfig(**kwargs)

    def test_whole_deck_deal_is_allowed(self):
        config = DemoConfig(set_count=4, cards_per_set=13)
        assert config.set_count * config.cards_per_set == 52


@pytest.mark.unit
@pytest.mark.fast
class TestDemoConfigFromEnv:
    """环境变量配置测试"""

    def test_empty_environment_gives_defaults(self):
        config = DemoConfig.from_env({})

        assert config.seeds == (15, 34, 99)
        assert config.sort_strategy == "selection"
        assert config.logging_config.level == "INFO"

    def test_reads_variables(self):
        config = DemoConfig.from_env({
            "CARDDECK_SEEDS": "1, 2,3",
            "CARDDECK_SORT": "builtin",
            "CARDDECK_LOG_LEVEL": "warning",
        })

        assert config.seeds == (1, 2, 3)
        assert config.sort_strategy == "builtin"
        assert config.logging_config.numeric_level == logging.WARNING

    @pytest.mark.parametrize("seeds", ["1,2", "1,2,3,4", "a,b,c"])
    def test_invalid_seeds(self, seeds):
        with pytest.raises(DeckConfigError):
            DemoConfig.from_env({"CARDDECK_SEEDS": seeds})

    def test_invalid_sort(self):
        with pytest.raises(DeckConfigError):
            DemoConfig.from_env({"CARDDECK_SORT": "quick"})

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("CARDDECK_SEEDS", "7,8,9")
        assert DemoConfig.from_env().seeds == (7, 8, 9)


@pytest.mark.unit
@pytest.mark.fast
class TestConfigureLogging:
    """日志初始化测试"""

    def test_sets_package_logger_level(self):
        from carddeck.logging_setup import configure_logging

        package_logger = logging.getLogger("carddeck")
        original_level = package_logger.level
        try:
            configure_logging(LoggingConfig(level="DEBUG"))
            assert package_logger.level == logging.DEBUG
        finally:
            package_logger.setLevel(original_level)
