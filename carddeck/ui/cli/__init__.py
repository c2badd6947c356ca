"""牌组CLI用户界面模块.

这个包提供命令行演示程序，包括：
- 演示程序主类和click命令
- 渲染器（显示逻辑）
"""

from .cli_demo import DeckDemoCLI, main
from .render import CLIRenderer

__all__ = [
    'DeckDemoCLI',
    'CLIRenderer',
    'main',
]
