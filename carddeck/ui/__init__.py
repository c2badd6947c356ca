"""牌组用户界面模块."""
