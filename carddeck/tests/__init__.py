"""carddeck测试包"""
