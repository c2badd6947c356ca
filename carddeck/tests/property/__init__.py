"""
Property Tests - 性质测试

该目录包含基于hypothesis的性质测试，验证牌组的数学不变量:
洗牌只做排列、排序总能恢复标准顺序、相同种子结果相同。
"""
