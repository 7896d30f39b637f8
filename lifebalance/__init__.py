"""
LifeBalance 888 - 个人时间记录与 8-8-8 平衡分析
"""

__version__ = "0.1.0"
