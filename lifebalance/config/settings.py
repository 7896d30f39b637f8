"""
=========================LifeBalance 常量配置==========================
"""
from tzlocal import get_localzone

# 本地时区（自动获取系统时区），可被 settings.yaml / 环境变量覆盖
LOCAL_TIMEZONE = str(get_localzone())

# 一天的分钟数
MINUTES_PER_DAY = 24 * 60
# 888 规则：工作 / 个人 / 睡眠 各 8 小时
DAILY_TARGET_MINUTES = 8 * 60

# 分类分组（888 规则）
GROUP_WORK = 'work'
GROUP_PERSONAL = 'personal'
GROUP_SLEEP = 'sleep'
GROUP_OTHER = 'other'
CATEGORY_GROUPS = (GROUP_WORK, GROUP_PERSONAL, GROUP_SLEEP, GROUP_OTHER)
# 参与 888 目标统计的三个分组
BALANCE_GROUPS = (GROUP_WORK, GROUP_PERSONAL, GROUP_SLEEP)

# 3F / 3H / 3S 平衡规则
RULE_3F = '3F'  # Family, Finances, Fitness
RULE_3H = '3H'  # Health, Hobby, Head
RULE_3S = '3S'  # Social, Sleep, Spirituality
RULE_OTHER = 'other'
BALANCE_RULES = (RULE_3F, RULE_3H, RULE_3S)
CATEGORY_RULES = (RULE_3F, RULE_3H, RULE_3S, RULE_OTHER)

# 历史页面默认窗口天数
HISTORY_WINDOW_DAYS = 7

# 活动日志中未知分类的占位颜色 / 名称
UNKNOWN_CATEGORY_COLOR = '#ccc'
UNKNOWN_CATEGORY_NAME = 'Unknown'

# 服务监听
SERVER_HOST = "127.0.0.1"
SERVER_PORT = 8000
