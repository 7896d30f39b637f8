"""
分类数据初始化模块
用于写入默认的 888 / 3F-3H-3S 分类目录
"""

import logging
from typing import List

from lifebalance.server.schemas.category_schemas import ActivityCategory

logger = logging.getLogger(__name__)


# 默认分类：1 个工作、1 个睡眠、8 个个人分类，个人 + 睡眠共同构成 3F/3H/3S 九宫格
DEFAULT_CATEGORIES: List[ActivityCategory] = [
    ActivityCategory(id="work", name="Work", color="#4361EE", group="work", rule="other",
                     description="Professional work activities"),
    ActivityCategory(id="family", name="Family", color="#FF8C42", group="personal", rule="3F",
                     description="Time spent with family"),
    ActivityCategory(id="finances", name="Finances", color="#6ECB63", group="personal", rule="3F",
                     description="Managing finances and investments"),
    ActivityCategory(id="fitness", name="Fitness", color="#FF5A5F", group="personal", rule="3F",
                     description="Exercise and physical activities"),
    ActivityCategory(id="health", name="Health", color="#5E60CE", group="personal", rule="3H",
                     description="Health management and self-care"),
    ActivityCategory(id="hobby", name="Hobby", color="#9B5DE5", group="personal", rule="3H",
                     description="Personal hobbies and interests"),
    ActivityCategory(id="head", name="Head", color="#00BBF9", group="personal", rule="3H",
                     description="Mental well-being and mindfulness"),
    ActivityCategory(id="social", name="Social", color="#FFD166", group="personal", rule="3S",
                     description="Social interactions and relationships"),
    ActivityCategory(id="sleep", name="Sleep", color="#7209B7", group="sleep", rule="3S",
                     description="Sleep and rest"),
    ActivityCategory(id="spirituality", name="Spirituality", color="#06D6A0", group="personal", rule="3S",
                     description="Spiritual practices and reflection"),
]


def init_default_categories(provider=None) -> bool:
    """
    初始化默认分类数据

    分类表为空时写入 DEFAULT_CATEGORIES，已有数据则跳过

    Args:
        provider: CategoryProvider 实例，None 则使用全局单例

    Returns:
        bool: 本次是否写入了默认分类
    """
    if provider is None:
        from lifebalance.server.providers import category_provider
        provider = category_provider

    if provider.count_categories() > 0:
        logger.info("分类数据已存在，跳过初始化")
        return False

    inserted = provider.insert_categories(DEFAULT_CATEGORIES)
    logger.info(f"默认分类初始化完成，共写入 {inserted} 个分类")
    return True
