"""
数据库配置模块
定义数据库表结构的完整元数据
"""

# 活动分类表配置（静态目录，启动时写入默认分类）
ACTIVITY_CATEGORY_CONFIG = {
    'table_name': 'activity_category',
    'columns': {
        'id': {
            'type': 'TEXT',
            'constraints': ['PRIMARY KEY'],
            'comment': '分类唯一标识符（例如：work, family）'
        },
        'name': {
            'type': 'TEXT',
            'constraints': ['NOT NULL'],
            'comment': '分类名称（例如：Family）'
        },
        'color': {
            'type': 'TEXT',
            'constraints': ['NOT NULL'],
            'comment': '分类颜色（十六进制格式，例如：#4361EE）'
        },
        'group_name': {
            'type': 'TEXT',
            'constraints': ['NOT NULL', "DEFAULT 'other'"],
            'comment': '888 分组：work / personal / sleep / other（group 为 SQL 关键字）'
        },
        'rule': {
            'type': 'TEXT',
            'constraints': ['NOT NULL', "DEFAULT 'other'"],
            'comment': '平衡规则：3F / 3H / 3S / other'
        },
        'description': {
            'type': 'TEXT',
            'constraints': ["DEFAULT ''"],
            'comment': '分类说明'
        },
        'order_index': {
            'type': 'INTEGER',
            'constraints': ['DEFAULT 0'],
            'comment': '显示顺序索引'
        }
    },
    'table_constraints': [
        "CHECK(group_name IN ('work', 'personal', 'sleep', 'other'))",
        "CHECK(rule IN ('3F', '3H', '3S', 'other'))"
    ],
    'indexes': [],
    'timestamps': True  # 自动添加 created_at
}


# 时间记录表配置
TIME_ENTRIES_CONFIG = {
    'table_name': 'time_entries',
    'columns': {
        'id': {
            'type': 'TEXT',
            'constraints': ['PRIMARY KEY'],
            'comment': '记录ID（uuid4）'
        },
        'user_id': {
            'type': 'TEXT',
            'constraints': ['NOT NULL'],
            'comment': '所属用户ID'
        },
        'category_id': {
            'type': 'TEXT',
            'constraints': ['NOT NULL'],
            'comment': '分类ID（引用 activity_category.id）'
        },
        'start_time': {
            'type': 'TEXT',
            'constraints': ['NOT NULL'],
            'comment': '开始时间（本地时间 YYYY-MM-DD HH:MM:SS）'
        },
        'end_time': {
            'type': 'TEXT',
            'constraints': [],
            'comment': '结束时间，进行中的活动为 NULL'
        },
        'duration': {
            'type': 'INTEGER',
            'constraints': [],
            'comment': '持续时长（分钟），进行中的活动为 NULL'
        },
        'description': {
            'type': 'TEXT',
            'constraints': [],
            'comment': '活动描述（可为空）'
        }
    },
    'table_constraints': [
        'CHECK(end_time IS NULL OR end_time >= start_time)',
        'CHECK(duration IS NULL OR duration >= 0)'
    ],
    'indexes': [
        {'name': 'idx_time_entries_start_time', 'columns': ['start_time']},
        {'name': 'idx_time_entries_user_start', 'columns': ['user_id', 'start_time']}
    ],
    'timestamps': True  # 自动添加 created_at
}


# 所有表配置的映射
TABLE_CONFIGS = {
    'activity_category': ACTIVITY_CATEGORY_CONFIG,
    'time_entries': TIME_ENTRIES_CONFIG,
}
