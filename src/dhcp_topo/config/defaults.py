"""默认常量"""
from datetime import timedelta

# 地址范围最大长度，外部分配器使用 32 位位图索引
MAX_RANGE_LEN = 2**32 - 1

# 租约与探测
DEFAULT_LEASE_DURATION = timedelta(hours=1)
DEFAULT_ICMP_TIMEOUT = timedelta(seconds=1)

# 域名限制
MAX_DOMAIN_NAME_LEN = 253
MAX_DOMAIN_LABEL_LEN = 63

# DHCP 选项码上限（DHCPv6 选项码为 16 位）
MAX_OPTION_CODE = 65535

# 日志
VERBOSE_DEFAULT = False
JSON_LOGS_DEFAULT = False
