"""
小グループ（소모임）カタログ。

- schemas: Subgroup / SubgroupListResponse
- config: 組み込みの小グループ一覧と SUBGROUPS 環境変数のパース
- router: GET /api/subgroups
"""

from .config import DEFAULT_SUBGROUPS, find_subgroup, get_subgroups, parse_subgroups  # noqa: F401
from .schemas import Subgroup, SubgroupListResponse  # noqa: F401
