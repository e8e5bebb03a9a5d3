# backend/refund_form/subgroups/config.py

"""
小グループ設定の読み込み。

新しい小グループを追加する場合は DEFAULT_SUBGROUPS に追記するか、
SUBGROUPS 環境変数で一覧ごと差し替える。

SUBGROUPS の形式:
    id,name,channelId[,contactId];id,name,channelId[,contactId]
"""

import logging
from typing import Iterable, List, Optional

from refund_form.utils.config import get_env

from .schemas import Subgroup

logger = logging.getLogger(__name__)

DEFAULT_SUBGROUPS: List[Subgroup] = [
    Subgroup(
        id="aiengineering",
        name="AI Engineering 소모임",
        channel_id="C07JVMT255E",
        contact_id="nalbam",
    ),
    Subgroup(
        id="container",
        name="Container 소모임",
        channel_id="GE94HAW4V",
        contact_id="mosesyoon",
    ),
    Subgroup(
        id="kiro",
        name="Kiro 소모임",
        channel_id="C0A4R4LLEBH",
        contact_id="yanso",
    ),
    Subgroup(
        id="sandbox",
        name="Sandbox 소모임",
        channel_id="C07HZRYBNRG",
        contact_id="nalbam",
    ),
]


def parse_subgroups(raw: Optional[str]) -> List[Subgroup]:
    """
    SUBGROUPS 形式の文字列を Subgroup のリストに変換する。

    - 要素数が 3 / 4 以外のエントリはスキップ
    - id / name / channelId のいずれかが空のエントリはスキップ
    - 空文字列・None は空リスト
    """
    if not raw:
        return []

    subgroups: List[Subgroup] = []

    for entry in raw.split(";"):
        if not entry.strip():
            continue

        parts = [part.strip() for part in entry.split(",")]
        if len(parts) not in (3, 4):
            logger.warning(
                "Invalid subgroup format: %r. Expected format: id,name,channelId[,contactId]",
                entry,
            )
            continue

        subgroup_id, name, channel_id = parts[:3]
        if not subgroup_id or not name or not channel_id:
            logger.warning(
                "Invalid subgroup format: %r. All fields must be non-empty",
                entry,
            )
            continue

        contact_id = parts[3] if len(parts) == 4 and parts[3] else None

        subgroups.append(
            Subgroup(
                id=subgroup_id,
                name=name,
                channel_id=channel_id,
                contact_id=contact_id,
            )
        )

    return subgroups


def get_subgroups() -> List[Subgroup]:
    """
    現在有効な小グループ一覧を返す。

    SUBGROUPS 環境変数が設定されていればそれを優先し、
    未設定なら DEFAULT_SUBGROUPS を使う。
    """
    raw = get_env("SUBGROUPS", default=None, required=False)
    if raw is None:
        return list(DEFAULT_SUBGROUPS)

    subgroups = parse_subgroups(raw)
    if not subgroups:
        logger.error("SUBGROUPS is set but contains no valid entries.")
    return subgroups


def find_subgroup(subgroups: Iterable[Subgroup], subgroup_id: str) -> Optional[Subgroup]:
    """id が一致する小グループを返す。見つからなければ None。"""
    for subgroup in subgroups:
        if subgroup.id == subgroup_id:
            return subgroup
    return None
