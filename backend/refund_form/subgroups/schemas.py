# backend/refund_form/subgroups/schemas.py

"""
小グループ設定のスキーマ定義。

JSON 上のキーはフロントエンドに合わせて camelCase（channelId / contactId）で扱う。
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Subgroup(BaseModel):
    """
    小グループ 1件分の静的設定。

    デプロイ時に固定され、実行中に変更されることはない。
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(..., description="URL パラメータやフォームで使う識別子")
    name: str = Field(..., description="表示名（Slack メッセージにも載る）")
    channel_id: str = Field(
        ...,
        alias="channelId",
        description="通知先 Slack チャンネル ID",
    )
    contact_id: Optional[str] = Field(
        None,
        alias="contactId",
        description="返金対応の担当者（Slack ハンドル）",
    )


class SubgroupListResponse(BaseModel):
    """
    GET /api/subgroups のレスポンス。
    """

    subgroups: List[Subgroup]
