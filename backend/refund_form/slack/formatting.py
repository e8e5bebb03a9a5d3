# backend/refund_form/slack/formatting.py

"""
Slack メッセージ組み立て用のヘルパー。

- sanitize_for_slack: ユーザー入力を mrkdwn に埋め込む前のエスケープ
- format_submitted_at: 申請日時を韓国ロケール風の表記に整形
- build_refund_message: chat.postMessage 用ペイロード（channel / text / blocks）の組み立て
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from refund_form.subgroups.schemas import Subgroup

# 韓国は夏時間がないため固定オフセットで十分
KST = timezone(timedelta(hours=9), name="KST")

HEADER_TEXT = "🔔 AWSKRUG 환불 신청"
FALLBACK_TEXT = "새로운 환불 신청이 접수되었습니다."
FOOTER_TEXT = "담당자는 신청자에게 연락하여 환불을 진행해주세요."

_HTML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
)
_MRKDWN_CHARS = ("*", "_", "~", "`")


def sanitize_for_slack(text: Optional[str]) -> str:
    """
    Slack のメッセージ構造をユーザー入力で崩されないようにエスケープする。

    1. HTML エンティティ（& を最初に置換）
    2. mrkdwn の装飾文字（* _ ~ `）をバックスラッシュでエスケープ
    """
    if not text:
        return ""

    sanitized = text
    for char, entity in _HTML_ESCAPES:
        sanitized = sanitized.replace(char, entity)

    for char in _MRKDWN_CHARS:
        sanitized = sanitized.replace(char, "\\" + char)

    return sanitized


def format_submitted_at(now: datetime) -> str:
    """
    日時を ko-KR ロケールの toLocaleString 相当（Asia/Seoul）に整形する。

    例: 2025. 1. 2. 오후 3:04:05
    """
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    local = now.astimezone(KST)

    meridiem = "오전" if local.hour < 12 else "오후"
    hour = local.hour % 12 or 12

    return (
        f"{local.year}. {local.month}. {local.day}. "
        f"{meridiem} {hour}:{local.minute:02d}:{local.second:02d}"
    )


def _mrkdwn_field(label: str, value: str) -> Dict[str, str]:
    return {"type": "mrkdwn", "text": f"*{label}:*\n{value}"}


def build_refund_message(
    subgroup: Subgroup,
    *,
    name: str,
    bank_name: str,
    account_number: str,
    memo: Optional[str] = None,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    返金申請 1件分の Slack メッセージペイロードを組み立てる。

    入力値はすべてこの関数の中でエスケープするので、呼び出し側は生の値を渡すこと。
    メモは空白以外の文字を含む場合にのみセクションを追加する。
    """
    submitted_at = format_submitted_at(now or datetime.now(timezone.utc))
    sanitized_memo = sanitize_for_slack(memo)

    blocks: List[Dict[str, Any]] = [
        {
            "type": "header",
            "text": {
                "type": "plain_text",
                "text": HEADER_TEXT,
                "emoji": True,
            },
        },
        {
            "type": "section",
            "fields": [
                _mrkdwn_field("소모임", sanitize_for_slack(subgroup.name)),
                _mrkdwn_field("신청자 이름", sanitize_for_slack(name)),
                _mrkdwn_field("은행이름", sanitize_for_slack(bank_name)),
                _mrkdwn_field("계좌번호", sanitize_for_slack(account_number)),
                _mrkdwn_field("신청일시", submitted_at),
            ],
        },
    ]

    if sanitized_memo.strip():
        blocks.append(
            {
                "type": "section",
                "text": _mrkdwn_field("메모", sanitized_memo),
            }
        )

    footer = FOOTER_TEXT
    if subgroup.contact_id:
        footer = f"담당자: @{sanitize_for_slack(subgroup.contact_id)}\n{FOOTER_TEXT}"

    blocks.append({"type": "divider"})
    blocks.append(
        {
            "type": "context",
            "elements": [{"type": "mrkdwn", "text": footer}],
        }
    )

    return {
        "channel": subgroup.channel_id,
        "text": FALLBACK_TEXT,
        "blocks": blocks,
    }
