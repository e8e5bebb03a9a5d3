"""
Slack 連携モジュール。

- config: Slack Web API の設定値（Bot Token, ベース URL, タイムアウト）
- formatting: ユーザー入力のエスケープと chat.postMessage 用ペイロードの組み立て
- client: Slack Web API への HTTP クライアント
"""

from .client import SlackClient, SlackClientError  # noqa: F401
from .config import SlackSettings, get_slack_settings  # noqa: F401
from .formatting import build_refund_message, sanitize_for_slack  # noqa: F401
