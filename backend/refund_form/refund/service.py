# backend/refund_form/refund/service.py

"""
返金申請のサービス層。

1. 入力チェック（validation）
2. 設定チェック（Slack Bot Token / 小グループ一覧）
3. 小グループの解決
4. Slack メッセージの組み立て
5. Slack への送信（リトライなし）

エラーは RefundError 系の例外で表現し、HTTP ステータスへの変換は router 側で行う。
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from refund_form.slack.client import SlackClient, SlackClientError
from refund_form.slack.config import SlackSettings, get_slack_settings
from refund_form.slack.formatting import build_refund_message
from refund_form.subgroups.config import find_subgroup, get_subgroups
from refund_form.subgroups.schemas import Subgroup
from refund_form.utils.config import EnvVarMissingError

from .schemas import RefundRequest
from .validation import validate_refund_request

logger = logging.getLogger(__name__)


class RefundError(Exception):
    """返金申請処理の基底例外。message はそのままクライアントに返す。"""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class RefundValidationError(RefundError):
    """入力値の不備（400）。"""


class RefundConfigError(RefundError):
    """サーバー側の設定不備（500）。"""


class RefundDeliveryError(RefundError):
    """Slack への送信失敗（500）。"""


class RefundService:
    """
    返金申請を検証し、対応する小グループの Slack チャンネルへ通知するサービス。

    client_factory / subgroups_loader はテストで差し替えられるようにしている。
    """

    def __init__(
        self,
        *,
        client_factory: Callable[[SlackSettings], SlackClient] = SlackClient,
        subgroups_loader: Callable[[], List[Subgroup]] = get_subgroups,
    ) -> None:
        self._client_factory = client_factory
        self._subgroups_loader = subgroups_loader

    def submit(
        self,
        request: RefundRequest,
        *,
        now: Optional[datetime] = None,
    ) -> Dict[str, Any]:
        """
        返金申請 1件を処理し、Slack に送信したペイロードを返す。

        :raises RefundValidationError: 入力不備・未知の小グループ
        :raises RefundConfigError: Slack Bot Token 未設定・小グループ一覧が空
        :raises RefundDeliveryError: Slack API 呼び出しの失敗
        """
        error = validate_refund_request(request)
        if error is not None:
            raise RefundValidationError(error)

        try:
            settings = get_slack_settings()
        except EnvVarMissingError as exc:
            logger.error("SLACK_BOT_TOKEN not configured")
            raise RefundConfigError("Slack configuration missing") from exc

        subgroups = self._subgroups_loader()
        if not subgroups:
            logger.error("No valid subgroups configured")
            raise RefundConfigError("No valid subgroups configured")

        subgroup = find_subgroup(subgroups, request.subgroup.strip())
        if subgroup is None:
            raise RefundValidationError("Invalid subgroup selected")

        payload = build_refund_message(
            subgroup,
            name=request.name.strip(),
            bank_name=request.bank_name.strip(),
            account_number=request.account_number.strip(),
            memo=request.memo,
            now=now,
        )

        client = self._client_factory(settings)
        try:
            client.post_message(payload)
        except SlackClientError as exc:
            logger.error("Slack API error for subgroup %s: %s", subgroup.id, exc)
            raise RefundDeliveryError("Failed to send Slack message") from exc

        logger.info("Refund request forwarded to subgroup %s (%s).", subgroup.id, subgroup.channel_id)
        return payload
