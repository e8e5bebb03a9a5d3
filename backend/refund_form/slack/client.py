# backend/refund_form/slack/client.py

"""
Slack Web API との通信を担当するクライアントモジュール。
"""

from typing import Any, Dict, Optional

import httpx

from .config import SlackSettings, get_slack_settings


class SlackClientError(RuntimeError):
    """Slack クライアント全般の基底例外。"""


class SlackConnectionError(SlackClientError):
    """接続エラー・タイムアウト時の例外。"""


class SlackHTTPError(SlackClientError):
    """HTTP ステータスコードがエラーだった場合の例外。"""

    def __init__(self, status_code: int, body: Any | None = None) -> None:
        super().__init__(f"Slack API HTTP error: status_code={status_code}")
        self.status_code = status_code
        self.body = body


class SlackAPIError(SlackClientError):
    """HTTP 200 だがレスポンスの ok が false だった場合の例外。"""

    def __init__(self, error: str, response: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(f"Slack API error: {error}")
        self.error = error
        self.response = response or {}


class SlackClient:
    """
    Slack Web API の薄いラッパークライアント。

    - chat.postMessage のみを扱う
    - リトライは行わない（失敗は呼び出し元でそのままエラーとして扱う）
    """

    def __init__(self, settings: SlackSettings | None = None) -> None:
        self._settings = settings or get_slack_settings()

    @property
    def api_base_url(self) -> str:
        return self._settings.api_base_url

    @property
    def timeout(self) -> int:
        return self._settings.timeout_seconds

    def _build_headers(self) -> Dict[str, str]:
        """
        Slack API 呼び出しに必要なヘッダーを構築。
        """
        return {
            "Authorization": f"Bearer {self._settings.bot_token}",
            "Content-Type": "application/json; charset=utf-8",
        }

    def post_message(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        chat.postMessage を呼び出してメッセージを投稿する。

        :param payload: {channel, text, blocks} を含む辞書。
        :raises SlackConnectionError: 接続エラーやタイムアウト時。
        :raises SlackHTTPError: Slack が 2xx 以外を返した場合。
        :raises SlackAPIError: レスポンスの ok が false の場合。
        :return: Slack からの JSON レスポンス（成功時）。
        """
        url = f"{self.api_base_url}/chat.postMessage"

        try:
            response = httpx.post(
                url,
                headers=self._build_headers(),
                json=payload,
                timeout=self.timeout,
            )
        except httpx.RequestError as exc:
            raise SlackConnectionError(f"Failed to call Slack API: {exc}") from exc

        if response.status_code // 100 != 2:
            try:
                body = response.json()
            except ValueError:
                body = response.text
            raise SlackHTTPError(status_code=response.status_code, body=body)

        try:
            data = response.json()
        except ValueError as exc:
            raise SlackAPIError("invalid_response") from exc

        if not isinstance(data, dict) or not data.get("ok"):
            error = data.get("error", "unknown_error") if isinstance(data, dict) else "unknown_error"
            raise SlackAPIError(error, response=data if isinstance(data, dict) else None)

        return data
