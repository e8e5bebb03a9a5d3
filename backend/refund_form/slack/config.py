# backend/refund_form/slack/config.py

"""
Slack 連携に必要な設定値をまとめるモジュール。
"""

from dataclasses import dataclass

from refund_form.utils.config import get_env, get_env_int

DEFAULT_SLACK_API_BASE_URL = "https://slack.com/api"


@dataclass(frozen=True)
class SlackSettings:
    """Slack Web API 用の設定値コンテナ。"""

    bot_token: str
    api_base_url: str = DEFAULT_SLACK_API_BASE_URL
    timeout_seconds: int = 10


def get_slack_settings() -> SlackSettings:
    """
    環境変数から Slack 設定を読み込む。

    必須:
      - SLACK_BOT_TOKEN

    任意:
      - SLACK_API_BASE_URL     (デフォルト: https://slack.com/api)
      - SLACK_TIMEOUT_SECONDS  (デフォルト: 10)

    NOTE:
      - ランタイムで注入される環境変数に追従するため lru_cache は使わない。
    """
    bot_token = get_env("SLACK_BOT_TOKEN")

    api_base_url = get_env(
        "SLACK_API_BASE_URL",
        default=DEFAULT_SLACK_API_BASE_URL,
        required=False,
    )
    timeout_seconds = get_env_int("SLACK_TIMEOUT_SECONDS", default=10)

    return SlackSettings(
        bot_token=bot_token,
        api_base_url=api_base_url.rstrip("/"),
        timeout_seconds=timeout_seconds,
    )
