# backend/refund_form/utils/config.py

"""
返金フォームの環境変数ヘルパー。

- SLACK_BOT_TOKEN / SLACK_API_BASE_URL / SLACK_TIMEOUT_SECONDS（slack.config）
- SUBGROUPS（subgroups.config）
- LOG_LEVEL（main）

値はキャッシュせず呼び出しのたびに os.environ から読む（Amplify などでランタイム注入されるため）。
空白だけの値は未設定として扱う。
"""

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)


class EnvVarMissingError(RuntimeError):
    """必須環境変数が設定されていない場合に投げる例外。"""

    def __init__(self, name: str) -> None:
        super().__init__(f"Required environment variable '{name}' is not set.")
        self.name = name


def get_env(
    name: str,
    default: Optional[str] = None,
    *,
    required: bool = True,
) -> str:
    """
    環境変数を取得するヘルパー。

    :param name: 環境変数名
    :param default: デフォルト値（required=False の場合のみ使用）
    :param required: True の場合、未設定なら例外を投げる
    :return: 文字列値
    """
    value = os.getenv(name)

    if value is None or value.strip() == "":
        if required:
            raise EnvVarMissingError(name)
        return default

    return value


def get_env_int(name: str, default: int) -> int:
    """
    整数の環境変数を取得する。

    - 未設定 or パース不能の場合は default を返す。
    """
    raw = get_env(name, default=None, required=False)
    if raw is None:
        return default

    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid integer for %s: %r. Using default %d.", name, raw, default)
        return default
