# backend/refund_form/health.py

"""
設定の妥当性チェックとヘルスチェックエンドポイント。
"""

from dataclasses import dataclass, field
from typing import List

from fastapi import APIRouter

from refund_form.subgroups.config import get_subgroups
from refund_form.utils.config import get_env

router = APIRouter(tags=["health"])


@dataclass
class ConfigStatus:
    is_valid: bool
    errors: List[str] = field(default_factory=list)


def validate_config() -> ConfigStatus:
    """
    Slack Bot Token と小グループ一覧が揃っているかを確認する。
    """
    errors: List[str] = []

    if not get_env("SLACK_BOT_TOKEN", required=False):
        errors.append("SLACK_BOT_TOKEN is not configured")

    if not get_subgroups():
        errors.append("No subgroups configured")

    return ConfigStatus(is_valid=not errors, errors=errors)


@router.get("/health")
def health_check() -> dict:
    """
    簡易ヘルスチェックエンドポイント。
    設定不備があっても 200 を返し、status=degraded と errors で知らせる。
    """
    config_status = validate_config()
    return {
        "status": "ok" if config_status.is_valid else "degraded",
        "errors": config_status.errors,
    }
