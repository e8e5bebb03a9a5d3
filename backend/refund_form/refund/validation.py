# backend/refund_form/refund/validation.py

"""
返金申請の入力チェック。

例外ではなく「最初に違反したルールのメッセージ」を返す。
小グループが既知かどうかは設定の確認後に service 側で判定する。
"""

import re
from typing import Optional

from .schemas import RefundRequest

_SEPARATORS = re.compile(r"[-\s]")
_DIGITS_ONLY = re.compile(r"[0-9]+")


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def normalize_account_number(value: str) -> str:
    """口座番号から区切り文字（ハイフン・空白）を取り除く。"""
    return _SEPARATORS.sub("", value)


def is_valid_account_number(value: Optional[str]) -> bool:
    """区切り文字を除いた口座番号が半角数字のみで構成されているか。"""
    if _is_blank(value):
        return False
    return _DIGITS_ONLY.fullmatch(normalize_account_number(value)) is not None


def validate_refund_request(request: RefundRequest) -> Optional[str]:
    """
    リクエストを検証し、問題がなければ None、あればエラーメッセージを返す。
    """
    if _is_blank(request.subgroup):
        return "Subgroup is required"
    if _is_blank(request.name):
        return "Applicant name is required"
    if _is_blank(request.bank_name):
        return "Bank name is required"
    if _is_blank(request.account_number):
        return "Account number is required"
    if not is_valid_account_number(request.account_number):
        return "Invalid account number format. Use numbers only"
    return None
