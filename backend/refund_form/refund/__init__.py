"""
返金申請モジュール。

- schemas: POST /api/refund のリクエスト / レスポンスモデル
- validation: 入力チェック（ユーザー向けエラーメッセージを返す）
- service: 検証 → 小グループ解決 → メッセージ組み立て → Slack 送信
- router: POST /api/refund
"""

from .schemas import RefundRequest, RefundResponse  # noqa: F401
from .service import RefundService  # noqa: F401
from .validation import normalize_account_number, validate_refund_request  # noqa: F401
