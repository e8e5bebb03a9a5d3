# backend/refund_form/refund/schemas.py

"""
返金申請 API のスキーマ定義。

※ 口座番号などの個人情報を含むため、このモデルはログに出力しないこと。
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RefundRequest(BaseModel):
    """
    POST /api/refund のリクエストボディ。

    必須チェックは validation 側でユーザー向けメッセージとして返したいので、
    ここではすべて任意項目として受け取る。
    """

    model_config = ConfigDict(populate_by_name=True)

    subgroup: Optional[str] = Field(None, description="小グループ ID")
    name: Optional[str] = Field(None, description="申請者名")
    bank_name: Optional[str] = Field(None, alias="bankName", description="銀行名")
    account_number: Optional[str] = Field(
        None,
        alias="accountNumber",
        description="口座番号（ハイフン・空白区切り可）",
    )
    memo: Optional[str] = Field(None, description="任意のメモ")


class RefundResponse(BaseModel):
    """
    POST /api/refund の成功レスポンス。
    """

    success: bool = True
    message: str = "Refund request submitted successfully"


class ErrorResponse(BaseModel):
    """
    エラー時の共通レスポンス。
    """

    error: str
