# backend/refund_form/refund/router.py

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from .schemas import ErrorResponse, RefundRequest, RefundResponse
from .service import (
    RefundConfigError,
    RefundDeliveryError,
    RefundService,
    RefundValidationError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["refund"])


# テスト時に FastAPI dependency_overrides で差し替え可能にする
def get_refund_service() -> RefundService:
    return RefundService()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post(
    "/refund",
    response_model=RefundResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="返金申請を送信",
    description="入力を検証し、選択された小グループの Slack チャンネルへ申請内容を通知する。",
)
def submit_refund(
    body: RefundRequest,
    service: RefundService = Depends(get_refund_service),
):
    """
    返金申請エンドポイント。

    - 入力不備 / 未知の小グループ → 400
    - 設定不備 → 500（メッセージは設定項目を示す）
    - Slack 送信失敗 → 500
    - 想定外の内部エラー → 500
    """
    try:
        service.submit(body)
    except RefundValidationError as exc:
        return _error(status.HTTP_400_BAD_REQUEST, exc.message)
    except (RefundConfigError, RefundDeliveryError) as exc:
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)
    except Exception:  # noqa: BLE001
        logger.exception("Error processing refund request")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    return RefundResponse()
