# backend/refund_form/subgroups/router.py

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from .config import get_subgroups
from .schemas import SubgroupListResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["subgroups"])


@router.get(
    "/subgroups",
    response_model=SubgroupListResponse,
    response_model_exclude_none=True,
    summary="小グループ一覧を取得",
    description="フォームの選択肢に使う小グループ一覧を返す。",
)
def list_subgroups():
    """
    小グループ一覧を返すエンドポイント。

    - 正常系: {"subgroups": [...]}
    - 設定が空: 500 {"error": "No valid subgroups configured"}
    """
    try:
        subgroups = get_subgroups()
    except Exception:  # noqa: BLE001
        logger.exception("Error loading subgroups")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to load subgroups"},
        )

    if not subgroups:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "No valid subgroups configured"},
        )

    return SubgroupListResponse(subgroups=subgroups)
