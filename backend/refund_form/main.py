# backend/refund_form/main.py

"""
バックエンドアプリケーションのエントリーポイント。

主な責務:
- GET  /               返金申請フォーム
- GET  /api/subgroups  小グループ一覧
- POST /api/refund     返金申請の受付と Slack 通知
- GET  /health         設定チェック付きヘルスチェック
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from refund_form.health import router as health_router
from refund_form.refund.router import router as refund_router
from refund_form.subgroups.router import router as subgroups_router
from refund_form.utils.config import get_env
from refund_form.web.router import router as web_router

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    level_name = get_env("LOG_LEVEL", default="INFO", required=False).upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


async def _request_validation_error_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    # JSON でないボディや型違いもフロントエンドには {"error": ...} で返す
    # 口座番号などの生の値（errors() の input）はログに出さない
    problems = [(error.get("loc"), error.get("type")) for error in exc.errors()]
    logger.warning("Invalid request body for %s: %s", request.url.path, problems)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request body"},
    )


def create_app() -> FastAPI:
    """
    FastAPI アプリケーションファクトリ。
    """
    _configure_logging()

    app = FastAPI(title="AWSKRUG Refund Form")

    app.add_exception_handler(RequestValidationError, _request_validation_error_handler)

    # ルーター登録
    app.include_router(web_router)
    app.include_router(subgroups_router)
    app.include_router(refund_router)
    app.include_router(health_router)

    return app


# uvicorn 実行時のエントリーポイント
app = create_app()
