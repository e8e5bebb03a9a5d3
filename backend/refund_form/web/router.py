# backend/refund_form/web/router.py

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

TEMPLATE_PATH = Path(__file__).resolve().parent / "templates" / "index.html"

router = APIRouter(tags=["web"])


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
def refund_form_page() -> HTMLResponse:
    """
    返金申請フォームを返す。

    ?subgroup=<id> による初期選択はページ側のスクリプトで処理する。
    """
    return HTMLResponse(TEMPLATE_PATH.read_text(encoding="utf-8"))
