# boekhouding/api/sheets.py
from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool

from boekhouding.api.body import read_json_object
from boekhouding.api.errors import error_response
from boekhouding.config import Settings, get_settings
from boekhouding.services.sheets import SheetRepository, get_sheets, sanitize_slug

router = APIRouter(prefix="/api/sheets", tags=["sheets"])

ALLOWED = "GET, PUT"


@router.get("/{slug}")
def get_sheet(slug: str, sheets: SheetRepository = Depends(get_sheets)):
    # invalid or unknown slug -> html: null, never an error
    return {"ok": True, "html": sheets.load(slug)}


@router.put("/{slug}")
async def put_sheet(
    slug: str,
    request: Request,
    sheets: SheetRepository = Depends(get_sheets),
    settings: Settings = Depends(get_settings),
):
    payload = await read_json_object(request, settings.max_body_bytes)
    if sanitize_slug(slug) is None:
        return error_response(400, "Invalid slug")
    if not await run_in_threadpool(sheets.save, slug, payload.get("html")):
        return error_response(500, "Could not save sheet")
    return {"ok": True}


@router.api_route("/{slug}", methods=["HEAD", "POST", "PATCH", "DELETE", "OPTIONS", "TRACE"])
def sheet_method_not_allowed(slug: str):
    return error_response(405, "Method not allowed", headers={"Allow": ALLOWED})
