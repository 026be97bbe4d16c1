"""Share endpoints: export a list as a transport string, decode and import one."""
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
import logging

from basket.api.dependencies import get_compressor, get_repository
from basket.infra.List_Repository import ListRepository
from basket.logic.share.assembler import apply_share_payload, build_share_payload
from basket.logic.share.codec import decode_share_payload, encode_share
from basket.logic.share.compression import BinaryCompressor
from basket.utilities.exceptions import ListNotFoundError
from basket.utilities.validators import ShareDecodeInput, ShareImportInput

router = APIRouter(prefix="/api")
logger = logging.getLogger(__name__)

INVALID_PAYLOAD = {"error": "Invalid payload"}


@router.get("/lists/{list_id}/share")
def share_list(list_id: str,
               repo: ListRepository = Depends(get_repository),
               compressor: BinaryCompressor = Depends(get_compressor)):
    payload = build_share_payload(repo, list_id)
    if payload is None:
        raise HTTPException(status_code=404, detail="List not found")
    encoded = encode_share(payload, compressor)
    return {"payload": encoded.transport, "compressed": encoded.compressed, "length": len(encoded.transport)}


@router.post("/share/decode")
def decode_share(data: ShareDecodeInput, compressor: BinaryCompressor = Depends(get_compressor)):
    payload = decode_share_payload(data.payload, compressor)
    if payload is None:
        return JSONResponse(status_code=400, content=INVALID_PAYLOAD)
    return payload.to_dict()


@router.post("/share/import")
def import_share(data: ShareImportInput,
                 repo: ListRepository = Depends(get_repository),
                 compressor: BinaryCompressor = Depends(get_compressor)):
    """Best-effort import: a partial result is reported, not rolled back."""
    payload = decode_share_payload(data.payload, compressor)
    if payload is None:
        return JSONResponse(status_code=400, content=INVALID_PAYLOAD)
    try:
        result = apply_share_payload(repo, payload, data.mode, data.target_list_id)
    except ListNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    status = 200 if result.complete else 207
    return JSONResponse(status_code=status, content=result.to_dict())
