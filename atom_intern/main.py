import logging

from fastapi import FastAPI, UploadFile, File, HTTPException
from .errors import AtomContractError
from .models import AtomResponse, EncodeResponse, HashResponse, HealthResponse
from .report import encode_atom_bytes, hash_atom_bytes, intern_atom_bytes

logger = logging.getLogger(__name__)

app = FastAPI(
    title="atom-intern",
    description="Latin-1 to UTF-8 atom name encoding and atom table hashing",
    version="0.1.0",
)


def _run(build, raw: bytes):
    try:
        return build(raw)
    except AtomContractError as e:
        logger.warning("Rejected atom name (%d bytes): %s", len(raw), e)
        raise HTTPException(status_code=422, detail=str(e)) from e


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}

@app.post("/encode", response_model=EncodeResponse)
async def encode_name(file: UploadFile = File(...)):
    raw = await file.read()
    result = _run(encode_atom_bytes, raw)
    logger.debug("Encoded %d-byte name, converted=%s", len(raw), result["converted"])
    return result

@app.post("/hash", response_model=HashResponse)
async def hash_name(file: UploadFile = File(...)):
    raw = await file.read()
    return _run(hash_atom_bytes, raw)

@app.post("/atom", response_model=AtomResponse)
async def intern_name(file: UploadFile = File(...)):
    raw = await file.read()
    return _run(intern_atom_bytes, raw)
