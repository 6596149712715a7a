"""
Liveness endpoint.

Reports that the process is serving requests.  MongoDB is not
queried, so the check passes while the store is unreachable.
"""

from typing import Dict

from fastapi import APIRouter

router = APIRouter()


@router.get("", response_model=Dict[str, str])
async def health() -> Dict[str, str]:
    return {"status": "ok"}
