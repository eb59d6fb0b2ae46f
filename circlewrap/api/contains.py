"""POST /api/contains — does a polygon contain a circle?"""

from __future__ import annotations

from fastapi import APIRouter

from circlewrap.engine.containment import check_containment
from circlewrap.models.requests import ContainmentRequest
from circlewrap.models.responses import ContainmentResponse

router = APIRouter()


@router.post("/contains", response_model=ContainmentResponse)
async def contains(req: ContainmentRequest) -> ContainmentResponse:
    result = check_containment(req.circle.to_circle(), req.polygon)
    return ContainmentResponse(contained=result.contained, edge=result.edge)
