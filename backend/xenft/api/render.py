"""POST /api/render — render a token card as SVG or PNG."""

from __future__ import annotations

import random

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from xenft.chain.session import ChainSession
from xenft.dependencies import get_chain_session
from xenft.engine.errors import ChainSessionError
from xenft.engine.pipeline import RenderResult, render_gallery, render_token
from xenft.models.requests import OwnedRenderRequest, PngRequest, RenderRequest
from xenft.models.responses import RenderResponse
from xenft.utils.rasterizer import png_filename, svg_filename, svg_to_png

router = APIRouter(prefix="/render")


def _rng(seed: int | None) -> random.Random | None:
    return random.Random(seed) if seed is not None else None


def run_render(req: RenderRequest) -> RenderResult:
    return render_token(req.token_id, req, now=req.now, rng=_rng(req.seed))


def to_response(result: RenderResult) -> RenderResponse:
    return RenderResponse(
        token_id=result.token_id,
        svg=result.svg,
        category=result.rarity.category.value,
        rarity=result.rarity.rarity,
        rarity_color=result.rarity.rarity_color,
        cycle_index=result.scheme.cycle_index,
        days_until_next_cycle=result.scheme.days_until_next_cycle,
        error=result.error,
    )


@router.post("", response_model=RenderResponse)
async def render(req: RenderRequest) -> RenderResponse:
    return to_response(run_render(req))


@router.post("/owned", response_model=list[RenderResponse])
async def render_owned(
    req: OwnedRenderRequest,
    session: ChainSession | None = Depends(get_chain_session),
) -> list[RenderResponse]:
    """Render every token held by the session's account."""
    if session is None:
        raise HTTPException(status_code=503, detail="No chain session configured")
    try:
        items = [(token_id, session.fetch_token(token_id)) for token_id in session.owned_tokens()]
    except ChainSessionError as e:
        raise HTTPException(status_code=409, detail=str(e)) from None
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e)) from None
    return [to_response(r) for r in render_gallery(items, now=req.now, rng=_rng(req.seed))]


@router.post("/svg")
async def render_svg(req: RenderRequest) -> Response:
    result = run_render(req)
    return Response(
        content=result.svg,
        media_type="image/svg+xml",
        headers={"Content-Disposition": f'attachment; filename="{svg_filename(req.token_id or 0)}"'},
    )


@router.post("/png")
async def render_png(req: PngRequest) -> Response:
    result = run_render(req)
    png = svg_to_png(result.svg, req.width, req.height)
    return Response(
        content=png,
        media_type="image/png",
        headers={"Content-Disposition": f'attachment; filename="{png_filename(req.token_id or 0)}"'},
    )
