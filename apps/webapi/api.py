# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from pydantic import BaseModel

from skincdn.classify import PhaseTag
from skincdn.engine import ItemImageResolver
from skincdn.store import ResolverStore

router = APIRouter(prefix="/api/v1")


class ResolveResponse(BaseModel):
    name: str
    kind: str
    resource_path: str
    url: str
    phase: Optional[str] = None


class UrlResponse(BaseModel):
    url: str


class ClassifyResponse(BaseModel):
    kind: str
    stripped_name: str
    original_name: str


def get_resolver(request: Request) -> ItemImageResolver:
    """Current resolver from the app's store; 503 until one is published."""

    store: ResolverStore = request.app.state.store  # type: ignore[attr-defined]
    resolver = store.current()
    if resolver is None:
        raise HTTPException(status_code=503, detail="catalog not loaded")
    return resolver


def _url_or_404(url: Optional[str], what: str) -> UrlResponse:
    if url is None:
        raise HTTPException(status_code=404, detail=f"no image for {what}")
    return UrlResponse(url=url)


@router.get("/meta")
def meta(request: Request, resolver: ItemImageResolver = Depends(get_resolver)) -> Dict[str, Any]:
    store: ResolverStore = request.app.state.store  # type: ignore[attr-defined]
    out = resolver.stats()
    out["generation"] = store.generation
    out["generated"] = resolver.snapshot.meta.get("generated")
    out["phases"] = [p.value for p in PhaseTag]
    return out


@router.get("/resolve", response_model=ResolveResponse)
def resolve(
    name: str = Query(..., min_length=1),
    phase: Optional[PhaseTag] = None,
    resolver: ItemImageResolver = Depends(get_resolver),
):
    hit = resolver.resolve_item_image(name, phase)
    if hit is None:
        raise HTTPException(status_code=404, detail=f"no image for {name!r}")
    return ResolveResponse(
        name=name,
        kind=hit.kind.value,
        resource_path=hit.resource_path,
        url=hit.url,
        phase=phase.value if phase else None,
    )


@router.get("/classify", response_model=ClassifyResponse)
def classify(name: str = Query(..., min_length=1), resolver: ItemImageResolver = Depends(get_resolver)):
    return ClassifyResponse(**resolver.classify(name).to_dict())


@router.get("/sticker/{name:path}", response_model=UrlResponse)
def sticker(name: str, large: bool = False, resolver: ItemImageResolver = Depends(get_resolver)):
    return _url_or_404(resolver.get_sticker_url(name, large), f"sticker {name!r}")


@router.get("/patch/{name:path}", response_model=UrlResponse)
def patch(name: str, large: bool = False, resolver: ItemImageResolver = Depends(get_resolver)):
    return _url_or_404(resolver.get_patch_url(name, large), f"patch {name!r}")


@router.get("/status-icon/{name:path}", response_model=UrlResponse)
def status_icon(name: str, large: bool = False, resolver: ItemImageResolver = Depends(get_resolver)):
    return _url_or_404(resolver.get_status_icon_url(name, large), f"status icon {name!r}")


@router.get("/weapon/{def_index}", response_model=UrlResponse)
def weapon(def_index: int, paint_index: Optional[int] = None, resolver: ItemImageResolver = Depends(get_resolver)):
    return _url_or_404(resolver.get_weapon_url(def_index, paint_index), f"weapon {def_index}/{paint_index}")
