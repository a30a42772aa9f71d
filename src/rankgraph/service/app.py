from __future__ import annotations

import os
from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Depends, FastAPI, HTTPException
from pydantic import BaseModel

from rankgraph.edits import EditPreparer, prepare_session_edits
from rankgraph.errors import ItemNotRankedError, NothingRankedError, UnknownItemError
from rankgraph.ranking import RankingSession

from .auth import require_api_key


class ScoreIn(BaseModel):
    score: float


def ranking_state(session: RankingSession) -> dict[str, Any]:
    order = session.display_order
    return {
        "rank_list": {"id": session.rank_list.id, "name": session.rank_list.name},
        "order": order,
        "scores": {item_id: session.score_of(item_id) for item_id in order},
        "unranked": [item.id for item in session.unranked_items()],
        "adjusting": session.adjusting,
        "mode": session.mode.value,
        "stats": asdict(session.stats()),
    }


def edits_state(preparer: EditPreparer) -> dict[str, Any]:
    prepared = preparer.prepared
    return {
        "status": preparer.status.model_dump(),
        "prepared": prepared.model_dump(by_alias=True) if prepared else None,
    }


def build_ranking_router(session: RankingSession, preparer: EditPreparer) -> APIRouter:
    r = APIRouter(prefix="/v1", dependencies=[Depends(require_api_key)])

    @r.get("/ranking")
    async def get_ranking():
        return ranking_state(session)

    @r.post("/ranking/items/{item_id}")
    async def insert_rank(item_id: str):
        try:
            session.insert_rank(item_id)
        except UnknownItemError as e:
            raise HTTPException(status_code=404, detail=str(e))
        return ranking_state(session)

    @r.delete("/ranking/items/{item_id}")
    async def remove_rank(item_id: str):
        session.remove_rank(item_id)
        return ranking_state(session)

    @r.put("/ranking/items/{item_id}/score")
    async def set_score(item_id: str, payload: ScoreIn):
        try:
            session.set_score(item_id, payload.score)
        except ItemNotRankedError as e:
            raise HTTPException(status_code=409, detail=str(e))
        return ranking_state(session)

    @r.post("/ranking/adjustment/{item_id}")
    async def begin_adjustment(item_id: str):
        try:
            session.begin_adjustment(item_id)
        except ItemNotRankedError as e:
            raise HTTPException(status_code=409, detail=str(e))
        return ranking_state(session)

    @r.delete("/ranking/adjustment")
    async def end_adjustment():
        session.end_adjustment()
        return ranking_state(session)

    @r.post("/ranking/reset")
    async def reset():
        session.reset()
        return ranking_state(session)

    @r.get("/graph")
    async def knowledge_graph():
        return session.build_graph().to_dict()

    @r.get("/graph/property")
    async def property_graph():
        return session.property_graph().to_json_dict()

    @r.post("/edits/prepare")
    async def prepare_edits():
        try:
            await prepare_session_edits(session, preparer)
        except NothingRankedError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return edits_state(preparer)

    @r.get("/edits")
    async def get_edits():
        return edits_state(preparer)

    @r.delete("/edits")
    async def reset_edits():
        preparer.reset()
        return edits_state(preparer)

    return r


def create_app(session: RankingSession, preparer: EditPreparer):
    app = FastAPI(title="rankgraph - Slider Ranking", version="0.1.0")

    @app.get("/health")
    async def health():
        return {"ok": True, "host": os.uname().nodename}

    app.include_router(build_ranking_router(session, preparer))
    return app
