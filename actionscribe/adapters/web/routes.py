"""Action and extraction API routes."""

from typing import List

from fastapi import APIRouter, Depends, Request, Response
from pydantic import BaseModel

from actionscribe.adapters.web.auth import resolve_identity
from actionscribe.domain.merger import merge_actions
from actionscribe.domain.models import Action
from actionscribe.ports.inbound import Identity
from actionscribe.ports.outbound import ActionStorePort
from actionscribe.services.extraction import ActionExtractionService

actions_router = APIRouter(tags=["Actions"])


def get_store(request: Request) -> ActionStorePort:
    return request.app.state.store


def get_extractor(request: Request) -> ActionExtractionService:
    return request.app.state.extractor


class ActionCreateRequest(BaseModel):
    text: str


class ActionUpdateRequest(BaseModel):
    id: str
    completed: bool


class ActionMergeRequest(BaseModel):
    candidates: List[str]


class ActionResponse(BaseModel):
    id: str
    text: str
    timestamp: str
    completed: bool

    @classmethod
    def of(cls, action: Action) -> "ActionResponse":
        return cls(**action.to_dict())


class ExtractRequest(BaseModel):
    text: str


class ExtractResponse(BaseModel):
    actions: str


# Store routes are plain `def` so SQLAlchemy runs in the threadpool.

@actions_router.get("/actions", response_model=List[ActionResponse])
def list_actions(
    identity: Identity = Depends(resolve_identity),
    store: ActionStorePort = Depends(get_store),
):
    return [ActionResponse.of(a) for a in store.list(identity)]


@actions_router.post("/actions", response_model=ActionResponse)
def create_action(
    req: ActionCreateRequest,
    identity: Identity = Depends(resolve_identity),
    store: ActionStorePort = Depends(get_store),
):
    return ActionResponse.of(store.create(identity, req.text))


@actions_router.patch("/actions", response_model=ActionResponse)
def update_action(
    req: ActionUpdateRequest,
    identity: Identity = Depends(resolve_identity),
    store: ActionStorePort = Depends(get_store),
):
    return ActionResponse.of(store.update_completion(identity, req.id, req.completed))


@actions_router.delete("/actions/{action_id}", status_code=204)
def delete_action(
    action_id: str,
    identity: Identity = Depends(resolve_identity),
    store: ActionStorePort = Depends(get_store),
):
    store.delete(identity, action_id)
    return Response(status_code=204)


@actions_router.post("/actions/merge", response_model=List[ActionResponse])
def merge_candidates(
    req: ActionMergeRequest,
    identity: Identity = Depends(resolve_identity),
    store: ActionStorePort = Depends(get_store),
):
    """Persist only the candidates not already in the caller's list.

    Each new action is committed on its own; a failure midway leaves the
    earlier ones saved.
    """
    existing = store.list(identity)
    created = merge_actions(existing, req.candidates, store.owner_id(identity))
    return [ActionResponse.of(store.add(identity, action)) for action in created]


@actions_router.post("/extract-actions", response_model=ExtractResponse)
async def extract_actions(
    req: ExtractRequest,
    identity: Identity = Depends(resolve_identity),
    extractor: ActionExtractionService = Depends(get_extractor),
):
    _ = identity
    return ExtractResponse(actions=await extractor.extract_raw(req.text))
