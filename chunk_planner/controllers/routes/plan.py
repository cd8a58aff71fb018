"""POST /plan: analyze a document and return its resolved chunking plan."""

from fastapi import APIRouter, HTTPException

from chunk_planner.config.chunking.static import resolve_user_config
from chunk_planner.config.settings import get_settings
from chunk_planner.controllers.schema.plan import PlanRequest, PlanResponse
from chunk_planner.services.planning.document import analyze_and_plan

router = APIRouter(prefix="/plan", tags=["planning"])


@router.post("", response_model=PlanResponse)
def plan_chunking(body: PlanRequest) -> PlanResponse:
    """
    Plan chunking for one document. Profile defaults to the configured
    default_override_profile; inline overrides win over profile values.
    Empty content, unknown profiles and invalid overrides are rejected with 400.
    """
    profile = body.profile if body.profile is not None else get_settings().default_override_profile
    try:
        # pydantic's ValidationError is a ValueError too
        user_config = resolve_user_config(profile or None, body.chunking_config)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    try:
        result = analyze_and_plan(body.content, body.source, body.doc_type, user_config)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    return PlanResponse(
        document_id=result.document.id,
        metadata=result.document.metadata,
        characteristics=result.characteristics,
        chunking_config=result.config,
    )
