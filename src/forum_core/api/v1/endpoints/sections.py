# src/forum_core/api/v1/endpoints/sections.py
"""Section-related endpoints for the forum API."""

from __future__ import annotations

from fastapi import APIRouter, status

from forum_core.api.v1.dependencies import IdPath, ModeratorDep, SessionDep, ViewerDep
from forum_core.models import Section
from forum_core.schemas.common import DeletionResponse
from forum_core.schemas.forum import SectionCreate, SectionResponse, SectionSummary, TopicSummary
from forum_core.services import content
from forum_core.services.aggregation import AggregationService
from forum_core.services.deletion import DeletionService, to_deletion_response

router = APIRouter(prefix="/sections", tags=["sections"])


@router.get("/", response_model=list[SectionSummary])
async def list_sections(db: SessionDep, viewer: ViewerDep) -> list[SectionSummary]:
    """List all sections with topic and comment counts, ordered by title."""
    return AggregationService(db).list_sections(viewer_id=viewer.user_id)


@router.post("/", response_model=SectionResponse, status_code=status.HTTP_201_CREATED)
async def create_section(
    section_data: SectionCreate,
    _moderator: ModeratorDep,
    db: SessionDep,
) -> Section:
    """Create a new section."""
    return content.add_section(db, section_data.title)


@router.get("/{section_id}/topics", response_model=list[TopicSummary])
async def list_section_topics(
    section_id: IdPath,
    db: SessionDep,
    viewer: ViewerDep,
) -> list[TopicSummary]:
    """List the topics of a section, newest first."""
    content.get_section(db, section_id)
    return AggregationService(db).list_topics_of_section(section_id, viewer_id=viewer.user_id)


@router.delete("/{section_id}", response_model=DeletionResponse)
async def delete_section(
    section_id: IdPath,
    _moderator: ModeratorDep,
    db: SessionDep,
) -> DeletionResponse:
    """Delete a section together with its topics, comments and votes."""
    return to_deletion_response(DeletionService(db).delete_section(section_id))
