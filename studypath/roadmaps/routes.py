# Roadmap pages
import logging

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError

from studypath.agents.workflow import save_draft
from studypath.deps import get_store
from studypath.roadmaps.models import RoadmapDraft
from studypath.roadmaps.store import RoadmapStore, StorageWriteError
from studypath.templating import roadmap_url, templates

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("/roadmaps")
def create_roadmap(
    request: Request,
    title: str = Form(""),
    draft_json: str = Form(...),
    store: RoadmapStore = Depends(get_store),
    ):

    try:
        draft = RoadmapDraft.model_validate_json(draft_json)
    except ValidationError as e:
        logger.warning("Rejected unreadable draft: %s", e)
        return templates.TemplateResponse(request, "generator.html",
        {"topic": "", "error": "The generated roadmap could not be read. Please generate it again."},
        status_code=400)

    context = {"topic": draft.topic, "draft": draft, "title": title}
    try:
        roadmap = save_draft(store, draft, title)
    except ValueError as e:
        return templates.TemplateResponse(request, "generator.html",
        {**context, "error": str(e)}, status_code=400)
    except StorageWriteError as e:
        logger.error("Saving roadmap %r failed: %s", title, e)
        # Draft stays on the page so nothing generated is lost
        return templates.TemplateResponse(request, "generator.html",
        {**context, "error": "Failed to save roadmap. Please try again."},
        status_code=503)

    return RedirectResponse(url=roadmap_url(roadmap.title), status_code=303)

@router.post("/roadmaps/delete")
def delete_roadmap(request: Request, title: str = Form(...),
store: RoadmapStore = Depends(get_store)):
    try:
        store.delete_by_title(title)
    except StorageWriteError as e:
        logger.error("Deleting roadmap %r failed: %s", title, e)
        return templates.TemplateResponse(request, "dashboard.html",
        {"roadmaps": store.list(), "error": "Failed to delete roadmap"},
        status_code=503)
    return RedirectResponse(url="/dashboard", status_code=303)

@router.get("/roadmap/{slug:path}", response_class=HTMLResponse)
def roadmap_detail(slug: str, request: Request,
store: RoadmapStore = Depends(get_store)):
    rm = store.find_by_slug(slug)
    if not rm:
        return templates.TemplateResponse(request, "roadmap_not_found.html",
        {"error": store.last_error}, status_code=404)
    return templates.TemplateResponse(request, "roadmap_detail.html",
    {"roadmap": rm})
