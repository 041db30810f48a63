## Top-level pages: generator form and dashboard
from fastapi import APIRouter, Request, Depends
from fastapi.responses import HTMLResponse

from studypath.deps import get_store
from studypath.roadmaps.store import RoadmapStore
from studypath.templating import templates

router = APIRouter()

@router.get("/", response_class=HTMLResponse)
def generator_page(request: Request):
    return templates.TemplateResponse(request, "generator.html", {"topic": ""})

@router.get("/dashboard", response_class=HTMLResponse)
def dashboard(request: Request, store: RoadmapStore = Depends(get_store)):
    roadmaps = store.list()
    return templates.TemplateResponse(request, "dashboard.html",
    {"roadmaps": roadmaps, "error": store.last_error})
