# studypath/generation/routes.py
from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse

from studypath.agents.llm.base import LLMClient
from studypath.agents.workflow import GenerationError, generate_roadmap_draft
from studypath.deps import get_llm
from studypath.templating import templates

router = APIRouter()


@router.post("/generate", response_class=HTMLResponse)
def generate(
    request: Request,
    topic: str = Form(...),
    llm: LLMClient = Depends(get_llm),
):
    topic = topic.strip()
    if not topic:
        return templates.TemplateResponse(
            request,
            "generator.html",
            {"topic": "", "error": "Enter a topic to generate a roadmap."},
            status_code=400,
        )

    try:
        draft = generate_roadmap_draft(topic, llm)
    except GenerationError as e:
        # Transport and parse failures carry different messages
        return templates.TemplateResponse(
            request,
            "generator.html",
            {"topic": topic, "error": str(e)},
            status_code=502,
        )

    return templates.TemplateResponse(
        request,
        "generator.html",
        {
            "topic": topic,
            "draft": draft,
            "title": topic,
            "error": draft.question_error,
        },
    )
