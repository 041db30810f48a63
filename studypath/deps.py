## Request dependencies: the roadmap store and the model client
from functools import lru_cache

from studypath.agents.llm.base import LLMClient
from studypath.agents.llm.client import get_llm_client
from studypath.roadmaps.slots import Slot, get_slot
from studypath.roadmaps.store import RoadmapStore


@lru_cache
def get_default_slot() -> Slot:
    # One slot (and one SQL engine / Redis pool) per process
    return get_slot()


def get_store() -> RoadmapStore:
    return RoadmapStore(get_default_slot())


def get_llm() -> LLMClient:
    return get_llm_client()
