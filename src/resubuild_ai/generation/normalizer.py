"""Coerces raw model output into the application's typed shapes."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from resubuild_ai.errors import MalformedResponse
from resubuild_ai.models.base import new_id
from resubuild_ai.models.builders import FormSchema
from resubuild_ai.models.chat import ChatReply, ChatRouterResult, JobSuggestion, ResumeUpdate
from resubuild_ai.models.jobs import JobSearchQuery
from resubuild_ai.models.resume import ResumeProfile
from resubuild_ai.utils.json_parser import extract_json, strip_code_fences

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

RESUME_LIST_KEYS = ("experience", "education", "projects")
RESUME_WRAPPER_KEYS = ("resume", "updatedResume", "data")


def normalize_text(raw: str) -> str:
    return (raw or "").strip()


def normalize_html(raw: str) -> str:
    """Strip code fences the model added around an HTML document."""
    return strip_code_fences(raw or "")


def normalize_comma_list(raw: str) -> list[str]:
    return [s.strip() for s in normalize_text(raw).split(",") if s.strip()]


def parse_json(raw: str) -> dict | list:
    return extract_json(raw)


def backfill_ids(items: Any) -> Any:
    """Give every dict item without an id a fresh one. Existing ids are kept."""
    if not isinstance(items, list):
        return items
    for item in items:
        if isinstance(item, dict) and not item.get("id"):
            item["id"] = new_id()
    return items


def backfill_resume_ids(data: dict) -> dict:
    """Back-fill ids on experience, education, projects and custom sections in place."""
    for key in RESUME_LIST_KEYS:
        backfill_ids(data.get(key))
    sections = backfill_ids(data.get("customSections", data.get("custom_sections")))
    if isinstance(sections, list):
        for section in sections:
            if isinstance(section, dict):
                backfill_ids(section.get("items"))
    return data


def _validate(model: type[M], data: Any) -> M:
    if not isinstance(data, dict):
        raise MalformedResponse(f"Expected a JSON object for {model.__name__}, got {type(data).__name__}")
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise MalformedResponse(f"Invalid {model.__name__}: {exc}") from exc


def resume_from_data(data: Any) -> ResumeProfile:
    if isinstance(data, dict):
        for key in RESUME_WRAPPER_KEYS:
            inner = data.get(key)
            if isinstance(inner, dict) and "personalInfo" not in data:
                data = inner
                break
    if not isinstance(data, dict):
        raise MalformedResponse(f"Expected a resume object, got {type(data).__name__}")
    return _validate(ResumeProfile, backfill_resume_ids(data))


def normalize_resume(raw: str) -> ResumeProfile:
    return resume_from_data(parse_json(raw))


def normalize_model(raw: str, model: type[M]) -> M:
    return _validate(model, parse_json(raw))


def normalize_list(
    raw: str,
    model: type[M],
    keys: tuple[str, ...] = ("items",),
    *,
    with_ids: bool = False,
) -> list[M]:
    """Validate a JSON array of objects.

    A dict wrapper holding the array under one of ``keys`` is unwrapped.
    Items that are not objects or fail validation are dropped.
    """
    data = parse_json(raw)
    if isinstance(data, dict):
        for key in keys:
            if isinstance(data.get(key), list):
                data = data[key]
                break
        else:
            raise MalformedResponse(f"Expected a JSON array of {model.__name__}")
    if not isinstance(data, list):
        raise MalformedResponse(f"Expected a JSON array of {model.__name__}")

    if with_ids:
        backfill_ids(data)
    result: list[M] = []
    for item in data:
        if not isinstance(item, dict):
            continue
        try:
            result.append(model.model_validate(item))
        except ValidationError:
            logger.warning("Dropping invalid %s item: %r", model.__name__, item)
    return result


def normalize_form_schema(raw: str) -> FormSchema:
    data = parse_json(raw)
    if not isinstance(data, dict):
        raise MalformedResponse(f"Expected a form object, got {type(data).__name__}")
    fields = data.get("fields")
    if isinstance(fields, list):
        data["fields"] = backfill_ids(
            [f for f in fields if isinstance(f, dict) and isinstance(f.get("label"), str) and f["label"].strip()]
        )
    return _validate(FormSchema, data)


def normalize_chat(raw: str) -> ChatRouterResult:
    """Build the router result; unusable edit or search payloads become a plain reply."""
    data = parse_json(raw)
    if not isinstance(data, dict):
        raise MalformedResponse(f"Expected a JSON object from the chat router, got {type(data).__name__}")

    action = data.get("action")
    text = data.get("text") if isinstance(data.get("text"), str) else ""

    if action == "update_resume":
        updated = data.get("updatedResume", data.get("updated_resume"))
        if isinstance(updated, dict):
            try:
                return ResumeUpdate(text=text, updated_resume=resume_from_data(updated))
            except MalformedResponse:
                pass
        logger.warning("Chat router returned update_resume without a usable resume")
    elif action == "suggest_jobs":
        query = data.get("searchQuery", data.get("search_query"))
        if isinstance(query, dict):
            search = JobSearchQuery.model_validate(query)
            if search.query.strip():
                return JobSuggestion(text=text, search_query=search)
        logger.warning("Chat router returned suggest_jobs without a search query")
    elif action not in (None, "none"):
        logger.warning("Chat router returned unknown action %r", action)

    return ChatReply(text=text)
