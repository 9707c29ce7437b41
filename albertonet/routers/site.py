import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Depends, HTTPException

from albertonet import dependencies as deps
from albertonet.exceptions import MessageDeliveryError
from albertonet.schemas.contact import ContactForm, ContactResult
from albertonet.schemas.project import LocalizedProject
from albertonet.services.contact_service import ContactService
from albertonet.services.localization import Localization
from albertonet.services.project_service import ProjectService

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_plain(value: Any) -> Any:
    if hasattr(value, "items"):
        return {key: _to_plain(item) for key, item in value.items()}
    return value


@router.get("/messages/{locale}")
def get_messages(
    locale: str, localization: Localization = Depends(deps.get_localization)
):
    """Full translation dictionary, default locale when unknown."""
    resolved = localization.normalize_locale(locale)
    return {"locale": resolved, "messages": _to_plain(localization.dictionary(resolved))}


@router.get("/messages/{locale}/{key}")
def get_message(
    locale: str,
    key: str,
    localization: Localization = Depends(deps.get_localization),
):
    value = localization.resolve(locale, key=key)
    if value is None:
        raise HTTPException(status_code=404, detail="Translation not found")
    return {"locale": localization.normalize_locale(locale), "key": key, "value": value}


@router.get("/projects", response_model=List[LocalizedProject])
def list_projects(
    locale: Optional[str] = None,
    service: ProjectService = Depends(deps.get_project_service),
):
    return service.get_top_projects(locale)


@router.post("/contact", response_model=ContactResult)
async def send_contact(
    form: ContactForm,
    locale: Optional[str] = None,
    service: ContactService = Depends(deps.get_contact_service),
):
    try:
        result = await service.submit(form, locale)
    except MessageDeliveryError as e:
        logger.error(f"Contact message delivery failed: {e}")
        raise HTTPException(status_code=502, detail="Failed to send message")

    if result.status == "error":
        raise HTTPException(status_code=400, detail=result.errors)
    return result
