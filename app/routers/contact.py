import logging

import httpx
from fastapi import APIRouter, HTTPException

from app.schemas.contact import ContactIn
from app.services.mailer import send_contact_message

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/contact", tags=["contact"])


@router.post("")
async def submit_contact(payload: ContactIn):
    try:
        await send_contact_message(payload)
    except (httpx.HTTPError, RuntimeError):
        logger.exception("Contact message from %s was not delivered", payload.email)
        raise HTTPException(status_code=502, detail="Failed to send message. Please try again.")
    return {"success": True}
