import asyncio
import logging
import re
from typing import Callable, List, Optional

from albertonet.schemas.contact import ContactForm, ContactMessage, ContactResult
from albertonet.services.localization import Localization
from albertonet.services.message_sender import MessageSender

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[\w\-.]+@([\w-]+\.)+[\w-]{2,4}$")
MIN_MESSAGE_LENGTH = 10


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.match(email) is not None


def validate_contact(
    form: ContactForm, t: Callable[[Optional[str]], Optional[str]]
) -> List[str]:
    """Return localized validation errors for a contact form, empty when valid."""
    errors = []

    if not form.name.strip():
        errors.append(t("nameIsBlank"))

    if not form.email.strip():
        errors.append(t("emailIsBlank"))
    elif not is_valid_email(form.email.strip()):
        errors.append(t("emailIsNotValid"))

    if len(form.message.strip()) < MIN_MESSAGE_LENGTH:
        errors.append(t("messageToShort"))

    return [error for error in errors if error]


class ContactService:
    def __init__(self, localization: Localization, sender: MessageSender):
        self.localization = localization
        self.sender = sender

    async def submit(self, form: ContactForm, locale: Optional[str] = None) -> ContactResult:
        t = self.localization.translator(locale, "contact.error")
        errors = validate_contact(form, t)
        echo = form.model_dump()

        if errors:
            logger.info(f"Contact form rejected with {len(errors)} errors")
            return ContactResult(status="error", errors=errors, **echo)

        message = ContactMessage(
            name=form.name.strip(),
            email=form.email.strip(),
            message=form.message.strip(),
            isCompany=form.isCompany,
        )
        await asyncio.to_thread(self.sender.send_contact_notification, message)
        return ContactResult(status="send", **echo)
