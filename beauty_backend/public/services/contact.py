# public/services/contact.py

import logging

from public.models import ContactMessage

logger = logging.getLogger(__name__)

CONTACT_THANKS = "Thank you for your message. We will get back to you soon."


def submit_contact_message(*, name: str, email: str, subject: str, message: str) -> ContactMessage:
    msg = ContactMessage.objects.create(
        name=name.strip(),
        email=email.strip().lower(),
        subject=subject.strip(),
        message=message.strip(),
    )
    logger.info("Contact message received", extra={"contact_id": msg.pk, "subject": msg.subject})
    return msg
