import logging

from config import settings
from exceptions import NotificationError, ValidationError
from schemas.contact import ContactMessage
from schemas.user import SessionIdentity
from security import authorize

logger = logging.getLogger(__name__)

def send_contact_message(actor: SessionIdentity, contact: ContactMessage, mailer) -> None:
    authorize(actor)
    name = contact.name.strip()
    if not name or not contact.message.strip():
        raise ValidationError("Name and message are required")
    if not settings.CONTACT_EMAIL:
        raise NotificationError("No contact address configured")

    sent = mailer.send_email(
        from_addr=f'"{name}" <{settings.SMTP_USERNAME}>',
        to_addr=settings.CONTACT_EMAIL,
        subject=f"Message from {name} via Lab Inventory",
        body=f"Name: {name}\nReply to: {contact.email}\nMessage:\n{contact.message}",
    )
    if not sent:
        raise NotificationError()
    logger.info("contact message from %s relayed", actor.login)
