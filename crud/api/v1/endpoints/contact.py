from fastapi import APIRouter, Depends

from crud import contact
from crud.api.deps import get_current_identity
from schemas.contact import ContactMessage
from schemas.user import SessionIdentity
from utils.email_service import get_email_service

router = APIRouter()

@router.post("/")
def send_contact_message(
    message: ContactMessage,
    identity: SessionIdentity = Depends(get_current_identity),
    mailer=Depends(get_email_service),
):
    contact.send_contact_message(identity, message, mailer)
    return {"status": "success", "detail": "Message sent"}
