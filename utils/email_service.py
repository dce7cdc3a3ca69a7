"""
SMTP relay for outbound messages
"""
import logging
import smtplib
from email.mime.text import MIMEText

from config import settings

logger = logging.getLogger(__name__)

class EmailService:

    def __init__(self, smtp_server: str, smtp_port: int, smtp_username: str, smtp_password: str):
        self.smtp_server = smtp_server
        self.smtp_port = smtp_port
        self.smtp_username = smtp_username
        self.smtp_password = smtp_password

    def send_email(self, from_addr: str, to_addr: str, subject: str, body: str) -> bool:
        """Send a plain-text email; returns False when delivery fails"""
        try:
            msg = MIMEText(body, 'plain', 'utf-8')
            msg['Subject'] = subject
            msg['From'] = from_addr
            msg['To'] = to_addr

            with smtplib.SMTP(self.smtp_server, self.smtp_port) as server:
                server.starttls()
                server.login(self.smtp_username, self.smtp_password)
                server.send_message(msg)

            logger.info(f"Email sent successfully to {to_addr}")
            return True

        except Exception as e:
            logger.error(f"Failed to send email to {to_addr}: {e}")
            return False


def get_email_service() -> EmailService:
    return EmailService(
        settings.SMTP_SERVER,
        settings.SMTP_PORT,
        settings.SMTP_USERNAME,
        settings.SMTP_PASSWORD,
    )
