import smtplib
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from typing import Optional

from app.core.config import settings
from app.core.logger import logger
from app.models.store_models import ContactMessage

def send_email(subject: str, body: str, to_email: Optional[str] = None) -> bool:
    """
    Sends an email using SMTP (e.g., Gmail).
    Defaults `to_email` to CONTACT_NOTIFY_EMAIL.
    Returns: True if successful, False otherwise.
    """
    to_email = to_email or settings.CONTACT_NOTIFY_EMAIL
    if not to_email:
        logger.info("ℹ️ Email notifications are disabled (CONTACT_NOTIFY_EMAIL not set).")
        return False

    if not settings.SMTP_USERNAME or not settings.SMTP_PASSWORD:
        logger.error("❌ SMTP credentials missing in .env.")
        return False

    try:
        msg = MIMEMultipart()
        msg['From'] = settings.SMTP_USERNAME
        msg['To'] = to_email
        msg['Subject'] = subject

        msg.attach(MIMEText(body, 'plain'))

        server = smtplib.SMTP(settings.SMTP_SERVER, settings.SMTP_PORT)
        server.starttls()
        server.login(settings.SMTP_USERNAME, settings.SMTP_PASSWORD)
        server.sendmail(settings.SMTP_USERNAME, to_email, msg.as_string())
        server.quit()

        logger.info(f"✅ Email sent to {to_email} with subject: '{subject}'")
        return True
    except Exception as e:
        logger.error(f"❌ Failed to send email: {e}")
        return False

def notify_contact_message(contact: ContactMessage) -> bool:
    """Forwards a contact form submission to the owner's mailbox."""
    phone = f"{contact.countryCode} {contact.phone}" if contact.countryCode else contact.phone
    subject = f"New contact message from {contact.fullname}"
    body = (
        f"Name: {contact.fullname}\n"
        f"Email: {contact.email}\n"
        f"Phone: {phone}\n"
        f"Received: {contact.receivedAt.isoformat()}\n\n"
        f"{contact.message}\n"
    )
    return send_email(subject, body)
