"""
Email Service

Delivers password reset codes over SMTP (STARTTLS).

In development, when no SMTP user is configured, the code is written to
the log instead of being sent.
"""

import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from app.core.config import settings


logger = logging.getLogger(__name__)

RESET_SUBJECT = "Código para restablecer tu contraseña"

BRAND_GREEN = "#00723f"
BRAND_GOLD = "#dd971a"


def render_reset_text(otp_code: str, full_name: str) -> str:
    return (
        f"Hola {full_name}:\n\n"
        "Recibimos una solicitud para restablecer la contraseña de tu cuenta "
        "en el Portal de Certificados.\n\n"
        f"Código: {otp_code}\n"
        f"Vence en {settings.OTP_EXPIRE_MINUTES} minutos.\n\n"
        "Si no fuiste tú, ignora este mensaje; tu contraseña no cambiará.\n"
    )


def render_reset_html(otp_code: str, full_name: str) -> str:
    """HTML body with inline styles only."""
    return f"""\
<!DOCTYPE html>
<html lang="es">
<body style="margin:0;padding:24px;background:#f5f5f5;font-family:Arial,sans-serif;color:#374151;">
  <table role="presentation" width="100%" style="max-width:560px;margin:0 auto;background:#ffffff;border-radius:8px;">
    <tr>
      <td style="background:{BRAND_GREEN};color:#ffffff;padding:24px;font-size:20px;font-weight:bold;">
        Portal de Certificados UABC
      </td>
    </tr>
    <tr>
      <td style="padding:24px;line-height:1.5;">
        <p>Hola {full_name}:</p>
        <p>Usa este código para restablecer tu contraseña.</p>
        <p style="font-size:30px;letter-spacing:6px;font-family:monospace;text-align:center;
                  border:2px dashed {BRAND_GOLD};border-radius:8px;padding:16px;color:{BRAND_GREEN};">
          {otp_code}
        </p>
        <p>Vence en <strong>{settings.OTP_EXPIRE_MINUTES} minutos</strong>.</p>
        <p style="font-size:13px;color:#6b7280;">Si no fuiste tú, ignora este mensaje.</p>
      </td>
    </tr>
  </table>
</body>
</html>
"""


def build_reset_message(to_email: str, otp_code: str, full_name: str) -> MIMEMultipart:
    msg = MIMEMultipart("alternative")
    msg["Subject"] = RESET_SUBJECT
    msg["From"] = f"{settings.EMAIL_FROM_NAME} <{settings.EMAIL_FROM_ADDRESS}>"
    msg["To"] = to_email
    msg.attach(MIMEText(render_reset_text(otp_code, full_name), "plain", "utf-8"))
    msg.attach(MIMEText(render_reset_html(otp_code, full_name), "html", "utf-8"))
    return msg


async def send_password_reset_email(
    to_email: str,
    otp_code: str,
    full_name: str,
) -> bool:
    """
    Send a password reset code.

    Args:
        to_email: Recipient address.
        otp_code: Six-digit code.
        full_name: Name used in the greeting.

    Returns:
        bool: True if the SMTP server accepted the message (or, in
        development without SMTP credentials, once the code is logged).
    """
    if settings.is_development and not settings.SMTP_USER:
        logger.info("[DEV MODE] Password reset code for %s: %s", to_email, otp_code)
        return True

    msg = build_reset_message(to_email, otp_code, full_name)
    try:
        with smtplib.SMTP(settings.SMTP_HOST, settings.SMTP_PORT, timeout=15) as server:
            server.starttls()
            server.login(settings.SMTP_USER, settings.SMTP_PASSWORD)
            server.send_message(msg)
    except (smtplib.SMTPException, OSError) as e:
        logger.error("Could not send password reset email to %s: %s", to_email, e)
        return False

    logger.info("Password reset email sent to %s", to_email)
    return True
