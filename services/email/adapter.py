# services/email/adapter.py
from __future__ import annotations
import ssl, logging
from email.message import EmailMessage
from email.utils import formataddr, make_msgid
from smtplib import (
    SMTP, SMTP_SSL, SMTPAuthenticationError, SMTPConnectError,
    SMTPException, SMTPServerDisconnected,
)
from config import MailConfig
from .schemas import FailureKind, Message, SendEmailRequest, SendResult
from .templates import SENDER_DISPLAY_NAME, SUBJECT, render_html, render_text

logger = logging.getLogger(__name__)


class MailConfigError(Exception):
    """발신 계정(EMAIL_USER / EMAIL_PASS)이 설정되지 않았을 때."""


def build_message(config: MailConfig, req: SendEmailRequest) -> Message:
    name = req.display_name
    return Message(
        sender=formataddr((SENDER_DISPLAY_NAME, config.email_user or "")),
        to=req.recipient_email.strip(),
        subject=SUBJECT,
        html_body=render_html(name),
        text_body=render_text(name),
    )


def _to_email_message(message: Message, sender_addr: str) -> EmailMessage:
    msg = EmailMessage()
    msg["From"] = message.sender
    msg["To"] = message.to
    msg["Subject"] = message.subject
    # Message-ID를 직접 만들어 두고 성공 시 그대로 message_id로 돌려줌
    domain = sender_addr.rpartition("@")[2] or None
    msg["Message-ID"] = make_msgid(domain=domain)
    msg.set_content(message.text_body)
    msg.add_alternative(message.html_body, subtype="html")
    return msg


def _deliver(config: MailConfig, msg: EmailMessage) -> None:
    if not (config.email_user and config.email_pass):
        raise MailConfigError("SMTP credentials not configured (EMAIL_USER/EMAIL_PASS)")

    context = ssl.create_default_context()

    if config.smtp_security == "SSL":
        # e.g. Gmail 465
        with SMTP_SSL(config.smtp_host, config.smtp_port, timeout=config.smtp_timeout, context=context) as server:
            server.login(config.email_user, config.email_pass)
            server.send_message(msg)
    else:
        # TLS (STARTTLS) e.g. Gmail 587
        with SMTP(config.smtp_host, config.smtp_port, timeout=config.smtp_timeout) as server:
            server.ehlo()
            server.starttls(context=context)
            server.ehlo()
            server.login(config.email_user, config.email_pass)
            server.send_message(msg)


def classify_error(exc: BaseException) -> FailureKind:
    # SMTPException 은 OSError 하위 클래스라서 순서가 중요함
    if isinstance(exc, SMTPAuthenticationError):
        return FailureKind.AUTH
    if isinstance(exc, (SMTPConnectError, SMTPServerDisconnected)):
        return FailureKind.CONNECTION
    if isinstance(exc, SMTPException):
        return FailureKind.OTHER
    if isinstance(exc, OSError):
        return FailureKind.CONNECTION
    return FailureKind.OTHER


def send_email(config: MailConfig, message: Message) -> SendResult:
    """
    릴레이로 한 번만 발송을 시도하고 결과를 SendResult로 반환합니다.
    재시도는 하지 않으며 예외는 밖으로 던지지 않습니다.
    """
    try:
        # 헤더에 CR/LF 가 섞인 주소 등은 메시지 생성 단계에서 ValueError
        msg = _to_email_message(message, config.email_user or "")
        _deliver(config, msg)
    except Exception as e:
        kind = classify_error(e)
        logger.exception("send failed to=%s kind=%s", message.to, kind.value)
        return SendResult(success=False, failure=kind, detail=str(e))

    message_id = msg["Message-ID"]
    logger.info("sent to=%s message_id=%s", message.to, message_id)
    return SendResult(success=True, message_id=message_id)
