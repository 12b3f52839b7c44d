# services/email/schemas.py
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Optional

DEFAULT_RECIPIENT_NAME = "there"
SUCCESS_MESSAGE = "Email sent successfully!"


class SendEmailRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    recipient_email: str = Field("", alias="recipientEmail")
    recipient_name: Optional[str] = Field(None, alias="recipientName")

    @property
    def display_name(self) -> str:
        # 이름이 없거나 빈 문자열이면 기본 호칭 사용
        return self.recipient_name or DEFAULT_RECIPIENT_NAME


class Message(BaseModel):
    model_config = ConfigDict(frozen=True)

    sender: str
    to: str
    subject: str
    html_body: str
    text_body: str


class FailureKind(str, Enum):
    AUTH = "auth"
    CONNECTION = "connection"
    OTHER = "other"


FAILURE_MESSAGES: dict[FailureKind, str] = {
    FailureKind.AUTH: "Email authentication failed. Please check your email configuration.",
    FailureKind.CONNECTION: "Connection failed. Please check your internet connection.",
    FailureKind.OTHER: "Failed to send email. Please try again.",
}


class SendResult(BaseModel):
    success: bool
    message_id: Optional[str] = None
    failure: Optional[FailureKind] = None
    detail: Optional[str] = None

    @model_validator(mode="after")
    def _check_variant(self) -> "SendResult":
        # 성공이면 message_id 만, 실패면 failure 만
        if self.success and (self.failure is not None or not self.message_id):
            raise ValueError("successful SendResult needs message_id and no failure")
        if not self.success and (self.failure is None or self.message_id is not None):
            raise ValueError("failed SendResult needs failure and no message_id")
        return self

    @property
    def user_message(self) -> str:
        if self.success:
            return SUCCESS_MESSAGE
        return FAILURE_MESSAGES[self.failure]


class SendEmailResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool
    message: str
    message_id: Optional[str] = Field(None, alias="messageId")
    error: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    service: str
