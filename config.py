# config.py
"""
프로젝트 전체에서 공통으로 쓰는
 - 환경 변수 (.env) 로딩
 - SMTP·서버 설정을 불변 MailConfig 객체로 고정
"""

from pathlib import Path
import os
from typing import Literal
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

# 로컬 개발 시 .env 파일 로드
load_dotenv()

SERVICE_NAME = "Mail Service"

# 공통 경로
ROOT_DIR = Path(__file__).resolve().parent
PUBLIC_DIR = ROOT_DIR / "mail_server" / "public"


class MailConfig(BaseModel):
    """시작 시 한 번 만들고 이후 읽기 전용으로만 쓰는 설정."""
    model_config = ConfigDict(frozen=True)

    # --- 발신자 (SMTP 로그인 계정과 동일) ---
    email_user: str | None = None
    email_pass: str | None = None

    # --- SMTP 릴레이 ---
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 587
    smtp_security: Literal["TLS", "SSL"] = "TLS"
    smtp_timeout: float = 120.0  # 소켓 타임아웃 (초)

    # --- HTTP 서버 ---
    host: str = "0.0.0.0"
    port: int = 3000
    app_env: str = "production"

    @property
    def expose_error_detail(self) -> bool:
        return self.app_env == "development"


def load_config() -> MailConfig:
    """환경 변수에서 MailConfig 생성. 포트·보안 모드 값이 잘못되면 ValueError."""
    return MailConfig(
        email_user=os.getenv("EMAIL_USER") or None,
        email_pass=os.getenv("EMAIL_PASS") or None,
        smtp_host=os.getenv("SMTP_HOST", "smtp.gmail.com"),
        smtp_port=int(os.getenv("SMTP_PORT", 587)),  # 기본값 587 (STARTTLS)
        smtp_security=os.getenv("SMTP_SECURITY", "TLS").upper(),
        smtp_timeout=float(os.getenv("SMTP_TIMEOUT", 120)),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", 3000)),  # 기본값 3000
        app_env=os.getenv("APP_ENV", "production"),
    )
