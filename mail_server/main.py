# mail_server/main.py
"""
Mail Service HTTP 서버 실행.
python -m mail_server.main  또는  uvicorn mail_server.main:app --reload
"""
from datetime import datetime, timezone
from fastapi import FastAPI, Depends, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException

import logging
import uvicorn

from config import MailConfig, PUBLIC_DIR, SERVICE_NAME, load_config
from services.email.adapter import build_message, send_email
from services.email.schemas import HealthResponse, SendEmailRequest, SendEmailResponse

logger = logging.getLogger("mail")
logging.basicConfig(level=logging.INFO, format="%(asctime)s | %(levelname)s | %(message)s")

EMAIL_REQUIRED = "Email address is required"


def get_config(request: Request) -> MailConfig:
    return request.app.state.config


def _json(status_code: int, body: SendEmailResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True, exclude_none=True))


async def _read_body(request: Request) -> dict:
    """JSON 또는 form(urlencoded / multipart) 본문을 dict로. 파싱 실패 시 빈 dict."""
    content_type = request.headers.get("content-type", "")
    try:
        if content_type.startswith("application/json"):
            data = await request.json()
        else:
            data = dict(await request.form())
    except (ValueError, HTTPException):  # form() 은 multipart 파싱 오류를 HTTPException(400) 으로 던짐
        return {}
    return data if isinstance(data, dict) else {}


def create_app(config: MailConfig) -> FastAPI:
    app = FastAPI(title=SERVICE_NAME)
    app.state.config = config
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/", include_in_schema=False)
    async def index():
        return FileResponse(PUBLIC_DIR / "index.html", media_type="text/html")

    @app.get("/health", response_model=HealthResponse)
    async def health():
        now = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
        return HealthResponse(status="OK", timestamp=now, service=SERVICE_NAME)

    @app.post("/send-email")
    async def send_email_route(request: Request, config: MailConfig = Depends(get_config)):
        data = await _read_body(request)

        recipient = data.get("recipientEmail")
        if not isinstance(recipient, str) or not recipient.strip():
            return _json(status.HTTP_400_BAD_REQUEST, SendEmailResponse(success=False, message=EMAIL_REQUIRED))

        name = data.get("recipientName")
        req = SendEmailRequest(recipient_email=recipient, recipient_name=name if isinstance(name, str) else None)
        logger.info("send request to=%s", req.recipient_email)

        # smtplib 은 블로킹이라 threadpool 에서 실행
        result = await run_in_threadpool(send_email, config, build_message(config, req))

        if result.success:
            return _json(
                status.HTTP_200_OK,
                SendEmailResponse(success=True, message=result.user_message, message_id=result.message_id),
            )
        return _json(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            SendEmailResponse(
                success=False,
                message=result.user_message,
                error=result.detail if config.expose_error_detail else None,
            ),
        )

    # 나머지 mail_server/public/ 파일은 정적 파일로 (라우트보다 뒤에 mount)
    app.mount("/", StaticFiles(directory=PUBLIC_DIR, html=True), name="public")
    return app


app = create_app(load_config())


def main() -> None:
    config = app.state.config
    logger.info("🚀 %s is running on port %d", SERVICE_NAME, config.port)
    logger.info("📧 Access the application at http://localhost:%d", config.port)
    uvicorn.run(app, host=config.host, port=config.port)


if __name__ == "__main__":
    main()
