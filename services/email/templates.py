# services/email/templates.py

"""
환영 메일 본문 (HTML / 플레인 텍스트) 생성.
- 템플릿 엔진 없이 고정 문자열에 이름만 끼워 넣는 순수 함수
- HTML 본문에는 이름을 escape 해서 넣음 (마크업 주입 방지)
"""

from html import escape

SUBJECT = "👋 Hello from Mail Service!"
SENDER_DISPLAY_NAME = "Mail Service"

# ────────────────────────────────────────────────────────────────
# 1. HTML

_STYLE = """
    body {
      font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
      line-height: 1.6;
      color: #333;
      max-width: 600px;
      margin: 0 auto;
      padding: 20px;
      background-color: #f4f4f4;
    }
    .email-container {
      background-color: white;
      padding: 30px;
      border-radius: 10px;
      box-shadow: 0 2px 10px rgba(0,0,0,0.1);
    }
    .header {
      text-align: center;
      margin-bottom: 30px;
    }
    .header h1 {
      color: #4CAF50;
      margin: 0;
      font-size: 28px;
    }
    .greeting {
      font-size: 18px;
      margin-bottom: 20px;
    }
    .content {
      margin-bottom: 20px;
    }
    .highlight {
      background-color: #e8f5e8;
      padding: 15px;
      border-left: 4px solid #4CAF50;
      margin: 20px 0;
      border-radius: 0 5px 5px 0;
    }
    .footer {
      text-align: center;
      margin-top: 30px;
      padding-top: 20px;
      border-top: 1px solid #eee;
      color: #666;
      font-size: 14px;
    }
"""

FEATURES = [
    "Simple web interface for sending emails",
    "Personalized email templates",
    "Support for both HTML and plain text emails",
    "Error handling and validation",
    "Responsive design that works on all devices",
]

INTRO = (
    "Thank you for trying out our Mail Service application! This is an automated "
    "introductory email to let you know that everything is working perfectly."
)
ABOUT = (
    "Mail Service is a simple yet powerful application that allows you to send "
    "personalized emails programmatically. It's built with modern web technologies "
    "and designed to be easy to use and customize."
)
OUTRO = (
    "Whether you're testing email functionality, sending welcome messages, or just "
    "exploring how email automation works, this service has got you covered!"
)


def render_html(name: str) -> str:
    """HTML 본문 반환. 같은 이름이면 항상 같은 문자열."""
    features = "\n".join(f"        <li>✅ {item}</li>" for item in FEATURES)
    return f"""<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Hello from Mail Service!</title>
  <style>{_STYLE}  </style>
</head>
<body>
  <div class="email-container">
    <div class="header">
      <h1>🎉 Welcome!</h1>
    </div>

    <div class="greeting">
      Hello {escape(name)}! 👋
    </div>

    <div class="content">
      <p>{INTRO}</p>

      <div class="highlight">
        <strong>🚀 What is Mail Service?</strong><br>
        {ABOUT}
      </div>

      <p><strong>Features include:</strong></p>
      <ul>
{features}
      </ul>

      <p>{OUTRO}</p>
    </div>

    <div class="footer">
      <p>This email was sent automatically by Mail Service.</p>
      <p>Built with ❤️ using Python, FastAPI, and smtplib</p>
      <p><small>If you received this email in error, you can safely ignore it.</small></p>
    </div>
  </div>
</body>
</html>
"""

# ────────────────────────────────────────────────────────────────
# 2. Plain text

def render_text(name: str) -> str:
    features = "\n".join(f"- {item}" for item in FEATURES)
    return f"""Hello {name}!

{INTRO}

What is Mail Service?
{ABOUT}

Features include:
{features}

{OUTRO}

---
This email was sent automatically by Mail Service.
Built with love using Python, FastAPI, and smtplib

If you received this email in error, you can safely ignore it.
"""
