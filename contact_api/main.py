# main.py — contact endpoint for the portfolio site
# Run: uvicorn contact_api.main:app --port 8000
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging

from portfolio_site.config import configure_logging

configure_logging()
logger = logging.getLogger(__name__)

SITE_ORIGINS = ["http://localhost:8501", "https://hemant-raj.vercel.app"]

app = FastAPI(title="Portfolio Contact API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=SITE_ORIGINS,
    allow_methods=["POST"],
    allow_headers=["*"],
)


@app.get("/")
def health():
    return {"status": "ok", "service": "contact-api"}


@app.post("/api/contact")
async def contact(request: Request):
    """
    Accepts {name, email, message, timestamp}. Only checks that the three
    text fields are present; the submission is logged, not stored or mailed.
    """
    try:
        body = await request.json()
        if not isinstance(body, dict):
            body = {}
        name = body.get("name")
        email = body.get("email")
        message = body.get("message")
        timestamp = body.get("timestamp")

        if not name or not email or not message:
            return JSONResponse({"error": "Missing required fields"}, status_code=400)

        # TODO: deliver by email (SendGrid/Resend) once an account is set up
        logger.info("Contact form submission: %s", {
            "name": name,
            "email": email,
            "message": message,
            "timestamp": timestamp,
            "ip": request.client.host if request.client else "unknown",
            "userAgent": request.headers.get("user-agent") or "unknown",
        })

        return JSONResponse({"message": "Message sent successfully"}, status_code=200)

    except Exception:
        logger.exception("Error processing contact form")
        return JSONResponse({"error": "Internal server error"}, status_code=500)
