import os

from dotenv import load_dotenv

load_dotenv()


# --- Site ---
SITE_URL = os.getenv("SITE_URL", "https://casacolinacare.com").rstrip("/")
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# --- Contact form mail ---
CONTACT_FROM_EMAIL = os.getenv("CONTACT_FROM_EMAIL", "Casa Colina Care <onboarding@resend.dev>")
CONTACT_TO_EMAIL = os.getenv("CONTACT_TO_EMAIL", "kriss@casacolinacare.com")
CONTACT_ENDPOINT_URL = os.getenv("CONTACT_ENDPOINT_URL", "http://localhost:8000/api/contact")

# --- Transport ---
EMAIL_TRANSPORT = os.getenv("EMAIL_TRANSPORT", "resend").lower()

RESEND_API_URL = os.getenv("RESEND_API_URL", "https://api.resend.com/emails")
RESEND_API_KEY = os.getenv("RESEND_API_KEY")

SMTP_HOST = os.getenv("SMTP_HOST", "smtp.seznam.cz")
SMTP_PORT = int(os.getenv("SMTP_PORT", "465"))  # SSL
SMTP_USERNAME = os.getenv("SMTP_USERNAME")
SMTP_PASSWORD = os.getenv("SMTP_PASSWORD")
