# app/shared/config.py
from pathlib import Path
from pydantic import BaseModel
from dotenv import load_dotenv
import os

load_dotenv()

ROOT = Path(__file__).resolve().parents[2]   # project root
STORAGE_DIR = ROOT / "storage"

class Settings(BaseModel):
    ENV: str = os.getenv("ENV", "dev")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    DATABASE_URL: str = os.getenv("DATABASE_URL", f"sqlite:///{(STORAGE_DIR / 'portal.db').as_posix()}")
    CORS_ORIGINS: list[str] = [o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",") if o.strip()]

    # plan a new account starts on
    DEFAULT_PLAN: str = os.getenv("DEFAULT_PLAN", "라이트")

    # JWT settings
    JWT_KEY: str = os.getenv("JWT_KEY", "dev-secret")
    JWT_ALG: str = os.getenv("JWT_ALG", "HS256")
    JWT_ISS: str | None = os.getenv("JWT_ISS")
    JWT_AUD: str | None = os.getenv("JWT_AUD")
    JWT_EXPIRE_MIN: int = int(os.getenv("JWT_EXPIRE_MIN", "60"))

    # transactional email (Resend)
    RESEND_API_KEY: str | None = os.getenv("RESEND_API_KEY")
    RESEND_API_URL: str = os.getenv("RESEND_API_URL", "https://api.resend.com/emails")
    EMAIL_FROM: str = os.getenv("EMAIL_FROM", "EduAI Labs <onboarding@resend.dev>")
    CONTACT_EMAIL: str = os.getenv("CONTACT_EMAIL", "starkmind.ai@gmail.com")
    INQUIRY_EMAIL: str = os.getenv("INQUIRY_EMAIL", "starkmind.ai@gmail.com")
    EMAIL_DRY_RUN: bool = os.getenv("EMAIL_DRY_RUN", "false").lower() == "true"
    EMAIL_TIMEOUT_SECONDS: float = float(os.getenv("EMAIL_TIMEOUT_SECONDS", "10"))

settings = Settings()
