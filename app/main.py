import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi

from app.shared.config import settings
from app.shared.db import Base, engine, SessionLocal
from app.shared.errors import AppError
from app.shared.http import error_body

# import models so they register with Base.metadata
from app.auth import models as auth_models  # noqa: F401
from app.plans import models as plans_models  # noqa: F401
from app.notices import models as notices_models  # noqa: F401
from app.inquiries import models as inquiries_models  # noqa: F401
from app.reviews import models as reviews_models  # noqa: F401
from app.payments import models as payments_models  # noqa: F401

# Routers Import
from app.auth.api import router as auth_router
from app.plans.api import router as plans_router
from app.entitlements.api import router as entitlements_router
from app.notices.api import router as notices_router
from app.inquiries.api import router as inquiries_router
from app.reviews.api import router as reviews_router
from app.payments.api import router as payments_router
from app.notifications.api import router as notifications_router
from app.plans.service import seed_default_plans

logging.basicConfig(level=settings.LOG_LEVEL.upper())
logger = logging.getLogger(__name__)

TAGS_METADATA = [
    {"name": "Auth", "description": "Sign up, sign in, sign out, profile"},
    {"name": "Notices", "description": "Admin-authored announcements"},
    {"name": "Inquiries", "description": "Support tickets and admin replies"},
    {"name": "Reviews", "description": "User reviews with 1-5 ratings"},
    {"name": "Plans", "description": "Subscription plans and their feature templates"},
    {"name": "Entitlements", "description": "Per-user feature flags and plan changes"},
    {"name": "Payments", "description": "Payment intents"},
    {"name": "Notifications", "description": "Contact / inquiry emails"},
    {"name": "Health", "description": "Service health"},
]

app = FastAPI(
    title="EduAI Labs Portal API",
    version="1.0.0",
    description="Accounts, boards and plan entitlements for the training-video automation extension.",
    openapi_tags=TAGS_METADATA,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(AppError)
async def _app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error("%s %s -> %s: %s", request.method, request.url.path, exc.code, exc.message)
    else:
        logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.code, exc.message)
    return error_body(exc.message, exc.status_code)


@app.on_event("startup")
def _init_db():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed_default_plans(db)
    finally:
        db.close()
    logger.info("startup complete (env=%s)", settings.ENV)

@app.get("/healthz", tags=["Health"])
def healthz():
    return {"ok": True}

# Routers
app.include_router(auth_router)
app.include_router(notices_router)
app.include_router(inquiries_router)
app.include_router(reviews_router)
app.include_router(plans_router)
app.include_router(entitlements_router)
app.include_router(payments_router)
app.include_router(notifications_router)

# --- Custom OpenAPI: add bearerAuth scheme ---
def custom_openapi():
    if app.openapi_schema:
        return app.openapi_schema
    schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
        tags=app.openapi_tags,
    )
    schema.setdefault("components", {}).setdefault("securitySchemes", {})
    schema["components"]["securitySchemes"]["bearerAuth"] = {
        "type": "http",
        "scheme": "bearer",
        "bearerFormat": "JWT",
    }
    app.openapi_schema = schema
    return app.openapi_schema

app.openapi = custom_openapi
