"""Main FastAPI application"""
from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
from typing import Optional
import logging

from formgateway.config import Settings, get_settings
from formgateway.exceptions import GatewayError, gateway_exception_handler, http_exception_handler
from formgateway.forms.registry import FORMS
from formgateway.logging_config import configure_logging
from formgateway.middleware.cors import setup_cors
from formgateway.middleware.error_handler import ErrorHandlerMiddleware
from formgateway.middleware.rate_limit import setup_rate_limiting
from formgateway.middleware.security_headers import SecurityHeadersMiddleware
from formgateway.services.form_handler import FormHandler
from formgateway.services.mail_service import MailDispatcher

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    # Startup
    settings = app.state.settings
    logger.info(
        f"Email configuration: host={settings.smtp_host}:{settings.smtp_port}, "
        f"user={settings.smtp_username}, has_password={bool(settings.smtp_password)}"
    )
    logger.info(f"Server running on port {settings.port} ({settings.environment})")
    yield
    # Shutdown
    logger.info("Shutdown signal received. Shutting down gracefully...")
    logger.info("Process terminated")


def build_form_handlers(settings: Settings, dispatcher: MailDispatcher) -> dict:
    """One handler per form type, all sharing the process-wide dispatcher"""
    form_logger = logging.getLogger("formgateway.forms")
    return {
        key: FormHandler(
            descriptor,
            dispatcher=dispatcher,
            logger=form_logger,
            sender=settings.sender_address,
            admin_address=settings.admin_address,
        )
        for key, descriptor in FORMS.items()
    }


def create_app(settings: Optional[Settings] = None, dispatcher: Optional[MailDispatcher] = None) -> FastAPI:
    """
    Build the application

    Args:
        settings: Settings to use (defaults to the environment)
        dispatcher: Mail dispatcher to share across handlers (defaults to SMTP)

    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()
    dispatcher = dispatcher or MailDispatcher(settings)

    app = FastAPI(
        title="Guard Armor Form Gateway",
        description="Form submission to email notification API",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.form_handlers = build_form_handlers(settings, dispatcher)

    app.add_exception_handler(GatewayError, gateway_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # Import and include routers
    from formgateway.routers import forms, health

    app.include_router(forms.router, prefix="/api", tags=["Forms"])
    app.include_router(health.router, prefix="/api", tags=["Health"])

    # Innermost first: errors are converted, then limits checked, then headers applied
    app.add_middleware(ErrorHandlerMiddleware)
    setup_rate_limiting(app, settings, [f"/api{d.path}" for d in FORMS.values()])
    app.add_middleware(SecurityHeadersMiddleware, production=settings.is_production)
    setup_cors(app, settings)

    return app


configure_logging(get_settings())
app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=get_settings().port)
