"""
FastAPI Dependencies.

Provides dependency injection for services and collaborators.
"""
from __future__ import annotations

import logging
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables ONCE before any settings objects are created
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")

from sqlalchemy.ext.asyncio import async_sessionmaker

from core.application.interfaces import IPaymentGateway
from core.application.services import CheckoutService, OrderApplicationService, SalesReportingService
from core.data.repositories import SqlAlchemyProductCatalog, SqlAlchemyUserDirectory
from core.infrastructure.adapters.payments import build_gateway
from core.infrastructure.database.config import get_session_factory as _database_session_factory
from core.settings import get_app_settings

logger = logging.getLogger(__name__)


# =============================================================================
# SINGLETON INSTANCES
# =============================================================================

_product_catalog = None
_user_directory = None
_payment_gateway = None


# =============================================================================
# DEPENDENCIES
# =============================================================================

def get_session_factory() -> async_sessionmaker:
    return _database_session_factory()


def _currency() -> str:
    return get_app_settings().payments.currency.upper()


def get_product_catalog() -> SqlAlchemyProductCatalog:
    global _product_catalog
    if _product_catalog is None:
        _product_catalog = SqlAlchemyProductCatalog(get_session_factory(), _currency())
        logger.info("Created SqlAlchemyProductCatalog instance")
    return _product_catalog


def get_user_directory() -> SqlAlchemyUserDirectory:
    global _user_directory
    if _user_directory is None:
        _user_directory = SqlAlchemyUserDirectory(get_session_factory())
        logger.info("Created SqlAlchemyUserDirectory instance")
    return _user_directory


def get_payment_gateway() -> IPaymentGateway:
    global _payment_gateway
    if _payment_gateway is None:
        _payment_gateway = build_gateway(get_app_settings().payments)
        logger.info(f"Using payment gateway: {type(_payment_gateway).__name__}")
    return _payment_gateway


def get_order_service() -> OrderApplicationService:
    return OrderApplicationService(
        session_factory=get_session_factory(),
        catalog=get_product_catalog(),
        users=get_user_directory(),
        currency=_currency(),
    )


def get_checkout_service() -> CheckoutService:
    return CheckoutService(
        catalog=get_product_catalog(),
        gateway=get_payment_gateway(),
        settings=get_app_settings().payments,
    )


def get_sales_service() -> SalesReportingService:
    return SalesReportingService(get_session_factory())


# =============================================================================
# RESET (for testing)
# =============================================================================

def reset_dependencies():
    global _product_catalog, _user_directory, _payment_gateway

    _product_catalog = None
    _user_directory = None
    _payment_gateway = None

    logger.info("Dependencies reset")
