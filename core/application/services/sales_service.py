"""Read-only sales reporting over stored orders."""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from core.application.dtos.order_dto import OrderCountDTO, TotalSalesDTO
from core.data.uow import create_uow
from core.domain.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class SalesReportingService:

    def __init__(self, session_factory: async_sessionmaker) -> None:
        self._session_factory = session_factory

    async def total_sales(self) -> TotalSalesDTO:
        """Sum of order totals; 0 when there are no orders."""
        try:
            async with create_uow(self._session_factory) as uow:
                total = await uow.orders.total_sales()
        except SQLAlchemyError as e:
            logger.error(f"Total sales failed: {e}", exc_info=True)
            raise PersistenceError("The order sales cannot be generated") from e

        return TotalSalesDTO(total_sales=float(total))

    async def order_count(self) -> OrderCountDTO:
        try:
            async with create_uow(self._session_factory) as uow:
                count = await uow.orders.count()
        except SQLAlchemyError as e:
            logger.error(f"Order count failed: {e}", exc_info=True)
            raise PersistenceError("Orders could not be counted") from e

        return OrderCountDTO(order_count=count)
