"""Application service: Start Work use case.

Applies a wizard submission to the backend: moves the order to
IN_PROGRESS, then records every selected service and part on it.

The status change goes first and is not rolled back if recording a
line fails afterwards; failed lines are logged and reported so they
can be re-entered by hand.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from taller.application.dto import StartWorkResult
from taller.domain.exceptions import GatewayError
from taller.domain.model.work_session import SubmissionPayload
from taller.domain.repository.work_order_repository import WorkOrderRepository

logger = logging.getLogger(__name__)


class WorkSubmitter(ABC):
    """Receives the wizard's payload once the user confirms."""

    @abstractmethod
    def handle(self, payload: SubmissionPayload) -> StartWorkResult:
        """Apply the submission.  Raises DomainException on failure."""


class StartWorkHandler(WorkSubmitter):

    def __init__(self, order_repo: WorkOrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, payload: SubmissionPayload) -> StartWorkResult:
        order = self._order_repo.update(payload.order)
        logger.info(
            "Order %s moved to %s (total %s)",
            order.number,
            order.status.value,
            payload.total,
        )

        failures: list[str] = []
        recorded_services = 0
        for line in payload.services:
            try:
                self._order_repo.record_service(order.id, line)
                recorded_services += 1
            except GatewayError as exc:
                logger.error("Could not record service #%s on order %s: %s",
                             line.item_id, order.number, exc)
                failures.append(f"service #{line.item_id}: {exc}")

        recorded_parts = 0
        for line in payload.parts:
            try:
                self._order_repo.record_part_usage(order.id, line)
                recorded_parts += 1
            except GatewayError as exc:
                logger.error("Could not record part #%s on order %s: %s",
                             line.item_id, order.number, exc)
                failures.append(f"part #{line.item_id}: {exc}")

        return StartWorkResult(
            order_id=order.id,
            order_number=order.number,
            status=order.status.value,
            services_recorded=recorded_services,
            parts_recorded=recorded_parts,
            total=str(payload.total),
            failures=failures,
        )
