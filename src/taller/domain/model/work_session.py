"""Work session — state of the three-step "start work" flow for one order.

The mechanic first picks services (mandatory), then parts (optional),
then reviews the totals.  Steps only move one at a time, forwards or
back.  The session is bound to a single order and is discarded when
the flow is closed or submitted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum, IntEnum
from typing import Any

from taller.domain.exceptions import ValidationError
from taller.domain.model.catalog import Part, Service
from taller.domain.model.selection import (
    PartSelectionPolicy,
    SelectedLine,
    Selection,
    ServiceSelectionPolicy,
)
from taller.domain.model.value_objects import Money
from taller.domain.model.work_order import WorkOrder

SERVICES_REQUIRED_TO_CONTINUE = "Select at least one service before continuing"
SERVICES_REQUIRED = "Select at least one service"


class WizardStep(IntEnum):
    SERVICES = 0
    PARTS = 1
    REVIEW = 2


class SubmissionState(Enum):
    IDLE = "IDLE"
    SUBMITTING = "SUBMITTING"
    DONE = "DONE"


@dataclass(frozen=True)
class PayloadLine:
    item_id: int
    quantity: int
    price: Money
    comment: str = ""

    @property
    def subtotal(self) -> Money:
        return self.price * self.quantity

    @staticmethod
    def from_line(line: SelectedLine) -> PayloadLine:
        return PayloadLine(
            item_id=line.item_id,
            quantity=line.quantity,
            price=line.unit_price,
            comment=line.comment or "",
        )


@dataclass(frozen=True)
class SubmissionPayload:
    """Everything the backend needs to start work on an order.

    Built once at submit time; never stored.
    """

    order: WorkOrder
    services: list[PayloadLine]
    parts: list[PayloadLine]
    general_comment: str
    total: Money

    def to_dict(self) -> dict[str, Any]:
        return {
            "orden": {
                **self.order.extra,
                "idOrden": self.order.id,
                "numeroOrden": self.order.number,
                "estado": self.order.status.value,
            },
            "servicios": [
                {
                    "idServicio": line.item_id,
                    "cantidad": line.quantity,
                    "precio": _decimal_to_json(line.price.amount),
                    "comentario": line.comment,
                }
                for line in self.services
            ],
            "repuestos": [
                {
                    "idRepuesto": line.item_id,
                    "cantidad": line.quantity,
                    "precio": _decimal_to_json(line.price.amount),
                    "comentario": line.comment,
                }
                for line in self.parts
            ],
            "comentarioGeneral": self.general_comment,
            "totalCalculado": _decimal_to_json(self.total.amount),
        }


def _decimal_to_json(value: Decimal) -> float:
    return float(value)


@dataclass
class WorkSession:
    """Mutable state of one run of the flow.

    Use ``WorkSession.start(order)`` to get an empty session.
    """

    order: WorkOrder
    services: Selection[Service]
    parts: Selection[Part]
    step: WizardStep = WizardStep.SERVICES
    general_comment: str = ""
    error_message: str = ""
    submission_state: SubmissionState = field(default=SubmissionState.IDLE)

    @staticmethod
    def start(order: WorkOrder) -> WorkSession:
        return WorkSession(
            order=order,
            services=Selection(ServiceSelectionPolicy()),
            parts=Selection(PartSelectionPolicy()),
        )

    # --- Navigation -----------------------------------------------------------

    def next(self) -> bool:
        """Advance one step.  Returns False if the move was blocked.

        Leaving SERVICES requires at least one selected service.
        """
        if self.step == WizardStep.SERVICES and self.services.is_empty():
            self.error_message = SERVICES_REQUIRED_TO_CONTINUE
            return False
        if self.step == WizardStep.REVIEW:
            return False
        self.step = WizardStep(self.step + 1)
        self.error_message = ""
        return True

    def back(self) -> None:
        if self.step > WizardStep.SERVICES:
            self.step = WizardStep(self.step - 1)
        self.error_message = ""

    # --- Totals ---------------------------------------------------------------

    @property
    def services_total(self) -> Money:
        return self.services.subtotal()

    @property
    def parts_total(self) -> Money:
        return self.parts.subtotal()

    @property
    def total(self) -> Money:
        return self.services_total + self.parts_total

    # --- Submission -----------------------------------------------------------

    def build_payload(self) -> SubmissionPayload:
        """Validate and assemble the submission.

        With no services selected the session is sent back to the first
        step and ValidationError is raised.
        """
        if self.services.is_empty():
            self.step = WizardStep.SERVICES
            self.error_message = SERVICES_REQUIRED
            raise ValidationError(SERVICES_REQUIRED)

        return SubmissionPayload(
            order=self.order.started(),
            services=[PayloadLine.from_line(line) for line in self.services],
            parts=[PayloadLine.from_line(line) for line in self.parts],
            general_comment=self.general_comment,
            total=self.total,
        )
