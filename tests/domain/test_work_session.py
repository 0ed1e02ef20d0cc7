"""Unit tests for the WorkSession state machine."""

from decimal import Decimal

import pytest

from taller.domain.exceptions import ValidationError
from taller.domain.model.catalog import Part, Service
from taller.domain.model.value_objects import Money
from taller.domain.model.work_order import OrderStatus, WorkOrder
from taller.domain.model.work_session import (
    SERVICES_REQUIRED,
    SERVICES_REQUIRED_TO_CONTINUE,
    SubmissionState,
    WizardStep,
    WorkSession,
)

ORDER = WorkOrder(
    id=7,
    number="OT-0007",
    status=OrderStatus.RECEIVED,
    extra={"cliente": {"idCliente": 3}, "observaciones": "ruido en motor"},
)


def _service(id=1, price="50.00") -> Service:
    return Service(id=id, code=f"S{id}", name=f"Service {id}", price=Money.of(price))


def _part(id=10, price="20.00", stock=5) -> Part:
    return Part(id=id, code=f"P{id}", name=f"Part {id}", price=Money.of(price), current_stock=stock)


class TestStart:

    def test_fresh_session(self):
        session = WorkSession.start(ORDER)
        assert session.step is WizardStep.SERVICES
        assert session.services.is_empty()
        assert session.parts.is_empty()
        assert session.error_message == ""
        assert session.submission_state is SubmissionState.IDLE


class TestNavigation:

    def test_next_blocked_without_services(self):
        session = WorkSession.start(ORDER)
        assert session.next() is False
        assert session.step is WizardStep.SERVICES
        assert session.error_message == SERVICES_REQUIRED_TO_CONTINUE

    def test_next_with_service_advances_and_clears_error(self):
        session = WorkSession.start(ORDER)
        session.next()
        session.services.add(_service())
        assert session.next() is True
        assert session.step is WizardStep.PARTS
        assert session.error_message == ""

    def test_parts_are_optional(self):
        session = WorkSession.start(ORDER)
        session.services.add(_service())
        session.next()
        assert session.next() is True
        assert session.step is WizardStep.REVIEW

    def test_next_at_review_stays(self):
        session = WorkSession.start(ORDER)
        session.services.add(_service())
        session.next()
        session.next()
        assert session.next() is False
        assert session.step is WizardStep.REVIEW

    def test_back_clamps_at_first_step(self):
        session = WorkSession.start(ORDER)
        session.back()
        assert session.step is WizardStep.SERVICES

    def test_back_clears_error(self):
        session = WorkSession.start(ORDER)
        session.services.add(_service())
        session.next()
        session.error_message = "something"
        session.back()
        assert session.step is WizardStep.SERVICES
        assert session.error_message == ""


class TestTotals:

    def test_services_parts_and_total(self):
        session = WorkSession.start(ORDER)
        session.services.add(_service(price="50.00"))
        session.services.set_quantity(1, 2)
        session.parts.add(_part(price="20.00"))
        assert session.services_total == Money.of("100.00")
        assert session.parts_total == Money.of("20.00")
        assert session.total == Money.of("120.00")
        assert str(session.total) == "S/ 120.00"

    def test_totals_follow_edits(self):
        session = WorkSession.start(ORDER)
        session.services.add(_service(price="50.00"))
        session.services.add(_service(id=2, price="10.00"))
        session.services.remove(1)
        assert session.total == Money.of("10.00")


class TestBuildPayload:

    def test_without_services_goes_back_to_first_step(self):
        session = WorkSession.start(ORDER)
        session.step = WizardStep.REVIEW
        with pytest.raises(ValidationError, match=SERVICES_REQUIRED):
            session.build_payload()
        assert session.step is WizardStep.SERVICES
        assert session.error_message == SERVICES_REQUIRED

    def test_payload_moves_order_to_in_progress(self):
        session = WorkSession.start(ORDER)
        session.services.add(_service())
        payload = session.build_payload()
        assert payload.order.status is OrderStatus.IN_PROGRESS
        assert ORDER.status is OrderStatus.RECEIVED

    def test_payload_lines_and_total(self):
        session = WorkSession.start(ORDER)
        session.services.add(_service(price="50.00"))
        session.services.set_quantity(1, 2)
        session.services.set_comment(1, "urgent")
        session.parts.add(_part(price="20.00"))
        session.general_comment = "customer waits"

        payload = session.build_payload()

        assert len(payload.services) == 1
        assert payload.services[0].quantity == 2
        assert payload.services[0].comment == "urgent"
        assert payload.services[0].subtotal == Money.of("100.00")
        assert payload.parts[0].item_id == 10
        assert payload.total == Money.of("120.00")
        assert payload.general_comment == "customer waits"

    def test_to_dict_wire_shape(self):
        session = WorkSession.start(ORDER)
        session.services.add(_service(price="45.50"))
        session.parts.add(_part(price="20.00"))

        data = session.build_payload().to_dict()

        assert data["orden"] == {
            "cliente": {"idCliente": 3},
            "observaciones": "ruido en motor",
            "idOrden": 7,
            "numeroOrden": "OT-0007",
            "estado": "EN_PROCESO",
        }
        assert data["servicios"] == [
            {"idServicio": 1, "cantidad": 1, "precio": 45.5, "comentario": ""}
        ]
        assert data["repuestos"] == [
            {"idRepuesto": 10, "cantidad": 1, "precio": 20.0, "comentario": ""}
        ]
        assert data["comentarioGeneral"] == ""
        assert data["totalCalculado"] == 65.5

    def test_payload_total_is_exact(self):
        session = WorkSession.start(ORDER)
        session.services.add(_service(price="0.10"))
        session.services.set_quantity(1, 3)
        assert session.build_payload().total.amount == Decimal("0.30")
