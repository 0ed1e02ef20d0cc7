"""Application service: the "start work" wizard.

Drives a WorkSession for the order it is opened on.  The session lives
from ``open()`` until ``close()`` or a successful ``submit()``; opening
the wizard on a different order always starts from scratch.
"""

from __future__ import annotations

import logging

from taller.application.catalog_access import CatalogAccess
from taller.application.dto import StartWorkResult
from taller.application.selection_editor import SelectionEditor
from taller.application.start_work import WorkSubmitter
from taller.domain.exceptions import (
    DomainException,
    PermissionDeniedError,
    ValidationError,
)
from taller.domain.model.catalog import Part, Service
from taller.domain.model.work_order import WorkOrder
from taller.domain.model.work_session import (
    SubmissionState,
    WizardStep,
    WorkSession,
)

logger = logging.getLogger(__name__)

SUBMIT_FAILED = "Error starting work on the order"
SUBMIT_FORBIDDEN = "You do not have permission to start work on this order"
ALREADY_SUBMITTING = "This order is already being submitted"


class WorkWizard:

    def __init__(
        self,
        submitter: WorkSubmitter,
        service_catalog: CatalogAccess[Service],
        part_catalog: CatalogAccess[Part],
    ) -> None:
        self._submitter = submitter
        self._service_catalog = service_catalog
        self._part_catalog = part_catalog
        self._session: WorkSession | None = None
        self._services: SelectionEditor[Service] | None = None
        self._parts: SelectionEditor[Part] | None = None

    # --- Lifecycle ------------------------------------------------------------

    @property
    def is_open(self) -> bool:
        return self._session is not None

    @property
    def session(self) -> WorkSession:
        if self._session is None:
            raise ValidationError("The wizard is not open")
        return self._session

    @property
    def services(self) -> SelectionEditor[Service]:
        if self._services is None:
            raise ValidationError("The wizard is not open")
        return self._services

    @property
    def parts(self) -> SelectionEditor[Part]:
        if self._parts is None:
            raise ValidationError("The wizard is not open")
        return self._parts

    def open(self, order: WorkOrder) -> WorkSession:
        """Bind the wizard to *order*.

        Re-opening on the same order keeps the current session; any other
        order gets a fresh one.
        """
        if self._session is not None and self._session.order.id == order.id:
            return self._session

        self._session = WorkSession.start(order)
        self._services = SelectionEditor(self._service_catalog, self._session.services)
        self._parts = SelectionEditor(self._part_catalog, self._session.parts)
        self._services.load()
        return self._session

    def close(self) -> None:
        self._session = None
        self._services = None
        self._parts = None

    # --- Navigation -----------------------------------------------------------

    def next(self) -> bool:
        moved = self.session.next()
        if moved and self.session.step == WizardStep.PARTS and not self.parts.loaded:
            self.parts.load()
        return moved

    def back(self) -> None:
        self.session.back()

    # --- Submission -----------------------------------------------------------

    def submit(self) -> StartWorkResult | None:
        """Send the session to the submitter.

        Raises ValidationError when no service is selected (the session
        is sent back to the first step) or when a submission is already
        in flight.  A submitter failure is reported through
        ``session.error_message`` and the selections are kept, so the
        user can retry; None is returned in that case.
        """
        session = self.session
        if session.submission_state is SubmissionState.SUBMITTING:
            raise ValidationError(ALREADY_SUBMITTING)

        payload = session.build_payload()

        session.submission_state = SubmissionState.SUBMITTING
        try:
            result = self._submitter.handle(payload)
        except PermissionDeniedError:
            logger.error("Permission denied starting work on order %s", session.order.number)
            session.submission_state = SubmissionState.IDLE
            session.error_message = SUBMIT_FORBIDDEN
            return None
        except DomainException as exc:
            logger.error("Could not start work on order %s: %s", session.order.number, exc)
            session.submission_state = SubmissionState.IDLE
            session.error_message = SUBMIT_FAILED
            return None

        session.submission_state = SubmissionState.DONE
        self.close()
        return result
