"""Validate-then-submit state machine for client forms."""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable, Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel

from feedhub.client.notifications import Notifier, Router, Toast
from feedhub.exceptions import FieldValidationError, RemoteRejection
from feedhub.validation import Invalid, ValidationSchema

logger = logging.getLogger(__name__)

GENERIC_FAILURE = "Something went wrong. Please try again."


class FormState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    VALIDATION_FAILED = "validation_failed"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    SUBMIT_FAILED = "submit_failed"


IN_FLIGHT = (FormState.VALIDATING, FormState.SUBMITTING)


class Form:
    """Field values and inline errors of a rendered form.

    Disabled fields keep their initial value and are left out of `data()`.
    """

    def __init__(self, initial: Mapping[str, Any] | None = None, disabled: Iterable[str] = ()):
        self.values: dict[str, Any] = dict(initial or {})
        self.errors: dict[str, str] = {}
        self.disabled = set(disabled)
        self.mounted = True

    def set_values(self, values: Mapping[str, Any]) -> None:
        for name, value in values.items():
            if name not in self.disabled:
                self.values[name] = value

    def clear_field(self, name: str) -> None:
        self.values[name] = ""

    def set_errors(self, errors: Mapping[str, str]) -> None:
        self.errors = dict(errors)

    def data(self) -> dict[str, Any]:
        return {k: v for k, v in self.values.items() if k not in self.disabled}

    def unmount(self) -> None:
        self.mounted = False


class FormController:
    """Runs one submission attempt at a time through validation and the endpoint.

    Failures are reported in this order: a structured validation error or a
    server field map goes inline onto the fields, a server message goes into
    an error toast, anything else gets a generic error toast.
    """

    def __init__(
        self,
        form: Form,
        schema: ValidationSchema,
        submit: Callable[[BaseModel], Awaitable[Any]],
        notifier: Notifier,
        router: Router,
        *,
        success_path: str,
        success_message: Callable[[BaseModel, Any], str],
        failure_title: str,
        clear_on_failure: Iterable[str] = (),
    ):
        self.form = form
        self.schema = schema
        self._submit = submit
        self.notifier = notifier
        self.router = router
        self.success_path = success_path
        self.success_message = success_message
        self.failure_title = failure_title
        self.clear_on_failure = tuple(clear_on_failure)
        self.state = FormState.IDLE

    async def submit(self) -> FormState:
        """Run a submission attempt and return the state it ended in."""
        if self.state in IN_FLIGHT:
            logger.debug(f"Ignoring submit while {self.state.value}")
            return self.state

        self.state = FormState.IDLE
        self.form.set_errors({})

        self.state = FormState.VALIDATING
        result = self.schema.check(self.form.data())
        if isinstance(result, Invalid):
            return self._fail_validation(result.errors)

        self.state = FormState.SUBMITTING
        try:
            response = await self._submit(result.value)
        except asyncio.CancelledError:
            self.state = FormState.IDLE
            raise
        except Exception as e:
            if not self.form.mounted:
                return self._discard()
            return self._fail_submit(e)

        if not self.form.mounted:
            return self._discard()
        return await self._succeed(result.value, response)

    def _fail_validation(self, errors: Mapping[str, str]) -> FormState:
        self._clear_failed_fields()
        self.form.set_errors(errors)
        self.state = FormState.VALIDATION_FAILED
        return self.state

    def _fail_submit(self, error: Exception) -> FormState:
        if isinstance(error, FieldValidationError):
            return self._fail_validation(error.errors)
        if isinstance(error, RemoteRejection) and error.errors:
            return self._fail_validation(error.errors)

        if isinstance(error, RemoteRejection):
            message = error.message
        else:
            logger.error(f"{self.failure_title} {error!r}", exc_info=error)
            message = None

        self._clear_failed_fields()
        self.notifier.add_toast(
            Toast(title=self.failure_title, type="error", description=message or GENERIC_FAILURE)
        )
        self.state = FormState.SUBMIT_FAILED
        return self.state

    async def _succeed(self, data: BaseModel, response: Any) -> FormState:
        self.notifier.add_toast(
            Toast(title="Success", type="success", description=self.success_message(data, response))
        )
        self.state = FormState.SUCCEEDED
        await self.router.push(self.success_path)
        return self.state

    def _discard(self) -> FormState:
        logger.debug("Form was unmounted during submit; discarding result")
        self.state = FormState.IDLE
        return self.state

    def _clear_failed_fields(self) -> None:
        for name in self.clear_on_failure:
            self.form.clear_field(name)
