"""Generic validate -> render -> dual-send pipeline shared by every form"""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Mapping, Tuple
import asyncio
import logging

from formgateway.exceptions import DeliveryError, FormValidationError
from formgateway.models.forms import FormSubmitResponse
from formgateway.models.notification import EmailMessage, RenderedEmails
from formgateway.services.mail_service import MailDispatcher
from formgateway.services.validation import FieldRule, validate_submission


@dataclass(frozen=True)
class FormDescriptor:
    """Everything that differs between one form type and another"""
    key: str
    path: str
    rules: Tuple[FieldRule, ...]
    render: Callable[[Dict[str, str]], RenderedEmails]
    admin_subject: str
    acknowledgment_subject: str
    success_message: str
    log_fields: Tuple[str, ...] = ("email",)


class FormHandler:
    """
    Runs one form submission through validation, rendering and delivery.

    Both emails are sent concurrently and always awaited together; if
    either fails the request fails, even when the other was delivered.
    """

    def __init__(
        self,
        descriptor: FormDescriptor,
        dispatcher: MailDispatcher,
        logger: logging.Logger,
        sender: str,
        admin_address: str,
    ):
        self.descriptor = descriptor
        self.dispatcher = dispatcher
        self.logger = logger
        self.sender = sender
        self.admin_address = admin_address

    def build_messages(self, record: Dict[str, str]) -> Tuple[EmailMessage, EmailMessage]:
        rendered = self.descriptor.render(record)
        admin = EmailMessage(
            sender=self.sender,
            to=self.admin_address,
            subject=self.descriptor.admin_subject,
            reply_to=record["email"],
            html=rendered.admin_html,
        )
        acknowledgment = EmailMessage(
            sender=self.sender,
            to=record["email"],
            subject=self.descriptor.acknowledgment_subject,
            html=rendered.acknowledgment_html,
        )
        return admin, acknowledgment

    async def dispatch(self, *messages: EmailMessage) -> None:
        results = await asyncio.gather(
            *(self.dispatcher.send(m) for m in messages),
            return_exceptions=True,
        )
        failures = [r for r in results if isinstance(r, BaseException)]
        if not failures:
            return

        for failure in failures:
            if not isinstance(failure, Exception):
                raise failure

        if len(failures) == 1:
            raise failures[0]
        details = "; ".join(str(f) for f in failures)
        raise DeliveryError(f"{len(failures)} of {len(messages)} emails failed: {details}") from failures[0]

    async def handle(self, raw: Mapping[str, Any]) -> FormSubmitResponse:
        """
        Process one submission

        Args:
            raw: Sanitized request body

        Returns:
            Success confirmation

        Raises:
            FormValidationError: If any field rule is violated (no email is sent)
            DeliveryError: If either email could not be sent
        """
        outcome = validate_submission(self.descriptor.rules, raw)
        if not outcome.is_valid:
            self.logger.info(
                f"{self.descriptor.key} submission rejected: "
                f"{', '.join(v.field for v in outcome.errors)}"
            )
            raise FormValidationError(outcome.errors)

        record = outcome.record
        admin, acknowledgment = self.build_messages(record)
        await self.dispatch(admin, acknowledgment)

        summary = {name: record[name] for name in self.descriptor.log_fields if name in record}
        summary["timestamp"] = datetime.now(timezone.utc).isoformat()
        self.logger.info(f"{self.descriptor.success_message}: {summary}")

        return FormSubmitResponse(message=self.descriptor.success_message)
