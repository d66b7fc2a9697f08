"""
ConfTrack Backend: recording.started Webhook Service
====================================================

What:  Reconciles a recording.started event into two writes: a new Recording
       row and a patched Session.recording_url.
Who:   Called by POST /recordings/webhook/recording-started.

Processing Flow:
    ┌──────────────┐    ┌──────────────────┐    ┌───────────────────────┐
    │ Coerce ids & │───▶│ Insert Recording │───▶│ Patch Session         │
    │ start_time   │    │ created_at=start │    │ recording_url=url     │
    └──────────────┘    └──────────────────┘    └───────────────────────┘

Transaction modes (settings.webhook_transaction_mode):
    atomic:     both writes commit together; any failure rolls back both
    sequential: the Recording commits before the Session lookup, so a missing
                or failing Session leaves the Recording persisted

Failure policy:
    Every failure is logged with its ErrorKind and cause, then re-raised as
    WebhookProcessingError with one fixed message. Callers cannot tell a
    missing session from a database outage.

Known gap:
    No idempotency key. Each delivery of the same event inserts another
    Recording row.
"""

import logging
import re
from datetime import datetime
from typing import Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from conftrack.config import settings
from conftrack.database import run_bounded
from conftrack.exceptions import (
    ConfTrackError,
    ErrorKind,
    ValidationError,
    WebhookProcessingError,
)
from conftrack.models import ConferenceSession, Recording
from conftrack.models.types import INT32_RANGE, INT64_RANGE, as_utc, utcnow
from conftrack.repositories import Repository, recording_repository, session_repository
from conftrack.schemas.webhook import (
    RECORDING_STARTED_EVENT,
    RecordingStartedEvent,
    WebhookAck,
)

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Recording start event received successfully."
FAILURE_MESSAGE = "Failed to process recording start event."

_INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")


def coerce_identifier(
    value: str,
    field: str,
    bounds: Tuple[int, int] = INT64_RANGE,
) -> int:
    """
    Parse a string identifier such as "42" into an int.

    Surrounding whitespace and a leading sign are allowed; anything else,
    including an empty string or a decimal, is a ValidationError. So is a
    number outside `bounds`, the range of the column it is written to.
    """
    candidate = value.strip()
    if not _INTEGER_PATTERN.match(candidate):
        raise ValidationError(
            message=f"'{field}' must be an integer identifier",
            field=field,
            context={"value": value},
        )
    number = int(candidate)
    low, high = bounds
    if not low <= number <= high:
        raise ValidationError(
            message=f"'{field}' is out of range",
            field=field,
            context={"value": value, "min": low, "max": high},
        )
    return number


def parse_event_time(value: str, field: str = "start_time") -> datetime:
    """ISO 8601 → aware UTC datetime. Naive input is read as UTC."""
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError as exc:
        raise ValidationError(
            message=f"'{field}' must be an ISO 8601 timestamp",
            field=field,
            context={"value": value},
        ) from exc
    return as_utc(parsed)


class RecordingWebhookService:
    """
    Stateless handler for recording.started deliveries.

    Repositories are injectable for tests; the module-level singleton uses
    the shared instances.
    """

    def __init__(
        self,
        recordings: Repository[Recording] = recording_repository,
        sessions: Repository[ConferenceSession] = session_repository,
    ):
        self.recordings = recordings
        self.sessions = sessions

    @staticmethod
    async def _rollback(db: AsyncSession) -> None:
        """Roll back after a failure; a failing rollback is logged, not raised."""
        try:
            await db.rollback()
        except SQLAlchemyError as exc:
            logger.error("Rollback after webhook failure also failed: %s", str(exc))

    async def handle_recording_started(
        self,
        db: AsyncSession,
        payload: RecordingStartedEvent,
        mode: Optional[str] = None,
    ) -> WebhookAck:
        """
        Process one recording.started event.

        Args:
            db:      Request-scoped session; this method owns its commits
            payload: Parsed webhook body
            mode:    "atomic" or "sequential"; defaults to the configured mode

        Returns:
            WebhookAck with status "success"

        Raises:
            WebhookProcessingError: for any failure, tagged with its ErrorKind
        """
        mode = mode or settings.webhook_transaction_mode
        data = payload.data

        if payload.event != RECORDING_STARTED_EVENT:
            logger.warning(
                "Unexpected event '%s' on recording-started webhook; processing anyway",
                payload.event,
            )

        try:
            # ── Step 1: Coerce identifiers before any write ───────────────
            tenant_id = coerce_identifier(data.tenant_id, "tenant_id", INT32_RANGE)
            conference_id = coerce_identifier(data.conference_id, "conference_id")
            session_id = coerce_identifier(data.session_id, "session_id")
            started_at = parse_event_time(data.start_time)

            # ── Step 2: Insert the Recording ──────────────────────────────
            recording = await self.recordings.create(
                db,
                title=data.title,
                conference_id=conference_id,
                tenant_id=tenant_id,
                file_path=data.recording_url,
                created_at=started_at,
                updated_at=utcnow(),
            )
            if mode == "sequential":
                await run_bounded(db.commit(), "webhook.commit_recording")
            logger.info(
                "Recording %s stored for conference %s (tenant %s)",
                recording.id, conference_id, tenant_id,
            )

            # ── Step 3: Patch the Session ─────────────────────────────────
            await self.sessions.update(db, session_id, {"recording_url": data.recording_url})
            await run_bounded(db.commit(), "webhook.commit")

        except ConfTrackError as exc:
            await self._rollback(db)
            logger.error(
                "Error processing recording start event [%s]: %s | Context: %s",
                exc.kind.value, exc.message, exc.context,
            )
            raise WebhookProcessingError(
                kind=exc.kind,
                message=FAILURE_MESSAGE,
                context={"session_id": data.session_id, "mode": mode, **exc.context},
            ) from exc
        except Exception as exc:
            await self._rollback(db)
            logger.error(
                "Unexpected error processing recording start event: %s", str(exc),
                exc_info=True,
            )
            raise WebhookProcessingError(
                kind=ErrorKind.PERSISTENCE,
                message=FAILURE_MESSAGE,
                context={"session_id": data.session_id, "mode": mode,
                         "original_error": type(exc).__name__},
            ) from exc

        logger.info("Recording started event processed successfully.")
        return WebhookAck(status="success", message=SUCCESS_MESSAGE)


# ── Singleton Instance ────────────────────────────────────────────────────
recording_webhook_service = RecordingWebhookService()
