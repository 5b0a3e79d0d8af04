"""
Sequential dispatch of drafted emails to the user's mail client.

Mail client windows are opened one at a time, in list order, with a fixed
pause between them so the host does not block rapid-fire opens.
"""

import asyncio
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Awaitable, Callable, List, Optional

import logfire

from config.settings import settings
from schemas.history import HistoryRecord
from services.mail_client import MailClientLauncher, build_mailto_link
from wizard.state import DraftEmail


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class DispatchResult:
    """Outcome of one "send all" run."""

    records: List[HistoryRecord] = field(default_factory=list)
    """History records for the emails opened in this run, in dispatch order"""

    links: List[str] = field(default_factory=list)
    """mailto: links that were opened, in dispatch order"""

    skipped: int = 0
    """Emails already sent before this run"""

    error: Optional[str] = None
    """Set when the mail client could not be opened; later emails stay unsent"""

    @property
    def sent_count(self) -> int:
        return len(self.records)


class DispatchQueue:
    """
    Processes drafted emails one item at a time.

    Each item fully completes (open, mark sent, record, pause) before the
    next one starts.
    """

    def __init__(
        self,
        launcher: MailClientLauncher,
        delay_seconds: Optional[float] = None,
        attachment_reminder: Optional[str] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        clock: Callable[[], datetime] = _utcnow,
    ):
        """
        Args:
            launcher: Opens each mailto: link
            delay_seconds: Pause after each opened email
            attachment_reminder: Appended to every body in the link
            sleep: Awaitable pause (injected for tests)
            clock: Timestamp source for history records
        """
        self.launcher = launcher
        self.delay_seconds = settings.dispatch_delay_seconds if delay_seconds is None else delay_seconds
        self.attachment_reminder = (
            settings.attachment_reminder if attachment_reminder is None else attachment_reminder
        )
        self._sleep = sleep
        self._clock = clock

    def link_for(self, email: DraftEmail) -> str:
        return build_mailto_link(email.to, email.subject, email.body, self.attachment_reminder)

    async def run(self, emails: List[DraftEmail]) -> DispatchResult:
        """
        Open every unsent email in order and mark it sent.

        Returns:
            DispatchResult with one history record per email opened
        """
        result = DispatchResult()

        with logfire.span("wizard.dispatch", total=len(emails), delay_seconds=self.delay_seconds):
            for position, email in enumerate(emails):
                if email.sent:
                    result.skipped += 1
                    continue

                link = self.link_for(email)
                try:
                    self.launcher.open(link)
                except Exception as e:
                    logfire.error(
                        "Mail client launch failed",
                        position=position,
                        to=email.to,
                        error=str(e),
                        error_type=type(e).__name__
                    )
                    result.error = str(e)
                    break

                email.mark_sent()

                result.links.append(link)
                result.records.append(
                    HistoryRecord(
                        to=email.to,
                        subject=email.subject,
                        body=email.body,
                        date_sent=self._clock(),
                    )
                )

                logfire.info("Email handed to mail client", position=position, to=email.to)

                await self._sleep(self.delay_seconds)

            logfire.info(
                "Dispatch completed",
                sent=result.sent_count,
                skipped=result.skipped
            )

        return result
