"""
Mail client handoff.

Emails are never sent by this service. Each one becomes a mailto: URI that
the user's default mail client opens pre-filled.
"""

import webbrowser
from abc import ABC, abstractmethod
from urllib.parse import quote

import logfire

from config.settings import settings

# Characters JavaScript's encodeURIComponent leaves unescaped
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_uri_component(value: str) -> str:
    """Percent-encode value the way encodeURIComponent does (spaces as %20)."""
    return quote(value, safe=_URI_COMPONENT_SAFE)


def build_mailto_link(to: str, subject: str, body: str, reminder: str = "") -> str:
    """
    Build a mailto: link for one email.

    Example:
        >>> build_mailto_link("a@b.edu", "Hi there", "Body", "!")
        'mailto:a@b.edu?subject=Hi%20there&body=Body!'
    """
    return (
        f"mailto:{to}"
        f"?subject={encode_uri_component(subject)}"
        f"&body={encode_uri_component(body + reminder)}"
    )


class MailClientLauncher(ABC):
    """Hands a mailto: link to whatever composes the email."""

    @abstractmethod
    def open(self, link: str) -> None:
        """Open the composition view for link."""


class WebbrowserMailLauncher(MailClientLauncher):
    """Opens links with the host's default handler for the mailto scheme."""

    def open(self, link: str) -> None:
        """
        Raises:
            OSError: If no handler accepted the link
        """
        if not webbrowser.open(link):
            raise OSError("No handler for mailto: links")
        logfire.info("Mail client launched", length=len(link))


class LinkOnlyMailLauncher(MailClientLauncher):
    """Leaves opening to the browser front end; the link is returned to it."""

    def open(self, link: str) -> None:
        logfire.info("Mail client link prepared", length=len(link))


def create_mail_launcher() -> MailClientLauncher:
    """Pick the launcher configured by OPEN_MAIL_CLIENT."""
    if settings.open_mail_client:
        return WebbrowserMailLauncher()
    return LinkOnlyMailLauncher()
