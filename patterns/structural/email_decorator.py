"""Decorator pattern: email template builder.

Decorators wrap an email and add to its content or subject without
touching the wrapped object. They stack in any order.

Example:
    >>> from patterns.structural import BasicEmail, FooterDecorator, SignatureDecorator
    >>>
    >>> email = BasicEmail("Team Meeting Tomorrow", "Don't forget our team sync at 10 AM.")
    >>> email = SignatureDecorator(email, "John Smith", "Best regards")
    >>> email = FooterDecorator(email, include_privacy_policy=False)
    >>> email.get_metadata().decorators
    ['SignatureDecorator', 'FooterDecorator']
"""

import base64
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol, runtime_checkable

from beartype import beartype

ENCRYPTED_HEADER = "[ENCRYPTED]\n"


@beartype
@dataclass
class EmailMetadata:
    timestamp: datetime = field(default_factory=datetime.now)
    decorators: list[str] = field(default_factory=list)


@runtime_checkable
class Email(Protocol):
    def get_content(self) -> str:
        ...

    def get_subject(self) -> str:
        ...

    def get_metadata(self) -> EmailMetadata:
        ...


class BasicEmail:
    """Plain email with a subject and a message body."""

    def __init__(
        self,
        subject: str = "No Subject",
        message: str = "Hello, this is your message.",
    ) -> None:
        self._subject = subject
        self._message = message
        self._metadata = EmailMetadata()

    def get_content(self) -> str:
        return self._message

    def get_subject(self) -> str:
        return self._subject

    def get_metadata(self) -> EmailMetadata:
        return EmailMetadata(
            timestamp=self._metadata.timestamp,
            decorators=self._metadata.decorators.copy(),
        )


class EmailDecorator:
    """Base decorator: forwards everything to the wrapped email.

    Subclasses override ``get_content`` (and optionally ``get_subject``).
    Each layer appends its class name to the metadata decorator list.
    """

    def __init__(self, email: Email) -> None:
        self._email = email

    def get_content(self) -> str:
        return self._email.get_content()

    def get_subject(self) -> str:
        return self._email.get_subject()

    def get_metadata(self) -> EmailMetadata:
        metadata = self._email.get_metadata()
        metadata.decorators.append(type(self).__name__)
        return metadata


class SignatureDecorator(EmailDecorator):
    def __init__(
        self,
        email: Email,
        name: str = "Your Company",
        signature_style: str = "Regards",
        include_contact: bool = False,
    ) -> None:
        super().__init__(email)
        self.name = name
        self.signature_style = signature_style
        self.include_contact = include_contact

    def get_content(self) -> str:
        signature = f"\n\n-- {self.signature_style}, {self.name}"
        if self.include_contact:
            domain = re.sub(r"\s+", "", self.name.lower())
            signature += f"\nEmail: contact@{domain}.com"
        return self._email.get_content() + signature


class PromoDecorator(EmailDecorator):
    def __init__(
        self,
        email: Email,
        promo_text: str = "Special Offer Just for You!",
        emoji: str = "🎉",
    ) -> None:
        super().__init__(email)
        self.promo_text = promo_text
        self.emoji = emoji

    def get_content(self) -> str:
        return f"{self._email.get_content()}\n\n{self.emoji} *** {self.promo_text} *** {self.emoji}"


class EncryptionDecorator(EmailDecorator):
    """Base64-encodes the body and marks the subject with a padlock."""

    def __init__(self, email: Email) -> None:
        super().__init__(email)
        self._encrypted = False

    def get_content(self) -> str:
        content = self._email.get_content()
        self._encrypted = True
        encoded = base64.b64encode(content.encode("utf-8")).decode("ascii")
        return ENCRYPTED_HEADER + encoded

    def decrypted_content(self) -> str:
        encoded = self.get_content().removeprefix(ENCRYPTED_HEADER)
        return base64.b64decode(encoded).decode("utf-8")

    @property
    def is_encrypted(self) -> bool:
        return self._encrypted

    def get_subject(self) -> str:
        return f"🔒 {self._email.get_subject()}"


class FooterDecorator(EmailDecorator):
    def __init__(
        self,
        email: Email,
        include_unsubscribe: bool = True,
        include_privacy_policy: bool = True,
    ) -> None:
        super().__init__(email)
        self.include_unsubscribe = include_unsubscribe
        self.include_privacy_policy = include_privacy_policy

    def get_content(self) -> str:
        footer = ["\n\n---"]
        if self.include_unsubscribe:
            footer.append("To unsubscribe, click here: [Unsubscribe Link]")
        if self.include_privacy_policy:
            footer.append("Privacy Policy: [Privacy Link]")
        footer.append(f"© {datetime.now().year} Your Company. All rights reserved.")
        return self._email.get_content() + "\n".join(footer)


class HighlightDecorator(EmailDecorator):
    """Wraps every whole-word occurrence of a keyword in a marker."""

    def __init__(self, email: Email, keyword: str, marker: str = "**") -> None:
        super().__init__(email)
        if not keyword:
            raise ValueError("Highlight keyword cannot be empty")
        self.keyword = keyword
        self.marker = marker

    def get_content(self) -> str:
        pattern = re.compile(rf"\b({re.escape(self.keyword)})\b", re.IGNORECASE)
        return pattern.sub(lambda m: f"{self.marker}{m.group(1)}{self.marker}", self._email.get_content())


def compose_email(base: Email, *decorators: Callable[[Email], Email]) -> Email:
    """Apply decorator factories to ``base`` in order (first = innermost)."""
    email = base
    for decorate in decorators:
        email = decorate(email)
    return email
