"""Adapter pattern: unified social media posting.

Each legacy platform client has its own method name and return shape.
Adapters expose them all through one ``post_message`` call returning a
:class:`PostResult`, so a broadcaster can treat them alike.

Example:
    >>> from patterns.structural import Twitter, TwitterAdapter
    >>>
    >>> twitter = TwitterAdapter(Twitter())
    >>> result = twitter.post_message("Hello!")
    Tweeted: Hello!
    >>> result.success, result.platform
    (True, 'Twitter')
"""

import time
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Protocol, runtime_checkable

from beartype import beartype


def _millis() -> int:
    return time.time_ns() // 1_000_000


# =============================================================================
# Legacy platform clients
# =============================================================================


class Twitter:
    def tweet(self, content: str) -> dict[str, str]:
        print(f"Tweeted: {content}")
        return {"id": f"tw_{_millis()}", "status": "posted"}


class Facebook:
    def share(self, post: str) -> dict[str, str]:
        print(f"Shared on FB: {post}")
        return {"postId": f"fb_{_millis()}"}


class LinkedIn:
    def publish(self, content: str) -> bool:
        print(f"Published on LinkedIn: {content}")
        return True


class Instagram:
    def post(self, caption: str, image_url: str | None = None) -> dict[str, Any]:
        print(f"Posted on Instagram: {caption}")
        return {"success": True, "id": f"ig_{_millis()}"}


# =============================================================================
# Unified interface
# =============================================================================


@beartype
@dataclass(frozen=True)
class PostResult:
    """Outcome of posting to one platform."""
    success: bool
    platform: str
    message_id: str | None = None
    error: str | None = None
    timestamp: datetime = field(default_factory=datetime.now)


@runtime_checkable
class SocialMedia(Protocol):
    @property
    def name(self) -> str:
        ...

    @property
    def character_limit(self) -> int:
        ...

    def post_message(self, message: str) -> PostResult:
        ...


class _Adapter(ABC):
    """Turns client exceptions into failed results."""

    name = "Platform"
    character_limit = 0

    def post_message(self, message: str) -> PostResult:
        try:
            return self._post(message)
        except Exception as error:
            return PostResult(success=False, platform=self.name, error=str(error))

    @abstractmethod
    def _post(self, message: str) -> PostResult:
        ...


class TwitterAdapter(_Adapter):
    name = "Twitter"
    character_limit = 280

    def __init__(self, twitter: Twitter) -> None:
        self._twitter = twitter

    def _post(self, message: str) -> PostResult:
        if len(message) > self.character_limit:
            return PostResult(
                success=False,
                platform=self.name,
                error=f"Message exceeds {self.character_limit} character limit",
            )
        response = self._twitter.tweet(message)
        return PostResult(success=True, platform=self.name, message_id=response.get("id"))


class FacebookAdapter(_Adapter):
    name = "Facebook"
    character_limit = 63206

    def __init__(self, facebook: Facebook) -> None:
        self._facebook = facebook

    def _post(self, message: str) -> PostResult:
        response = self._facebook.share(message)
        return PostResult(success=True, platform=self.name, message_id=response["postId"])


class LinkedInAdapter(_Adapter):
    name = "LinkedIn"
    character_limit = 3000

    def __init__(self, linkedin: LinkedIn) -> None:
        self._linkedin = linkedin

    def _post(self, message: str) -> PostResult:
        success = self._linkedin.publish(message)
        message_id = f"li_{_millis()}" if success else None
        return PostResult(success=success, platform=self.name, message_id=message_id)


class InstagramAdapter(_Adapter):
    name = "Instagram"
    character_limit = 2200

    def __init__(self, instagram: Instagram) -> None:
        self._instagram = instagram

    def _post(self, message: str) -> PostResult:
        response = self._instagram.post(message)
        return PostResult(
            success=bool(response.get("success")),
            platform=self.name,
            message_id=response.get("id"),
        )


# =============================================================================
# Broadcasting
# =============================================================================


class SocialMediaBroadcaster:
    """Posts one message to several platforms."""

    def __init__(self) -> None:
        self._platforms: list[SocialMedia] = []

    def add_platform(self, platform: SocialMedia) -> "SocialMediaBroadcaster":
        self._platforms.append(platform)
        return self

    def remove_platform(self, name: str) -> "SocialMediaBroadcaster":
        self._platforms = [p for p in self._platforms if p.name != name]
        return self

    def broadcast(self, message: str) -> list[PostResult]:
        return [platform.post_message(message) for platform in self._platforms]

    def broadcast_to_selected(self, message: str, names: Iterable[str]) -> list[PostResult]:
        selected = set(names)
        return [p.post_message(message) for p in self._platforms if p.name in selected]

    @property
    def platforms(self) -> list[str]:
        return [p.name for p in self._platforms]


@beartype
@dataclass(frozen=True)
class MessageValidation:
    valid: bool
    issues: list[str]


def validate_message(message: str, platforms: Iterable[SocialMedia]) -> MessageValidation:
    """Check a message against every platform's character limit."""
    issues = [
        f"Message too long for {p.name} ({len(message)}/{p.character_limit} chars)"
        for p in platforms
        if len(message) > p.character_limit
    ]
    return MessageValidation(valid=not issues, issues=issues)
