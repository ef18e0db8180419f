"""Structural pattern demos: Decorator (email templates) and Adapter (social media)."""

from patterns.structural.email_decorator import (
    BasicEmail,
    Email,
    EmailDecorator,
    EmailMetadata,
    EncryptionDecorator,
    FooterDecorator,
    HighlightDecorator,
    PromoDecorator,
    SignatureDecorator,
    compose_email,
)
from patterns.structural.social_adapter import (
    Facebook,
    FacebookAdapter,
    Instagram,
    InstagramAdapter,
    LinkedIn,
    LinkedInAdapter,
    MessageValidation,
    PostResult,
    SocialMedia,
    SocialMediaBroadcaster,
    Twitter,
    TwitterAdapter,
    validate_message,
)

__all__ = [
    # Decorator
    "BasicEmail",
    "Email",
    "EmailDecorator",
    "EmailMetadata",
    "EncryptionDecorator",
    "FooterDecorator",
    "HighlightDecorator",
    "PromoDecorator",
    "SignatureDecorator",
    "compose_email",
    # Adapter
    "Facebook",
    "FacebookAdapter",
    "Instagram",
    "InstagramAdapter",
    "LinkedIn",
    "LinkedInAdapter",
    "MessageValidation",
    "PostResult",
    "SocialMedia",
    "SocialMediaBroadcaster",
    "Twitter",
    "TwitterAdapter",
    "validate_message",
]
