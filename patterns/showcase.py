"""Run every pattern demo in sequence.

Usage:
    python -m patterns
"""

import sys
import time
import traceback

from patterns.behavioral import (
    NormalStrategy,
    RideService,
    SportsEventSubject,
    SurgeStrategy,
    User,
    WeatherStrategy,
)
from patterns.creational import GlobalSettings, SmartDeviceFactory
from patterns.structural import (
    BasicEmail,
    EncryptionDecorator,
    Facebook,
    FacebookAdapter,
    FooterDecorator,
    HighlightDecorator,
    Instagram,
    InstagramAdapter,
    LinkedIn,
    LinkedInAdapter,
    PromoDecorator,
    SignatureDecorator,
    SocialMediaBroadcaster,
    Twitter,
    TwitterAdapter,
    compose_email,
    validate_message,
)
from rocketsim.log import configure_logging

RULE = "-" * 60


def separator(title: str) -> None:
    """Print a section banner."""
    print("\n" + "=" * 60)
    print(f"  {title}")
    print("=" * 60 + "\n")


def _status(ok: bool) -> str:
    return "✅" if ok else "❌"


# =============================================================================
# Demos
# =============================================================================


def demo_observer(delay: float) -> SportsEventSubject:
    separator("OBSERVER PATTERN - Live Sports Score Updates")

    match = SportsEventSubject("Premier League: Manchester vs Liverpool")
    alice = User("user_001", "Alice")
    bob = User("user_002", "Bob")
    charlie = User("user_003", "Charlie")

    for user in (alice, bob, charlie):
        match.subscribe(user)
    print(f"Active subscribers: {match.observer_count}\n")

    match.score_update("Manchester", 1, "15:32")
    time.sleep(delay)
    match.score_update("Liverpool", 1, "28:45")
    time.sleep(delay)

    print("\n[Bob unsubscribed from updates]\n")
    match.unsubscribe(bob)

    match.score_update("Manchester", 2, "67:12")
    time.sleep(delay)
    match.game_end("Manchester", "2-1")

    print(f"\nTotal events logged: {len(match.get_event_history())}")
    return match


def demo_strategy() -> None:
    separator("STRATEGY PATTERN - Dynamic Ride Pricing")

    base_fare = 25.0
    service = RideService(NormalStrategy())
    scenarios = [
        ("Normal Day, Low Demand", None),
        ("High Demand, Rush Hour", SurgeStrategy(2.5)),
        ("Rainy Weather", WeatherStrategy()),
        ("Conditions Normalized", NormalStrategy()),
    ]

    for number, (label, strategy) in enumerate(scenarios, start=1):
        print(f"📍 Scenario {number}: {label}")
        if strategy is not None:
            service.set_strategy(strategy)
        fare = service.calculate_fare(base_fare)
        print(f"   Base Fare: ${base_fare} → Final Fare: ${fare}\n")


def demo_settings() -> GlobalSettings:
    separator("SINGLETON PATTERN - Global Application Settings")

    # One instance, created here and handed to every consumer
    settings = GlobalSettings()
    consumers = {"ui": settings, "network": settings}

    print("Initial Settings:")
    print(settings.all_settings())

    print("\n🔧 Updating settings...")
    consumers["ui"].set("debugMode", True)
    consumers["ui"].set("maxRetries", 5)
    consumers["ui"].set("theme", "dark")
    consumers["ui"].set("language", "en-US")

    print("\n✅ Verifying shared instance:")
    print(f"   UI debugMode: {consumers['ui'].get('debugMode')}")
    print(f"   Network debugMode: {consumers['network'].get('debugMode')}")
    print(f"   Same instance? {consumers['ui'] is consumers['network']}")

    print("\n📜 Change History:")
    for change in settings.get_change_history()[-3:]:
        print(f"   {change.key}: {change.old_value} → {change.new_value}")
    return settings


def demo_factory() -> SmartDeviceFactory:
    separator("FACTORY PATTERN - Smart Home Device Creation")

    factory = SmartDeviceFactory()
    print("🏭 Creating smart home devices...\n")
    light = factory.create_device("light", "living-room-light")
    camera = factory.create_device("camera", "front-door-cam")
    thermostat = factory.create_device("thermostat", "main-thermostat")

    print(f"\n📊 Total devices created: {factory.device_count}")
    print(f"📋 Supported types: {', '.join(factory.supported_types())}\n")
    print("🔧 Testing device capabilities:\n")

    actions = [
        (light, [("toggle", None), ("setBrightness", {"level": 75}), ("setColor", {"color": "warm-white"})]),
        (camera, [("startRecording", None), ("setResolution", {"resolution": "4K"}), ("takeSnapshot", None)]),
        (thermostat, [("setTemperature", {"temperature": 68}), ("setMode", {"mode": "cooling"})]),
    ]
    for device, steps in actions:
        print(f"{device.type} ({device.id}):")
        print(f"   Capabilities: {', '.join(device.capabilities)}")
        for action, params in steps:
            device.perform_action(action, params)
        print()
    return factory


def demo_decorator() -> None:
    separator("DECORATOR PATTERN - Email Template Builder")

    print("📧 Email 1: Basic + Signature\n")
    email1 = BasicEmail("Team Meeting Tomorrow", "Don't forget our team sync at 10 AM.")
    email1 = SignatureDecorator(email1, "John Smith", "Best regards", include_contact=True)
    print(email1.get_content())
    print(f"Subject: {email1.get_subject()}")

    print("\n" + RULE + "\n")
    print("📧 Email 2: Marketing Email (Full Stack)\n")
    email2 = BasicEmail("Exclusive Offer Inside!", "Check out our latest products and deals.")
    email2 = HighlightDecorator(email2, "latest", "✨")
    email2 = PromoDecorator(email2, "Limited Time: 50% OFF Everything!", "🎁")
    email2 = SignatureDecorator(email2, "Marketing Team", "Cheers")
    email2 = FooterDecorator(email2)
    print(email2.get_content())
    print(f"\n📋 Subject: {email2.get_subject()}")
    metadata = email2.get_metadata()
    print(f"🏷️  Decorators Applied: {' → '.join(metadata.decorators)}")
    print(f"⏰ Timestamp: {metadata.timestamp:%Y-%m-%d %H:%M:%S}")

    print("\n" + RULE + "\n")
    print("📧 Email 3: Encrypted Confidential Message\n")
    email3 = EncryptionDecorator(BasicEmail("Confidential Report", "Quarterly financial results are attached."))
    print(f"Subject: {email3.get_subject()}")
    print(email3.get_content())
    print(f"\n🔓 Decrypted Content:\n{email3.decrypted_content()}")
    print(f"Encrypted: {email3.is_encrypted}")

    print("\n" + RULE + "\n")
    print("📧 Email 4: Composed Email (Using Utility Function)\n")
    email4 = compose_email(
        BasicEmail("Product Launch Announcement", "We are excited to unveil our revolutionary new product!"),
        lambda e: HighlightDecorator(e, "revolutionary", "🌟"),
        lambda e: PromoDecorator(e, "Early Bird Discount: 30% OFF", "🚀"),
        lambda e: SignatureDecorator(e, "Product Team", "Warm regards", include_contact=True),
        lambda e: FooterDecorator(e, include_privacy_policy=False),
    )
    print(email4.get_content())
    print(f"\n🏷️  Decorators: {' → '.join(email4.get_metadata().decorators)}")


def demo_adapter() -> int:
    separator("ADAPTER PATTERN - Unified Social Media Posting")

    twitter = TwitterAdapter(Twitter())
    facebook = FacebookAdapter(Facebook())
    linkedin = LinkedInAdapter(LinkedIn())
    instagram = InstagramAdapter(Instagram())

    short_message = "Excited to announce our new product launch! 🚀"
    long_message = (
        "We are thrilled to announce the launch of our groundbreaking new product that will "
        "revolutionize the industry! After months of hard work and dedication from our amazing "
        "team, we're finally ready to share this innovation with the world. Join us on this "
        "exciting journey as we transform the way people interact with technology. Stay tuned "
        "for more updates and exclusive offers coming your way!"
    )

    print("📱 Example 1: Individual Platform Posts\n")
    for adapter in (twitter, facebook):
        result = adapter.post_message(short_message)
        print(f"{result.platform}:")
        print(f"   Status: {'✅ Success' if result.success else '❌ Failed'}")
        print(f"   Message ID: {result.message_id}")
        print(f"   Character Limit: {adapter.character_limit}\n")

    print(RULE + "\n")
    print("📱 Example 2: Message Validation\n")
    validation = validate_message(long_message, [twitter, facebook, linkedin])
    print(f"Message Length: {len(long_message)} characters")
    print(f"Validation Result: {'✅ Valid' if validation.valid else '❌ Invalid'}\n")
    if not validation.valid:
        print("Issues found:")
        for issue in validation.issues:
            print(f"   ⚠️  {issue}")

    print("\n" + RULE + "\n")
    print("📱 Example 3: Multi-Platform Broadcasting\n")
    broadcaster = (
        SocialMediaBroadcaster()
        .add_platform(twitter)
        .add_platform(facebook)
        .add_platform(linkedin)
        .add_platform(instagram)
    )
    print(f"Configured platforms: {', '.join(broadcaster.platforms)}\n")
    message = "Join us for our exclusive webinar next Tuesday at 3 PM! 📅"
    print(f'Broadcasting: "{message}"\n')
    print("Broadcast Results:")
    for result in broadcaster.broadcast(message):
        print(f"   {result.platform}:")
        print(f"      Status: {_status(result.success)}")
        print(f"      Time: {result.timestamp:%H:%M:%S}")
        if result.message_id:
            print(f"      ID: {result.message_id}")
        if result.error:
            print(f"      Error: {result.error}")

    print("\n" + RULE + "\n")
    print("📱 Example 4: Selective Platform Broadcast\n")
    professional = (
        "Thrilled to share our Q4 achievements and roadmap for 2025. "
        "Read the full report on our website."
    )
    print(f'Professional Message: "{professional}"')
    print("Target Platforms: LinkedIn, Twitter\n")
    print("Selective Broadcast Results:")
    for result in broadcaster.broadcast_to_selected(professional, ["LinkedIn", "Twitter"]):
        print(f"   {result.platform}: {'✅ Posted' if result.success else '❌ Failed'}")

    print("\n" + RULE + "\n")
    print("📱 Example 5: Dynamic Platform Management\n")
    print("Removing Instagram from broadcaster...")
    broadcaster.remove_platform("Instagram")
    print(f"Updated platforms: {', '.join(broadcaster.platforms)}\n")
    results = broadcaster.broadcast("Quick update: Our platform is now live! Check it out.")
    print(f"Broadcast to {len(results)} platforms:")
    for result in results:
        print(f"   {result.platform}: {_status(result.success)}")

    return 4


def print_summary(
    factory: SmartDeviceFactory,
    match: SportsEventSubject,
    settings: GlobalSettings,
    platform_count: int,
) -> None:
    separator("EXECUTION SUMMARY")
    print("✅ All design patterns demonstrated successfully!\n")
    print("Patterns Covered:")
    print("  🔵 Behavioral: Observer (Live Sports Updates), Strategy (Dynamic Ride Pricing)")
    print("  🟢 Creational: Singleton (Global Settings), Factory (Smart Device Creation)")
    print("  🟡 Structural: Decorator (Email Templates), Adapter (Social Media Integration)\n")
    print("📊 Statistics:")
    print(f"   Total Devices Created: {factory.device_count}")
    print(f"   Total Events in Sports Match: {len(match.get_event_history())}")
    print(f"   Settings Changes Tracked: {len(settings.get_change_history())}")
    print(f"   Social Platforms Demonstrated: {platform_count} (Twitter, Facebook, LinkedIn, Instagram)")


# =============================================================================
# Entry points
# =============================================================================


def main(delay: float = 0.5) -> int:
    """Run all demos.

    Args:
        delay: Pause between observer events [s]

    Returns:
        Process exit code (1 if any demo raised)
    """
    try:
        match = demo_observer(delay)
        demo_strategy()
        settings = demo_settings()
        factory = demo_factory()
        demo_decorator()
        platform_count = demo_adapter()
        print_summary(factory, match, settings, platform_count)
    except Exception as error:
        print("\n❌ ERROR OCCURRED:", file=sys.stderr)
        print(f"   {error}", file=sys.stderr)
        traceback.print_exc()
        return 1

    print("\n" + "=" * 60)
    print("  Program completed successfully")
    print("=" * 60 + "\n")
    return 0


def run() -> int:
    """Entry point for the ``pattern-showcase`` console script."""
    configure_logging()
    return main()
