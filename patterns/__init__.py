"""Design pattern showcase.

Stand-alone demonstrations of classic object-oriented patterns, each in
its own module with console output. ``patterns.showcase.main()`` runs all
of them in sequence.

Subpackages:
    behavioral: Observer (live sports), Strategy (ride pricing)
    creational: shared settings (Singleton), Factory (smart devices)
    structural: Decorator (email templates), Adapter (social media)

Example:
    >>> from patterns.showcase import main
    >>> exit_code = main(delay=0.0)
"""

from patterns.showcase import main

__all__ = ["main"]
