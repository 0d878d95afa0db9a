"""Infrastructure layer — the zone database and the clock.

Both are injectable capabilities so an alternate timezone database or a
frozen clock can be substituted without touching validator logic.
"""
