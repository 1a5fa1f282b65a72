"""Domain layer - Time values, validation rules, and pure calendar logic.

This layer contains:
- Value Objects: Instant constants and MinutesOfDay
- Domain Services: Input coercion, shape validation, rendering, day arithmetic
- Domain Exceptions: Coercion and parse validation failures

The domain layer has NO dependencies on a clock or a host calendar.
"""
