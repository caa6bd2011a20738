"""
Application Layer for the Strength Program Engine API.

This package contains:
- exceptions: Errors raised by the engine and use cases
- ports/: Abstract repository interfaces (what the engine needs)
- use_cases/: Workflows coordinating the engine and the ports
"""
