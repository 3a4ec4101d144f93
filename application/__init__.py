"""
Application Layer for the Program Import API.

This package contains:
- ports/: Abstract repository interfaces (what the use cases need)
- use_cases/: Workflows orchestrating core services and ports
- exceptions: Errors shared across layers
"""
