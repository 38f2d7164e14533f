"""
Application Layer for the GymBuddy API.

This package contains:
- ports/: Abstract storage interfaces (what the domain needs)
- use_cases/: Workflows coordinating domain logic and ports
- exceptions: Errors shared by application and infrastructure layers
"""
