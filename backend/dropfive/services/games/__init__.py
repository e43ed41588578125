"""Game domain services: board rules, turn arbitration, readiness, moves.

Everything here except ``moves`` is transport-free and can be exercised
without a Flask app; socket handlers and HTTP routes import from here.
"""
