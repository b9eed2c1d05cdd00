"""Database Infrastructure — SQLAlchemy Base for the SQL record backend.

Invariants:
    - Only the SQL backend imports from db/; CSV and Mongo stores never touch it
"""
