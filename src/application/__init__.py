"""
Application layer for the card fusion game.

This layer contains application services that orchestrate domain models and I/O.
Services coordinate between the domain layer and external resources like catalog files.
"""
