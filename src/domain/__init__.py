"""
Domain layer for the card fusion game.

Pure game logic: catalog, unlock set, selection slots and the combination
resolver. No I/O and no third-party dependencies.
"""
