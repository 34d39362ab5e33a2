"""Services Layer — persistence repositories and the game controller.

Invariants:
    - Every repository operation opens and closes its own DB session
    - GameController is the only writer of GameState

Design Decisions:
    - One file per collaborator for locality (ledger, store, linker, controller)
"""
