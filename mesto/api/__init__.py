"""
API layer for the Mesto backend.

Exposes the sign-up/sign-in endpoints, the /users and /cards resources,
and the exception handlers that turn failures into {"message": ...} JSON.
"""
