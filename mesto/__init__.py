"""
Mesto backend.

FastAPI service for user profiles and shared picture cards with likes,
stored in MongoDB and protected by a JWT session cookie. ``mesto.main``
holds the application factory and the uvicorn entry point.
"""
