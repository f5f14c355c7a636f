"""Shared constants and helpers for API integration tests."""

STRONG_PASSWORD = "Passw0rd1"


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}
