from litestar import get


@get("/health", sync_to_thread=False)
def health() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}
