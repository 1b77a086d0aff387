"""
Run the API server: python -m gridcast.main
"""

import uvicorn

from gridcast.main.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "gridcast.main.app:app",
        host=settings.ge.host,
        port=settings.ge.port,
        reload=settings.ge.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
