"""Run the API with uvicorn: python -m freight_ledger"""

import uvicorn

from freight_ledger.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "freight_ledger.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
