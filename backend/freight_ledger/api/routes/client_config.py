"""Client Config — tells the browser dashboard which API base URL to call.

Invariants:
    - Public route (called before login)
    - Falls back to http://localhost:<port> when API_URL is unset
"""

from fastapi import APIRouter, Depends

from freight_ledger.config import Settings, get_settings
from freight_ledger.schemas.auth import ClientConfig

router = APIRouter(prefix="/api", tags=["config"])


@router.get("/config", response_model=ClientConfig)
async def client_config(settings: Settings = Depends(get_settings)):
    return ClientConfig(apiUrl=settings.public_api_url())
