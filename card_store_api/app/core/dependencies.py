"""
FastAPI dependencies shared by the endpoint modules.

The card store is created once in ``create_app`` and kept on
``app.state``; handlers obtain it through ``Depends(get_card_store)``
instead of importing a module-level global.
"""

from fastapi import Request

from card_store_api.app.services.card_service import CardStore


def get_card_store(request: Request) -> CardStore:
    """Return the card store attached to the running application."""
    store = getattr(request.app.state, "card_store", None)
    if store is None:
        raise RuntimeError("card store is not configured on the application")
    return store
