# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""FastAPI dependencies and response helpers.

The remote store backing the API lives on ``app.state.store`` and is
injected into route handlers with the ``Store`` annotation:

    @router.get("")
    async def list_courses(store: Store) -> dict:
        ...
"""

from typing import Annotated, Any

from fastapi import Depends, Request

from tms_sync.infrastructure.store.base import RemoteStore
from tms_sync.models import DocumentModel


def get_store(request: Request) -> RemoteStore:
    """Get the remote store attached to the application."""
    return request.app.state.store


def envelope(data: Any = None) -> dict[str, Any]:
    """Wrap a successful result in the response envelope.

    Documents are serialized in their camelCase wire form.
    """
    if isinstance(data, DocumentModel):
        data = data.to_document()
    elif isinstance(data, list):
        data = [item.to_document() if isinstance(item, DocumentModel) else item for item in data]
    return {"success": True, "data": data}


def error_envelope(message: str) -> dict[str, Any]:
    return {"success": False, "error": message}


# Type aliases for cleaner route signatures
Store = Annotated[RemoteStore, Depends(get_store)]
