"""FastAPI application exposing JSON documents held in the store."""

from __future__ import annotations

import logging
from typing import Any, Callable, List, NoReturn, TypeVar

from fastapi import Depends, FastAPI, HTTPException, Query

from config import STORE_CONFIG, config
from jsonkv import (
    CommandRejectedError,
    ExistenceModifier,
    InvalidPathError,
    JSONClient,
    ROOT_PATH,
    TransportError,
    UnsupportedTypeError,
)
from jsonkv.config import StoreConfig
from schemas import (
    DeleteDocumentResponse,
    GetDocumentResponse,
    SetDocumentRequest,
    SetDocumentResponse,
    TypeResponse,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MISSING = object()


class DocumentService:
    """Application layer façade around :class:`JSONClient`.

    This keeps FastAPI routes free from command details and allows
    for easier substitution in tests or other front-ends.
    """

    def __init__(self, store_config: StoreConfig, client: JSONClient | None = None) -> None:
        self._store_config = store_config
        self._client = client

    # ------------------------------------------------------------------ #
    # Lifecycle helpers
    # ------------------------------------------------------------------ #

    def _ensure_client(self) -> JSONClient:
        if self._client is None:
            self._client = JSONClient.from_config(self._store_config)
        return self._client

    def _call(self, operation: Callable[[JSONClient], T]) -> T:
        client = self._ensure_client()
        try:
            return operation(client)
        except InvalidPathError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except CommandRejectedError as exc:
            raise HTTPException(status_code=409, detail=exc.message) from exc
        except (UnsupportedTypeError, TransportError) as exc:
            logger.warning("store call failed: %s", exc)
            raise HTTPException(status_code=502, detail=str(exc)) from exc

    @staticmethod
    def _key_missing(key: str) -> NoReturn:
        raise HTTPException(status_code=404, detail=f"Key not found: {key}")

    # ------------------------------------------------------------------ #
    # Delegated operations
    # ------------------------------------------------------------------ #

    def set_document(
        self,
        key: str,
        value: Any,
        path: str,
        modifier: ExistenceModifier,
    ) -> SetDocumentResponse:
        self._call(lambda client: client.set(key, value, path, modifier))
        return SetDocumentResponse(key=key, path=path, value=value)

    def get_document(self, key: str, paths: List[str]) -> GetDocumentResponse:
        value = self._call(lambda client: client.get(key, *paths, default=_MISSING))
        if value is _MISSING:
            self._key_missing(key)
        wire_paths = paths or [ROOT_PATH.wire_form]
        return GetDocumentResponse(key=key, paths=wire_paths, value=value)

    def delete_document(self, key: str, path: str) -> DeleteDocumentResponse:
        deleted = self._call(lambda client: client.delete(key, path))
        return DeleteDocumentResponse(key=key, path=path, deleted=deleted)

    def type_of(self, key: str, path: str) -> TypeResponse:
        tag = self._call(lambda client: client.type_of(key, path))
        if tag is None:
            self._key_missing(key)
        return TypeResponse(key=key, path=path, type=tag)


app = FastAPI(title=config.title)

_document_service = DocumentService(STORE_CONFIG)


def get_document_service() -> DocumentService:
    """FastAPI dependency returning the shared document service."""
    return _document_service


@app.put("/documents/{key}", response_model=SetDocumentResponse)
def set_document(
    key: str,
    req: SetDocumentRequest,
    service: DocumentService = Depends(get_document_service),
) -> SetDocumentResponse:
    """Create or update the value at a path of a document."""
    return service.set_document(key, req.value, req.path, req.modifier)


@app.get("/documents/{key}", response_model=GetDocumentResponse)
def get_document(
    key: str,
    path: List[str] = Query(default=[]),
    service: DocumentService = Depends(get_document_service),
) -> GetDocumentResponse:
    """Retrieve one path, or a mapping when several ``path`` values are given."""
    return service.get_document(key, path)


@app.delete("/documents/{key}", response_model=DeleteDocumentResponse)
def delete_document(
    key: str,
    path: str = Query(default="."),
    service: DocumentService = Depends(get_document_service),
) -> DeleteDocumentResponse:
    """Delete the value at a path; the root path removes the key."""
    return service.delete_document(key, path)


@app.get("/documents/{key}/type", response_model=TypeResponse)
def type_of(
    key: str,
    path: str = Query(default="."),
    service: DocumentService = Depends(get_document_service),
) -> TypeResponse:
    """Return the JSON type of the value at a path."""
    return service.type_of(key, path)


@app.get("/")
def root() -> dict[str, str]:
    """Simple health endpoint for convenience."""
    return {"message": "JSON document gateway. See /docs for Swagger UI."}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app:app", host="0.0.0.0", port=8000, reload=True)
