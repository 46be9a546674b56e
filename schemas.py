# schemas.py

from typing import Any, List

from pydantic import BaseModel, Field

from jsonkv import ExistenceModifier, TypeTag


class SetDocumentRequest(BaseModel):
    value: Any
    path: str = Field(".", description="Path to write; '.' is the whole document")
    modifier: ExistenceModifier = Field(
        ExistenceModifier.UNCONDITIONAL,
        description="Whether the path must or must not already exist",
    )


class SetDocumentResponse(BaseModel):
    key: str
    path: str
    value: Any


class GetDocumentResponse(BaseModel):
    key: str
    paths: List[str]
    value: Any


class DeleteDocumentResponse(BaseModel):
    key: str
    path: str
    deleted: int


class TypeResponse(BaseModel):
    key: str
    path: str
    type: TypeTag
