"""Repository selection models."""

from enum import Enum

from pydantic import BaseModel, Field


class MatchMode(str, Enum):
    """How multiple include patterns combine."""

    ALL = "all"
    ANY = "any"


class PatternSet(BaseModel):
    """Include and exclude patterns applied to the repository cache."""

    include: list[str] = Field(default_factory=list)
    exclude: list[str] = Field(default_factory=list)
    case_insensitive: bool = True

    class Config:
        frozen = True


class InventoryRepository(BaseModel):
    """A repository descriptor as returned by the REST API."""

    id: int | None = None
    name: str
    svn_url: str | None = Field(default=None, alias="svnUrl")
    viewvc_url: str | None = Field(default=None, alias="viewvcUrl")
    status: str | None = None


class InventoryResponse(BaseModel):
    """Response body of the repository listing endpoint."""

    repositories: list[InventoryRepository] = Field(default_factory=list)
