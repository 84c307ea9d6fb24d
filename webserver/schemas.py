from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserProfile(BaseModel):
    """Snapshot of the signed-in user kept in the session."""

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(default=None, alias="ID")
    account: Optional[str] = Field(default=None, alias="Account")
    display_name: Optional[str] = Field(default=None, alias="DisplayName")
    email: Optional[str] = Field(default=None, alias="Email")


@dataclass(frozen=True)
class MenuItem:
    id: str
    pid: Optional[str]
    ids: Optional[str]
    code: str
    name: str
    description: str
    seq: int
    icon: Optional[str]
    controller: Optional[str]
    action: Optional[str]
    is_enabled: bool
