"""
Pydantic models for the device REST API.

Every field has a zero-value default so an empty response body decodes to
an all-default instance.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class WireModel(BaseModel):
    """Base for response bodies; JSON nulls fall back to the field default."""

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class Session(WireModel):
    """A configuration editing session (GET /rest/conf)."""

    id: str = ""
    username: str = ""
    started: str = ""
    modified: str = ""
    updated: str = ""
    description: str = ""


class SessionList(WireModel):
    message: str = ""
    sessions: list[Session] = Field(default_factory=list, alias="session")

    model_config = ConfigDict(populate_by_name=True)


class ConfigChild(WireModel):
    name: str = ""
    state: str = ""


class ConfigNode(WireModel):
    """A node of the configuration tree with its immediate children."""

    name: str = ""
    state: str = ""
    type: list[str] = Field(default_factory=list)
    enumeration: list[str] = Field(default_factory=list)
    end: str = ""
    mandatory: str = ""
    multi: str = ""
    default: str = ""
    help: str = ""
    val_help: list[str] = Field(default_factory=list)
    comp_help: str = ""
    children: list[ConfigChild] = Field(default_factory=list)


class OpNode(WireModel):
    """A node of the operational command tree."""

    children: list[str] = Field(default_factory=list)
    enum: list[str] = Field(default_factory=list)
    action: str = ""
    help: str = ""


class Process(WireModel):
    """A running (or just finished) operational command."""

    id: str = ""
    username: str = ""
    started: str = ""
    updated: str = ""
    command: str = ""


class ProcessList(WireModel):
    processes: list[Process] = Field(default_factory=list, alias="process")

    model_config = ConfigDict(populate_by_name=True)


class MessageResponse(WireModel):
    """Body of lifecycle actions (commit, save, ...) and of most errors."""

    message: str = ""
    error: str = ""
