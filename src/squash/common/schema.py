"""Pydantic models and dataclasses for request/response types."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict

DEFAULT_STAY_ALIVE = "30s"


@dataclass(frozen=True)
class Unit:
    """A quantity tagged with its unit symbol, e.g. Unit(5, "megabyte")."""
    value: int | float
    unit: str


class GenerateRequest(BaseModel):
    """Input for a single /api/generate call."""
    address: str
    prompt: str
    model: str
    images: list[str] | None = None
    format: str | None = None
    system: str | None = None
    template: str | None = None
    context: list[int] | None = None
    raw: bool = False
    stay_alive: str = DEFAULT_STAY_ALIVE

    def base_url(self) -> str:
        return self.address.rstrip("/")

    def to_payload(self) -> dict[str, Any]:
        """
        Build the wire body.

        Only fields holding a value are written: None, empty strings/lists and
        raw=False are left out rather than sent as null.
        """
        fields = (
            ("model", self.model),
            ("prompt", self.prompt),
            ("images", self.images),
            ("format", self.format),
            ("system", self.system),
            ("template", self.template),
            ("context", self.context),
            ("raw", self.raw),
            ("stayalive", self.stay_alive),
        )
        payload: dict[str, Any] = {}
        for key, value in fields:
            if value is None or value is False:
                continue
            if isinstance(value, (str, list)) and len(value) == 0:
                continue
            payload[key] = value
        return payload


class GenerateResponse(BaseModel):
    """Decoded reply of a generate or chat call."""
    model_config = ConfigDict(frozen=True)

    created_at: str = ""
    total_duration: int = 0
    load_duration: int = 0
    prompt_eval_count: int = 0
    prompt_eval_duration: int = 0
    eval_count: int = 0
    eval_duration: int = 0
    context: list[Any] = []
    response: str = ""

    @classmethod
    def from_reply(cls, data: dict[str, Any], response: str | None = None) -> "GenerateResponse":
        """
        Map a parsed JSON reply onto the record, defaulting missing metrics to 0.

        Args:
            data: Parsed reply object.
            response: Overrides the `response` text (used by chat).
        """
        text = data.get("response") if response is None else response
        return cls(
            created_at=str(data.get("created_at") or ""),
            total_duration=int(data.get("total_duration") or 0),
            load_duration=int(data.get("load_duration") or 0),
            prompt_eval_count=int(data.get("prompt_eval_count") or 0),
            prompt_eval_duration=int(data.get("prompt_eval_duration") or 0),
            eval_count=int(data.get("eval_count") or 0),
            eval_duration=int(data.get("eval_duration") or 0),
            context=list(data.get("context") or []),
            response=text or "",
        )
