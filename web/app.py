"""Local-first FastAPI shell dispatching marketplace commands."""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from market_commands.base import Command
from market_commands.registry import build_commands
from market_config.log_setup import configure_logging
from market_config.settings import MarketSettings, get_settings
from market_models.errors import (
    EscrowNotImplementedError,
    InvalidParameterError,
    MessageTooLargeError,
    MissingParameterError,
    ModelNotFoundError,
    ModelNotModifiableError,
    TransientSendError,
)
from market_models.models import ItemImage, ListingDraft, SendResult
from market_store.memory import InMemoryDraftRepository, InMemoryVenueRepository
from message_orchestrator.orchestrator import MessageOrchestrator
from smsg_adapter.codec import MessageSizer
from smsg_adapter.simulator import SimulatedSmsgNetwork
from wallet_core.local_wallet import LocalWallet
from wallet_core.provisioner import AddressProvisioner

app = FastAPI(title="Market Broadcast", description="Local-first command shell")

_SETTINGS: MarketSettings = get_settings()
configure_logging(_SETTINGS.log_level)

_DRAFTS = InMemoryDraftRepository()
_VENUES = InMemoryVenueRepository()
_WALLET = LocalWallet()
_NETWORK = SimulatedSmsgNetwork()
_COMMANDS: Dict[str, Command] = {}


class CommandRequest(BaseModel):
    params: List[Any] = Field(default_factory=list)


@app.middleware("http")
async def _local_only(request: Request, call_next):
    client = request.client
    if client is not None:
        host = client.host
        if host not in {"127.0.0.1", "::1", "testclient"}:
            return JSONResponse({"error": "Remote access disabled."}, status_code=403)
    return await call_next(request)


def _error_handler(status_code: int):
    async def handle(request: Request, exc: Exception):
        return JSONResponse(
            {"error": str(exc), "type": type(exc).__name__}, status_code=status_code
        )

    return handle


for _exc_class, _status_code in (
    (MissingParameterError, 400),
    (InvalidParameterError, 400),
    (ModelNotFoundError, 404),
    (ModelNotModifiableError, 409),
    (MessageTooLargeError, 413),
    (EscrowNotImplementedError, 501),
    (TransientSendError, 502),
):
    app.add_exception_handler(_exc_class, _error_handler(_status_code))


@app.get("/api/status")
async def status():
    return {
        "commands": sorted(_COMMANDS),
        "max_retention_days": _SETTINGS.paid_message_retention_days,
        "max_paid_message_size": _SETTINGS.max_paid_message_size,
        "max_free_message_size": _SETTINGS.max_free_message_size,
        "messages_sent": len(_NETWORK.sent),
    }


@app.post("/api/commands/{group}/{action}")
async def run_command(group: str, action: str, payload: CommandRequest):
    command = _COMMANDS.get(f"{group}.{action}")
    if command is None:
        raise HTTPException(status_code=404, detail=f"Unknown command: {group} {action}")
    result = await command.run(payload.params)
    if isinstance(result, SendResult):
        return _send_result_to_dict(result)
    if isinstance(result, ItemImage):
        return _image_to_dict(result)
    return {"result": result}


@app.get("/api/templates/{template_id}")
async def get_template(template_id: int):
    draft = await _DRAFTS.find_one(template_id)
    return _draft_to_dict(draft)


def _send_result_to_dict(result: SendResult) -> dict:
    return {
        "result": "Estimated." if result.primary_message_id is None else "Sent.",
        "msgid": result.primary_message_id,
        "msgids": list(result.child_message_ids),
        "fee": result.estimated_fee,
    }


def _image_to_dict(image: ItemImage) -> dict:
    return {
        "id": image.image_id,
        "hash": image.hash,
        "protocol": image.protocol,
        "featured": image.featured,
    }


def _draft_to_dict(draft: ListingDraft) -> dict:
    address = draft.payment_address
    return {
        "id": draft.draft_id,
        "hash": draft.hash,
        "frozen": draft.frozen,
        "title": draft.item_information.title if draft.item_information else None,
        "payment_address": address.address if address else None,
        "payment_address_type": address.address_type.value if address else None,
        "images": [_image_to_dict(image) for image in draft.images],
        "updated_at": draft.updated_at,
    }


def _reset_state() -> None:
    global _DRAFTS, _VENUES, _WALLET, _NETWORK
    _DRAFTS = InMemoryDraftRepository()
    _VENUES = InMemoryVenueRepository()
    _WALLET = LocalWallet()
    _NETWORK = SimulatedSmsgNetwork()
    orchestrator = MessageOrchestrator(
        drafts=_DRAFTS,
        provisioner=AddressProvisioner(_WALLET),
        sender=_NETWORK,
        sizer=MessageSizer(_SETTINGS.max_paid_message_size, _SETTINGS.max_free_message_size),
        max_retention_days=_SETTINGS.paid_message_retention_days,
    )
    _COMMANDS.clear()
    _COMMANDS.update(
        build_commands(_DRAFTS, _VENUES, orchestrator, _SETTINGS.paid_message_retention_days)
    )


_reset_state()
