"""Messaging API endpoints. Clients poll these; there is no push channel."""

from fastapi import APIRouter, Depends

from app.dependencies.auth import require_user
from app.dependencies.storage import get_repository
from app.repositories.base import Repository
from app.schemas import ConversationSummary, MessageCreate, MessageRead, UserRecord
from app.services import messaging_service

router = APIRouter(prefix="/messages", tags=["messages"])


@router.post("", response_model=MessageRead, status_code=201)
async def send_message(
    data: MessageCreate,
    user: UserRecord = Depends(require_user),
    repo: Repository = Depends(get_repository),
):
    return await messaging_service.send_message(repo, user, data)


@router.get("", response_model=list[ConversationSummary])
async def list_conversations(
    user: UserRecord = Depends(require_user),
    repo: Repository = Depends(get_repository),
):
    return await messaging_service.list_conversations(repo, user)


@router.get("/{partner_id}", response_model=list[MessageRead])
async def get_conversation(
    partner_id: int,
    user: UserRecord = Depends(require_user),
    repo: Repository = Depends(get_repository),
):
    """Messages with one partner; unread messages addressed to the caller become read."""
    return await messaging_service.get_conversation(repo, user, partner_id)


@router.put("/{message_id}/read", response_model=MessageRead)
async def mark_read(
    message_id: int,
    user: UserRecord = Depends(require_user),
    repo: Repository = Depends(get_repository),
):
    return await messaging_service.mark_read(repo, user, message_id)
