"""Direct messaging — sending, conversation listing and read tracking.

Delivery is poll-based: clients re-fetch conversations, nothing is pushed.
"""

import logging

from app.errors import InvalidArgument, NotFoundError
from app.repositories.base import Repository
from app.schemas import (
    ConversationSummary,
    LatestMessage,
    MessageCreate,
    MessageRead,
    UserRecord,
)
from app.services.access_control import authorize, can_mark_message_read

logger = logging.getLogger(__name__)

UNKNOWN_PARTNER = "Unknown"


async def send_message(repo: Repository, sender: UserRecord, data: MessageCreate) -> MessageRead:
    if not data.content.strip():
        raise InvalidArgument("Message content may not be empty")

    recipient = await repo.get_user(data.to_user_id)
    if recipient is None:
        raise NotFoundError("Recipient not found")

    message = await repo.create_message(
        from_user_id=sender.id,
        to_user_id=recipient.id,
        content=data.content,
        related_to_application_id=data.related_to_application_id,
    )
    logger.info("User %s sent message %s to user %s", sender.id, message.id, recipient.id)
    return message


async def _partner_identity(repo: Repository, partner_id: int) -> tuple[str, str | None]:
    """Display name and avatar for a conversation partner."""
    partner = await repo.get_user(partner_id)
    if partner is None:
        return UNKNOWN_PARTNER, None

    if partner.is_job_seeker:
        profile = await repo.get_jobseeker_profile_by_user(partner_id)
        if profile is None:
            return UNKNOWN_PARTNER, None
        return f"{profile.first_name} {profile.last_name}", profile.avatar_url

    company = await repo.get_company_profile_by_user(partner_id)
    if company is None:
        return UNKNOWN_PARTNER, None
    return company.name, company.logo_url


async def list_conversations(repo: Repository, user: UserRecord) -> list[ConversationSummary]:
    """One entry per partner, most recent activity first."""
    threads: dict[int, list[MessageRead]] = {}
    for message in await repo.list_messages_for_user(user.id):
        partner_id = message.to_user_id if message.from_user_id == user.id else message.from_user_id
        threads.setdefault(partner_id, []).append(message)

    conversations = []
    for partner_id, messages in threads.items():
        latest = max(messages, key=lambda m: (m.sent_at, m.id))
        name, avatar = await _partner_identity(repo, partner_id)
        conversations.append(
            (
                (latest.sent_at, latest.id),
                ConversationSummary(
                    partner_id=partner_id,
                    partner_name=name,
                    partner_avatar=avatar,
                    latest_message=LatestMessage(
                        id=latest.id,
                        content=latest.content,
                        sent_at=latest.sent_at,
                        is_read=latest.is_read,
                        is_sender=latest.from_user_id == user.id,
                    ),
                    unread_count=sum(
                        1 for m in messages if m.to_user_id == user.id and not m.is_read
                    ),
                ),
            )
        )

    conversations.sort(key=lambda entry: entry[0], reverse=True)
    return [summary for _, summary in conversations]


async def get_conversation(repo: Repository, user: UserRecord, partner_id: int) -> list[MessageRead]:
    """All messages with a partner, oldest first; marks the caller's unread ones read."""
    partner = await repo.get_user(partner_id)
    if partner is None:
        raise NotFoundError("User not found")

    messages = []
    for message in await repo.list_conversation(user.id, partner_id):
        if message.to_user_id == user.id and not message.is_read:
            message = await repo.mark_message_read(message.id)
        messages.append(message)
    return messages


async def mark_read(repo: Repository, user: UserRecord, message_id: int) -> MessageRead:
    message = await repo.get_message(message_id)
    if message is None:
        raise NotFoundError("Message not found")
    authorize(
        can_mark_message_read(user, message),
        user,
        "You don't have permission to mark this message as read",
    )
    if message.is_read:
        return message
    return await repo.mark_message_read(message_id)
