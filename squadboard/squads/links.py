"""Twitter account to wallet links."""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone

from sqlalchemy.orm import Session

from squadboard.models import WalletLink

logger = logging.getLogger(__name__)
WALLET_ADDRESS_RE = re.compile(r"^0x[a-fA-F0-9]{40}$")


def is_wallet_address(value: str) -> bool:
    return bool(WALLET_ADDRESS_RE.match(value))


def get_link(db: Session, twitter_id: str) -> WalletLink | None:
    return db.query(WalletLink).filter(WalletLink.twitter_id == twitter_id).one_or_none()


def save_link(
    db: Session,
    *,
    twitter_id: str,
    wallet_address: str,
    twitter_username: str = "",
    topstrike_username: str | None = None,
) -> WalletLink:
    """Create or replace the link for *twitter_id*. Caller commits."""
    if not is_wallet_address(wallet_address):
        raise ValueError("Invalid wallet address format")

    now_utc = datetime.now(timezone.utc)
    link = get_link(db, twitter_id)
    if link is None:
        link = WalletLink(twitter_id=twitter_id, linked_at=now_utc)
        db.add(link)
    link.wallet_address = wallet_address
    link.twitter_username = twitter_username
    link.topstrike_username = topstrike_username
    link.updated_at = now_utc
    logger.info("Linked Twitter %s -> wallet %s", twitter_id, wallet_address)
    return link


def remove_link(db: Session, twitter_id: str) -> bool:
    link = get_link(db, twitter_id)
    if link is None:
        return False
    db.delete(link)
    logger.info("Unlinked Twitter %s", twitter_id)
    return True


def all_links(db: Session) -> list[WalletLink]:
    return db.query(WalletLink).order_by(WalletLink.linked_at.asc(), WalletLink.id.asc()).all()
