from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func

from .db import Base


class WalletLink(Base):
    __tablename__ = "wallet_links"

    id = Column(Integer, primary_key=True, index=True)
    twitter_id = Column(String, nullable=False, unique=True, index=True)
    twitter_username = Column(String, nullable=False, default="")
    wallet_address = Column(String, nullable=False)
    topstrike_username = Column(String, nullable=True)
    linked_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )


class SavedSquad(Base):
    __tablename__ = "saved_squads"

    id = Column(Integer, primary_key=True, index=True)
    wallet_address = Column(String, nullable=False, unique=True, index=True)  # stored lowercase
    formation = Column(String, nullable=False)
    assigned_players_json = Column(Text, nullable=False, default="{}")
    saved_at = Column(DateTime(timezone=True), nullable=False)
