"""Leaderboard of linked wallets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from squadboard.models import WalletLink

# Wallet address (lowercase) -> TopStrike display name, collected by hand.
TOPSTRIKE_USERNAMES: dict[str, str] = {
    "0x03fed52d82463231ea6d18971862a14fe5a4e387": "Simon Dedic",
    "0x0e6cf86abf7110e1f087fbabff7b52f8047af0cc": "Dorkai",
    "0x12d9606a6bd209a7a88f33a97da0788be08b193f": "Police911",
    "0x16c2159e0437c66c75e7efbfceabe5627d69e80a": "VicNL",
    "0x2ca2ef90af61ac0461432d1b89c5b267c0f72550": "Zagor06",
    "0x35599b0d1d361202372f21e702247d9d4658bdc5": "Tomas",
    "0x4500a1f14f1b7af54a3007959cab8bb14e8fa4e3": "Hacks",
    "0x67f8baaff927e772a0b0a5b79695b166575b32bb": "Babzy",
    "0x7915b7709e7d1b5e1460d82e6797118c412de1ea": "Gazzam",
    "0x97e3b68f797f3e480131e544bcbce751e825d4c2": "Joe",
    "0xc692b5049ce2732acf579910463a7d940602677b": "Nick",
    "0xd4bee41449381da85faae5b00fb3cc536bf0e251": "Vince",
    "0xf5fbb4c0c7e73dcdfd045a0b092f352508195542": "Whomp",
}


def topstrike_username(wallet_address: str) -> str | None:
    return TOPSTRIKE_USERNAMES.get(wallet_address.strip().lower())


@dataclass(frozen=True)
class LeaderboardEntry:
    rank: int
    twitter_username: str
    topstrike_username: str | None
    wallet_address: str
    points: int


def build_leaderboard(links: Iterable[WalletLink]) -> list[LeaderboardEntry]:
    """Rank linked wallets by points; ties keep link order.

    Points are 0 until squad scoring exists, so the order is currently the
    order in which wallets were linked.
    """
    rows = [
        (
            link.twitter_username or "",
            link.topstrike_username or topstrike_username(link.wallet_address),
            link.wallet_address,
            0,
        )
        for link in links
    ]
    rows.sort(key=lambda row: row[3], reverse=True)
    return [
        LeaderboardEntry(
            rank=index,
            twitter_username=twitter,
            topstrike_username=topstrike,
            wallet_address=wallet,
            points=points,
        )
        for index, (twitter, topstrike, wallet, points) in enumerate(rows, start=1)
    ]
