"""SQLModel-backed player store."""

from __future__ import annotations

from typing import List, Optional

from sqlmodel import Session, and_, col, func, or_, select

from ..core.time import utcnow
from ..models import Player
from .base import PlayerStore


def _ranked_query():
    return (
        select(Player)
        .where(col(Player.first_perfect_attempt).is_not(None))
        .order_by(
            col(Player.first_perfect_attempt).asc(),
            col(Player.created_at).asc(),
            col(Player.id).asc(),
        )
    )


class SQLPlayerStore(PlayerStore):
    """Player store over a request-scoped SQLModel session."""

    def __init__(self, session: Session):
        self.session = session

    def get_player(self, player_id: int) -> Optional[Player]:
        return self.session.get(Player, player_id)

    def get_player_by_name(self, name: str) -> Optional[Player]:
        return self.session.exec(select(Player).where(Player.name == name)).first()

    def create_player(self, player: Player) -> Player:
        return self._save(player)

    def update_player(self, player: Player) -> Player:
        player.updated_at = utcnow()
        return self._save(player)

    def list_ranked(self) -> List[Player]:
        return list(self.session.exec(_ranked_query()).all())

    def count_players(self) -> int:
        return self.session.exec(select(func.count()).select_from(Player)).one()

    def top_player(self) -> Optional[Player]:
        return self.session.exec(_ranked_query().limit(1)).first()

    def rank(self, player_id: int) -> Optional[int]:
        player = self.get_player(player_id)
        if not player or player.first_perfect_attempt is None:
            return None

        ahead = self.session.exec(
            select(func.count())
            .select_from(Player)
            .where(col(Player.first_perfect_attempt).is_not(None))
            .where(
                or_(
                    col(Player.first_perfect_attempt) < player.first_perfect_attempt,
                    and_(
                        col(Player.first_perfect_attempt) == player.first_perfect_attempt,
                        or_(
                            col(Player.created_at) < player.created_at,
                            and_(
                                col(Player.created_at) == player.created_at,
                                col(Player.id) < player.id,
                            ),
                        ),
                    ),
                )
            )
        ).one()
        return ahead + 1

    def _save(self, player: Player) -> Player:
        self.session.add(player)
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        self.session.refresh(player)
        return player


__all__ = ["SQLPlayerStore"]
