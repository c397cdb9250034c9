from __future__ import annotations

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class Fighter(Base):
    __tablename__ = "fighters"
    __table_args__ = (Index("ix_fighters_name_id", "name", "id"),)

    id: Mapped[str] = mapped_column(String, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False, index=True)
    nickname: Mapped[str | None]
    weight_class: Mapped[str | None] = mapped_column(
        String(50),
        nullable=True,
        index=True,
        doc="Primary division; rankings may place the fighter elsewhere",
    )
    nationality: Mapped[str | None] = mapped_column(String, nullable=True, index=True)
    wins: Mapped[int | None] = mapped_column(Integer, nullable=True, default=0)
    losses: Mapped[int | None] = mapped_column(Integer, nullable=True, default=0)
    draws: Mapped[int | None] = mapped_column(Integer, nullable=True, default=0)
    no_contests: Mapped[int | None] = mapped_column(Integer, nullable=True, default=0)
    # Legacy single-column rank; fighter_rankings rows take precedence.
    rank: Mapped[str | None] = mapped_column(String(32), nullable=True, index=True)
    status: Mapped[str | None] = mapped_column(
        String(32), nullable=True, doc="Active, Retired, Not Fighting or Unknown"
    )

    # Profile fields
    age: Mapped[int | None]
    height: Mapped[str | None]
    weight: Mapped[str | None]
    reach: Mapped[str | None]
    fighting_out_of: Mapped[str | None]
    ufc_url: Mapped[str | None]

    # Method breakdowns
    ko_wins: Mapped[int | None]
    sub_wins: Mapped[int | None]
    dec_wins: Mapped[int | None]
    loss_by_ko: Mapped[int | None]
    loss_by_sub: Mapped[int | None]
    loss_by_dec: Mapped[int | None]
    loss_by_dq: Mapped[int | None]


class FighterRanking(Base):
    __tablename__ = "fighter_rankings"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    fighter_id: Mapped[str] = mapped_column(
        ForeignKey("fighters.id"), nullable=False, index=True
    )
    weight_class: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    rank: Mapped[str | None] = mapped_column(String(32), nullable=True)


class Event(Base):
    __tablename__ = "events"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    event_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, index=True
    )
    venue: Mapped[str | None]
    city: Mapped[str | None]
    country: Mapped[str | None]
    status: Mapped[str] = mapped_column(
        String, nullable=False, index=True, default="Scheduled"
    )  # 'Scheduled' or 'Completed'
    attendance: Mapped[str | None]
    ufc_url: Mapped[str | None]


class Fight(Base):
    __tablename__ = "fights"
    __table_args__ = (Index("ix_fights_event_order", "event_id", "fight_order"),)

    id: Mapped[str] = mapped_column(String, primary_key=True)
    event_id: Mapped[str] = mapped_column(ForeignKey("events.id"), nullable=False)

    fighter1_id: Mapped[str | None] = mapped_column(
        ForeignKey("fighters.id"), nullable=True, index=True
    )
    fighter2_id: Mapped[str | None] = mapped_column(
        ForeignKey("fighters.id"), nullable=True, index=True
    )
    fighter1_name: Mapped[str | None]
    fighter2_name: Mapped[str | None]
    # Rank at the time of the fight, independent of the current rank.
    fighter1_rank: Mapped[str | None]
    fighter2_rank: Mapped[str | None]
    fighter1_was_champion: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )
    fighter2_was_champion: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )

    weight_class: Mapped[str | None]
    is_main_event: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    was_title_fight: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    fight_order: Mapped[int | None]

    winner_id: Mapped[str | None] = mapped_column(String, nullable=True)
    result_method: Mapped[str | None]
    result_method_details: Mapped[str | None]
    result_round: Mapped[int | None]
    result_time: Mapped[str | None]
