from datetime import datetime, timezone
from enum import Enum

from sqlalchemy import DateTime
from sqlalchemy.types import TypeDecorator


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class UTCDateTime(TypeDecorator):
    """
    Timestamp column that always reads back as an aware UTC datetime.

    Values are written as UTC and tagged as UTC on read (sqlite drops tzinfo).
    """
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None and value.tzinfo is not None:
            return value.astimezone(timezone.utc)
        return value

    def process_result_value(self, value, dialect):
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class AgentType(str, Enum):
    """The three dashboard agents"""
    VAZIR = "vazir"  # SWOT analysis
    GAWI = "gawi"    # market data research
    ZAKI = "zaki"    # decision recommendation


class SwotQuadrant(str, Enum):
    """SWOT quadrants, in the order the Vazir conversation visits them"""
    STRENGTHS = "strengths"
    WEAKNESSES = "weaknesses"
    OPPORTUNITIES = "opportunities"
    THREATS = "threats"


SWOT_QUADRANTS = [
    SwotQuadrant.STRENGTHS,
    SwotQuadrant.WEAKNESSES,
    SwotQuadrant.OPPORTUNITIES,
    SwotQuadrant.THREATS,
]


class AnalysisStatus(str, Enum):
    """SwotAnalysis.conversation_status values"""
    PENDING = "pending"
    ACTIVE = "active"
    CONVERGED = "converged"


class ConversationStatus(str, Enum):
    """AgentConversation.status values"""
    PENDING = "pending"
    ACTIVE = "active"
    COMPLETED = "completed"


def iso_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a Z suffix."""
    return utc_now().isoformat(timespec="milliseconds").replace("+00:00", "Z")
