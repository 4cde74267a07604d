"""Prompt models: current values and their append-only history."""

from typing import Optional

from sqlalchemy import BigInteger, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ..database import Base

# Body of the history entry appended when a prompt is deleted
DELETED_TEXT = "DELETED"

# Column width of prompt ids and namespaces
MAX_KEY_LENGTH = 255


class Prompt(Base):
    """Current, authoritative value of a prompt."""

    __tablename__ = "prompts"

    id: Mapped[str] = mapped_column(String(MAX_KEY_LENGTH), primary_key=True)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    version: Mapped[int] = mapped_column(BigInteger, nullable=False)
    namespace: Mapped[Optional[str]] = mapped_column(String(MAX_KEY_LENGTH), nullable=True)

    def __repr__(self) -> str:
        return f"<Prompt(id='{self.id}', version={self.version}, namespace='{self.namespace}')>"


class PromptVersion(Base):
    """Immutable past state of a prompt, keyed by (id, version)."""

    __tablename__ = "prompt_versions"

    id: Mapped[str] = mapped_column(String(MAX_KEY_LENGTH), primary_key=True)
    version: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    namespace: Mapped[Optional[str]] = mapped_column(String(MAX_KEY_LENGTH), nullable=True)

    def __repr__(self) -> str:
        return f"<PromptVersion(id='{self.id}', version={self.version})>"
