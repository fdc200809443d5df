"""Hook settings model."""

from pydantic import BaseModel, field_validator

from ticket_hook.constants import TICKET_PREFIX, AnnotationStrategy


class HookSettings(BaseModel):
    """Settings for a single hook run.

    Attributes:
        prefix: Ticket prefix, e.g. "DX-".
        strategy: How a found ticket is written into the message.
    """

    prefix: str = TICKET_PREFIX
    strategy: AnnotationStrategy = AnnotationStrategy.TRAILER

    @field_validator("prefix", mode="before")
    @classmethod
    def ensure_prefix(cls, v):
        """Strip the prefix and reject empty values."""
        if v is None:
            return TICKET_PREFIX
        v = str(v).strip()
        if not v:
            raise ValueError("ticket prefix must not be empty")
        return v

    @field_validator("strategy", mode="before")
    @classmethod
    def parse_strategy(cls, v):
        """Accept strategy names case-insensitively."""
        if isinstance(v, str):
            return AnnotationStrategy(v.strip().lower())
        return v

    @property
    def expected_format(self) -> str:
        """Human-readable ticket format, e.g. 'DX-[NUMBER]'."""
        return f"{self.prefix.upper()}[NUMBER]"
