from __future__ import annotations

import re
from typing import Iterable, List, Optional

from pydantic import BaseModel, Field, ValidationError, conint, field_validator, model_validator


CARD_LABEL_PATTERN = re.compile(r"^[A-Z][a-z]+ of [A-Z][a-z]+$")


class DeckView(BaseModel):
    cards: List[str] = Field(default_factory=list)
    size: conint(ge=0) = 0

    @field_validator("cards")
    @classmethod
    def validate_labels(cls, value: List[str]) -> List[str]:
        for label in value:
            if not CARD_LABEL_PATTERN.match(label):
                raise ValueError("card must look like '<Value> of <Suit>'")
        return value

    @model_validator(mode="after")
    def validate_size(self) -> "DeckView":
        if self.size != len(self.cards):
            raise ValueError("size must equal the number of cards")
        return self

    @classmethod
    def from_deck(cls, cards: Iterable[str]) -> "DeckView":
        labels = list(cards)
        return cls(cards=labels, size=len(labels))


class DealRequest(BaseModel):
    hand_size: conint(ge=0)


class DealResult(BaseModel):
    hand: DeckView
    remainder: DeckView

    @classmethod
    def from_deal(cls, hand: Iterable[str], remainder: Iterable[str]) -> "DealResult":
        return cls(hand=DeckView.from_deck(hand), remainder=DeckView.from_deck(remainder))


class ErrorMessage(BaseModel):
    code: Optional[str] = None
    message: str
    details: Optional[List[str]] = None


def format_validation_error(error: ValidationError) -> ErrorMessage:
    details = []
    for entry in error.errors():
        location = ".".join(str(part) for part in entry.get("loc", []))
        message = entry.get("msg", "Invalid value")
        if location:
            details.append(f"{location}: {message}")
        else:
            details.append(message)
    return ErrorMessage(code="VALIDATION_ERROR", message="Invalid request", details=details or None)
