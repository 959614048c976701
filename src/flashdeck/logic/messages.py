"""User-facing message templates shared across commands."""

from __future__ import annotations

from flashdeck.model.card import Card

MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format!\n{usage}"
MESSAGE_INVALID_CARD_DISPLAYED_INDEX = "The card index provided is invalid"
MESSAGE_DUPLICATE_CARD = "This card already exists in the Deck."
MESSAGE_FILE_OPS_ERROR = "Could not save data to file: {error}"


def invalid_format(usage: str) -> str:
    return MESSAGE_INVALID_COMMAND_FORMAT.format(usage=usage)


def format_card(card: Card) -> str:
    return card.describe()


def format_solve(card: Card, one_based_index: int) -> str:
    return f"Solved card #{one_based_index}: {card.question}\nSolve count: {card.solve_count}"
