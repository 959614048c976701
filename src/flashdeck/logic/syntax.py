"""Argument flags understood by the command parsers."""

PREFIX_QUESTION = "q/"
PREFIX_ANSWER = "a/"
PREFIX_TAG = "t/"
PREFIX_HINT = "h/"
PREFIX_DIFFICULTY = "d/"
