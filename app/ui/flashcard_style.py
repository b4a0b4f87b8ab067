"""
Card styles for the question and answer sides.
"""

from __future__ import annotations

from dataclasses import dataclass


CARD_PADDING = "35px 24px"
CARD_MIN_HEIGHT = "210px"


@dataclass(frozen=True)
class FlashcardStyle:
    """Colors and font sizes of one card side."""
    bg_color: str
    main_font_size: str
    main_color: str = "#1f1f1f"
    subtitle_font_size: str = "1.1em"
    subtitle_color: str = "#666"
    corner_font_size: str = "0.9em"
    corner_color: str = "#666"


# Question: the written form alone, large enough for dense kanji / hanzi
ENTRY_FRONT_STYLE = FlashcardStyle(bg_color="#f0f2f6", main_font_size="3.2em")

# Answer: written form with reading and meaning below
ENTRY_BACK_STYLE = FlashcardStyle(bg_color="#e8f4f8", main_font_size="2.6em")
