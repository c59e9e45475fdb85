"""
Scene splitting and assembly.

The model is asked for four paragraphs but does not always comply, so
splitting is heuristic: blank-line paragraphs first, then a plain
length-based cut when there are too few usable paragraphs.
"""

import math
import re
from typing import Sequence

from ..config.story import STORY_CONSTANTS
from .types import Scene

SCENE_COUNT = STORY_CONSTANTS["scene_count"]
MIN_PARAGRAPH_LENGTH = STORY_CONSTANTS["min_paragraph_length"]

_BLANK_LINE = re.compile(r"\n\s*\n")
_STORY_WORD = re.compile("story", re.IGNORECASE)


def mechanical_split(text: str, count: int = SCENE_COUNT) -> list[str]:
    """Cut text into `count` consecutive chunks of ceil(len/count) characters.

    The last chunk takes the remainder. Chunks are raw substrings, so they
    may start or end mid-word and joining them gives back the input.
    """
    size = math.ceil(len(text) / count)
    chunks = [text[i * size:(i + 1) * size] for i in range(count - 1)]
    chunks.append(text[(count - 1) * size:])
    return chunks


def split_scenes(text: str) -> list[str]:
    """Split generated text into exactly four scene strings."""
    parts = [piece.strip() for piece in _BLANK_LINE.split(text)]
    parts = [piece for piece in parts if len(piece) >= MIN_PARAGRAPH_LENGTH]

    if len(parts) < SCENE_COUNT:
        parts = mechanical_split(text)

    return parts[:SCENE_COUNT]


def derive_image_query(query: str) -> str:
    """Turn a story topic into a short photo search term.

    Removes every case-insensitive occurrence of "story" (including inside
    longer words) and keeps the first three remaining words.
    """
    words = _STORY_WORD.sub("", query).strip().split()
    return " ".join(words[:STORY_CONSTANTS["image_query_max_words"]])


def assemble_scenes(parts: Sequence[str], images: Sequence[str]) -> list[Scene]:
    """Pair scene texts with images, falling back to the first image."""
    fallback = images[0] if images and images[0] else ""
    scenes = []
    for i, text in enumerate(parts):
        image = images[i] if i < len(images) and images[i] else fallback
        scenes.append(Scene(text=text, image=image))
    return scenes
