"""
Story constants for the Cultural Story Scenes service.
"""

# Scene splitting constants
STORY_CONSTANTS = {
    "scene_count": 4,
    "min_paragraph_length": 30,  # Shorter paragraphs are dropped
    "image_query_max_words": 3,
}

# Error bodies returned to the client (always with HTTP 200)
ERROR_MESSAGES = {
    "empty_topic": "Story topic missing",
    "empty_generation": "No story generated",
    "upstream": "AI is busy or API issue. Please wait and try again.",
}
