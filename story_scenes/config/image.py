"""
Image search configuration for the Cultural Story Scenes service.

Scene pictures come from Unsplash photo search.
"""

IMAGE_SEARCH_CONSTANTS = {
    "url": "https://api.unsplash.com/search/photos",
    "per_page": 4,
    "url_size": "regular",  # Key under each result's "urls" mapping
}
