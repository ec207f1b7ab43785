"""Endpoint path segments of the movie database API."""

# Movies
MOVIE = "movie"
POPULAR = "popular"
TOP_RATED = "top_rated"
NOW_PLAYING = "now_playing"
UPCOMING = "upcoming"

# TV
TV = "tv"

# Search
SEARCH = "search"
MULTI = "multi"

# Details
VIDEOS = "videos"
CREDITS = "credits"
SIMILAR = "similar"
RECOMMENDATIONS = "recommendations"
