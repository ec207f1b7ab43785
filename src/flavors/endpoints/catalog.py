"""Named endpoints of the movie database API."""

from . import segments
from .builder import EndpointBuilder


class MovieApi:
    """URLs for every endpoint the application calls.

    Thin layer over `EndpointBuilder`; each property or method maps to one
    REST endpoint.
    """

    def __init__(self, builder: EndpointBuilder) -> None:
        self._builder = builder

    @property
    def builder(self) -> EndpointBuilder:
        return self._builder

    # ========== Movies ==========

    @property
    def movies_popular(self) -> str:
        """GET /movie/popular"""
        return self._builder.build_path([segments.MOVIE, segments.POPULAR])

    @property
    def movies_top_rated(self) -> str:
        """GET /movie/top_rated"""
        return self._builder.build_path([segments.MOVIE, segments.TOP_RATED])

    @property
    def movies_now_playing(self) -> str:
        """GET /movie/now_playing"""
        return self._builder.build_path([segments.MOVIE, segments.NOW_PLAYING])

    @property
    def movies_upcoming(self) -> str:
        """GET /movie/upcoming"""
        return self._builder.build_path([segments.MOVIE, segments.UPCOMING])

    def movie_details(self, movie_id: int) -> str:
        """GET /movie/{movie_id}"""
        return self._builder.build_resource_path([segments.MOVIE], movie_id)

    def movie_videos(self, movie_id: int) -> str:
        """GET /movie/{movie_id}/videos"""
        return self._movie_detail(movie_id, segments.VIDEOS)

    def movie_credits(self, movie_id: int) -> str:
        """GET /movie/{movie_id}/credits"""
        return self._movie_detail(movie_id, segments.CREDITS)

    def movie_similar(self, movie_id: int) -> str:
        """GET /movie/{movie_id}/similar"""
        return self._movie_detail(movie_id, segments.SIMILAR)

    def movie_recommendations(self, movie_id: int) -> str:
        """GET /movie/{movie_id}/recommendations"""
        return self._movie_detail(movie_id, segments.RECOMMENDATIONS)

    # ========== TV shows ==========

    @property
    def tv_popular(self) -> str:
        """GET /tv/popular"""
        return self._builder.build_path([segments.TV, segments.POPULAR])

    @property
    def tv_top_rated(self) -> str:
        """GET /tv/top_rated"""
        return self._builder.build_path([segments.TV, segments.TOP_RATED])

    def tv_details(self, tv_id: int) -> str:
        """GET /tv/{tv_id}"""
        return self._builder.build_resource_path([segments.TV], tv_id)

    def tv_videos(self, tv_id: int) -> str:
        """GET /tv/{tv_id}/videos"""
        return self._builder.build_resource_path(
            [segments.TV], tv_id, trailing=[segments.VIDEOS]
        )

    # ========== Search ==========

    def search_movies(self, query: str) -> str:
        """GET /search/movie?query=..."""
        return self._search(segments.MOVIE, query)

    def search_tv(self, query: str) -> str:
        """GET /search/tv?query=..."""
        return self._search(segments.TV, query)

    def search_multi(self, query: str) -> str:
        """GET /search/multi?query=... (movies, TV shows and people)"""
        return self._search(segments.MULTI, query)

    def _movie_detail(self, movie_id: int, detail: str) -> str:
        return self._builder.build_resource_path(
            [segments.MOVIE], movie_id, trailing=[detail]
        )

    def _search(self, kind: str, query: str) -> str:
        url = self._builder.build_path([segments.SEARCH, kind])
        return self._builder.with_query_params(url, {"query": query})
