from datetime import date

import pytest

from feature_movies.domain.exceptions import FetchError
from feature_movies.domain.models.movie import Genre, MovieDetail
from feature_movies.domain.models.navigation import AppTab
from feature_movies.presentation.view_models.movie_detail_view_model import MovieDetailViewModel
from feature_movies.presentation.view_models.screen_state import ScreenState


class TestMovieDetailViewModel:
    """Unit tests for MovieDetailViewModel"""

    @pytest.fixture
    def movie_detail(self):
        return MovieDetail(
            id=7,
            title="Paprika",
            overview="A dream detective.",
            release_date=date(2006, 11, 25),
            vote_average=7.7,
            genres=[Genre(id=16, name="Animation"), Genre(id=878, name="Science Fiction")],
        )

    @pytest.fixture
    def view_model(self, mock_get_movie_detail, mock_toggle_favorite, mock_navigator, mock_logger):
        return MovieDetailViewModel(
            movie_id=7,
            get_movie_detail=mock_get_movie_detail,
            toggle_favorite_use_case=mock_toggle_favorite,
            app_navigator=mock_navigator,
            logger=mock_logger,
        )

    def test_initial_state(self, view_model):
        assert view_model.movie is None
        assert view_model.title == "Movie Detail"
        assert view_model.screen_state == ScreenState.NOT_FOUND

    @pytest.mark.asyncio
    async def test_load_movie_detail_success(self, view_model, mock_get_movie_detail, movie_detail):
        mock_get_movie_detail.execute.return_value = movie_detail
        snapshots = []
        view_model.subscribe(snapshots.append)

        result = await view_model.load_movie_detail()

        assert result.ok
        mock_get_movie_detail.execute.assert_awaited_once_with(movie_id=7)
        assert view_model.title == "Paprika"
        assert view_model.movie.genre_names == "Animation, Science Fiction"
        assert view_model.screen_state == ScreenState.CONTENT
        assert snapshots[0].is_loading is True
        assert snapshots[-1].is_loading is False

    @pytest.mark.asyncio
    async def test_load_movie_detail_failure(self, view_model, mock_get_movie_detail):
        mock_get_movie_detail.execute.side_effect = FetchError("not reachable")

        result = await view_model.load_movie_detail()

        assert not result.ok
        assert view_model.error_message == "Failed to load movie details: not reachable"
        assert view_model.screen_state == ScreenState.ERROR
        assert view_model.is_loading is False

    @pytest.mark.asyncio
    async def test_retry_clears_error(self, view_model, mock_get_movie_detail, movie_detail):
        mock_get_movie_detail.execute.side_effect = [FetchError("not reachable"), movie_detail]

        await view_model.load_movie_detail()
        result = await view_model.retry_load_movie_detail()

        assert result.ok
        assert view_model.error_message is None
        assert view_model.movie == movie_detail

    @pytest.mark.asyncio
    async def test_toggle_favorite_without_movie_is_noop(self, view_model, mock_toggle_favorite):
        result = await view_model.toggle_favorite()

        assert result.ok
        mock_toggle_favorite.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_toggle_favorite_success(self, view_model, mock_get_movie_detail, mock_toggle_favorite, movie_detail):
        mock_get_movie_detail.execute.return_value = movie_detail
        await view_model.load_movie_detail()

        result = await view_model.toggle_favorite()

        assert result.ok
        mock_toggle_favorite.execute.assert_awaited_once_with(movie_id=7, is_favorite=True)
        assert view_model.movie.is_favorite is True

    @pytest.mark.asyncio
    async def test_toggle_favorite_failure_keeps_flag(
        self, view_model, mock_get_movie_detail, mock_toggle_favorite, movie_detail
    ):
        mock_get_movie_detail.execute.return_value = movie_detail
        await view_model.load_movie_detail()
        mock_toggle_favorite.execute.side_effect = FetchError("denied")

        result = await view_model.toggle_favorite()

        assert not result.ok
        assert view_model.movie.is_favorite is False
        assert view_model.error_message == "Failed to toggle favorite: denied"

    def test_navigate_back(self, view_model, mock_navigator):
        view_model.navigate_back()

        mock_navigator.pop.assert_called_once_with(tab=AppTab.MOVIES)
