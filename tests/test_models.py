"""Tests for data models."""

import pytest

from newshub.data import AppState, Article, LoadPhase, NewsPage
from newshub.errors import InvalidTransitionError


class TestArticle:
    def test_from_api_full_record(self) -> None:
        article = Article.from_api(
            {
                "uuid": "abc",
                "title": "Title",
                "description": "Desc",
                "snippet": "Snip",
                "url": "https://example.com/a",
                "image_url": "https://example.com/a.jpg",
                "source": "example.com",
                "published_at": "2024-01-10T10:00:00.000000Z",
                "language": "en",
                "categories": ["tech", "business"],
                "keywords": "ai, chips",
            }
        )
        assert article.title == "Title"
        assert article.source == "example.com"
        assert article.categories == ("tech", "business")

    def test_from_api_missing_fields(self) -> None:
        article = Article.from_api({})
        assert article.title is None
        assert article.description is None
        assert article.image_url is None
        assert article.categories == ()

    def test_from_api_blank_strings_become_none(self) -> None:
        article = Article.from_api({"title": "   ", "image_url": "", "source": None})
        assert article.title is None
        assert article.image_url is None
        assert article.source is None

    @pytest.mark.parametrize("categories", [3, 1.5, {"tech": 1}, True])
    def test_from_api_ignores_malformed_categories(self, categories: object) -> None:
        article = Article.from_api({"title": "A", "categories": categories})
        assert article.title == "A"
        assert article.categories == ()

    def test_from_api_single_category_string(self) -> None:
        assert Article.from_api({"categories": "tech"}).categories == ("tech",)


class TestNewsPage:
    def test_from_api_with_meta(self) -> None:
        page = NewsPage.from_api(
            {
                "meta": {"found": 95, "returned": 10, "limit": 10, "page": 2},
                "data": [{"title": "A"}, {"title": "B"}],
            }
        )
        assert [a.title for a in page.articles] == ["A", "B"]
        assert page.found == 95
        assert page.total_pages == 10
        assert not page.is_empty

    def test_from_api_without_data_is_empty(self) -> None:
        page = NewsPage.from_api({"meta": {}})
        assert page.is_empty
        assert page.total_pages is None

    def test_from_api_non_dict_body(self) -> None:
        assert NewsPage.from_api(["unexpected"]).is_empty
        assert NewsPage.from_api(None).is_empty

    def test_from_api_skips_non_record_items(self) -> None:
        page = NewsPage.from_api({"data": [{"title": "A"}, "junk", None]})
        assert len(page.articles) == 1

    @pytest.mark.parametrize("data", [5, "text", {"title": "A"}, True])
    def test_from_api_data_not_a_list_is_empty(self, data: object) -> None:
        assert NewsPage.from_api({"data": data}).is_empty


class TestAppState:
    def test_defaults(self) -> None:
        state = AppState()
        assert state.current_page == 1
        assert state.phase is LoadPhase.IDLE
        assert not state.is_loading

    def test_full_cycle(self) -> None:
        state = AppState()
        state.transition(LoadPhase.LOADING)
        assert state.is_loading
        state.transition(LoadPhase.SUCCESS)
        state.transition(LoadPhase.LOADING)
        state.transition(LoadPhase.FAILED)
        assert state.phase is LoadPhase.FAILED
        assert not state.is_loading

    def test_cannot_load_twice(self) -> None:
        state = AppState()
        state.transition(LoadPhase.LOADING)
        with pytest.raises(InvalidTransitionError):
            state.transition(LoadPhase.LOADING)

    def test_cannot_finish_without_loading(self) -> None:
        with pytest.raises(InvalidTransitionError):
            AppState().transition(LoadPhase.SUCCESS)
