"""
Unit tests for validators module
"""

from datetime import datetime, timezone

import pytest

from catalog.domain.entities import Filters, Movie
from catalog.validators import (
    Validator,
    permitted_value,
    unique,
    validate_filters,
    validate_movie,
)

NOW = datetime(2025, 6, 1, tzinfo=timezone.utc)


def validate(movie: Movie) -> dict:
    v = Validator()
    validate_movie(v, movie, now=NOW)
    return v.errors


def make_movie(**overrides) -> Movie:
    fields = {
        "title": "Inception",
        "year": 2010,
        "runtime": 148,
        "genres": ["action", "sci-fi"],
    }
    fields.update(overrides)
    return Movie(**fields)


class TestValidator:
    """Test the error accumulator"""

    def test_new_validator_is_valid(self):
        assert Validator().valid() is True
        assert Validator().errors == {}

    def test_check_records_failure(self):
        v = Validator()
        v.check(False, "title", "must be provided")
        assert not v.valid()
        assert v.errors == {"title": "must be provided"}

    def test_check_ignores_success(self):
        v = Validator()
        v.check(True, "title", "must be provided")
        assert v.valid()

    def test_first_message_per_field_wins(self):
        v = Validator()
        v.add_error("year", "must be provided")
        v.add_error("year", "must be between 1888 and the current year")
        assert v.errors == {"year": "must be provided"}

    def test_validators_do_not_share_state(self):
        first = Validator()
        first.add_error("title", "must be provided")
        assert Validator().errors == {}


class TestHelpers:
    """Test unique and permitted_value helpers"""

    def test_unique(self):
        assert unique(["action", "drama"]) is True
        assert unique([]) is True
        assert unique(["action", "action"]) is False

    def test_unique_is_case_sensitive(self):
        assert unique(["Action", "action"]) is True

    def test_permitted_value(self):
        assert permitted_value("id", "id", "title") is True
        assert permitted_value("rating", "id", "title") is False


class TestMovieValidation:
    """Test movie record rules"""

    def test_valid_movie_passes(self):
        assert validate(make_movie()) == {}

    def test_empty_title(self):
        assert validate(make_movie(title=""))["title"] == "must be provided"

    def test_title_length_limit(self):
        assert "title" not in validate(make_movie(title="x" * 500))
        assert "title" in validate(make_movie(title="x" * 501))

    def test_missing_year(self):
        assert validate(make_movie(year=0))["year"] == "must be provided"

    @pytest.mark.parametrize("year", [1888, 1500, 2025, 2030])
    def test_year_out_of_range(self, year):
        assert "year" in validate(make_movie(year=year))

    def test_year_current_year_rejected(self):
        current_year = datetime.now(timezone.utc).year
        v = Validator()
        validate_movie(v, make_movie(year=current_year))
        assert "year" in v.errors

    @pytest.mark.parametrize("year", [1889, 2024])
    def test_year_in_range(self, year):
        assert "year" not in validate(make_movie(year=year))

    def test_missing_runtime(self):
        assert validate(make_movie(runtime=0))["runtime"] == "must be provided"

    def test_negative_runtime(self):
        assert validate(make_movie(runtime=-5))["runtime"] == "must be a positive integer"

    def test_missing_genres(self):
        assert validate(make_movie(genres=None))["genres"] == "must be provided"

    def test_single_genre_rejected(self):
        assert "genres" in validate(make_movie(genres=["drama"]))

    def test_five_genres_rejected(self):
        genres = ["action", "drama", "comedy", "horror", "western"]
        assert "genres" in validate(make_movie(genres=genres))

    @pytest.mark.parametrize("count", [2, 3, 4])
    def test_allowed_genre_counts(self, count):
        genres = ["action", "drama", "comedy", "horror"][:count]
        assert "genres" not in validate(make_movie(genres=genres))

    def test_duplicate_genres_rejected(self):
        errors = validate(make_movie(genres=["drama", "drama"]))
        assert errors["genres"] == "must not contain duplicate values"

    def test_all_violations_reported(self):
        errors = validate(Movie())
        assert set(errors) == {"title", "year", "runtime", "genres"}


class TestFilterValidation:
    """Test pagination and sort rules"""

    def test_default_filters_valid(self):
        v = Validator()
        validate_filters(v, Filters())
        assert v.valid()

    def test_invalid_filters_reported_per_field(self):
        v = Validator()
        validate_filters(v, Filters(page=0, page_size=101, sort="rating"))
        assert set(v.errors) == {"page", "page_size", "sort"}

    def test_page_upper_bound(self):
        v = Validator()
        validate_filters(v, Filters(page=10_000_001))
        assert v.errors["page"] == "must be a maximum of 10 million"

    def test_descending_sort_permitted(self):
        v = Validator()
        validate_filters(v, Filters(sort="-year"))
        assert v.valid()
