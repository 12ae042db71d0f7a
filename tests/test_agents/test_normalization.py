"""
Unit tests for the Record Normalizer.
"""

import pytest
from datetime import datetime
from src.agents.normalization import RecordNormalizer, normalize
from src.models.load_result import LoadResult
from src.models.review import RawRow, Review


def make_row(**overrides):
    """A fully valid raw row; keyword arguments replace fields."""
    row = {
        "review_id": "101",
        "app_name": "WhatsApp",
        "app_category": "Communication",
        "review_text": "Works great on my phone",
        "review_language": "en",
        "rating": "4.5",
        "review_date": "2024-03-15",
        "verified_purchase": "True",
        "device_type": "Android",
        "num_helpful_votes": "12",
        "app_version": "2.24.1",
        "user_id": "5001",
        "user_age": "34",
        "user_country": "Brazil",
        "user_gender": "Female",
    }
    row.update(overrides)
    return row


@pytest.fixture
def normalizer():
    return RecordNormalizer()


def test_valid_row_is_coerced(normalizer):
    """Test field-by-field coercion of a valid row."""
    reviews = normalizer.normalize([make_row()])

    assert len(reviews) == 1
    review = reviews[0]
    assert isinstance(review, Review)
    assert review.review_id == 101
    assert review.app_name == "WhatsApp"
    assert review.rating == 4.5
    assert review.review_date == datetime(2024, 3, 15)
    assert review.verified_purchase is True
    assert review.num_helpful_votes == 12
    assert review.app_version == "2.24.1"
    assert review.sentiment is None


def test_user_fields_are_nested(normalizer):
    """Test that user attributes move under review.user."""
    review = normalizer.normalize([make_row()])[0]

    assert review.user.user_id == 5001
    assert review.user.user_age == 34
    assert review.user.user_country == "Brazil"
    assert review.user.user_gender == "Female"
    assert not hasattr(review, "user_id")
    assert not hasattr(review, "user_country")


@pytest.mark.parametrize("value", ["", "   ", "null", "NULL", " Null "])
def test_empty_or_null_required_field_drops_row(normalizer, value):
    """Test that an empty or null required field drops the row."""
    reviews = normalizer.normalize([make_row(app_category=value)])
    assert reviews == []


def test_null_rating_drops_row(normalizer):
    """Test that a null rating removes the row entirely."""
    reviews = normalizer.normalize([make_row(rating="null"), make_row(review_id="2")])

    assert [r.review_id for r in reviews] == [2]


def test_missing_required_field_drops_row(normalizer):
    """Test that an absent column is treated like an empty one."""
    row = make_row()
    del row["device_type"]

    assert normalizer.normalize([row]) == []


@pytest.mark.parametrize("gender", [None, "", "   "])
def test_user_gender_is_exempt(normalizer, gender):
    """Test that a missing gender keeps the row."""
    row = make_row()
    if gender is None:
        del row["user_gender"]
    else:
        row["user_gender"] = gender

    reviews = normalizer.normalize([row])

    assert len(reviews) == 1
    assert reviews[0].user.user_gender == (gender or "")


def test_permissive_integer_parse(normalizer):
    """Test leading-integer parsing and the invalid sentinel."""
    review = normalizer.normalize([
        make_row(review_id="12abc", user_age="29.7", num_helpful_votes="many")
    ])[0]

    assert review.review_id == 12
    assert review.user.user_age == 29
    assert review.num_helpful_votes is None


def test_unparseable_rating_and_date_keep_row(normalizer):
    """Test that coercion failures never drop or fail the row."""
    reviews = normalizer.normalize([
        make_row(rating="excellent", review_date="sometime last year")
    ])

    assert len(reviews) == 1
    assert reviews[0].rating is None
    assert reviews[0].has_valid_rating is False
    assert reviews[0].review_date is None


@pytest.mark.parametrize("raw,expected", [
    ("true", True),
    ("TRUE", True),
    (" True ", True),
    ("false", False),
    ("yes", False),
    ("1", False),
])
def test_verified_purchase_coercion(normalizer, raw, expected):
    """Test boolean coercion of verified_purchase."""
    review = normalizer.normalize([make_row(verified_purchase=raw)])[0]
    assert review.verified_purchase is expected


def test_order_preserved_after_drops(normalizer):
    """Test that surviving rows keep their input order."""
    rows = [
        make_row(review_id="1"),
        make_row(review_id="2", app_name=""),
        make_row(review_id="3"),
        make_row(review_id="4", user_country="null"),
        make_row(review_id="5"),
    ]

    reviews = normalizer.normalize(rows)

    assert [r.review_id for r in reviews] == [1, 3, 5]


def test_drop_reasons_are_tallied(normalizer):
    """Test the drop audit kept on the normalizer."""
    rows = [
        make_row(app_name=""),
        make_row(rating="null"),
        make_row(rating="NULL"),
        make_row(),
    ]

    normalizer.normalize(rows)

    assert normalizer.last_drop_reasons == {"app_name": 1, "rating": 2}


def test_accepts_raw_rows_and_load_result(normalizer):
    """Test the accepted input shapes."""
    raw = RawRow.from_mapping(make_row())

    assert len(normalizer.normalize([raw])) == 1
    assert len(normalizer.normalize(LoadResult(data=[raw, raw]))) == 2
    assert normalizer.normalize([]) == []


def test_none_input_raises():
    """Test that missing input fails loudly."""
    with pytest.raises(ValueError, match="required"):
        normalize(None)


# Run tests if executed directly
if __name__ == "__main__":
    pytest.main([__file__, "-v"])
