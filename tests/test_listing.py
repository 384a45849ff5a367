from vendormap.recommender.distance import annotate, recommend
from vendormap.recommender.listing import availability_label, query_vendors

from conftest import DARMSTADT, FRANKFURT


def _directory(make_user, make_vendor):
    user = make_user()
    vendors = [
        make_vendor(
            "seo",
            **FRANKFURT,
            name="Digital Marketing Pro",
            services=["SEO", "Social Media"],
            hourly=65,
            rating=4.6,
        ),
        make_vendor(
            "design",
            lat=49.4875,
            lng=8.4662,
            name="Creative Design Studio",
            services=["UI/UX Design"],
            hourly=55,
            rating=4.9,
            availability="busy",
        ),
        make_vendor(
            "tech",
            **DARMSTADT,
            name="TechSolutions",
            services=["Web Development"],
            hourly=75,
            verified=True,
        ),
        make_vendor("data", lat=49.0069, lng=8.4037, name="Data Analytics", hourly=95, rating=4.5, verified=True),
    ]
    return annotate(user, vendors), recommend(user, vendors)


def test_default_listing_is_everyone_by_distance(make_user, make_vendor):
    annotated, recommended = _directory(make_user, make_vendor)
    out = query_vendors(annotated, recommended=recommended)
    assert [v.id for v in out] == ["tech", "seo", "design", "data"]


def test_search_matches_name_or_service_case_insensitive(make_user, make_vendor):
    annotated, _ = _directory(make_user, make_vendor)
    assert [v.id for v in query_vendors(annotated, search="seo")] == ["seo"]
    assert [v.id for v in query_vendors(annotated, search="  DESIGN ")] == ["design"]
    assert [v.id for v in query_vendors(annotated, search="")] == ["tech", "seo", "design", "data"]
    assert query_vendors(annotated, search="plumbing") == []


def test_filters(make_user, make_vendor):
    annotated, recommended = _directory(make_user, make_vendor)

    assert [v.id for v in query_vendors(annotated, recommended=recommended, filter_by="recommended")] == [
        "tech",
        "seo",
        "design",
    ]
    assert [v.id for v in query_vendors(annotated, filter_by="available")] == ["tech", "seo", "data"]
    assert [v.id for v in query_vendors(annotated, filter_by="verified")] == ["tech", "data"]


def test_sort_by_rating_and_price(make_user, make_vendor):
    annotated, _ = _directory(make_user, make_vendor)

    # Unrated vendors sort last.
    assert [v.id for v in query_vendors(annotated, sort_by="rating")] == ["design", "seo", "data", "tech"]
    assert [v.id for v in query_vendors(annotated, sort_by="price")] == ["design", "seo", "tech", "data"]


def test_availability_label():
    assert availability_label("available") == "Available"
    assert availability_label("busy") == "Busy"
    assert availability_label("unavailable") == "Unavailable"
    assert availability_label("on holiday") == "Unknown"
