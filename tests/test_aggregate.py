
from ipo_tracker.compute.aggregate import (
    filter_by_sector,
    filter_news_by_sector,
    flatten_news,
    news_vocabulary,
    vocabulary,
)
from ipo_tracker.models import NewsItem
from tests.record_factory import make_angel, make_ipo


def test_vocabulary_empty_lists():
    assert vocabulary([], []) == ["All"]


def test_vocabulary_all_first_and_distinct_union():
    ipos = [make_ipo(1, "A", "Tech"), make_ipo(2, "B", "Health Tech"), make_ipo(3, "C", "Tech")]
    angels = [make_angel(1, "D", "BioTech"), make_angel(2, "E", "Tech")]

    v = vocabulary(ipos, angels)

    assert v[0] == "All"
    assert v[1:] == ["Tech", "Health Tech", "BioTech"]
    assert len(v[1:]) == len(set(v[1:]))


def test_vocabulary_keeps_unseen_sector_values_as_is():
    v = vocabulary([make_ipo(1, "A", "Space Mining")], [make_angel(2, "B", "tech")])
    assert v == ["All", "Space Mining", "tech"]


def test_filter_by_sector_all_is_identity():
    ipos = [make_ipo(1, "A", "Tech"), make_ipo(2, "B", "BioTech")]
    assert filter_by_sector(ipos, "All") == ipos
    assert filter_by_sector([], "All") == []


def test_filter_by_sector_exact_match_preserves_order():
    ipos = [
        make_ipo(1, "A", "Tech"),
        make_ipo(2, "B", "BioTech"),
        make_ipo(3, "C", "Tech"),
    ]
    out = filter_by_sector(ipos, "Tech")
    assert [r.id for r in out] == [1, 3]
    assert all(r.sector == "Tech" for r in out)


def test_filter_by_sector_is_case_sensitive_and_never_raises():
    ipos = [make_ipo(1, "A", "Tech")]
    assert filter_by_sector(ipos, "tech") == []
    assert filter_by_sector(ipos, "Nope") == []
    assert filter_by_sector([], "Tech") == []


def test_filter_by_sector_works_on_angel_lists(sample_records):
    _, angels = sample_records
    out = filter_by_sector(angels, "BioTech")
    assert [r.name for r in out] == ["RegenTherapy Bio"]


def test_flatten_news_scenario():
    ipos = [make_ipo(1, "A", "Tech", news=[("2025-05-01", "X", "u1")])]
    angels = [make_angel(2, "B", "BioTech", news=[("2025-06-01", "Y", "u2")])]

    assert flatten_news(ipos, angels) == [
        NewsItem(date="2025-06-01", title="Y", url="u2", company="B", sector="BioTech"),
        NewsItem(date="2025-05-01", title="X", url="u1", company="A", sector="Tech"),
    ]


def test_flatten_news_record_without_news_contributes_nothing():
    ipos = [make_ipo(1, "A", "Tech")]
    angels = [make_angel(2, "B", "BioTech", news=[("2025-06-01", "Y", "u2")])]

    out = flatten_news(ipos, angels)

    assert [it.company for it in out] == ["B"]


def test_flatten_news_length_is_sum_of_news(sample_records):
    ipos, angels = sample_records
    expected = sum(len(r.news) for r in ipos) + sum(len(r.news) for r in angels)
    assert len(flatten_news(ipos, angels)) == expected == 12


def test_flatten_news_sorted_newest_first(sample_records):
    ipos, angels = sample_records
    dates = [it.date for it in flatten_news(ipos, angels)]
    assert dates == sorted(dates, reverse=True)
    assert dates[0] == "2025-05-28"
    assert dates[-1] == "2025-04-20"


def test_flatten_news_ties_keep_ipo_then_angel_then_news_order():
    same = "2025-05-01"
    ipos = [
        make_ipo(1, "I1", "Tech", news=[(same, "i1-a", "u"), (same, "i1-b", "u")]),
        make_ipo(2, "I2", "Tech", news=[(same, "i2-a", "u")]),
    ]
    angels = [make_angel(1, "A1", "Bio", news=[(same, "a1-a", "u"), ("2025-06-01", "a1-new", "u")])]

    titles = [it.title for it in flatten_news(ipos, angels)]

    assert titles == ["a1-new", "i1-a", "i1-b", "i2-a", "a1-a"]


def test_flatten_news_empty_lists():
    assert flatten_news([], []) == []


def test_filter_news_by_sector(sample_records):
    ipos, angels = sample_records
    news = flatten_news(ipos, angels)

    assert filter_news_by_sector(news, "all") == news

    bio = filter_news_by_sector(news, "BioTech")
    assert len(bio) == 2
    assert all(it.sector == "BioTech" for it in bio)
    assert [it.date for it in bio] == ["2025-05-18", "2025-04-30"]


def test_filter_news_by_sector_sentinel_is_lowercase_all():
    news = [NewsItem(date="2025-01-01", title="t", url="u", company="c", sector="Tech")]
    # "All" is the company-list sentinel; for news it is just a sector name.
    assert filter_news_by_sector(news, "All") == []
    assert filter_news_by_sector([], "Tech") == []


def test_news_vocabulary(sample_records):
    ipos, angels = sample_records
    v = news_vocabulary(flatten_news(ipos, angels))
    assert v[0] == "all"
    assert sorted(v[1:]) == sorted(["Tech", "Health Tech", "AI/Quantum", "BioTech", "CleanTech", "MedTech"])
    assert news_vocabulary([]) == ["all"]
