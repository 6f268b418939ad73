import threading

import pytest

from dead_link_hunter.aggregator import ROOT_REFERRER, DeadLinkAggregator, PageDeadLinks


def test_record_groups_by_referrer_in_discovery_order():
    agg = DeadLinkAggregator()
    agg.record_dead_link("http://a.test/", "http://a.test/x")
    agg.record_dead_link("http://a.test/about", "http://a.test/y")
    agg.record_dead_link("http://a.test/", "http://a.test/z")

    report = agg.snapshot()
    assert report["http://a.test/"] == PageDeadLinks(2, ("http://a.test/x", "http://a.test/z"))
    assert report["http://a.test/about"].count == 1
    assert report.total == 3
    assert list(report) == ["http://a.test/", "http://a.test/about"]


def test_root_referrer_is_a_valid_key():
    agg = DeadLinkAggregator()
    agg.record_dead_link(ROOT_REFERRER, "http://a.test/")
    assert agg.snapshot().to_dict() == {"": {"count": 1, "dead_links": ["http://a.test/"]}}


def test_concurrent_writers_keep_count_and_list_consistent():
    agg = DeadLinkAggregator()
    referrers = [f"http://a.test/p{i}" for i in range(4)]

    def writer(n: int) -> None:
        for i in range(200):
            agg.record_dead_link(referrers[i % 4], f"http://a.test/dead/{n}/{i}")

    threads = [threading.Thread(target=writer, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    report = agg.snapshot()
    assert report.total == 8 * 200
    for page in report.values():
        assert page.count == len(page.dead_links) == 400


def test_snapshot_is_read_only_and_detached():
    agg = DeadLinkAggregator()
    agg.record_dead_link("http://a.test/", "http://a.test/x")
    report = agg.snapshot()

    with pytest.raises(TypeError):
        report["http://a.test/"] = PageDeadLinks(0, ())  # type: ignore[index]

    agg.record_dead_link("http://a.test/", "http://a.test/y")
    assert report["http://a.test/"].count == 1
    assert agg.snapshot()["http://a.test/"].count == 2


def test_rows_show_page_and_count_on_first_row_only():
    agg = DeadLinkAggregator()
    agg.record_dead_link("http://a.test/", "http://a.test/x")
    agg.record_dead_link("http://a.test/", "http://a.test/y")
    agg.record_dead_link("http://a.test/b", "http://a.test/z")

    assert list(agg.snapshot().rows()) == [
        ("http://a.test/", 2, "http://a.test/x"),
        ("", "", "http://a.test/y"),
        ("http://a.test/b", 1, "http://a.test/z"),
    ]
    assert agg.snapshot().records()[0] == {
        "Page": "http://a.test/",
        "Counts": 2,
        "Dead Links": ["http://a.test/x", "http://a.test/y"],
    }


def test_empty_report():
    report = DeadLinkAggregator().snapshot()
    assert not report
    assert report.total == 0
    assert list(report.rows()) == []
