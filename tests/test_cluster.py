"""Tests for greedy keyword clustering."""

from seedvault.clustering.cluster import build_clusters
from seedvault.models import IdeaRecord

# A~B and B~C are similar (3 shared of 7), A~C is not (1 shared of 9)
A = IdeaRecord(id="a", content="alpha bravo charlie delta echo")
B = IdeaRecord(id="b", content="alpha bravo charlie golf hotel")
C = IdeaRecord(id="c", content="golf hotel india juliet charlie")


def _ids(clusters):
    return [c.record_ids for c in clusters]


def test_korean_pair_forms_cluster():
    records = [
        IdeaRecord(id="1", content="#seed/idea 모바일 학습 앱"),
        IdeaRecord(id="2", content="#seed/idea 모바일 학습 플랫폼"),
    ]
    clusters = build_clusters(records, threshold=0.3)
    assert len(clusters) == 1
    assert clusters[0].record_ids == ["1", "2"]
    assert clusters[0].theme == "모바일 related"


def test_empty_input():
    assert build_clusters([]) == []


def test_chain_is_not_transitive():
    clusters = build_clusters([A, B, C], threshold=0.3)
    assert _ids(clusters) == [["a", "b"]]


def test_base_gathers_members_unrelated_to_each_other():
    clusters = build_clusters([B, A, C], threshold=0.3)
    assert _ids(clusters) == [["b", "a", "c"]]


def test_failed_base_can_join_later_cluster():
    # A alone reaches only B, too small for min_size=3; B then claims both
    clusters = build_clusters([A, B, C], threshold=0.3, min_size=3)
    assert _ids(clusters) == [["b", "a", "c"]]


def test_singletons_discarded():
    records = [
        IdeaRecord(id="1", content="rocket launch orbit"),
        IdeaRecord(id="2", content="sourdough bread recipe"),
    ]
    assert build_clusters(records) == []


def test_tag_only_record_never_clusters():
    records = [
        IdeaRecord(id="empty", content="#seed/idea "),
        IdeaRecord(id="1", content="rocket launch orbit"),
        IdeaRecord(id="2", content="rocket launch orbit"),
    ]
    clusters = build_clusters(records)
    assert _ids(clusters) == [["1", "2"]]


def test_malformed_record_is_left_out():
    records = [
        IdeaRecord(id="broken", content=None),
        IdeaRecord(id="1", content="rocket launch orbit"),
        IdeaRecord(id="2", content="rocket launch orbit"),
    ]
    clusters = build_clusters(records)
    assert _ids(clusters) == [["1", "2"]]


def test_clusters_sorted_by_strength():
    records = [
        IdeaRecord(id="f1", content="apple banana cherry"),
        IdeaRecord(id="f2", content="apple banana cherry"),
        IdeaRecord(id="r1", content="rocket launch orbit"),
        IdeaRecord(id="r2", content="rocket launch orbit"),
        IdeaRecord(id="r3", content="rocket launch orbit"),
    ]
    clusters = build_clusters(records)
    assert _ids(clusters) == [["r1", "r2", "r3"], ["f1", "f2"]]
    assert clusters[0].strength == 45
    assert clusters[1].strength == 35
    assert clusters[0].theme == "rocket & launch"
    assert clusters[0].common_keywords == ["rocket", "launch", "orbit"]


def test_records_claimed_at_most_once():
    records = [A, B, C, IdeaRecord(id="d", content="alpha bravo charlie delta golf")]
    clusters = build_clusters(records, threshold=0.2)
    seen = [rid for c in clusters for rid in c.record_ids]
    assert len(seen) == len(set(seen))
    assert all(len(c.ideas) >= 2 for c in clusters)


def test_deterministic():
    records = [B, A, C, IdeaRecord(id="d", content="golf hotel juliet")]
    first = build_clusters(records)
    second = build_clusters(records)
    assert _ids(first) == _ids(second)
    assert [c.theme for c in first] == [c.theme for c in second]


def test_cluster_ids_are_unique():
    records = [
        IdeaRecord(id="1", content="rocket launch orbit"),
        IdeaRecord(id="2", content="rocket launch orbit"),
        IdeaRecord(id="3", content="apple banana cherry"),
        IdeaRecord(id="4", content="apple banana cherry"),
    ]
    clusters = build_clusters(records)
    assert len({c.cluster_id for c in clusters}) == 2
    assert all(c.cluster_id.startswith("cluster-") for c in clusters)
