from sc2kit.cluster import Point, Unit
from sc2kit.dbscan import DBSCAN


def make_db(points):
    db = DBSCAN()
    for tag, (x, y) in enumerate(points, start=1):
        db.units[tag] = Unit(tag=tag, pos=Point(x, y))
    return db


def test_empty_has_no_clusters():
    clusters, outliers = DBSCAN().cluster(2, 1.0)
    assert clusters == []
    assert outliers == []


def test_dense_group_and_outlier():
    db = make_db([(0, 0), (1, 0), (0, 1), (50, 50)])
    clusters, outliers = db.cluster(2, 1.5)
    assert len(clusters) == 1
    assert sorted(u.tag for u in clusters[0].units()) == [1, 2, 3]
    assert [u.tag for u in outliers] == [4]


def test_min_pts_one_clusters_everything():
    db = make_db([(0, 0), (1, 0), (50, 50)])
    clusters, outliers = db.cluster(1, 1.5)
    assert outliers == []
    assert sorted(c.count() for c in clusters) == [1, 2]


def test_chain_is_expanded_transitively():
    db = make_db([(float(i), 0.0) for i in range(10)])
    clusters, outliers = db.cluster(2, 1.0)
    assert len(clusters) == 1
    assert clusters[0].count() == 10
    assert outliers == []


def test_each_unit_in_at_most_one_cluster():
    db = make_db([(0, 0), (0.5, 0), (1, 0), (10, 10), (10.5, 10), (30, 30)])
    clusters, _ = db.cluster(2, 1.0)
    tags = [u.tag for c in clusters for u in c.units()]
    assert len(tags) == len(set(tags))
    assert len(clusters) == 2


def test_repeated_calls_give_same_result():
    db = make_db([(0, 0), (1, 0), (5, 5), (5, 6), (40, 0)])
    first = db.cluster(2, 1.5)
    second = db.cluster(2, 1.5)
    assert [c.units() for c in first[0]] == [c.units() for c in second[0]]
    assert first[1] == second[1]


def test_too_sparse_all_outliers():
    db = make_db([(0, 0), (10, 0), (20, 0)])
    clusters, outliers = db.cluster(2, 1.0)
    assert clusters == []
    assert sorted(u.tag for u in outliers) == [1, 2, 3]