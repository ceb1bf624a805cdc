from algokit.geometry import Point2D, convex_hull, cross, dot


def test_point_arithmetic():
    a = Point2D(1, 2)
    b = Point2D(3, 5)
    assert a + b == Point2D(4, 7)
    assert b - a == Point2D(2, 3)
    assert dot(a, b) == 13
    assert cross(a, b) == -1
    assert cross(b, a) == 1


def test_empty():
    assert convex_hull([]) == []


def test_single_point():
    assert convex_hull([Point2D(1, 1)]) == [Point2D(1, 1)]


def test_duplicate_point():
    assert convex_hull([Point2D(1, 1), Point2D(1, 1)]) == [Point2D(1, 1)]


def test_collinear():
    hull = convex_hull([Point2D(1, 1), Point2D(3, 1), Point2D(2, 1)])
    assert hull == [Point2D(1, 1), Point2D(3, 1)]


def test_triangle():
    hull = convex_hull([Point2D(1, 1), Point2D(3, 1), Point2D(2, 2)])
    assert hull == [Point2D(1, 1), Point2D(3, 1), Point2D(2, 2)]


def test_diamond_with_interior_point():
    points = [Point2D(1, 1), Point2D(2, 2), Point2D(2, 0), Point2D(2, 4), Point2D(4, 2)]
    assert convex_hull(points) == [Point2D(1, 1), Point2D(2, 0), Point2D(4, 2), Point2D(2, 4)]


def test_hull_is_counterclockwise_and_contains_all_points():
    points = [Point2D(x, y) for x in range(-3, 4) for y in range(-2, 3)]
    hull = convex_hull(points)
    n = len(hull)
    for i in range(n):
        a, b = hull[i], hull[(i + 1) % n]
        for p in points:
            assert cross(b - a, p - a) >= 0