def pinpoly(vertx, verty, testx, testy):
    """Even-odd crossing test for a closed polygon given as coordinate lists.

    A horizontal ray is cast towards +x; edges count as crossing when one
    endpoint lies strictly above testy and the other does not.
    """
    nvert = len(vertx)
    c = False
    j = nvert - 1
    for i in range(nvert):
        if (verty[i] > testy) != (verty[j] > testy) and testx < (
            vertx[j] - vertx[i]
        ) * (testy - verty[i]) / (verty[j] - verty[i]) + vertx[i]:
            c = not c
        j = i
    return c


def contains(vertices, point):
    """True when `point` (x, y) is inside the polygon of (x, y) `vertices`."""
    vertx = [v[0] for v in vertices]
    verty = [v[1] for v in vertices]
    return pinpoly(vertx, verty, point[0], point[1])
