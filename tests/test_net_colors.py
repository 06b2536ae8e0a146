from net_colors import color_for_id, rgba_for_region


def test_same_region_same_color():
    assert color_for_id(3) == color_for_id(3)
    assert color_for_id("core") == color_for_id("core")


def test_distinct_regions_get_distinct_colors():
    colors = [color_for_id(region) for region in range(8)]
    assert len(set(colors)) == len(colors)


def test_components_are_bytes():
    for region in (0, 1, 17, -4, "edge"):
        assert all(0 <= c <= 255 for c in color_for_id(region))


def test_rgba_uses_region_color_and_alpha():
    r, g, b, a = rgba_for_region(2)
    assert (r, g, b) == color_for_id(2)
    assert a == 178


def test_rgba_alpha_is_clamped():
    assert rgba_for_region(0, alpha=2.0)[3] == 255
    assert rgba_for_region(0, alpha=-1.0)[3] == 0
