"""Tests for region outlining."""

import numpy as np
from engines.quadtree import QuadTree
from models.quadtree_params import QuadTreeParams
from utils.test_images import generate_outlier, generate_uniform


def _is_red(image):
    return np.all(image == np.array([255, 0, 0]), axis=2)


def test_root_border_only():
    image = generate_uniform(4, (10, 20, 30))
    tree = QuadTree(image)
    tree.outline()
    red = _is_red(image)
    
    assert red[0, :].all() and red[-1, :].all()
    assert red[:, 0].all() and red[:, -1].all()
    assert not red[1:3, 1:3].any()
    assert (image[1:3, 1:3] == [10, 20, 30]).all()


def test_outlines_every_region():
    """Flat 4x4 quadrants keep their 2x2 centers; dividing lines are drawn."""
    image = generate_outlier(8)
    tree = QuadTree(image)
    tree.divide()
    tree.outline()
    red = _is_red(image)
    
    assert red[3, :].all() and red[4, :].all()
    assert red[:, 3].all() and red[:, 4].all()
    assert not red[5:7, 5:7].any()
    assert not red[1:3, 5:7].any()
    assert red[0:4, 0:4].all()


def test_subtree_outline():
    image = generate_outlier(8)
    tree = QuadTree(image)
    tree.divide()
    tree.outline(tree.root.se)
    red = _is_red(image)
    
    assert red[4:8, 4].all()
    assert not red[0:4, :].any()


def test_custom_color_on_rebound_buffer():
    source = generate_uniform(4)
    overlay = generate_uniform(4)
    tree = QuadTree(source, QuadTreeParams(outline_color=(0, 255, 0)))
    
    tree.rebind(overlay)
    tree.outline()
    
    assert (overlay[0, 0] == [0, 255, 0]).all()
    assert np.array_equal(source, generate_uniform(4))
