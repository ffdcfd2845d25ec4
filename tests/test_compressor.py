"""Tests for mean-color compression."""

import numpy as np
from engines.quadtree import QuadTree
from utils.test_images import (
    generate_colored_checkerboard,
    generate_gradient,
    generate_outlier,
    generate_uniform,
)


def test_root_only_fills_mean_color():
    image = generate_outlier(4)
    tree = QuadTree(image)
    compressed = tree.compress()
    
    assert compressed.shape == image.shape
    assert compressed.dtype == np.uint8
    assert np.all(compressed == np.array([109, 93, 109], dtype=np.uint8))


def test_full_decomposition_reproduces_blocky_image():
    """Every leaf of a block checkerboard is one flat block."""
    image = generate_colored_checkerboard(64, block_size=8)
    tree = QuadTree(image)
    tree.divide()
    
    assert np.array_equal(tree.compress(), image)


def test_outlier_survives_full_decomposition():
    image = generate_outlier(4)
    tree = QuadTree(image)
    tree.divide()
    assert np.array_equal(tree.compress(), image)


def test_source_and_tree_unchanged():
    image = generate_gradient(32)
    before = image.copy()
    tree = QuadTree(image)
    tree.divide(0.05)
    nodes = tree.node_count
    
    compressed = tree.compress()
    
    assert compressed is not image
    assert np.array_equal(image, before)
    assert tree.node_count == nodes


def test_compress_is_idempotent():
    tree = QuadTree(generate_gradient(32))
    tree.divide(0.05)
    assert tree.compress().tobytes() == tree.compress().tobytes()


def test_finer_tree_compresses_closer_to_source():
    image = generate_gradient(64)
    tree = QuadTree(image)
    
    tree.divide(0.002)
    coarse_error = np.abs(tree.compress().astype(int) - image).sum()
    tree.divide(0.05)
    fine_error = np.abs(tree.compress().astype(int) - image).sum()
    
    assert fine_error < coarse_error


def test_uniform_compresses_to_itself():
    image = generate_uniform(16)
    tree = QuadTree(image)
    tree.divide()
    assert np.array_equal(tree.compress(), image)
