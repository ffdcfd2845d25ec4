"""Tests for quadtree pipelines."""

import numpy as np
import pytest
from engines.pipeline import (
    prepare_image,
    run_compression_sweep,
    run_edge_detection,
    run_random_neighbor,
)
from utils.constants import COMPRESSION_LEVELS
from utils.test_images import generate_colored_checkerboard, generate_gradient, generate_uniform


def test_sweep_one_result_per_level():
    """Pixel checkerboard divides all the way down, so every target is reached."""
    image = generate_colored_checkerboard(32, block_size=1)
    results = run_compression_sweep(image)
    
    assert len(results) == len(COMPRESSION_LEVELS)
    for level, result in zip(COMPRESSION_LEVELS, results):
        assert result.target_level == level
        assert result.compression_level >= level
        assert result.compressed_image.shape == image.shape


def test_sweep_levels_non_decreasing():
    results = run_compression_sweep(generate_gradient(64))
    levels = [r.compression_level for r in results]
    assert levels == sorted(levels)


def test_sweep_quality_improves():
    results = run_compression_sweep(generate_gradient(64), levels=(0.002, 0.05))
    assert results[1].psnr_rgb > results[0].psnr_rgb


def test_sweep_rejects_decreasing_levels():
    with pytest.raises(ValueError):
        run_compression_sweep(generate_gradient(32), levels=(0.5, 0.1))


def test_sweep_pads_input():
    image = generate_gradient(64)[:20, :30]
    results = run_compression_sweep(image, levels=(0.01,))
    
    assert results[0].compressed_image.shape == (32, 32, 3)
    assert (results[0].original_image[20:, :] == 255).all()


def test_sweep_outline_leaves_metrics_and_source():
    image = generate_gradient(64)
    before = image.copy()
    plain = run_compression_sweep(image, levels=(0.01,))[0]
    outlined = run_compression_sweep(image, levels=(0.01,), outline=True)[0]
    
    assert outlined.psnr_rgb == plain.psnr_rgb
    assert not np.array_equal(outlined.compressed_image, plain.compressed_image)
    assert (outlined.compressed_image[0, 0] == [255, 0, 0]).all()
    assert np.array_equal(outlined.original_image, image)
    assert np.array_equal(image, before)


def test_edge_detection_uniform_is_black():
    edges = run_edge_detection(generate_uniform(32))
    assert edges.shape == (32, 32, 3)
    assert not edges.any()


def test_edge_detection_does_not_touch_input():
    image = generate_colored_checkerboard(16, block_size=4)
    before = image.copy()
    edges = run_edge_detection(image)
    
    assert np.array_equal(image, before)
    assert (edges == 255).any()


def test_random_neighbor_outline():
    image = generate_gradient(32)
    filtered = run_random_neighbor(image, outline=True, seed=0)
    assert (filtered[0, :] == [255, 0, 0]).all()


def test_random_neighbor_seeded():
    image = generate_gradient(32)
    assert np.array_equal(run_random_neighbor(image, seed=5), run_random_neighbor(image, seed=5))


def test_prepare_image_copies():
    image = generate_uniform(8)
    prepared = prepare_image(image)
    assert prepared is not image
    assert np.array_equal(prepared, image)
