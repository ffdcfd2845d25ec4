"""
QuadTree Image Studio
Variance-driven quadtree compression, edge detection and outlining
"""

import argparse
import logging
import sys
import warnings

warnings.filterwarnings('ignore', category=RuntimeWarning)

logger = logging.getLogger(__name__)

OUTPUT_FILENAME_SEPARATOR = '-'


def build_parser() -> argparse.ArgumentParser:
    from utils.test_images import DEMO_IMAGES

    parser = argparse.ArgumentParser(
        description="Quadtree image compression, edge detection and filtering")

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("-i", "--input", help="Input image (.ppm or any OpenCV format)")
    source.add_argument("--synthetic", choices=DEMO_IMAGES,
                        help="Use a generated test image instead of a file")

    parser.add_argument("-o", "--output", default="out",
                        help="Root name of the output file(s)")
    parser.add_argument("-c", "--compress", action="store_true",
                        help="Write one compressed image per compression level")
    parser.add_argument("-e", "--edges", action="store_true",
                        help="Write the edge-detected image")
    parser.add_argument("-x", "--random-neighbor", action="store_true",
                        help="Write the random-neighbor filtered image")
    parser.add_argument("-t", "--outline", action="store_true",
                        help="Outline the quadtree regions on every output")

    parser.add_argument("--threshold", type=float, default=None,
                        help="Detail threshold (mean squared error) for splitting")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the random-neighbor filter")
    parser.add_argument("--size", type=int, default=256,
                        help="Side of the synthetic image")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def output_path(root: str, suffix) -> str:
    from utils.constants import PPM_EXTENSION
    return f"{root}{OUTPUT_FILENAME_SEPARATOR}{suffix}{PPM_EXTENSION}"


def run(args: argparse.Namespace) -> None:
    from models.quadtree_params import QuadTreeParams
    from engines.pipeline import run_compression_sweep, run_edge_detection, run_random_neighbor
    from utils.image_io import load_image, save_image
    from utils.test_images import generate_demo_image

    if args.synthetic:
        print(f"Generating test image: {args.synthetic}")
        image = generate_demo_image(args.synthetic, args.size)
    else:
        print(f"Loading: {args.input}")
        image = load_image(args.input)

    print(f"Image: {image.shape[1]}x{image.shape[0]}")

    params = QuadTreeParams()
    if args.threshold is not None:
        params = QuadTreeParams(detail_threshold=args.threshold)

    if not (args.compress or args.edges or args.random_neighbor):
        print("Nothing to do: pass -c, -e and/or -x")
        return

    if args.compress:
        results = run_compression_sweep(image, params=params, outline=args.outline)
        print("\n=== Compression ===")
        print(f"{'#':>2}  {'target':>7}  {'level':>7}  {'leaves':>8}  {'PSNR':>8}  {'SSIM':>6}  file")
        for n, result in enumerate(results, start=1):
            path = output_path(args.output, n)
            save_image(result.compressed_image, path)
            print(f"{n:>2}  {result.target_level:>7.3f}  {result.compression_level:>7.4f}  "
                  f"{result.leaf_count:>8}  {result.psnr_rgb:>6.2f}dB  {result.ssim_rgb:>6.4f}  {path}")

    if args.edges:
        edges = run_edge_detection(image, params=params, outline=args.outline)
        path = output_path(args.output, "edges")
        save_image(edges, path)
        print(f"\nSaved edges: {path}")

    if args.random_neighbor:
        filtered = run_random_neighbor(image, params=params, outline=args.outline, seed=args.seed)
        path = output_path(args.output, "neighbor")
        save_image(filtered, path)
        print(f"\nSaved random neighbor: {path}")


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        run(args)
    except (ValueError, OSError) as e:
        logger.debug("Run failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
