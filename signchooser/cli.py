"""Command-line interface for signchooser."""

import argparse
import sys
from pathlib import Path

from .batch import SignPhotoMgr
from .config import (
    SignConfig,
    CORNERS,
    DEFAULT_CORNER,
    DEFAULT_MARGIN,
    DEFAULT_SCALE_RATE,
    OUTPUT_PREFIX,
    OUTPUT_QUALITY,
)
from .drawer import SignDrawer
from .image_io import load_image, save_image


def build_config(args) -> SignConfig:
    return SignConfig(
        corner=args.corner,
        margin=args.margin,
        scale_rate=args.scale,
        scale_to_width=args.scale_to_width,
        auto_sign_color=args.auto_sign_color,
        auto_sign_scale=args.auto_sign_scale,
    )


def sign_command(args):
    """Run sign mode: sign every photo of a directory."""
    try:
        config = build_config(args)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    mgr = SignPhotoMgr(
        args.photos,
        args.signs,
        prefix=args.prefix,
        quality=args.quality,
        verbose=args.verbose,
    )

    try:
        summary = mgr.sign_all_photos(config)
    except OSError as e:
        print(f"Error: {e}")
        return 1

    print(f"\n✓ Signing complete")
    print(f"  Signs loaded: {len(mgr.drawer)}")
    print(f"  Photos signed: {summary['signed']}")
    print(f"  Skipped: {summary['skipped']}")
    if summary['failed']:
        print(f"  Failed to save: {summary['failed']}")
    print(f"  Total time: {summary['timing']['total']:.2f}s")

    return 0


def choose_command(args):
    """Run choose mode: report the best sign for one photo."""
    try:
        config = build_config(args)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    photo = load_image(args.photo)
    if photo is None:
        print(f"Error: Could not load photo: {args.photo}")
        return 1

    drawer = SignDrawer(verbose=args.verbose)
    try:
        drawer.load_library(args.signs)
    except OSError as e:
        print(f"Error: {e}")
        return 1

    result = drawer.sign_photo(photo, config)
    if not result['valid']:
        print(f"\n✗ No sign chosen: {result['warnings']}")
        return 1

    placement = result['placement']
    print(f"\nChosen sign: {result['sign']}")
    print(f"  Position: (x={placement.x0}, y={placement.y0})")
    print(f"  Size: {placement.w}x{placement.h}")
    print(f"  Scale: {placement.scale:.3f}")
    print(f"  Color distance: {result['distance']:.2f}")
    if result['reverse_color'] is not None:
        print(f"  Sign color: RGB{result['reverse_color'].rgb}")
    for warning in result['warnings']:
        print(f"  Warning: {warning}")

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        if not save_image(output_path, result['composite'], quality=args.quality):
            print(f"\n✗ Failed to save {output_path}")
            return 1
        print(f"  Saved to: {output_path}")

    return 0


def add_sign_options(parser):
    parser.add_argument('--signs', '-s', required=True, help='Sign library directory')
    parser.add_argument('--corner', default=DEFAULT_CORNER, choices=CORNERS, help='Where to anchor the sign')
    parser.add_argument('--margin', type=float, default=DEFAULT_MARGIN,
                        help='Margin as fraction of the photo\'s shorter edge')
    parser.add_argument('--scale', type=float, default=DEFAULT_SCALE_RATE, help='Fixed sign scale')
    parser.add_argument('--scale-to-width', type=float, default=None,
                        help='Scale signs to this fraction of photo width (overrides --scale)')
    parser.add_argument('--auto-sign-color', action='store_true',
                        help='Draw the sign in a color contrasting with its background')
    parser.add_argument('--auto-sign-scale', action='store_true',
                        help='Resample the sign to the placement scale before drawing')
    parser.add_argument('--quality', type=int, default=OUTPUT_QUALITY, help='JPEG/WebP output quality')
    parser.add_argument('--verbose', '-v', action='store_true', help='Verbose output')


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="signchooser - sign photos with the most visible sign from a library",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    # Sign command
    sign_parser = subparsers.add_parser('sign', help='Sign every photo in a directory')
    sign_parser.add_argument('--photos', '-p', required=True, help='Photo directory (outputs are written here)')
    sign_parser.add_argument('--prefix', default=OUTPUT_PREFIX, help='Output file name prefix')
    add_sign_options(sign_parser)

    # Choose command
    choose_parser = subparsers.add_parser('choose', help='Choose and draw the best sign for one photo')
    choose_parser.add_argument('--photo', '-i', required=True, help='Input photo path')
    choose_parser.add_argument('--output', '-o', default=None, help='Write the signed photo here')
    add_sign_options(choose_parser)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == 'sign':
        return sign_command(args)
    elif args.command == 'choose':
        return choose_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
