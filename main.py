import logging
import colorlog
import argparse
import json
import sys
from typing import List, Tuple
from maths.curves import CurveConfig, CurveError, SliderCurve, bounds_of

handler = colorlog.StreamHandler()
handler.setFormatter(colorlog.ColoredFormatter(
    '%(blue)s[%(asctime)s]%(reset)s %(log_color)s[%(levelname)s]%(reset)s %(purple)s[%(filename)s:%(lineno)d]%(reset)s: %(message)s',
    datefmt='%H:%M:%S',
    log_colors={
        'DEBUG': 'cyan',
        'INFO': 'green',
        'WARNING': 'yellow',
        'ERROR': 'red',
        'CRITICAL': 'red,bg_white',
    },
    secondary_log_colors={
        'message': {
            'DEBUG': 'cyan',
            'INFO': 'green',
            'WARNING': 'yellow',
            'ERROR': 'red',
            'CRITICAL': 'red',
        }
    },
    style='%'
))

logger = logging.getLogger()
logger.setLevel(logging.INFO)
logger.handlers = [handler]


def parse_points(text: str) -> List[Tuple[float, float]]:
    """Parse anchor points written the way slider lines store them: x:y|x:y|..."""
    points = []
    for part in text.split('|'):
        if not part:
            continue
        coords = part.split(':')
        if len(coords) != 2:
            raise ValueError(f"Invalid anchor point: {part}")
        points.append((float(coords[0]), float(coords[1])))
    return points


def format_points(points, as_json: bool = False) -> str:
    if as_json:
        return json.dumps([[float(x), float(y)] for x, y in points])
    return "\n".join(f"{x:.3f},{y:.3f}" for x, y in points)


def build_curve(args) -> SliderCurve:
    config = CurveConfig(tolerance=args.tolerance, max_depth=args.max_depth)
    points = parse_points(args.points)
    logging.info(f"Building slider curve from {len(points)} anchor points")
    return SliderCurve(points, args.length, config=config)


def run_centre(args) -> str:
    curve = build_curve(args)
    points = curve.flatten_centre_points()
    logging.info(f"Centre line has {len(points)} points, geometric length {curve.get_geometric_length():.2f}")
    return format_points(points, args.json)


def run_contour(args) -> str:
    curve = build_curve(args)
    points = curve.flatten_contour_points(args.radius)
    logging.info(f"Contour at radius {args.radius} has {len(points)} points")
    return format_points(points, args.json)


def run_bounds(args) -> str:
    curve = build_curve(args)
    boxes = [bounds_of(bezier) for bezier in curve.beziers]
    if args.json:
        return json.dumps([[b.min_x, b.min_y, b.max_x, b.max_y] for b in boxes])
    return "\n".join(f"{b.min_x:.3f},{b.min_y:.3f},{b.max_x:.3f},{b.max_y:.3f}" for b in boxes)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Slider path geometry: flatten, outline and bound slider curves')
    parser.add_argument('--verbose', action='store_true', help='Log debug output from the geometry engine')
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    def add_curve_args(sub):
        sub.add_argument('--points', required=True, help='Anchor points as x:y|x:y|..., repeat a point to break segments')
        sub.add_argument('--length', type=float, default=1.0, help='Authored slider length')
        sub.add_argument('--tolerance', type=float, default=1.0, help='Flattening tolerance in playfield units')
        sub.add_argument('--max-depth', type=int, default=32, help='Maximum subdivision depth')
        sub.add_argument('--json', action='store_true', help='Print a JSON array instead of one point per line')

    centre_parser = subparsers.add_parser('centre', help='Flatten the centre line of a slider')
    add_curve_args(centre_parser)

    contour_parser = subparsers.add_parser('contour', help='Outline a slider body at a radius')
    add_curve_args(contour_parser)
    contour_parser.add_argument('--radius', type=float, required=True, help='Half width of the slider body')

    bounds_parser = subparsers.add_parser('bounds', help='Print the bounding box of each segment')
    add_curve_args(bounds_parser)

    return parser.parse_args(argv)


COMMANDS = {
    'centre': run_centre,
    'contour': run_contour,
    'bounds': run_bounds,
}


def main(argv=None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logger.setLevel(logging.DEBUG)

    command = COMMANDS.get(args.command)
    if command is None:
        logger.error("Please specify a command. Use --help for more information.")
        return 1

    try:
        print(command(args))
    except (CurveError, ValueError) as e:
        logging.error(f"{e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
