"""Sample one pixel of an image and identify its colour.

The positional argument is an image path (PNG/JPG/...). --point X,Y picks
the pixel; the default is the image centre, as a camera viewfinder would.
Reports the pixel's hex, nearest name and family. Only the single pixel is
read: there is no image-wide analysis.

Example:
    uv run swatch-tool sample frame.jpg
    uv run swatch-tool sample frame.jpg --point 120,48 --json
"""

from PIL import Image, UnidentifiedImageError

from swatch_kit.core.convert import rgb_to_hex
from swatch_kit.core.palette import get_color_family, get_color_name
from swatch_kit.core.types import Command, Report

command = Command(
    name='sample',
    help='Read one pixel of an image (default: centre) and name its colour.',
)


def parse_point(text: str) -> tuple[int, int]:
    """'12,34' -> (12, 34)."""
    x, _, y = text.partition(',')
    return int(x.strip()), int(y.strip())


def sample_pixel(image: Image.Image, point: tuple[int, int] | None = None) -> str:
    """Hex of the pixel at point (default centre). Raises IndexError outside the image."""
    rgb = image.convert('RGB')
    x, y = point if point is not None else (rgb.width // 2, rgb.height // 2)
    if not (0 <= x < rgb.width and 0 <= y < rgb.height):
        raise IndexError(f'point ({x}, {y}) outside {rgb.width}×{rgb.height} image')
    r, g, b = rgb.getpixel((x, y))
    return rgb_to_hex(r, g, b)


@command.run
def run(colour: str, report: Report, args) -> None:
    point_arg = getattr(args, 'point', None)
    try:
        point = parse_point(point_arg) if point_arg else None
    except ValueError:
        report.add('sample', {'error': f'--point expects X,Y, got {point_arg!r}'})
        return

    try:
        image = Image.open(colour)
    except (UnidentifiedImageError, OSError) as e:
        report.add('sample', {'error': f'cannot read image: {e}'})
        return

    with image:
        try:
            hex_val = sample_pixel(image, point)
        except IndexError as e:
            report.add('sample', {'error': str(e)})
            return
        size = image.size

    report.add(
        'sample',
        {
            'image': colour,
            'size': list(size),
            'point': list(point) if point else [size[0] // 2, size[1] // 2],
            'hex': hex_val,
            'name': get_color_name(hex_val),
            'family': get_color_family(hex_val),
        },
    )
