from PIL import Image

from identicon.constants import IMAGE_FORMAT, IMAGE_SIZE
from identicon.state import ImageState
from identicon.utils.image import canvas_to_image, encode_image, fill_box, new_canvas


def render_image(state: ImageState) -> Image.Image:
    """
    Paint every tile of ``state.pixel_map`` in ``state.color`` on a
    transparent IMAGE_SIZE x IMAGE_SIZE canvas.
    Fails fast if the state has no color.
    """
    if state.color is None:
        raise ValueError("State has no color to render with")
    canvas = new_canvas(IMAGE_SIZE, IMAGE_SIZE)
    for rect in state.pixel_map:
        fill_box(canvas, rect.as_box(), state.color)
    return canvas_to_image(canvas)


def render(state: ImageState, image_format: str = IMAGE_FORMAT) -> bytes:
    """
    Render ``state`` and return the encoded image bytes.
    """
    return encode_image(render_image(state), image_format)
