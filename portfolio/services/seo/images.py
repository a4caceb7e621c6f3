"""Responsive image markup with WebP sources and lazy loading."""
from dataclasses import dataclass

from portfolio.services.seo.formatting import escape_html

VALID_LOADING_MODES = {"lazy", "eager"}


@dataclass(frozen=True)
class ResponsiveImageConfig:
    """Image markup options.

    Raises:
        ValueError: If loading is not "lazy" or "eager"
    """
    src: str
    alt: str
    sizes: str = "100vw"
    loading: str = "lazy"
    class_name: str = ""

    def __post_init__(self):
        if self.loading not in VALID_LOADING_MODES:
            raise ValueError(f"Invalid loading mode: {self.loading!r}")


def _split_extension(src: str):
    last_dot = src.rfind(".")
    # A dot inside a directory name is not an extension.
    if last_dot > 0 and "/" not in src[last_dot:]:
        return src[:last_dot], src[last_dot:]
    return src, ".jpg"


def generate_responsive_image(config: ResponsiveImageConfig) -> str:
    """Generate a <picture> with a WebP source, the original format and an <img> fallback."""
    base_path, extension = _split_extension(config.src)
    webp_src = f"{base_path}.webp"

    src = escape_html(config.src)
    sizes = escape_html(config.sizes)
    srcset = f"{src} 1x, {src} 2x"
    webp_srcset = f"{escape_html(webp_src)} 1x, {escape_html(webp_src)} 2x"
    image_type = escape_html(extension[1:].lower())

    return f"""<picture>
  <source type="image/webp" srcset="{webp_srcset}" sizes="{sizes}">
  <source type="image/{image_type}" srcset="{srcset}" sizes="{sizes}">
  <img src="{src}" alt="{escape_html(config.alt)}" loading="{config.loading}" class="{escape_html(config.class_name)}">
</picture>"""


def generate_optimized_img(config: ResponsiveImageConfig) -> str:
    """Generate a single <img> tag for cases that need no <picture>."""
    return (
        f'<img src="{escape_html(config.src)}" alt="{escape_html(config.alt)}" '
        f'loading="{config.loading}" class="{escape_html(config.class_name)}">'
    )
