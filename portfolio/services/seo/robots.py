"""robots.txt generation."""


def generate_robots_txt(sitemap_url: str) -> str:
    """Allow every crawler everywhere and point at the sitemap.

    Args:
        sitemap_url: Absolute URL of sitemap.xml

    Returns:
        robots.txt body
    """
    return "\n".join([
        "User-agent: *",
        "Allow: /",
        "",
        f"Sitemap: {sitemap_url}",
    ])
