"""Personal portfolio site with server-rendered SEO metadata."""
