from datetime import date
from typing import Optional
from xml.sax.saxutils import escape

# (path, change frequency, priority)
SITEMAP_PAGES = [
    ("", "monthly", 1.0),
    ("/about", "monthly", 0.8),
    ("/faq", "monthly", 0.7),
    ("/contact", "monthly", 0.9),
]


def build_sitemap_xml(base_url: str, lastmod: Optional[date] = None) -> str:
    lastmod = lastmod or date.today()
    base_url = base_url.rstrip("/")

    entries = []
    for path, change_frequency, priority in SITEMAP_PAGES:
        entries.append(
            "  <url>\n"
            f"    <loc>{escape(base_url + path)}</loc>\n"
            f"    <lastmod>{lastmod.isoformat()}</lastmod>\n"
            f"    <changefreq>{change_frequency}</changefreq>\n"
            f"    <priority>{priority:.1f}</priority>\n"
            "  </url>"
        )

    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">\n'
        + "\n".join(entries)
        + "\n</urlset>\n"
    )
