import json

# Schema.org LocalBusiness block embedded in every page head.
# Directory listings match on these values, keep them byte-exact.
JSON_LD = {
    "@context": "https://schema.org",
    "@type": "LocalBusiness",
    "name": "Casa Colina Care",
    "description": "Compassionate care home in Hawaii Kai, Hawaii",
    "url": "https://casacolinacare.com",
    "telephone": "+18082001840",
    "faxNumber": "+18086701163",
    "email": "kriss@casacolinacare.com",
    "address": {
        "@type": "PostalAddress",
        "streetAddress": "189 Anapalau Street",
        "addressLocality": "Honolulu",
        "addressRegion": "HI",
        "postalCode": "96825",
        "addressCountry": "US",
    },
    "geo": {
        "@type": "GeoCoordinates",
        "latitude": "21.2793",
        "longitude": "-157.7192",
    },
    "openingHoursSpecification": [
        {
            "@type": "OpeningHoursSpecification",
            "dayOfWeek": ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"],
            "opens": "08:00",
            "closes": "18:00",
        }
    ],
    "areaServed": {
        "@type": "City",
        "name": "Hawaii Kai",
    },
    "priceRange": "$$",
}


def json_ld_script() -> str:
    """Render the block as a script tag for a page <head>."""
    payload = json.dumps(JSON_LD, ensure_ascii=False).replace("</", "<\\/")
    return f'<script type="application/ld+json">{payload}</script>'
