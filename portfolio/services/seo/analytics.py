"""Google Analytics 4 and Search Console snippets.

Analytics is consumed only as opaque script tags. Nothing is emitted when the
corresponding identifier is not configured.
"""
import json
from typing import Any

from portfolio.services.seo.formatting import escape_html, is_present
from portfolio.services.seo.models import AnalyticsConfig

GTAG_LOADER_URL = "https://www.googletagmanager.com/gtag/js?id={measurement_id}"


def _js_literal(value: Any) -> str:
    # JSON is valid JavaScript; "</" must not close the surrounding script tag.
    return json.dumps(value).replace("</", "<\\/")


def generate_analytics_script(config: AnalyticsConfig) -> str:
    """Generate the GA4 loader and privacy-friendly configuration script.

    IP anonymisation is always on, debug mode mirrors config.enable_debug and
    Do Not Track disables collection for the measurement ID.
    """
    if not is_present(config.google_analytics_id):
        return ""

    measurement_id = config.google_analytics_id.strip()
    loader_url = GTAG_LOADER_URL.format(measurement_id=measurement_id)
    debug_mode = "true" if config.enable_debug else "false"

    return f"""<!-- Google Analytics 4 -->
<script async src="{escape_html(loader_url)}"></script>
<script>
  window.dataLayer = window.dataLayer || [];
  function gtag(){{dataLayer.push(arguments);}}
  gtag('js', new Date());

  gtag('config', {_js_literal(measurement_id)}, {{
    'anonymize_ip': true,
    'cookie_flags': 'SameSite=None;Secure',
    'debug_mode': {debug_mode}
  }});

  if (navigator.doNotTrack === "1" || window.doNotTrack === "1") {{
    window[{_js_literal('ga-disable-' + measurement_id)}] = true;
  }}
</script>"""


def generate_search_console_tag(config: AnalyticsConfig) -> str:
    """Generate the Search Console ownership verification tag."""
    if not is_present(config.google_search_console_id):
        return ""
    token = config.google_search_console_id.strip()
    return f'<meta name="google-site-verification" content="{escape_html(token)}">'


def generate_analytics_init_code(config: AnalyticsConfig) -> str:
    """Generate the DOM-ready hook that starts client-side event tracking."""
    if not is_present(config.google_analytics_id):
        return ""

    client_config = _js_literal({
        "googleAnalyticsId": config.google_analytics_id.strip(),
        "googleSearchConsoleId": config.google_search_console_id,
        "enableDebug": config.enable_debug,
    })
    return f"""<script>
  if (document.readyState === 'loading') {{
    document.addEventListener('DOMContentLoaded', function() {{
      if (typeof initializeAnalytics === 'function') {{
        initializeAnalytics({client_config});
      }}
    }});
  }} else {{
    if (typeof initializeAnalytics === 'function') {{
      initializeAnalytics({client_config});
    }}
  }}
</script>"""
